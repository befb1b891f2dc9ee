"""
Page model.

Represents a static content page. Pages form a tree through parent_id;
the children of one parent are an ordered list.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery_admin.models.base_model import TimestampedModel
from gallery_admin.ordering import ListConfig


class Page(TimestampedModel):
    """
    Page table - static pages and event pages.
    """

    __tablename__ = "pages"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    body: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    # Root pages have no parent and share one list
    parent_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("pages.id"),
        nullable=True,
        index=True,
    )

    position: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )


PAGE_LIST = ListConfig(Page, scope="parent")
