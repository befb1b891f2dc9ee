"""
Gallery model.

A named photo gallery, optionally attached to an event page.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery_admin.models.base_model import TimestampedModel


class Gallery(TimestampedModel):
    """
    Gallery table - holds uploads, which are ordered per gallery.
    """

    __tablename__ = "galleries"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    page_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("pages.id"),
        nullable=True,
        index=True,
    )
