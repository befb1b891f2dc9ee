"""
Upload model.

Represents one entry in a gallery. Different kinds of media share this
table and the same per-gallery list; ``kind`` is only a tag.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery_admin.models.base_model import TimestampedModel
from gallery_admin.ordering import ListConfig


class Upload(TimestampedModel):
    """
    Upload table - gallery entries ordered by position within a gallery.
    """

    __tablename__ = "uploads"

    kind: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="photo",
    )

    title: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    gallery_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("galleries.id"),
        nullable=True,
        index=True,
    )

    position: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )


UPLOAD_LIST = ListConfig(Upload, scope="gallery")
