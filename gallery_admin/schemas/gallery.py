"""
Pydantic schemas for Gallery.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from gallery_admin.schemas.base import RecordRead
from gallery_admin.schemas.upload import UploadRead


class GalleryCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    page_id: Optional[int] = None


class GalleryUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    page_id: Optional[int] = None


class GalleryRead(RecordRead):
    title: str
    description: Optional[str] = None
    page_id: Optional[int] = None


class GalleryDetail(GalleryRead):
    uploads: List[UploadRead] = []
