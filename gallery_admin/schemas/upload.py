"""
Pydantic schemas for Upload.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from gallery_admin.schemas.base import RecordRead


UploadKind = Literal["photo", "video", "document"]


class UploadCreate(BaseModel):
    kind: UploadKind = "photo"
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    position: Optional[int] = Field(None, ge=1)


class UploadUpdate(BaseModel):
    kind: Optional[UploadKind] = None
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None


class UploadRead(RecordRead):
    kind: str
    title: Optional[str] = None
    description: Optional[str] = None
    gallery_id: Optional[int] = None
    position: Optional[int] = None
