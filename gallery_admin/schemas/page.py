"""
Pydantic schemas for Page.
"""

from typing import Optional

from pydantic import BaseModel, Field

from gallery_admin.schemas.base import RecordRead


class PageCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    body: Optional[str] = None
    parent_id: Optional[int] = None
    position: Optional[int] = Field(None, ge=1)


class PageUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    body: Optional[str] = None
    parent_id: Optional[int] = None


class PageRead(RecordRead):
    title: str
    body: Optional[str] = None
    parent_id: Optional[int] = None
    position: Optional[int] = None
