"""
Schemas package.

Import all schemas here for easy access.
"""

from gallery_admin.schemas.page import PageCreate, PageUpdate, PageRead
from gallery_admin.schemas.gallery import GalleryCreate, GalleryUpdate, GalleryRead, GalleryDetail
from gallery_admin.schemas.upload import UploadCreate, UploadUpdate, UploadRead
from gallery_admin.schemas.ordering import InsertAtRequest, MoveRequest, MoveResult, ReorderRequest

__all__ = [
    "PageCreate",
    "PageUpdate",
    "PageRead",
    "GalleryCreate",
    "GalleryUpdate",
    "GalleryRead",
    "GalleryDetail",
    "UploadCreate",
    "UploadUpdate",
    "UploadRead",
    "InsertAtRequest",
    "MoveRequest",
    "MoveResult",
    "ReorderRequest",
]
