"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also makes it easy to import models from one place.
"""

from gallery_admin.models.page import Page, PAGE_LIST
from gallery_admin.models.gallery import Gallery
from gallery_admin.models.upload import Upload, UPLOAD_LIST

# Export all models
__all__ = [
    "Page",
    "Gallery",
    "Upload",
    "PAGE_LIST",
    "UPLOAD_LIST",
]
