"""
Gallery business logic service.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.models.gallery import Gallery
from gallery_admin.repositories.gallery_repository import GalleryRepository
from gallery_admin.repositories.page_repository import PageRepository
from gallery_admin.errors import raise_app_error
from gallery_admin.schemas.gallery import GalleryCreate, GalleryUpdate

logger = logging.getLogger(__name__)


class GalleryService:
    """Service for gallery business logic."""

    def __init__(self, db: AsyncSession):
        self.repository = GalleryRepository(db)
        self.pages = PageRepository(db)

    async def list_galleries(
        self,
        limit: int = 50,
        offset: int = 0,
        page_id: Optional[int] = None,
    ) -> List[Gallery]:
        """List galleries with filters."""
        return await self.repository.list(limit=limit, offset=offset, page_id=page_id)

    async def get_gallery(self, gallery_id: int) -> Optional[Gallery]:
        """Get a gallery by ID."""
        return await self.repository.get_by_id(gallery_id)

    async def _check_page(self, page_id: Optional[int]) -> None:
        if page_id is not None and await self.pages.get_by_id(page_id) is None:
            raise_app_error(422, "invalid_page", f"Page {page_id} not found", {"page_id": page_id})

    async def create_gallery(self, data: GalleryCreate) -> Gallery:
        """Create a new gallery."""
        await self._check_page(data.page_id)
        gallery = await self.repository.create(data)
        logger.info("Created gallery %s", gallery.id)
        return gallery

    async def update_gallery(self, gallery_id: int, data: GalleryUpdate) -> Optional[Gallery]:
        """Update a gallery."""
        gallery = await self.repository.get_by_id(gallery_id)
        if not gallery:
            return None
        if "page_id" in data.model_fields_set:
            await self._check_page(data.page_id)
        return await self.repository.update(gallery, data)

    async def delete_gallery(self, gallery_id: int) -> bool:
        """Delete a gallery and its uploads."""
        gallery = await self.repository.get_by_id(gallery_id)
        if not gallery:
            return False
        await self.repository.delete(gallery)
        logger.info("Deleted gallery %s", gallery_id)
        return True
