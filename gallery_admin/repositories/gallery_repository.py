"""
Gallery repository - database operations for Gallery.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.models.gallery import Gallery
from gallery_admin.models.upload import Upload
from gallery_admin.schemas.gallery import GalleryCreate, GalleryUpdate


class GalleryRepository:
    """Repository for Gallery database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(
        self,
        limit: int = 50,
        offset: int = 0,
        page_id: Optional[int] = None,
    ) -> List[Gallery]:
        """List galleries, newest first."""
        query = select(Gallery)

        if page_id is not None:
            query = query.where(Gallery.page_id == page_id)

        query = query.order_by(Gallery.created_at.desc(), Gallery.id.desc()).limit(limit).offset(offset)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, gallery_id: int) -> Optional[Gallery]:
        """Get a gallery by ID."""
        return await self.db.get(Gallery, gallery_id)

    async def create(self, data: GalleryCreate) -> Gallery:
        """Create a new gallery."""
        gallery = Gallery(**data.model_dump())
        self.db.add(gallery)
        await self.db.flush()
        await self.db.refresh(gallery)
        return gallery

    async def update(self, gallery: Gallery, data: GalleryUpdate) -> Gallery:
        """Update a gallery."""
        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(gallery, field, value)

        await self.db.flush()
        await self.db.refresh(gallery)
        return gallery

    async def delete(self, gallery: Gallery) -> None:
        """Delete a gallery together with its uploads."""
        await self.db.execute(
            delete(Upload)
            .where(Upload.gallery_id == gallery.id)
            .execution_options(synchronize_session="fetch")
        )
        await self.db.delete(gallery)
        await self.db.flush()
