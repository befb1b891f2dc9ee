"""
Upload repository - database operations for Upload.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.models.upload import Upload, UPLOAD_LIST
from gallery_admin.ordering import OrderedList
from gallery_admin.schemas.upload import UploadCreate, UploadUpdate


class UploadRepository:
    """Repository for Upload database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.ordering = OrderedList(db, UPLOAD_LIST)

    async def list_for_gallery(self, gallery_id: int) -> List[Upload]:
        """Uploads of a gallery in list order; removed-from-list uploads last."""
        query = (
            select(Upload)
            .where(Upload.gallery_id == gallery_id)
            .order_by(Upload.position.asc().nulls_last(), Upload.id.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def ids_for_gallery(self, gallery_id: int) -> set:
        result = await self.db.execute(select(Upload.id).where(Upload.gallery_id == gallery_id))
        return set(result.scalars().all())

    async def get_by_id(self, upload_id: int) -> Optional[Upload]:
        """Get an upload by ID."""
        return await self.db.get(Upload, upload_id, populate_existing=True)

    async def create(self, gallery_id: int, data: UploadCreate) -> Upload:
        """Create a new upload at the bottom of the gallery, then move it to ``data.position`` if given."""
        values = data.model_dump()
        position = values.pop("position", None)
        upload = Upload(gallery_id=gallery_id, **values)
        async with self.ordering.store.transaction():
            await self.ordering.on_create(upload)
            if position is not None:
                await self.ordering.insert_at(upload, position)
        await self.db.refresh(upload)
        return upload

    async def update(self, upload: Upload, data: UploadUpdate) -> Upload:
        """Update an upload's metadata; position changes go through the move actions."""
        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(upload, field, value)

        await self.db.flush()
        await self.db.refresh(upload)
        return upload

    async def delete(self, upload: Upload) -> None:
        """Delete an upload, closing the gap in its gallery."""
        await self.ordering.on_destroy(upload)
