"""
Upload business logic service.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.models.upload import Upload
from gallery_admin.repositories.upload_repository import UploadRepository
from gallery_admin.schemas.upload import UploadCreate, UploadUpdate
from gallery_admin.services.list_actions import apply_move

logger = logging.getLogger(__name__)


class UploadService:
    """Service for upload business logic."""

    def __init__(self, db: AsyncSession):
        self.repository = UploadRepository(db)

    async def list_uploads(self, gallery_id: int) -> List[Upload]:
        """Uploads of a gallery in list order."""
        return await self.repository.list_for_gallery(gallery_id)

    async def get_upload(self, upload_id: int) -> Optional[Upload]:
        """Get an upload by ID."""
        return await self.repository.get_by_id(upload_id)

    async def create_upload(self, gallery_id: int, data: UploadCreate) -> Upload:
        """Create a new upload in a gallery."""
        upload = await self.repository.create(gallery_id, data)
        logger.info("Created %s upload %s in gallery %s at position %s", upload.kind, upload.id, gallery_id, upload.position)
        return upload

    async def update_upload(self, upload_id: int, data: UploadUpdate) -> Optional[Upload]:
        """Update an upload."""
        upload = await self.repository.get_by_id(upload_id)
        if not upload:
            return None
        return await self.repository.update(upload, data)

    async def delete_upload(self, upload_id: int) -> Optional[Upload]:
        """Delete an upload. Returns the deleted row, or None if it didn't exist."""
        upload = await self.repository.get_by_id(upload_id)
        if not upload:
            return None
        await self.repository.delete(upload)
        logger.info("Deleted upload %s from gallery %s", upload_id, upload.gallery_id)
        return upload

    async def move_upload(self, upload_id: int, direction: str) -> Optional[Tuple[Upload, bool]]:
        """Move an upload one step or to an end of its gallery."""
        upload = await self.repository.get_by_id(upload_id)
        if not upload:
            return None
        moved = await apply_move(self.repository.ordering, upload, direction)
        return upload, moved

    async def insert_upload_at(self, upload_id: int, position: int) -> Optional[Upload]:
        upload = await self.repository.get_by_id(upload_id)
        if not upload:
            return None
        await self.repository.ordering.insert_at(upload, position)
        return upload

    async def remove_upload_from_list(self, upload_id: int) -> Optional[Tuple[Upload, bool]]:
        upload = await self.repository.get_by_id(upload_id)
        if not upload:
            return None
        removed = await self.repository.ordering.remove_from_list(upload)
        return upload, removed

    async def reorder_uploads(self, gallery_id: int, ids: Sequence[Union[int, str]]) -> List[Upload]:
        """
        Put a gallery's uploads in the order given by ``ids``.

        Ids of uploads in other galleries are dropped before reordering, so
        the request can only ever touch this gallery.
        """
        own_ids = await self.repository.ids_for_gallery(gallery_id)
        config = self.repository.ordering.config
        scoped_ids = [raw for raw in ids if config.coerce_id(raw) in own_ids]
        if scoped_ids:
            await self.repository.ordering.reorder_by_ids(scoped_ids)
        else:
            logger.info("Reorder of gallery %s ignored: no ids belong to it", gallery_id)
        return await self.repository.list_for_gallery(gallery_id)
