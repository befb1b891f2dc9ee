"""
Page business logic service.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.errors import raise_app_error
from gallery_admin.models.page import Page
from gallery_admin.repositories.page_repository import PageRepository
from gallery_admin.schemas.page import PageCreate, PageUpdate
from gallery_admin.services.list_actions import apply_move

logger = logging.getLogger(__name__)


class PageService:
    """Service for page business logic."""

    def __init__(self, db: AsyncSession):
        self.repository = PageRepository(db)

    async def list_pages(self, parent_id: Optional[int] = None) -> List[Page]:
        """Root pages, or the children of ``parent_id``, in list order."""
        return await self.repository.list_children(parent_id)

    async def get_page(self, page_id: int) -> Optional[Page]:
        """Get a page by ID."""
        return await self.repository.get_by_id(page_id)

    async def _check_parent(self, parent_id: Optional[int], page_id: Optional[int] = None) -> None:
        if parent_id is None:
            return
        if parent_id == page_id:
            raise_app_error(422, "invalid_parent", "A page cannot be its own parent", {"page_id": page_id})
        if await self.repository.get_by_id(parent_id) is None:
            raise_app_error(422, "invalid_parent", f"Parent page {parent_id} not found", {"parent_id": parent_id})

    async def create_page(self, data: PageCreate) -> Page:
        """Create a new page."""
        await self._check_parent(data.parent_id)
        page = await self.repository.create(data)
        logger.info("Created page %s under parent %s at position %s", page.id, page.parent_id, page.position)
        return page

    async def update_page(self, page_id: int, data: PageUpdate) -> Optional[Page]:
        """Update a page."""
        page = await self.repository.get_by_id(page_id)
        if not page:
            return None
        if "parent_id" in data.model_fields_set:
            await self._check_parent(data.parent_id, page_id)
        return await self.repository.update(page, data)

    async def delete_page(self, page_id: int) -> bool:
        """Delete a page. Pages that still have subpages or galleries are refused."""
        page = await self.repository.get_by_id(page_id)
        if not page:
            return False
        if await self.repository.has_children(page_id):
            raise_app_error(409, "page_has_children", f"Page {page_id} still has subpages", {"page_id": page_id})
        if await self.repository.has_galleries(page_id):
            raise_app_error(409, "page_has_galleries", f"Page {page_id} still has galleries", {"page_id": page_id})
        await self.repository.delete(page)
        logger.info("Deleted page %s", page_id)
        return True

    async def move_page(self, page_id: int, direction: str) -> Optional[Tuple[Page, bool]]:
        """Move a page one step or to an end of its list."""
        page = await self.repository.get_by_id(page_id)
        if not page:
            return None
        moved = await apply_move(self.repository.ordering, page, direction)
        return page, moved

    async def insert_page_at(self, page_id: int, position: int) -> Optional[Page]:
        page = await self.repository.get_by_id(page_id)
        if not page:
            return None
        await self.repository.ordering.insert_at(page, position)
        return page

    async def remove_page_from_list(self, page_id: int) -> Optional[Tuple[Page, bool]]:
        page = await self.repository.get_by_id(page_id)
        if not page:
            return None
        removed = await self.repository.ordering.remove_from_list(page)
        return page, removed

    async def reorder_pages(self, ids: Sequence[Union[int, str]]) -> List[Page]:
        """Renumber the sibling list of the first page named in ``ids``."""
        ordered = await self.repository.ordering.reorder_by_ids(ids)
        if not ordered:
            return []
        return await self.repository.list_children(ordered[0].parent_id)
