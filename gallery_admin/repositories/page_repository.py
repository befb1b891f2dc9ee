"""
Page repository - database operations for Page.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.models.gallery import Gallery
from gallery_admin.models.page import Page, PAGE_LIST
from gallery_admin.ordering import OrderedList
from gallery_admin.schemas.page import PageCreate, PageUpdate


class PageRepository:
    """Repository for Page database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.ordering = OrderedList(db, PAGE_LIST)

    async def list_children(self, parent_id: Optional[int] = None) -> List[Page]:
        """Pages under ``parent_id`` in list order; root pages when it is None."""
        query = select(Page).where(
            Page.parent_id.is_(None) if parent_id is None else Page.parent_id == parent_id
        )
        query = query.order_by(Page.position.asc().nulls_last(), Page.id.asc())
        query = query.execution_options(populate_existing=True)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_roots(self) -> List[Page]:
        return await self.list_children(None)

    async def has_children(self, page_id: int) -> bool:
        result = await self.db.execute(
            select(Page.id).where(Page.parent_id == page_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def has_galleries(self, page_id: int) -> bool:
        result = await self.db.execute(
            select(Gallery.id).where(Gallery.page_id == page_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def get_by_id(self, page_id: int) -> Optional[Page]:
        """Get a page by ID."""
        return await self.db.get(Page, page_id, populate_existing=True)

    async def create(self, data: PageCreate) -> Page:
        """
        Create a new page at the bottom of its parent's list.

        A requested position is reached with insert_at, so siblings at and
        below it shift down.
        """
        values = data.model_dump()
        position = values.pop("position", None)
        page = Page(**values)
        async with self.ordering.store.transaction():
            await self.ordering.on_create(page)
            if position is not None:
                await self.ordering.insert_at(page, position)
        await self.db.refresh(page)
        return page

    async def update(self, page: Page, data: PageUpdate) -> Page:
        """
        Update a page.

        Moving a page to another parent takes it out of the old list and
        appends it to the new one.
        """
        update_data = data.model_dump(exclude_unset=True)
        new_parent = update_data.pop("parent_id", page.parent_id)

        async with self.ordering.store.transaction():
            for field, value in update_data.items():
                setattr(page, field, value)

            if new_parent != page.parent_id:
                await self.ordering.remove_from_list(page)
                page.parent_id = new_parent
                await self.db.flush()
                await self.ordering.insert_at(page, await self.ordering.bottom_position(page) + 1)
            else:
                await self.db.flush()

        await self.db.refresh(page)
        return page

    async def delete(self, page: Page) -> None:
        """Delete a page, closing the gap in its parent's list."""
        await self.ordering.on_destroy(page)
