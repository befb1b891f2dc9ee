"""
Page router - admin API endpoints for static pages.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.db.session import get_db
from gallery_admin.schemas.ordering import InsertAtRequest, MoveRequest, MoveResult, ReorderRequest
from gallery_admin.schemas.page import PageCreate, PageRead, PageUpdate
from gallery_admin.services.page_service import PageService

router = APIRouter(prefix="/admin/pages", tags=["pages"])


def _not_found(page_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Page {page_id} not found"
    )


@router.get("", response_model=List[PageRead])
async def list_pages(
    parent_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
):
    """
    List pages in list order.

    Without ``parent_id`` the top-level pages are returned.
    """
    service = PageService(db)
    return await service.list_pages(parent_id)


@router.post("/reorder", response_model=List[PageRead])
async def reorder_pages(
    data: ReorderRequest,
    db: AsyncSession = Depends(get_db),
):
    """Renumber a sibling list to follow the given ids."""
    service = PageService(db)
    pages = await service.reorder_pages(data.ids)
    await db.commit()
    return pages


@router.get("/{page_id}", response_model=PageRead)
async def get_page(
    page_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a page by ID."""
    service = PageService(db)
    page = await service.get_page(page_id)

    if not page:
        raise _not_found(page_id)

    return page


@router.post("", response_model=PageRead, status_code=status.HTTP_201_CREATED)
async def create_page(
    data: PageCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new page at the bottom of its parent's list."""
    service = PageService(db)
    page = await service.create_page(data)
    await db.commit()
    return page


@router.put("/{page_id}", response_model=PageRead)
async def update_page(
    page_id: int,
    data: PageUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a page."""
    service = PageService(db)
    page = await service.update_page(page_id, data)

    if not page:
        raise _not_found(page_id)

    await db.commit()
    return page


@router.delete("/{page_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_page(
    page_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a page."""
    service = PageService(db)
    if not await service.delete_page(page_id):
        raise _not_found(page_id)

    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{page_id}/move", response_model=MoveResult)
async def move_page(
    page_id: int,
    data: MoveRequest,
    db: AsyncSession = Depends(get_db),
):
    """Move a page higher, lower, to the top or to the bottom of its list."""
    service = PageService(db)
    result = await service.move_page(page_id, data.direction)

    if result is None:
        raise _not_found(page_id)

    await db.commit()
    page, moved = result
    return MoveResult(moved=moved, position=page.position)


@router.post("/{page_id}/insert_at", response_model=PageRead)
async def insert_page_at(
    page_id: int,
    data: InsertAtRequest,
    db: AsyncSession = Depends(get_db),
):
    """Place a page at a given position, shifting the pages below it."""
    service = PageService(db)
    page = await service.insert_page_at(page_id, data.position)

    if not page:
        raise _not_found(page_id)

    await db.commit()
    return page


@router.post("/{page_id}/remove_from_list", response_model=MoveResult)
async def remove_page_from_list(
    page_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Take a page out of its list without deleting it."""
    service = PageService(db)
    result = await service.remove_page_from_list(page_id)

    if result is None:
        raise _not_found(page_id)

    await db.commit()
    page, removed = result
    return MoveResult(moved=removed, position=page.position)
