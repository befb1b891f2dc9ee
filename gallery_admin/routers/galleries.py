"""
Gallery router - admin API endpoints for galleries and their uploads.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.db.session import get_db
from gallery_admin.schemas.gallery import GalleryCreate, GalleryDetail, GalleryRead, GalleryUpdate
from gallery_admin.schemas.ordering import ReorderRequest
from gallery_admin.schemas.upload import UploadCreate, UploadRead
from gallery_admin.services.gallery_service import GalleryService
from gallery_admin.services.upload_service import UploadService

router = APIRouter(prefix="/admin/galleries", tags=["galleries"])


def _not_found(gallery_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Gallery {gallery_id} not found"
    )


@router.get("", response_model=List[GalleryRead])
async def list_galleries(
    db: AsyncSession = Depends(get_db),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    page_id: Optional[int] = None,
):
    """List galleries with pagination, optionally for one event page."""
    service = GalleryService(db)
    return await service.list_galleries(limit=limit, offset=offset, page_id=page_id)


@router.get("/{gallery_id}", response_model=GalleryDetail)
async def get_gallery(
    gallery_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a gallery with its uploads in list order."""
    gallery = await GalleryService(db).get_gallery(gallery_id)

    if not gallery:
        raise _not_found(gallery_id)

    uploads = await UploadService(db).list_uploads(gallery_id)
    detail = GalleryDetail.model_validate(gallery)
    detail.uploads = [UploadRead.model_validate(upload) for upload in uploads]
    return detail


@router.post("", response_model=GalleryRead, status_code=status.HTTP_201_CREATED)
async def create_gallery(
    data: GalleryCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new gallery."""
    service = GalleryService(db)
    gallery = await service.create_gallery(data)
    await db.commit()
    return gallery


@router.put("/{gallery_id}", response_model=GalleryRead)
async def update_gallery(
    gallery_id: int,
    data: GalleryUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a gallery."""
    service = GalleryService(db)
    gallery = await service.update_gallery(gallery_id, data)

    if not gallery:
        raise _not_found(gallery_id)

    await db.commit()
    return gallery


@router.delete("/{gallery_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gallery(
    gallery_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a gallery and all of its uploads."""
    service = GalleryService(db)
    if not await service.delete_gallery(gallery_id):
        raise _not_found(gallery_id)

    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{gallery_id}/uploads", response_model=List[UploadRead])
async def list_gallery_uploads(
    gallery_id: int,
    db: AsyncSession = Depends(get_db),
):
    """List a gallery's uploads in list order."""
    if not await GalleryService(db).get_gallery(gallery_id):
        raise _not_found(gallery_id)

    return await UploadService(db).list_uploads(gallery_id)


@router.post("/{gallery_id}/uploads", response_model=UploadRead, status_code=status.HTTP_201_CREATED)
async def create_gallery_upload(
    gallery_id: int,
    data: UploadCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add an upload to the bottom of a gallery."""
    if not await GalleryService(db).get_gallery(gallery_id):
        raise _not_found(gallery_id)

    upload = await UploadService(db).create_upload(gallery_id, data)
    await db.commit()
    return upload


@router.post("/{gallery_id}/uploads/reorder", response_model=List[UploadRead])
async def reorder_gallery_uploads(
    gallery_id: int,
    data: ReorderRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Reorder a gallery's uploads.

    Uploads named in ``ids`` come first in that order; the rest keep their
    relative order after them. Unknown ids are ignored.
    """
    if not await GalleryService(db).get_gallery(gallery_id):
        raise _not_found(gallery_id)

    uploads = await UploadService(db).reorder_uploads(gallery_id, data.ids)
    await db.commit()
    return uploads
