"""
Upload router - admin API endpoints for single uploads.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.db.session import get_db
from gallery_admin.schemas.ordering import InsertAtRequest, MoveRequest, MoveResult
from gallery_admin.schemas.upload import UploadRead, UploadUpdate
from gallery_admin.services.upload_service import UploadService

router = APIRouter(prefix="/admin/uploads", tags=["uploads"])


def _not_found(upload_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Upload {upload_id} not found"
    )


@router.get("/{upload_id}", response_model=UploadRead)
async def get_upload(
    upload_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get an upload by ID."""
    upload = await UploadService(db).get_upload(upload_id)

    if not upload:
        raise _not_found(upload_id)

    return upload


@router.put("/{upload_id}", response_model=UploadRead)
async def update_upload(
    upload_id: int,
    data: UploadUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an upload's title, description or kind."""
    upload = await UploadService(db).update_upload(upload_id, data)

    if not upload:
        raise _not_found(upload_id)

    await db.commit()
    return upload


@router.delete("/{upload_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_upload(
    upload_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete an upload; the uploads below it move up."""
    if not await UploadService(db).delete_upload(upload_id):
        raise _not_found(upload_id)

    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{upload_id}/move", response_model=MoveResult)
async def move_upload(
    upload_id: int,
    data: MoveRequest,
    db: AsyncSession = Depends(get_db),
):
    """Move an upload higher, lower, to the top or to the bottom of its gallery."""
    result = await UploadService(db).move_upload(upload_id, data.direction)

    if result is None:
        raise _not_found(upload_id)

    await db.commit()
    upload, moved = result
    return MoveResult(moved=moved, position=upload.position)


@router.post("/{upload_id}/insert_at", response_model=UploadRead)
async def insert_upload_at(
    upload_id: int,
    data: InsertAtRequest,
    db: AsyncSession = Depends(get_db),
):
    """Place an upload at a given position in its gallery."""
    upload = await UploadService(db).insert_upload_at(upload_id, data.position)

    if not upload:
        raise _not_found(upload_id)

    await db.commit()
    return upload


@router.post("/{upload_id}/remove_from_list", response_model=MoveResult)
async def remove_upload_from_list(
    upload_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Take an upload out of its gallery's order without deleting it."""
    result = await UploadService(db).remove_upload_from_list(upload_id)

    if result is None:
        raise _not_found(upload_id)

    await db.commit()
    upload, removed = result
    return MoveResult(moved=removed, position=upload.position)
