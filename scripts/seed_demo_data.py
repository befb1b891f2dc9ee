"""
Seed demo pages, a gallery and a few uploads for exploring the admin API.

Run after migrations. Skips seeding when pages already exist.

Usage:
    python scripts/seed_demo_data.py
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import func, select

from gallery_admin.db.session import get_async_session_context
from gallery_admin.models import Page
from gallery_admin.schemas.gallery import GalleryCreate
from gallery_admin.schemas.page import PageCreate
from gallery_admin.schemas.upload import UploadCreate
from gallery_admin.services.gallery_service import GalleryService
from gallery_admin.services.page_service import PageService
from gallery_admin.services.upload_service import UploadService


async def seed_demo_data() -> None:
    async with get_async_session_context() as db:
        existing = await db.execute(select(func.count()).select_from(Page))
        if existing.scalar_one():
            print("[SKIP] Pages already exist")
            return

        pages = PageService(db)
        home = await pages.create_page(PageCreate(title="Home"))
        events = await pages.create_page(PageCreate(title="Events"))
        await pages.create_page(PageCreate(title="Contact"))
        await pages.create_page(PageCreate(title="Spring fair", parent_id=events.id))
        print(f"[OK] Created pages under Home (id={home.id}) and Events (id={events.id})")

        gallery = await GalleryService(db).create_gallery(
            GalleryCreate(title="Spring fair photos", page_id=events.id)
        )
        uploads = UploadService(db)
        for i, kind in enumerate(("photo", "photo", "video", "document"), start=1):
            await uploads.create_upload(gallery.id, UploadCreate(kind=kind, title=f"Item {i}"))
        print(f"[OK] Created gallery {gallery.id} with 4 uploads")


if __name__ == "__main__":
    print("Seeding demo data...\n")
    asyncio.run(seed_demo_data())
    print("\n[OK] Done.")
