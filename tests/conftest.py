"""
Pytest configuration and shared fixtures.

Unit tests run against an in-memory SQLite database (aiosqlite) created
fresh for every test. Tests marked ``db`` use the configured DATABASE_URL
and only run with RUN_DB_TESTS=1.
"""

import os
from typing import Dict, List

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.pool import StaticPool

from gallery_admin.db.base import Base
from gallery_admin.db.session import build_engine
from gallery_admin.models import Gallery, Upload, UPLOAD_LIST
from gallery_admin.ordering import OrderedList


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: requires database")
    config.addinivalue_line("markers", "server: requires running HTTP server")


def pytest_collection_modifyitems(config, items):
    run_db = os.environ.get("RUN_DB_TESTS") == "1"
    run_server = os.environ.get("RUN_SERVER_TESTS") == "1"

    skip_db = pytest.mark.skip(reason="db tests skipped by default; set RUN_DB_TESTS=1 to enable")
    skip_server = pytest.mark.skip(reason="server tests skipped by default; set RUN_SERVER_TESTS=1 to enable")

    for item in items:
        if "db" in item.keywords and not run_db:
            item.add_marker(skip_db)
        if "server" in item.keywords and not run_server:
            item.add_marker(skip_server)


@pytest_asyncio.fixture
async def db_engine():
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(db_engine):
    session_maker = async_sessionmaker(db_engine, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
def upload_list(db):
    return OrderedList(db, UPLOAD_LIST)


async def make_gallery(db, title: str = "Gallery") -> Gallery:
    gallery = Gallery(title=title)
    db.add(gallery)
    await db.flush()
    return gallery


async def make_uploads(ordering: OrderedList, gallery_id, count: int, kinds=("photo",)) -> List[Upload]:
    """Create ``count`` uploads appended in order, cycling through ``kinds``."""
    uploads = []
    for i in range(count):
        upload = Upload(gallery_id=gallery_id, kind=kinds[i % len(kinds)], title=f"upload {i + 1}")
        uploads.append(await ordering.on_create(upload))
    return uploads


async def ids_in_order(db, gallery_id) -> List[int]:
    """Upload ids of a gallery in list order, unpositioned first (as stored)."""
    criteria = Upload.gallery_id.is_(None) if gallery_id is None else Upload.gallery_id == gallery_id
    result = await db.execute(
        select(Upload.id)
        .where(criteria)
        .order_by(Upload.position.asc().nulls_first(), Upload.id.asc())
    )
    return list(result.scalars().all())


async def positions_by_id(db, gallery_id) -> Dict[int, int]:
    result = await db.execute(
        select(Upload.id, Upload.position).where(Upload.gallery_id == gallery_id).order_by(Upload.id)
    )
    return {row.id: row.position for row in result}


def assert_dense(positions) -> None:
    """Positioned members of one scope occupy exactly 1..N."""
    listed = sorted(p for p in positions if p is not None)
    assert listed == list(range(1, len(listed) + 1)), f"positions not dense: {listed}"


@pytest_asyncio.fixture
async def gallery(db):
    return await make_gallery(db)


@pytest_asyncio.fixture
async def four_uploads(db, upload_list, gallery):
    return await make_uploads(upload_list, gallery.id, 4)
