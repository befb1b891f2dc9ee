"""
Backing store for ordered lists.

Every query is confined to the scope of the item it is asked about.
Reads use populate_existing so objects already in the session reflect
positions changed by earlier bulk updates.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable, List, Optional

from sqlalchemy import func, inspect, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.errors import StorageFailure
from gallery_admin.ordering.config import ListConfig

logger = logging.getLogger(__name__)


class ListStore:
    """Database operations for one ordered list configuration."""

    def __init__(self, db: AsyncSession, config: ListConfig):
        self.db = db
        self.config = config

    def scoped(self, item, *criteria):
        return (
            select(self.config.model)
            .where(self.config.scope_clause(item), *criteria)
            .execution_options(populate_existing=True)
        )

    async def query(self, item, *criteria) -> List:
        """Items in ``item``'s list, unpositioned first, then by position and id."""
        query = self.scoped(item, *criteria).order_by(
            self.config.position_column.asc().nulls_first(),
            self.config.primary_key.asc(),
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def query_one(self, item, *criteria):
        result = await self.db.execute(self.scoped(item, *criteria).limit(1))
        return result.scalars().first()

    async def get(self, key):
        return await self.db.get(self.config.model, key, populate_existing=True)

    async def max_position(self, item, exclude: Iterable = ()) -> Optional[int]:
        query = select(func.max(self.config.position_column)).where(self.config.scope_clause(item))
        excluded = [self.config.identity(other) for other in exclude]
        if excluded:
            query = query.where(self.config.primary_key.notin_(excluded))
        result = await self.db.execute(query)
        return result.scalar()

    async def update_field(self, item, field: str, value) -> None:
        setattr(item, field, value)
        await self.db.flush()

    async def bulk_update(self, item, criteria: Iterable, delta: int) -> None:
        """position = position + delta for every scoped row matching ``criteria``."""
        column = self.config.position_column
        statement = (
            update(self.config.model)
            .where(self.config.scope_clause(item), *criteria)
            .values({self.config.position_field: column + delta})
            .execution_options(synchronize_session="fetch")
        )
        await self.db.execute(statement)

    async def reload(self, item) -> None:
        """Re-read a persistent item so decisions use the stored position."""
        await self.db.flush()
        if inspect(item).persistent:
            await self.db.refresh(item)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        Run the block atomically.

        Uses a SAVEPOINT when the session already has a transaction open,
        so a failure rolls back only this operation and the caller's
        transaction stays usable.
        """
        try:
            if self.db.in_transaction():
                async with self.db.begin_nested():
                    yield
            else:
                async with self.db.begin():
                    yield
        except SQLAlchemyError as exc:
            logger.warning("Ordered list update on %s rolled back: %s", self.config.model.__name__, exc)
            raise StorageFailure(f"Could not update the {self.config.model.__name__} list") from exc
