"""
Ordered list engine.

Keeps the positions of every scope dense (1..N, no gaps, no repeats)
while items are created, moved, removed and destroyed. Each public
mutation is one transaction against the store; nothing is cached
between calls.

Concurrent reorders of the same scope are serialized only by the
database's own locking. There is no optimistic retry: a conflicting
write surfaces as StorageFailure and the caller decides what to do.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from gallery_admin.errors import NotInList
from gallery_admin.ordering.config import ListConfig
from gallery_admin.ordering.store import ListStore

logger = logging.getLogger(__name__)


class OrderedList:
    """Position operations for one list configuration, bound to one session."""

    def __init__(self, db: AsyncSession, config: ListConfig):
        self.db = db
        self.config = config
        self.store = ListStore(db, config)

    @property
    def field(self) -> str:
        return self.config.position_field

    # Queries

    def in_list(self, item) -> bool:
        return getattr(item, self.field) is not None

    def position_of(self, item) -> int:
        position = getattr(item, self.field)
        if position is None:
            raise NotInList(f"{item!r} is not in a list")
        return position

    async def items(self, item) -> List:
        """Every item sharing ``item``'s scope, in list order."""
        return await self.store.query(item)

    async def higher_item(self, item):
        if not self.in_list(item):
            return None
        column = self.config.position_column
        return await self.store.query_one(item, column == self.position_of(item) - 1)

    async def lower_item(self, item):
        if not self.in_list(item):
            return None
        column = self.config.position_column
        return await self.store.query_one(item, column == self.position_of(item) + 1)

    async def bottom_position(self, item, exclude: Iterable = ()) -> int:
        return await self.store.max_position(item, exclude) or 0

    async def bottom_item(self, item, exclude: Iterable = ()):
        bottom = await self.bottom_position(item, exclude)
        if not bottom:
            return None
        return await self.store.query_one(item, self.config.position_column == bottom)

    def is_first(self, item) -> bool:
        return self.in_list(item) and self.position_of(item) == 1

    async def is_last(self, item) -> bool:
        return self.in_list(item) and self.position_of(item) == await self.bottom_position(item)

    # Single steps, no adjustment of the rest of the list

    async def increment_position(self, item) -> None:
        if self.in_list(item):
            await self.store.update_field(item, self.field, self.position_of(item) + 1)

    async def decrement_position(self, item) -> None:
        if self.in_list(item):
            await self.store.update_field(item, self.field, self.position_of(item) - 1)

    # Moves

    async def insert_at(self, item, position: int = 1) -> int:
        """Place ``item`` at ``position``, shifting the items at and below it down."""
        if position < 1:
            raise ValueError(f"list positions start at 1, got {position}")
        async with self.store.transaction():
            await self.store.reload(item)
            await self._close_gap(item)
            await self.store.update_field(item, self.field, None)
            bottom = await self.bottom_position(item)
            position = min(position, bottom + 1)
            await self.store.bulk_update(item, [self.config.position_column >= position], 1)
            await self.store.update_field(item, self.field, position)
        logger.debug("Inserted %r at position %s", item, position)
        return position

    async def move_lower(self, item) -> bool:
        """Swap with the next item down. Returns False when already last or unlisted."""
        return await self._swap(item, step=1)

    async def move_higher(self, item) -> bool:
        """Swap with the next item up. Returns False when already first or unlisted."""
        return await self._swap(item, step=-1)

    async def move_to_bottom(self, item) -> bool:
        async with self.store.transaction():
            await self.store.reload(item)
            if not self.in_list(item):
                return False
            await self._close_gap(item)
            bottom = await self.bottom_position(item, exclude=[item])
            await self.store.update_field(item, self.field, bottom + 1)
        logger.debug("Moved %r to bottom", item)
        return True

    async def move_to_top(self, item) -> bool:
        async with self.store.transaction():
            await self.store.reload(item)
            if not self.in_list(item):
                return False
            column = self.config.position_column
            await self.store.bulk_update(item, [column < self.position_of(item)], 1)
            await self.store.update_field(item, self.field, 1)
        logger.debug("Moved %r to top", item)
        return True

    async def remove_from_list(self, item) -> bool:
        async with self.store.transaction():
            await self.store.reload(item)
            if not self.in_list(item):
                return False
            await self._close_gap(item)
            await self.store.update_field(item, self.field, None)
        logger.debug("Removed %r from list", item)
        return True

    # Lifecycle hooks

    async def on_create(self, item):
        """Add a new item, appending it to the bottom unless a position was given."""
        async with self.store.transaction():
            if not self.in_list(item):
                bottom = await self.bottom_position(item)
                setattr(item, self.field, bottom + 1)
            self.db.add(item)
            await self.db.flush()
        return item

    async def on_destroy(self, item) -> None:
        """Delete an item, closing the gap it leaves."""
        async with self.store.transaction():
            await self.store.reload(item)
            if self.in_list(item):
                await self._close_gap(item)
                await self.store.update_field(item, self.field, None)
            await self.db.delete(item)
            await self.db.flush()

    async def reorder_by_ids(self, ids: Sequence) -> List:
        """
        Renumber a scope to follow ``ids``.

        The scope is taken from the first id that resolves to a row. Ids
        that don't resolve, belong to another scope, or repeat are skipped.
        Items not named keep their relative order (unpositioned ones count
        as position 0) and follow the named ones. Returns the list in its
        new order.
        """
        keys = [self.config.coerce_id(raw) for raw in ids]
        async with self.store.transaction():
            anchor = None
            for key in keys:
                if key is not None:
                    anchor = await self.store.get(key)
                    if anchor is not None:
                        break
            if anchor is None:
                logger.info("Reorder of %s skipped: none of %d ids resolved", self.config.model.__name__, len(keys))
                return []

            remaining = {self.config.identity(item): item for item in await self.store.query(anchor)}
            ordered = []
            for key in keys:
                item = remaining.pop(key, None)
                if item is not None:
                    ordered.append(item)
            ordered.extend(sorted(remaining.values(), key=lambda item: getattr(item, self.field) or 0))

            changed = 0
            for position, item in enumerate(ordered, start=1):
                if getattr(item, self.field) != position:
                    await self.store.update_field(item, self.field, position)
                    changed += 1
        logger.info("Reordered %d %s rows (%d changed)", len(ordered), self.config.model.__name__, changed)
        return ordered

    # Internals

    async def _swap(self, item, step: int) -> bool:
        async with self.store.transaction():
            await self.store.reload(item)
            try:
                current = self.position_of(item)
            except NotInList:
                return False
            column = self.config.position_column
            neighbour = await self.store.query_one(item, column == current + step)
            if neighbour is None:
                return False
            await self.store.update_field(neighbour, self.field, current)
            await self.store.update_field(item, self.field, current + step)
        logger.debug("Swapped %r with %r", item, neighbour)
        return True

    async def _close_gap(self, item) -> None:
        """Shift every item below ``item`` up by one."""
        position: Optional[int] = getattr(item, self.field)
        if position is None:
            return
        await self.store.bulk_update(item, [self.config.position_column > position], -1)
