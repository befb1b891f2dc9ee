"""
Helpers shared by services whose records live in ordered lists.
"""

import logging

from gallery_admin.ordering import OrderedList

logger = logging.getLogger(__name__)


async def apply_move(ordering: OrderedList, item, direction: str) -> bool:
    """Run the move named by ``direction``; False when the item stayed put."""
    if direction == "higher":
        moved = await ordering.move_higher(item)
    elif direction == "lower":
        moved = await ordering.move_lower(item)
    elif direction == "top":
        moved = await ordering.move_to_top(item)
    elif direction == "bottom":
        moved = await ordering.move_to_bottom(item)
    else:
        raise ValueError(f"Unknown move direction {direction!r}")

    if not moved:
        logger.debug("Move %s of %r was a no-op", direction, item)
    return moved
