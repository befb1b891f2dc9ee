"""
Ordered lists.

Keeps a dense 1..N position column per scope:

    from gallery_admin.ordering import ListConfig, OrderedList

    UPLOAD_LIST = ListConfig(Upload, scope="gallery")

    uploads = OrderedList(db, UPLOAD_LIST)
    await uploads.on_create(upload)      # appended to the bottom
    await uploads.move_higher(upload)
    await uploads.reorder_by_ids(["3", "1", "2"])
"""

from gallery_admin.ordering.config import ListConfig
from gallery_admin.ordering.engine import OrderedList
from gallery_admin.ordering.scope import (
    ForeignKeyScope,
    FunctionScope,
    NoScope,
    PredicateScope,
    ScopeRule,
    scope_rule,
)
from gallery_admin.ordering.store import ListStore

__all__ = [
    "ListConfig",
    "OrderedList",
    "ListStore",
    "ForeignKeyScope",
    "FunctionScope",
    "NoScope",
    "PredicateScope",
    "ScopeRule",
    "scope_rule",
]
