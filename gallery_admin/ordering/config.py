"""Immutable per-list configuration."""

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import inspect

from gallery_admin.core.config import settings
from gallery_admin.ordering.scope import NoScope, ScopeClause, ScopeRule, scope_rule


@dataclass(frozen=True)
class ListConfig:
    """
    Describes one kind of ordered list.

    ``scope`` accepts a ScopeRule or anything ``scope_rule`` can coerce.
    The rule is bound to the model when the config is built, so a bad
    column name fails here rather than on the first move.
    """

    model: Any
    position_field: str = settings.POSITION_COLUMN
    scope: Any = field(default_factory=NoScope)
    scope_clause: ScopeClause = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        rule: ScopeRule = scope_rule(self.scope)
        object.__setattr__(self, "scope", rule)
        if self.position_field not in inspect(self.model).columns:
            raise ValueError(f"{self.model.__name__} has no column {self.position_field!r}")
        object.__setattr__(self, "scope_clause", rule.bind(self.model))

    @property
    def position_column(self):
        return getattr(self.model, self.position_field)

    @property
    def primary_key(self):
        return inspect(self.model).primary_key[0]

    def identity(self, item):
        mapper = inspect(self.model)
        return getattr(item, mapper.get_property_by_column(self.primary_key).key)

    def coerce_id(self, value):
        """
        Convert a raw id to the key type, or None.

        Accepts the key type itself (booleans excluded) or a string, e.g.
        from a form. Integer keys only take strings of ASCII digits, so
        values like "2.9" or True never land on a real row.
        """
        python_type = self.primary_key.type.python_type
        if isinstance(value, bool):
            return None
        if isinstance(value, python_type):
            return value
        if not isinstance(value, str):
            return None
        text = value.strip()
        if python_type is int:
            return int(text) if text.isascii() and text.isdigit() else None
        try:
            return python_type(text)
        except (TypeError, ValueError):
            return None
