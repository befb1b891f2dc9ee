"""
Scope rules for ordered lists.

A scope rule partitions the rows of one table into independent lists.
Each rule is bound once to a model, which yields a function mapping an
item to the SQL predicate selecting its list:

    ForeignKeyScope("gallery")            -> uploads.gallery_id = <item.gallery_id>
    PredicateScope("parent_id = :parent_id AND kind = 'photo'")
    FunctionScope(lambda item: Upload.gallery_id == item.gallery_id)
    NoScope()                             -> every row is in one list
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Union

from sqlalchemy import text, true
from sqlalchemy.sql.elements import ColumnElement

from gallery_admin.errors import ScopeResolutionFailure

ScopeClause = Callable[[Any], ColumnElement]

# Same shape SQLAlchemy's text() uses to find bind parameters.
_BIND_PARAM = re.compile(r"(?<![:\w\x5c]):(\w+)(?!:)")
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class ForeignKeyScope:
    """Items sharing the same foreign key value form one list."""

    name: str

    @property
    def attribute(self) -> str:
        return self.name if self.name.endswith("_id") else f"{self.name}_id"

    def bind(self, model) -> ScopeClause:
        attribute = self.attribute
        column = getattr(model, attribute, None)
        if column is None:
            raise ScopeResolutionFailure(f"{model.__name__} has no attribute {attribute!r} to scope by")

        def clause(item):
            try:
                value = getattr(item, attribute)
            except AttributeError as exc:
                raise ScopeResolutionFailure(f"{item!r} has no {attribute!r}") from exc
            if value is None:
                return column.is_(None)
            return column == value

        return clause


@dataclass(frozen=True)
class PredicateScope:
    """Raw SQL predicate; each ``:name`` parameter is bound from the item."""

    template: str

    @property
    def parameters(self) -> tuple:
        return tuple(dict.fromkeys(_BIND_PARAM.findall(self.template)))

    def bind(self, model) -> ScopeClause:
        names = self.parameters

        def clause(item):
            values = {}
            for name in names:
                try:
                    values[name] = getattr(item, name)
                except AttributeError as exc:
                    raise ScopeResolutionFailure(
                        f"cannot bind :{name} for {item!r} in scope {self.template!r}"
                    ) from exc
            return text(self.template).bindparams(**values)

        return clause


@dataclass(frozen=True)
class FunctionScope:
    """Callable returning the predicate for an item."""

    evaluator: Callable[[Any], Any]

    def bind(self, model) -> ScopeClause:
        evaluator = self.evaluator

        def clause(item):
            try:
                return evaluator(item)
            except ScopeResolutionFailure:
                raise
            except Exception as exc:
                raise ScopeResolutionFailure(f"scope function failed for {item!r}: {exc}") from exc

        return clause


@dataclass(frozen=True)
class NoScope:
    """The whole table is one list."""

    def bind(self, model) -> ScopeClause:
        return lambda item: true()


ScopeRule = Union[ForeignKeyScope, PredicateScope, FunctionScope, NoScope]


def scope_rule(value) -> ScopeRule:
    """
    Coerce a plain value into a scope rule.

    None means no scope, a bare identifier is a foreign key name, any
    other string is a predicate template and a callable is evaluated
    per item.
    """
    if isinstance(value, (ForeignKeyScope, PredicateScope, FunctionScope, NoScope)):
        return value
    if value is None:
        return NoScope()
    if isinstance(value, str):
        if _IDENTIFIER.match(value):
            return ForeignKeyScope(value)
        return PredicateScope(value)
    if callable(value):
        return FunctionScope(value)
    raise TypeError(f"Unknown type of scope {value!r}")
