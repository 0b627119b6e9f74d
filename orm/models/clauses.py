"""Clause objects used to build WHERE, JOIN, ORDER BY and LIMIT."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

from orm.constants import BIND_PLACEHOLDER, ORDER_DIRECTION_ASC, WHERE_AND_TYPE

from .schema import Reference


@dataclass
class Bind:
    """A value sent to the driver separately from the SQL text.

    ``field`` is the placeholder token written into the query.
    """

    field: str = BIND_PLACEHOLDER
    value: Any = None

    def is_empty(self) -> bool:
        return not self.field and self.value is None


# Literal or column reference (str/int/bool/None), a bound value, or a nested node
WhereOperand: TypeAlias = "str | int | bool | None | Bind | Where"


@dataclass
class Where:
    """One WHERE predicate.

    Either side may itself be a ``Where``, which allows AND/OR/NOT trees of
    any depth. ``type`` joins this predicate to the one before it.
    """

    first: WhereOperand = None
    operator: str = ""
    second: WhereOperand = None
    type: str = ""

    def get_type(self) -> str:
        return self.type or WHERE_AND_TYPE


@dataclass
class Join:
    """JOIN of ``target`` on ``target.key <condition> with_.key``."""

    target: Reference = field(default_factory=Reference)
    with_: Reference = field(default_factory=Reference)
    condition: str = "="
    type: str = ""


@dataclass
class OrderByColumn:
    column: str
    direction: str = ORDER_DIRECTION_ASC


@dataclass
class Limit:
    """LIMIT bounds; both zero means no limit."""

    offset: int = 0
    count: int = 0

    def is_empty(self) -> bool:
        return self.offset == 0 and self.count == 0
