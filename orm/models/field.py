"""Column descriptor used by models and queries."""

from dataclasses import dataclass
from typing import Any


@dataclass
class ModelField:
    """One table column, or one selected output column.

    ``value`` holds the value of the row currently being written; ``default``
    is rendered into the column definition of CREATE and ALTER statements.
    """

    name: str
    type: str = ""
    value: Any = None
    default: Any = None
    length: int = 0
    nullable: bool = False
    unsigned: bool = False
    primary_key: bool = False
    auto_increment: bool = False
