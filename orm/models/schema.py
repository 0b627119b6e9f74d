"""Schema objects: table references, foreign keys and indexes."""

from dataclasses import dataclass, field

from orm.constants import NO_ACTION_ACTION


@dataclass
class Reference:
    """A table and one of its key columns."""

    table: str = ""
    key: str = ""


@dataclass
class ForeignKey:
    """Foreign key from ``with_.key`` to ``target.table (target.key)``."""

    name: str = ""
    target: Reference = field(default_factory=Reference)
    with_: Reference = field(default_factory=Reference)
    on_delete: str = ""
    on_update: str = ""

    def get_on_delete(self) -> str:
        return self.on_delete or NO_ACTION_ACTION

    def get_on_update(self) -> str:
        return self.on_update or NO_ACTION_ACTION


@dataclass
class Index:
    """Single column index."""

    name: str = ""
    target: str = ""
    key: str = ""
    unique: bool = False
