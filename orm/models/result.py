"""Result of a query execution."""

from dataclasses import dataclass, field

from .model import Model


@dataclass
class Result:
    """Rows returned by a SELECT, or the last inserted id of a command.

    ``error`` carries the driver failure when execution did not succeed.
    """

    items: list[Model] = field(default_factory=list)
    last_insert_id: int = 0
    error: Exception | None = None

    def add_item(self, model: Model) -> None:
        self.items.append(model)
