"""Schema builder interface: renders DDL statements."""

from abc import ABC, abstractmethod

from orm.database.query import Query


class SchemaBuilder(ABC):
    """Abstract schema builder for different SQL backends."""

    @abstractmethod
    def create(self, query: Query) -> str:
        """Generate CREATE TABLE SQL.

        Args:
            query: Query built with ``create``

        Returns:
            CREATE TABLE statement followed by its index statements
        """
        pass

    @abstractmethod
    def alter(self, query: Query) -> str:
        """Generate SQL applying the requested schema changes.

        Args:
            query: Query built with ``alter``

        Returns:
            One or more statements, or an empty string when nothing changes
        """
        pass

    def drop(self, query: Query) -> str:
        """Generate DROP TABLE SQL."""
        if query.destination is None:
            return ""
        return f"DROP TABLE {query.destination.get_table_name()}"

    def rename(self, query: Query) -> str:
        """Generate SQL renaming the destination table."""
        if query.destination is None or not query.new_table_name:
            return ""
        return self.rename_table(
            query.destination.get_table_name(), query.new_table_name
        )

    def rename_table(self, table_name: str, new_table_name: str) -> str:
        return f"ALTER TABLE `{table_name}` RENAME TO `{new_table_name}`"
