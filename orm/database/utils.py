"""Clause rendering and value helpers shared by every dialect."""

from collections.abc import Iterable
from typing import Any

from orm.constants import (
    BOOLEAN_COLUMN_TYPE,
    CHAR_COLUMN_TYPE,
    COLUMN_TYPE_ALIASES,
    INTEGER_COLUMN_TYPE,
    VARCHAR_COLUMN_TYPE,
)
from orm.exceptions import UnsupportedValueError, ValueCoercionError
from orm.models import Bind, ForeignKey, Join, Limit, ModelField, OrderByColumn, Where

_TRUE_VALUES = ("1", "true")
_TEXT_TYPES = (
    INTEGER_COLUMN_TYPE,
    BOOLEAN_COLUMN_TYPE,
    VARCHAR_COLUMN_TYPE,
    CHAR_COLUMN_TYPE,
)


def join_sql_parts(parts: Iterable[str], separator: str = " ") -> str:
    """Join SQL fragments, skipping empty ones."""
    return separator.join(part for part in parts if part)


def to_sql_value(value: Any) -> str:
    """Render a Python value as an SQL literal.

    Args:
        value: None, bool, int or str

    Returns:
        The literal as it appears in SQL text

    Raises:
        UnsupportedValueError: If the value has any other type

    Example:
        >>> to_sql_value("draft")
        '"draft"'
        >>> to_sql_value(True)
        'true'
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return f'"{value}"'

    raise UnsupportedValueError(f"Unsupported SQL value type: {type(value).__name__}")


def where_operand_to_sql(operand: Any) -> str:
    """Render one side of a predicate.

    Strings are column references or already rendered SQL and pass through
    verbatim. Nested predicates render recursively.

    Raises:
        UnsupportedValueError: If the operand has an unsupported type
    """
    if isinstance(operand, Where):
        return where_to_sql(operand)
    if isinstance(operand, Bind):
        return operand.field
    if isinstance(operand, str):
        return operand
    return to_sql_value(operand)


def where_to_sql(where: Where) -> str:
    """Render a predicate tree.

    When ``second`` is a nested predicate and no operator is set, the nested
    predicate's type joins the two sides. The fragment is parenthesized only
    when both sides are nested predicates.

    Example:
        >>> where_to_sql(Where(Where("a", "=", 1), "", Where("b", "=", 2, "OR")))
        '(a = 1 OR b = 2)'
    """
    connector = where.operator
    if isinstance(where.second, Where) and not connector:
        connector = where.second.get_type()

    sql = join_sql_parts(
        [
            where_operand_to_sql(where.first),
            connector,
            where_operand_to_sql(where.second),
        ]
    )
    if isinstance(where.first, Where) and isinstance(where.second, Where):
        return f"({sql})"
    return sql


def generate_where_clause(wheres: list[Where]) -> str:
    """Build a WHERE clause from predicates in order.

    Every predicate after the first is prefixed with its type keyword.

    Example:
        >>> generate_where_clause([Where("a", "=", 1), Where("b", "=", 2, "OR")])
        'WHERE a = 1 OR b = 2'
    """
    if not wheres:
        return ""

    clause = "WHERE " + where_to_sql(wheres[0])
    for where in wheres[1:]:
        clause += f" {where.get_type()} {where_to_sql(where)}"
    return clause


def join_to_sql(join: Join) -> str:
    """Render one JOIN.

    Example:
        >>> join_to_sql(Join(Reference("b", "a_id"), Reference("a", "id"), "=", "left"))
        'LEFT JOIN b ON (b.a_id = a.id)'
    """
    target = join.target
    with_ = join.with_
    kind = join_sql_parts([join.type.upper(), "JOIN"])
    return (
        f"{kind} {target.table} ON "
        f"({target.table}.{target.key} {join.condition} {with_.table}.{with_.key})"
    )


def generate_join_clause(joins: list[Join]) -> str:
    return " ".join(join_to_sql(join) for join in joins)


def generate_order_by_clause(order_by: list[OrderByColumn]) -> str:
    """Build ORDER BY clause.

    Example:
        >>> generate_order_by_clause([OrderByColumn("name", "DESC")])
        'ORDER BY name DESC'
    """
    if not order_by:
        return ""

    columns = ", ".join(f"{order.column} {order.direction}" for order in order_by)
    return f"ORDER BY {columns}"


def generate_group_by_clause(group_by: list[str]) -> str:
    if not group_by:
        return ""

    return f"GROUP BY {', '.join(group_by)}"


def generate_limit_clause(limit: Limit) -> str:
    """Build LIMIT clause.

    Example:
        >>> generate_limit_clause(Limit(0, 10))
        'LIMIT 10'
        >>> generate_limit_clause(Limit(20, 10))
        'LIMIT 20, 10'
    """
    if limit.is_empty():
        return ""
    if limit.offset == 0:
        return f"LIMIT {limit.count}"

    return f"LIMIT {limit.offset}, {limit.count}"


def column_name(column: str | ModelField) -> str:
    if isinstance(column, ModelField):
        return column.name
    return column


def generate_select_columns(columns: list[str | ModelField]) -> str:
    """Comma separated column names, or ``*`` when there are none."""
    if not columns:
        return "*"

    return ", ".join(column_name(column) for column in columns)


def generate_literal_values(values: Iterable[Any]) -> str:
    """Render a VALUES list of literals.

    Example:
        >>> generate_literal_values([1, "a", None])
        'VALUES (1, "a", NULL)'
    """
    return f"VALUES ({', '.join(to_sql_value(value) for value in values)})"


def foreign_key_to_sql(foreign_key: ForeignKey) -> str:
    """Render a foreign key constraint for CREATE and ALTER statements.

    The CONSTRAINT prefix is omitted when the key has no name.
    """
    target = foreign_key.target
    sql = join_sql_parts(
        [
            f"CONSTRAINT {foreign_key.name}" if foreign_key.name else "",
            f"FOREIGN KEY ({foreign_key.with_.key})",
            f"REFERENCES {target.table} ({target.key})",
            f"ON DELETE {foreign_key.get_on_delete()}",
            f"ON UPDATE {foreign_key.get_on_update()}",
        ]
    )
    return sql


def column_default_sql(field: ModelField) -> str:
    """``DEFAULT <literal>`` for fields with a default, else empty."""
    if field.default is None:
        return ""
    return f"DEFAULT {to_sql_value(field.default)}"


def nullable_sql(field: ModelField) -> str:
    return "NULL" if field.nullable else "NOT NULL"


def normalize_column_type(type_name: str | None) -> str:
    """Map a driver type name onto INTEGER, VARCHAR, CHAR or BOOL.

    Length suffixes such as ``VARCHAR(255)`` are ignored. Unknown names
    fall back to VARCHAR.
    """
    if not type_name:
        return VARCHAR_COLUMN_TYPE

    base = type_name.split("(", 1)[0].strip().upper()
    return COLUMN_TYPE_ALIASES.get(base, VARCHAR_COLUMN_TYPE)


def normalize_value(column_type: str, value: Any) -> Any:
    """Coerce a raw driver value according to its normalized column type.

    Only byte strings are converted; every other value passes through.

    Raises:
        ValueCoercionError: If a byte string is not a valid integer
    """
    if not isinstance(value, (bytes, bytearray)) or column_type not in _TEXT_TYPES:
        return value

    try:
        text = bytes(value).decode()
    except UnicodeDecodeError as e:
        raise ValueCoercionError(f"Cannot decode {column_type} value") from e

    if column_type == INTEGER_COLUMN_TYPE:
        try:
            return int(text)
        except ValueError as e:
            raise ValueCoercionError(
                f"Cannot convert {text!r} to {INTEGER_COLUMN_TYPE}"
            ) from e
    if column_type == BOOLEAN_COLUMN_TYPE:
        return text.lower() in _TRUE_VALUES
    return text
