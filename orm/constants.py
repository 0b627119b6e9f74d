"""SQL keywords and fixed values shared by the builders."""

from typing import Final

# Placeholder token used for every bound value
BIND_PLACEHOLDER: Final[str] = "?"

# Prefixes used by the SQLite table rebuild
TEMP_TABLE_PREFIX: Final[str] = "temp_"
OLD_TABLE_PREFIX: Final[str] = "old_"

# Normalized column types reported for selected rows
INTEGER_COLUMN_TYPE: Final[str] = "INTEGER"
VARCHAR_COLUMN_TYPE: Final[str] = "VARCHAR"
CHAR_COLUMN_TYPE: Final[str] = "CHAR"
BOOLEAN_COLUMN_TYPE: Final[str] = "BOOL"

# WHERE clause joiners
WHERE_AND_TYPE: Final[str] = "AND"
WHERE_OR_TYPE: Final[str] = "OR"
WHERE_NOT_TYPE: Final[str] = "NOT"

# JOIN kinds
LEFT_JOIN_TYPE: Final[str] = "LEFT"
RIGHT_JOIN_TYPE: Final[str] = "RIGHT"
INNER_JOIN_TYPE: Final[str] = "INNER"

# ORDER BY directions
ORDER_DIRECTION_ASC: Final[str] = "ASC"
ORDER_DIRECTION_DESC: Final[str] = "DESC"

# Foreign key actions
CASCADE_ACTION: Final[str] = "CASCADE"
NO_ACTION_ACTION: Final[str] = "NO ACTION"
SET_NULL_ACTION: Final[str] = "SET NULL"

# Raw driver type names mapped onto the normalized vocabulary
COLUMN_TYPE_ALIASES: Final[dict[str, str]] = {
    "INT": INTEGER_COLUMN_TYPE,
    "INTEGER": INTEGER_COLUMN_TYPE,
    "TINYINT": INTEGER_COLUMN_TYPE,
    "SMALLINT": INTEGER_COLUMN_TYPE,
    "BIGINT": INTEGER_COLUMN_TYPE,
    "SHORT": INTEGER_COLUMN_TYPE,
    "INT24": INTEGER_COLUMN_TYPE,
    "LONG": INTEGER_COLUMN_TYPE,
    "LONGLONG": INTEGER_COLUMN_TYPE,
    "VARCHAR": VARCHAR_COLUMN_TYPE,
    "VAR_STRING": VARCHAR_COLUMN_TYPE,
    "TEXT": VARCHAR_COLUMN_TYPE,
    "CHAR": CHAR_COLUMN_TYPE,
    "STRING": CHAR_COLUMN_TYPE,
    "BOOL": BOOLEAN_COLUMN_TYPE,
    "BOOLEAN": BOOLEAN_COLUMN_TYPE,
    "TINY": BOOLEAN_COLUMN_TYPE,
}
