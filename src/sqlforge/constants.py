"""
Centralized constants for sqlforge.

Eliminates magic values scattered across the dialects.
Import from here instead of hardcoding values.
"""

# ===========================================================================
# SQL identifier quoting
# ===========================================================================

# Quote characters per dialect: (open, close)
QUOTE_CHARS = {
    "default":    ('"', '"'),
    "mysql":      ("`", "`"),
    "postgresql": ('"', '"'),
    "sqlite":     ("`", "`"),
    "sqlserver":  ("[", "]"),
    "oracle":     ('"', '"'),
}

# ===========================================================================
# Date formats (strftime) used when binding date/datetime parameters
# ===========================================================================
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SQLSERVER_DATE_FORMAT = "%Y-%m-%d %H:%M:%S.0000000"

# ===========================================================================
# Schema definitions
# ===========================================================================

# Column size tiers, smallest first
COLUMN_SIZES = ("tiny", "small", "normal", "medium", "big")
DEFAULT_COLUMN_SIZE = "normal"
DEFAULT_STRING_LENGTH = 255

# Referential actions accepted by ON DELETE / ON UPDATE
FOREIGN_KEY_ACTIONS = ("RESTRICT", "CASCADE", "NO ACTION", "SET NULL")

# Suffixes of generated key names: {table}_{suffix}_{columns}
PRIMARY_KEY_SUFFIX = "pk"
UNIQUE_KEY_SUFFIX = "uk"
INDEX_KEY_SUFFIX = "ik"
FOREIGN_KEY_SUFFIX = "fk"

# ===========================================================================
# Rendering
# ===========================================================================
PLACEHOLDER = "?"
STATEMENT_SEPARATOR = ";"
ORDER_DIRECTIONS = ("ASC", "DESC")
JOIN_TYPES = ("INNER", "LEFT", "RIGHT", "FULL", "CROSS")

# Maximum nesting of groups, nested conditions and subqueries in one render call
MAX_RENDER_DEPTH = 64

# Alias names used by the pagination emulation of Oracle / SQL Server
PAGINATION_TABLE_ALIAS = "A1"
PAGINATION_ROWNUM_ALIAS = "P_ROWNUM"


def quote_pair(dialect_name: str) -> tuple:
    """
    Return the (open, close) quote characters for a dialect.

    Unknown dialects fall back to ANSI double quotes.
    """
    return QUOTE_CHARS.get(dialect_name, QUOTE_CHARS["default"])
