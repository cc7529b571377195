"""
sqlforge - dialect-aware SQL rendering

Builds parameterized SQL for MySQL/MariaDB, PostgreSQL, SQLite, SQL Server
and Oracle from one dialect-neutral statement and schema model.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("sqlforge")
except PackageNotFoundError:
    # Package not installed (running from a source checkout)
    __version__ = "0.1.0"

from .dialects import CompiledQuery, DatabaseDialect, DialectFactory
from .exceptions import MalformedStatementError, SQLForgeError, UnsupportedOperationError, ValidationError
from .query import Expression, QueryStatement
from .schema import AlterTable, ColumnType, CreateTable

__all__ = [
    "__version__",
    "CompiledQuery",
    "DatabaseDialect",
    "DialectFactory",
    "SQLForgeError",
    "ValidationError",
    "UnsupportedOperationError",
    "MalformedStatementError",
    "Expression",
    "QueryStatement",
    "AlterTable",
    "ColumnType",
    "CreateTable",
]
