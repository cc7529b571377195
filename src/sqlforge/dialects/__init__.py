"""
Database Dialects - Database-specific SQL rendering

This module provides a factory pattern for turning the dialect-neutral
statement and schema models into SQL for a given database.

Usage:
    from sqlforge.dialects import DialectFactory

    # Create a dialect for a driver name
    dialect = DialectFactory.create("postgresql", db_name="public")

    # Render queries
    query = dialect.select(statement)
    cursor.execute(query.sql, query.params)

    # Render DDL
    for query in dialect.create(table):
        cursor.execute(query.sql, query.params)

    # Catalog queries
    tables = dialect.get_tables()
"""

from .base import CompiledQuery, DatabaseDialect, Modifier, RenderContext
from .factory import DialectFactory

from .mysql_dialect import MySQLDialect
from .oracle_dialect import OracleDialect
from .postgresql_dialect import PostgreSQLDialect
from .sqlite_dialect import SQLiteDialect
from .sqlserver_dialect import SQLServerDialect

__all__ = [
    # Base classes
    "DatabaseDialect",
    "CompiledQuery",
    "RenderContext",
    "Modifier",

    # Factory
    "DialectFactory",

    # Implementations
    "MySQLDialect",
    "OracleDialect",
    "PostgreSQLDialect",
    "SQLiteDialect",
    "SQLServerDialect",
]
