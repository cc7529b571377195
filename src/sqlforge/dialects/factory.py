"""
Dialect Factory - Create appropriate dialect based on database type
"""

from typing import Any, Dict, Optional, Type

from .base import DatabaseDialect

import logging
logger = logging.getLogger(__name__)


class DialectFactory:
    """
    Factory for creating database dialects.

    Usage:
        dialect = DialectFactory.create("sqlite")
        query = dialect.select(statement)

        dialect = DialectFactory.create("mssql", db_name="dbo", strict=True)
    """

    # Registry of supported database types
    _dialects: Dict[str, Type[DatabaseDialect]] = {}

    @classmethod
    def create(cls, db_type: str, **options: Any) -> Optional[DatabaseDialect]:
        """
        Create a dialect for the specified database type.

        Args:
            db_type: Database type or driver name (mysql, pgsql, sqlsrv, oci...)
            **options: Dialect options (db_name, date_format, strict)

        Returns:
            DatabaseDialect instance or None if type not supported

        Raises:
            ValidationError: An option is not known to the dialect
        """
        dialect_class = cls._dialects.get(db_type.lower())
        if dialect_class is None:
            logger.warning(f"No dialect for database type: {db_type}")
            return None

        dialect = dialect_class()
        if options:
            dialect.set_options(options)
        return dialect

    @classmethod
    def is_supported(cls, db_type: str) -> bool:
        """Check if a database type is supported."""
        return db_type.lower() in cls._dialects

    @classmethod
    def supported_types(cls) -> list:
        """Get list of supported database types."""
        return list(cls._dialects.keys())

    @classmethod
    def register(cls, db_type: str, dialect_class: Type[DatabaseDialect]):
        """
        Register a new dialect type.

        Args:
            db_type: Database type identifier
            dialect_class: DatabaseDialect subclass
        """
        cls._dialects[db_type.lower()] = dialect_class
        logger.debug(f"Registered dialect for: {db_type}")


def _register_default_dialects():
    """Register built-in dialects. Called on module import."""
    from .mysql_dialect import MySQLDialect
    from .oracle_dialect import OracleDialect
    from .postgresql_dialect import PostgreSQLDialect
    from .sqlite_dialect import SQLiteDialect
    from .sqlserver_dialect import SQLServerDialect

    DialectFactory.register("default", DatabaseDialect)
    DialectFactory.register("ansi", DatabaseDialect)  # Alias
    DialectFactory.register("mysql", MySQLDialect)
    DialectFactory.register("mariadb", MySQLDialect)  # Alias
    DialectFactory.register("postgresql", PostgreSQLDialect)
    DialectFactory.register("postgres", PostgreSQLDialect)  # Alias
    DialectFactory.register("pgsql", PostgreSQLDialect)  # Alias
    DialectFactory.register("sqlite", SQLiteDialect)
    DialectFactory.register("sqlserver", SQLServerDialect)
    DialectFactory.register("sqlsrv", SQLServerDialect)  # Alias
    DialectFactory.register("mssql", SQLServerDialect)  # Alias
    DialectFactory.register("oracle", OracleDialect)
    DialectFactory.register("oci", OracleDialect)  # Alias


# Register on module import
_register_default_dialects()
