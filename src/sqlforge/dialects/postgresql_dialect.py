"""
PostgreSQL Dialect - PostgreSQL-specific SQL rendering
"""

from .base import CompiledQuery, DatabaseDialect, Modifier, RenderContext
from ..schema.alter_table import AlterTable, RenameColumn
from ..schema.column import BaseColumn

import logging
logger = logging.getLogger(__name__)


class PostgreSQLDialect(DatabaseDialect):
    """
    Dialect for PostgreSQL databases.

    Autoincrement is expressed through the SERIAL family of types, and index
    names are prefixed with the table name since they live in the schema
    namespace.
    """

    name = "postgresql"
    modifiers = (Modifier.NULLABLE, Modifier.DEFAULT)
    supports_engine = False
    catalog_type_column = "udt_name"

    # (plain, autoincrement) per size tier
    _INTEGER_TYPES = {
        "tiny": ("SMALLINT", "SMALLSERIAL"),
        "small": ("SMALLINT", "SMALLSERIAL"),
        "normal": ("INTEGER", "SERIAL"),
        "medium": ("INTEGER", "SERIAL"),
        "big": ("BIGINT", "BIGSERIAL"),
    }

    def get_database_name(self) -> CompiledQuery:
        return CompiledQuery("SELECT current_schema()")

    def rename_table(self, current: str, new: str) -> CompiledQuery:
        return CompiledQuery(f"ALTER TABLE {self.quote_identifier(current)} RENAME TO {self.quote_identifier(new)}")

    # ==================== Column types ====================

    def _type_integer(self, column: BaseColumn) -> str:
        plain, serial = self._INTEGER_TYPES.get(self._size(column), self._INTEGER_TYPES["normal"])
        return serial if column.get("autoincrement", False) else plain

    def _type_float(self, column: BaseColumn) -> str:
        return "REAL"

    def _type_double(self, column: BaseColumn) -> str:
        return "DOUBLE PRECISION"

    def _type_decimal(self, column: BaseColumn) -> str:
        return self._precision_type("DECIMAL", column)

    def _type_binary(self, column: BaseColumn) -> str:
        return "BYTEA"

    def _type_time(self, column: BaseColumn) -> str:
        return "TIME(0) WITHOUT TIME ZONE"

    def _type_timestamp(self, column: BaseColumn) -> str:
        return "TIMESTAMP(0) WITHOUT TIME ZONE"

    def _type_datetime(self, column: BaseColumn) -> str:
        return "TIMESTAMP(0) WITHOUT TIME ZONE"

    # ==================== Indexes and ALTER TABLE ====================

    def _index_name(self, table: str, name: str) -> str:
        return f"{table}_{name}"

    def _alter_drop_index(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"DROP INDEX {self.quote_identifier(self._index_name(schema.get_table_name(), name))}"

    def _alter_rename_column(self, schema: AlterTable, data: RenameColumn, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} RENAME COLUMN {self.quote_identifier(data.old_name)} "
            f"TO {self.quote_identifier(data.column.get_name())}"
        )

    def _alter_modify_column(self, schema: AlterTable, column: BaseColumn, ctx: RenderContext) -> str:
        """ALTER COLUMN ... TYPE, plus SET NOT NULL for not_null() columns."""
        name = self.quote_identifier(column.get_name())
        column_type = self._column_type(column).strip()
        if not column_type:
            return ""
        sql = f"ALTER TABLE {self._table(schema)} ALTER COLUMN {name} TYPE {column_type}"
        if not column.get("nullable", True):
            sql += f", ALTER COLUMN {name} SET NOT NULL"
        return sql
