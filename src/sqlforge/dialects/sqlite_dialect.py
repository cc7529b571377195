"""
SQLite Dialect - SQLite-specific SQL rendering
"""

from typing import Optional

from .base import CompiledQuery, DatabaseDialect, Modifier, RenderContext
from ..schema.alter_table import AlterTable, RenameColumn
from ..schema.column import BaseColumn
from ..schema.create_table import CreateTable, KeyDefinition

import logging
logger = logging.getLogger(__name__)


class SQLiteDialect(DatabaseDialect):
    """
    Dialect for SQLite databases.

    SQLite's ALTER TABLE only knows how to add, drop and rename columns and
    rename the table; constraint changes and column modifications render
    to nothing and are skipped by alter().
    """

    name = "sqlite"
    modifiers = (Modifier.NULLABLE, Modifier.DEFAULT, Modifier.AUTOINCREMENT)
    autoincrement_keyword = "AUTOINCREMENT"
    supports_engine = False

    def get_database_name(self) -> CompiledQuery:
        return CompiledQuery("SELECT file FROM pragma_database_list WHERE name = ?", ["main"])

    def get_tables(self, database: Optional[str] = None) -> CompiledQuery:
        return self._master_query("table")

    def get_views(self, database: Optional[str] = None) -> CompiledQuery:
        return self._master_query("view")

    def get_columns(self, table: str, database: Optional[str] = None) -> CompiledQuery:
        return CompiledQuery(f"PRAGMA table_info({self.quote_identifier(table)})")

    def get_view_columns(self, view: str, database: Optional[str] = None) -> CompiledQuery:
        return CompiledQuery(f"PRAGMA table_info({self.quote_identifier(view)})")

    def _master_query(self, object_type: str) -> CompiledQuery:
        q = self.quote_identifier
        sql = f"SELECT {q('name')} FROM {q('sqlite_master')} WHERE type = ?  ORDER BY {q('name')} ASC"
        return CompiledQuery(sql, [object_type])

    def rename_table(self, current: str, new: str) -> CompiledQuery:
        return CompiledQuery(f"ALTER TABLE {self.quote_identifier(current)} RENAME TO {self.quote_identifier(new)}")

    def truncate(self, table: str) -> CompiledQuery:
        # sqlite_sequence keeps the autoincrement counter
        return CompiledQuery(f"DELETE FROM {self.quote_identifier(table)}")

    # ==================== Column types ====================

    def _type_integer(self, column: BaseColumn) -> str:
        return "INTEGER"

    def _type_enum(self, column: BaseColumn) -> str:
        return ""

    def _type_time(self, column: BaseColumn) -> str:
        return "DATETIME"

    def _type_timestamp(self, column: BaseColumn) -> str:
        return "DATETIME"

    # ==================== Keys ====================

    def _modifier_autoincrement(self, column: BaseColumn, ctx: RenderContext) -> str:
        """INTEGER PRIMARY KEY AUTOINCREMENT; the table constraint is then left out."""
        modifier = super()._modifier_autoincrement(column, ctx)
        if not modifier:
            return ""
        ctx.no_primary_key = True
        return f"PRIMARY KEY {modifier}"

    def _primary_key(self, schema: CreateTable, ctx: RenderContext) -> str:
        if ctx.no_primary_key:
            return ""
        return super()._primary_key(schema, ctx)

    # ==================== ALTER TABLE ====================

    def _alter_add_unique(self, schema: AlterTable, key: KeyDefinition, ctx: RenderContext) -> str:
        return (
            f"CREATE UNIQUE INDEX {self.quote_identifier(key.name)} "
            f"ON {self._table(schema)} ({self._key_columns(key.columns)})"
        )

    def _alter_drop_unique(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"DROP INDEX {self.quote_identifier(name)}"

    def _alter_drop_index(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"DROP INDEX {self.quote_identifier(name)}"

    def _alter_rename_column(self, schema: AlterTable, data: RenameColumn, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} RENAME COLUMN {self.quote_identifier(data.old_name)} "
            f"TO {self.quote_identifier(data.column.get_name())}"
        )

    def _alter_modify_column(self, schema, column, ctx) -> str:
        return ""

    def _alter_add_primary(self, schema, key, ctx) -> str:
        return ""

    def _alter_drop_primary(self, schema, name, ctx) -> str:
        return ""

    def _alter_add_foreign(self, schema, data, ctx) -> str:
        return ""

    def _alter_drop_foreign(self, schema, name, ctx) -> str:
        return ""

    def _alter_set_default(self, schema, data, ctx) -> str:
        return ""

    def _alter_drop_default(self, schema, column, ctx) -> str:
        return ""
