"""
SQL Server Dialect - SQL Server-specific SQL rendering
"""

from .base import CompiledQuery, DatabaseDialect, Modifier, RenderContext
from ..constants import (
    DEFAULT_STRING_LENGTH,
    PAGINATION_ROWNUM_ALIAS,
    PAGINATION_TABLE_ALIAS,
    SQLSERVER_DATE_FORMAT,
)
from ..query.statement import QueryStatement
from ..schema.alter_table import AlterTable, DefaultValue, RenameColumn
from ..schema.column import BaseColumn

import logging
logger = logging.getLogger(__name__)


class SQLServerDialect(DatabaseDialect):
    """
    Dialect for SQL Server databases.

    Row limiting uses TOP, or a ROW_NUMBER() window when an offset is set.
    """

    name = "sqlserver"
    default_date_format = SQLSERVER_DATE_FORMAT
    modifiers = (Modifier.NULLABLE, Modifier.DEFAULT, Modifier.AUTOINCREMENT)
    autoincrement_keyword = "IDENTITY"
    supports_engine = False
    catalog_type_column = "data_type"

    _INTEGER_TYPES = {
        "tiny": "TINYINT",
        "small": "SMALLINT",
        "big": "BIGINT",
    }

    # ==================== Query statements ====================

    def _select_sql(self, statement: QueryStatement, ctx: RenderContext) -> str:
        limit = statement.limit
        if limit <= 0:
            self._check_bare_offset(statement)
            return super()._select_sql(statement, ctx)

        offset = statement.offset
        sql = "SELECT DISTINCT " if statement.distinct else "SELECT "
        if offset < 0:
            sql += f"TOP {int(limit)} "
            sql += self._column_list(statement.columns, ctx)
            sql += self._into(statement.into_table, ctx)
            sql += " FROM "
            sql += self._table_list(statement.tables, ctx)
            sql += self._joins(statement.joins, ctx)
            sql += self._wheres(statement.wheres, ctx)
            sql += self._group_by(statement.group, ctx)
            sql += self._having(statement.having, ctx)
            sql += self._orders(statement.order, ctx)
            return sql

        sql += self._column_list(statement.columns, ctx)
        order = self._orders(statement.order, ctx).strip() or "ORDER BY (SELECT 0)"
        sql += f", ROW_NUMBER() OVER ({order}) AS {PAGINATION_ROWNUM_ALIAS}"
        sql += " FROM "
        sql += self._table_list(statement.tables, ctx)
        sql += self._joins(statement.joins, ctx)
        sql += self._wheres(statement.wheres, ctx)
        sql += self._group_by(statement.group, ctx)
        sql += self._having(statement.having, ctx)
        return (
            f"SELECT * FROM ({sql}) AS {PAGINATION_TABLE_ALIAS} "
            f"WHERE {PAGINATION_ROWNUM_ALIAS} BETWEEN {int(offset) + 1} AND {int(limit) + int(offset)}"
        )

    def _render_update(self, statement: QueryStatement, ctx: RenderContext) -> str:
        """With joins the UPDATE targets the aliases and the tables move to FROM."""
        if not statement.joins:
            return super()._render_update(statement, ctx)

        targets = ", ".join(
            self._identifier(alias if alias is not None else name, ctx)
            for name, alias in statement.tables
        )
        sql = f"UPDATE {targets}"
        sql += self._set_columns(statement.columns, ctx)
        sql += f" FROM {self._table_list(statement.tables, ctx)}"
        sql += self._joins(statement.joins, ctx)
        sql += self._wheres(statement.wheres, ctx)
        return sql

    # ==================== Schema ====================

    def rename_table(self, current: str, new: str) -> CompiledQuery:
        return CompiledQuery(f"sp_rename {self.quote_identifier(current)}, {self.quote_identifier(new)}")

    def _type_integer(self, column: BaseColumn) -> str:
        return self._INTEGER_TYPES.get(self._size(column), "INTEGER")

    def _type_decimal(self, column: BaseColumn) -> str:
        return self._precision_type("DECIMAL", column)

    def _type_boolean(self, column: BaseColumn) -> str:
        return "BIT"

    def _type_string(self, column: BaseColumn) -> str:
        return f"NVARCHAR({self._literal(column.get('length', DEFAULT_STRING_LENGTH))})"

    def _type_fixed(self, column: BaseColumn) -> str:
        return f"NCHAR({self._literal(column.get('length', DEFAULT_STRING_LENGTH))})"

    def _type_text(self, column: BaseColumn) -> str:
        return "NVARCHAR(max)"

    def _type_binary(self, column: BaseColumn) -> str:
        return "VARBINARY(max)"

    def _type_timestamp(self, column: BaseColumn) -> str:
        return "DATETIME"

    def _alter_rename_column(self, schema: AlterTable, data: RenameColumn, ctx: RenderContext) -> str:
        # sp_rename takes the current column as one 'table.column' string
        current = self._literal(f"{schema.get_table_name()}.{data.old_name}")
        return f"sp_rename {current}, {self.quote_identifier(data.column.get_name())}, COLUMN"

    def _alter_add_column(self, schema: AlterTable, column: BaseColumn, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} ADD {self._schema_column(column, ctx)}"

    def _alter_modify_column(self, schema: AlterTable, column: BaseColumn, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} ALTER COLUMN {self._schema_column(column, ctx)}"

    def _alter_set_default(self, schema: AlterTable, data: DefaultValue, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} ADD DEFAULT {self._literal(data.value, ctx)} "
            f"FOR {self.quote_identifier(data.column)}"
        )

    def _alter_drop_default(self, schema: AlterTable, column: str, ctx: RenderContext) -> str:
        # defaults are named constraints here; dropping one needs its name
        return ""

    # ==================== Catalog queries ====================

    def get_database_name(self) -> CompiledQuery:
        return CompiledQuery("SELECT SCHEMA_NAME()")
