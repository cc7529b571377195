"""
Oracle Dialect - Oracle-specific SQL rendering
"""

from typing import Optional

from .base import CompiledQuery, DatabaseDialect, Modifier, RenderContext
from ..constants import DEFAULT_STRING_LENGTH, PAGINATION_ROWNUM_ALIAS, PAGINATION_TABLE_ALIAS
from ..query.statement import QueryStatement
from ..schema.alter_table import AlterTable, DefaultValue, RenameColumn
from ..schema.column import BaseColumn

import logging
logger = logging.getLogger(__name__)


class OracleDialect(DatabaseDialect):
    """
    Dialect for Oracle databases.

    Identifiers are upper-cased before quoting, which matches how Oracle
    stores unquoted names. Row limiting wraps the query in ROWNUM filters.
    """

    name = "oracle"
    modifiers = (Modifier.NULLABLE, Modifier.DEFAULT, Modifier.AUTOINCREMENT)
    autoincrement_keyword = "GENERATED BY DEFAULT ON NULL AS IDENTITY"
    supports_engine = False

    _INTEGER_TYPES = {
        "tiny": "NUMBER(3)",
        "small": "NUMBER(5)",
        "normal": "NUMBER(10)",
        "medium": "NUMBER(7)",
        "big": "NUMBER(19)",
    }

    def _quote_segment(self, segment: str) -> str:
        return super()._quote_segment(segment.upper())

    # ==================== Query statements ====================

    def _select_sql(self, statement: QueryStatement, ctx: RenderContext) -> str:
        limit = statement.limit
        if limit <= 0:
            self._check_bare_offset(statement)
            return super()._select_sql(statement, ctx)

        inner = self._select_body(statement, ctx, with_into=False)
        offset = statement.offset
        if offset < 0:
            return f"SELECT * FROM ({inner}) {PAGINATION_TABLE_ALIAS} WHERE ROWNUM <= {int(limit)}"

        alias = PAGINATION_TABLE_ALIAS
        return (
            f"SELECT * FROM (SELECT {alias}.*, ROWNUM AS {PAGINATION_ROWNUM_ALIAS} FROM ({inner}) {alias} "
            f"WHERE ROWNUM <= {int(limit) + int(offset)}) WHERE {PAGINATION_ROWNUM_ALIAS} >= {int(offset) + 1}"
        )

    # ==================== Schema ====================

    def rename_table(self, current: str, new: str) -> CompiledQuery:
        return CompiledQuery(f"ALTER TABLE {self.quote_identifier(current)} RENAME TO {self.quote_identifier(new)}")

    def _type_integer(self, column: BaseColumn) -> str:
        return self._INTEGER_TYPES.get(self._size(column), "NUMBER(10)")

    def _type_double(self, column: BaseColumn) -> str:
        return "FLOAT(24)"

    def _type_decimal(self, column: BaseColumn) -> str:
        return self._precision_type("NUMBER", column, default="NUMBER(10)")

    def _type_boolean(self, column: BaseColumn) -> str:
        return "NUMBER(1)"

    def _type_text(self, column: BaseColumn) -> str:
        return "VARCHAR2(2000)" if self._size(column) in ("tiny", "small") else "CLOB"

    def _type_string(self, column: BaseColumn) -> str:
        return f"VARCHAR2({self._literal(column.get('length', DEFAULT_STRING_LENGTH))})"

    def _type_time(self, column: BaseColumn) -> str:
        return "DATE"

    def _type_datetime(self, column: BaseColumn) -> str:
        return "DATE"

    def _type_binary(self, column: BaseColumn) -> str:
        return "RAW(2000)" if self._size(column) in ("tiny", "small") else "BLOB"

    def _alter_modify_column(self, schema: AlterTable, column: BaseColumn, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} MODIFY {self._schema_column(column, ctx)}"

    def _alter_add_column(self, schema: AlterTable, column: BaseColumn, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} ADD {self._schema_column(column, ctx)}"

    def _alter_set_default(self, schema: AlterTable, data: DefaultValue, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} MODIFY {self.quote_identifier(data.column)} "
            f"DEFAULT {self._literal(data.value, ctx)}"
        )

    def _alter_drop_default(self, schema: AlterTable, column: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} MODIFY {self.quote_identifier(column)} DEFAULT NULL"

    def _alter_drop_index(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"DROP INDEX {self.quote_identifier(name)}"

    def _alter_rename_column(self, schema: AlterTable, data: RenameColumn, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} RENAME COLUMN {self.quote_identifier(data.old_name)} "
            f"TO {self.quote_identifier(data.column.get_name())}"
        )

    # ==================== Catalog queries ====================

    def get_database_name(self) -> CompiledQuery:
        return CompiledQuery("SELECT user FROM dual")

    def get_tables(self, database: Optional[str] = None) -> CompiledQuery:
        return self._owner_objects("table_name", "all_tables", database)

    def get_views(self, database: Optional[str] = None) -> CompiledQuery:
        return self._owner_objects("view_name", "all_views", database)

    def get_columns(self, table: str, database: Optional[str] = None) -> CompiledQuery:
        q = self.quote_identifier
        sql = (
            f"SELECT {q('column_name')} AS {q('name')}, {q('data_type')} AS {q('type')} "
            f"FROM {q('all_tab_columns')} WHERE LOWER({q('owner')}) = ? "
            f"AND LOWER({q('table_name')}) = ? ORDER BY {q('column_id')} ASC"
        )
        return CompiledQuery(sql, [self._database(database), table])

    def get_view_columns(self, view: str, database: Optional[str] = None) -> CompiledQuery:
        return self.get_columns(view, database)

    def _owner_objects(self, column: str, catalog: str, database: Optional[str]) -> CompiledQuery:
        q = self.quote_identifier
        sql = f"SELECT {q(column)} FROM {q(catalog)} WHERE owner = ?  ORDER BY {q(column)} ASC"
        return CompiledQuery(sql, [self._database(database)])
