"""
MySQL Dialect - MySQL/MariaDB-specific SQL rendering
"""

from .base import DatabaseDialect, RenderContext
from ..schema.alter_table import AlterTable, DefaultValue, RenameColumn
from ..schema.column import BaseColumn, ColumnType

import logging
logger = logging.getLogger(__name__)

# MySQL has no way to look up the current type of the renamed column here
DEFAULT_RENAME_TYPE = "integer"


class MySQLDialect(DatabaseDialect):
    """Dialect for MySQL and MariaDB databases."""

    name = "mysql"

    _INTEGER_TYPES = {
        "tiny": "TINYINT",
        "small": "SMALLINT",
        "medium": "MEDIUMINT",
        "big": "BIGINT",
    }
    _TEXT_TYPES = {
        "tiny": "TINYTEXT",
        "small": "TINYTEXT",
        "medium": "MEDIUMTEXT",
        "big": "LONGTEXT",
    }
    _BLOB_TYPES = {
        "tiny": "TINYBLOB",
        "small": "TINYBLOB",
        "medium": "MEDIUMBLOB",
        "big": "LONGBLOB",
    }

    # ==================== Column types ====================

    def _type_integer(self, column: BaseColumn) -> str:
        return self._INTEGER_TYPES.get(self._size(column), "INT")

    def _type_decimal(self, column: BaseColumn) -> str:
        return self._precision_type("DECIMAL", column)

    def _type_enum(self, column: BaseColumn) -> str:
        values = column.get("values")
        if not values:
            return "ENUM"
        return f"ENUM({','.join(self._literal(value) for value in values)})"

    def _type_boolean(self, column: BaseColumn) -> str:
        return "TINYINT(1)"

    def _type_text(self, column: BaseColumn) -> str:
        return self._TEXT_TYPES.get(self._size(column), "TEXT")

    def _type_binary(self, column: BaseColumn) -> str:
        return self._BLOB_TYPES.get(self._size(column), "BLOB")

    # ==================== ALTER TABLE ====================

    def _alter_drop_primary(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} DROP PRIMARY KEY"

    def _alter_drop_unique(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} DROP INDEX {self.quote_identifier(name)}"

    def _alter_drop_index(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} DROP INDEX {self.quote_identifier(name)}"

    def _alter_drop_foreign(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} DROP FOREIGN KEY {self.quote_identifier(name)}"

    def _alter_set_default(self, schema: AlterTable, data: DefaultValue, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} ALTER {self.quote_identifier(data.column)} "
            f"SET DEFAULT {self._literal(data.value, ctx)}"
        )

    def _alter_drop_default(self, schema: AlterTable, column: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} ALTER {self.quote_identifier(column)} DROP DEFAULT"

    def _alter_rename_column(self, schema: AlterTable, data: RenameColumn, ctx: RenderContext) -> str:
        """
        CHANGE restates the column type.

        A ColumnType is rendered with this dialect's type table, a string is
        used as is; without either the column is declared as integer.
        """
        new_name = data.column.get_name()
        column_type = data.column_type
        if isinstance(column_type, ColumnType):
            column_type = self._column_type(BaseColumn(new_name, column_type)).strip()
        if not column_type:
            logger.debug(f"No type given for renamed column {data.old_name}, using {DEFAULT_RENAME_TYPE}")
            column_type = DEFAULT_RENAME_TYPE
        return (
            f"ALTER TABLE {self._table(schema)} CHANGE {self.quote_identifier(data.old_name)} "
            f"{self.quote_identifier(new_name)} {column_type}"
        )
