"""
ALTER TABLE definitions

An AlterTable is an ordered list of commands. Each command is rendered on
its own and may produce one statement, or none when the dialect has no
way to express it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from .column import AlterColumn, ColumnType
from .create_table import Columns, KeyDefinition, as_column_list, key_name
from .foreign_key import ForeignKey
from ..constants import (
    DEFAULT_STRING_LENGTH,
    FOREIGN_KEY_SUFFIX,
    INDEX_KEY_SUFFIX,
    PRIMARY_KEY_SUFFIX,
    UNIQUE_KEY_SUFFIX,
)


class AlterCommandType(Enum):
    ADD_COLUMN = "addColumn"
    MODIFY_COLUMN = "modifyColumn"
    DROP_COLUMN = "dropColumn"
    RENAME_COLUMN = "renameColumn"
    ADD_PRIMARY = "addPrimary"
    DROP_PRIMARY_KEY = "dropPrimaryKey"
    ADD_UNIQUE = "addUnique"
    DROP_UNIQUE_KEY = "dropUniqueKey"
    ADD_INDEX = "addIndex"
    DROP_INDEX = "dropIndex"
    ADD_FOREIGN = "addForeign"
    DROP_FOREIGN_KEY = "dropForeignKey"
    SET_DEFAULT_VALUE = "setDefaultValue"
    DROP_DEFAULT_VALUE = "dropDefaultValue"


@dataclass
class AlterCommand:
    type: AlterCommandType
    data: Any


@dataclass
class RenameColumn:
    """
    Payload of a rename.

    column_type is only needed by dialects that restate the type (MySQL CHANGE);
    it is either a ColumnType or a raw type string such as "varchar(64)".
    """
    old_name: str
    column: AlterColumn
    column_type: Union[ColumnType, str, None] = None


@dataclass
class AddForeign:
    name: str
    foreign_key: ForeignKey


@dataclass
class DefaultValue:
    column: str
    value: Any


class AlterTable:
    """
    Ordered list of changes to an existing table.

    Usage:
        table = AlterTable("users")
        table.string("nickname", 64)
        table.rename_column("email", "mail")
        table.drop_index("users_ik_age")
    """

    def __init__(self, table: str):
        self.table = table
        self.commands: List[AlterCommand] = []

    def get_table_name(self) -> str:
        return self.table

    def get_commands(self) -> List[AlterCommand]:
        return self.commands

    # ==================== Drops ====================

    def drop_index(self, name: str) -> "AlterTable":
        return self._add_command(AlterCommandType.DROP_INDEX, name)

    def drop_unique(self, name: str) -> "AlterTable":
        return self._add_command(AlterCommandType.DROP_UNIQUE_KEY, name)

    def drop_primary(self, name: str) -> "AlterTable":
        return self._add_command(AlterCommandType.DROP_PRIMARY_KEY, name)

    def drop_foreign(self, name: str) -> "AlterTable":
        return self._add_command(AlterCommandType.DROP_FOREIGN_KEY, name)

    def drop_column(self, name: str) -> "AlterTable":
        return self._add_command(AlterCommandType.DROP_COLUMN, name)

    def drop_default_value(self, column: str) -> "AlterTable":
        return self._add_command(AlterCommandType.DROP_DEFAULT_VALUE, column)

    # ==================== Keys and defaults ====================

    def rename_column(
        self,
        old_name: str,
        new_name: str,
        column_type: Union[ColumnType, str, None] = None
    ) -> "AlterTable":
        return self._add_command(
            AlterCommandType.RENAME_COLUMN,
            RenameColumn(old_name, AlterColumn(self, new_name), column_type)
        )

    def primary(self, columns: Columns, name: Optional[str] = None) -> "AlterTable":
        return self._add_key(AlterCommandType.ADD_PRIMARY, PRIMARY_KEY_SUFFIX, columns, name)

    def unique(self, columns: Columns, name: Optional[str] = None) -> "AlterTable":
        return self._add_key(AlterCommandType.ADD_UNIQUE, UNIQUE_KEY_SUFFIX, columns, name)

    def index(self, columns: Columns, name: Optional[str] = None) -> "AlterTable":
        return self._add_key(AlterCommandType.ADD_INDEX, INDEX_KEY_SUFFIX, columns, name)

    def foreign(self, columns: Columns, name: Optional[str] = None) -> ForeignKey:
        columns = as_column_list(columns)
        if name is None:
            name = key_name(self.table, FOREIGN_KEY_SUFFIX, columns)
        foreign_key = ForeignKey(columns)
        self._add_command(AlterCommandType.ADD_FOREIGN, AddForeign(name, foreign_key))
        return foreign_key

    def set_default_value(self, column: str, value: Any) -> "AlterTable":
        return self._add_command(AlterCommandType.SET_DEFAULT_VALUE, DefaultValue(column, value))

    # ==================== New columns ====================

    def integer(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.INTEGER)

    def float(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.FLOAT)

    def double(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.DOUBLE)

    def decimal(self, name: str, length: Optional[int] = None, precision: Optional[int] = None) -> AlterColumn:
        column = self._add_column(name, ColumnType.DECIMAL)
        column.set("length", length).set("precision", precision)
        return column

    def boolean(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.BOOLEAN)

    def binary(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.BINARY)

    def string(self, name: str, length: int = DEFAULT_STRING_LENGTH) -> AlterColumn:
        column = self._add_column(name, ColumnType.STRING)
        column.set("length", length)
        return column

    def fixed(self, name: str, length: int = DEFAULT_STRING_LENGTH) -> AlterColumn:
        column = self._add_column(name, ColumnType.FIXED)
        column.set("length", length)
        return column

    def text(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.TEXT)

    def time(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.TIME)

    def timestamp(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.TIMESTAMP)

    def date(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.DATE)

    def datetime(self, name: str) -> AlterColumn:
        return self._add_column(name, ColumnType.DATETIME)

    # ==================== Modified columns ====================

    def to_integer(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.INTEGER)

    def to_float(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.FLOAT)

    def to_double(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.DOUBLE)

    def to_decimal(self, name: str, length: Optional[int] = None, precision: Optional[int] = None) -> AlterColumn:
        column = self._modify_column(name, ColumnType.DECIMAL)
        column.set("length", length).set("precision", precision)
        return column

    def to_boolean(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.BOOLEAN)

    def to_binary(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.BINARY)

    def to_string(self, name: str, length: int = DEFAULT_STRING_LENGTH) -> AlterColumn:
        column = self._modify_column(name, ColumnType.STRING)
        column.set("length", length)
        return column

    def to_fixed(self, name: str, length: int = DEFAULT_STRING_LENGTH) -> AlterColumn:
        column = self._modify_column(name, ColumnType.FIXED)
        column.set("length", length)
        return column

    def to_text(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.TEXT)

    def to_time(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.TIME)

    def to_timestamp(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.TIMESTAMP)

    def to_date(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.DATE)

    def to_datetime(self, name: str) -> AlterColumn:
        return self._modify_column(name, ColumnType.DATETIME)

    # ==================== Internals ====================

    def _add_command(self, command_type: AlterCommandType, data: Any) -> "AlterTable":
        self.commands.append(AlterCommand(command_type, data))
        return self

    def _add_key(
        self,
        command_type: AlterCommandType,
        suffix: str,
        columns: Columns,
        name: Optional[str]
    ) -> "AlterTable":
        columns = as_column_list(columns)
        if name is None:
            name = key_name(self.table, suffix, columns)
        return self._add_command(command_type, KeyDefinition(name=name, columns=columns))

    def _add_column(self, name: str, type: ColumnType) -> AlterColumn:
        column = AlterColumn(self, name, type)
        self._add_command(AlterCommandType.ADD_COLUMN, column)
        return column

    def _modify_column(self, name: str, type: ColumnType) -> AlterColumn:
        column = AlterColumn(self, name, type)
        column.set("handle_default", False)
        self._add_command(AlterCommandType.MODIFY_COLUMN, column)
        return column
