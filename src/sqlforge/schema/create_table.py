"""
CREATE TABLE definitions
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .column import ColumnType, CreateColumn
from .foreign_key import ForeignKey
from ..constants import (
    COLUMN_SIZES,
    DEFAULT_COLUMN_SIZE,
    DEFAULT_STRING_LENGTH,
    FOREIGN_KEY_SUFFIX,
    INDEX_KEY_SUFFIX,
    PRIMARY_KEY_SUFFIX,
    UNIQUE_KEY_SUFFIX,
)

import logging
logger = logging.getLogger(__name__)

Columns = Union[str, List[str]]


@dataclass
class KeyDefinition:
    """A named primary/unique/index key over an ordered column list."""
    name: str
    columns: List[str]


def key_name(table: str, suffix: str, columns: List[str]) -> str:
    """Default key name: {table}_{suffix}_{col1_col2...}."""
    return f"{table}_{suffix}_{'_'.join(columns)}"


def as_column_list(columns: Columns) -> List[str]:
    if isinstance(columns, (list, tuple)):
        return list(columns)
    return [columns]


class CreateTable:
    """
    Definition of a new table: columns, keys, foreign keys and engine.

    Usage:
        table = CreateTable("users")
        table.integer("id").autoincrement()
        table.string("email", 120).not_null().unique()
    """

    def __init__(self, table: str):
        self.table = table
        self.columns: Dict[str, CreateColumn] = {}
        self.primary_key: Optional[KeyDefinition] = None
        self.unique_keys: Dict[str, List[str]] = {}
        self.indexes: Dict[str, List[str]] = {}
        self.foreign_keys: Dict[str, ForeignKey] = {}
        self.engine_name: Optional[str] = None
        self.has_autoincrement: Optional[bool] = None

    def get_table_name(self) -> str:
        return self.table

    def get_columns(self) -> Dict[str, CreateColumn]:
        return self.columns

    def get_primary_key(self) -> Optional[KeyDefinition]:
        return self.primary_key

    def get_unique_keys(self) -> Dict[str, List[str]]:
        return self.unique_keys

    def get_indexes(self) -> Dict[str, List[str]]:
        return self.indexes

    def get_foreign_keys(self) -> Dict[str, ForeignKey]:
        return self.foreign_keys

    def get_engine(self) -> Optional[str]:
        return self.engine_name

    def get_autoincrement(self) -> Optional[bool]:
        return self.has_autoincrement

    # ==================== Keys ====================

    def engine(self, name: Optional[str]) -> "CreateTable":
        self.engine_name = name
        return self

    def primary(self, columns: Columns, name: Optional[str] = None) -> "CreateTable":
        columns = as_column_list(columns)
        if name is None:
            name = key_name(self.table, PRIMARY_KEY_SUFFIX, columns)
        self.primary_key = KeyDefinition(name=name, columns=columns)
        return self

    def unique(self, columns: Columns, name: Optional[str] = None) -> "CreateTable":
        columns = as_column_list(columns)
        if name is None:
            name = key_name(self.table, UNIQUE_KEY_SUFFIX, columns)
        self.unique_keys[name] = columns
        return self

    def index(self, columns: Columns, name: Optional[str] = None) -> "CreateTable":
        columns = as_column_list(columns)
        if name is None:
            name = key_name(self.table, INDEX_KEY_SUFFIX, columns)
        self.indexes[name] = columns
        return self

    def foreign(self, columns: Columns, name: Optional[str] = None) -> ForeignKey:
        columns = as_column_list(columns)
        if name is None:
            name = key_name(self.table, FOREIGN_KEY_SUFFIX, columns)
        foreign_key = ForeignKey(columns)
        self.foreign_keys[name] = foreign_key
        return foreign_key

    def autoincrement(self, column: CreateColumn, name: Optional[str] = None) -> "CreateTable":
        """Flag an integer column as autoincrement and make it the primary key."""
        if column.get_type() != ColumnType.INTEGER:
            logger.debug(f"Autoincrement ignored on non integer column {column.get_name()}")
            return self
        if column.get("size", DEFAULT_COLUMN_SIZE) not in COLUMN_SIZES:
            return self
        self.has_autoincrement = True
        column.set("autoincrement", True)
        return self.primary(column.get_name(), name)

    # ==================== Columns ====================

    def integer(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.INTEGER)

    def float(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.FLOAT)

    def double(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.DOUBLE)

    def decimal(self, name: str, length: Optional[int] = None, precision: Optional[int] = None) -> CreateColumn:
        column = self._add_column(name, ColumnType.DECIMAL)
        column.length(length)
        column.set("precision", precision)
        return column

    def boolean(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.BOOLEAN)

    def binary(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.BINARY)

    def string(self, name: str, length: int = DEFAULT_STRING_LENGTH) -> CreateColumn:
        column = self._add_column(name, ColumnType.STRING)
        column.length(length)
        return column

    def fixed(self, name: str, length: int = DEFAULT_STRING_LENGTH) -> CreateColumn:
        column = self._add_column(name, ColumnType.FIXED)
        column.length(length)
        return column

    def enum(self, name: str, values: List[str]) -> CreateColumn:
        column = self._add_column(name, ColumnType.ENUM)
        column.set("values", list(values))
        return column

    def text(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.TEXT)

    def time(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.TIME)

    def timestamp(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.TIMESTAMP)

    def date(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.DATE)

    def datetime(self, name: str) -> CreateColumn:
        return self._add_column(name, ColumnType.DATETIME)

    def soft_delete(self, column: str = "deleted_at") -> "CreateTable":
        self.datetime(column)
        return self

    def timestamps(self, create_column: str = "created_at", update_column: str = "updated_at") -> "CreateTable":
        self.datetime(create_column).not_null()
        self.datetime(update_column)
        return self

    def _add_column(self, name: str, type: ColumnType) -> CreateColumn:
        column = CreateColumn(self, name, type)
        self.columns[name] = column
        return column
