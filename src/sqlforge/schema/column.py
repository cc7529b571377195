"""
Schema column definitions

A column is a name, an optional type tag and a bag of named properties
(size, length, precision, unsigned, nullable, default, autoincrement,
description, after...). Dialects read the bag when rendering DDL.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from ..constants import COLUMN_SIZES

import logging
logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from .alter_table import AlterTable
    from .create_table import CreateTable


class ColumnType(str, Enum):
    """Closed set of column types understood by every dialect."""
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    BINARY = "binary"
    TEXT = "text"
    STRING = "string"
    FIXED = "fixed"
    TIME = "time"
    TIMESTAMP = "timestamp"
    DATE = "date"
    DATETIME = "datetime"
    ENUM = "enum"


def coerce_type(value: Union[ColumnType, str, None]) -> Union[ColumnType, str, None]:
    """Map a type name onto ColumnType; unknown names are kept as is."""
    if value is None or isinstance(value, ColumnType):
        return value
    try:
        return ColumnType(value.lower())
    except ValueError:
        logger.debug(f"Unknown column type kept verbatim: {value}")
        return value


class BaseColumn:
    """A named column with a type tag and a property bag."""

    def __init__(self, name: str, type: Union[ColumnType, str, None] = None):
        self.name = name
        self.type = coerce_type(type)
        self.properties: Dict[str, Any] = {}

    def __repr__(self) -> str:
        type_name = self.type.value if isinstance(self.type, ColumnType) else self.type
        return f"{self.__class__.__name__}({self.name!r}, {type_name!r})"

    def get_name(self) -> str:
        return self.name

    def get_type(self) -> Union[ColumnType, str, None]:
        return self.type

    def get_properties(self) -> Dict[str, Any]:
        return self.properties

    def set_type(self, type: Union[ColumnType, str]) -> "BaseColumn":
        self.type = coerce_type(type)
        return self

    def set(self, name: str, value: Any) -> "BaseColumn":
        self.properties[name] = value
        return self

    def has(self, name: str) -> bool:
        return self.properties.get(name) is not None

    def get(self, name: str, default: Any = None) -> Any:
        """Property value, or default when unset or None."""
        value = self.properties.get(name)
        return default if value is None else value

    def size(self, value: str) -> "BaseColumn":
        """Set the size tier; values outside COLUMN_SIZES are ignored."""
        value = value.lower()
        if value not in COLUMN_SIZES:
            return self
        return self.set("size", value)

    def not_null(self) -> "BaseColumn":
        return self.set("nullable", False)

    def description(self, comment: str) -> "BaseColumn":
        return self.set("description", comment)

    def default_value(self, value: Any) -> "BaseColumn":
        return self.set("default", value)

    def unsigned(self, value: bool = True) -> "BaseColumn":
        return self.set("unsigned", value)

    def length(self, value: Any) -> "BaseColumn":
        return self.set("length", value)

    def after(self, column: str) -> "BaseColumn":
        """Place the column after another one (MySQL only)."""
        return self.set("after", column)


class CreateColumn(BaseColumn):
    """Column of a CREATE TABLE; key helpers delegate to the owning table."""

    def __init__(self, table: "CreateTable", name: str, type: Union[ColumnType, str, None] = None):
        super().__init__(name, type)
        self.table = table

    def get_table(self) -> "CreateTable":
        return self.table

    def autoincrement(self, name: Optional[str] = None) -> "CreateColumn":
        self.table.autoincrement(self, name)
        return self

    def primary(self, name: Optional[str] = None) -> "CreateColumn":
        self.table.primary(self.name, name)
        return self

    def unique(self, name: Optional[str] = None) -> "CreateColumn":
        self.table.unique(self.name, name)
        return self

    def index(self, name: Optional[str] = None) -> "CreateColumn":
        self.table.index(self.name, name)
        return self


class AlterColumn(BaseColumn):
    """
    Column of an ALTER TABLE.

    Modify-in-place columns carry handle_default=False, their default
    values are managed with set_default_value / drop_default_value instead.
    """

    def __init__(self, table: "AlterTable", name: str, type: Union[ColumnType, str, None] = None):
        super().__init__(name, type)
        self.table = table

    def get_table(self) -> "AlterTable":
        return self.table

    def default_value(self, value: Any) -> "BaseColumn":
        if self.properties.get("handle_default", True):
            return super().default_value(value)
        return self

    def autoincrement(self) -> "AlterColumn":
        return self.set("autoincrement", True)
