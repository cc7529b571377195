"""
Schema model - table, column and key definitions for DDL rendering.
"""

from .alter_table import AlterCommand, AlterCommandType, AlterTable
from .column import AlterColumn, BaseColumn, ColumnType, CreateColumn
from .create_table import CreateTable, KeyDefinition
from .foreign_key import ForeignKey

__all__ = [
    "AlterCommand",
    "AlterCommandType",
    "AlterTable",
    "AlterColumn",
    "BaseColumn",
    "ColumnType",
    "CreateColumn",
    "CreateTable",
    "KeyDefinition",
    "ForeignKey",
]
