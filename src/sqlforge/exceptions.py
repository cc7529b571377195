"""
Exceptions raised by the statement model and the dialect renderers.
"""

from typing import Optional


class SQLForgeError(Exception):
    """Base class for all sqlforge errors."""


class ValidationError(SQLForgeError):
    """The model handed to a renderer is not valid (bad option, incomplete key...)."""


class UnsupportedOperationError(SQLForgeError):
    """The active dialect cannot express the requested operation."""

    def __init__(self, dialect: str, operation: str, detail: Optional[str] = None):
        self.dialect = dialect
        self.operation = operation
        message = f"Operation '{operation}' is not supported by the {dialect} dialect"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedStatementError(SQLForgeError):
    """A statement cannot be rendered because of its structure (cycle, depth, unknown node)."""
