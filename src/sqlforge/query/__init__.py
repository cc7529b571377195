"""
Statement model - expressions, conditions and query statements.
"""

from .conditions import AND, OR, Join
from .expression import Expression, ExpressionNode, FunctionKind, NodeType, SqlFunction, aggregate
from .statement import JoinClause, OrderBy, QueryStatement, SelectColumn, UpdateColumn

__all__ = [
    "AND",
    "OR",
    "Join",
    "Expression",
    "ExpressionNode",
    "FunctionKind",
    "NodeType",
    "SqlFunction",
    "aggregate",
    "JoinClause",
    "OrderBy",
    "QueryStatement",
    "SelectColumn",
    "UpdateColumn",
]
