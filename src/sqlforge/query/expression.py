"""
Expression Model - dialect-neutral scalar expressions

An Expression is an ordered list of tagged nodes. Renderers join the node
renderings with single spaces, in insertion order:

    expr = Expression().column("price").op("*").value(2)
    # MySQL:  `price` * ?     params: [2]
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Union

from ..exceptions import ValidationError

import logging
logger = logging.getLogger(__name__)


class NodeType(Enum):
    """Kinds of expression nodes."""
    COLUMN = "column"
    OP = "op"
    VALUE = "value"
    GROUP = "group"
    FUNCTION = "function"
    SUBQUERY = "subquery"


class FunctionKind(Enum):
    """Families of SQL functions known to the renderers."""
    AGGREGATE = "aggregate"


@dataclass
class SqlFunction:
    """A function call node payload, e.g. COUNT(DISTINCT col)."""
    kind: FunctionKind
    name: str
    column: Any
    distinct: bool = False


@dataclass(frozen=True)
class ExpressionNode:
    """One tagged node of an expression."""
    type: NodeType
    value: Any


@dataclass
class Expression:
    """
    Ordered list of expression nodes.

    Every builder method returns the expression itself so nodes can be chained.
    """
    nodes: List[ExpressionNode] = field(default_factory=list)

    @classmethod
    def from_callable(cls, callback: Callable[["Expression"], Any]) -> "Expression":
        """Build an expression by invoking callback on a fresh instance."""
        expression = cls()
        callback(expression)
        return expression

    def column(self, name: Union[str, "Expression"]) -> "Expression":
        return self._add(NodeType.COLUMN, name)

    def op(self, token: str) -> "Expression":
        return self._add(NodeType.OP, token)

    def value(self, value: Any) -> "Expression":
        return self._add(NodeType.VALUE, value)

    def group(self, callback: Callable[["Expression"], Any]) -> "Expression":
        """Add a parenthesized sub-expression built by callback."""
        return self._add(NodeType.GROUP, Expression.from_callable(callback))

    def from_(self, tables):
        """
        Embed a correlated subquery selecting from tables.

        Returns the new sub-statement so the caller can fill it in.
        """
        from .statement import QueryStatement

        statement = QueryStatement()
        statement.add_tables(tables)
        self._add(NodeType.SUBQUERY, statement)
        return statement

    def subquery(self, statement) -> "Expression":
        """Embed an already built statement as a subquery."""
        return self._add(NodeType.SUBQUERY, statement)

    # ==================== Aggregate functions ====================

    def count(self, column: Any = "*", distinct: bool = False) -> "Expression":
        """COUNT over one or more columns; several columns imply DISTINCT."""
        if not isinstance(column, (list, tuple)):
            column = [column]
        columns = [to_expression(c) for c in column]
        distinct = distinct or len(columns) > 1
        return self._add_function("COUNT", columns, distinct)

    def sum(self, column: Any, distinct: bool = False) -> "Expression":
        return self._add_function("SUM", to_expression(column), distinct)

    def avg(self, column: Any, distinct: bool = False) -> "Expression":
        return self._add_function("AVG", to_expression(column), distinct)

    def min(self, column: Any, distinct: bool = False) -> "Expression":
        return self._add_function("MIN", to_expression(column), distinct)

    def max(self, column: Any, distinct: bool = False) -> "Expression":
        return self._add_function("MAX", to_expression(column), distinct)

    def is_empty(self) -> bool:
        return not self.nodes

    def _add_function(self, name: str, column: Any, distinct: bool) -> "Expression":
        function = SqlFunction(
            kind=FunctionKind.AGGREGATE,
            name=name,
            column=column,
            distinct=distinct
        )
        return self._add(NodeType.FUNCTION, function)

    def _add(self, node_type: NodeType, value: Any) -> "Expression":
        self.nodes.append(ExpressionNode(node_type, value))
        return self


def to_expression(value: Any) -> Any:
    """
    Convert a callback into an Expression, leave anything else untouched.

    Callbacks receive a fresh Expression, the same way group() does.
    """
    if isinstance(value, Expression) or isinstance(value, type):
        return value
    if callable(value):
        return Expression.from_callable(value)
    return value


def aggregate(name: str, column: Any, distinct: bool = False) -> Expression:
    """Shortcut returning a one-node expression for an aggregate function."""
    builder = {
        "COUNT": Expression.count,
        "SUM": Expression.sum,
        "AVG": Expression.avg,
        "MIN": Expression.min,
        "MAX": Expression.max,
    }.get(name.upper())
    if builder is None:
        raise ValidationError(f"Unknown aggregate function: {name}")
    return builder(Expression(), column, distinct)
