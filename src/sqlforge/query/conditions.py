"""
Condition nodes for WHERE, HAVING and JOIN ... ON trees.

A condition list is rendered left to right; the separator of the first
node is ignored and every following node contributes its own separator.
Grouping is only ever expressed with the *Nested nodes, no precedence
re-ordering takes place.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from .expression import Expression, to_expression

AND = "AND"
OR = "OR"


@dataclass
class Condition:
    """Base class of every condition node."""
    separator: str = field(default=AND, kw_only=True)


# ==================== WHERE ====================

@dataclass
class WhereColumn(Condition):
    """column <operator> ?  (value is bound)."""
    column: Any
    operator: str
    value: Any


@dataclass
class WhereIn(Condition):
    column: Any
    values: List[Any]
    not_: bool = False


@dataclass
class WhereInSelect(Condition):
    column: Any
    subquery: Any
    not_: bool = False


@dataclass
class WhereBetween(Condition):
    column: Any
    value1: Any
    value2: Any
    not_: bool = False


@dataclass
class WhereLike(Condition):
    column: Any
    pattern: Any
    not_: bool = False


@dataclass
class WhereNull(Condition):
    column: Any
    not_: bool = False


@dataclass
class WhereExists(Condition):
    subquery: Any
    not_: bool = False


@dataclass
class WhereSubQuery(Condition):
    """column <operator> (SELECT ...)."""
    column: Any
    operator: str
    subquery: Any


@dataclass
class WhereNested(Condition):
    conditions: List[Condition]


@dataclass
class WhereNop(Condition):
    """A bare column or expression, rendered as is."""
    column: Any


# ==================== HAVING ====================

@dataclass
class HavingCondition(Condition):
    """
    aggregate <operator> value.

    The value is written into the SQL text verbatim, it is NOT bound.
    """
    aggregate: Any
    operator: str
    value: Any


@dataclass
class HavingIn(Condition):
    aggregate: Any
    values: List[Any]
    not_: bool = False


@dataclass
class HavingInSelect(Condition):
    aggregate: Any
    subquery: Any
    not_: bool = False


@dataclass
class HavingBetween(Condition):
    aggregate: Any
    value1: Any
    value2: Any
    not_: bool = False


@dataclass
class HavingNested(Condition):
    conditions: List[Condition]


# ==================== JOIN ... ON ====================

@dataclass
class JoinColumn(Condition):
    """column1 <operator> column2, both sides are identifiers."""
    column1: Any
    operator: str
    column2: Any


@dataclass
class JoinNested(Condition):
    join: "Join"


@dataclass
class JoinExpression(Condition):
    expression: Any


class Join:
    """
    Collects the ON conditions of one join.

    Usage:
        join = Join().on("users.id", "orders.user_id").or_on("users.id", "orders.owner_id")
    """

    def __init__(self):
        self.conditions: List[Condition] = []

    def get_join_conditions(self) -> List[Condition]:
        return self.conditions

    def on(self, column1: Any, column2: Any = None, operator: str = "=") -> "Join":
        return self._add_condition(column1, column2, operator, AND)

    def and_on(self, column1: Any, column2: Any = None, operator: str = "=") -> "Join":
        return self._add_condition(column1, column2, operator, AND)

    def or_on(self, column1: Any, column2: Any = None, operator: str = "=") -> "Join":
        return self._add_condition(column1, column2, operator, OR)

    def _add_condition(
        self,
        column1: Any,
        column2: Any,
        operator: str,
        separator: str
    ) -> "Join":
        # on(callback) builds a nested group, on(expr, True) a raw expression
        if callable(column1) and not isinstance(column1, Expression):
            if column2 is True:
                return self._add_expression(column1, separator)
            if column2 is None:
                join = Join()
                column1(join)
                self.conditions.append(JoinNested(join=join, separator=separator))
                return self
            column1 = Expression.from_callable(column1)
        elif isinstance(column1, Expression) and column2 is True:
            return self._add_expression(column1, separator)

        self.conditions.append(JoinColumn(
            column1=column1,
            operator=operator,
            column2=to_expression(column2),
            separator=separator
        ))
        return self

    def _add_expression(self, expression: Any, separator: str) -> "Join":
        self.conditions.append(JoinExpression(
            expression=to_expression(expression),
            separator=separator
        ))
        return self


def build_join(callback: Optional[Callable[[Join], Any]]) -> Optional[Join]:
    """Run callback against a new Join; None when there is no callback."""
    if callback is None:
        return None
    if isinstance(callback, Join):
        return callback
    join = Join()
    callback(join)
    return join
