"""
Statement Model - the dialect-neutral description of one SQL statement

A QueryStatement only stores clauses; turning it into SQL is the job of a
DatabaseDialect. The add_* mutators convert callbacks into expressions and
sub-statements at definition time, so the renderer only ever sees plain data.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .conditions import (
    AND,
    Condition,
    HavingBetween,
    HavingCondition,
    HavingIn,
    HavingInSelect,
    HavingNested,
    Join,
    WhereBetween,
    WhereColumn,
    WhereExists,
    WhereIn,
    WhereInSelect,
    WhereLike,
    WhereNested,
    WhereNop,
    WhereNull,
    WhereSubQuery,
    build_join,
)
from .expression import Expression, to_expression
from ..constants import JOIN_TYPES, ORDER_DIRECTIONS
from ..exceptions import ValidationError

import logging
logger = logging.getLogger(__name__)

# (name, alias) pairs; name may also be an Expression (derived table)
TableList = List[Tuple[Any, Optional[str]]]


@dataclass
class SelectColumn:
    name: Any
    alias: Optional[str] = None


@dataclass
class OrderBy:
    columns: List[Any]
    direction: str = "ASC"


@dataclass
class JoinClause:
    type: str
    tables: TableList
    join: Optional[Join] = None


@dataclass
class UpdateColumn:
    column: str
    value: Any


def normalize_tables(tables: Union[str, Expression, List[Any], Dict[str, str], None]) -> TableList:
    """
    Turn the accepted table notations into (name, alias) pairs.

    "users"                        -> [("users", None)]
    ["users", "orders"]            -> [("users", None), ("orders", None)]
    {"users": "u", "orders": "o"}  -> [("users", "u"), ("orders", "o")]
    """
    if tables is None:
        return []
    if isinstance(tables, dict):
        return [(to_expression(name), alias) for name, alias in tables.items()]
    if isinstance(tables, (list, tuple)):
        result = []
        for table in tables:
            if isinstance(table, tuple) and len(table) == 2:
                result.append((to_expression(table[0]), table[1]))
            else:
                result.append((to_expression(table), None))
        return result
    return [(to_expression(tables), None)]


@dataclass
class QueryStatement:
    """
    Clauses of one SELECT / INSERT / UPDATE / DELETE statement.

    limit == 0 means unbounded, a negative offset means "no offset".
    """
    wheres: List[Condition] = field(default_factory=list)
    having: List[Condition] = field(default_factory=list)
    joins: List[JoinClause] = field(default_factory=list)
    tables: TableList = field(default_factory=list)
    columns: List[Any] = field(default_factory=list)
    order: List[OrderBy] = field(default_factory=list)
    group: List[Any] = field(default_factory=list)
    from_tables: TableList = field(default_factory=list)
    values: List[Any] = field(default_factory=list)
    distinct: bool = False
    limit: int = 0
    offset: int = -1
    into_table: Optional[str] = None

    # ==================== WHERE ====================

    def add_where_group(self, callback: Callable[["QueryStatement"], Any], separator: str = AND) -> None:
        """Add a parenthesized group whose conditions are built by callback."""
        inner = QueryStatement()
        callback(inner)
        self.wheres.append(WhereNested(conditions=inner.wheres, separator=separator))

    def add_where(self, column: Any, value: Any, operator: str = "=", separator: str = AND) -> None:
        self.wheres.append(WhereColumn(
            column=to_expression(column),
            operator=operator,
            value=to_expression(value),
            separator=separator
        ))

    def add_where_like(self, column: Any, pattern: str, separator: str = AND, not_: bool = False) -> None:
        self.wheres.append(WhereLike(
            column=to_expression(column),
            pattern=pattern,
            not_=not_,
            separator=separator
        ))

    def add_where_between(
        self,
        column: Any,
        value1: Any,
        value2: Any,
        separator: str = AND,
        not_: bool = False
    ) -> None:
        self.wheres.append(WhereBetween(
            column=to_expression(column),
            value1=to_expression(value1),
            value2=to_expression(value2),
            not_=not_,
            separator=separator
        ))

    def add_where_in(self, column: Any, value: Any, separator: str = AND, not_: bool = False) -> None:
        """IN over a literal list, or over a subquery (statement or callback)."""
        column = to_expression(column)
        subquery = _to_subquery(value)
        if subquery is not None:
            self.wheres.append(WhereInSelect(
                column=column,
                subquery=subquery,
                not_=not_,
                separator=separator
            ))
        else:
            self.wheres.append(WhereIn(
                column=column,
                values=list(value),
                not_=not_,
                separator=separator
            ))

    def add_where_null(self, column: Any, separator: str = AND, not_: bool = False) -> None:
        self.wheres.append(WhereNull(column=to_expression(column), not_=not_, separator=separator))

    def add_where_nop(self, column: Any, separator: str = AND) -> None:
        self.wheres.append(WhereNop(column=to_expression(column), separator=separator))

    def add_where_exists(self, subquery: Any, separator: str = AND, not_: bool = False) -> None:
        self.wheres.append(WhereExists(
            subquery=_require_subquery(subquery),
            not_=not_,
            separator=separator
        ))

    def add_where_subquery(self, column: Any, operator: str, subquery: Any, separator: str = AND) -> None:
        self.wheres.append(WhereSubQuery(
            column=to_expression(column),
            operator=operator,
            subquery=_require_subquery(subquery),
            separator=separator
        ))

    # ==================== JOIN ====================

    def add_join_clause(
        self,
        join_type: str,
        table: Any,
        callback: Optional[Callable[[Join], Any]] = None
    ) -> None:
        join_type = join_type.upper()
        if join_type not in JOIN_TYPES:
            logger.warning(f"Unusual join type: {join_type}")
        self.joins.append(JoinClause(
            type=join_type,
            tables=normalize_tables(table),
            join=build_join(callback)
        ))

    # ==================== HAVING ====================

    def add_having_group(self, callback: Callable[["QueryStatement"], Any], separator: str = AND) -> None:
        inner = QueryStatement()
        callback(inner)
        self.having.append(HavingNested(conditions=inner.having, separator=separator))

    def add_having(self, aggregate: Any, value: Any, operator: str = "=", separator: str = AND) -> None:
        self.having.append(HavingCondition(
            aggregate=to_expression(aggregate),
            operator=operator,
            value=to_expression(value),
            separator=separator
        ))

    def add_having_in(self, aggregate: Any, value: Any, separator: str = AND, not_: bool = False) -> None:
        aggregate = to_expression(aggregate)
        subquery = _to_subquery(value)
        if subquery is not None:
            self.having.append(HavingInSelect(
                aggregate=aggregate,
                subquery=subquery,
                not_=not_,
                separator=separator
            ))
        else:
            self.having.append(HavingIn(
                aggregate=aggregate,
                values=list(value),
                not_=not_,
                separator=separator
            ))

    def add_having_between(
        self,
        aggregate: Any,
        value1: Any,
        value2: Any,
        separator: str = AND,
        not_: bool = False
    ) -> None:
        self.having.append(HavingBetween(
            aggregate=to_expression(aggregate),
            value1=to_expression(value1),
            value2=to_expression(value2),
            not_=not_,
            separator=separator
        ))

    # ==================== Other clauses ====================

    def add_tables(self, tables: Any) -> None:
        self.tables = normalize_tables(tables)

    def set_from(self, tables: Any) -> None:
        self.from_tables = normalize_tables(tables)

    def add_update_columns(self, columns: Dict[str, Any]) -> None:
        for column, value in columns.items():
            self.columns.append(UpdateColumn(column=column, value=to_expression(value)))

    def add_order(self, columns: Any, direction: str = "ASC") -> None:
        if not isinstance(columns, (list, tuple)):
            columns = [columns]
        direction = direction.upper()
        if direction not in ORDER_DIRECTIONS:
            direction = "ASC"
        self.order.append(OrderBy(
            columns=[to_expression(c) for c in columns],
            direction=direction
        ))

    def add_group_by(self, columns: Any) -> None:
        if not isinstance(columns, (list, tuple)):
            columns = [columns]
        self.group = [to_expression(c) for c in columns]

    def add_column(self, column: Any, alias: Optional[str] = None) -> None:
        self.columns.append(SelectColumn(name=to_expression(column), alias=alias))

    def add_value(self, value: Any) -> None:
        self.values.append(to_expression(value))

    def add_insert_values(self, values: Dict[str, Any]) -> None:
        """Register one column and one bound value per mapping entry."""
        for column, value in values.items():
            self.add_column(column)
            self.add_value(value)

    def set_distinct(self, value: bool = True) -> None:
        self.distinct = value

    def set_limit(self, value: int) -> None:
        self.limit = value

    def set_offset(self, value: int) -> None:
        self.offset = value

    def set_into(self, table: str) -> None:
        self.into_table = table


def _to_subquery(value: Any) -> Optional[QueryStatement]:
    """Return a sub-statement for a statement or a statement-building callback."""
    if isinstance(value, QueryStatement):
        return value
    if callable(value) and not isinstance(value, (Expression, type)):
        statement = QueryStatement()
        value(statement)
        return statement
    return None


def _require_subquery(value: Any) -> QueryStatement:
    subquery = _to_subquery(value)
    if subquery is None:
        raise ValidationError(f"Expected a statement or a callback, got {type(value).__name__}")
    return subquery
