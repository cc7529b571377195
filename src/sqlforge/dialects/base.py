"""
Base Database Dialect - renders the statement model into SQL text

Dialects handle database-specific syntax differences such as:
- Identifier quoting ([brackets] vs "quotes" vs `backticks`)
- Row limiting (LIMIT/OFFSET vs TOP vs ROWNUM)
- Column type names and modifiers (AUTO_INCREMENT vs IDENTITY vs SERIAL)
- ALTER TABLE forms and system catalog queries

The base class renders ANSI-flavoured SQL. Subclasses change configuration
attributes (quote pair, date format, modifier order, autoincrement keyword)
and override the few methods where their SQL differs.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from numbers import Number
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..constants import (
    COLUMN_SIZES,
    DEFAULT_COLUMN_SIZE,
    DEFAULT_DATE_FORMAT,
    DEFAULT_STRING_LENGTH,
    MAX_RENDER_DEPTH,
    PLACEHOLDER,
    quote_pair,
)
from ..exceptions import MalformedStatementError, UnsupportedOperationError, ValidationError
from ..query.conditions import (
    Condition,
    HavingBetween,
    HavingCondition,
    HavingIn,
    HavingInSelect,
    HavingNested,
    JoinColumn,
    JoinExpression,
    JoinNested,
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
)
from ..query.expression import Expression, ExpressionNode, FunctionKind, NodeType, SqlFunction
from ..query.statement import JoinClause, OrderBy, QueryStatement, TableList
from ..schema.alter_table import AddForeign, AlterCommandType, AlterTable, DefaultValue, RenameColumn
from ..schema.column import BaseColumn, ColumnType
from ..schema.create_table import CreateTable, KeyDefinition
from ..schema.foreign_key import ForeignKey

import logging
logger = logging.getLogger(__name__)


@dataclass
class CompiledQuery:
    """SQL text plus the positional parameters bound to its placeholders."""
    sql: str
    params: List[Any] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {"sql": self.sql, "params": list(self.params)}


class RenderContext:
    """
    State of one render call.

    Holds the parameter list, the nesting depth and the statements currently
    being rendered. A new context is created by every public entry point, so
    a dialect instance never carries state from one call to the next.
    """

    def __init__(self):
        self.params: List[Any] = []
        self.depth = 0
        self.no_primary_key = False
        self._active: List[int] = []

    def bind(self, value: Any) -> str:
        self.params.append(value)
        return PLACEHOLDER

    @contextmanager
    def nested(self) -> Iterator[None]:
        if self.depth >= MAX_RENDER_DEPTH:
            raise MalformedStatementError(f"Nesting deeper than {MAX_RENDER_DEPTH} levels")
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    @contextmanager
    def statement(self, statement: QueryStatement) -> Iterator[None]:
        key = id(statement)
        if key in self._active:
            raise MalformedStatementError("Statement contains itself as a subquery")
        self._active.append(key)
        try:
            with self.nested():
                yield
        finally:
            self._active.pop()


class Modifier(Enum):
    """Column modifiers, rendered after the type in the dialect's order."""
    UNSIGNED = "unsigned"
    NULLABLE = "nullable"
    DEFAULT = "default"
    AUTOINCREMENT = "autoincrement"
    DESCRIPTION = "description"
    AFTER = "after"


class DatabaseDialect:
    """
    ANSI base dialect.

    Each dialect knows how to:
    1. Render SELECT / INSERT / UPDATE / DELETE statements with bound parameters
    2. Render CREATE / ALTER / DROP / TRUNCATE / RENAME statements
    3. Build the catalog queries listing tables, views and columns
    4. Quote/escape identifiers appropriately

    Usage:
        dialect = DialectFactory.create("postgresql")
        query = dialect.select(statement)
        cursor.execute(query.sql, query.params)
    """

    name = "default"
    default_date_format = DEFAULT_DATE_FORMAT
    modifiers = (
        Modifier.UNSIGNED,
        Modifier.NULLABLE,
        Modifier.DEFAULT,
        Modifier.AUTOINCREMENT,
        Modifier.DESCRIPTION,
        Modifier.AFTER,
    )
    autoincrement_keyword = "AUTO_INCREMENT"
    supports_engine = True
    # information_schema.columns field reported as the column type
    catalog_type_column = "column_type"

    _options = ("db_name", "date_format", "strict")

    def __init__(
        self,
        db_name: Optional[str] = None,
        date_format: Optional[str] = None,
        strict: bool = False
    ):
        """
        Initialize the dialect.

        Args:
            db_name: Database (or schema/owner) used by the catalog queries
            date_format: strftime format applied to bound date values
            strict: Raise instead of skipping what the dialect cannot render
        """
        self.db_name = db_name
        self.date_format = date_format or self.default_date_format
        self.strict = strict

        self._node_renderers: Dict[NodeType, Callable[[Any, RenderContext], str]] = {
            NodeType.COLUMN: self._identifier,
            NodeType.OP: self._operator,
            NodeType.VALUE: self._param,
            NodeType.GROUP: self._group,
            NodeType.FUNCTION: self._function,
            NodeType.SUBQUERY: self._subquery,
        }
        self._function_renderers: Dict[tuple, Callable[[SqlFunction, RenderContext], str]] = {
            (FunctionKind.AGGREGATE, "COUNT"): self._aggregate_count,
            (FunctionKind.AGGREGATE, "AVG"): self._aggregate_avg,
            (FunctionKind.AGGREGATE, "SUM"): self._aggregate_sum,
            (FunctionKind.AGGREGATE, "MIN"): self._aggregate_min,
            (FunctionKind.AGGREGATE, "MAX"): self._aggregate_max,
        }
        self._condition_renderers: Dict[type, Callable[[Any, RenderContext], str]] = {
            WhereColumn: self._where_column,
            WhereIn: self._where_in,
            WhereInSelect: self._where_in_select,
            WhereBetween: self._where_between,
            WhereLike: self._where_like,
            WhereNull: self._where_null,
            WhereExists: self._where_exists,
            WhereSubQuery: self._where_subquery,
            WhereNested: self._where_nested,
            WhereNop: self._where_nop,
            HavingCondition: self._having_condition,
            HavingIn: self._having_in,
            HavingInSelect: self._having_in_select,
            HavingBetween: self._having_between,
            HavingNested: self._having_nested,
            JoinColumn: self._join_column,
            JoinNested: self._join_nested,
            JoinExpression: self._join_expression,
        }
        self._type_renderers: Dict[ColumnType, Callable[[BaseColumn], str]] = {
            ColumnType.INTEGER: self._type_integer,
            ColumnType.FLOAT: self._type_float,
            ColumnType.DOUBLE: self._type_double,
            ColumnType.DECIMAL: self._type_decimal,
            ColumnType.ENUM: self._type_enum,
            ColumnType.BOOLEAN: self._type_boolean,
            ColumnType.BINARY: self._type_binary,
            ColumnType.TEXT: self._type_text,
            ColumnType.STRING: self._type_string,
            ColumnType.FIXED: self._type_fixed,
            ColumnType.TIME: self._type_time,
            ColumnType.TIMESTAMP: self._type_timestamp,
            ColumnType.DATE: self._type_date,
            ColumnType.DATETIME: self._type_datetime,
        }
        self._modifier_renderers: Dict[Modifier, Callable[[BaseColumn, RenderContext], str]] = {
            Modifier.UNSIGNED: self._modifier_unsigned,
            Modifier.NULLABLE: self._modifier_nullable,
            Modifier.DEFAULT: self._modifier_default,
            Modifier.AUTOINCREMENT: self._modifier_autoincrement,
            Modifier.DESCRIPTION: self._modifier_description,
            Modifier.AFTER: self._modifier_after,
        }
        self._alter_renderers: Dict[AlterCommandType, Callable[[AlterTable, Any, RenderContext], str]] = {
            AlterCommandType.ADD_COLUMN: self._alter_add_column,
            AlterCommandType.MODIFY_COLUMN: self._alter_modify_column,
            AlterCommandType.DROP_COLUMN: self._alter_drop_column,
            AlterCommandType.RENAME_COLUMN: self._alter_rename_column,
            AlterCommandType.ADD_PRIMARY: self._alter_add_primary,
            AlterCommandType.DROP_PRIMARY_KEY: self._alter_drop_primary,
            AlterCommandType.ADD_UNIQUE: self._alter_add_unique,
            AlterCommandType.DROP_UNIQUE_KEY: self._alter_drop_unique,
            AlterCommandType.ADD_INDEX: self._alter_add_index,
            AlterCommandType.DROP_INDEX: self._alter_drop_index,
            AlterCommandType.ADD_FOREIGN: self._alter_add_foreign,
            AlterCommandType.DROP_FOREIGN_KEY: self._alter_drop_foreign,
            AlterCommandType.SET_DEFAULT_VALUE: self._alter_set_default,
            AlterCommandType.DROP_DEFAULT_VALUE: self._alter_drop_default,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(db_name={self.db_name!r}, strict={self.strict})"

    # ==================== Options ====================

    def get_date_format(self) -> str:
        return self.date_format

    def set_date_format(self, date_format: str) -> "DatabaseDialect":
        self.date_format = date_format
        return self

    def set_options(self, options: Dict[str, Any]) -> None:
        """
        Change several options at once.

        Raises:
            ValidationError: An option name is not one of db_name, date_format, strict
        """
        unknown = [name for name in options if name not in self._options]
        if unknown:
            raise ValidationError(f"Unknown dialect option(s): {', '.join(sorted(unknown))}")
        for name, value in options.items():
            if name == "date_format" and not value:
                value = self.default_date_format
            setattr(self, name, value)

    # ==================== Identifier Quoting ====================

    @property
    def quote_char(self) -> str:
        """Character used to open a quoted identifier (e.g., '"' or '[')."""
        return quote_pair(self.name)[0]

    @property
    def quote_char_end(self) -> str:
        """Closing quote character (same as quote_char for most databases)."""
        return quote_pair(self.name)[1]

    def quote_identifier(self, identifier: str) -> str:
        """
        Quote a possibly dotted identifier, one segment at a time.

        "users.id" -> "users"."id", a "*" segment is left bare.
        """
        segments = []
        for segment in str(identifier).split("."):
            segments.append(segment if segment == "*" else self._quote_segment(segment))
        return ".".join(segments)

    def _quote_segment(self, segment: str) -> str:
        end = self.quote_char_end
        return f"{self.quote_char}{segment.replace(end, end * 2)}{end}"

    def _identifier(self, value: Any, ctx: RenderContext) -> str:
        if isinstance(value, Expression):
            return self._render_expression(value, ctx)
        return self.quote_identifier(value)

    def _identifiers(self, values: Any, ctx: RenderContext, separator: str = ", ") -> str:
        if not isinstance(values, (list, tuple)):
            values = [values]
        return separator.join(self._identifier(value, ctx) for value in values)

    # ==================== Values ====================

    def _param(self, value: Any, ctx: RenderContext) -> str:
        """Bind a value and return its placeholder; expressions render inline."""
        if isinstance(value, Expression):
            return self._render_expression(value, ctx)
        if isinstance(value, date):
            return ctx.bind(value.strftime(self.date_format))
        return ctx.bind(value)

    def _params(self, values: List[Any], ctx: RenderContext) -> str:
        return ", ".join(self._param(value, ctx) for value in values)

    def _literal(self, value: Any, ctx: Optional[RenderContext] = None) -> str:
        """Inline SQL literal, used where DDL cannot take placeholders."""
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, Number):
            return str(value)
        if isinstance(value, Expression):
            return self._render_expression(value, ctx or RenderContext())
        if isinstance(value, date):
            value = value.strftime(self.date_format)
        if isinstance(value, str):
            return "'" + value.replace("'", "''") + "'"
        return "NULL"

    def _raw(self, value: Any, ctx: RenderContext) -> str:
        if isinstance(value, Expression):
            return self._render_expression(value, ctx)
        return str(value)

    # ==================== Expressions ====================

    def _render_expression(self, expression: Expression, ctx: RenderContext) -> str:
        with ctx.nested():
            return " ".join(self._render_node(node, ctx) for node in expression.nodes)

    def _render_node(self, node: ExpressionNode, ctx: RenderContext) -> str:
        renderer = self._node_renderers.get(node.type)
        if renderer is None:
            raise MalformedStatementError(f"Unknown expression node: {node.type}")
        return renderer(node.value, ctx)

    def _operator(self, token: Any, ctx: RenderContext) -> str:
        return str(token)

    def _group(self, expression: Expression, ctx: RenderContext) -> str:
        return f"({self._render_expression(expression, ctx)})"

    def _subquery(self, statement: QueryStatement, ctx: RenderContext) -> str:
        return f"({self._render_select(statement, ctx)})"

    def _function(self, function: SqlFunction, ctx: RenderContext) -> str:
        renderer = self._function_renderers.get((function.kind, function.name.upper()))
        if renderer is None:
            raise MalformedStatementError(f"Unknown SQL function: {function.kind.value} {function.name}")
        return renderer(function, ctx)

    def _aggregate_count(self, function: SqlFunction, ctx: RenderContext) -> str:
        distinct = "DISTINCT " if function.distinct else ""
        return f"COUNT({distinct}{self._identifiers(function.column, ctx)})"

    def _aggregate(self, name: str, function: SqlFunction, ctx: RenderContext) -> str:
        distinct = "DISTINCT " if function.distinct else ""
        return f"{name}({distinct}{self._identifier(function.column, ctx)})"

    def _aggregate_avg(self, function: SqlFunction, ctx: RenderContext) -> str:
        return self._aggregate("AVG", function, ctx)

    def _aggregate_sum(self, function: SqlFunction, ctx: RenderContext) -> str:
        return self._aggregate("SUM", function, ctx)

    def _aggregate_min(self, function: SqlFunction, ctx: RenderContext) -> str:
        return self._aggregate("MIN", function, ctx)

    def _aggregate_max(self, function: SqlFunction, ctx: RenderContext) -> str:
        return self._aggregate("MAX", function, ctx)

    # ==================== Query statements ====================

    def select(self, statement: QueryStatement) -> CompiledQuery:
        return self._compile(self._render_select, statement)

    def insert(self, statement: QueryStatement) -> CompiledQuery:
        return self._compile(self._render_insert, statement)

    def update(self, statement: QueryStatement) -> CompiledQuery:
        return self._compile(self._render_update, statement)

    def delete(self, statement: QueryStatement) -> CompiledQuery:
        return self._compile(self._render_delete, statement)

    def _compile(
        self,
        renderer: Callable[[QueryStatement, RenderContext], str],
        statement: QueryStatement
    ) -> CompiledQuery:
        ctx = RenderContext()
        sql = renderer(statement, ctx)
        logger.debug(f"[{self.name}] {sql} {ctx.params}")
        return CompiledQuery(sql, ctx.params)

    def _render_select(self, statement: QueryStatement, ctx: RenderContext) -> str:
        with ctx.statement(statement):
            return self._select_sql(statement, ctx)

    def _select_sql(self, statement: QueryStatement, ctx: RenderContext) -> str:
        sql = self._select_body(statement, ctx)
        sql += self._limit(statement.limit, ctx)
        sql += self._offset(statement.offset, ctx)
        return sql

    def _select_body(self, statement: QueryStatement, ctx: RenderContext, with_into: bool = True) -> str:
        """SELECT ... ORDER BY, without any row limiting."""
        sql = "SELECT DISTINCT " if statement.distinct else "SELECT "
        sql += self._column_list(statement.columns, ctx)
        if with_into:
            sql += self._into(statement.into_table, ctx)
        sql += " FROM "
        sql += self._table_list(statement.tables, ctx)
        sql += self._joins(statement.joins, ctx)
        sql += self._wheres(statement.wheres, ctx)
        sql += self._group_by(statement.group, ctx)
        sql += self._having(statement.having, ctx)
        sql += self._orders(statement.order, ctx)
        return sql

    def _render_insert(self, statement: QueryStatement, ctx: RenderContext) -> str:
        columns = self._column_list(statement.columns, ctx)
        sql = "INSERT INTO "
        sql += self._table_list(statement.tables, ctx)
        sql += "" if columns == "*" else f"({columns})"
        sql += f" VALUES ({self._params(statement.values, ctx)})"
        return sql

    def _render_update(self, statement: QueryStatement, ctx: RenderContext) -> str:
        sql = "UPDATE "
        sql += self._table_list(statement.tables, ctx)
        sql += self._joins(statement.joins, ctx)
        sql += self._set_columns(statement.columns, ctx)
        sql += self._wheres(statement.wheres, ctx)
        return sql

    def _render_delete(self, statement: QueryStatement, ctx: RenderContext) -> str:
        aliases = self._table_list(statement.tables, ctx)
        sql = f"DELETE {aliases} FROM " if aliases else "DELETE FROM "
        sql += self._table_list(statement.from_tables, ctx)
        sql += self._joins(statement.joins, ctx)
        sql += self._wheres(statement.wheres, ctx)
        return sql

    # ==================== Clauses ====================

    def _column_list(self, columns: List[Any], ctx: RenderContext) -> str:
        if not columns:
            return "*"
        sql = []
        for column in columns:
            if column.alias is not None:
                sql.append(f"{self._identifier(column.name, ctx)} AS {self.quote_identifier(column.alias)}")
            else:
                sql.append(self._identifier(column.name, ctx))
        return ", ".join(sql)

    def _into(self, table: Optional[str], ctx: RenderContext) -> str:
        if table is None:
            return ""
        return f" INTO {self._identifier(table, ctx)}"

    def _table_list(self, tables: TableList, ctx: RenderContext) -> str:
        sql = []
        for name, alias in tables:
            if alias is not None:
                sql.append(f"{self._identifier(name, ctx)} AS {self.quote_identifier(alias)}")
            else:
                sql.append(self._identifier(name, ctx))
        return ", ".join(sql)

    def _joins(self, joins: List[JoinClause], ctx: RenderContext) -> str:
        if not joins:
            return ""
        sql = []
        for clause in joins:
            tables = self._table_list(clause.tables, ctx)
            on = ""
            if clause.join is not None:
                on = self._conditions(clause.join.get_join_conditions(), ctx)
            if on:
                on = f" ON {on}"
            sql.append(f"{clause.type} JOIN {tables}{on}")
        return " " + " ".join(sql)

    def _conditions(self, conditions: List[Condition], ctx: RenderContext) -> str:
        """Render a WHERE / HAVING / ON list; the first separator is never emitted."""
        sql = []
        for index, condition in enumerate(conditions):
            renderer = self._condition_renderers.get(type(condition))
            if renderer is None:
                raise MalformedStatementError(f"Unknown condition node: {type(condition).__name__}")
            rendered = renderer(condition, ctx)
            sql.append(rendered if index == 0 else f"{condition.separator} {rendered}")
        return " ".join(sql)

    def _wheres(self, wheres: List[Condition], ctx: RenderContext) -> str:
        sql = self._conditions(wheres, ctx)
        return f" WHERE {sql}" if sql else ""

    def _having(self, having: List[Condition], ctx: RenderContext) -> str:
        sql = self._conditions(having, ctx)
        return f" HAVING {sql}" if sql else ""

    def _group_by(self, columns: List[Any], ctx: RenderContext) -> str:
        if not columns:
            return ""
        return f" GROUP BY {self._identifiers(columns, ctx)}"

    def _orders(self, orders: List[OrderBy], ctx: RenderContext) -> str:
        if not orders:
            return ""
        sql = [f"{self._identifiers(order.columns, ctx)} {order.direction}" for order in orders]
        return " ORDER BY " + ", ".join(sql)

    def _set_columns(self, columns: List[Any], ctx: RenderContext) -> str:
        if not columns:
            return ""
        sql = [f"{self._identifier(column.column, ctx)} = {self._param(column.value, ctx)}" for column in columns]
        return " SET " + ", ".join(sql)

    def _limit(self, limit: int, ctx: RenderContext) -> str:
        return "" if limit <= 0 else f" LIMIT {ctx.bind(limit)}"

    def _offset(self, offset: int, ctx: RenderContext) -> str:
        return "" if offset < 0 else f" OFFSET {ctx.bind(offset)}"

    # ==================== Conditions ====================

    @staticmethod
    def _negate(keyword: str, not_: bool) -> str:
        return f"NOT {keyword}" if not_ else keyword

    def _where_column(self, where: WhereColumn, ctx: RenderContext) -> str:
        return f"{self._identifier(where.column, ctx)} {where.operator} {self._param(where.value, ctx)}"

    def _where_in(self, where: WhereIn, ctx: RenderContext) -> str:
        keyword = self._negate("IN", where.not_)
        return f"{self._identifier(where.column, ctx)} {keyword} ({self._params(where.values, ctx)})"

    def _where_in_select(self, where: WhereInSelect, ctx: RenderContext) -> str:
        keyword = self._negate("IN", where.not_)
        return f"{self._identifier(where.column, ctx)} {keyword} ({self._render_select(where.subquery, ctx)})"

    def _where_between(self, where: WhereBetween, ctx: RenderContext) -> str:
        keyword = self._negate("BETWEEN", where.not_)
        column = self._identifier(where.column, ctx)
        return f"{column} {keyword} {self._param(where.value1, ctx)} AND {self._param(where.value2, ctx)}"

    def _where_like(self, where: WhereLike, ctx: RenderContext) -> str:
        keyword = self._negate("LIKE", where.not_)
        return f"{self._identifier(where.column, ctx)} {keyword} {self._param(where.pattern, ctx)}"

    def _where_null(self, where: WhereNull, ctx: RenderContext) -> str:
        keyword = "IS NOT NULL" if where.not_ else "IS NULL"
        return f"{self._identifier(where.column, ctx)} {keyword}"

    def _where_exists(self, where: WhereExists, ctx: RenderContext) -> str:
        keyword = self._negate("EXISTS", where.not_)
        return f"{keyword} ({self._render_select(where.subquery, ctx)})"

    def _where_subquery(self, where: WhereSubQuery, ctx: RenderContext) -> str:
        column = self._identifier(where.column, ctx)
        return f"{column} {where.operator} ({self._render_select(where.subquery, ctx)})"

    def _where_nested(self, where: WhereNested, ctx: RenderContext) -> str:
        with ctx.nested():
            return f"({self._conditions(where.conditions, ctx)})"

    def _where_nop(self, where: WhereNop, ctx: RenderContext) -> str:
        return self._identifier(where.column, ctx)

    def _having_condition(self, having: HavingCondition, ctx: RenderContext) -> str:
        # the threshold is written verbatim, not bound
        return f"{self._identifier(having.aggregate, ctx)} {having.operator} {self._raw(having.value, ctx)}"

    def _having_in(self, having: HavingIn, ctx: RenderContext) -> str:
        keyword = self._negate("IN", having.not_)
        return f"{self._identifier(having.aggregate, ctx)} {keyword} ({self._params(having.values, ctx)})"

    def _having_in_select(self, having: HavingInSelect, ctx: RenderContext) -> str:
        keyword = self._negate("IN", having.not_)
        aggregate = self._identifier(having.aggregate, ctx)
        return f"{aggregate} {keyword} ({self._render_select(having.subquery, ctx)})"

    def _having_between(self, having: HavingBetween, ctx: RenderContext) -> str:
        keyword = self._negate("BETWEEN", having.not_)
        aggregate = self._identifier(having.aggregate, ctx)
        return f"{aggregate} {keyword} {self._param(having.value1, ctx)} AND {self._param(having.value2, ctx)}"

    def _having_nested(self, having: HavingNested, ctx: RenderContext) -> str:
        with ctx.nested():
            return f"({self._conditions(having.conditions, ctx)})"

    def _join_column(self, join: JoinColumn, ctx: RenderContext) -> str:
        return f"{self._identifier(join.column1, ctx)} {join.operator} {self._identifier(join.column2, ctx)}"

    def _join_nested(self, join: JoinNested, ctx: RenderContext) -> str:
        with ctx.nested():
            return f"({self._conditions(join.join.get_join_conditions(), ctx)})"

    def _join_expression(self, join: JoinExpression, ctx: RenderContext) -> str:
        return self._identifier(join.expression, ctx)

    # ==================== Schema: CREATE / DROP ====================

    def create(self, schema: CreateTable) -> List[CompiledQuery]:
        """CREATE TABLE statement followed by one CREATE INDEX per index."""
        ctx = RenderContext()
        sql = f"CREATE TABLE {self.quote_identifier(schema.get_table_name())}(\n"
        sql += self._schema_columns(list(schema.get_columns().values()), ctx)
        sql += self._primary_key(schema, ctx)
        sql += self._unique_keys(schema)
        sql += self._foreign_keys(schema)
        sql += ")\n"
        sql += self._engine(schema)

        queries = [CompiledQuery(sql, ctx.params)]
        for index in self._index_keys(schema):
            queries.append(CompiledQuery(index))
        logger.debug(f"[{self.name}] CREATE {schema.get_table_name()}: {len(queries)} statement(s)")
        return queries

    def drop(self, table: str) -> CompiledQuery:
        return CompiledQuery(f"DROP TABLE {self.quote_identifier(table)}")

    def truncate(self, table: str) -> CompiledQuery:
        return CompiledQuery(f"TRUNCATE TABLE {self.quote_identifier(table)}")

    def rename_table(self, current: str, new: str) -> CompiledQuery:
        return CompiledQuery(f"RENAME TABLE {self.quote_identifier(current)} TO {self.quote_identifier(new)}")

    def _schema_columns(self, columns: List[BaseColumn], ctx: RenderContext) -> str:
        return ",\n".join(self._schema_column(column, ctx) for column in columns)

    def _schema_column(self, column: BaseColumn, ctx: RenderContext) -> str:
        line = self.quote_identifier(column.get_name())
        line += self._column_type(column)
        line += self._column_modifiers(column, ctx)
        return line

    def _column_type(self, column: BaseColumn) -> str:
        column_type = column.get_type()
        if column_type is None:
            return ""
        renderer = self._type_renderers.get(column_type) if isinstance(column_type, ColumnType) else None
        if renderer is None:
            if self.strict:
                raise ValidationError(f"Unknown type '{column_type}' for column {column.get_name()}")
            logger.warning(f"Unknown type '{column_type}' for column {column.get_name()}, rendered without type")
            return ""
        result = renderer(column).strip()
        return f" {result}" if result else ""

    def _column_modifiers(self, column: BaseColumn, ctx: RenderContext) -> str:
        line = ""
        for modifier in self.modifiers:
            result = self._modifier_renderers[modifier](column, ctx).strip()
            if result:
                line += f" {result}"
        return line

    def _primary_key(self, schema: CreateTable, ctx: RenderContext) -> str:
        key = schema.get_primary_key()
        if key is None:
            return ""
        return f",\nCONSTRAINT {self.quote_identifier(key.name)} PRIMARY KEY ({self._key_columns(key.columns)})"

    def _unique_keys(self, schema: CreateTable) -> str:
        keys = schema.get_unique_keys()
        if not keys:
            return ""
        sql = [
            f"CONSTRAINT {self.quote_identifier(name)} UNIQUE ({self._key_columns(columns)})"
            for name, columns in keys.items()
        ]
        return ",\n" + ",\n".join(sql)

    def _foreign_keys(self, schema: CreateTable) -> str:
        keys = schema.get_foreign_keys()
        if not keys:
            return ""
        sql = [f"CONSTRAINT {self.quote_identifier(name)} {self._foreign_key(name, key)}" for name, key in keys.items()]
        return ",\n" + ",\n".join(sql)

    def _foreign_key(self, name: str, key: ForeignKey) -> str:
        """FOREIGN KEY (...) REFERENCES t (...) [actions]."""
        if key.get_reference_table() is None:
            raise ValidationError(f"Foreign key {name} does not reference any table")
        sql = f"FOREIGN KEY ({self._key_columns(key.get_columns())}) "
        sql += f"REFERENCES {self.quote_identifier(key.get_reference_table())} "
        sql += f"({self._key_columns(key.get_reference_columns())})"
        for on, action in key.get_actions().items():
            sql += f" {on} {action}"
        return sql

    def _index_keys(self, schema: CreateTable) -> List[str]:
        table = schema.get_table_name()
        return [
            f"CREATE INDEX {self.quote_identifier(self._index_name(table, name))} "
            f"ON {self.quote_identifier(table)}({self._key_columns(columns)})"
            for name, columns in schema.get_indexes().items()
        ]

    def _index_name(self, table: str, name: str) -> str:
        return name

    def _engine(self, schema: CreateTable) -> str:
        engine = schema.get_engine()
        if engine is None:
            return ""
        if not self.supports_engine:
            logger.debug(f"[{self.name}] storage engine {engine} ignored")
            return ""
        return f" ENGINE = {engine.upper()}"

    def _key_columns(self, columns: List[str]) -> str:
        return ", ".join(self.quote_identifier(column) for column in columns)

    # ==================== Column types ====================

    def _precision_type(self, name: str, column: BaseColumn, default: Optional[str] = None) -> str:
        """NAME(length[, precision]), or default when no length is set."""
        length = column.get("length")
        if length is None:
            return default or name
        precision = column.get("precision")
        if precision is None:
            return f"{name}({self._literal(length)})"
        return f"{name}({self._literal(length)}, {self._literal(precision)})"

    @staticmethod
    def _size(column: BaseColumn) -> str:
        return column.get("size", DEFAULT_COLUMN_SIZE)

    def _type_integer(self, column: BaseColumn) -> str:
        return "INT"

    def _type_float(self, column: BaseColumn) -> str:
        return "FLOAT"

    def _type_double(self, column: BaseColumn) -> str:
        return "DOUBLE"

    def _type_decimal(self, column: BaseColumn) -> str:
        return "DECIMAL"

    def _type_enum(self, column: BaseColumn) -> str:
        return "ENUM"

    def _type_boolean(self, column: BaseColumn) -> str:
        return "BOOLEAN"

    def _type_binary(self, column: BaseColumn) -> str:
        return "BLOB"

    def _type_text(self, column: BaseColumn) -> str:
        return "TEXT"

    def _type_string(self, column: BaseColumn) -> str:
        return f"VARCHAR({self._literal(column.get('length', DEFAULT_STRING_LENGTH))})"

    def _type_fixed(self, column: BaseColumn) -> str:
        return f"CHAR({self._literal(column.get('length', DEFAULT_STRING_LENGTH))})"

    def _type_time(self, column: BaseColumn) -> str:
        return "TIME"

    def _type_timestamp(self, column: BaseColumn) -> str:
        return "TIMESTAMP"

    def _type_date(self, column: BaseColumn) -> str:
        return "DATE"

    def _type_datetime(self, column: BaseColumn) -> str:
        return "DATETIME"

    # ==================== Column modifiers ====================

    def _modifier_unsigned(self, column: BaseColumn, ctx: RenderContext) -> str:
        return "UNSIGNED" if column.get("unsigned", False) else ""

    def _modifier_nullable(self, column: BaseColumn, ctx: RenderContext) -> str:
        return "" if column.get("nullable", True) else "NOT NULL"

    def _modifier_default(self, column: BaseColumn, ctx: RenderContext) -> str:
        if not column.has("default"):
            return ""
        return f"DEFAULT {self._literal(column.get('default'), ctx)}"

    def _modifier_description(self, column: BaseColumn, ctx: RenderContext) -> str:
        if not column.has("description"):
            return ""
        return f"COMMENT {self._literal(column.get('description'), ctx)}"

    def _modifier_after(self, column: BaseColumn, ctx: RenderContext) -> str:
        if not column.has("after"):
            return ""
        return f"AFTER {self.quote_identifier(column.get('after'))}"

    def _modifier_autoincrement(self, column: BaseColumn, ctx: RenderContext) -> str:
        if column.get_type() != ColumnType.INTEGER or self._size(column) not in COLUMN_SIZES:
            return ""
        return self.autoincrement_keyword if column.get("autoincrement", False) else ""

    # ==================== Schema: ALTER ====================

    def alter(self, schema: AlterTable) -> List[CompiledQuery]:
        """
        One statement per command, in command order.

        Commands the dialect cannot express are skipped with a warning,
        or raise UnsupportedOperationError in strict mode.
        """
        queries = []
        for command in schema.get_commands():
            ctx = RenderContext()
            renderer = self._alter_renderers.get(command.type)
            sql = renderer(schema, command.data, ctx) if renderer is not None else ""
            if not sql:
                self._unsupported(command.type.value, schema.get_table_name())
                continue
            queries.append(CompiledQuery(sql, ctx.params))
        logger.debug(f"[{self.name}] ALTER {schema.get_table_name()}: {len(queries)} statement(s)")
        return queries

    def _unsupported(self, operation: str, table: str) -> None:
        if self.strict:
            raise UnsupportedOperationError(self.name, operation, f"table {table}")
        logger.warning(f"Skipping {operation} on {table}: not supported by the {self.name} dialect")

    def _check_bare_offset(self, statement: QueryStatement) -> None:
        """Offset without limit, for dialects whose row limiting has no standalone OFFSET."""
        if statement.offset < 0:
            return
        if self.strict:
            raise UnsupportedOperationError(self.name, "offset", "an offset needs a limit")
        logger.warning(f"[{self.name}] offset {statement.offset} without limit rendered as a bare OFFSET")

    def _table(self, schema: AlterTable) -> str:
        return self.quote_identifier(schema.get_table_name())

    def _alter_drop_primary(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} DROP CONSTRAINT {self.quote_identifier(name)}"

    def _alter_drop_unique(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} DROP CONSTRAINT {self.quote_identifier(name)}"

    def _alter_drop_index(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"DROP INDEX {self._table(schema)}.{self.quote_identifier(name)}"

    def _alter_drop_foreign(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} DROP CONSTRAINT {self.quote_identifier(name)}"

    def _alter_drop_column(self, schema: AlterTable, name: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} DROP COLUMN {self.quote_identifier(name)}"

    def _alter_rename_column(self, schema: AlterTable, data: RenameColumn, ctx: RenderContext) -> str:
        return ""

    def _alter_modify_column(self, schema: AlterTable, column: BaseColumn, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} MODIFY COLUMN {self._schema_column(column, ctx)}"

    def _alter_add_column(self, schema: AlterTable, column: BaseColumn, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} ADD COLUMN {self._schema_column(column, ctx)}"

    def _alter_add_primary(self, schema: AlterTable, key: KeyDefinition, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} ADD CONSTRAINT {self.quote_identifier(key.name)} "
            f"PRIMARY KEY ({self._key_columns(key.columns)})"
        )

    def _alter_add_unique(self, schema: AlterTable, key: KeyDefinition, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} ADD CONSTRAINT {self.quote_identifier(key.name)} "
            f"UNIQUE ({self._key_columns(key.columns)})"
        )

    def _alter_add_index(self, schema: AlterTable, key: KeyDefinition, ctx: RenderContext) -> str:
        name = self._index_name(schema.get_table_name(), key.name)
        return (
            f"CREATE INDEX {self.quote_identifier(name)} "
            f"ON {self._table(schema)} ({self._key_columns(key.columns)})"
        )

    def _alter_add_foreign(self, schema: AlterTable, data: AddForeign, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} ADD CONSTRAINT {self.quote_identifier(data.name)} "
            f"{self._foreign_key(data.name, data.foreign_key)}"
        )

    def _alter_set_default(self, schema: AlterTable, data: DefaultValue, ctx: RenderContext) -> str:
        return (
            f"ALTER TABLE {self._table(schema)} ALTER COLUMN {self.quote_identifier(data.column)} "
            f"SET DEFAULT ({self._literal(data.value, ctx)})"
        )

    def _alter_drop_default(self, schema: AlterTable, column: str, ctx: RenderContext) -> str:
        return f"ALTER TABLE {self._table(schema)} ALTER COLUMN {self.quote_identifier(column)} DROP DEFAULT"

    # ==================== Catalog queries ====================

    def _database(self, database: Optional[str]) -> Optional[str]:
        return self.db_name if database is None else database

    def get_database_name(self) -> CompiledQuery:
        return CompiledQuery("SELECT database()")

    def get_tables(self, database: Optional[str] = None) -> CompiledQuery:
        return self._information_schema_tables("BASE TABLE", database)

    def get_views(self, database: Optional[str] = None) -> CompiledQuery:
        return self._information_schema_tables("VIEW", database)

    def get_columns(self, table: str, database: Optional[str] = None) -> CompiledQuery:
        return self._information_schema_columns(table, database)

    def get_view_columns(self, view: str, database: Optional[str] = None) -> CompiledQuery:
        return self._information_schema_columns(view, database)

    def _information_schema_tables(self, table_type: str, database: Optional[str]) -> CompiledQuery:
        q = self.quote_identifier
        sql = (
            f"SELECT {q('table_name')} FROM {q('information_schema')}.{q('tables')} "
            f"WHERE table_type = ? AND table_schema = ? ORDER BY {q('table_name')} ASC"
        )
        return CompiledQuery(sql, [table_type, self._database(database)])

    def _information_schema_columns(self, table: str, database: Optional[str]) -> CompiledQuery:
        q = self.quote_identifier
        sql = (
            f"SELECT {q('column_name')} AS {q('name')}, {q(self.catalog_type_column)} AS {q('type')} "
            f"FROM {q('information_schema')}.{q('columns')} "
            f"WHERE {q('table_schema')} = ? AND {q('table_name')} = ? "
            f"ORDER BY {q('ordinal_position')} ASC"
        )
        return CompiledQuery(sql, [self._database(database), table])
