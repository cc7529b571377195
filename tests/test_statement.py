"""
Unit tests for the statement and condition model.
"""
import pytest

from sqlforge.exceptions import ValidationError
from sqlforge.query import OR, Expression, Join, QueryStatement
from sqlforge.query.conditions import (
    JoinColumn,
    JoinExpression,
    JoinNested,
    WhereColumn,
    WhereIn,
    WhereInSelect,
    WhereNested,
)
from sqlforge.query.statement import normalize_tables


class TestNormalizeTables:
    """Test the accepted table notations."""

    def test_string(self):
        assert normalize_tables("users") == [("users", None)]

    def test_list_with_pairs(self):
        assert normalize_tables(["users", ("orders", "o")]) == [("users", None), ("orders", "o")]

    def test_mapping_keeps_order(self):
        assert normalize_tables({"users": "u", "orders": "o"}) == [("users", "u"), ("orders", "o")]

    def test_none(self):
        assert normalize_tables(None) == []


class TestQueryStatement:
    """Test the statement mutators."""

    def test_defaults(self):
        """Test that a new statement is unbounded with no offset."""
        statement = QueryStatement()
        assert statement.limit == 0
        assert statement.offset == -1
        assert statement.distinct is False

    def test_add_where_keeps_separator(self):
        """Test that the separator is stored on the condition."""
        statement = QueryStatement()
        statement.add_where("a", 1)
        statement.add_where("b", 2, separator=OR)
        assert isinstance(statement.wheres[0], WhereColumn)
        assert [w.separator for w in statement.wheres] == ["AND", "OR"]

    def test_add_where_in_list_and_subquery(self):
        """Test that add_where_in picks the node from the value."""
        statement = QueryStatement()
        statement.add_where_in("id", [1, 2])
        statement.add_where_in("id", lambda s: s.add_tables("orders"))
        assert isinstance(statement.wheres[0], WhereIn)
        assert isinstance(statement.wheres[1], WhereInSelect)
        assert statement.wheres[1].subquery.tables == [("orders", None)]

    def test_add_where_group(self):
        """Test that a group collects the conditions added by the callback."""
        statement = QueryStatement()
        statement.add_where_group(lambda s: (s.add_where("a", 1), s.add_where("b", 2, separator=OR)))
        nested = statement.wheres[0]
        assert isinstance(nested, WhereNested)
        assert len(nested.conditions) == 2

    def test_add_where_exists_requires_subquery(self):
        """Test that EXISTS rejects a plain value."""
        with pytest.raises(ValidationError):
            QueryStatement().add_where_exists("users")

    def test_order_direction_normalized(self):
        """Test that an unknown direction falls back to ASC."""
        statement = QueryStatement()
        statement.add_order("name", "desc")
        statement.add_order("id", "sideways")
        assert [o.direction for o in statement.order] == ["DESC", "ASC"]

    def test_add_insert_values(self):
        """Test that a mapping registers columns and values in order."""
        statement = QueryStatement()
        statement.add_insert_values({"id": 1, "name": "x"})
        assert [c.name for c in statement.columns] == ["id", "name"]
        assert statement.values == [1, "x"]

    def test_join_clause_type_upper_cased(self):
        """Test that the join type is stored upper-case."""
        statement = QueryStatement()
        statement.add_join_clause("left", {"orders": "o"}, lambda j: j.on("users.id", "o.user_id"))
        clause = statement.joins[0]
        assert clause.type == "LEFT"
        assert clause.tables == [("orders", "o")]
        assert isinstance(clause.join.conditions[0], JoinColumn)


class TestJoin:
    """Test the ON condition builder."""

    def test_on_and_or_on(self):
        join = Join().on("a.id", "b.id").or_on("a.id", "b.owner_id")
        assert [c.separator for c in join.get_join_conditions()] == ["AND", "OR"]

    def test_nested_group(self):
        """Test that a callback without second column builds a nested group."""
        join = Join().on(lambda j: j.on("a.x", "b.x").or_on("a.y", "b.y"))
        condition = join.get_join_conditions()[0]
        assert isinstance(condition, JoinNested)
        assert len(condition.join.get_join_conditions()) == 2

    def test_raw_expression(self):
        """Test that on(expression, True) stores a raw expression."""
        join = Join().on(Expression().column("a.x").op("=").value(1), True)
        assert isinstance(join.get_join_conditions()[0], JoinExpression)
