"""
Unit tests for SQL formatting and script rendering.
"""
import pytest

from sqlforge.dialects import CompiledQuery
from sqlforge.exceptions import ValidationError
from sqlforge.schema import CreateTable
from sqlforge.utils import format_sql, render_script, split_script


class TestFormatSql:
    """Test the sqlparse formatting styles."""

    SQL = "select id, name from users where id = 1"

    def test_empty_input_returned_unchanged(self):
        assert format_sql("") == ""
        assert format_sql("   ") == "   "

    def test_compact(self):
        result = format_sql(self.SQL, "compact")
        assert result.startswith("SELECT")
        assert "FROM users" in result
        assert "WHERE id = 1" in result

    def test_expanded_one_column_per_line(self):
        result = format_sql(self.SQL, "expanded")
        assert "id,\n" in result

    def test_comma_first(self):
        result = format_sql(self.SQL, "comma_first")
        assert any(line.strip().startswith(",") for line in result.splitlines())

    def test_unknown_style_uses_default_layout(self):
        assert format_sql(self.SQL, "fancy").startswith("SELECT")


class TestRenderScript:
    """Test joining DDL statements into a script."""

    def test_create_script(self, ansi):
        table = CreateTable("t")
        table.integer("id").index()
        script = render_script(ansi.create(table))
        assert script == 'CREATE TABLE "t"(\n"id" INT);\n\nCREATE INDEX "t_ik_id" ON "t"("id");'

    def test_split_script_returns_statements(self, ansi):
        table = CreateTable("t")
        table.integer("id").index()
        statements = split_script(render_script(ansi.create(table)))
        assert statements == ['CREATE TABLE "t"(\n"id" INT)', 'CREATE INDEX "t_ik_id" ON "t"("id")']

    def test_bound_parameters_rejected(self):
        with pytest.raises(ValidationError):
            render_script([CompiledQuery("DROP TABLE t"), CompiledQuery("SELECT ?", [1])])

    def test_styled_script(self):
        """Test that a style formats each statement before it is terminated."""
        script = render_script([CompiledQuery("select id from t where id = 1")], style="compact")
        assert script.startswith("SELECT id")
        assert "FROM t" in script
        assert script.endswith("WHERE id = 1;")

    def test_custom_separator(self):
        script = render_script([CompiledQuery("DROP TABLE a"), CompiledQuery("DROP TABLE b")], separator="\nGO")
        assert script == "DROP TABLE a\nGO\n\nDROP TABLE b\nGO"
