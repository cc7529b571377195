"""
Unit tests for the Oracle dialect.
"""
import pytest

from sqlforge.dialects import OracleDialect
from sqlforge.exceptions import UnsupportedOperationError
from sqlforge.schema import AlterTable, CreateTable


class TestOracleQueries:
    """Test Oracle quoting and ROWNUM pagination."""

    def test_identifiers_upper_cased(self, oracle):
        assert oracle.quote_identifier("users.id") == '"USERS"."ID"'
        assert oracle.quote_identifier("u.*") == '"U".*'

    def test_limit(self, oracle, users_query):
        users_query.set_limit(10)
        query = oracle.select(users_query)
        assert query.sql == 'SELECT * FROM (SELECT * FROM "USERS" WHERE "STATUS" = ?) A1 WHERE ROWNUM <= 10'
        assert query.params == ["active"]

    def test_limit_and_offset(self, oracle, users_query):
        users_query.set_limit(10)
        users_query.set_offset(20)
        assert oracle.select(users_query).sql == (
            'SELECT * FROM (SELECT A1.*, ROWNUM AS P_ROWNUM FROM '
            '(SELECT * FROM "USERS" WHERE "STATUS" = ?) A1 WHERE ROWNUM <= 30) WHERE P_ROWNUM >= 21'
        )

    def test_offset_without_limit(self, oracle, users_query):
        """Test that a bare offset is rendered leniently and rejected in strict mode."""
        users_query.set_offset(5)
        assert oracle.select(users_query).sql == 'SELECT * FROM "USERS" WHERE "STATUS" = ? OFFSET ?'
        with pytest.raises(UnsupportedOperationError):
            OracleDialect(strict=True).select(users_query)

    def test_into_dropped_when_paginated(self, oracle, users_query):
        users_query.set_into("backup")
        users_query.set_limit(1)
        assert "INTO" not in oracle.select(users_query).sql


class TestOracleSchema:
    """Test Oracle DDL rendering."""

    def test_create(self, oracle):
        table = CreateTable("users")
        table.integer("id").autoincrement()
        table.string("name", 100).not_null()
        table.decimal("balance")
        table.text("notes").size("small")
        table.datetime("created_at")
        table.engine("innodb")
        assert oracle.create(table)[0].sql == (
            'CREATE TABLE "USERS"(\n'
            '"ID" NUMBER(10) GENERATED BY DEFAULT ON NULL AS IDENTITY,\n'
            '"NAME" VARCHAR2(100) NOT NULL,\n'
            '"BALANCE" NUMBER(10),\n'
            '"NOTES" VARCHAR2(2000),\n'
            '"CREATED_AT" DATE,\n'
            'CONSTRAINT "USERS_PK_ID" PRIMARY KEY ("ID"))\n'
        )

    def test_decimal_precision(self, oracle):
        table = CreateTable("t")
        table.decimal("amount", 12, 2)
        assert '"AMOUNT" NUMBER(12, 2)' in oracle.create(table)[0].sql

    def test_alter(self, oracle):
        table = AlterTable("users")
        table.string("nick", 32)
        table.to_integer("age").not_null()
        table.set_default_value("status", "new")
        table.drop_default_value("status")
        table.drop_index("users_ik_age")
        table.rename_column("email", "mail")
        assert [q.sql for q in oracle.alter(table)] == [
            'ALTER TABLE "USERS" ADD "NICK" VARCHAR2(32)',
            'ALTER TABLE "USERS" MODIFY "AGE" NUMBER(10) NOT NULL',
            'ALTER TABLE "USERS" MODIFY "STATUS" DEFAULT \'new\'',
            'ALTER TABLE "USERS" MODIFY "STATUS" DEFAULT NULL',
            'DROP INDEX "USERS_IK_AGE"',
            'ALTER TABLE "USERS" RENAME COLUMN "EMAIL" TO "MAIL"',
        ]


class TestOracleCatalog:
    """Test Oracle catalog queries."""

    def test_tables(self, oracle):
        query = oracle.get_tables()
        assert query.sql == 'SELECT "TABLE_NAME" FROM "ALL_TABLES" WHERE owner = ?  ORDER BY "TABLE_NAME" ASC'
        assert query.params == ["scott"]

    def test_views(self, oracle):
        assert oracle.get_views("hr").sql == 'SELECT "VIEW_NAME" FROM "ALL_VIEWS" WHERE owner = ?  ORDER BY "VIEW_NAME" ASC'
        assert oracle.get_views("hr").params == ["hr"]

    def test_columns(self, oracle):
        query = oracle.get_columns("users")
        assert query.sql == (
            'SELECT "COLUMN_NAME" AS "NAME", "DATA_TYPE" AS "TYPE" FROM "ALL_TAB_COLUMNS" '
            'WHERE LOWER("OWNER") = ? AND LOWER("TABLE_NAME") = ? ORDER BY "COLUMN_ID" ASC'
        )
        assert query.params == ["scott", "users"]
        assert oracle.get_view_columns("v").params == ["scott", "v"]

    def test_database_name(self, oracle):
        assert oracle.get_database_name().sql == "SELECT user FROM dual"
