"""
Unit tests for the SQLite dialect.
"""
import pytest

from sqlforge.dialects import SQLiteDialect
from sqlforge.exceptions import UnsupportedOperationError
from sqlforge.schema import AlterTable, CreateTable


class TestSQLiteCreate:
    """Test SQLite CREATE TABLE rendering."""

    def test_inline_autoincrement_primary_key(self, sqlite):
        """Test that autoincrement is declared inline and no table constraint follows."""
        table = CreateTable("users")
        table.integer("id").autoincrement()
        table.string("name").not_null()
        assert sqlite.create(table)[0].sql == (
            "CREATE TABLE `users`(\n"
            "`id` INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "`name` VARCHAR(255) NOT NULL)\n"
        )

    def test_plain_primary_key_keeps_constraint(self, sqlite):
        """Test that the inline form does not leak into the next render call."""
        first = CreateTable("a")
        first.integer("id").autoincrement()
        sqlite.create(first)

        second = CreateTable("b")
        second.integer("id").primary()
        assert sqlite.create(second)[0].sql == (
            "CREATE TABLE `b`(\n"
            "`id` INTEGER,\n"
            "CONSTRAINT `b_pk_id` PRIMARY KEY (`id`))\n"
        )

    def test_unsupported_parts_dropped(self, sqlite):
        table = CreateTable("t")
        table.enum("kind", ["a", "b"])
        table.timestamp("seen").description("last seen")
        table.engine("innodb")
        assert sqlite.create(table)[0].sql == "CREATE TABLE `t`(\n`kind`,\n`seen` DATETIME)\n"


class TestSQLiteAlter:
    """Test SQLite ALTER TABLE rendering."""

    def test_unsupported_commands_skipped(self, sqlite):
        table = AlterTable("users")
        table.to_integer("age")
        table.drop_primary("users_pk_id")
        table.set_default_value("status", "new")
        table.drop_column("legacy")
        table.rename_column("email", "mail")
        table.unique("email")
        table.drop_unique("users_uk_email")
        assert [q.sql for q in sqlite.alter(table)] == [
            "ALTER TABLE `users` DROP COLUMN `legacy`",
            "ALTER TABLE `users` RENAME COLUMN `email` TO `mail`",
            "CREATE UNIQUE INDEX `users_uk_email` ON `users` (`email`)",
            "DROP INDEX `users_uk_email`",
        ]

    def test_unsupported_command_strict(self):
        table = AlterTable("users")
        table.to_integer("age")
        with pytest.raises(UnsupportedOperationError) as excinfo:
            SQLiteDialect(strict=True).alter(table)
        assert excinfo.value.operation == "modifyColumn"


class TestSQLiteCatalog:
    """Test SQLite catalog and table statements."""

    def test_tables_and_views(self, sqlite):
        tables = sqlite.get_tables()
        assert tables.sql == "SELECT `name` FROM `sqlite_master` WHERE type = ?  ORDER BY `name` ASC"
        assert tables.params == ["table"]
        assert sqlite.get_views().params == ["view"]

    def test_columns(self, sqlite):
        assert sqlite.get_columns("users").sql == "PRAGMA table_info(`users`)"

    def test_database_name(self, sqlite):
        query = sqlite.get_database_name()
        assert query.params == ["main"]

    def test_truncate_is_delete(self, sqlite):
        assert sqlite.truncate("users").sql == "DELETE FROM `users`"
