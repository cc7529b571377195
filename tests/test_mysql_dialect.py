"""
Unit tests for the MySQL dialect.
"""
from sqlforge.query import QueryStatement
from sqlforge.schema import AlterTable, ColumnType, CreateTable


class TestMySQLQueries:
    """Test MySQL query rendering."""

    def test_backtick_quoting(self, mysql):
        assert mysql.quote_identifier("users.id") == "`users`.`id`"
        assert mysql.quote_identifier("we`ird") == "`we``ird`"

    def test_limit_offset(self, mysql, users_query):
        users_query.set_limit(10)
        users_query.set_offset(20)
        query = mysql.select(users_query)
        assert query.sql == "SELECT * FROM `users` WHERE `status` = ? LIMIT ? OFFSET ?"
        assert query.params == ["active", 10, 20]

    def test_update_with_join(self, mysql):
        statement = QueryStatement()
        statement.add_tables({"users": "u"})
        statement.add_join_clause("inner", {"orders": "o"}, lambda j: j.on("u.id", "o.user_id"))
        statement.add_update_columns({"u.total": 0})
        assert mysql.update(statement).sql == (
            "UPDATE `users` AS `u` INNER JOIN `orders` AS `o` ON `u`.`id` = `o`.`user_id` SET `u`.`total` = ?"
        )


class TestMySQLCreate:
    """Test MySQL CREATE TABLE rendering."""

    def test_autoincrement_primary_key(self, mysql):
        """Test that autoincrement renders AUTO_INCREMENT plus a primary key constraint."""
        table = CreateTable("users")
        table.integer("id").autoincrement()
        table.string("name").description("display name")
        table.engine("innodb")
        assert mysql.create(table)[0].sql == (
            "CREATE TABLE `users`(\n"
            "`id` INT AUTO_INCREMENT,\n"
            "`name` VARCHAR(255) COMMENT 'display name',\n"
            "CONSTRAINT `users_pk_id` PRIMARY KEY (`id`))\n"
            " ENGINE = INNODB"
        )

    def test_type_table(self, mysql):
        table = CreateTable("t")
        table.integer("a").size("big")
        table.text("b").size("medium")
        table.binary("c").size("tiny")
        table.decimal("d", 10, 2)
        table.enum("e", ["x", "y"])
        table.boolean("f")
        table.integer("g").unsigned().size("small")
        assert mysql.create(table)[0].sql == (
            "CREATE TABLE `t`(\n"
            "`a` BIGINT,\n"
            "`b` MEDIUMTEXT,\n"
            "`c` TINYBLOB,\n"
            "`d` DECIMAL(10, 2),\n"
            "`e` ENUM('x','y'),\n"
            "`f` TINYINT(1),\n"
            "`g` SMALLINT UNSIGNED)\n"
        )

    def test_autoincrement_ignored_on_string(self, mysql):
        table = CreateTable("t")
        table.string("code").autoincrement()
        assert table.get_primary_key() is None
        assert mysql.create(table)[0].sql == "CREATE TABLE `t`(\n`code` VARCHAR(255))\n"


class TestMySQLAlter:
    """Test MySQL ALTER TABLE rendering."""

    def test_rename_column_restates_type(self, mysql):
        table = AlterTable("users")
        table.rename_column("email", "mail")
        table.rename_column("nick", "nickname", ColumnType.STRING)
        table.rename_column("bio", "about", "varchar(64)")
        assert [q.sql for q in mysql.alter(table)] == [
            "ALTER TABLE `users` CHANGE `email` `mail` integer",
            "ALTER TABLE `users` CHANGE `nick` `nickname` VARCHAR(255)",
            "ALTER TABLE `users` CHANGE `bio` `about` varchar(64)",
        ]

    def test_drops_and_defaults(self, mysql):
        table = AlterTable("users")
        table.drop_primary("users_pk_id")
        table.drop_unique("users_uk_email")
        table.drop_index("users_ik_age")
        table.drop_foreign("users_fk_role_id")
        table.set_default_value("status", "new")
        table.drop_default_value("status")
        assert [q.sql for q in mysql.alter(table)] == [
            "ALTER TABLE `users` DROP PRIMARY KEY",
            "ALTER TABLE `users` DROP INDEX `users_uk_email`",
            "ALTER TABLE `users` DROP INDEX `users_ik_age`",
            "ALTER TABLE `users` DROP FOREIGN KEY `users_fk_role_id`",
            "ALTER TABLE `users` ALTER `status` SET DEFAULT 'new'",
            "ALTER TABLE `users` ALTER `status` DROP DEFAULT",
        ]

    def test_add_column_after(self, mysql):
        table = AlterTable("users")
        table.string("nickname", 64).not_null().after("name")
        assert mysql.alter(table)[0].sql == (
            "ALTER TABLE `users` ADD COLUMN `nickname` VARCHAR(64) NOT NULL AFTER `name`"
        )


class TestMySQLCatalog:
    """Test MySQL catalog queries."""

    def test_columns(self, mysql):
        query = mysql.get_columns("users")
        assert "`column_type` AS `type`" in query.sql
        assert query.params == ["shop", "users"]

    def test_rename_table(self, mysql):
        assert mysql.rename_table("a", "b").sql == "RENAME TABLE `a` TO `b`"
