"""
Pytest configuration and fixtures for sqlforge tests.
"""
import pytest

from sqlforge.dialects import (
    DatabaseDialect,
    MySQLDialect,
    OracleDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    SQLServerDialect,
)
from sqlforge.query import QueryStatement


@pytest.fixture
def ansi():
    """ANSI base dialect."""
    return DatabaseDialect(db_name="shop")


@pytest.fixture
def mysql():
    return MySQLDialect(db_name="shop")


@pytest.fixture
def postgresql():
    return PostgreSQLDialect(db_name="public")


@pytest.fixture
def sqlite():
    return SQLiteDialect()


@pytest.fixture
def sqlserver():
    return SQLServerDialect(db_name="dbo")


@pytest.fixture
def oracle():
    return OracleDialect(db_name="scott")


@pytest.fixture
def users_query():
    """SELECT over users with one filter, reused by the pagination tests."""
    statement = QueryStatement()
    statement.add_tables("users")
    statement.add_where("status", "active")
    return statement
