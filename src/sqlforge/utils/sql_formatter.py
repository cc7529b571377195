"""
SQL Formatter - pretty-printing of rendered statements

Provides formatting styles:
- compact: Multiple columns on same line
- expanded: One column per line
- comma_first: Comma-first style

render_script() turns the statements produced by create()/alter() into one
DDL script that can be reviewed or stored as a migration file.
"""

from typing import Iterable, List, Optional

import sqlparse

from ..constants import STATEMENT_SEPARATOR
from ..dialects.base import CompiledQuery
from ..exceptions import ValidationError

import logging
logger = logging.getLogger(__name__)

# sqlparse.format options per style, on top of reindent + upper-case keywords
_STYLE_OPTIONS = {
    "compact": {"indent_width": 2, "use_space_around_operators": True, "wrap_after": 120},
    "expanded": {"indent_width": 4, "use_space_around_operators": True},
    "comma_first": {"indent_width": 4, "use_space_around_operators": True, "comma_first": True},
}
_DEFAULT_OPTIONS = {"indent_width": 4}


def format_sql(sql_text: str, style: str = "compact") -> str:
    """
    Format SQL query with specified style.

    Args:
        sql_text: SQL query to format
        style: Format style ("compact", "expanded", "comma_first")

    Returns:
        Formatted SQL string
    """
    if not sql_text or not sql_text.strip():
        return sql_text

    options = _STYLE_OPTIONS.get(style)
    if options is None:
        logger.debug(f"Unknown format style {style}, using default layout")
        options = _DEFAULT_OPTIONS

    try:
        return sqlparse.format(sql_text, reindent=True, keyword_case="upper", **options)
    except Exception as e:
        logger.error(f"SQL formatting error: {e}")
        raise


def render_script(
    queries: Iterable[CompiledQuery],
    separator: str = STATEMENT_SEPARATOR,
    style: Optional[str] = None
) -> str:
    """
    Join parameterless statements into one SQL script.

    Args:
        queries: Compiled statements, typically the result of create() or alter()
        separator: Statement terminator
        style: Optional format_sql style applied to every statement

    Returns:
        The script, one terminated statement per block

    Raises:
        ValidationError: A statement carries bound parameters, which a
            plain script cannot represent
    """
    blocks: List[str] = []
    for index, query in enumerate(queries):
        if query.params:
            raise ValidationError(
                f"Statement {index + 1} has {len(query.params)} bound parameter(s) and cannot be scripted"
            )
        sql = query.sql.strip()
        if style:
            sql = format_sql(sql, style)
        blocks.append(f"{sql}{separator}")

    logger.debug(f"Rendered script with {len(blocks)} statement(s)")
    return "\n\n".join(blocks)


def split_script(script: str) -> List[str]:
    """Split a script back into its statements, without terminators."""
    statements = []
    for statement in sqlparse.split(script):
        statement = statement.strip().rstrip(STATEMENT_SEPARATOR).strip()
        if statement:
            statements.append(statement)
    return statements
