"""
Utility helpers around rendered SQL.
"""

from .sql_formatter import format_sql, render_script, split_script

__all__ = ["format_sql", "render_script", "split_script"]
