"""Render tools: tables and key/value trees (2 tools, no I/O)."""

from __future__ import annotations

from typing import Any

from prettycli import config
from prettycli.formatters import format_dict, format_table
from prettycli.mcp_server._core import _call, _contract_error


def render_table(
    rows: list[dict[str, Any]],
    column_order: list[str] | None = None,
    max_col_width: int | None = None,
) -> dict:
    """Render rows as an aligned plain-text table.

    Args:
        rows: List of objects; keys are column names.
        column_order: Explicit column order (default: first-seen key order).
        max_col_width: Wrap text cells wider than this (default: 80).

    Returns:
        Dict with lines (list of str) and text (joined with newlines).
    """
    if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
        return _contract_error("[ERROR] rows must be a list of objects.", "error")
    if max_col_width is None:
        max_col_width = config.MAX_COL_WIDTH
    return _call(
        format_table,
        rows,
        column_order=column_order or (),
        max_col_width=max_col_width,
    )


def render_dict(
    data: dict[str, Any],
    prefix: str | None = None,
    sep: str | None = None,
) -> dict:
    """Render a nested object as an indented `key -> 'value'` tree.

    Returns:
        Dict with lines (list of str) and text (joined with newlines).
    """
    return _call(
        format_dict,
        data,
        prefix=config.DICT_PREFIX if prefix is None else prefix,
        sep=config.DICT_SEPARATOR if sep is None else sep,
    )


def register(mcp):
    """Register all render tools with the FastMCP instance."""
    mcp.tool()(render_table)
    mcp.tool()(render_dict)
