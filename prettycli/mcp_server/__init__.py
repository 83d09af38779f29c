"""MCP server exposing prettycli renderers as tools.

Package structure:
  __init__.py        — FastMCP init, register() calls, re-exports
  __main__.py        — ``python -m prettycli.mcp_server`` entry point
  _core.py           — _call dispatcher, response contract
  _tools_render.py   — render_table / render_dict

Run: python -m prettycli.mcp_server
Requires: python -m pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from prettycli.mcp_server import _tools_render

mcp = FastMCP(
    "prettycli",
    instructions=(
        "Plain-text renderers for structured data. "
        "render_table takes a list of objects and returns aligned table lines; "
        "numbers are right-aligned and long text wraps at max_col_width. "
        "render_dict takes a nested object and returns an indented key tree."
    ),
)

_tools_render.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from prettycli.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _finalize_tool_result,
)
from prettycli.mcp_server._tools_render import (  # noqa: E402, F401
    render_dict,
    render_table,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
