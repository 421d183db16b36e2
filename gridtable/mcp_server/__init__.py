"""MCP server exposing gridtable rendering and conversion as tools.

Package structure:
  __init__.py  — FastMCP init, register() calls, re-exports
  __main__.py  — ``python -m gridtable.mcp_server`` entry point
  _core.py     — response contract, error conversion
  _tools.py    — render_file, describe_file, convert_file, render_records

Run: python -m gridtable.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from gridtable.mcp_server import _tools

mcp = FastMCP(
    "gridtable",
    instructions=(
        "Render CSV/JSON files as bordered text grids and convert between the two formats. "
        "Paths must end in .csv or .json. JSON files must hold an array of flat objects "
        "whose values are strings."
    ),
)

_tools.register(mcp)

from gridtable.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _finalize_tool_result,
)
from gridtable.mcp_server._tools import (  # noqa: E402, F401
    convert_file,
    describe_file,
    render_file,
    render_records,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
