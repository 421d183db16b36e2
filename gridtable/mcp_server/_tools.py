"""Table tools: render, describe, and convert CSV/JSON files (no network)."""

from __future__ import annotations

from typing import Literal

from gridtable.api import create_table
from gridtable.commands import load_table, save_table
from gridtable.mcp_server._core import _call

AlignMode = Literal["left", "right", "center"]

_MAX_RECORDS = 5000


def _apply_layout(table, border: bool, align: dict[str, AlignMode] | None) -> None:
    table.set_border(border)
    for name, mode in (align or {}).items():
        table.set_alignment(name, mode)


def _render_file(path, border, align):
    table = load_table(path)
    _apply_layout(table, border, align)
    return {"columns": table.get_columns(), "rows": table.length(), "text": table.render()}


def render_file(
    path: str, border: bool = True, align: dict[str, AlignMode] | None = None
) -> dict:
    """Render a .csv or .json file as a text grid."""
    return _call(_render_file, path, border, align)


def _describe_file(path):
    table = load_table(path)
    return {"columns": table.get_columns(), "rows": table.length()}


def describe_file(path: str) -> dict:
    """Column names and row count of a .csv or .json file."""
    return _call(_describe_file, path)


def _convert_file(source, destination, indent):
    table = load_table(source)
    save_table(table, destination, indent)
    return {"source": source, "destination": destination, "rows": table.length()}


def convert_file(source: str, destination: str, indent: int = 2) -> dict:
    """Convert between .csv and .json, chosen by file extension."""
    return _call(_convert_file, source, destination, indent)


def _render_records(records, columns, border, align):
    if len(records) > _MAX_RECORDS:
        raise ValueError(f"at most {_MAX_RECORDS} records per call")
    if not columns:
        columns = list(records[0].keys()) if records else []
    table = create_table(*columns)
    _apply_layout(table, border, align)
    failures = table.add_rows(records)
    return {"text": table.render(), "rows": table.length(), "rejected": failures}


def render_records(
    records: list[dict[str, str]],
    columns: list[str] | None = None,
    border: bool = True,
    align: dict[str, AlignMode] | None = None,
) -> dict:
    """Render in-memory records; columns default to the first record's keys.

    Records with unknown columns are returned under "rejected".
    """
    return _call(_render_records, records, columns, border, align)


def register(mcp):
    """Register all table tools with the FastMCP instance."""
    mcp.tool()(render_file)
    mcp.tool()(describe_file)
    mcp.tool()(convert_file)
    mcp.tool()(render_records)
