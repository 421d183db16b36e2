"""
The Table aggregate: a column schema, an append-only list of rows, and a
border toggle.

Validation lives in rows.py, drawing in render.py, and file formats in
serializers.py; Table wires them together and owns the mutable state.
"""

from __future__ import annotations

import sys

from gridtable import config
from gridtable._utils import display_length, log_event
from gridtable.cell import Cell
from gridtable.columns import Align, Color, ColumnSet, Style
from gridtable.exceptions import TableError
from gridtable.render import render_lines
from gridtable.rows import build_row


class Table:
    def __init__(self, columns: ColumnSet, border: bool | None = None, length_func=None):
        self.columns = columns
        self.rows: list[dict[str, Cell]] = []
        self.border = config.BORDER_DEFAULT if border is None else border
        self.length_func = length_func or display_length

    def __len__(self):
        return len(self.rows)

    def __repr__(self):
        return f"Table(columns={self.get_columns()!r}, rows={len(self.rows)})"

    # --- schema ---

    def add_column(self, name: str) -> None:
        """Add a column; existing rows gain an empty cell for it."""
        self.columns.add(name)
        for row in self.rows:
            row[name] = Cell.empty()

    def has_column(self, name: str) -> bool:
        return self.columns.exist(name)

    def columns_equal(self, other: Table) -> bool:
        return self.columns.equal(other.columns)

    def get_columns(self) -> list[str]:
        return self.columns.names()

    def set_default(self, name: str, value: str) -> None:
        col = self.columns.get(name)
        if col is not None:
            col.default = value

    def drop_default(self, name: str) -> None:
        self.set_default(name, "")

    def get_default(self, name: str) -> str:
        col = self.columns.get(name)
        return col.default if col is not None else ""

    def get_defaults(self) -> dict[str, str]:
        return {col.name: col.default for col in self.columns}

    def set_alignment(self, name: str, mode) -> None:
        col = self.columns.get(name)
        if col is not None:
            col.align = Align.parse(mode)

    def set_column_color(
        self,
        name: str,
        style: Style = Style.DEFAULT,
        foreground: Color = Color.NONE,
        background: Color = Color.NONE,
    ) -> None:
        col = self.columns.get(name)
        if col is not None:
            col.set_color(style, foreground, background)

    def set_min_width(self, name: str, width: int) -> None:
        col = self.columns.get(name)
        if col is not None:
            col.min_width = max(0, width)

    # --- rows ---

    def add_row(self, row) -> None:
        """Add one row given as a list (column order) or dict (column -> value).

        The DEFAULT sentinel, or a column missing from a dict, takes the
        column's default value. Raises RowLengthMismatchError,
        UnknownColumnError or UnsupportedRowInputError; the table is left
        untouched on failure.
        """
        self.rows.append(build_row(self.columns, row, self.length_func))

    def add_rows(self, rows) -> list:
        """Add each row independently and return the ones that failed.

        Rows added before a failure stay in the table.
        """
        failures = []
        for index, row in enumerate(rows):
            try:
                self.add_row(row)
            except TableError as e:
                log_event("row_rejected", index=index, error=str(e))
                failures.append(row)
        return failures

    def get_values(self) -> list[dict[str, str]]:
        return [{name: cell.text for name, cell in row.items()} for row in self.rows]

    def row_exists(self, partial: dict[str, str]) -> bool:
        """True if some row matches every column -> value pair in *partial*."""
        for row in self.rows:
            if all(key in row and row[key].text == value for key, value in partial.items()):
                return True
        return False

    def length(self) -> int:
        return len(self.rows)

    def empty(self) -> bool:
        return not self.rows

    def clear(self) -> None:
        """Remove every column and every row."""
        self.columns.clear()
        self.rows = []

    # --- border ---

    def set_border(self, enabled: bool) -> None:
        self.border = bool(enabled)

    def open_border(self) -> None:
        self.border = True

    def close_border(self) -> None:
        self.border = False

    # --- output ---

    def render_lines(self) -> list[str]:
        return render_lines(self.columns, self.rows, self.length_func, self.border)

    def render(self) -> str:
        return "\n".join(self.render_lines())

    def print_table(self, file=None) -> None:
        out = file or sys.stdout
        for line in self.render_lines():
            print(line, file=out)

    def to_json(self, indent: int = 2) -> str:
        from gridtable.serializers import to_json

        return to_json(self, indent)

    def to_csv(self) -> str:
        from gridtable.serializers import to_csv

        return to_csv(self)

    def to_csv_file(self, path) -> None:
        from gridtable.serializers import write_csv_file

        write_csv_file(self, path)

    def to_json_file(self, path, indent: int = 2) -> None:
        from gridtable.serializers import write_json_file

        write_json_file(self, path, indent)

    def __str__(self):
        return self.render()
