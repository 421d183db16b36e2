"""
CSV and JSON conversion for tables, in both directions.

Text-level functions (to_csv, read_json, ...) do no I/O; the *_file variants
add the existence/extension checks and open files with scoped handles.
"""

import csv
import io
import json
import sys

from gridtable._utils import is_csv_file, is_file, is_json_file, log_event
from gridtable.api import create_table
from gridtable.columns import ColumnSet
from gridtable.exceptions import (
    FileDoesNotExistError,
    InvalidFileExtensionError,
    MalformedFormatError,
)
from gridtable.table import Table

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def to_records(table):
    """Rows as plain dicts, keys in column order."""
    columns = table.get_columns()
    return [{name: row[name].text for name in columns} for row in table.rows]


def _write_csv(table, stream):
    writer = csv.writer(stream, lineterminator="\n")
    columns = table.get_columns()
    writer.writerow(columns)
    for record in to_records(table):
        writer.writerow([record[name] for name in columns])


def to_csv(table):
    buf = io.StringIO()
    _write_csv(table, buf)
    return buf.getvalue()


def to_json(table, indent=2):
    """JSON array of {column: value} objects; a negative indent counts as 0."""
    return json.dumps(to_records(table), indent=max(0, indent), ensure_ascii=False)


def write_csv_file(table, path):
    if not is_csv_file(path):
        raise InvalidFileExtensionError(path, "csv")
    with open(path, "w", encoding="utf-8", newline="") as f:
        _write_csv(table, f)
    log_event("file_written", path=str(path), format="csv", rows=table.length())


def write_json_file(table, path, indent=2):
    if not is_json_file(path):
        raise InvalidFileExtensionError(path, "json")
    text = to_json(table, indent)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    log_event("file_written", path=str(path), format="json", rows=table.length())


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------


def _lift_field_size_limit():
    """Let the reader accept any field the writer can produce."""
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            limit //= 2


def read_csv(text, source="<csv>"):
    """Build a table from CSV text; the first record names the columns.

    Records whose length does not match the header are skipped.
    """
    _lift_field_size_limit()
    try:
        records = [r for r in csv.reader(io.StringIO(text)) if r]
    except csv.Error as e:
        raise MalformedFormatError(source, f"invalid CSV: {e}") from e
    if not records:
        raise MalformedFormatError(source, "CSV content is empty")

    table = create_table(*records[0])
    failures = table.add_rows(records[1:])
    log_event("csv_read", source=str(source), rows=table.length(), skipped=len(failures))
    return table


def _check_json_rows(data, source):
    if not isinstance(data, list):
        raise MalformedFormatError(source, "expected a JSON array of objects")
    for item in data:
        if not isinstance(item, dict):
            raise MalformedFormatError(source, "every array element must be an object")
        for value in item.values():
            if not isinstance(value, str):
                raise MalformedFormatError(source, "object values must be strings")


def read_json(text, source="<json>"):
    """Build a table from a JSON array of flat string objects.

    Columns come from the first object's keys; later objects with unknown
    keys are skipped. An empty array gives an empty, column-less table.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedFormatError(source, f"invalid JSON: {e.msg} at position {e.pos}") from None
    _check_json_rows(data, source)
    if not data:
        return Table(ColumnSet())

    table = create_table(*data[0].keys())
    failures = table.add_rows(data)
    log_event("json_read", source=str(source), rows=table.length(), skipped=len(failures))
    return table


def _read_text(path, check, expected):
    if not is_file(path):
        raise FileDoesNotExistError(path)
    if not check(path):
        raise InvalidFileExtensionError(path, expected)
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise MalformedFormatError(path, f"not valid UTF-8: {e.reason}") from None


def read_csv_file(path):
    return read_csv(_read_text(path, is_csv_file, "csv"), source=str(path))


def read_json_file(path):
    return read_json(_read_text(path, is_json_file, "json"), source=str(path))
