"""
Command implementations for the gridtable CLI.
Each cmd_*() function receives an argparse.Namespace and handles one command.

Table logic lives in table.py and serializers.py. These thin wrappers
handle argparse → table calls, format selection, and output.
"""

import csv
import io
import json
import sys

from gridtable import config
from gridtable._utils import is_csv_file, is_json_file
from gridtable.api import version
from gridtable.columns import Align
from gridtable.exceptions import InvalidFileExtensionError, TableError
from gridtable.serializers import (
    read_csv_file,
    read_json_file,
    to_csv,
    to_json,
    write_csv_file,
    write_json_file,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def load_table(path):
    """Read a table from a .csv or .json file, chosen by extension."""
    if is_csv_file(path):
        return read_csv_file(path)
    if is_json_file(path):
        return read_json_file(path)
    raise InvalidFileExtensionError(path, "csv or json")


def save_table(table, path, indent):
    if is_csv_file(path):
        write_csv_file(table, path)
    elif is_json_file(path):
        write_json_file(table, path, indent)
    else:
        raise InvalidFileExtensionError(path, "csv or json")


def parse_alignments(specs):
    """Parse ["col=left", ...] into {"col": Align.LEFT, ...}."""
    result = {}
    for spec in specs or []:
        name, sep, mode = spec.rpartition("=")
        if not sep or not name:
            raise TableError(f"[ERROR] Invalid --align '{spec}'. Use COLUMN=left|right|center")
        try:
            result[name] = Align.parse(mode)
        except ValueError as e:
            raise TableError(f"[ERROR] {e}") from None
    return result


def warn(message):
    if not config.RUNTIME_QUIET:
        print(f"[WARN] {message}", file=sys.stderr)


def output(table, fmt="table", indent=2):
    """Print a table in the requested format."""
    if fmt == "json":
        print(to_json(table, indent))
    elif fmt == "csv":
        print(to_csv(table).rstrip("\n"))
    else:
        table.print_table()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_show(ns):
    table = load_table(ns.file)
    table.set_border(ns.border)
    for name, mode in parse_alignments(ns.align).items():
        if not table.has_column(name):
            warn(f"Column '{name}' not found; --align ignored.")
            continue
        table.set_alignment(name, mode)
    output(table, ns.format, ns.indent)


def cmd_convert(ns):
    table = load_table(ns.source)
    save_table(table, ns.destination, ns.indent)
    if not config.RUNTIME_QUIET:
        print(f"OK: converted {ns.source} -> {ns.destination} ({table.length()} rows)")


def cmd_columns(ns):
    table = load_table(ns.file)
    columns = table.get_columns()
    if ns.format == "json":
        print(json.dumps(columns, indent=ns.indent, ensure_ascii=False))
    elif ns.format == "csv":
        buf = io.StringIO()
        csv.writer(buf, lineterminator="").writerow(columns)
        print(buf.getvalue())
    else:
        for name in columns:
            print(name)


def cmd_version(ns):
    print(version())
