"""
Shared pure-utility functions for gridtable.

These helpers have no table logic. They are the primitives the core calls
into: display length, file checks, and the stderr event log.
"""

import json
import os
import re
import sys

from gridtable import config

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text):
    """Remove ANSI escape sequences from *text*."""
    if not text:
        return text
    return _ANSI_RE.sub("", text)


def display_length(text):
    """Number of terminal columns *text* occupies (escape codes excluded)."""
    return len(strip_ansi(text))


def is_file(path):
    return os.path.isfile(path)


def has_extension(path, extensions):
    """Case-insensitive extension check, e.g. has_extension("a.CSV", {".csv"})."""
    return os.path.splitext(str(path))[1].lower() in extensions


def is_csv_file(path):
    return has_extension(path, config.CSV_EXTENSIONS)


def is_json_file(path):
    return has_extension(path, config.JSON_EXTENSIONS)


def log_event(kind, **fields):
    """Emit a structured event to stderr when logging is enabled."""
    if not config.LOG_ENABLED:
        return
    fields["event"] = kind
    print("[GRIDTABLE] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)
