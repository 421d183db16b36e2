"""
gridtable — render CSV/JSON files as text grids and convert between them
"""

import argparse
import json
import sys

from gridtable import config
from gridtable.commands import cmd_columns, cmd_convert, cmd_show, cmd_version
from gridtable.exceptions import TableError

HELP_TEXT = """\
Usage: gridtable <command> [args...]

Global flags:
  --format table          Output as a text grid (default)
  --format json           Output as a JSON array of objects
  --format csv            Output as CSV
  --indent <n>            JSON indent width (default: GRIDTABLE_JSON_INDENT or 2)
  --no-border             Render without separator lines and | delimiters
  --quiet, -q             Suppress confirmations and warnings
  --verbose, -v           Log file and ingestion events to stderr
  --version               Show version number

Commands:
  show <file>             - Render a .csv or .json file
    --align <col>=<mode>    left, right or center (repeatable)
  convert <src> <dst>     - Convert between .csv and .json (by extension)
  columns <file>          - List column names of a .csv or .json file
  version                 - Show version number
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --format works after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, indent, border, quiet, verbose, remaining_argv).
    Handles --version directly.
    """
    fmt = "table"
    indent = config.JSON_INDENT
    border = config.BORDER_DEFAULT
    quiet = False
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"gridtable {config.VERSION}")
            sys.exit(0)
        elif argv[i] == "--no-border":
            border = False
            i += 1
            continue
        elif argv[i] in ("--quiet", "-q"):
            quiet = True
            i += 1
            continue
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
            i += 1
            continue
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in config.VALID_FORMATS:
                raise TableError(f"[ERROR] Invalid format '{fmt}'. Use: table, json, csv")
            i += 2
            continue
        elif argv[i] == "--indent" and i + 1 < len(argv):
            try:
                indent = max(0, int(argv[i + 1]))
            except ValueError:
                raise TableError(
                    f"[ERROR] Invalid indent '{argv[i + 1]}'. Use a non-negative integer."
                ) from None
            i += 2
            continue
        else:
            remaining.append(argv[i])
        i += 1
    if quiet and verbose:
        raise TableError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return fmt, indent, border, quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises TableError instead of printing full help text."""

    def error(self, message):
        raise TableError(f"[ERROR] {message}")


def build_parser():
    parser = _SubcommandParser(
        prog="gridtable",
        description="Render CSV/JSON files as text grids and convert between them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- show ---
    p = sub.add_parser("show")
    p.add_argument("file")
    p.add_argument("--align", action="append", default=[], metavar="COLUMN=MODE")
    p.set_defaults(func=cmd_show)

    # --- convert ---
    p = sub.add_parser("convert")
    p.add_argument("source")
    p.add_argument("destination")
    p.set_defaults(func=cmd_convert)

    # --- columns ---
    p = sub.add_parser("columns")
    p.add_argument("file")
    p.set_defaults(func=cmd_columns)

    # --- version ---
    sub.add_parser("version").set_defaults(func=cmd_version)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _error_type(err):
    name = type(err).__name__
    out = []
    for i, ch in enumerate(name.removesuffix("Error")):
        if ch.isupper() and i:
            out.append("_")
        out.append(ch.lower())
    return "".join(out) or "error"


def _emit_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {
                "type": _error_type(err),
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main(argv=None):
    if argv is None:
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8", errors="replace")
        argv = sys.argv[1:]
    if not argv:
        print(HELP_TEXT)
        sys.exit(0)

    fmt = "table"
    try:
        # Extract global flags from anywhere in argv
        fmt, indent, border, quiet, verbose, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_VERBOSE = verbose
        if verbose:
            config.LOG_ENABLED = True

        if not remaining_argv:
            print(HELP_TEXT)
            sys.exit(0)

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt  # inject global flags
        ns.indent = indent
        ns.border = border

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        ns.func(ns)

    except TableError as e:
        _emit_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
