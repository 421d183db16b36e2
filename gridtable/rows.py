"""
Row ingestion: turn ordered or keyed input into a complete row of cells.

A row is a plain dict mapping every column name of the owning table to a
Cell. Nothing here touches a table's row list; callers append the result.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from gridtable import config
from gridtable.cell import Cell
from gridtable.columns import ColumnSet
from gridtable.exceptions import (
    RowLengthMismatchError,
    UnknownColumnError,
    UnsupportedRowInputError,
)


@dataclass(frozen=True)
class BySequence:
    """Values in column order."""

    values: tuple[str, ...]

    def __init__(self, values):
        object.__setattr__(self, "values", tuple(values))


@dataclass(frozen=True)
class ByMapping:
    """Values keyed by column name; absent columns take their default."""

    values: dict[str, str]

    def __init__(self, values):
        object.__setattr__(self, "values", dict(values))


RowInput = BySequence | ByMapping


def to_row_input(value) -> RowInput:
    """Wrap a plain list/tuple or dict in its RowInput variant."""
    if isinstance(value, (BySequence, ByMapping)):
        return value
    if isinstance(value, Mapping):
        return ByMapping(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return BySequence(value)
    raise UnsupportedRowInputError(value)


def _check_strings(values, raw) -> None:
    for v in values:
        if not isinstance(v, str):
            raise UnsupportedRowInputError(raw)


def _resolve(value, column) -> str:
    return column.default if value == config.DEFAULT else value


def build_row(columns: ColumnSet, row_input, length_func) -> dict[str, Cell]:
    """Validate *row_input* against *columns* and return a fresh row.

    Raises RowLengthMismatchError, UnknownColumnError, or
    UnsupportedRowInputError. Nothing is partially applied on failure.
    """
    ri = to_row_input(row_input)
    if isinstance(ri, BySequence):
        return _row_from_sequence(columns, ri, length_func)
    return _row_from_mapping(columns, ri, length_func)


def _row_from_sequence(columns, ri, length_func):
    want = columns.len()
    if len(ri.values) != want:
        raise RowLengthMismatchError(len(ri.values), want)
    _check_strings(ri.values, ri.values)
    row = {}
    for column, value in zip(columns, ri.values):
        row[column.name] = Cell.of(_resolve(value, column), length_func)
    return row


def _row_from_mapping(columns, ri, length_func):
    for key in ri.values:
        if not columns.exist(key):
            raise UnknownColumnError(key)
    _check_strings(ri.values.values(), ri.values)
    row = {}
    for column in columns:
        value = ri.values.get(column.name, config.DEFAULT)
        row[column.name] = Cell.of(_resolve(value, column), length_func)
    return row
