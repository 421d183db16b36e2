"""gridtable — in-memory tables rendered as bordered text grids, with CSV/JSON round trips."""

from gridtable.api import create_table, create_table_from_schema, version, versions
from gridtable.cell import Cell
from gridtable.columns import Align, Color, Column, ColumnSet, DisplayAttributes, Style
from gridtable.config import DEFAULT, VERSION
from gridtable.exceptions import (
    DuplicateColumnError,
    EmptySchemaError,
    FileDoesNotExistError,
    InvalidFileExtensionError,
    MalformedFormatError,
    RowLengthMismatchError,
    TableError,
    TableFileError,
    UnknownColumnError,
    UnsupportedRowInputError,
)
from gridtable.rows import ByMapping, BySequence
from gridtable.serializers import read_csv_file as read_table_from_csv_file
from gridtable.serializers import read_json_file as read_table_from_json_file
from gridtable.table import Table

__all__ = [
    "DEFAULT",
    "VERSION",
    "Align",
    "ByMapping",
    "BySequence",
    "Cell",
    "Color",
    "Column",
    "ColumnSet",
    "DisplayAttributes",
    "DuplicateColumnError",
    "EmptySchemaError",
    "FileDoesNotExistError",
    "InvalidFileExtensionError",
    "MalformedFormatError",
    "RowLengthMismatchError",
    "Style",
    "Table",
    "TableError",
    "TableFileError",
    "UnknownColumnError",
    "UnsupportedRowInputError",
    "create_table",
    "create_table_from_schema",
    "read_table_from_csv_file",
    "read_table_from_json_file",
    "version",
    "versions",
]
