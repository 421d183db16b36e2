"""
Table factories and version info.
"""

from gridtable import config
from gridtable.columns import ColumnSet
from gridtable.exceptions import EmptySchemaError, TableError
from gridtable.table import Table


def create_table(*columns, border=None, length_func=None):
    """Create an empty table with the given column names, in order.

    Raises EmptySchemaError without columns and DuplicateColumnError when a
    name repeats.
    """
    if not columns:
        raise EmptySchemaError()
    return Table(ColumnSet(columns), border=border, length_func=length_func)


def _schema_names(fields):
    names = []
    for item in fields:
        if isinstance(item, str):
            names.append(item)
            continue
        try:
            field_name, renamed = item
        except (TypeError, ValueError):
            raise TableError(
                f"[ERROR] Schema entries must be names or (field, column) pairs, got {item!r}"
            ) from None
        names.append(renamed or field_name)
    return names


def create_table_from_schema(fields, border=None, length_func=None):
    """Create a table from an ordered field list.

    Each entry is a field name or a ``(field_name, column_name)`` pair; a
    falsy column_name keeps the field name.
    """
    return create_table(*_schema_names(fields), border=border, length_func=length_func)


def versions():
    return config.VERSION.split(".")


def version():
    """e.g. ``gridtable 1.0.0``"""
    return "gridtable " + ".".join(versions())
