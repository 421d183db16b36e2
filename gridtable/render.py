"""Text rendering for tables: width computation, alignment, border drawing."""

from gridtable.cell import Cell
from gridtable.columns import Align

_SEPARATOR = "-"


def _check_fill(fillchar):
    if len(fillchar) != 1:
        raise ValueError("the fill character must be exactly one character long")


def center(cell, width, fillchar=" "):
    """Center *cell* in *width*; an odd pad puts the extra fill at the back.

    Accepts a Cell or a plain string. Never truncates.
    """
    _check_fill(fillchar)
    text, length = _text_and_length(cell)
    if length >= width:
        return text
    pad = width - length
    front = fillchar * (pad // 2)
    back = fillchar * (pad - pad // 2)
    return front + text + back


def left(cell, width, fillchar=" "):
    _check_fill(fillchar)
    text, length = _text_and_length(cell)
    return text + fillchar * max(0, width - length)


def right(cell, width, fillchar=" "):
    _check_fill(fillchar)
    text, length = _text_and_length(cell)
    return fillchar * max(0, width - length) + text


_ALIGNERS = {Align.LEFT: left, Align.RIGHT: right, Align.CENTER: center}


def align(cell, width, mode):
    return _ALIGNERS[mode](cell, width, " ")


def _text_and_length(cell):
    if isinstance(cell, Cell):
        return cell.text, cell.length
    return cell, len(cell)


def compute_widths(columns, rows, length_func, border=True):
    """Field width per column name for one render pass."""
    widths = {}
    for col in columns:
        widths[col.name] = max(length_func(col.name), col.min_width)
    for row in rows:
        for col in columns:
            cell = row.get(col.name)
            if cell is not None:
                widths[col.name] = max(widths[col.name], cell.length)
    if border:
        for name in widths:
            widths[name] += 2
    return widths


def _join(fields, delimiter):
    if not fields:
        return ""
    return delimiter + delimiter.join(fields) + delimiter


def separator_line(columns, widths):
    return _join([_SEPARATOR * widths[col.name] for col in columns], "+")


def header_line(columns, widths, length_func, border=True):
    fields = []
    for col in columns:
        cell = Cell(text=col.display_name(), length=length_func(col.name))
        fields.append(align(cell, widths[col.name], col.align))
    return _join(fields, "|" if border else " ")


def data_line(columns, row, widths, border=True):
    fields = []
    for col in columns:
        cell = row.get(col.name) or Cell.empty()
        fields.append(align(cell, widths[col.name], col.align))
    return _join(fields, "|" if border else " ")


def render_lines(columns, rows, length_func, border=True):
    """Render a table as a list of text lines.

    Layout: top separator, header, separator, data rows, closing separator.
    Separators appear only with borders on; the closing one only when
    there is at least one row. A table without columns renders nothing.
    """
    if not len(columns):
        return []
    widths = compute_widths(columns, rows, length_func, border)
    lines = []
    if border:
        lines.append(separator_line(columns, widths))
    lines.append(header_line(columns, widths, length_func, border))
    if border:
        lines.append(separator_line(columns, widths))
    for row in rows:
        lines.append(data_line(columns, row, widths, border))
    if border and rows:
        lines.append(separator_line(columns, widths))
    return lines


def render(columns, rows, length_func, border=True):
    return "\n".join(render_lines(columns, rows, length_func, border))
