"""
Column schema: alignment modes, display attributes, Column and ColumnSet.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum

from gridtable.exceptions import DuplicateColumnError


class Align(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, value: str | Align) -> Align:
        """Accept an Align or its name (case-insensitive)."""
        if isinstance(value, Align):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(f"Invalid alignment '{value}'. Valid: {valid}") from None


class Style(IntEnum):
    """Terminal display control codes."""

    DEFAULT = 0
    HIGHLIGHT = 1
    UNDERLINE = 4
    FLASH = 5


class Color(IntEnum):
    """Foreground colour codes; backgrounds are the same code + 10."""

    NONE = 0
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37


@dataclass(frozen=True)
class DisplayAttributes:
    style: Style = Style.DEFAULT
    foreground: Color = Color.NONE
    background: Color = Color.NONE

    @property
    def plain(self) -> bool:
        return (
            self.style == Style.DEFAULT
            and self.foreground == Color.NONE
            and self.background == Color.NONE
        )

    def escape_codes(self) -> str:
        codes = [str(int(self.style))]
        if self.foreground != Color.NONE:
            codes.append(str(int(self.foreground)))
        if self.background != Color.NONE:
            codes.append(str(int(self.background) + 10))
        return ";".join(codes)

    def wrap(self, text: str) -> str:
        """Wrap *text* in ANSI escapes; plain attributes return it unchanged."""
        if self.plain:
            return text
        return f"\033[{self.escape_codes()}m{text}\033[0m"


@dataclass(eq=False)
class Column:
    """A named field. Identity (equality, hashing) is the name alone."""

    name: str
    align: Align = Align.CENTER
    default: str = ""
    attributes: DisplayAttributes = field(default_factory=DisplayAttributes)
    min_width: int = 0

    def __eq__(self, other):
        if not isinstance(other, Column):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def set_color(self, style: Style, foreground: Color, background: Color) -> None:
        self.attributes = replace(
            self.attributes,
            style=Style(style),
            foreground=Color(foreground),
            background=Color(background),
        )

    def display_name(self) -> str:
        return self.attributes.wrap(self.name)


class ColumnSet:
    """Ordered, name-unique collection of columns."""

    def __init__(self, names=()):
        self._base: list[Column] = []
        for name in names:
            self.add(name)

    def add(self, name: str) -> Column:
        if self.exist(name):
            raise DuplicateColumnError(name)
        column = Column(name=name)
        self._base.append(column)
        return column

    def exist(self, name: str) -> bool:
        return any(col.name == name for col in self._base)

    def get(self, name: str) -> Column | None:
        for col in self._base:
            if col.name == name:
                return col
        return None

    def len(self) -> int:
        return len(self._base)

    def names(self) -> list[str]:
        return [col.name for col in self._base]

    def equal(self, other: ColumnSet) -> bool:
        if self.len() != other.len():
            return False
        return set(self.names()) == set(other.names())

    def clear(self) -> None:
        self._base = []

    def __len__(self):
        return len(self._base)

    def __iter__(self):
        return iter(list(self._base))

    def __getitem__(self, index):
        return self._base[index]

    def __contains__(self, name):
        return self.exist(name)

    def __repr__(self):
        return f"ColumnSet({self.names()!r})"
