"""Immutable cell values."""

from dataclasses import dataclass

from gridtable._utils import display_length


@dataclass(frozen=True)
class Cell:
    """A text value together with its display length."""

    text: str
    length: int

    @classmethod
    def of(cls, text, length_func=display_length):
        return cls(text=text, length=length_func(text))

    @classmethod
    def empty(cls):
        return cls(text="", length=0)

    def __str__(self):
        return self.text
