"""Core value types: literals, groups and token kinds."""

from __future__ import annotations

import enum
from typing import Union


class Token(enum.IntEnum):
    """Kind of lexical symbol."""

    INVALID = 0
    ID = 1
    LPAREN = 2
    RPAREN = 3


class Lit(str):
    """A text identifier made of consecutive unicode letters and digits."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Lit({str.__repr__(self)})"


class Group(list):
    """A sequence of values enclosed between parens."""

    def __getitem__(self, index):
        result = super().__getitem__(index)
        if isinstance(index, slice):
            return Group(result)
        return result

    def __repr__(self) -> str:
        return f"Group({list.__repr__(self)})"


Val = Union[Lit, Group]