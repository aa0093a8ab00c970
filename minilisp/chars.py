"""Byte and character classes of the Lisp syntax."""

from __future__ import annotations

import unicodedata

SPACE = " \t\r\n"
GROUP = "()"
DIGIT = "0123456789"

# Regular patterns describing syntactic elements.
ID_PATTERN = r"[^\W\d_]+"
INT_PATTERN = r"0|[1-9][0-9]*"
GROUP_PATTERN = r"[()]"
VAL_PATTERN = ID_PATTERN + "|" + INT_PATTERN + "|" + GROUP_PATTERN

_SPACE_CODES = frozenset(map(ord, SPACE))
_GROUP_CODES = frozenset(map(ord, GROUP))


def _code(b: int | str) -> int:
    return ord(b) if isinstance(b, str) else b


def is_space(b: int | str) -> bool:
    """Whether b is a whitespace byte."""
    return _code(b) in _SPACE_CODES


def is_group(b: int | str) -> bool:
    """Whether b is a paren."""
    return _code(b) in _GROUP_CODES


def is_nat(b: int | str) -> bool:
    """Whether b is an ASCII digit."""
    return 0x30 <= _code(b) <= 0x39


def is_other(b: int | str) -> bool:
    """Whether b is neither space, paren nor digit."""
    return not is_space(b) and not is_group(b) and not is_nat(b)


def is_token_bound(b: int | str) -> bool:
    """Whether b ends a token."""
    return is_space(b) or is_group(b)


def is_lit(r: int | str) -> bool:
    """Whether the code point r may appear in a literal."""
    ch = chr(r) if isinstance(r, int) else r
    return ch in DIGIT or unicodedata.category(ch).startswith("L")