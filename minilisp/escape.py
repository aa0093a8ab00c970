"""Escaping of unsupported code points as (u N) groups."""

from __future__ import annotations

import re
import unicodedata

# Code points with the White_Space property.
_WHITE_SPACE = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_ESCAPE_PATTERN = re.compile(r"\([\t\n\f\r ]*u[\t\n\f\r ]+([0-9]+)\)")

_MAX_INT32 = 2**31 - 1


def _allowed(ch: str) -> bool:
    if ch in _WHITE_SPACE or ch in "()":
        return True
    category = unicodedata.category(ch)
    return category == "Nd" or category.startswith("L")


def escape(s: str) -> str:
    """Replace every unsupported code point with a (u N) group."""
    return "".join(ch if _allowed(ch) else f"(u {ord(ch)})" for ch in s)


def _rune(digits: str) -> str:
    value = min(int(digits), _MAX_INT32)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        return "\ufffd"
    return chr(value)


def unescape(s: str) -> str:
    """Replace every (u N) group with the code point N."""
    return _ESCAPE_PATTERN.sub(lambda m: _rune(m.group(1)), s)