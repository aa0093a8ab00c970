"""Lisp string representations of values with a debug fallback."""

from __future__ import annotations

from minilisp.chars import is_lit
from minilisp.values import Group, Lit

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def _quote(s: str) -> str:
    """Quote s as a double-quoted string literal with escapes."""
    out = ['"']
    for ch in s:
        code = ord(ch)
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif code < 0x20 or code == 0x7F:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def _unknown(x: object) -> str:
    return f"<Vunk>({x!r})"


def format_val(x) -> str:
    """Return the Lisp representation of any value.

    Invalid values fall back to a debug representation so they are never
    confused with valid ones.
    """
    if x is None:
        return "<nil>"
    if isinstance(x, Lit):
        return format_lit(x)
    if isinstance(x, Group):
        return format_group(x)
    return _unknown(x)


def _valid_lit(x: str) -> bool:
    return bool(x) and all(is_lit(r) for r in x)


def _append_val(x, parts: list[str], delim: bool) -> bool:
    if isinstance(x, Lit):
        if not _valid_lit(x):
            return False
        if not delim:
            parts.append(" ")
        parts.append(str(x))
        return True
    if isinstance(x, Group):
        return _append_group(x, parts)
    parts.append("<nil>" if x is None else _unknown(x))
    return True


def _append_group(x, parts: list[str]) -> bool:
    parts.append("(")
    delim = True
    for e in x or ():
        if not _append_val(e, parts, delim):
            return False
        if isinstance(e, Lit):
            delim = False
        elif isinstance(e, Group):
            delim = True
    parts.append(")")
    return True


def format_lit(x: Lit) -> str:
    """Return the Lisp representation of a Lit, or a debug form if invalid."""
    if _valid_lit(x):
        return str(x)
    return _debug_lit(x)


def format_group(x: Group | None) -> str:
    """Return the Lisp representation of a Group, or a debug form if invalid."""
    parts: list[str] = []
    if _append_group(x, parts):
        return "".join(parts)
    return _debug_group(x)


def _debug_lit(x: str) -> str:
    return f"lisp.Lit({_quote(str(x))})"


def _debug_group(x) -> str:
    if x is None:
        return "(lisp.Group)(nil)"
    return "lisp.Group{" + "".join(_debug_val(e) for e in x) + "}"


def _debug_val(x) -> str:
    if isinstance(x, Lit):
        return _debug_lit(x)
    if isinstance(x, Group):
        return _debug_group(x)
    if x is None:
        return "<nil>"
    return _unknown(x)