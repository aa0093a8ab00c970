"""Whitespace normalisation of Lisp source."""

from __future__ import annotations

_SPACE = " \t\r\n"
_PARENS = "()"


def format_source(src: str | bytes | bytearray) -> str | bytes:
    """Format Lisp source.

    One space is kept between adjacent literal tokens; all other whitespace
    is removed. Spaces are never added. Bytes in give bytes out.
    """
    if isinstance(src, (bytes, bytearray)):
        # Only ASCII bytes are significant, so a byte-preserving decode is safe.
        return format_source(bytes(src).decode("latin-1")).encode("latin-1")
    out: list[str] = []
    pending: str | None = None
    delim = False
    for ch in src:
        if ch in _SPACE:
            if delim and pending is None:
                pending = ch
        elif ch in _PARENS:
            pending = None
            delim = False
            out.append(ch)
        else:
            if pending is not None:
                out.append(pending)
                pending = None
            out.append(ch)
            delim = True
    return "".join(out)