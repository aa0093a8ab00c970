"""Compact binary Lisp encoding."""

from __future__ import annotations

from typing import BinaryIO

from minilisp.values import Group, Lit, Token, Val

MAGIC = "blisp1\n"

_LPAREN = int(Token.LPAREN)
_RPAREN = int(Token.RPAREN)


def _emit(v, buf: bytearray, delim: bool) -> bool:
    """Append the encoding of v and return the new delimiter state."""
    if v is None:
        return delim
    if isinstance(v, Lit):
        if delim:
            buf.append(0x20)
        buf += v.encode("utf-8")
        return True
    if isinstance(v, Group):
        _emit_group(v, buf, delim)
        return False
    raise TypeError(f"unexpected value type: {type(v).__name__}")


def _emit_group(root: Group, buf: bytearray, delim: bool) -> bool:
    buf.append(_LPAREN)
    for x in root:
        delim = _emit(x, buf, delim)
    buf.append(_RPAREN)
    return delim


class Encoder:
    """Writes values in binary Lisp form to a binary stream."""

    def __init__(self, out: BinaryIO | None = None) -> None:
        self._out = out
        self._delim = False

    def reset(self, out: BinaryIO) -> None:
        """Write to out from now on and clear the delimiter state."""
        self._delim = False
        self._out = out

    def encode_magic(self) -> None:
        """Write the format magic header."""
        self._out.write(MAGIC.encode("ascii"))

    def encode(self, v: Val | None) -> None:
        """Encode one value."""
        self._delim = False
        buf = bytearray()
        self._delim = _emit(v, buf, self._delim)
        self._out.write(bytes(buf))

    def encode_group(self, root: Group) -> None:
        """Encode a group, keeping the current delimiter state."""
        buf = bytearray()
        self._delim = _emit_group(root, buf, self._delim)
        self._out.write(bytes(buf))


def encoded_len(v: Val | None) -> int:
    """Return the encoded length of v in bytes."""
    buf = bytearray()
    _emit(v, buf, False)
    return len(buf)


def group_len(root: Group) -> int:
    """Return the encoded length of the group in bytes."""
    buf = bytearray()
    _emit_group(root, buf, False)
    return len(buf)