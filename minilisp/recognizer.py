"""Recursive-descent recognizer for Lisp syntax."""

from __future__ import annotations

import unicodedata
from typing import BinaryIO, TextIO, Union

from minilisp.scanner import ScanError

Source = Union[str, bytes, bytearray, BinaryIO, TextIO]

_LPAREN = ord("(")
_RPAREN = ord(")")
_SPACES = frozenset(b" \t\r\n")


def _read_all(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    data = source.read()
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _decode_rune(data: bytes, i: int) -> tuple[str, int]:
    lead = data[i]
    if lead < 0x80:
        size = 1
    elif lead >> 5 == 0b110:
        size = 2
    elif lead >> 4 == 0b1110:
        size = 3
    elif lead >> 3 == 0b11110:
        size = 4
    else:
        return "\ufffd", 1
    try:
        return data[i : i + size].decode("utf-8"), size
    except UnicodeDecodeError:
        return "\ufffd", 1


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def _space(b: int | None) -> bool:
    return b is not None and b in _SPACES


def _digit(b: int | None) -> bool:
    return b is not None and 0x30 <= b <= 0x39


def _lit1(b: int | None) -> bool:
    return _digit(b) or (b != _LPAREN and b != _RPAREN and not _space(b))


def _expr0(b: int | None) -> bool:
    return b == _LPAREN or _lit1(b)


class Recognizer:
    """Checks Lisp source against the grammar, one production at a time.

    Each scan method returns whether its production matched. The first
    syntax error met is kept in ``error``.
    """

    def __init__(self, source: Source = b"") -> None:
        self.reset(source)

    def reset(self, source: Source) -> None:
        """Start recognizing a new source from position 0."""
        self._data = _read_all(source)
        self._pos = 0
        self._error: ScanError | None = None
        self._forget()

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def error(self) -> ScanError | None:
        return self._error

    def _forget(self) -> None:
        self._can_unread_byte = False
        self._last_rune_size = -1

    def _set_error(self, message: str) -> None:
        if self._error is None:
            self._error = ScanError(message, self._pos)

    def peek_byte(self) -> int | None:
        """Return the next byte without consuming it, or None at the end."""
        self._forget()
        if self._pos < len(self._data):
            return self._data[self._pos]
        return None

    def read_byte(self) -> int:
        """Consume and return the next byte; raise EOFError at the end."""
        if self._pos >= len(self._data):
            raise EOFError("end of source")
        b = self._data[self._pos]
        self._pos += 1
        self._can_unread_byte = True
        self._last_rune_size = -1
        return b

    def unread_byte(self) -> None:
        """Step back over the byte just read."""
        if not self._can_unread_byte:
            raise ValueError("unread_byte: no byte was just read")
        self._pos -= 1
        self._forget()

    def read_rune(self) -> tuple[str, int]:
        """Consume the next UTF-8 rune and return it with its size."""
        if self._pos >= len(self._data):
            raise EOFError("end of source")
        ch, size = _decode_rune(self._data, self._pos)
        self._pos += size
        self._can_unread_byte = True
        self._last_rune_size = size
        return ch, size

    def unread_rune(self) -> None:
        """Step back over the rune just read."""
        if self._last_rune_size < 0:
            raise ValueError("unread_rune: no rune was just read")
        self._pos -= self._last_rune_size
        self._forget()

    def _discard(self) -> None:
        if self._pos < len(self._data):
            self._pos += 1
        self._forget()

    def skip_space1(self) -> bool:
        """Skip any whitespace; return whether some was skipped."""
        skipped = False
        while _space(self.peek_byte()):
            self._discard()
            skipped = True
        return skipped

    def _skip_space0(self) -> bool:
        try:
            b = self.read_byte()
        except EOFError:
            return False
        if not _space(b):
            self._set_error("expected space")
            return False
        return True

    def scan_space2(self) -> bool:
        """Match one or more whitespace bytes."""
        if not self._skip_space0():
            return False
        self.skip_space1()
        return True

    def _scan_lit0(self) -> bool:
        try:
            ch, _ = self.read_rune()
        except EOFError:
            return False
        if not _is_letter(ch):
            self.unread_rune()
            self._set_error(f"expected LIT, got {ch!r}")
            return False
        return True

    def _scan_lit1(self) -> bool:
        b = self.peek_byte()
        if _digit(b):
            self._discard()
            return True
        if b == _LPAREN or b == _RPAREN or _space(b):
            return False
        return self._scan_lit0()

    def scan_lit2(self) -> bool:
        """Match a literal: one or more letters or digits."""
        if not self._scan_lit1():
            return False
        while _lit1(self.peek_byte()) and self._scan_lit1():
            pass
        return True

    def scan_lit3(self) -> bool:
        """Match literals separated by whitespace."""
        if not self.scan_lit2():
            return False
        while _space(self.peek_byte()) and self.scan_space2():
            if not _lit1(self.peek_byte()) or not self.scan_lit2():
                break
        return True

    def scan_group0(self) -> bool:
        """Match a parenthesised expression."""
        if self.peek_byte() != _LPAREN:
            return False
        self._discard()
        if not self.scan_expr3() or self.peek_byte() != _RPAREN:
            return False
        self._discard()
        return True

    def scan_group1(self) -> bool:
        """Match groups separated by optional whitespace."""
        if not self.scan_group0():
            return False
        while True:
            self.skip_space1()
            if not self.scan_group0():
                break
        return True

    def scan_expr0(self) -> bool:
        """Match a group or a literal."""
        return (self.peek_byte() == _LPAREN and self.scan_group0()) or self.scan_lit2()

    def scan_expr1(self) -> bool:
        """Match one or more adjacent expressions."""
        if not self.scan_expr0():
            return False
        while _expr0(self.peek_byte()) and self.scan_expr0():
            pass
        return True

    def scan_expr2(self) -> bool:
        """Match an optional run of expressions."""
        if _expr0(self.peek_byte()):
            return self.scan_expr1()
        return True

    def scan_expr3(self) -> bool:
        """Match expressions surrounded by optional whitespace."""
        self.skip_space1()
        if not self.scan_expr2():
            return False
        self.skip_space1()
        return True