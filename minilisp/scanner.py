"""Tokenizer and scanner for Lisp source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator, TextIO, Union

from minilisp.chars import is_lit
from minilisp.values import Group, Lit, Token, Val

NO_POS = -1

Source = Union[str, bytes, bytearray, BinaryIO, TextIO]

_LPAREN = ord("(")
_RPAREN = ord(")")
_SPACES = frozenset(b" \t\r\n")
_DELIMS = _SPACES | {_LPAREN, _RPAREN}


class ScanError(ValueError):
    """Raised when the source is not valid Lisp."""

    def __init__(self, message: str, pos: int = NO_POS) -> None:
        super().__init__(message)
        self.pos = pos


@dataclass(frozen=True)
class ScanToken:
    """A token with its byte position."""

    pos: int
    tok: Token
    text: str


@dataclass(frozen=True)
class Node:
    """A top-level value with its byte span."""

    pos: int
    val: Val
    end: int


def _to_bytes(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if hasattr(source, "read"):
        data = source.read()
        return data.encode("utf-8") if isinstance(data, str) else bytes(data)
    raise TypeError(f"unsupported source type: {type(source).__name__}")


class Scanner:
    """Scans Lisp source for tokens, nodes and values."""

    def __init__(self, source: Source = b"") -> None:
        self.reset(source)

    def reset(self, source: Source) -> None:
        """Start scanning a new source from position 0."""
        self._data = _to_bytes(source)
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    def _peek(self) -> int | None:
        if self._pos < len(self._data):
            return self._data[self._pos]
        return None

    def _decode_rune(self) -> tuple[str, int]:
        data, i = self._data, self._pos
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
            size = 1
        try:
            return data[i : i + size].decode("utf-8"), size
        except UnicodeDecodeError:
            return "\ufffd", 1

    def _skip_space(self) -> None:
        while (b := self._peek()) is not None and b in _SPACES:
            self._pos += 1

    def _scan_lit(self) -> str | None:
        """Scan letters and digits; None if no literal starts here."""
        start = self._pos
        parts: list[str] = []
        while (b := self._peek()) is not None and b not in _DELIMS:
            if 0x30 <= b <= 0x39:
                parts.append(chr(b))
                self._pos += 1
                continue
            r, size = self._decode_rune()
            if not is_lit(r):
                break
            parts.append(r)
            self._pos += size
        if self._pos == start:
            return None
        return "".join(parts)

    def _scan_invalid(self) -> str:
        """Consume a run of runes that belong to no token."""
        parts: list[str] = []
        while (b := self._peek()) is not None and b not in _DELIMS:
            if 0x30 <= b <= 0x39:
                break
            r, size = self._decode_rune()
            if is_lit(r):
                break
            parts.append(r)
            self._pos += size
        return "".join(parts)

    def _lit_error(self) -> ScanError:
        r, _ = self._decode_rune()
        return ScanError(f"expected LIT, got {r!r}", self._pos)

    def tokens(self) -> Iterator[ScanToken]:
        """Yield tokens without regard for correct syntax."""
        while True:
            self._skip_space()
            b = self._peek()
            if b is None:
                return
            if b == _LPAREN:
                yield ScanToken(self._pos, Token.LPAREN, "(")
                self._pos += 1
            elif b == _RPAREN:
                yield ScanToken(self._pos, Token.RPAREN, ")")
                self._pos += 1
            else:
                pos = self._pos
                text = self._scan_lit()
                if text is None:
                    yield ScanToken(pos, Token.INVALID, self._scan_invalid())
                else:
                    yield ScanToken(pos, Token.ID, text)

    def nodes(self) -> Iterator[Node]:
        """Yield top-level values with their spans.

        Raises ScanError on an unmatched ')' or an invalid literal.
        """
        stack: list[tuple[int, Group]] = []
        while True:
            self._skip_space()
            b = self._peek()
            if b is None:
                return
            if b == _LPAREN:
                stack.append((self._pos, Group()))
                self._pos += 1
            elif b == _RPAREN:
                if not stack:
                    raise ScanError("unexpected )", self._pos)
                self._pos += 1
                pos, group = stack.pop()
                if stack:
                    stack[-1][1].append(group)
                else:
                    yield Node(pos, group, self._pos)
            else:
                pos = self._pos
                text = self._scan_lit()
                if text is None:
                    raise self._lit_error()
                if stack:
                    stack[-1][1].append(Lit(text))
                else:
                    yield Node(pos, Lit(text), self._pos)

    def values(self) -> Iterator[Val]:
        """Yield top-level values, silently skipping invalid text.

        Raises ScanError on an unmatched ')'.
        """
        stack: list[Group] = []
        while True:
            self._skip_space()
            b = self._peek()
            if b is None:
                return
            if b == _LPAREN:
                stack.append(Group())
                self._pos += 1
            elif b == _RPAREN:
                if not stack:
                    raise ScanError("unexpected )", self._pos)
                self._pos += 1
                group = stack.pop()
                if stack:
                    stack[-1].append(group)
                else:
                    yield group
            else:
                text = self._scan_lit()
                if text is None:
                    self._scan_invalid()
                    continue
                if stack:
                    stack[-1].append(Lit(text))
                else:
                    yield Lit(text)