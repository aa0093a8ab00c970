"""Low-level decoders for identifiers and raw group text."""

from __future__ import annotations

import unicodedata
from typing import BinaryIO, Iterator, TextIO, Union

from minilisp.scanner import ScanToken
from minilisp.values import Token

Source = Union[str, bytes, bytearray, BinaryIO, TextIO]

_LPAREN = ord("(")
_RPAREN = ord(")")


class DecodeError(ValueError):
    """Raised on bytes that are not valid UTF-8."""

    def __init__(self, message: str, advance: int) -> None:
        super().__init__(message)
        self.advance = advance


def _decode_rune(data: bytes, i: int) -> tuple[str | None, int]:
    """Decode the rune at i; None when missing, invalid or U+FFFD."""
    if i >= len(data):
        return None, 0
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
        return None, 1
    try:
        ch = data[i : i + size].decode("utf-8")
    except UnicodeDecodeError:
        return None, 1
    if ch == "\ufffd":
        return None, size
    return ch, size


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def _is_id(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category == "Nd" or category.startswith("L")


class IdDecoder:
    """Splits an identifier off the front of a byte buffer."""

    def decode(self, data: bytes, at_eof: bool = False) -> tuple[int, bytes | None]:
        """Return (advance, token) for an identifier starting data.

        Returns (0, None) when data does not start with a letter. The token
        runs through the first rune that is not a letter or digit. Raises
        DecodeError on invalid UTF-8 or when the data ends first.
        """
        data = bytes(data)
        ch, size = _decode_rune(data, 0)
        if ch is None:
            raise DecodeError("unexpected rune", 0)
        if not _is_letter(ch):
            return 0, None
        i = size
        while True:
            ch, size = _decode_rune(data, i)
            if ch is None:
                raise DecodeError("unexpected rune", i)
            i += size
            if not _is_id(ch):
                break
        return i, data[:i]


def _read_all(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    data = source.read()
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


class PreDecoder:
    """Extracts top-level groups as raw, untokenized text.

    Each group is yielded as a token of kind INVALID; text outside groups
    and unclosed groups are dropped.
    """

    def __init__(self, source: Source = b"") -> None:
        self.reset(source)

    def reset(self, source: Source) -> None:
        """Start decoding a new source."""
        self._data = _read_all(source)

    def tokens(self) -> Iterator[ScanToken]:
        """Yield each complete top-level group with its byte position."""
        depth = 0
        start = 0
        for i, b in enumerate(self._data):
            if b == _LPAREN:
                if depth == 0:
                    start = i
                depth += 1
            elif b == _RPAREN and depth > 0:
                depth -= 1
                if depth == 0:
                    text = self._data[start : i + 1].decode("utf-8", "replace")
                    yield ScanToken(start, Token.INVALID, text)