"""Counting complete top-level groups between delimiters."""

from __future__ import annotations

from typing import BinaryIO, TextIO, Union

Source = Union[str, bytes, bytearray, BinaryIO, TextIO]

_LPAREN = ord("(")
_RPAREN = ord(")")
_SPACE = b" \t\r\n"


def _read_all(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    data = source.read()
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _delim_byte(delim: int | str | bytes) -> int:
    if isinstance(delim, int):
        if not 0 <= delim <= 0xFF:
            raise ValueError(f"delimiter out of byte range: {delim}")
        return delim
    if isinstance(delim, str):
        delim = delim.encode("utf-8")
    if len(delim) != 1:
        raise ValueError(f"delimiter must be a single byte: {delim!r}")
    return delim[0]


class NodeCounter:
    """Counts complete nodes in each delimited chunk of the source.

    Nodes spanning between delimiters count as 0.
    """

    def __init__(self, source: Source = b"", delim: int | str | bytes = "\n") -> None:
        self.reset(source, delim)

    def reset(self, source: Source, delim: int | str | bytes) -> None:
        """Start counting a new source with a new delimiter."""
        self._data = _read_all(source)
        self._offset = 0
        self._delim = _delim_byte(delim)
        self._depth = 0

    def _read_chunk(self) -> tuple[bytes, bool]:
        end = self._data.find(bytes([self._delim]), self._offset)
        if end < 0:
            chunk = self._data[self._offset :]
            self._offset = len(self._data)
            return chunk, False
        chunk = self._data[self._offset : end + 1]
        self._offset = end + 1
        return chunk, True

    def count(self) -> int:
        """Return the number of complete nodes up to the next delimiter."""
        chunk, complete = self._read_chunk()
        if not chunk.strip(_SPACE):
            return 0
        count = 0
        for b in chunk:
            if b == _LPAREN:
                self._depth += 1
            elif b == _RPAREN:
                self._depth -= 1
                if self._depth == 0:
                    count += 1
        if complete:
            self._depth = 0
        return count