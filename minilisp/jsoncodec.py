"""Conversion between JSON-like arrays and values."""

from __future__ import annotations

from typing import BinaryIO, Iterator, TextIO, Union

from minilisp.scanner import Scanner
from minilisp.stringer import format_lit
from minilisp.values import Group, Lit, Val

Source = Union[str, bytes, bytearray, BinaryIO, TextIO]

_JSON_TO_LISP = bytes.maketrans(b'[],"', b"()  ")


def _read_all(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    data = source.read()
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


class JsonDecoder:
    """Reads nested JSON string arrays as values."""

    def __init__(self, source: Source) -> None:
        # Brackets become parens; commas and quotes become spaces.
        self._scanner = Scanner(_read_all(source).translate(_JSON_TO_LISP))

    def values(self) -> Iterator[Val]:
        """Yield the decoded top-level values.

        Raises ScanError when the input is not valid.
        """
        for node in self._scanner.nodes():
            yield node.val


def _encode(v) -> str:
    if isinstance(v, Lit):
        return format_lit(v)
    if isinstance(v, Group):
        return "[" + ",".join(_encode(x) for x in v) + "]"
    return ""


class JsonEncoder:
    """Writes values as JSON-like arrays to a text stream."""

    def __init__(self, out: TextIO) -> None:
        self._out = out

    def encode(self, v: Val) -> None:
        """Write the encoding of v."""
        self._out.write(_encode(v))