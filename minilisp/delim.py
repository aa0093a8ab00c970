"""Delimiter bytes of the Lisp syntax."""

from __future__ import annotations

from dataclasses import dataclass

_DELIMS = frozenset(b"() \t\r\n")


def _code(b: int | str) -> int:
    return ord(b) if isinstance(b, str) else b


def is_delim(b: int | str) -> bool:
    """Whether b is a delimiter byte."""
    return _code(b) in _DELIMS


@dataclass
class DelimByte:
    """A byte that may be absent; an absent byte acts as a delimiter."""

    value: int = 0
    ok: bool = False

    def set(self, value: int | str) -> None:
        """Set the byte and mark it present."""
        self.value = _code(value)
        self.ok = True

    def is_delim(self) -> bool:
        """Whether this byte is absent or a delimiter."""
        return not self.ok or is_delim(self.value)

    def between(self, other: DelimByte) -> bool:
        """Whether a delimiter is needed between this byte and other."""
        return not self.is_delim() or not other.is_delim()