"""Conversions between values and plain Python data."""

from __future__ import annotations

import re

from minilisp.values import Group, Lit, Val

_DIGITS = re.compile(r"[0-9]+")


def make_id(text: str) -> Lit:
    """Construct a Lit from text."""
    return Lit(text)


def make_nat(i: int) -> Lit:
    """Construct a Lit from an unsigned 64-bit integer."""
    if not 0 <= i < 2**64:
        raise ValueError(f"natural number out of range: {i}")
    return make_id(str(i))


def from_id(v: Val) -> str:
    """Return the text of a Lit."""
    if not isinstance(v, Lit):
        raise TypeError(f"expected Lit, got {type(v).__name__}")
    return str(v)


def _as_group(v: Val) -> Group:
    if not isinstance(v, Group):
        raise TypeError(f"expected Group, got {type(v).__name__}")
    return v


def id_tuple(v: Val) -> list[str]:
    """Return the texts of the Lits in a group."""
    return [from_id(e) for e in _as_group(v)]


def id_set(v: Val) -> set[str]:
    """Return the texts of a (set ...) group as a Python set."""
    group = _as_group(v)
    if not group or from_id(group[0]) != "set":
        raise ValueError("id_set: set should have Val marker")
    return {from_id(e) for e in group[1:]}


def parse_uint(s: str, bit_size: int = 64) -> int:
    """Parse s as a decimal unsigned integer of at most bit_size bits.

    A bit_size of 0 means 64.
    """
    if bit_size == 0:
        bit_size = 64
    if not 0 < bit_size <= 64:
        raise ValueError(f"invalid bit size {bit_size}")
    if not _DIGITS.fullmatch(s):
        raise ValueError(f"invalid syntax: {s!r}")
    value = int(s)
    if value >= 1 << bit_size:
        raise ValueError(f"value out of range: {s!r}")
    return value