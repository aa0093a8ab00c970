"""Ordering and equality of values."""

from __future__ import annotations

from minilisp.groups import first, first_lit
from minilisp.values import Group, Lit


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare(a, b) -> int:
    """Compare two values; Lits order before Groups."""
    if isinstance(a, Lit):
        if isinstance(b, Lit):
            return compare_lit(a, b)
        if isinstance(b, Group):
            return -1
        return 1
    if isinstance(a, Group):
        if isinstance(b, Lit):
            return 1
        if isinstance(b, Group):
            return compare_group(a, b)
        return 1
    return 1


def compare_lit(a: Lit, b: Lit) -> int:
    """Compare the text of two Lits."""
    return _cmp(str(a), str(b))


def compare_group(a: Group | None, b: Group | None) -> int:
    """Compare groups element by element; a shorter prefix orders first."""
    a = a or ()
    b = b or ()
    for x, y in zip(a, b):
        c = compare(x, y)
        if c:
            return c
    return _cmp(len(a), len(b))


def equal(a, b) -> bool:
    """Return whether two values are syntactically equivalent."""
    if isinstance(a, Lit):
        return isinstance(b, Lit) and equal_lit(a, b)
    if isinstance(a, Group):
        return isinstance(b, Group) and equal_group(a, b)
    return False


def equal_lit(a: Lit, b: Lit) -> bool:
    """Return whether two Lits have the same text."""
    return str(a) == str(b)


def equal_group(a: Group | None, b: Group | None) -> bool:
    """Return whether two groups are equal element by element."""
    a = a or ()
    b = b or ()
    return len(a) == len(b) and all(equal(x, y) for x, y in zip(a, b))


def lexical_compare(a, b) -> int:
    """Compare values by their left-most Lit, ignoring structure."""
    if a == b:
        return 0
    if isinstance(a, Lit):
        return _lexical_compare_lit(a, b)
    if isinstance(a, Group):
        return _lexical_compare_lit(first_lit(a), b)
    if a is None:
        return 0 if b is None else -1
    return -1


def _lexical_compare_lit(a: Lit, b) -> int:
    if isinstance(b, Lit):
        return _cmp(str(a), str(b))
    if isinstance(b, Group):
        return _lexical_compare_lit(a, first(b))
    return -1