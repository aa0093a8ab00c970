"""Helpers for inspecting groups."""

from __future__ import annotations

from minilisp.values import Group, Lit, Val


def first(group: Group) -> Val | None:
    """Return the first value in the group, or None."""
    return group[0] if group else None


def first_lit(group: Group) -> Lit:
    """Return the left-most in-order Lit, or an empty Lit when there is none."""
    for e in group:
        if isinstance(e, Lit):
            return e
        if isinstance(e, Group):
            found = first_lit(e)
            if found:
                return found
    return Lit("")


def head(group: Group) -> Val | None:
    """Return the first value in the group, or None."""
    return first(group)


def tail(group: Group) -> Group | None:
    """Return the group without its first value, or None when empty."""
    if group:
        return Group(group[1:])
    return None