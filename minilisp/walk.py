"""Lightweight traversals over values."""

from __future__ import annotations

from typing import Callable

from minilisp.values import Group, Val


def walk(root: Val | None, fn: Callable[[Val | None], None]) -> None:
    """Call fn on every non-group value under root, in order."""
    if isinstance(root, Group):
        walk_group(root, fn)
    else:
        fn(root)


def walk_group(root: Group, fn: Callable[[Val | None], None]) -> None:
    """Call fn on every non-group value inside the group, in order."""
    for e in root:
        walk(e, fn)


def walk_stack(root: Val | None, fn: Callable[[Val], None]) -> None:
    """Call fn on every value, groups included, using an explicit stack."""
    if root is None:
        return
    stack = [root]
    while stack:
        x = stack.pop()
        fn(x)
        if isinstance(x, Group):
            stack.extend(x)