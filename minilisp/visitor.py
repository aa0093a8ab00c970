"""In-order visitor over values."""

from __future__ import annotations

import enum
from typing import Callable, Optional

from minilisp.values import Group, Lit, Val


class _Flag(enum.Enum):
    NONE = enum.auto()
    STOP = enum.auto()
    SKIP = enum.auto()


class Visitor:
    """Visits values recursively, calling the configured callbacks."""

    def __init__(
        self,
        on_val: Optional[Callable[[Val], None]] = None,
        on_lit: Optional[Callable[[Lit], None]] = None,
        before_group: Optional[Callable[[Group], None]] = None,
        after_group: Optional[Callable[[Group], None]] = None,
    ) -> None:
        self.on_val = on_val
        self.on_lit = on_lit
        self.before_group = before_group
        self.after_group = after_group
        self._flag = _Flag.NONE

    def stop(self) -> None:
        """Stop visiting as soon as possible."""
        self._flag = _Flag.STOP

    def skip(self) -> None:
        """Do not descend into the value currently being visited."""
        self._flag = _Flag.SKIP

    def _flagged(self) -> bool:
        return self._flag is not _Flag.NONE

    def _call(self, fn, value) -> bool:
        if fn is None:
            return True
        fn(value)
        return not self._flagged()

    def visit(self, root: Val | None) -> None:
        """Visit root in order, descending groups until stopped."""
        if root is None:
            return
        try:
            if self._flagged():
                return
            if not self._call(self.on_val, root):
                return
            if isinstance(root, Lit):
                self._call(self.on_lit, root)
            elif isinstance(root, Group):
                self._visit_group(root)
        finally:
            if self._flag is _Flag.SKIP:
                self._flag = _Flag.NONE

    def visit_group(self, root: Group) -> None:
        """Visit the group recursively."""
        if not self._call(self.on_val, root):
            return
        self._visit_group(root)

    def _visit_group(self, root: Group) -> None:
        if not self._call(self.before_group, root):
            return
        for e in root:
            self.visit(e)
            if self._flagged():
                break
        self._call(self.after_group, root)