"""Canonical printer for values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from minilisp.values import Group, Lit, Val
from minilisp.visitor import Visitor


@dataclass
class PrinterOptions:
    """Options controlling the printer output."""

    nil: str = ""
    prefix: str = ""  # Added before every line.
    new_line: bool = False  # Add a new line after each top-level expression.


class Printer:
    """Prints values to a text stream."""

    def __init__(self, out: TextIO, options: PrinterOptions | None = None) -> None:
        self.options = options if options is not None else PrinterOptions()
        self._out = out
        self._depth = 0
        self._delim = False
        self._parts: list[str] = []
        self._visitor = Visitor(
            on_lit=self._on_lit,
            before_group=self._before_group,
            after_group=self._after_group,
        )

    def reset(self, out: TextIO) -> None:
        """Direct further output to out."""
        self._out = out

    def _end_line(self) -> None:
        self._parts.append("\n")
        self._parts.append(self.options.prefix)

    def _on_lit(self, x: Lit) -> None:
        if self._delim:
            self._parts.append(" ")
        self._parts.append(str(x))
        if self._depth == 0 and self.options.new_line:
            self._end_line()
            self._delim = False
        else:
            self._delim = True

    def _before_group(self, _: Group) -> None:
        self._parts.append("(")
        self._delim = False
        self._depth += 1

    def _after_group(self, _: Group) -> None:
        self._parts.append(")")
        self._delim = False
        self._depth -= 1
        if self._depth == 0 and self.options.new_line:
            self._end_line()

    def print(self, v: Val | None) -> None:
        """Print the value v."""
        self._parts = []
        try:
            if v is None:
                self._parts.append(self.options.nil)
                if self.options.new_line:
                    self._parts.append("\n")
                return
            self._parts.append(self.options.prefix)
            self._visitor.visit(v)
        finally:
            self._out.write("".join(self._parts))
            self._parts = []


def std_printer(out: TextIO) -> Printer:
    """Return a printer that uses spaces and new lines."""
    return Printer(out, PrinterOptions(nil="()", new_line=True))