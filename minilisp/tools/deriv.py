"""Brute-force derivation of source text from the Lisp grammar."""

from __future__ import annotations

import argparse
import itertools
import json
import sys
import time
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

LETTER = "(a unicode)"
DEFAULT_START = "(e3)"


@dataclass(frozen=True)
class Rule:
    """A grammar production replacing lhs with rhs."""

    lhs: str
    rhs: str


_NONTERMINAL_RULES = (
    Rule("(e0)", "(a g0 l2)"),
    Rule("(e1)", "(e0)(r s1 e0)"),
    Rule("(e2)", "(a ε e1)"),
    Rule("(e3)", "(s1)(e2)(s1)"),
    Rule("(d0)", "(a 0 1 2 3 4 5 6 7 8 9)"),
    Rule("(g0)", "(lb)(e3)(rb)"),
    Rule("(g1)", "(g0)(r s1 g0)"),
    Rule("(l0)", "(a unicode)"),
    Rule("(l1)", "(a d0 l0)"),
    Rule("(l2)", "(l1)(r l1)"),
    Rule("(l3)", "(l2)(r s2 l2)"),
    Rule("(s0)", "(a sp tb cr nl)"),
    Rule("(s1)", "(r s0)"),
    Rule("(s2)", "(s0)(s1)"),
)

_REPEAT_RULES = (
    Rule("(r l1)", "(l1)(r l1)"),
    Rule("(r l1)", "(ε)"),
    Rule("(r s0)", "(s0)(r s0)"),
    Rule("(r s0)", "(ε)"),
    Rule("(r s1 e0)", "(s1)(e0)(r s1 e0)"),
    Rule("(r s1 e0)", "(ε)"),
    Rule("(r s1 g0)", "(s1)(g0)(r s1 g0)"),
    Rule("(r s1 g0)", "(ε)"),
    Rule("(r s2 l2)", "(s2)(l2)(r s2 l2)"),
    Rule("(r s2 l2)", "(ε)"),
)

_ALTERNATE_RULES = (
    Rule("(a ε e1)", "(ε)"),
    Rule("(a ε e1)", "(e1)"),
    Rule("(a g0 l2)", "(g0)"),
    Rule("(a g0 l2)", "(l2)"),
    Rule("(a d0 l0)", "(d0)"),
    Rule("(a d0 l0)", "(l0)"),
    *(Rule("(a 0 1 2 3 4 5 6 7 8 9)", f"({d})") for d in "0123456789"),
    Rule("(a sp tb cr nl)", "(sp)"),
    Rule("(a sp tb cr nl)", "(tb)"),
    Rule("(a sp tb cr nl)", "(cr)"),
    Rule("(a sp tb cr nl)", "(nl)"),
)


def _build_rules() -> dict[str, list[Rule]]:
    rules: dict[str, list[Rule]] = {}
    for rule in (*_NONTERMINAL_RULES, *_REPEAT_RULES, *_ALTERNATE_RULES):
        rules.setdefault(rule.lhs, []).append(rule)
    return rules


RULES = _build_rules()

TERMINALS = {
    "(ε)": "",
    "(lb)": "(",
    "(rb)": ")",
    **{f"({d})": d for d in "0123456789"},
    "(sp)": " ",
    "(tb)": "\t",
    "(cr)": "\r",
    "(nl)": "\n",
}


def _is_letter(ch: str) -> bool:
    return len(ch) == 1 and unicodedata.category(ch).startswith("L")


def _terminal(elem: str) -> str | None:
    """Return the text a terminal derives, or None if elem is not one."""
    if elem in TERMINALS:
        return TERMINALS[elem]
    if len(elem) == 3 and elem[0] == "(" and elem[2] == ")" and _is_letter(elem[1]):
        return elem[1]
    return None


@dataclass(frozen=True)
class Entry:
    """A partial derivation: text derived so far and symbols still to expand."""

    deriv: str
    nonterminals: str
    prev: Optional[Entry] = field(default=None, repr=False, compare=False)

    def elem(self) -> str:
        """Return the leading symbol of the pending nonterminals."""
        return self.nonterminals[: self.nonterminals.find(")") + 1]

    def apply_letter(self, r: str) -> Entry | None:
        """Replace the leading letter class by the letter r, if r is a letter."""
        if not _is_letter(r):
            return None
        return Entry(self.deriv, f"({r}){self.nonterminals[len(LETTER):]}", self)

    def apply_terminal(self, lhs: str, rhs: str) -> Entry:
        """Derive the terminal lhs as the text rhs."""
        return Entry(self.deriv + rhs, self.nonterminals[len(lhs):], self)

    def apply(self, rule: Rule) -> Entry | None:
        """Expand the leading symbol by rule, or None if it does not apply."""
        if not self.nonterminals.startswith(rule.lhs):
            return None
        return Entry(self.deriv, rule.rhs + self.nonterminals[len(rule.lhs):], self)

    def derivation(self) -> list[Entry]:
        """Return every step from the start entry to this one."""
        steps: list[Entry] = []
        e: Entry | None = self
        while e is not None:
            steps.append(e)
            e = e.prev
        steps.reverse()
        return steps


def derive(src: str, start: str = DEFAULT_START) -> tuple[Entry | None, int, int]:
    """Search depth-first for a derivation of src from start.

    Returns the final entry (None when src cannot be derived), the number of
    steps taken and the largest stack size seen.
    """
    stack = [Entry("", start)]
    max_stack = 1
    for steps in itertools.count():
        if not stack:
            return None, steps, max_stack
        e = stack.pop()
        if not src.startswith(e.deriv):
            continue
        if not e.nonterminals and e.deriv == src:
            return e, steps, max_stack
        elem = e.elem()
        rules = RULES.get(elem)
        if rules is None:
            if elem == LETTER:
                rest = src[len(e.deriv):]
                nxt = e.apply_letter(rest[0]) if rest else None
                if nxt is not None:
                    stack.append(nxt)
                continue
            text = _terminal(elem)
            if text is None or not src.startswith(text, len(e.deriv)):
                continue
            stack.append(e.apply_terminal(elem, text))
        else:
            stack.extend(n for r in rules if (n := e.apply(r)) is not None)
            max_stack = max(max_stack, len(stack))
    raise AssertionError("unreachable")


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def _format_derivation(entry: Entry) -> str:
    steps = entry.derivation()
    lines = [f"{'NUM':<4}{'TXT':<20}{'RULES':>40}"]
    lines.extend(
        f"{i:<4d}{_quote(e.deriv):<20}{_quote(e.nonterminals):>40}" for i, e in enumerate(steps)
    )
    lines.append("")
    lines.append(f"{len(steps)} steps")
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="deriv", description="Derive text from the Lisp grammar.")
    parser.add_argument("-filename", "--filename", default="", help="input filename")
    parser.add_argument("-start", "--start", default=DEFAULT_START, help="start symbol")
    parser.add_argument("src", nargs="?", default="", help="source text when no file is given")
    args = parser.parse_args(argv)

    if args.filename:
        try:
            src = Path(args.filename).read_bytes().decode("utf-8", "surrogateescape")
        except OSError as e:
            print(e, file=sys.stderr)
            return 1
    else:
        src = args.src

    began = time.perf_counter()
    entry, steps, max_stack = derive(src, args.start)
    elapsed = time.perf_counter() - began

    out = sys.stdout
    if entry is not None:
        out.write(_format_derivation(entry))
    out.write(f"{steps} iterations\n")
    out.write(f"{max_stack} max stack\n")
    out.write(f"{elapsed:.6f}s time\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())