"""Generate the EBNF grammar of the Lisp syntax."""

from __future__ import annotations

import argparse
import functools
import sys

from minilisp.tools.uletters import letters

_HEAD = r"""// Whitespace.
s0 = " " | "\t" | "\r" | "\n".
s1 = {s0}.
s2 = s0 s1.
d0 = "0" … "9".
"""

_TAIL = """l1 = d0 | l0.
l2 = l1 { l1 }.
l3 = l2 { s2 l2 }.

// Groups.
g0 = "(" s1 e2 s1 ")".
g1 = g0 {s1 g0}. 

// Expressions.
e0  = g0 | l2.
e1 = e0 {s1 e0}.
e2 = "" | e1.
e3 = s1 e2 s1.
"""


@functools.lru_cache(maxsize=None)
def letter_ranges() -> tuple[tuple[int, int, int], ...]:
    """Cover all unicode letters with (lo, hi, stride) code point ranges."""
    ranges: list[tuple[int, int, int]] = []
    run: list[int] | None = None  # [lo, hi, stride]; stride 0 while unknown
    for cp in map(ord, letters()):
        if run is None:
            run = [cp, cp, 0]
        elif run[2] == 0:
            run[1], run[2] = cp, cp - run[1]
        elif cp - run[1] == run[2]:
            run[1] = cp
        else:
            ranges.append((run[0], run[1], run[2]))
            run = [cp, cp, 0]
    if run is not None:
        ranges.append((run[0], run[1], run[2] or 1))
    return tuple(ranges)


def _quote(cp: int) -> str:
    return f"'{chr(cp)}'"


def _production(index: int, lo: int, hi: int, stride: int) -> str:
    if stride == 1:
        return f"u{index} = {_quote(lo)} … {_quote(hi)}."
    return f"u{index} = " + " | ".join(map(_quote, range(lo, hi + 1, stride))) + "."


def grammar() -> str:
    """Return the full EBNF grammar text."""
    ranges = letter_ranges()
    lines = [_production(i, *r) for i, r in enumerate(ranges)]
    lines.append("l0 = " + " | ".join(f"u{i}" for i in range(len(ranges))) + ".")
    return _HEAD + "\n// Literals.\n" + "\n".join(lines) + "\n" + _TAIL


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="ebnfgen", description="Print the Lisp EBNF grammar.")
    parser.parse_args(argv)
    sys.stdout.write(grammar())
    return 0


if __name__ == "__main__":
    sys.exit(main())