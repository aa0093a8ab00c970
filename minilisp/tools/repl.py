"""Read-print loop for Lisp expressions."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from minilisp.printer import std_printer
from minilisp.scanner import ScanError, Scanner


def run_repl(lines: Iterable[str], out: TextIO, err: TextIO) -> None:
    """Collect lines until a blank one, then print the parsed expressions.

    A line reading "quit" ends the loop. Syntax errors go to err and the
    collected input is discarded.
    """
    pending: list[str] = []
    for line in lines:
        text = line.strip()
        if pending and not text:
            source = "".join(pending)
            pending.clear()
            try:
                vals = [n.val for n in Scanner(source).nodes()]
            except ScanError as e:
                err.write(f"{e}\n")
                continue
            for v in vals:
                std_printer(out).print(v)
        elif text == "quit":
            return
        else:
            pending.append(text + "\n")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="repl", description="Echo Lisp expressions read from stdin.")
    parser.parse_args(argv)
    try:
        run_repl(sys.stdin, sys.stdout, sys.stderr)
    except KeyboardInterrupt:
        print("interrupt", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())