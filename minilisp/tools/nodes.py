"""Print the top-level nodes of Lisp source with their byte spans."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from minilisp.printer import Printer
from minilisp.scanner import ScanError, Scanner


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="nodes", description="Print Lisp nodes with their spans.")
    parser.add_argument("-filename", "--filename", default="", help="file to read Lisp from")
    parser.add_argument("input", nargs="*", help="Lisp source, used when no file is given")
    args = parser.parse_args(argv)

    if args.filename:
        try:
            source = Path(args.filename).read_bytes()
        except OSError as e:
            print(e, file=sys.stderr)
            return 1
    else:
        source = args.input[0] if args.input else ""

    out = sys.stdout
    printer = Printer(out)
    try:
        for node in Scanner(source).nodes():
            out.write(f"{node.pos:<4d} {node.end:<4d} ")
            printer.print(node.val)
            out.write("\n")
    except ScanError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())