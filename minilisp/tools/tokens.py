"""Print the tokens of Lisp source."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from minilisp.scanner import Scanner


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="tokens", description="Print Lisp tokens.")
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
    for token in Scanner(source).tokens():
        out.write(f"{int(token.tok)} {token.pos:<4d} {token.text:<40}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())