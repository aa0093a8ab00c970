"""Encode strings as (u byte...) groups of their UTF-8 bytes."""

from __future__ import annotations

import argparse
import sys


def encode_utf8(s: str) -> str:
    """Return s as a (u ...) group listing its UTF-8 bytes in decimal."""
    return "(u" + "".join(f" {b}" for b in s.encode("utf-8")) + ")"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="utf8string", description="Encode strings as UTF-8 bytes.")
    parser.add_argument("strings", nargs="*", help="strings to encode")
    args = parser.parse_args(argv)
    for s in args.strings:
        sys.stdout.write(encode_utf8(s) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())