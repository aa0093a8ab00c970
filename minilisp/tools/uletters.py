"""Print a table of all unicode letter characters."""

from __future__ import annotations

import argparse
import functools
import sys
import unicodedata


@functools.lru_cache(maxsize=None)
def letters() -> str:
    """Return every unicode letter in code point order."""
    return "".join(
        ch for ch in map(chr, range(sys.maxunicode + 1)) if unicodedata.category(ch).startswith("L")
    )


def letter_table(cols: int = 40) -> str:
    """Return the letters in rows of cols characters, each row ending in a newline."""
    if cols <= 0:
        raise ValueError(f"columns must be positive: {cols}")
    text = letters()
    return "".join(text[i : i + cols] + "\n" for i in range(0, len(text), cols))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="uletters", description="Print all unicode letters.")
    parser.parse_args(argv)
    sys.stdout.write(letter_table(40))
    return 0


if __name__ == "__main__":
    sys.exit(main())