"""Print a randomly generated value."""

from __future__ import annotations

import argparse
import random
import sys
import time

from minilisp.generator import Generator
from minilisp.printer import std_printer


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="generate", description="Print a random Lisp value.")
    parser.add_argument("-seed", "--seed", type=int, default=1337,
                        help="seed the random number generator with the given seed")
    parser.add_argument("-seed_time", "--seed_time", action="store_true",
                        help="seed with the current time (overrides seed)")
    parser.add_argument("-id_weight", "--id_weight", type=int, default=1, help="weight for emitting Id")
    parser.add_argument("-nat_weight", "--nat_weight", type=int, default=1, help="weight for emitting Nat")
    parser.add_argument("-cons_weight", "--cons_weight", type=int, default=10,
                        help="weight for emitting Group")
    parser.add_argument("-cons_max_depth", "--cons_max_depth", type=int, default=2,
                        help="maximum depth of Group")
    args = parser.parse_args(argv)

    seed = time.time_ns() if args.seed_time else args.seed
    g = Generator(random.Random(seed))
    g.group_max_depth = args.cons_max_depth
    g.id_weight = args.id_weight
    g.int_weight = args.nat_weight
    g.group_weight = args.cons_weight

    std_printer(sys.stdout).print(g.next())
    return 0


if __name__ == "__main__":
    sys.exit(main())