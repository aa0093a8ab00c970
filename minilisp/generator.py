"""Random generation of values."""

from __future__ import annotations

import functools
import math
import random
import sys
import unicodedata

from minilisp.values import Group, Lit, Token, Val


@functools.lru_cache(maxsize=None)
def _id_table() -> str:
    """All unicode letters followed by the ASCII digits."""
    letters = "".join(
        ch for ch in map(chr, range(sys.maxunicode + 1)) if unicodedata.category(ch)[0] == "L"
    )
    return letters + "0123456789"


class Generator:
    """Generates random values with configurable weights and depth."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.id_weight = 1
        self.int_weight = 1
        self.group_weight = 1
        self.group_mean_len = 3
        self.group_max_depth = 3
        self._rng = rng if rng is not None else random.Random()

    def seed(self, seed: int) -> None:
        """Reseed the underlying random source."""
        self._rng.seed(seed)

    def _term_len(self) -> int:
        return int(self.group_mean_len * self._rng.expovariate(1.0))

    def _id_len(self) -> int:
        # Approximate length of an id in bytes.
        return int(math.ceil(40 * self._rng.expovariate(1.0)))

    def token(self) -> Token:
        """Choose the kind of the next top-level value."""
        return self._token_depth(0)

    def _token_depth(self, depth: int) -> Token:
        toks = [Token.ID, Token.ID, Token.LPAREN]
        weights = [self.id_weight, self.int_weight, self.group_weight]
        weight_max = sum(weights)
        if self.group_max_depth <= depth:
            toks = toks[:2]
            weights = weights[:2]
            weight_max -= self.group_weight
        else:
            i = self._rng.randrange(3)
            toks[2], toks[i] = toks[i], toks[2]
            weights[2], weights[i] = weights[i], weights[2]
        i = self._rng.randrange(2)
        toks[1], toks[i] = toks[i], toks[1]
        weights[1], weights[i] = weights[i], weights[1]

        v = self._rng.randrange(weight_max)
        if weights[0] != 0 and v <= weights[0]:
            return toks[0]
        if len(toks) == 2:
            return toks[1]
        v -= weights[0]
        if weights[1] != 0 and v <= weights[1]:
            return toks[1]
        return toks[2]

    def next(self) -> Val:
        """Generate a random value."""
        return self._next_depth(0)

    def _next_depth(self, depth: int) -> Val:
        if self._token_depth(depth) is Token.ID:
            return self.next_id()
        return self._next_group_depth(depth)

    def next_id(self) -> Lit:
        """Generate a random identifier of letters and digits."""
        n = self._id_len()
        table = _id_table()
        parts: list[str] = []
        i = 0
        while i < n:
            ch = table[self._rng.randrange(len(table))]
            parts.append(ch)
            i += len(ch.encode("utf-8")) + 1
        return Lit("".join(parts))

    def next_group(self) -> Group:
        """Generate a random group."""
        return self._next_group_depth(0)

    def _next_group_depth(self, depth: int) -> Group:
        return Group(self._next_depth(depth + 1) for _ in range(self._term_len()))