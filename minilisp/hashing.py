"""Seeded 64-bit hashing of values."""

from __future__ import annotations

import hashlib
import os

from minilisp.values import Group, Lit, Val
from minilisp.visitor import Visitor

_SEED_SIZE = 16


def make_seed() -> bytes:
    """Return a new random seed."""
    return os.urandom(_SEED_SIZE)


class MapHash:
    """A seeded 64-bit hash that can absorb bytes and values."""

    def __init__(self, seed: bytes | None = None) -> None:
        self._seed = make_seed() if seed is None else bytes(seed)
        self._visitor = Visitor(
            on_lit=self._on_lit,
            before_group=self._before_group,
            after_group=self._after_group,
        )
        self.reset()

    @property
    def seed(self) -> bytes:
        return self._seed

    @seed.setter
    def seed(self, value: bytes) -> None:
        self._seed = bytes(value)
        self.reset()

    def reset(self) -> None:
        """Discard everything written so far."""
        self._hash = hashlib.blake2b(key=self._seed, digest_size=8)
        self._delim = False

    def write(self, data: bytes | str) -> int:
        """Add raw bytes (or UTF-8 text) to the hash."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._hash.update(data)
        return len(data)

    def _on_lit(self, x: Lit) -> None:
        if self._delim:
            self.write(b" ")
        self.write(str(x))
        self._delim = True

    def _before_group(self, _: Group) -> None:
        self.write(b"(")
        self._delim = False

    def _after_group(self, _: Group) -> None:
        self.write(b")")
        self._delim = False

    def write_val(self, v: Val | None) -> None:
        """Add the canonical form of v to the hash."""
        self._visitor.visit(v)

    def sum64(self) -> int:
        """Return the current 64-bit hash value."""
        return int.from_bytes(self._hash.digest(), "little")