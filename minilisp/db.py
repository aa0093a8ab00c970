"""In-memory store of values keyed by their seeded hashes, with simple queries."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

from minilisp.compare import equal
from minilisp.groups import head
from minilisp.hashing import MapHash, make_seed
from minilisp.scanner import Scanner
from minilisp.stringer import format_lit
from minilisp.values import Group, Lit, Val
from minilisp.visitor import Visitor


@dataclass
class TVal:
    """One value of a store transaction, with its links to other values."""

    id: int
    lit: Lit = Lit("")
    refs: list[int] = field(default_factory=list)
    inverse_refs: list[int] = field(default_factory=list)


@dataclass
class _Entry:
    lit: Lit = Lit("")
    refs: list[int] = field(default_factory=list)
    inverse_refs: list[int] = field(default_factory=list)
    weight: float = 0.0


class InMemory:
    """A thread-safe in-memory database of hashed values."""

    def __init__(self) -> None:
        self._entries: dict[int, _Entry] = {}
        self._seed = make_seed()
        self._lock = threading.RLock()

    @property
    def seed(self) -> bytes:
        """The hash seed used for ids in this database."""
        return self._seed

    def load(self, id: int) -> tuple[Lit, float]:
        """Return the Lit (empty for groups) and weight stored under id."""
        with self._lock:
            entry = self._entries.get(id)
            if entry is None:
                return Lit(""), 0.0
            return entry.lit, entry.weight

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def store(self, tvals: Iterable[TVal], weight: float) -> None:
        """Store the values; values already present gain weight and back links."""
        with self._lock:
            for t in tvals:
                entry = self._entries.get(t.id)
                if entry is not None:
                    entry.weight += weight
                    entry.inverse_refs.extend(t.inverse_refs)
                    continue
                if t.refs:
                    self._entries[t.id] = _Entry(refs=list(t.refs))
                else:
                    self._entries[t.id] = _Entry(lit=t.lit)

    def each_ref(self, root: int) -> Iterator[int]:
        """Iterate over the ids of the elements of the group stored under root."""
        with self._lock:
            entry = self._entries.get(root)
            refs = list(entry.refs) if entry is not None else []
        return iter(refs)

    def each_inverse_ref(self, root: int) -> Iterator[int]:
        """Iterate over the ids of the groups known to contain root."""
        with self._lock:
            entry = self._entries.get(root)
            refs = list(entry.inverse_refs) if entry is not None else []
        return iter(refs)


class QueryResult:
    """The outcome of a query."""

    def __init__(
        self,
        matches: Iterable[Iterable[int]] = (),
        elements: Iterable[str] = (),
    ) -> None:
        self._matches = [list(m) for m in matches]
        self._elements = list(elements)

    def elements(self) -> list[str]:
        """Return a copy of the query's named elements."""
        return list(self._elements)

    def matches(self) -> Iterator[list[int]]:
        """Iterate over the matching id tuples."""
        return (list(m) for m in self._matches)


def _hash(seed: bytes, v: Val) -> int:
    h = MapHash(seed)
    h.write_val(v)
    return h.sum64()


def load_weight(db, v: Val) -> float:
    """Return the weight stored in db for the value v."""
    return db.load(_hash(db.seed, v))[1]


def store_vals(db, vals: Iterable[Val], weight: float) -> None:
    """Store every value in vals, with its sub-values, in one transaction."""
    seed = db.seed
    stack: list[TVal] = []
    tvals: list[TVal] = []

    def link(entry: TVal) -> None:
        if stack:
            parent = stack[-1]
            parent.refs.append(entry.id)
            entry.inverse_refs.append(parent.id)

    def before_group(e: Group) -> None:
        entry = TVal(_hash(seed, e))
        link(entry)
        stack.append(entry)

    def after_group(_: Group) -> None:
        tvals.append(stack.pop())

    def on_lit(e: Lit) -> None:
        entry = TVal(_hash(seed, e), lit=e)
        link(entry)
        tvals.append(entry)

    visitor = Visitor(on_lit=on_lit, before_group=before_group, after_group=after_group)
    for v in vals:
        visitor.visit(v)
    db.store(tvals, weight)


def query_one_id(db, id: int) -> tuple[Val, float]:
    """Rebuild the value stored under id, with its weight."""
    lit, weight = db.load(id)
    if lit:
        return lit, weight
    return Group(query_one_id(db, r)[0] for r in db.each_ref(id)), weight


def _breadth_first(root: int, neighbours: Callable[[int], Iterable[int]]) -> Iterator[int]:
    queue = deque([root])
    while queue:
        e = queue.popleft()
        yield e
        queue.extend(neighbours(e))


def each_trans_ref(db, root: int) -> Iterator[int]:
    """Iterate breadth-first over root and everything it contains."""
    return _breadth_first(root, db.each_ref)


def each_trans_inverse_ref(db, root: int) -> Iterator[int]:
    """Iterate breadth-first over root and every group containing it."""
    return _breadth_first(root, db.each_inverse_ref)


def _query_elements(q: Val) -> list[str]:
    elems: list[str] = []

    def before_group(e: Group) -> None:
        x = head(e)
        if x is not None and equal(x, Lit("q")):
            name = head(e[1:])
            if isinstance(name, Lit):
                elems.append(format_lit(name))

    Visitor(before_group=before_group).visit(q)
    return elems


def query(db, q: str) -> QueryResult:
    """Query db with the single expression q.

    An exact match with positive weight is returned as a match. Otherwise
    the result lists the names marked in q with (q name) groups.
    Raises ScanError for invalid syntax and ValueError unless q holds
    exactly one expression.
    """
    vals = [n.val for n in Scanner(q).nodes()]
    if len(vals) != 1:
        raise ValueError("union of multiple query expressions is not supported")
    qh = _hash(db.seed, vals[0])
    if db.load(qh)[1] > 0:
        return QueryResult(matches=[[qh]])
    return QueryResult(elements=_query_elements(vals[0]))