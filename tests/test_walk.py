from hypothesis import given
from hypothesis import strategies as st

from minilisp.values import Group, Lit
from minilisp.walk import walk, walk_group, walk_stack

values = st.recursive(
    st.text(alphabet="ab01", min_size=1).map(Lit),
    lambda children: st.lists(children, max_size=4).map(Group),
    max_leaves=12,
)

NESTED = Group([Lit("a"), Lit("b"), Group([Lit("c")])])


def _collect(fn, root):
    seen = []
    fn(root, seen.append)
    return seen


def test_walk_visits_leaves_in_order():
    assert _collect(walk, NESTED) == [Lit("a"), Lit("b"), Lit("c")]


def test_walk_lit():
    assert _collect(walk, Lit("x")) == [Lit("x")]


def test_walk_none_calls_fn_with_none():
    seen = []
    walk(None, seen.append)
    assert seen == [None]


def test_walk_group_same_as_walk():
    assert _collect(walk_group, NESTED) == _collect(walk, NESTED)


def test_walk_stack_order():
    assert _collect(walk_stack, NESTED) == [
        NESTED,
        Group([Lit("c")]),
        Lit("c"),
        Lit("b"),
        Lit("a"),
    ]


def test_walk_stack_none():
    seen = []
    walk_stack(None, seen.append)
    assert seen == []


def _count(v):
    if isinstance(v, Group):
        return 1 + sum(_count(e) for e in v)
    return 1


@given(values)
def test_walk_stack_visits_every_value(v):
    seen = []
    walk_stack(v, seen.append)
    assert len(seen) == _count(v)


@given(values)
def test_walk_stack_lits_are_reverse_of_walk(v):
    stack_seen = []
    walk_stack(v, stack_seen.append)
    walk_seen = []
    walk(v, walk_seen.append)
    stack_lits = [x for x in stack_seen if isinstance(x, Lit)]
    assert stack_lits == list(reversed(walk_seen))