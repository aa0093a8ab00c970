from hypothesis import given
from hypothesis import strategies as st

from minilisp.compare import (
    compare,
    compare_group,
    compare_lit,
    equal,
    equal_group,
    equal_lit,
    lexical_compare,
)
from minilisp.values import Group, Lit

values = st.recursive(
    st.text(alphabet="ab01", min_size=1).map(Lit),
    lambda children: st.lists(children, max_size=4).map(Group),
    max_leaves=10,
)


def test_lit_orders_before_group():
    assert compare(Lit("z"), Group()) == -1
    assert compare(Group(), Lit("z")) == 1


def test_compare_lit_follows_text_order():
    assert compare_lit(Lit("abc"), Lit("abd")) < 0
    assert compare_lit(Lit("b"), Lit("a")) > 0
    assert compare_lit(Lit("a"), Lit("a")) == 0


def test_compare_group_empty_and_none_are_equal():
    assert compare_group(None, Group()) == 0
    assert compare_group(Group(), Group([Lit("a")])) < 0


def test_compare_group_prefix_orders_first():
    short = Group([Lit("a")])
    long = Group([Lit("a"), Lit("b")])
    assert compare_group(short, long) < 0
    assert compare_group(long, short) > 0


@given(values)
def test_compare_reflexive(a):
    assert compare(a, a) == 0
    assert equal(a, a)


@given(values, values)
def test_compare_antisymmetric(a, b):
    assert compare(a, b) == -compare(b, a)


@given(values, values)
def test_equal_iff_compare_zero(a, b):
    assert equal(a, b) == (compare(a, b) == 0)


@given(values, values, values)
def test_compare_transitive(a, b, c):
    if compare(a, b) <= 0 and compare(b, c) <= 0:
        assert compare(a, c) <= 0


def test_equal_distinguishes_kinds():
    assert not equal(Lit("a"), Group([Lit("a")]))
    assert not equal(Group([Lit("a")]), Lit("a"))
    assert not equal(None, None)


def test_equal_lit_and_group():
    assert equal_lit(Lit("x"), Lit("x"))
    assert not equal_lit(Lit("x"), Lit("y"))
    assert equal_group(None, Group())
    assert not equal_group(Group([Lit("x")]), Group([Lit("x"), Lit("y")]))


def test_lexical_compare_ignores_structure():
    nested = Group([Group([Lit("a")]), Lit("b")])
    assert lexical_compare(nested, Lit("a")) == 0
    assert lexical_compare(Lit("a"), Group([Group([Lit("a")])])) == 0


def test_lexical_compare_orders_by_first_lit():
    assert lexical_compare(Lit("a"), Lit("b")) < 0
    assert lexical_compare(Group([Lit("c")]), Lit("b")) > 0


def test_lexical_compare_none_and_empty():
    assert lexical_compare(None, None) == 0
    assert lexical_compare(None, Lit("a")) == -1
    assert lexical_compare(Lit("a"), Group()) == -1