import pytest
from hypothesis import given
from hypothesis import strategies as st

from minilisp.convert import from_id, id_set, id_tuple, make_id, make_nat, parse_uint
from minilisp.values import Group, Lit


def test_make_id():
    got = make_id("abc")
    assert isinstance(got, Lit)
    assert got == "abc"


def test_make_nat_bounds():
    assert make_nat(0) == "0"
    assert make_nat(2**64 - 1) == str(2**64 - 1)


@pytest.mark.parametrize("bad", [-1, 2**64])
def test_make_nat_out_of_range(bad):
    with pytest.raises(ValueError):
        make_nat(bad)


def test_from_id():
    assert from_id(Lit("x")) == "x"
    with pytest.raises(TypeError):
        from_id(Group())


def test_id_tuple():
    assert id_tuple(Group([Lit("a"), Lit("b")])) == ["a", "b"]
    assert id_tuple(Group()) == []
    with pytest.raises(TypeError):
        id_tuple(Lit("a"))
    with pytest.raises(TypeError):
        id_tuple(Group([Group()]))


def test_id_set():
    got = id_set(Group([Lit("set"), Lit("a"), Lit("b"), Lit("a")]))
    assert got == {"a", "b"}


def test_id_set_requires_marker():
    with pytest.raises(ValueError):
        id_set(Group([Lit("list"), Lit("a")]))
    with pytest.raises(ValueError):
        id_set(Group())


def test_parse_uint_bit_size():
    assert parse_uint("255", 8) == 255
    with pytest.raises(ValueError):
        parse_uint("256", 8)


def test_parse_uint_zero_bit_size_means_64():
    assert parse_uint(str(2**64 - 1), 0) == 2**64 - 1
    with pytest.raises(ValueError):
        parse_uint(str(2**64), 0)


@pytest.mark.parametrize("bad", ["", "+1", "-1", " 1", "1_0", "x"])
def test_parse_uint_rejects_syntax(bad):
    with pytest.raises(ValueError):
        parse_uint(bad, 64)


@pytest.mark.parametrize("bits", [-1, 65])
def test_parse_uint_rejects_bit_size(bits):
    with pytest.raises(ValueError):
        parse_uint("1", bits)


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_nat_round_trip(n):
    assert parse_uint(make_nat(n), 64) == n