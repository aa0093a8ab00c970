import re

import pytest

from minilisp.chars import (
    GROUP,
    ID_PATTERN,
    INT_PATTERN,
    SPACE,
    VAL_PATTERN,
    is_group,
    is_lit,
    is_nat,
    is_other,
    is_space,
    is_token_bound,
)


@pytest.mark.parametrize("ch", list(SPACE))
def test_spaces(ch):
    assert is_space(ch)
    assert is_space(ord(ch))
    assert is_token_bound(ch)
    assert not is_other(ch)


@pytest.mark.parametrize("ch", list(GROUP))
def test_parens(ch):
    assert is_group(ch)
    assert is_token_bound(ch)
    assert not is_space(ch)
    assert not is_other(ch)


@pytest.mark.parametrize("ch", list("0123456789"))
def test_digits(ch):
    assert is_nat(ch)
    assert not is_other(ch)
    assert not is_token_bound(ch)
    assert is_lit(ch)


@pytest.mark.parametrize("ch", ["a", "Z", "!", "é"])
def test_other(ch):
    assert is_other(ch)
    assert not is_nat(ch)


def test_is_lit_letters_and_non_letters():
    assert is_lit("a")
    assert is_lit("é")
    assert is_lit(ord("b"))
    assert not is_lit("!")
    assert not is_lit("\u0663")  # non-ASCII digit
    assert not is_lit("\ufffd")