import pytest

from minilisp.delim import DelimByte, is_delim


@pytest.mark.parametrize("ch", list("() \t\r\n"))
def test_delimiters(ch):
    assert is_delim(ch)
    assert is_delim(ord(ch))


@pytest.mark.parametrize("ch", list("a0é!"))
def test_non_delimiters(ch):
    assert not is_delim(ch)


def test_absent_byte_is_delim():
    assert DelimByte().is_delim()


def test_set_byte():
    b = DelimByte()
    b.set("a")
    assert b == DelimByte(ord("a"), True)
    assert not b.is_delim()


def _byte(ch):
    b = DelimByte()
    b.set(ch)
    return b


def test_between():
    assert _byte("a").between(_byte("b"))
    assert _byte("a").between(_byte("("))
    assert _byte(")").between(_byte("1"))
    assert not _byte("(").between(_byte(" "))
    assert not DelimByte().between(DelimByte())
    assert DelimByte().between(_byte("x"))