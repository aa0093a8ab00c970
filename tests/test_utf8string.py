from hypothesis import given
from hypothesis import strategies as st

from minilisp.scanner import Scanner
from minilisp.tools.utf8string import encode_utf8, main
from minilisp.values import Group, Lit


def test_empty_string():
    assert encode_utf8("") == "(u)"


def test_ascii_string():
    assert encode_utf8("hi") == "(u 104 105)"


@given(st.text())
def test_round_trip_through_scanner(s):
    vals = list(Scanner(encode_utf8(s)).values())
    assert len(vals) == 1
    group = vals[0]
    assert isinstance(group, Group)
    assert group[0] == Lit("u")
    assert bytes(int(x) for x in group[1:]).decode("utf-8") == s


def test_main_prints_each_argument(capsys):
    assert main(["a", "é"]) == 0
    assert capsys.readouterr().out.splitlines() == [encode_utf8("a"), encode_utf8("é")]