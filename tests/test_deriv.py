import pytest

from minilisp.tools.deriv import DEFAULT_START, LETTER, RULES, Entry, Rule, derive, main


@pytest.mark.parametrize("src", ["", "a", "(a)", "a b", "(add 1 2)", "()"])
def test_derive_valid_sources(src):
    entry, steps, max_stack = derive(src)
    assert entry is not None
    assert entry.deriv == src
    assert entry.nonterminals == ""
    assert steps >= 0
    assert max_stack >= 1


@pytest.mark.parametrize("src", ["(", ")", "(a", "a)"])
def test_derive_invalid_sources(src):
    entry, _, _ = derive(src)
    assert entry is None


def test_derive_custom_start():
    entry, _, _ = derive("abc", "(l2)")
    assert entry is not None and entry.deriv == "abc"
    assert derive("1", "(l0)")[0] is None


def test_derivation_chain():
    entry, _, _ = derive("(a b)")
    steps = entry.derivation()
    assert steps[0].deriv == ""
    assert steps[0].nonterminals == DEFAULT_START
    assert steps[-1] is entry
    for before, after in zip(steps, steps[1:]):
        assert after.prev is before
        assert after.deriv.startswith(before.deriv)


def test_elem():
    assert Entry("", "(s1)(e2)(s1)").elem() == "(s1)"
    assert Entry("", "").elem() == ""


def test_apply_rule():
    e = Entry("", "(e3)")
    nxt = e.apply(RULES["(e3)"][0])
    assert nxt.nonterminals == "(s1)(e2)(s1)"
    assert nxt.prev is e
    assert e.apply(Rule("(g0)", "(lb)(e3)(rb)")) is None


def test_apply_terminal():
    e = Entry("", "(lb)(e3)(rb)")
    nxt = e.apply_terminal("(lb)", "(")
    assert nxt.deriv == "("
    assert nxt.nonterminals == "(e3)(rb)"


def test_apply_letter():
    e = Entry("", LETTER + "(r l1)")
    nxt = e.apply_letter("é")
    assert nxt.nonterminals == "(é)(r l1)"
    assert nxt.deriv == ""
    assert e.apply_letter("1") is None
    assert e.apply_letter(" ") is None


def test_main_prints_derivation(capsys):
    assert main(["(a)"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0].split() == ["NUM", "TXT", "RULES"]
    assert any(line.endswith("iterations") for line in lines)
    assert any(line.endswith("max stack") for line in lines)


def test_main_without_derivation(capsys):
    assert main([")"]) == 0
    out = capsys.readouterr().out
    assert "NUM" not in out
    assert out.splitlines()[0].endswith("iterations")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "src.lisp"
    path.write_text("a b", encoding="utf-8")
    assert main(["-filename", str(path)]) == 0
    assert "steps" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main(["-filename", str(tmp_path / "missing.lisp")]) == 1