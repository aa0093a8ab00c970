import io

import pytest

from minilisp.printer import Printer, PrinterOptions, std_printer
from minilisp.values import Group, Lit


@pytest.mark.parametrize(
    "value, want",
    [
        (None, "()\n"),
        (Group(), "()\n"),
        (Lit("hello"), "hello\n"),
        (Group([Lit("x")]), "(x)\n"),
        (Group([Lit("x"), Lit("y"), Lit("z")]), "(x y z)\n"),
        (Group([Lit("x"), Group([Lit("y")]), Lit("z")]), "(x(y)z)\n"),
        (Group([Lit("add"), Lit("1"), Lit("2")]), "(add 1 2)\n"),
    ],
)
def test_std_print(value, want):
    out = io.StringIO()
    std_printer(out).print(value)
    assert out.getvalue() == want


def test_default_options_print_nil_as_empty():
    out = io.StringIO()
    Printer(out).print(None)
    assert out.getvalue() == ""


def test_lits_without_new_line_are_delimited_across_prints():
    out = io.StringIO()
    p = Printer(out, PrinterOptions())
    p.print(Lit("a"))
    p.print(Lit("b"))
    assert out.getvalue() == "a b"


def test_prefix_is_written_before_and_after_lines():
    out = io.StringIO()
    p = Printer(out, PrinterOptions(prefix="> ", new_line=True))
    p.print(Lit("a"))
    assert out.getvalue() == "> a\n> "


def test_reset_redirects_output():
    first, second = io.StringIO(), io.StringIO()
    p = std_printer(first)
    p.print(Lit("a"))
    p.reset(second)
    p.print(Group([Lit("b")]))
    assert first.getvalue() == "a\n"
    assert second.getvalue() == "(b)\n"