import io

import pytest

from minilisp.counter import NodeCounter


@pytest.mark.parametrize("k", [1, 2, 5])
def test_counts_top_level_groups(k):
    line = "(x (y))" * k + "\n"
    assert NodeCounter(line, "\n").count() == k


def test_counts_each_line_separately():
    counter = NodeCounter(io.BytesIO(b"(a)\n(b) (c)\n"), b"\n")
    assert [counter.count(), counter.count()] == [1, 2]


def test_space_only_line_counts_zero():
    counter = NodeCounter(" \t \n(a)\n", "\n")
    assert counter.count() == 0
    assert counter.count() == 1


def test_exhausted_source_counts_zero():
    counter = NodeCounter("(a)", "\n")
    assert counter.count() == 1
    assert counter.count() == 0


def test_unbalanced_line_is_reset_at_delimiter():
    counter = NodeCounter("((a)\n(b)\n", "\n")
    assert counter.count() == 0
    assert counter.count() == 1


def test_nodes_spanning_delimiters_count_zero():
    counter = NodeCounter("(a b)", " ")
    assert counter.count() == 0
    assert counter.count() == 0


def test_reset_changes_source():
    counter = NodeCounter("((a)", "\n")
    counter.reset("(a)(b)", ord("\n"))
    assert counter.count() == 2


@pytest.mark.parametrize("bad", ["ab", "", 256, b"xy"])
def test_bad_delimiter(bad):
    with pytest.raises(ValueError):
        NodeCounter("", bad)