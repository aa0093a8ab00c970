import string
import unicodedata

import pytest

from minilisp.tools.uletters import letter_table, letters, main


def test_letters_start_with_ascii_uppercase():
    assert letters()[:26] == string.ascii_uppercase


def test_letters_are_letters_and_sorted():
    text = letters()
    assert all(unicodedata.category(ch).startswith("L") for ch in text)
    codes = [ord(ch) for ch in text]
    assert codes == sorted(set(codes))
    assert not any(ch in string.digits for ch in text)


@pytest.mark.parametrize("cols", [1, 3, 40])
def test_letter_table_rows(cols):
    table = letter_table(cols)
    rows = table.split("\n")
    assert rows[-1] == ""
    rows = rows[:-1]
    assert all(len(row) == cols for row in rows[:-1])
    assert 0 < len(rows[-1]) <= cols
    assert "".join(rows) == letters()


def test_letter_table_rejects_bad_columns():
    with pytest.raises(ValueError):
        letter_table(0)


def test_main_prints_table(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == letter_table(40)