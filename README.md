# minilisp

A small toolkit for a minimal Lisp syntax. A value is either a literal
(`Lit`), which is a run of Unicode letters and digits such as `abc`, `123`
or `abc123`, or a group (`Group`), which is a sequence of values in
parentheses such as `(add (sub 3 2) 2)`.

The syntax has nothing else: no strings, no separate number type, no
comments. The package reads, walks, prints, compares, hashes, encodes and
stores these values. It needs Python 3.10 or later and has no runtime
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library overview

- `minilisp.values`: the value types `Lit` (a `str` subclass) and `Group`
  (a `list` subclass), and the `Token` kinds `INVALID`, `ID`, `LPAREN` and
  `RPAREN`.
- `minilisp.scanner`: `Scanner` reads source from a string, bytes or a file
  object. `tokens()` yields `ScanToken`s without checking the syntax, and
  marks text that fits no token as `INVALID`. `nodes()` yields top-level
  `Node`s with their start and end byte positions. `values()` yields the
  values themselves and quietly skips invalid text. `nodes()` raises
  `ScanError` on an unmatched `)` or an invalid literal; `values()` raises it
  on an unmatched `)`.
- `minilisp.visitor`: `Visitor` walks a value in order. It takes the callbacks
  `on_val`, `on_lit`, `before_group` and `after_group`. Inside a callback,
  `stop()` ends the walk and `skip()` keeps the walk out of the children of
  the value being visited. `visit_group()` starts the walk at a group.
- `minilisp.walk`: `walk`, `walk_group` and `walk_stack` are lighter traversals
  that take a single callback.
- `minilisp.printer`: `Printer` and `PrinterOptions` (`nil`, `prefix`,
  `new_line`) write values to a text stream. `std_printer` returns a printer
  that writes `()` for `None` and puts each top-level expression on its own
  line.
- `minilisp.stringer`: `format_val`, `format_lit` and `format_group` render a
  value as a string. When a value cannot be shown as valid syntax (an empty
  literal, or one with characters that are not letters or digits), they fall
  back to a debug form that is plainly not Lisp.
- `minilisp.compare`: `compare`, `compare_lit`, `compare_group` (literals order
  before groups), `equal`, `equal_lit`, `equal_group`, and `lexical_compare`,
  which compares values by their left-most literal only.
- `minilisp.groups`: `first`, `first_lit`, `head` and `tail`.
- `minilisp.formatting`: `format_source` removes redundant whitespace from
  source text, keeping a single space between adjacent literals.
- `minilisp.escape`: `escape` turns each code point that is not a letter,
  decimal digit, whitespace or paren into a group such as `(u 33)`;
  `unescape` turns such groups back into characters.
- `minilisp.blisp`: `Encoder`, `encoded_len`, `group_len` and the `MAGIC`
  header for a compact encoding in which literals are separated by a single
  space only where needed.
- `minilisp.jsoncodec`: `JsonEncoder` writes groups as comma-separated
  bracketed arrays, with literals written bare. `JsonDecoder` reads nested
  arrays of strings back as values, treating brackets as parens and commas
  and quotes as spaces.
- `minilisp.hashing`: `MapHash` computes seeded 64-bit hashes of raw bytes and
  of values; `make_seed` returns a new random seed.
- `minilisp.db`: `InMemory` is a thread-safe, weighted store of values that
  are shared by hash. It works with `store_vals`, `load_weight`,
  `query_one_id`, `each_trans_ref`, `each_trans_inverse_ref` and `query`,
  which returns a `QueryResult`.
- `minilisp.generator`: `Generator` produces random values with configurable
  weights and maximum depth, for example to use as test data.
- `minilisp.recognizer`: `Recognizer` checks source against the grammar one
  production at a time and keeps the first syntax error in `error`.
- `minilisp.freqmap`: `FreqMap` counts identifier tokens in source text.
- `minilisp.counter`: `NodeCounter` counts complete top-level groups in each
  delimiter-separated chunk of a source.
- `minilisp.delim`: `is_delim` and `DelimByte` tell whether a separator is
  needed between two bytes.
- `minilisp.decoder`: `IdDecoder` splits an identifier off the front of a
  byte buffer; `PreDecoder` yields each top-level group as raw text.
- `minilisp.convert`: `make_id`, `make_nat`, `from_id`, `id_tuple`, `id_set`
  and `parse_uint` convert between values and plain Python data.
- `minilisp.chars`: byte and character classes of the syntax.

### Example

```python
import sys

from minilisp.scanner import Scanner
from minilisp.printer import std_printer

scanner = Scanner("(add (sub 3 2) 2)  (x y z)")
printer = std_printer(sys.stdout)
for value in scanner.values():
    printer.print(value)
```

This prints:

```
(add(sub 3 2)2)
(x y z)
```

## Command-line tools

| Command | What it does |
| --- | --- |
| `minilisp-show` | Reads a file given with `--file` and prints it in the mode given with `--mode`: standard (the default), `tok`, `ast`, `db`, `bin`, `json`, `idtab` or `none`. `--order reverse` prints groups after their contents in `ast` mode. |
| `minilisp-repl` | Reads expressions from standard input and prints them in canonical form. A blank line ends an entry and `quit` exits. |
| `minilisp-tokens` | Lists the tokens of a source text, or of a file given with `--filename`, with their kinds and positions. |
| `minilisp-nodes` | Lists the top-level nodes of a source text, or of a file given with `--filename`, with their start and end positions. |
| `minilisp-generate` | Prints a random expression. Options: `--seed`, `--seed_time`, `--id_weight`, `--nat_weight`, `--cons_weight`, `--cons_max_depth`. |
| `minilisp-deriv` | Searches for a derivation of a source text in the language grammar, starting from `--start` (default `(e3)`), and prints the steps and search statistics. |
| `minilisp-ebnfgen` | Prints the EBNF grammar of the language. |
| `minilisp-uletters` | Prints every Unicode letter, 40 to a line. |
| `minilisp-utf8string` | Prints each argument as a `(u ...)` group of its UTF-8 bytes. |

Examples:

```
minilisp-tokens "(add 1 2)"
minilisp-nodes "(a)(b) (c)"
minilisp-show --file program.lisp --mode json
minilisp-generate --seed 42
minilisp-repl
```

Each command accepts `--help` and lists its options there.

## What it does not do

- Nothing evaluates expressions. The tools read, check, print and store
  values; `minilisp-repl` echoes what it reads in canonical form but runs
  nothing.
- `query` in `minilisp.db` does not search for pattern matches. It reports a
  match only when the whole query expression is stored with a positive
  weight; otherwise it returns the names marked with `(q name)` groups and no
  matches. A query with more than one expression raises `ValueError`.
- The store lives in memory only; nothing is written to disk.