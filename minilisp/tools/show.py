"""Print Lisp source in one of several forms."""

from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path
from typing import TextIO

from minilisp.blisp import Encoder
from minilisp.db import InMemory, each_trans_ref, query_one_id, store_vals
from minilisp.hashing import MapHash
from minilisp.jsoncodec import JsonEncoder
from minilisp.printer import std_printer
from minilisp.scanner import ScanError, Scanner
from minilisp.stringer import format_lit
from minilisp.tools.uletters import letters
from minilisp.values import Group, Lit, Val
from minilisp.visitor import Visitor

TOKEN_NAMES = ("?", "Id", "(", ")")


def _render_ast(vals: list[Val], order: str, out: TextIO) -> None:
    def on_group(e: Group) -> None:
        buf = io.StringIO()
        std_printer(buf).print(e)
        out.write("EXPR\t" + buf.getvalue())

    def on_lit(e: Lit) -> None:
        out.write(f"LIT\t {format_lit(e)}\n")

    if order == "":
        visitor = Visitor(on_lit=on_lit, before_group=on_group)
    elif order == "reverse":
        visitor = Visitor(on_lit=on_lit, after_group=on_group)
    else:
        raise ValueError(f"unexpected -order mode: {order}")
    for v in vals:
        visitor.visit(v)


def _render_db(vals: list[Val], out: TextIO) -> None:
    db = InMemory()
    store_vals(db, vals, 1)
    rows: dict[int, tuple[Val, float, list[int], list[int]]] = {}
    for v in vals:
        h = MapHash(db.seed)
        h.write_val(v)
        for i in each_trans_ref(db, h.sum64()):
            val, weight = query_one_id(db, i)
            rows[i] = (val, weight, list(db.each_ref(i)), list(db.each_inverse_ref(i)))
    for id_, (val, weight, refs, inverse_refs) in rows.items():
        out.write(f"{id_}\t{weight:f}\t")
        std_printer(out).print(val)
        out.write("Refs: " + "".join(f"{r}," for r in refs) + "\n")
        out.write("InverseRefs: " + "".join(f"{r}," for r in inverse_refs) + "\n")


def render(src: str | bytes, mode: str = "", order: str = "") -> str:
    """Render Lisp source in the given mode.

    Modes: "" (standard printing), "tok", "ast", "db", "bin", "json",
    "idtab" and "none". Raises ScanError for invalid source and ValueError
    for an unknown mode or order.
    """
    data = src.encode("utf-8") if isinstance(src, str) else bytes(src)
    vals = [n.val for n in Scanner(data).nodes()]
    out = io.StringIO()
    match mode:
        case "":
            for v in vals:
                std_printer(out).print(v)
        case "tok":
            for t in Scanner(data).tokens():
                out.write(f"{t.pos} \t {TOKEN_NAMES[t.tok]} \t {t.text}\n")
        case "ast":
            _render_ast(vals, order, out)
        case "db":
            _render_db(vals, out)
        case "bin":
            buf = io.BytesIO()
            encoder = Encoder(buf)
            encoder.encode_magic()
            for v in vals:
                encoder.encode(v)
            out.write(buf.getvalue().decode("utf-8"))
        case "json":
            for v in vals:
                JsonEncoder(out).encode(v)
                out.write("\n")
        case "idtab":
            out.write(letters())
        case "none":
            pass
        case _:
            raise ValueError(f"unexpected -print mode: {mode}")
    return out.getvalue()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="show", description="Print Lisp code in various forms.")
    parser.add_argument("-order", "--order", default="",
                        help='print order for ast mode (optional "reverse"; default in-order)')
    parser.add_argument("-mode", "--mode", default="",
                        help='print mode ("tok", "ast", "db", "bin", "json", "idtab", "none")')
    parser.add_argument("-file", "--file", default="", help="file to read lisp code from")
    args = parser.parse_args(argv)

    if not args.file:
        print("-file is required", file=sys.stderr)
        return 1
    try:
        src = Path(args.file).read_bytes()
        sys.stdout.write(render(src, args.mode, args.order))
    except (OSError, ScanError, ValueError) as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())