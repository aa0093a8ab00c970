from minilisp.values import Group, Lit
from minilisp.visitor import Visitor


def recording_visitor():
    visits = []
    v = Visitor(
        on_val=lambda e: visits.append(("Val", e)),
        on_lit=lambda e: visits.append(("Lit", e)),
        before_group=lambda e: visits.append(("BeforeGroup", e)),
        after_group=lambda e: visits.append(("AfterGroup", e)),
    )
    return v, visits


def test_none_has_no_visits():
    v, visits = recording_visitor()
    v.visit(None)
    assert visits == []


def test_nat():
    v, visits = recording_visitor()
    v.visit(Lit("1"))
    assert visits == [("Val", Lit("1")), ("Lit", Lit("1"))]


def test_empty_group():
    v, visits = recording_visitor()
    v.visit(Group())
    assert visits == [("Val", Group()), ("BeforeGroup", Group()), ("AfterGroup", Group())]


def test_simple_nested_group():
    inner = Group([Lit("c")])
    root = Group([Lit("a"), Lit("b"), inner])
    v, visits = recording_visitor()
    v.visit(root)
    assert visits == [
        ("Val", root),
        ("BeforeGroup", root),
        ("Val", Lit("a")),
        ("Lit", Lit("a")),
        ("Val", Lit("b")),
        ("Lit", Lit("b")),
        ("Val", inner),
        ("BeforeGroup", inner),
        ("Val", Lit("c")),
        ("Lit", Lit("c")),
        ("AfterGroup", inner),
        ("AfterGroup", root),
    ]


def test_skip_does_not_descend():
    seen = []
    v = Visitor()

    def on_val(e):
        if isinstance(e, Group) and e and e[0] == "skip":
            v.skip()

    v.on_val = on_val
    v.on_lit = seen.append
    v.visit(Group([Lit("a"), Group([Lit("skip"), Lit("x")]), Lit("b")]))
    assert seen == ["a", "b"]


def test_stop_halts_visiting():
    v, visits = recording_visitor()
    record_lit = v.on_lit

    def on_lit(e):
        record_lit(e)
        if e == "b":
            v.stop()

    v.on_lit = on_lit
    v.visit(Group([Lit("a"), Lit("b"), Lit("c")]))
    lits = [e for kind, e in visits if kind == "Lit"]
    assert lits == [Lit("a"), Lit("b")]
    count = len(visits)
    v.visit(Lit("d"))
    assert len(visits) == count


def test_visit_group_calls_val_first():
    v, visits = recording_visitor()
    g = Group([Lit("a")])
    v.visit_group(g)
    assert visits[0] == ("Val", g)
    assert visits[-1] == ("AfterGroup", g)