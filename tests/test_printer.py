import pytest
from hypothesis import given, strategies as st

from minischeme.errors import SchemeRuntimeError
from minischeme.printer import render
from minischeme.types.builtin import Builtin
from minischeme.types.closure import Closure
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair, from_list
from minischeme.types.symbol import Symbol


@pytest.mark.parametrize(
    "term,expected",
    [
        (Nil, "()"),
        (0, "0"),
        (-17, "-17"),
        (2 ** 70, "1180591620717411303424"),
        (True, "#t"),
        (False, "#f"),
        (Symbol("foo"), "foo"),
        (Builtin.SET, "set!"),
        (Builtin.LIST_TAIL, "list-tail"),
        (from_list([1, 2, 3]), "(1 2 3)"),
        (Pair(1, 2), "(1 . 2)"),
        (from_list([1, 2], tail=3), "(1 2 . 3)"),
        (from_list([Nil, from_list([Symbol("a")])]), "(() (a))"),
        (Pair(Pair(1, 2), Pair(3, 4)), "((1 . 2) 3 . 4)"),
        (from_list([True, False]), "(#t #f)"),
    ],
)
def test_render(term, expected):
    assert render(term) == expected


def test_render_closures(env):
    assert render(Closure(["x"], [Symbol("x")], env, "identity")) == "#<procedure identity>"
    assert render(Closure([], [1], env)) == "#<procedure>"
    assert render(from_list([Closure([], [1], env)])) == "(#<procedure>)"


def test_render_unknown_object():
    with pytest.raises(SchemeRuntimeError, match="Unknown object type"):
        render(3.5)


def test_render_long_list_iteratively():
    term = from_list(range(20000))
    text = render(term)
    assert text.startswith("(0 1 2 ")
    assert text.endswith(" 19998 19999)")


def test_render_reflects_mutation():
    shared = from_list([1, 2])
    outer = from_list([shared, shared])
    shared.first = Symbol("x")
    assert render(outer) == "((x 2) (x 2))"


@given(st.lists(st.integers()))
def test_render_integer_lists(items):
    expected = "(" + " ".join(str(i) for i in items) + ")"
    assert render(from_list(items)) == expected
