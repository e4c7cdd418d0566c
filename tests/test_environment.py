import pytest

from minischeme.errors import SchemeNameError
from minischeme.types.environment import Environment


def test_define_and_get(env):
    env.define("x", 1)
    assert env.get("x") == 1


def test_get_missing_returns_none(env):
    assert env.get("nope") is None
    assert "nope" not in env


def test_define_overwrites_in_current_scope(env):
    env.define("x", 1)
    env.define("x", 2)
    assert env.get("x") == 2


def test_child_sees_parent_bindings(env):
    env.define("x", 1)
    child = Environment(outer=env)
    assert child.get("x") == 1
    assert child.find("x") is env


def test_define_shadows_without_touching_parent(env):
    env.define("x", 1)
    child = Environment(outer=env)
    child.define("x", 2)
    assert child.get("x") == 2
    assert env.get("x") == 1


def test_set_mutates_nearest_binding(env):
    env.define("x", 1)
    child = Environment(outer=env)
    grandchild = Environment(outer=child)
    grandchild.set("x", 5)
    assert env.get("x") == 5
    assert "x" not in child.vars
    assert "x" not in grandchild.vars


def test_set_prefers_inner_scope(env):
    env.define("x", 1)
    child = Environment(outer=env)
    child.define("x", 2)
    child.set("x", 3)
    assert child.get("x") == 3
    assert env.get("x") == 1


def test_set_never_creates_a_binding(env):
    with pytest.raises(SchemeNameError, match="Variable y is undefined"):
        env.set("y", 1)
    assert "y" not in env


def test_update_defines_in_bulk(env):
    env.update({"a": 1, "b": 2})
    assert env.get("a") == 1
    assert env.get("b") == 2


def test_str_and_repr(env):
    env.define("a", 1)
    child = Environment(outer=env)
    child.define("b", 2)
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> {a: 1}>"
