import pytest

from mclisp.types.environment import Environment
from mclisp.types.errors import McLispInvalidSymbol
from mclisp.types.expression import Atom


def test_new_environment_is_empty():
    env = Environment()
    assert env.lookup("x") is None
    assert env.names() == set()


def test_bind_and_lookup():
    env = Environment()
    env.bind("x", Atom("a"))
    assert env.lookup("x") == Atom("a")
    env.bind("x", Atom("b"))
    assert env.lookup("x") == Atom("b")
    assert "x" in env


def test_bind_rejects_non_string_names():
    with pytest.raises(McLispInvalidSymbol):
        Environment().bind(Atom("x"), Atom("a"))


def test_extend_overlays_without_leaking():
    env = Environment()
    env.bind("x", Atom("outer"))
    env.bind("y", Atom("kept"))
    child = env.extend({"x": Atom("inner")})
    assert child.lookup("x") == Atom("inner")
    assert child.lookup("y") == Atom("kept")
    child.bind("z", Atom("local"))
    assert env.lookup("x") == Atom("outer")
    assert env.lookup("z") is None


def test_sibling_scopes_are_independent():
    env = Environment()
    left = env.extend({"a": Atom("1")})
    right = env.extend({"b": Atom("2")})
    assert right.lookup("a") is None
    assert left.lookup("b") is None


def test_define_global_reaches_root():
    env = Environment()
    child = env.extend({}).extend({})
    assert child.root is env
    child.define_global("f", Atom("fn"))
    assert env.lookup("f") == Atom("fn")
    assert child.lookup("f") == Atom("fn")


def test_str_and_repr():
    env = Environment()
    env.bind("x", Atom("a"))
    child = env.extend({"y": Atom("b")})
    assert str(env) == "{x: a}"
    assert str(child) == "{y: b} -> ..."
    assert repr(child) == "<Environment chain: {y: b} -> {x: a}>"
