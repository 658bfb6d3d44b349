import pytest

from mclisp.types.errors import McLispError
from mclisp.types.expression import Atom, List, TRUE, empty_list, from_python, is_symbol


def test_atom_and_list_are_exclusive():
    a = Atom("a")
    xs = List([Atom("a")])
    assert a.is_atom() and not a.is_list()
    assert xs.is_list() and not xs.is_atom()
    assert empty_list().is_list()


def test_empty_list():
    assert empty_list().is_empty_list()
    assert List().is_empty_list()
    assert not List([Atom("a")]).is_empty_list()
    assert not Atom("a").is_empty_list()
    assert empty_list() == List([])


def test_structural_equality():
    assert Atom("a") == Atom("a")
    assert Atom("a") != Atom("b")
    assert from_python(["a", ["b", "c"]]) == List([Atom("a"), List([Atom("b"), Atom("c")])])
    assert from_python(["a", "b"]) != from_python(["a", "b", "c"])
    assert Atom("a") != List([Atom("a")])
    assert List() != Atom("")


def test_equal_expressions_hash_equal():
    assert hash(from_python(["a", ["b"]])) == hash(from_python(["a", ["b"]]))
    assert len({Atom("x"), Atom("x"), List()}) == 2


def test_accessors_on_wrong_variant_are_contract_violations():
    with pytest.raises(TypeError) as excinfo:
        Atom("a").list_items()
    assert not isinstance(excinfo.value, McLispError)
    with pytest.raises(TypeError):
        List().atom_value()


def test_accessors():
    assert Atom("a").atom_value() == "a"
    xs = from_python(["a", "b"])
    assert xs.list_items() == (Atom("a"), Atom("b"))


def test_rest_and_prepend_build_new_lists():
    xs = from_python(["a", "b", "c"])
    assert xs.rest() == from_python(["b", "c"])
    assert xs.prepend(Atom("z")) == from_python(["z", "a", "b", "c"])
    assert xs == from_python(["a", "b", "c"])


def test_printing():
    assert str(Atom("a")) == "a"
    assert str(empty_list()) == "()"
    assert str(from_python(["quote", ["a", [], "b"]])) == "(quote (a () b))"


def test_is_symbol_and_true():
    assert is_symbol("t", TRUE)
    assert not is_symbol("t", List([Atom("t")]))
    assert not is_symbol("quote", Atom("quotes"))
