"""Unit tests for do-block patterns and scopes."""

import pytest
from kungfu import Error, Ok

from monadic import NOTHING, Just
from monadic.notation import Const, Guard, Of, Scope, Seq, Var, Wildcard, as_pattern


def bindings(result):
    match result:
        case Ok(found):
            return found
        case Error(mismatch):
            raise AssertionError(f"unexpected mismatch: {mismatch}")


def mismatch(result):
    match result:
        case Error(found):
            return found
        case Ok(found):
            raise AssertionError(f"unexpected match: {found!r}")


def test_var_and_wildcard():
    """Test that variables bind and wildcards match anything."""
    assert bindings(Var("x").match(1)) == {"x": 1}
    assert bindings(Wildcard().match(object())) == {}


def test_var_rejects_bad_names():
    """Test that only identifiers can be bound."""
    with pytest.raises(ValueError, match="not a bindable name"):
        Var("1x")
    with pytest.raises(ValueError):
        Var("_")


def test_const():
    """Test that constants match by equality."""
    assert bindings(Const(3).match(3)) == {}
    failure = mismatch(Const(3).match(4))
    assert failure.value == 4
    assert "expected 3" in failure.reason


def test_seq_destructures():
    """Test fixed-length destructuring of tuples and lists."""
    pattern = Seq("a", "_", ("b", "c"))
    assert bindings(pattern.match((1, 2, [3, 4]))) == {"a": 1, "b": 3, "c": 4}
    assert pattern.names() == ("a", "b", "c")


def test_seq_length_and_type_mismatch():
    """Test that Seq reports wrong shapes instead of raising."""
    assert "expected 2 items" in mismatch(Seq("a", "b").match((1,))).reason
    assert "tuple or list" in mismatch(Seq("a").match("a")).reason


def test_seq_rejects_duplicate_names():
    """Test that a name cannot be bound twice in one pattern."""
    with pytest.raises(ValueError, match="bound more than once"):
        Seq("a", "a")


def test_class_pattern():
    """Test Of against __match_args__, like case Just(x)."""
    pattern = Of(Just, "x")
    assert bindings(pattern.match(Just(5))) == {"x": 5}
    assert "expected Just" in mismatch(pattern.match(NOTHING)).reason
    assert str(pattern) == "Just(x)"
    assert "3" in mismatch(Of(Just, Const(3)).match(Just(4))).reason


def test_class_pattern_arity():
    """Test that Of refuses more sub-patterns than the class exposes."""
    with pytest.raises(ValueError, match="positional sub-patterns"):
        Of(Just, "a", "b")


def test_string_items_are_single_names():
    """Test that a str argument to Seq or Of binds one name instead of one per character."""
    pair = Seq("ab", "cd")
    assert pair.items == (Var("ab"), Var("cd"))
    assert bindings(pair.match((1, 2))) == {"ab": 1, "cd": 2}

    single = Seq("ab")
    assert single.names() == ("ab",)
    assert bindings(single.match([7])) == {"ab": 7}

    assert bindings(Of(Just, "value").match(Just(3))) == {"value": 3}


def test_guard():
    """Test that Guard runs its predicate after the inner pattern."""

    def positive(x):
        return x > 0

    pattern = Guard("n", positive)
    assert bindings(pattern.match(3)) == {"n": 3}
    assert mismatch(pattern.match(-1)).reason == "guard rejected value"
    assert str(pattern) == "n if positive"


def test_as_pattern_shorthand():
    """Test coercion of shorthand into patterns."""
    assert as_pattern("_") == Wildcard()
    assert as_pattern("x") == Var("x")
    assert as_pattern(("x", "_")) == Seq(Var("x"), Wildcard())
    with pytest.raises(TypeError, match="as a pattern"):
        as_pattern(42)


def test_scope_is_immutable_mapping():
    """Test attribute and item access, and that extend leaves the original untouched."""
    scope = Scope({"x": 1})
    extended = scope.extend({"y": 2})

    assert scope.x == 1
    assert extended["y"] == 2
    assert dict(extended) == {"x": 1, "y": 2}
    assert "y" not in scope
    assert extended.extend({}) is extended


def test_scope_missing_name():
    """Test that unknown names raise AttributeError and KeyError."""
    scope = Scope()
    with pytest.raises(AttributeError, match="not bound"):
        scope.missing
    with pytest.raises(KeyError):
        scope["missing"]


def test_names_shadowed_by_scope_attributes_are_rejected():
    """Test that Scope method names such as items or get cannot be bound."""
    for name in ("items", "keys", "values", "get", "extend"):
        with pytest.raises(ValueError, match="reserved"):
            Var(name)
    with pytest.raises(ValueError, match="reserved"):
        Scope({"get": 1})
    with pytest.raises(ValueError, match="reserved"):
        Scope({"x": 1}).extend({"items": 2})
    assert Scope({"item": 1}).item == 1
