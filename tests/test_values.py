"""Tests for the value model: truthiness, equality and inspection."""

import pytest

from truecss.values import (
    FALSE,
    NULL,
    TRUE,
    ListSeparator,
    Value,
    ValueKind,
    inspect,
    is_truthy,
    list_of,
    map_of,
    number,
    string,
    type_of,
    values_equal,
)


# --- is_truthy ---


@pytest.mark.parametrize(
    "value",
    [None, False, [], "", {}, NULL, FALSE, list_of([]), string("", quoted=False)],
)
def test_falsy_values(value):
    assert is_truthy(value) is False


@pytest.mark.parametrize(
    "value",
    [True, 0, 0.0, "0", [0], [[]], [""], "false", {"a": None}, number(0, "px")],
)
def test_truthy_values(value):
    assert is_truthy(value) is True


def test_truthy_scenarios():
    assert is_truthy([]) is False
    assert is_truthy([0]) is True
    assert is_truthy("") is False
    assert is_truthy("0") is True


# --- coercion ---


def test_coerce_maps_python_types():
    assert Value.coerce(None) is NULL
    assert Value.coerce(True) is TRUE
    assert Value.coerce(3).kind is ValueKind.NUMBER
    assert Value.coerce("a").kind is ValueKind.STRING
    assert Value.coerce([1, 2]).kind is ValueKind.LIST
    assert Value.coerce({"a": 1}).kind is ValueKind.MAP


def test_coerce_passes_values_through():
    value = number(1, "px")
    assert Value.coerce(value) is value


def test_coerce_rejects_unrepresentable_objects():
    with pytest.raises(TypeError, match="object"):
        Value.coerce(object())


# --- values_equal ---


def test_numbers_equal_across_int_and_float():
    assert values_equal(5, 5.0)
    assert not values_equal(5, 6)


def test_numbers_with_different_units_are_unequal():
    assert values_equal(number(1, "px"), number(1, "px"))
    assert not values_equal(number(1, "px"), number(1, "em"))
    assert not values_equal(number(1, "px"), 1)


def test_numbers_compare_at_fixed_precision():
    assert values_equal(0.1 + 0.2, 0.3)


def test_non_finite_numbers():
    inf = float("inf")
    assert values_equal(inf, inf)
    assert values_equal(-inf, -inf)
    assert not values_equal(inf, -inf)
    assert not values_equal(inf, 1e308)
    assert not values_equal(float("nan"), float("nan"))
    assert not values_equal(number(inf, "px"), number(inf, "em"))


def test_types_must_match():
    assert not values_equal(1, "1")
    assert not values_equal(None, False)
    assert not values_equal(True, 1)


def test_string_quoting_is_ignored():
    assert values_equal(string("bold"), string("bold", quoted=False))


def test_lists_compare_items_and_separator():
    assert values_equal([1, 2], [1, 2])
    assert not values_equal([1, 2], [2, 1])
    assert not values_equal([1, 2], [1, 2, 3])
    assert not values_equal(
        list_of([1, 2], ListSeparator.SPACE), list_of([1, 2], ListSeparator.COMMA)
    )


def test_empty_collections_are_equal():
    assert values_equal([], {})
    assert values_equal(list_of([], "space"), [])


def test_nested_lists():
    assert values_equal([[1, 2], [3]], [[1, 2], [3]])
    assert not values_equal([[1, 2], [3]], [[1, 2], [4]])


def test_maps_ignore_key_order():
    assert values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert not values_equal({"a": 1}, {"a": 2})
    assert not values_equal({"a": 1}, {"b": 1})
    assert not values_equal({"a": 1}, {"a": 1, "b": 2})


def test_map_with_null_value():
    assert values_equal({"a": None}, {"a": None})
    assert not values_equal({"a": None}, {"b": None})


# --- inspect / type_of ---


def test_inspect_scalars():
    assert inspect(None) == "null"
    assert inspect(True) == "true"
    assert inspect(5) == "5"
    assert inspect(1.5) == "1.5"
    assert inspect(number(10, "px")) == "10px"
    assert inspect("a") == '"a"'
    assert inspect(string("bold", quoted=False)) == "bold"


def test_inspect_non_finite_numbers():
    assert inspect(float("inf")) == "Infinity"
    assert inspect(number(float("-inf"), "px")) == "-Infinitypx"
    assert inspect(float("nan")) == "NaN"


def test_inspect_collections():
    assert inspect([]) == "()"
    assert inspect([1, 2]) == "1, 2"
    assert inspect([1]) == "(1,)"
    assert inspect(list_of([1, 2], "space")) == "1 2"
    assert inspect([[1, 2], 3]) == "(1, 2), 3"
    assert inspect(map_of([("a", 1)])) == '("a": 1)'


def test_type_of():
    assert type_of(None) == "null"
    assert type_of(False) == "bool"
    assert type_of(1) == "number"
    assert type_of("x") == "string"
    assert type_of([]) == "list"
    assert type_of({"a": 1}) == "map"
