# =============================================================================
# tests/test_transformations.py - Bundled Transformation Tests
# =============================================================================
# The functions registered by transmute.transformations.
# =============================================================================

from datetime import date
from decimal import Decimal

import pandas as pd
import pytest

from transmute import NamedFunction
from transmute.transformations import (
    array,
    coercions,
    conditional,
    dicts,
    frames,
    objects,
    registry,
)


# =============================================================================
# Default registry
# =============================================================================

class TestDefaultRegistry:
    """Tests for the combined default registry."""

    @pytest.mark.parametrize("name", [
        "map_array", "wrap", "group", "symbolize_keys", "rename_keys", "nest",
        "to_integer", "to_boolean", "is_a", "is", "not", "guard",
        "constructor_inject", "to_records", "from_records",
    ])
    def test_contains_library(self, name):
        """Every module's functions are in the default registry."""
        assert name in registry

    def test_resolves_named_function(self):
        """Library functions resolve like any other."""
        assert registry["map_array", str]([1, 2]) == ["1", "2"]


# =============================================================================
# Array
# =============================================================================

class TestArray:
    """Tests for list transformations."""

    def test_map_array_composes_functions(self):
        """Several functions are applied in order to each element."""
        assert array.map_array([1, 2], lambda v: v + 1, lambda v: v * 10) == [20, 30]

    def test_map_array_without_functions_copies(self):
        """With no functions the elements are returned as a new list."""
        data = [1, 2]
        result = array.map_array(data)
        assert result == data
        assert result is not data

    def test_map_array_does_not_mutate(self):
        """The input list is left untouched."""
        data = [{"a": 1}]
        array.map_array(data, lambda v: {**v, "b": 2})
        assert data == [{"a": 1}]

    def test_wrap(self):
        """wrap nests keys of every element."""
        data = [{"name": "Jane", "city": "NYC"}]
        assert array.wrap(data, "address", ["city"]) == [{"name": "Jane", "address": {"city": "NYC"}}]

    def test_group(self):
        """group collects keys under a new key per root."""
        data = [
            {"name": "Jane", "task": "a"},
            {"name": "Jane", "task": "b"},
            {"name": "Joe", "task": None},
        ]
        assert array.group(data, "tasks", ["task"]) == [
            {"name": "Jane", "tasks": [{"task": "a"}, {"task": "b"}]},
            {"name": "Joe", "tasks": []},
        ]

    def test_group_with_unhashable_fields(self):
        """Roots holding lists are grouped by equality; False children are dropped."""
        data = [
            {"name": "Jane", "tags": ["a"], "task": "x"},
            {"name": "Jane", "tags": ["a"], "task": "y"},
            {"name": "Jane", "tags": ["b"], "task": False},
        ]
        assert array.group(data, "tasks", ["task"]) == [
            {"name": "Jane", "tags": ["a"], "tasks": [{"task": "x"}, {"task": "y"}]},
            {"name": "Jane", "tags": ["b"], "tasks": []},
        ]

    def test_extract_and_insert_key(self):
        """extract_key plucks values; insert_key wraps them."""
        assert array.extract_key([{"a": 1}, {}], "a") == [1, None]
        assert array.insert_key([1, 2], "a") == [{"a": 1}, {"a": 2}]

    def test_add_keys(self):
        """Missing keys are added as None, present ones kept."""
        assert array.add_keys([{"a": 1}], ["a", "b"]) == [{"a": 1, "b": None}]


# =============================================================================
# Dicts
# =============================================================================

class TestDicts:
    """Tests for dict transformations."""

    def test_symbolize_keys(self):
        """Keys become identifier-style strings."""
        assert dicts.symbolize_keys({"user name": 1, b"age": 2, 3: 4}) == {"user_name": 1, "age": 2, "3": 4}

    def test_deep_symbolize_keys(self):
        """Nested dicts and lists are handled."""
        assert dicts.deep_symbolize_keys({"a b": [{"c d": 1}]}) == {"a_b": [{"c_d": 1}]}

    def test_stringify_keys(self):
        """Keys become plain strings."""
        assert dicts.stringify_keys({1: "a", b"x": "b"}) == {"1": "a", "x": "b"}

    def test_map_keys(self):
        """Functions are applied to every key."""
        assert dicts.map_keys({"a": 1}, str.upper) == {"A": 1}

    def test_map_value(self):
        """Only the named value is transformed."""
        assert dicts.map_value({"age": "12", "name": "x"}, "age", int) == {"age": 12, "name": "x"}

    def test_map_value_missing_key(self):
        """A missing key stays missing."""
        assert dicts.map_value({"name": "x"}, "age", int) == {"name": "x"}

    def test_map_values(self):
        """Every value is transformed."""
        assert dicts.map_values({"a": 1, "b": 2}, lambda v: v * 2) == {"a": 2, "b": 4}

    def test_rename_keys(self):
        """Keys are renamed from a mapping or keyword arguments."""
        assert dicts.rename_keys({"user_name": "Jane"}, user_name="name") == {"name": "Jane"}
        assert dicts.rename_keys({1: "a", 2: "b"}, {1: "id"}) == {"id": "a", 2: "b"}

    def test_accept_and_reject_keys(self):
        """Keys are whitelisted or blacklisted."""
        data = {"a": 1, "b": 2}
        assert dicts.accept_keys(data, ["a"]) == {"a": 1}
        assert dicts.reject_keys(data, ["a"]) == {"b": 2}

    def test_nest_merges_existing(self):
        """nest merges into an existing nested dict."""
        data = {"address": {"city": "NYC"}, "zipcode": "123"}
        assert dicts.nest(data, "address", ["zipcode"]) == {"address": {"city": "NYC", "zipcode": "123"}}

    def test_unwrap(self):
        """unwrap lifts keys back out."""
        data = {"name": "Jane", "address": {"city": "NYC", "zipcode": "123"}}
        assert dicts.unwrap(data, "address") == {"name": "Jane", "city": "NYC", "zipcode": "123"}
        assert dicts.unwrap(data, "address", ["city"]) == {
            "name": "Jane", "city": "NYC", "address": {"zipcode": "123"},
        }

    def test_does_not_mutate(self):
        """Dict transformations return new dicts."""
        data = {"a": 1}
        dicts.rename_keys(data, a="b")
        dicts.nest(data, "x", ["a"])
        assert data == {"a": 1}


# =============================================================================
# Coercions
# =============================================================================

class TestCoercions:
    """Tests for scalar coercions."""

    @pytest.mark.parametrize("value,expected", [("12", 12), (" 7 ", 7), ("3.0", 3), (4.9, 4)])
    def test_to_integer(self, value, expected):
        """Strings and numbers become ints."""
        assert coercions.to_integer(value) == expected

    def test_to_integer_rejects_fraction(self):
        """Fractional strings are refused."""
        with pytest.raises(ValueError):
            coercions.to_integer("12.5")

    @pytest.mark.parametrize("value,expected", [("true", True), ("No", False), ("1", True), ("", False), (0, False)])
    def test_to_boolean(self, value, expected):
        """Known spellings map to booleans."""
        assert coercions.to_boolean(value) is expected

    def test_to_boolean_rejects_unknown(self):
        """Unknown strings are refused."""
        with pytest.raises(ValueError):
            coercions.to_boolean("maybe")

    def test_other_coercions(self):
        """String, float, decimal and date conversions."""
        assert coercions.to_string(1) == "1"
        assert coercions.to_float("1.5") == 1.5
        assert coercions.to_decimal(1.1) == Decimal("1.1")
        assert coercions.to_date("2024-01-15") == date(2024, 1, 15)
        assert coercions.to_date("15/01/2024", "%d/%m/%Y") == date(2024, 1, 15)
        assert coercions.to_datetime("2024-01-15T10:00:00").hour == 10


# =============================================================================
# Conditional
# =============================================================================

class TestConditional:
    """Tests for predicates and conditionals."""

    def test_is_a(self):
        """is_a is an isinstance predicate."""
        assert conditional.is_a("a", str)
        assert not conditional.is_a(1, str)

    def test_not(self):
        """not negates a predicate."""
        assert conditional.not_(1, conditional.is_none)

    def test_guard(self):
        """guard applies fn only when the predicate holds."""
        assert conditional.guard(2, lambda v: v > 1, lambda v: v * 10) == 20
        assert conditional.guard(0, lambda v: v > 1, lambda v: v * 10) == 0

    def test_is(self):
        """is applies fn only to values of a type."""
        fn = registry["is", str, NamedFunction(str.upper)]
        assert fn("a") == "A"
        assert fn(1) == 1


# =============================================================================
# Objects
# =============================================================================

class Point:
    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y

    def __eq__(self, other):
        return (self.x, self.y) == (other.x, other.y)


class TestObjects:
    """Tests for object construction."""

    def test_constructor_inject(self):
        """Keys become constructor keyword arguments."""
        assert objects.constructor_inject({"x": 1, "y": 2}, Point) == Point(1, 2)

    def test_set_attributes(self):
        """Keys become attributes on a default-constructed object."""
        assert objects.set_attributes({"x": 5}, Point) == Point(5, 0)

    def test_to_dict(self):
        """Public attributes are read back into a dict."""
        assert objects.to_dict(Point(1, 2)) == {"x": 1, "y": 2}
        assert objects.to_dict(Point(1, 2), ["y"]) == {"y": 2}


# =============================================================================
# Frames
# =============================================================================

class TestFrames:
    """Tests for DataFrame conversions."""

    def test_to_records(self):
        """Rows become dicts with missing values as None."""
        df = pd.DataFrame({"name": ["Jane", "Joe"], "age": [12, None]})
        records = frames.to_records(df)
        assert records[0] == {"name": "Jane", "age": 12.0}
        assert records[1]["age"] is None

    def test_from_records(self):
        """Dicts become rows, optionally in a fixed column order."""
        df = frames.from_records([{"b": 1, "a": 2}], columns=["a", "b"])
        assert list(df.columns) == ["a", "b"]
        assert df.iloc[0]["a"] == 2

    def test_records_pipeline(self):
        """DataFrames flow through record transformations and back."""
        df = pd.DataFrame({"User Name": ["Jane"], "Age": ["12"]})
        chain = (
            registry["to_records"]
            >> registry["map_array", registry["symbolize_keys"]]
            >> registry["from_records"]
        )
        assert list(chain(df).columns) == ["User_Name", "Age"]
