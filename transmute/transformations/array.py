# =============================================================================
# transmute/transformations/array.py - List Transformations
# =============================================================================
# Functions operating on lists, mostly lists of dicts.
# None of them mutate their input.
# =============================================================================

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable

from transmute.composer import compose
from transmute.registry import Registry
from transmute.transformations.dicts import nest


registry = Registry("array")


@registry.register
def map_array(array: Iterable[Any], *fns: Callable[[Any], Any]) -> list[Any]:
    """
    Apply the given functions, in order, to every element.

    Example:
        map_array([1, 2], str)   # -> ["1", "2"]
    """
    fn = compose(*fns, default=_identity)
    return [fn(value) for value in array]


@registry.register
def wrap(array: Iterable[dict], key: Hashable, keys: Iterable[Hashable]) -> list[dict]:
    """Nest `keys` of every element under `key`."""
    keys = list(keys)
    return [nest(value, key, keys) for value in array]


@registry.register
def group(array: Iterable[dict], key: Hashable, keys: Iterable[Hashable]) -> list[dict]:
    """
    Group elements by everything except `keys`, collecting `keys` under `key`.

    Example:
        group([{"name": "Jane", "task": "a"}, {"name": "Jane", "task": "b"}], "tasks", ["task"])
        # -> [{"name": "Jane", "tasks": [{"task": "a"}, {"task": "b"}]}]

    Children whose grouped values are all None or False are dropped.
    Roots are compared by equality, so fields may hold lists or dicts.
    """
    keys = list(keys)
    groups: list[tuple[dict, list[dict]]] = []

    for value in array:
        root = {k: v for k, v in value.items() if k not in keys}
        child = {k: value.get(k) for k in keys}
        children = next((found for existing, found in groups if existing == root), None)
        if children is None:
            children = []
            groups.append((root, children))
        if any(v is not None and v is not False for v in child.values()):
            children.append(child)

    return [{**root, key: children} for root, children in groups]


@registry.register
def extract_key(array: Iterable[dict], key: Hashable) -> list[Any]:
    """Pluck `key` out of every element (None when missing)."""
    return [value.get(key) for value in array]


@registry.register
def insert_key(array: Iterable[Any], key: Hashable) -> list[dict]:
    """Wrap every element in a dict under `key`."""
    return [{key: value} for value in array]


@registry.register
def add_keys(array: Iterable[dict], keys: Iterable[Hashable]) -> list[dict]:
    """Make sure every element has `keys`, defaulting missing ones to None."""
    defaults = dict.fromkeys(keys)
    return [{**defaults, **value} for value in array]


def _identity(value: Any) -> Any:
    return value
