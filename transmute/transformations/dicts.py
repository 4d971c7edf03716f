# =============================================================================
# transmute/transformations/dicts.py - Dict Transformations
# =============================================================================
# Key renaming, value mapping and (un)nesting for dicts.
# Every function returns a new dict.
# =============================================================================

from __future__ import annotations

import re
from typing import Any, Callable, Hashable, Iterable, Mapping

from transmute.composer import compose
from transmute.registry import Registry


registry = Registry("dicts")

_NON_WORD = re.compile(r"\W+")


def _symbolize(key: Any) -> str:
    if isinstance(key, bytes):
        key = key.decode("utf-8")
    return _NON_WORD.sub("_", str(key).strip())


def _stringify(key: Any) -> str:
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return str(key)


@registry.register
def symbolize_keys(data: Mapping) -> dict:
    """
    Turn every key into an identifier-style string.

    Example:
        symbolize_keys({"user name": "Jane", 1: "x"})   # -> {"user_name": "Jane", "1": "x"}
    """
    return {_symbolize(key): value for key, value in data.items()}


@registry.register
def deep_symbolize_keys(data: Any) -> Any:
    """symbolize_keys applied through nested dicts and lists."""
    if isinstance(data, Mapping):
        return {_symbolize(key): deep_symbolize_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [deep_symbolize_keys(value) for value in data]
    return data


@registry.register
def stringify_keys(data: Mapping) -> dict:
    return {_stringify(key): value for key, value in data.items()}


@registry.register
def map_keys(data: Mapping, *fns: Callable[[Any], Any]) -> dict:
    fn = compose(*fns, default=_identity)
    return {fn(key): value for key, value in data.items()}


@registry.register
def map_value(data: Mapping, key: Hashable, *fns: Callable[[Any], Any]) -> dict:
    """Apply the functions to the value under `key`; a missing key is left missing."""
    if key not in data:
        return dict(data)
    fn = compose(*fns, default=_identity)
    return {**data, key: fn(data[key])}


@registry.register
def map_values(data: Mapping, *fns: Callable[[Any], Any]) -> dict:
    fn = compose(*fns, default=_identity)
    return {key: fn(value) for key, value in data.items()}


@registry.register
def rename_keys(data: Mapping, mapping: Mapping | None = None, **renames: Hashable) -> dict:
    """
    Rename keys.

    Example:
        rename_keys({"user_name": "Jane"}, user_name="name")   # -> {"name": "Jane"}
        rename_keys({1: "a"}, {1: "id"})                       # -> {"id": "a"}
    """
    renames = {**(mapping or {}), **renames}
    return {renames.get(key, key): value for key, value in data.items()}


@registry.register
def accept_keys(data: Mapping, keys: Iterable[Hashable]) -> dict:
    keys = set(keys)
    return {key: value for key, value in data.items() if key in keys}


@registry.register
def reject_keys(data: Mapping, keys: Iterable[Hashable]) -> dict:
    keys = set(keys)
    return {key: value for key, value in data.items() if key not in keys}


@registry.register
def nest(data: Mapping, root: Hashable, keys: Iterable[Hashable]) -> dict:
    """
    Move `keys` into a dict stored under `root`.

    An existing dict under `root` is merged into, not replaced.

    Example:
        nest({"name": "Jane", "city": "NYC"}, "address", ["city"])
        # -> {"name": "Jane", "address": {"city": "NYC"}}
    """
    keys = list(keys)
    result = {key: value for key, value in data.items() if key not in keys}
    nested = {key: data[key] for key in keys if key in data}
    existing = data.get(root)
    if isinstance(existing, Mapping):
        nested = {**existing, **nested}
    result[root] = nested
    return result


@registry.register
def unwrap(data: Mapping, root: Hashable, keys: Iterable[Hashable] | None = None) -> dict:
    """Inverse of nest: lift `keys` (default: all) out of the dict under `root`."""
    nested = data.get(root)
    if not isinstance(nested, Mapping):
        return dict(data)
    keys = list(nested) if keys is None else list(keys)
    result = {key: value for key, value in data.items() if key != root}
    result.update((key, nested[key]) for key in keys if key in nested)
    leftover = {key: value for key, value in nested.items() if key not in keys}
    if leftover:
        result[root] = leftover
    return result


def _identity(value: Any) -> Any:
    return value
