# =============================================================================
# transmute/transformations/conditional.py - Conditional Transformations
# =============================================================================
# Predicates for guards, plus function-style conditionals usable anywhere
# a plain call is.
# =============================================================================

from __future__ import annotations

from typing import Any, Callable

from transmute.registry import Registry


registry = Registry("conditional")


@registry.register
def is_a(value: Any, kind: type | tuple[type, ...]) -> bool:
    """Predicate: isinstance(value, kind)."""
    return isinstance(value, kind)


@registry.register
def is_none(value: Any) -> bool:
    return value is None


@registry.register("not")
def not_(value: Any, fn: Callable[[Any], Any]) -> bool:
    """Negate a predicate."""
    return not fn(value)


@registry.register
def guard(value: Any, predicate: Callable[[Any], Any], fn: Callable[[Any], Any]) -> Any:
    """Apply `fn` if `predicate(value)` holds, else return the value unchanged."""
    return fn(value) if predicate(value) else value


@registry.register("is")
def is_(value: Any, kind: type | tuple[type, ...], fn: Callable[[Any], Any]) -> Any:
    """Apply `fn` only to values of type `kind`."""
    return fn(value) if isinstance(value, kind) else value
