# =============================================================================
# transmute/transformations/objects.py - Object Construction
# =============================================================================
# Build objects from dicts and dicts from objects.
# =============================================================================

from __future__ import annotations

from typing import Any, Iterable, Mapping

from transmute.registry import Registry


registry = Registry("objects")


@registry.register
def constructor_inject(data: Mapping, klass: type) -> Any:
    """Call klass(**data)."""
    return klass(**data)


@registry.register
def set_attributes(data: Mapping, klass: type) -> Any:
    """Instantiate klass without arguments, then set each key as an attribute."""
    instance = klass()
    for key, value in data.items():
        setattr(instance, key, value)
    return instance


@registry.register
def to_dict(obj: Any, keys: Iterable[str] | None = None) -> dict:
    """Read attributes off an object; all public ones when `keys` is None."""
    if keys is None:
        keys = [key for key in vars(obj) if not key.startswith("_")]
    return {key: getattr(obj, key) for key in keys}
