# =============================================================================
# transmute/transformations - Bundled Transformation Functions
# =============================================================================
# Each module owns a Registry of related functions:
#   - array: list operations (map_array, wrap, group, ...)
#   - dicts: dict operations (symbolize_keys, rename_keys, nest, ...)
#   - coercions: scalar conversions (to_integer, to_boolean, ...)
#   - conditional: predicates and guards (is_a, is, guard, not)
#   - objects: object construction (constructor_inject, ...)
#   - frames: pandas DataFrame <-> records
#
# `registry` imports all of them and is the default for Pipe subclasses
# that want the whole library.
# =============================================================================

from transmute.registry import Registry
from transmute.transformations import array
from transmute.transformations import coercions
from transmute.transformations import conditional
from transmute.transformations import dicts
from transmute.transformations import frames
from transmute.transformations import objects


registry = Registry("transmute").import_from(
    array.registry,
    dicts.registry,
    coercions.registry,
    conditional.registry,
    objects.registry,
    frames.registry,
)

__all__ = [
    "registry",
    "array",
    "coercions",
    "conditional",
    "frames",
    "dicts",
    "objects",
]
