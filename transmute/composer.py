# =============================================================================
# transmute/composer.py - Gather-and-Compose Helper
# =============================================================================
# Collects units over several steps (often conditionally) and folds them
# into one chain, falling back to a default unit when nothing was gathered.
#
# Usage:
#   with Composer(default=to_string) as fns:
#       fns << registry["map_array", registry["symbolize_keys"]]
#       if nested:
#           fns << registry["nest", "address", ["city", "zipcode"]]
#   fn = fns.to_fn()
#
#   # or in one call
#   fn = compose(symbolize, rename, default=identity)
# =============================================================================

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterable

from transmute.composite import CompositionChain


class Composer:
    """Accumulates units; None entries are skipped."""

    def __init__(self, default: Callable[..., Any] | None = None):
        self.fns: list[Callable[..., Any]] = []
        self.default = default

    def __lshift__(self, other: Callable[..., Any] | Iterable[Callable[..., Any]] | None) -> Composer:
        if other is None:
            return self
        if callable(other):
            self.fns.append(other)
        else:
            self.fns.extend(fn for fn in other if fn is not None)
        return self

    add = __lshift__

    def to_fn(self) -> Callable[..., Any] | None:
        """Fold the gathered units into a chain, or return the default."""
        if not self.fns:
            return self.default
        if len(self.fns) == 1:
            return self.fns[0]
        return reduce(lambda acc, fn: CompositionChain(acc, fn), self.fns[1:], CompositionChain(self.fns[0]))

    def __enter__(self) -> Composer:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None


def compose(*fns: Callable[..., Any] | None, default: Callable[..., Any] | None = None) -> Callable[..., Any] | None:
    """Compose the non-None units in order, or return `default` if there are none."""
    composer = Composer(default)
    composer.add([fn for fn in fns if fn is not None])
    return composer.to_fn()
