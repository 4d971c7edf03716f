# =============================================================================
# transmute/composite.py - Composition Chains
# =============================================================================
# A CompositionChain is an ordered, immutable sequence of units applied
# left to right, each unit's output feeding the next unit's input.
# Chains are always flat: composing two chains concatenates their units.
#
# GuardedFunction is the unit produced by a conditional guard: it applies
# its branch only when the predicate holds, otherwise passes the value on.
# =============================================================================

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterator


class CompositionChain:
    """
    Ordered sequence of units behaving as a single callable.

    An empty chain is the identity function.

    Example:
        chain = CompositionChain(str.strip, str.upper)
        chain("  abc ")   # -> "ABC"
    """

    __slots__ = ("_fns",)

    def __init__(self, *fns: Callable[..., Any]):
        flat: list[Callable[..., Any]] = []
        for fn in fns:
            if isinstance(fn, CompositionChain):
                flat.extend(fn.fns)
            elif callable(fn):
                flat.append(fn)
            else:
                raise TypeError(f"Cannot compose non-callable {fn!r}")
        self._fns = tuple(flat)

    @property
    def fns(self) -> tuple[Callable[..., Any], ...]:
        return self._fns

    def __call__(self, value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), self._fns, value)

    invoke = __call__

    def compose(self, other: Callable[..., Any]) -> CompositionChain:
        """Return a new chain running this chain, then `other`."""
        return CompositionChain(self, other)

    __rshift__ = compose

    def __rrshift__(self, other: Callable[..., Any]) -> CompositionChain:
        return CompositionChain(other, self)

    def to_ast(self) -> list[Any]:
        return [fn.to_ast() if hasattr(fn, "to_ast") else fn for fn in self._fns]

    def __iter__(self) -> Iterator[Callable[..., Any]]:
        return iter(self._fns)

    def __len__(self) -> int:
        return len(self._fns)

    def __bool__(self) -> bool:
        # an empty chain is still a usable (identity) function
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositionChain):
            return NotImplemented
        return self._fns == other._fns

    def __hash__(self) -> int:
        return hash(self._fns)

    def __repr__(self) -> str:
        return f"<CompositionChain {' >> '.join(_unit_name(fn) for fn in self._fns) or 'identity'}>"


class GuardedFunction:
    """Apply `then` only when `predicate(value)` is truthy."""

    __slots__ = ("predicate", "then")

    def __init__(self, predicate: Callable[[Any], Any], then: Callable[[Any], Any]):
        self.predicate = predicate
        self.then = then

    def __call__(self, value: Any) -> Any:
        if self.predicate(value):
            return self.then(value)
        return value

    invoke = __call__

    def compose(self, other: Callable[..., Any]) -> CompositionChain:
        return CompositionChain(self, other)

    __rshift__ = compose

    def __rrshift__(self, other: Callable[..., Any]) -> CompositionChain:
        return CompositionChain(other, self)

    def to_ast(self) -> tuple[str, list[Any]]:
        parts = [
            unit.to_ast() if hasattr(unit, "to_ast") else unit
            for unit in (self.predicate, self.then)
        ]
        return "guard", parts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GuardedFunction):
            return NotImplemented
        return (self.predicate, self.then) == (other.predicate, other.then)

    def __hash__(self) -> int:
        return hash((self.predicate, self.then))

    def __repr__(self) -> str:
        return f"<GuardedFunction {_unit_name(self.predicate)} ? {_unit_name(self.then)}>"


def _unit_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "name", None) or getattr(fn, "__name__", repr(fn))
