# =============================================================================
# transmute/function.py - Named Function Wrapper
# =============================================================================
# Wraps a plain callable together with a display name and curried arguments.
# Registries hand these out on lookup; the compiler strings them into chains.
#
# Example:
#   append = NamedFunction(lambda v, suffix: v + suffix, name="append")
#   bang = append.with_args("!")
#   bang("hi")                      # -> "hi!"
#   (bang >> str.upper)("hi")       # -> "HI!"
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from transmute.composite import CompositionChain


@dataclass(frozen=True, eq=False)
class NamedFunction:
    """
    A callable with a display name and curried arguments.

    Calling it passes the input value first, then the curried positional
    arguments, then any extra positional arguments. Extra keyword arguments
    are laid over the curried ones, so the caller wins on a collision.
    """
    fn: Callable[..., Any]
    name: str = ""
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not callable(self.fn):
            raise TypeError(f"NamedFunction requires a callable, got {self.fn!r}")
        if not self.name:
            object.__setattr__(self, "name", getattr(self.fn, "__name__", repr(self.fn)))
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))

    def __call__(self, *values: Any, **kwargs: Any) -> Any:
        return self.fn(*values, *self.args, **{**self.kwargs, **kwargs})

    invoke = __call__

    # -------------------------------------------------------------------------
    # Currying
    # -------------------------------------------------------------------------

    def with_args(self, *args: Any, **kwargs: Any) -> NamedFunction:
        """
        Return a copy of this function with the given curried arguments.

        The new arguments replace any previously curried ones; they are
        never merged.
        """
        return NamedFunction(self.fn, name=self.name, args=args, kwargs=kwargs)

    curry = with_args

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def compose(self, other: Callable[..., Any]) -> CompositionChain:
        """Chain this function with another unit, self running first."""
        return CompositionChain(self, other)

    __rshift__ = compose

    def __rrshift__(self, other: Callable[..., Any]) -> CompositionChain:
        return CompositionChain(other, self)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def to_ast(self) -> tuple[str, list[Any]]:
        """Return a (name, args) structure; nested units are expanded."""
        args_ast = [arg.to_ast() if hasattr(arg, "to_ast") else arg for arg in self.args]
        if self.kwargs:
            args_ast.append(dict(self.kwargs))
        return self.name, args_ast

    def to_callable(self) -> Callable[..., Any]:
        """Return a plain function with the curried arguments baked in."""
        if not self.args and not self.kwargs:
            return self.fn

        def bound(*values: Any, **kwargs: Any) -> Any:
            return self(*values, **kwargs)

        bound.__name__ = self.name
        return bound

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.fn == other.fn
            and self.name == other.name
            and self.args == other.args
            and dict(self.kwargs) == dict(other.kwargs)
        )

    def __hash__(self) -> int:
        try:
            return hash((self.fn, self.name, self.args, tuple(sorted(self.kwargs.items()))))
        except TypeError:
            # list/dict arguments: equal functions still share fn and name
            return hash((self.fn, self.name))

    def __repr__(self) -> str:
        parts = [repr(arg) for arg in self.args]
        parts += [f"{key}={value!r}" for key, value in self.kwargs.items()]
        return f"<NamedFunction {self.name}({', '.join(parts)})>"
