# =============================================================================
# transmute/registry.py - Function Registry
# =============================================================================
# A named namespace of transformation functions.
# Provides registration, lookup with currying, and import (merge) from
# other registries.
#
# Reads go through an immutable snapshot that is swapped in one step, so a
# reader never sees a half-applied import. Writers are serialized by a lock.
#
# Usage:
#   registry = Registry("strings")
#
#   @registry.register
#   def append(value, suffix):
#       return value + suffix
#
#   registry.resolve("append", "!")("hi")    # -> "hi!"
#   registry["append", "!"]("hi")            # same thing
# =============================================================================

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Union

from transmute.config import settings
from transmute.errors import UnregisteredFunctionError
from transmute.function import NamedFunction


logger = logging.getLogger(__name__)

Source = Union["Registry", Mapping[str, Callable[..., Any]]]


class Registry:
    """
    Mutable mapping of name -> callable.

    Registering a name twice replaces the earlier binding (last write wins).
    There is no way to unregister.
    """

    def __init__(self, name: str = "registry", functions: Mapping[str, Callable[..., Any]] | None = None):
        self.name = name
        self._lock = threading.Lock()
        self._functions: Mapping[str, Callable[..., Any]] = MappingProxyType({})
        self._version = 0
        if functions:
            self.import_from(functions)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, name: str | Callable[..., Any] | None = None, fn: Callable[..., Any] | None = None):
        """
        Bind a function to a name.

        Usage:
            registry.register("append", append)

            @registry.register
            def append(value, suffix): ...

            @registry.register("append")
            def _append(value, suffix): ...

        Returns:
            The registered function (so it works as a decorator)
        """
        if callable(name) and fn is None:
            fn, name = name, name.__name__

        if fn is None:
            def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
                return self.register(name or func.__name__, func)
            return decorator

        if not isinstance(name, str) or not name:
            raise TypeError(f"Function name must be a non-empty string, got {name!r}")
        if not callable(fn):
            raise TypeError(f"Cannot register non-callable {fn!r} as {name!r}")

        with self._lock:
            self._write({name: fn})
        return fn

    def import_from(self, *sources: Source) -> Registry:
        """
        Copy every function of each source into this registry.

        Sources are applied in order, so a later source overrides an
        earlier one for the same name. The copy is a snapshot: later
        changes to a source are not seen here.

        Args:
            sources: Registries or plain name -> callable mappings

        Returns:
            self, for chaining
        """
        for source in sources:
            entries = dict(source.snapshot() if isinstance(source, Registry) else source)
            for name, fn in entries.items():
                if not callable(fn):
                    raise TypeError(f"Cannot import non-callable {fn!r} as {name!r}")
            with self._lock:
                self._write(entries)
            logger.info(f"Imported {len(entries)} functions into {self.name!r} from {_source_name(source)}")
        return self

    import_ = import_from

    def _write(self, entries: dict[str, Callable[..., Any]]) -> None:
        # caller holds the lock
        current = self._functions
        if settings.WARN_ON_OVERRIDE:
            for name, fn in entries.items():
                if name in current and current[name] is not fn:
                    logger.warning(f"Overriding function {name!r} in {self.name!r}")
        self._functions = MappingProxyType({**current, **entries})
        self._version += 1

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def resolve(self, name: str, *args: Any, **kwargs: Any) -> NamedFunction:
        """
        Look up a function and curry it with the given arguments.

        Raises:
            UnregisteredFunctionError: If the name is not bound
        """
        return NamedFunction(self.fetch(name), name=name, args=args, kwargs=kwargs)

    def fetch(self, name: str) -> Callable[..., Any]:
        """Return the raw callable bound to `name`."""
        try:
            return self._functions[name]
        except KeyError:
            raise UnregisteredFunctionError(name) from None

    def __getitem__(self, key: str | tuple[Any, ...]) -> NamedFunction:
        if isinstance(key, tuple):
            return self.resolve(*key)
        return self.resolve(key)

    def contains(self, name: str) -> bool:
        return name in self._functions

    __contains__ = contains

    def names(self) -> list[str]:
        return list(self._functions.keys())

    def snapshot(self) -> Mapping[str, Callable[..., Any]]:
        """Read-only view of the current bindings."""
        return self._functions

    @property
    def version(self) -> int:
        """Incremented on every registration or import."""
        return self._version

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"<Registry {self.name!r} ({len(self)} functions)>"


def _source_name(source: Source) -> str:
    return repr(source.name) if isinstance(source, Registry) else "mapping"
