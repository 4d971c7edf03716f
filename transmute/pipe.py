# =============================================================================
# transmute/pipe.py - Transformer Types
# =============================================================================
# A Pipe subclass binds a registry and a Definition together. Instances are
# callables that feed their input through the compiled chain.
#
# Usage:
#   class Users(Pipe, registry=transformations.registry):
#       steps = Definition().scope(
#           "map_array",
#           body=lambda each: each.call("symbolize_keys").call("rename_keys", user_name="name"),
#       )
#
#   Users()([{"user_name": "Jane"}])     # -> [{"name": "Jane"}]
#
#   Admins = Users.define(lambda steps: steps.call("map_array", t("to_admin")))
#   Strict = Users.bind(other_registry)    # same class, no inherited steps
#
# Configuration is immutable and per-class: deriving a type creates a new
# PipeConfig on the subtype and never touches the parent.
# =============================================================================

from __future__ import annotations

import logging
import threading
import types
from dataclasses import dataclass, replace
from typing import Any, Callable, ClassVar

from transmute.compiler import Compiler, MethodResolver
from transmute.composite import CompositionChain
from transmute.config import settings
from transmute.dsl import Definition, define as build_definition
from transmute.errors import UnboundPipeError
from transmute.function import NamedFunction
from transmute.registry import Registry


logger = logging.getLogger(__name__)

_TRANSFORMATION_ATTR = "__transmute_name__"


@dataclass(frozen=True)
class PipeConfig:
    """Registry and Definition bound to one pipe class."""
    registry: Registry | None = None
    definition: Definition | None = None


def transformation(method: Callable[..., Any] | str | None = None):
    """
    Expose a pipe method to its Definition under a name.

    Usage:
        class Shout(Pipe, registry=registry):
            steps = Definition().call("map_array", t("capitalize"))

            @transformation
            def capitalize(self, value):
                return value.upper()

    Exposed methods take priority over registry functions of the same name.
    """
    def decorator(func: Callable[..., Any], name: str | None = None) -> Callable[..., Any]:
        setattr(func, _TRANSFORMATION_ATTR, name or func.__name__)
        return func

    if callable(method):
        return decorator(method)
    return lambda func: decorator(func, method)


class Pipe:
    """
    Base class for transformer types.

    Subclass keywords:
        registry: Bind the subclass to this registry; inherited steps are
                  dropped unless it is the registry already bound

    Class attributes:
        steps: A Definition (or a builder function) declaring the chain for
               this class only. After class creation it holds the frozen
               Definition actually used, so `Parent.steps.call(...)` builds
               a new Definition without touching Parent.
    """

    config: ClassVar[PipeConfig] = PipeConfig()
    steps: ClassVar[Definition | None] = None
    _transformations: ClassVar[dict[str, str]] = {}
    _cache: ClassVar[tuple[int, CompositionChain] | None] = None
    _cache_lock: ClassVar[threading.Lock] = threading.Lock()

    transproc: CompositionChain | None

    def __init_subclass__(cls, registry: Registry | None = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        config = cls.config

        if registry is not None and registry is not config.registry:
            config = PipeConfig(registry=registry)
        elif config.registry is None:
            config = replace(config, registry=Registry(cls.__qualname__))

        steps = cls.__dict__.get("steps")
        if steps is not None:
            config = replace(config, definition=build_definition(steps).freeze())

        cls.config = config
        cls.steps = config.definition
        cls._cache = None
        cls._cache_lock = threading.Lock()
        cls._transformations = {
            getattr(value, _TRANSFORMATION_ATTR): attr
            for klass in reversed(cls.__mro__)
            for attr, value in vars(klass).items()
            if hasattr(value, _TRANSFORMATION_ATTR)
        }

    def __class_getitem__(cls, registry: Registry) -> type[Pipe]:
        return cls.bind(registry)

    # -------------------------------------------------------------------------
    # Type factory
    # -------------------------------------------------------------------------

    @classmethod
    def bind(cls, registry: Registry) -> type[Pipe]:
        """
        Return a subclass bound to `registry`.

        Steps are inherited only when `registry` is the one this class is
        already bound to; a different registry starts without steps.
        """
        return cls._derive({}, registry=registry)

    @classmethod
    def define(cls, steps: Definition | Callable[[Definition], Any]) -> type[Pipe]:
        """Return a subclass of this class whose chain is built from `steps`."""
        return cls._derive({"steps": build_definition(steps)})

    @classmethod
    def _derive(cls, namespace: dict[str, Any], **kwds: Any) -> type[Pipe]:
        def exec_body(ns: dict[str, Any]) -> None:
            ns.update(namespace, __module__=cls.__module__, __qualname__=cls.__qualname__)

        return types.new_class(cls.__name__, (cls,), kwds, exec_body)

    @classmethod
    def import_(cls, *sources: Registry) -> type[Pipe]:
        """Import functions into this class's registry."""
        cls._bound_registry("import functions").import_from(*sources)
        return cls

    @classmethod
    def t(cls, name: str, *args: Any, **kwargs: Any) -> NamedFunction:
        """Resolve a function right now against this class's registry."""
        return cls._bound_registry(f"resolve {name!r}").resolve(name, *args, **kwargs)

    @classmethod
    def _bound_registry(cls, operation: str) -> Registry:
        if cls.config.registry is None:
            raise UnboundPipeError(cls.__qualname__, operation)
        return cls.config.registry

    @classmethod
    def compile(cls) -> CompositionChain | None:
        """
        Return the chain compiled from this class's Definition.

        The result is cached until the registry changes. Returns None when
        the class declares no steps.

        Raises:
            InvalidFunctionNameError: If the Definition names an unknown function
        """
        config = cls.config
        if config.definition is None:
            return None
        if not settings.CACHE_COMPILED:
            return Compiler(config.registry).compile(config.definition)

        version = config.registry.version
        with cls._cache_lock:
            if cls._cache is None or cls._cache[0] != version:
                logger.debug(f"Compiling {cls.__qualname__} against {config.registry!r}")
                cls._cache = (version, Compiler(config.registry).compile(config.definition))
            return cls._cache[1]

    # -------------------------------------------------------------------------
    # Instances
    # -------------------------------------------------------------------------

    def __new__(cls, *args: Any, **kwargs: Any):
        instance = super().__new__(cls)
        instance.transproc = cls._compile_for(instance)
        return instance

    @classmethod
    def _compile_for(cls, instance: Pipe) -> CompositionChain | None:
        if not cls._transformations or cls.config.definition is None:
            return cls.compile()
        methods = {name: getattr(instance, attr) for name, attr in cls._transformations.items()}
        resolver = MethodResolver(methods, cls.config.registry)
        return Compiler(resolver).compile(cls.config.definition)

    def __call__(self, value: Any) -> Any:
        if self.transproc is None:
            return value
        return self.transproc(value)

    call = __call__

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} {self.transproc!r}>"
