# =============================================================================
# transmute/compiler.py - Definition Compiler
# =============================================================================
# Turns a Definition into a CompositionChain by resolving every named
# function against a resolver (a Registry, optionally layered with a pipe
# instance's own transformation methods).
#
# Each instruction appends exactly one unit to the chain:
#   Call   -> NamedFunction
#   Scope  -> NamedFunction whose last argument is the compiled body chain
#   Guard  -> GuardedFunction
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Protocol

from transmute.composite import CompositionChain, GuardedFunction
from transmute.dsl import Call, Definition, Guard, Instruction, Scope
from transmute.errors import InvalidFunctionNameError, UnregisteredFunctionError
from transmute.function import NamedFunction
from transmute.registry import Registry


logger = logging.getLogger(__name__)


class Resolver(Protocol):
    def resolve(self, name: str, *args: Any, **kwargs: Any) -> NamedFunction:
        ...


class MethodResolver:
    """Resolve names against bound methods first, then fall back to a registry."""

    def __init__(self, methods: Mapping[str, Callable[..., Any]], registry: Registry | None):
        self.methods = dict(methods)
        self.registry = registry

    def resolve(self, name: str, *args: Any, **kwargs: Any) -> NamedFunction:
        if name in self.methods:
            return NamedFunction(self.methods[name], name=name, args=args, kwargs=kwargs)
        if self.registry is None:
            raise UnregisteredFunctionError(name)
        return self.registry.resolve(name, *args, **kwargs)


class Compiler:
    """
    Compiles Definitions against a resolver.

    Usage:
        chain = Compiler(registry).compile(definition)
        chain(data)

    Raises:
        InvalidFunctionNameError: If any instruction names a function the
                                  resolver does not know
    """

    def __init__(self, resolver: Resolver):
        self.resolver = resolver

    def compile(self, definition: Definition) -> CompositionChain:
        chain = self._compile_block(definition, ())
        logger.debug(f"Compiled {len(chain)} steps: {chain!r}")
        return chain

    __call__ = compile

    def _compile_block(self, definition: Definition, scope: tuple[str, ...]) -> CompositionChain:
        return CompositionChain(*(self._visit(instruction, scope) for instruction in definition))

    def _visit(self, instruction: Instruction, scope: tuple[str, ...]) -> Callable[..., Any]:
        if isinstance(instruction, Call):
            args = [self._compile_arg(arg, scope) for arg in instruction.args]
            kwargs = {key: self._compile_arg(value, scope) for key, value in instruction.kwargs.items()}
            return self._resolve(instruction.name, args, kwargs, scope)

        if isinstance(instruction, Scope):
            # the body is compiled first and only ever appears as one argument
            body = self._compile_block(instruction.body, scope + (instruction.name,))
            args = [self._compile_arg(arg, scope) for arg in instruction.args]
            kwargs = {key: self._compile_arg(value, scope) for key, value in instruction.kwargs.items()}
            return self._resolve(instruction.name, [*args, body], kwargs, scope)

        if isinstance(instruction, Guard):
            predicate = instruction.predicate
            if isinstance(predicate, Call):
                predicate = self._visit(predicate, scope)
            return GuardedFunction(predicate, self._compile_arg(instruction.then, scope))

        raise TypeError(f"Unknown instruction {instruction!r}")

    def _compile_arg(self, value: Any, scope: tuple[str, ...]) -> Any:
        if isinstance(value, (Call, Scope, Guard)):
            return self._visit(value, scope)
        if isinstance(value, Definition):
            return self._compile_block(value, scope)
        return value

    def _resolve(
        self,
        name: str,
        args: list[Any],
        kwargs: dict[str, Any],
        scope: tuple[str, ...],
    ) -> NamedFunction:
        try:
            return self.resolver.resolve(name, *args, **kwargs)
        except UnregisteredFunctionError as e:
            raise InvalidFunctionNameError(name, scope) from e


def compile_definition(definition: Definition, registry: Resolver) -> CompositionChain:
    """Compile `definition` against `registry` in one call."""
    return Compiler(registry).compile(definition)
