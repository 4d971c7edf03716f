# =============================================================================
# transmute/dsl.py - Instruction Stream
# =============================================================================
# A Definition records the steps of a pipeline as plain data, without
# looking anything up. Names are only resolved when a Compiler turns the
# Definition into a chain, so the same Definition can be compiled against
# different registries.
#
# Instruction shapes:
#   Call(name, args)          - resolve `name`, curry it with `args`
#   Scope(name, args, body)   - compile `body` first, pass it as the last arg
#   Guard(predicate, then)    - apply `then` only when `predicate` holds
#
# Usage:
#   steps = (
#       Definition()
#       .call("symbolize_keys")
#       .call("rename_keys", user_name="name")
#       .scope("map_value", "age", body=lambda age: age.call("to_integer"))
#       .guard(t("is_a", str), t("append", "!"))
#   )
#
#   with steps.block("map_array") as each:
#       each.call("stringify_keys")
# =============================================================================

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Union

from transmute.errors import DefinitionError


# =============================================================================
# Instructions
# =============================================================================

@dataclass(frozen=True)
class Call:
    """A named function with curried arguments, resolved at compile time."""
    name: str
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        _check_name(self.name)


@dataclass(frozen=True)
class Scope:
    """A named combinator receiving a compiled nested block as its last argument."""
    name: str
    body: Definition
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        _check_name(self.name)
        if not isinstance(self.body, Definition):
            raise DefinitionError(f"Scope body must be a Definition, got {self.body!r}", body=repr(self.body))
        # later edits to the builder the body came from must not leak in
        object.__setattr__(self, "body", self.body.freeze())


@dataclass(frozen=True)
class Guard:
    """Apply `then` to the running value only when `predicate` is truthy for it."""
    predicate: Union[Call, Callable[[Any], Any]]
    then: Union[Call, Scope, Definition]

    def __post_init__(self):
        if not isinstance(self.predicate, Call) and not callable(self.predicate):
            raise DefinitionError(
                f"Guard predicate must be a Call or a callable, got {self.predicate!r}",
                predicate=repr(self.predicate),
            )
        if not isinstance(self.then, (Call, Scope, Definition)):
            raise DefinitionError(
                f"Guard branch must be a Call, Scope or Definition, got {self.then!r}",
                then=repr(self.then),
            )
        if isinstance(self.then, Definition):
            object.__setattr__(self, "then", self.then.freeze())


Instruction = Union[Call, Scope, Guard]


def _check_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise DefinitionError(f"Function name must be a non-empty string, got {name!r}", name=repr(name))


def t(name: str, *args: Any, **kwargs: Any) -> Call:
    """
    Reference a function by name for use as an argument.

    The reference is resolved when the enclosing Definition is compiled,
    against the same registry as the surrounding steps.
    """
    return Call(name, args, kwargs)


# =============================================================================
# Definition builder
# =============================================================================

class Definition:
    """
    Ordered, not-yet-resolved sequence of instructions.

    Builder methods append one instruction and return self so calls can be
    chained.

    A frozen Definition (see freeze(); pipe classes and scopes only keep
    frozen ones) never changes. Its builder methods return an extended copy
    instead, so `Parent.steps.call("double")` leaves Parent alone.
    """

    t = staticmethod(t)

    def __init__(self, instructions: tuple[Instruction, ...] | list[Instruction] = ()):
        self._instructions: list[Instruction] = []
        self._frozen = False
        for instruction in instructions:
            self.append(instruction)

    def append(self, instruction: Instruction) -> Definition:
        if not isinstance(instruction, (Call, Scope, Guard)):
            raise DefinitionError(f"Not an instruction: {instruction!r}", instruction=repr(instruction))
        if self._frozen:
            return Definition([*self._instructions, instruction])
        self._instructions.append(instruction)
        return self

    def freeze(self) -> Definition:
        """Return a frozen copy of this Definition (or itself if already frozen)."""
        if self._frozen:
            return self
        frozen = Definition(self._instructions)
        frozen._frozen = True
        return frozen

    @property
    def frozen(self) -> bool:
        return self._frozen

    def call(self, name: str, *args: Any, **kwargs: Any) -> Definition:
        """Append a plain call."""
        return self.append(Call(name, args, kwargs))

    def scope(
        self,
        name: str,
        *args: Any,
        body: Definition | Callable[[Definition], Any],
        **kwargs: Any,
    ) -> Definition:
        """
        Append a nested scope.

        Args:
            name: Combinator receiving the compiled body as its last argument
            args: Arguments placed before the body
            body: A Definition, or a function that fills in the Definition
                  it is given
        """
        return self.append(Scope(name, _build(body), args, kwargs))

    @contextmanager
    def block(self, name: str, *args: Any, **kwargs: Any) -> Iterator[Definition]:
        """Context-manager form of scope(); the nested steps are appended on exit."""
        if self._frozen:
            raise DefinitionError(
                "Cannot open a block on a frozen Definition; use scope() or Definition(steps) instead",
            )
        body = Definition()
        yield body
        self.append(Scope(name, body, args, kwargs))

    def guard(
        self,
        predicate: Call | str | Callable[[Any], Any],
        then: Call | Scope | Definition | str,
    ) -> Definition:
        """Append a conditional guard. Strings are treated as argument-less calls."""
        if isinstance(predicate, str):
            predicate = Call(predicate)
        if isinstance(then, str):
            then = Call(then)
        return self.append(Guard(predicate, then))

    def extend(self, other: Definition) -> Definition:
        """Append every instruction of another Definition."""
        result = self
        for instruction in other:
            result = result.append(instruction)
        return result

    @property
    def instructions(self) -> tuple[Instruction, ...]:
        return tuple(self._instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(tuple(self._instructions))

    def __len__(self) -> int:
        return len(self._instructions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Definition):
            return NotImplemented
        return self._instructions == other._instructions

    __hash__ = None

    def __repr__(self) -> str:
        return f"<Definition {self._instructions!r}>"


def define(body: Definition | Callable[[Definition], Any]) -> Definition:
    """
    Build a Definition from a builder function.

    The function receives an empty Definition; it may fill it in place
    or return another Definition.
    """
    return _build(body)


def _build(body: Definition | Callable[[Definition], Any]) -> Definition:
    if isinstance(body, Definition):
        return body
    if not callable(body):
        raise DefinitionError(f"Scope body must be a Definition or a function, got {body!r}", body=repr(body))
    definition = Definition()
    result = body(definition)
    return result if isinstance(result, Definition) else definition
