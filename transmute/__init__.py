# =============================================================================
# transmute - Composable Data Transformation Pipelines
# =============================================================================
# Named functions, composition chains, registries, and a small instruction
# language compiled into pipelines.
#
# Architecture:
#   Registry (name -> function) + Definition (steps as data)
#       -> Compiler -> CompositionChain -> Pipe instance
#
# Usage:
#   from transmute import Definition, Pipe, t
#   from transmute.transformations import registry
#
#   class Users(Pipe, registry=registry):
#       steps = Definition().scope(
#           "map_array",
#           body=lambda each: each.call("symbolize_keys").scope(
#               "map_value", "age", body=lambda age: age.call("to_integer")
#           ),
#       )
#
#   Users()([{"age": "12"}])   # -> [{"age": 12}]
# =============================================================================

import logging

from transmute.compiler import Compiler, MethodResolver, compile_definition
from transmute.composer import Composer, compose
from transmute.composite import CompositionChain, GuardedFunction
from transmute.config import get_settings, settings
from transmute.dsl import Call, Definition, Guard, Scope, define, t
from transmute.errors import (
    DefinitionError,
    InvalidFunctionNameError,
    TransmuteError,
    UnboundPipeError,
    UnregisteredFunctionError,
)
from transmute.function import NamedFunction
from transmute.pipe import Pipe, PipeConfig, transformation
from transmute.registry import Registry

__version__ = "1.0.0"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Apply a log level to the 'transmute' logger.

    Args:
        level: Level name; defaults to settings.LOG_LEVEL

    Returns:
        The configured logger
    """
    logger = logging.getLogger("transmute")
    logger.setLevel(level or settings.LOG_LEVEL)
    return logger


__all__ = [
    # Composition
    "NamedFunction",
    "CompositionChain",
    "GuardedFunction",
    "Composer",
    "compose",
    # Registry
    "Registry",
    # DSL
    "Definition",
    "Call",
    "Scope",
    "Guard",
    "define",
    "t",
    "Compiler",
    "MethodResolver",
    "compile_definition",
    # Pipes
    "Pipe",
    "PipeConfig",
    "transformation",
    # Errors
    "TransmuteError",
    "UnregisteredFunctionError",
    "InvalidFunctionNameError",
    "DefinitionError",
    "UnboundPipeError",
    # Settings
    "settings",
    "get_settings",
    "configure_logging",
]
