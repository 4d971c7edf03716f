# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Shared fixtures: fresh registries and a few plain functions to register.
# =============================================================================

import pytest

from transmute import Registry
from transmute.config import settings
from transmute.transformations import registry as library


# =============================================================================
# Functions used across tests
# =============================================================================

def append(value, suffix):
    return value + suffix


def increment(value, step=1):
    return value + step


def double(value):
    return value * 2


def arbitrary(value, fn):
    return fn(value)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def registry():
    """Empty registry."""
    return Registry("test")


@pytest.fixture
def math_registry():
    """Registry with a handful of arithmetic and string helpers."""
    return Registry("math", {
        "append": append,
        "increment": increment,
        "double": double,
        "arbitrary": arbitrary,
    })


@pytest.fixture
def full_registry():
    """Private registry holding the whole bundled library plus the helpers."""
    return Registry("full").import_from(library, {
        "append": append,
        "increment": increment,
        "double": double,
        "arbitrary": arbitrary,
    })


@pytest.fixture
def warn_on_override(monkeypatch):
    """Enable override warnings for the duration of a test."""
    monkeypatch.setattr(settings, "WARN_ON_OVERRIDE", True)


@pytest.fixture
def no_compile_cache(monkeypatch):
    """Disable the compiled-chain cache for the duration of a test."""
    monkeypatch.setattr(settings, "CACHE_COMPILED", False)
