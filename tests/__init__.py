# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for transmute:
# - test_function.py: NamedFunction currying, equality and AST
# - test_composite.py: chains, guards and the composer
# - test_registry.py: registration, lookup, import and thread safety
# - test_dsl.py: the Definition builder
# - test_compiler.py: compiling Definitions into chains
# - test_pipe.py: Pipe types, inheritance and end-to-end pipelines
# - test_transformations.py: the bundled transformation library
# - test_config.py: settings and logging
#
# Run tests with: pytest
# =============================================================================
