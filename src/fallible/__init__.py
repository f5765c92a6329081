"""fallible: Optional, Disjoint and Outcome value types for Python 3.13+.

Immutable wrappers with total, chainable combinators, so fallible steps
compose without exceptions interrupting control flow.

Flat imports (preferred):
    from fallible import Optional, Present, Empty
    from fallible import Disjoint, First, Second
    from fallible import Outcome, Success, Failure
    from fallible import safe, early_return, do, pipe

Submodule imports (for organization):
    from fallible.optional import Present, Empty, Optional
    from fallible.outcome import Success, Failure, collect
    from fallible.decorators import safe
"""

# Configuration and logging
from fallible._config import FallibleConfig, get_config, init
from fallible._logging import configure_logging, get_logger

# Assertions
from fallible.assertions import assert_outcome, safe_assert

# Composition
from fallible.compose import compose, identity, pipe

# Decorators
from fallible.decorators import do, early_return, safe, safe_async
from fallible.disjoint import Disjoint, First, Second
from fallible.errors import UnwrapError, VariantError, check_variant
from fallible.optional import Empty, EmptyType, Optional, Present, from_nullable
from fallible.outcome import Failure, Outcome, Success, collect
from fallible.propagate import Propagate

__all__ = [
    # Disjoint
    'Disjoint',
    # Optional
    'Empty',
    'EmptyType',
    # Outcome
    'Failure',
    'FallibleConfig',
    'First',
    'Optional',
    'Outcome',
    'Present',
    # Propagation
    'Propagate',
    'Second',
    'Success',
    # Errors
    'UnwrapError',
    'VariantError',
    'assert_outcome',
    'check_variant',
    'collect',
    'compose',
    'configure_logging',
    'do',
    'early_return',
    'from_nullable',
    'get_config',
    'get_logger',
    'identity',
    'init',
    'pipe',
    'safe',
    'safe_assert',
    'safe_async',
]
