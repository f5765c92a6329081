"""Misuse errors and the closed-variant check."""

from __future__ import annotations

from typing import Any

__all__ = [
    'UnwrapError',
    'VariantError',
    'check_variant',
    'is_variant',
]

_ALL_VARIANTS = 'Present, Empty, First, Second, Success or Failure'


class UnwrapError(RuntimeError):
    """A value was extracted from the wrong variant.

    Raised by unwrap(), unwrap_failure() and expect(). The combinators never
    raise this; hitting it means the caller bypassed them.
    """

    def __init__(self, message: str, variant: Any = None) -> None:
        self.variant = variant
        super().__init__(message)


class VariantError(TypeError):
    """A value outside the closed set of wrapper variants reached a dispatch point."""

    def __init__(self, value: Any, where: str, expected: str = _ALL_VARIANTS) -> None:
        self.value = value
        self.where = where
        super().__init__(f'{where}: expected {expected}, got {type(value).__name__}')


def is_variant(value: object) -> bool:
    """Return True if value is one of the six wrapper variants."""
    from fallible.disjoint import First, Second
    from fallible.optional import EmptyType, Present
    from fallible.outcome import Failure, Success

    return isinstance(value, Present | EmptyType | First | Second | Success | Failure)


def check_variant[T](value: T, where: str = 'fallible') -> T:
    """Return value unchanged, or raise VariantError if it is not a wrapper.

    Args:
        value: The value to check.
        where: Name of the dispatch point, used in the error message.

    Raises:
        VariantError: If value is not Present, Empty, First, Second, Success or Failure.
    """
    if not is_variant(value):
        raise VariantError(value, where)
    return value
