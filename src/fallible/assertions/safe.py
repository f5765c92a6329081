"""safe_assert and assert_outcome."""

from __future__ import annotations

from fallible.outcome import Failure, Success

__all__ = ['assert_outcome', 'safe_assert']


def safe_assert(condition: bool, message: str = '') -> None:  # noqa: FBT001
    """Assert that also runs under `python -O`.

    Args:
        condition: The condition to check.
        message: Error message if the check fails.

    Raises:
        AssertionError: If condition is False.
    """
    if not condition:
        raise AssertionError(message)


def assert_outcome[E](condition: bool, error: E) -> Success[None] | Failure[E]:  # noqa: FBT001
    """Validation as a value: Success(None) if condition holds, else Failure(error).

    Examples:
        >>> assert_outcome(1 < 2, 'order')
        Success(value=None)
        >>> assert_outcome(2 < 1, 'order')
        Failure(error='order')
    """
    if condition:
        return Success(None)
    return Failure(error)
