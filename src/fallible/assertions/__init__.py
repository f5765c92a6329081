"""Assertion utilities: safe_assert and assert_outcome."""

from fallible.assertions.safe import assert_outcome, safe_assert

__all__ = [
    'assert_outcome',
    'safe_assert',
]
