"""Disjoint type: First[L] | Second[R], two sides of equal standing."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeIs

import msgspec

if TYPE_CHECKING:
    from fallible.optional import EmptyType, Present

__all__ = ['Disjoint', 'First', 'Second']


class First[L](msgspec.Struct, frozen=True, gc=False):
    """First side of a Disjoint.

    Neither side is an error. The single-sided combinators (transform,
    chain, get_or_default) act on Second by convention, so First passes
    through them untouched.

    Examples:
        >>> First(5).transform(lambda r: r + 1)
        First(value=5)
        >>> First(5).bi_transform(str.upper, lambda n: n * 2)
        First(value=10)
    """

    value: L

    def is_first(self) -> TypeIs[First[L]]:
        """Return True since this is First."""
        return True

    def is_second(self) -> TypeIs[Second[object]]:
        """Return False since this is First."""
        return False

    def transform[R, A](self, f: Callable[[R], A]) -> First[L]:  # noqa: ARG002
        """Return self unchanged without calling f."""
        return self

    def chain[R, A](self, f: Callable[[R], First[L] | Second[A]]) -> First[L]:  # noqa: ARG002
        """Return self unchanged without calling f."""
        return self

    def get_or_default[R](self, default: R) -> R:
        """Return the default; the First payload is discarded."""
        return default

    def bi_transform[R, A, B](self, f: Callable[[R], A], g: Callable[[L], B]) -> First[B]:  # noqa: ARG002
        """Apply g to the First payload.

        Args:
            f: Function for a Second payload, not called.
            g: Function for the First payload.

        Returns:
            First containing g(value).
        """
        return First(g(self.value))

    def bi_chain[R, A, B](
        self,
        f: Callable[[R], First[B] | Second[A]],  # noqa: ARG002
        g: Callable[[L], First[B] | Second[A]],
    ) -> First[B] | Second[A]:
        """Return g(value) directly."""
        return g(self.value)

    def fold[R, U](self, on_second: Callable[[R], U], on_first: Callable[[L], U]) -> U:  # noqa: ARG002
        """Collapse to a plain value with on_first."""
        return on_first(self.value)

    def swap(self) -> Second[L]:
        """Move the payload to the other side."""
        return Second(self.value)

    def first(self) -> Present[L]:
        """Project the First payload into an Optional."""
        from fallible.optional import Present

        return Present(self.value)

    def second(self) -> EmptyType:
        """Return Empty since there is no Second payload."""
        from fallible.optional import Empty

        return Empty


class Second[R](msgspec.Struct, frozen=True, gc=False):
    """Second side of a Disjoint; the side single-sided combinators act on.

    Examples:
        >>> Second(3).transform(lambda r: r + 1)
        Second(value=4)
        >>> Second(3).get_or_default(0)
        3
    """

    value: R

    def is_first(self) -> TypeIs[First[object]]:
        """Return False since this is Second."""
        return False

    def is_second(self) -> TypeIs[Second[R]]:
        """Return True since this is Second."""
        return True

    def transform[A](self, f: Callable[[R], A]) -> Second[A]:
        """Apply f to the Second payload.

        Args:
            f: Function to apply to the payload.

        Returns:
            Second containing f(value).
        """
        return Second(f(self.value))

    def chain[L, A](self, f: Callable[[R], First[L] | Second[A]]) -> First[L] | Second[A]:
        """Return f(value) directly.

        Args:
            f: Function that takes R and returns Disjoint[L, A].

        Returns:
            The Disjoint returned by f.
        """
        return f(self.value)

    def get_or_default(self, default: R) -> R:  # noqa: ARG002
        """Return the Second payload, ignoring the default."""
        return self.value

    def bi_transform[L, A, B](self, f: Callable[[R], A], g: Callable[[L], B]) -> Second[A]:  # noqa: ARG002
        """Apply f to the Second payload.

        Args:
            f: Function for the Second payload.
            g: Function for a First payload, not called.

        Returns:
            Second containing f(value).
        """
        return Second(f(self.value))

    def bi_chain[L, A, B](
        self,
        f: Callable[[R], First[B] | Second[A]],
        g: Callable[[L], First[B] | Second[A]],  # noqa: ARG002
    ) -> First[B] | Second[A]:
        """Return f(value) directly."""
        return f(self.value)

    def fold[L, U](self, on_second: Callable[[R], U], on_first: Callable[[L], U]) -> U:  # noqa: ARG002
        """Collapse to a plain value with on_second."""
        return on_second(self.value)

    def swap(self) -> First[R]:
        """Move the payload to the other side."""
        return First(self.value)

    def first(self) -> EmptyType:
        """Return Empty since there is no First payload."""
        from fallible.optional import Empty

        return Empty

    def second(self) -> Present[R]:
        """Project the Second payload into an Optional."""
        from fallible.optional import Present

        return Present(self.value)


type Disjoint[L, R] = First[L] | Second[R]
