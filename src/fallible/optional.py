"""Optional type: Present[T] | Empty for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from fallible.errors import UnwrapError
from fallible.propagate import Propagate

if TYPE_CHECKING:
    from fallible.disjoint import First, Second
    from fallible.outcome import Failure, Success

__all__ = ['Empty', 'EmptyType', 'Optional', 'Present', 'from_nullable']


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Optional holding a value of type T.

    Present(None) is a real value and is never equal to Empty.

    Examples:
        >>> Present(42).get_or_default(0)
        42
        >>> Present(42).transform(lambda x: x * 2)
        Present(value=84)
        >>> Present(10).chain(lambda v: Empty if v == 0 else Present(100 // v))
        Present(value=10)
    """

    value: T

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return False since this is Present."""
        return False

    def get_or_default(self, default: T) -> T:  # noqa: ARG002
        """Return the held value, ignoring the default."""
        return self.value

    def get_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the held value without calling the fallback."""
        return self.value

    def unwrap(self) -> T:
        """Return the held value."""
        return self.value

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the held value, ignoring the message."""
        return self.value

    def transform[U](self, f: Callable[[T], U]) -> Present[U]:
        """Apply f to the held value.

        Args:
            f: Function to apply to the value.

        Returns:
            Present containing f(value).
        """
        return Present(f(self.value))

    def chain[U](self, f: Callable[[T], Present[U] | EmptyType]) -> Present[U] | EmptyType:
        """Apply a function returning an Optional to the held value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Optional[U].

        Returns:
            The Optional returned by f, unchanged.
        """
        return f(self.value)

    def or_else(self, f: Callable[[], Present[T] | EmptyType]) -> Present[T]:  # noqa: ARG002
        """Return self unchanged since this is Present."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Present[T] | EmptyType:
        """Keep the value only if predicate(value) is true.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            self if the predicate holds, else Empty.
        """
        if predicate(self.value):
            return self
        return Empty

    def zip[U](self, other: Present[U] | EmptyType) -> Present[tuple[T, U]] | EmptyType:
        """Pair this value with another Optional's value.

        Returns Present((self.value, other.value)) when other is Present,
        otherwise Empty.
        """
        if isinstance(other, Present):
            return Present((self.value, other.value))
        return Empty

    def flatten[U](self: Present[Present[U] | EmptyType]) -> Present[U] | EmptyType:
        """Convert Optional[Optional[U]] into Optional[U]."""
        return self.value  # type: ignore[return-value]

    def to_outcome[E](self, error: E) -> Success[T]:  # noqa: ARG002
        """Convert to Outcome, returning Success(value)."""
        from fallible.outcome import Success

        return Success(self.value)

    def to_disjoint[L](self, first: L) -> Second[T]:  # noqa: ARG002
        """Convert to Disjoint, returning Second(value)."""
        from fallible.disjoint import Second

        return Second(self.value)

    def bail(self) -> T:
        """Return the held value.

        Inside a function decorated with @early_return this is the
        non-propagating half of the early-return shorthand.
        """
        return self.value


class EmptyType(msgspec.Struct, frozen=True, gc=False):
    """Empty variant of Optional: no value, and no recorded reason.

    Use the `Empty` singleton rather than instantiating directly. Every
    EmptyType instance compares equal to Empty.

    Examples:
        >>> Empty.is_empty()
        True
        >>> Empty.get_or_default(0)
        0
    """

    def is_present(self) -> TypeIs[Present[object]]:
        """Return False since this is Empty."""
        return False

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return True since this is Empty."""
        return True

    def get_or_default[T](self, default: T) -> T:
        """Return the default since there is no value."""
        return default

    def get_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default since there is no value."""
        return f()

    def unwrap(self) -> NoReturn:
        """Raise since there is no value to extract.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Called unwrap on Empty', self)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a caller-supplied message.

        Raises:
            UnwrapError: Always, with msg.
        """
        raise UnwrapError(msg, self)

    def transform[T, U](self, f: Callable[[T], U]) -> EmptyType:  # noqa: ARG002
        """Return Empty without calling f."""
        return self

    def chain[T, U](self, f: Callable[[T], Present[U] | EmptyType]) -> EmptyType:  # noqa: ARG002
        """Return Empty without calling f."""
        return self

    def or_else[T](self, f: Callable[[], Present[T] | EmptyType]) -> Present[T] | EmptyType:
        """Return the Optional produced by the recovery function f."""
        return f()

    def filter[T](self, predicate: Callable[[T], bool]) -> EmptyType:  # noqa: ARG002
        """Return Empty without calling the predicate."""
        return self

    def zip[U](self, other: Present[U] | EmptyType) -> EmptyType:  # noqa: ARG002
        """Return Empty since there is nothing to pair."""
        return self

    def flatten(self) -> EmptyType:
        """Return Empty."""
        return self

    def to_outcome[E](self, error: E) -> Failure[E]:
        """Convert to Outcome, returning Failure(error)."""
        from fallible.outcome import Failure

        return Failure(error)

    def to_disjoint[L](self, first: L) -> First[L]:
        """Convert to Disjoint, returning First(first)."""
        from fallible.disjoint import First

        return First(first)

    def bail(self) -> NoReturn:
        """Raise Propagate carrying Empty.

        Inside a function decorated with @early_return, the decorator
        catches it and returns Empty.

        Raises:
            Propagate: Always.
        """
        raise Propagate(self)


Empty: EmptyType = EmptyType()
"""Singleton instance representing absence of a value."""


type Optional[T] = Present[T] | EmptyType


def from_nullable[T](value: T | None) -> Present[T] | EmptyType:
    """Lift a possibly-None value into an Optional.

    Examples:
        >>> from_nullable({'a': 1}.get('a'))
        Present(value=1)
        >>> from_nullable({'a': 1}.get('b'))
        EmptyType()
    """
    if value is None:
        return Empty
    return Present(value)
