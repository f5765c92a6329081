"""Outcome type: Success[T] | Failure[E] for fallible computations."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from fallible.errors import UnwrapError, VariantError
from fallible.propagate import Propagate

if TYPE_CHECKING:
    from fallible.disjoint import First, Second
    from fallible.optional import EmptyType, Present

__all__ = ['Failure', 'Outcome', 'Success', 'collect']


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Successful variant of Outcome holding a value of type T.

    Examples:
        >>> Success(21).transform(lambda x: x * 2)
        Success(value=42)
        >>> Success(21).chain(lambda x: Failure('too small') if x < 50 else Success(x))
        Failure(error='too small')
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    def get_or_default(self, default: T) -> T:  # noqa: ARG002
        """Return the success value, ignoring the default."""
        return self.value

    def get_or_else(self, f: Callable[[object], T]) -> T:  # noqa: ARG002
        """Return the success value without calling f."""
        return self.value

    def unwrap(self) -> T:
        """Return the success value."""
        return self.value

    def unwrap_failure(self) -> NoReturn:
        """Raise since there is no failure to extract.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'Called unwrap_failure on Success: {self.value!r}', self)

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the success value, ignoring the message."""
        return self.value

    def transform[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply f to the success value.

        Args:
            f: Function to apply to the value.

        Returns:
            Success containing f(value).
        """
        return Success(f(self.value))

    def transform_failure[F](self, f: Callable[[object], F]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def chain[U, E](self, f: Callable[[T], Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Run the next dependent fallible step.

        Args:
            f: Function that takes T and returns Outcome[U, E].

        Returns:
            The Outcome returned by f, unchanged.
        """
        return f(self.value)

    def recover[F](self, f: Callable[[object], Success[T] | Failure[F]]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since there is nothing to recover from."""
        return self

    def bi_transform[E, U, F](self, f: Callable[[T], U], g: Callable[[E], F]) -> Success[U]:  # noqa: ARG002
        """Apply f to the success value; g is for the failure side."""
        return Success(f(self.value))

    def bi_chain[E, U, F](
        self,
        f: Callable[[T], Success[U] | Failure[F]],
        g: Callable[[E], Success[U] | Failure[F]],  # noqa: ARG002
    ) -> Success[U] | Failure[F]:
        """Return f(value) directly."""
        return f(self.value)

    def success(self) -> Present[T]:
        """Project the success value into an Optional."""
        from fallible.optional import Present

        return Present(self.value)

    def failure(self) -> EmptyType:
        """Return Empty since there is no failure."""
        from fallible.optional import Empty

        return Empty

    def to_disjoint(self) -> Second[T]:
        """Convert to a side-neutral Disjoint, success on the Second side."""
        from fallible.disjoint import Second

        return Second(self.value)

    def bail(self) -> T:
        """Return the success value (the non-propagating half of bail)."""
        return self.value


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Outcome carrying an error descriptor of type E.

    The descriptor is whatever the caller chose: a message, a code, or an
    exception instance captured at a fallible boundary by @safe.

    Examples:
        >>> Failure('not found').is_failure()
        True
        >>> Failure('not found').get_or_default(0)
        0
    """

    error: E

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True since this is Failure."""
        return True

    def get_or_default[T](self, default: T) -> T:
        """Return the default since there is no success value."""
        return default

    def get_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback from the error.

        Args:
            f: Function that receives the error and returns a value.
        """
        return f(self.error)

    def unwrap(self) -> NoReturn:
        """Raise since there is no success value to extract.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'Called unwrap on Failure: {self.error!r}', self)

    def unwrap_failure(self) -> E:
        """Return the error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a caller-supplied message.

        Raises:
            UnwrapError: Always, with msg and the error repr.
        """
        raise UnwrapError(f'{msg}: {self.error!r}', self)

    def transform[T, U](self, f: Callable[[T], U]) -> Failure[E]:  # noqa: ARG002
        """Return self unchanged without calling f."""
        return self

    def transform_failure[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply f to the error.

        Args:
            f: Function to apply to the error.

        Returns:
            Failure containing f(error).
        """
        return Failure(f(self.error))

    def chain[T, U](self, f: Callable[[T], Success[U] | Failure[E]]) -> Failure[E]:  # noqa: ARG002
        """Return self unchanged; later steps never run."""
        return self

    def recover[T, F](self, f: Callable[[E], Success[T] | Failure[F]]) -> Success[T] | Failure[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Outcome.

        Returns:
            The Outcome returned by f.
        """
        return f(self.error)

    def bi_transform[T, U, F](self, f: Callable[[T], U], g: Callable[[E], F]) -> Failure[F]:  # noqa: ARG002
        """Apply g to the error; f is for the success side."""
        return Failure(g(self.error))

    def bi_chain[T, U, F](
        self,
        f: Callable[[T], Success[U] | Failure[F]],  # noqa: ARG002
        g: Callable[[E], Success[U] | Failure[F]],
    ) -> Success[U] | Failure[F]:
        """Return g(error) directly."""
        return g(self.error)

    def success(self) -> EmptyType:
        """Return Empty since there is no success value."""
        from fallible.optional import Empty

        return Empty

    def failure(self) -> Present[E]:
        """Project the error into an Optional."""
        from fallible.optional import Present

        return Present(self.error)

    def to_disjoint(self) -> First[E]:
        """Convert to a side-neutral Disjoint, failure on the First side."""
        from fallible.disjoint import First

        return First(self.error)

    def bail(self) -> NoReturn:
        """Raise Propagate carrying this Failure.

        Inside a function decorated with @early_return, the decorator
        catches it and returns this Failure unchanged.

        Raises:
            Propagate: Always.
        """
        raise Propagate(self)


type Outcome[T, E = Exception] = Success[T] | Failure[E]


def collect[T, E](outcomes: Iterable[Success[T] | Failure[E]]) -> Success[list[T]] | Failure[E]:
    """Collect an iterable of Outcomes into an Outcome of a list.

    Stops consuming the iterable at the first Failure.

    Args:
        outcomes: An iterable of Outcome values.

    Returns:
        Success(list[T]) if every item succeeded, otherwise the first Failure.

    Raises:
        VariantError: If an item is not a Success or Failure.

    Examples:
        >>> collect([Success(1), Success(2)])
        Success(value=[1, 2])
        >>> collect([Success(1), Failure('bad'), Success(3)])
        Failure(error='bad')
    """
    values: list[T] = []
    for outcome in outcomes:
        if isinstance(outcome, Failure):
            return outcome
        if not isinstance(outcome, Success):
            raise VariantError(outcome, 'collect', expected='Success or Failure')
        values.append(outcome.value)
    return Success(values)
