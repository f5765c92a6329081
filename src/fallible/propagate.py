"""Propagate: the control exception behind .bail() and @early_return."""

from typing import Any

__all__ = ['Propagate']


class Propagate(Exception):  # noqa: N818
    """Carries a Failure or Empty from .bail() out to @early_return.

    Failure.bail() and EmptyType.bail() raise it; Success.bail() and
    Present.bail() never do. @early_return catches it and returns the
    carried value unchanged. @safe and @safe_async re-raise it instead of
    wrapping it in a Failure, so a bail() inside a @safe function still
    reaches the enclosing @early_return.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Failure or Empty handed back by @early_return."""
        return self._value
