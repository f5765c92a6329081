"""pipe(): thread a value through functions with short-circuiting."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fallible.disjoint import First, Second
from fallible.errors import is_variant
from fallible.optional import EmptyType, Present
from fallible.outcome import Failure, Success

__all__ = ['compose', 'identity', 'pipe']


def identity[T](value: T) -> T:
    """Return value unchanged."""
    return value


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose plain functions right to left: compose(g, f)(x) == g(f(x))."""

    def composed(value: Any) -> Any:
        for fn in reversed(fns):
            value = fn(value)
        return value

    return composed


def _step(current: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply fn to the payload of current, keeping its wrapper type.

    Failure, Empty and First stop the pipeline unchanged. A function that
    returns a wrapper has its result used directly; a plain return is
    rewrapped in the same variant the payload came from.
    """
    match current:
        case Failure() | EmptyType() | First():
            return current
        case Success(value=value):
            wrap: Callable[[Any], Any] = Success
        case Present(value=value):
            wrap = Present
        case Second(value=value):
            wrap = Second
        case _:
            value, wrap = current, Success
    result = fn(value)
    if is_variant(result):
        return result
    return wrap(result)


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread value through fns, stopping at the first Failure, Empty or First.

    A plain starting value is treated as Success(value). Functions may return
    plain values or wrappers, so ordinary and fallible steps mix freely.

    Examples:
        >>> pipe(5, lambda x: x + 1, str)
        Success(value='6')
        >>> pipe(Present(0), lambda v: Empty if v == 0 else Present(100 // v), str)
        EmptyType()
    """
    current = value if is_variant(value) else Success(value)
    for fn in fns:
        current = _step(current, fn)
        if isinstance(current, Failure | EmptyType | First):
            break
    return current
