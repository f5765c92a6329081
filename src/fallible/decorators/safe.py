"""@safe and @safe_async: turn raised exceptions into Failure values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fallible._config import get_config
from fallible._logging import get_logger, log_debug
from fallible.outcome import Failure, Success
from fallible.propagate import Propagate

__all__ = ['safe', 'safe_async']

logger = get_logger(__name__)


def _captured(wrapped: Callable[..., Any], exc: BaseException) -> Failure[Any]:
    if get_config().log_failures:
        log_debug(
            logger,
            'captured exception',
            function=getattr(wrapped, '__qualname__', repr(wrapped)),
            exc_type=type(exc).__name__,
        )
    return Failure(exc)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Wrap a function so it returns an Outcome instead of raising.

    A normal return becomes Success(value); an exception of one of the
    given types becomes Failure(exception). Other exceptions propagate.
    Propagate from .bail() is never captured, so @safe composes with
    @early_return.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(OSError,))
        def read(path): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to (Exception,).

    Example:
        ```python
        @safe(exceptions=(ZeroDivisionError,))
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Failure(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Any]:
        try:
            value = wrapped(*args, **kwargs)
        except Propagate:
            raise
        except catch as e:
            return _captured(wrapped, e)
        return Success(value)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Success[T] | Failure[Exception]]]: ...


@overload
def safe_async[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Success[T] | Failure[E]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async variant of @safe for coroutine functions.

    Args:
        func: The coroutine function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to (Exception,).
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Any]:
        try:
            value = await wrapped(*args, **kwargs)
        except Propagate:
            raise
        except catch as e:
            return _captured(wrapped, e)
        return Success(value)

    if func is not None:
        return wrapper(func)
    return wrapper
