"""@early_return: catch Propagate raised by .bail() and return its value."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

import wrapt

from fallible._logging import get_logger, log_debug
from fallible.propagate import Propagate

__all__ = ['early_return']

logger = get_logger(__name__)


def _short_circuit(wrapped: Callable[..., Any], p: Propagate) -> Any:
    log_debug(
        logger,
        'short-circuited',
        function=getattr(wrapped, '__qualname__', repr(wrapped)),
        value=repr(p.value),
    )
    return p.value


def early_return[F: Callable[..., Any]](func: F) -> F:
    """Give .bail() the semantics of an early return on Failure or Empty.

    Inside the decorated function, `outcome.bail()` returns the success
    value, or stops the function and makes it return that Failure (or
    Empty) unchanged. Statements after a failing bail() never run.

    Coroutine functions are detected and wrapped accordingly.

    Example:
        ```python
        @early_return
        def total(path: str) -> Outcome[int, str]:
            text = read(path).bail()      # Failure returned here if read fails
            numbers = parse(text).bail()  # never runs after a failed read
            return Success(sum(numbers))
        ```
    """
    if inspect.iscoroutinefunction(func):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[..., Any],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Any:
            try:
                return await wrapped(*args, **kwargs)
            except Propagate as p:
                return _short_circuit(wrapped, p)

        return async_wrapper(func)  # type: ignore[return-value]

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return _short_circuit(wrapped, p)

    return sync_wrapper(func)  # type: ignore[return-value]
