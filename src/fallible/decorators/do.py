"""@do: generator-based notation over Outcome and Optional."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import wrapt

from fallible.errors import VariantError
from fallible.optional import EmptyType, Present
from fallible.outcome import Failure, Success

__all__ = ['do']


def do[**P, T, E](
    func: Callable[P, Generator[Success[Any] | Failure[E] | Present[Any] | EmptyType, Any, T]],
) -> Callable[P, Success[T] | Failure[E]]:
    """Run a generator as a sequence of dependent fallible steps.

    Each `yield` takes a Success or Present and sends back its value. The
    first Failure yielded is returned unchanged and the generator is closed,
    so later steps never run. A yielded Empty becomes Failure(None). The
    generator's return value is wrapped in Success.

    Yielding anything else raises VariantError.

    Example:
        ```python
        @do
        def load(key: str):
            raw = yield lookup(key)     # Optional
            value = yield parse(raw)    # Outcome
            return value * 2
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Generator[Any, Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[E]:
        gen = wrapped(*args, **kwargs)
        try:
            step = next(gen)
            while True:
                match step:
                    case Success(value=value) | Present(value=value):
                        step = gen.send(value)
                    case Failure():
                        gen.close()
                        return step
                    case EmptyType():
                        gen.close()
                        return Failure(None)  # type: ignore[arg-type]
                    case _:
                        gen.close()
                        raise VariantError(step, 'do', expected='Success, Failure, Present or Empty')
        except StopIteration as e:
            return Success(e.value)

    return wrapper(func)  # type: ignore[return-value]
