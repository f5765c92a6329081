"""Tests for decorators: @safe, @safe_async, @early_return, @do."""

import pytest

from fallible import (
    Empty,
    Failure,
    Outcome,
    Present,
    Propagate,
    Success,
    VariantError,
    do,
    early_return,
    safe,
    safe_async,
)


class TestSafeDecorator:
    """Tests for @safe."""

    def test_returns_success(self):
        """@safe wraps a normal return in Success."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Success(5.0)

    def test_returns_failure_on_exception(self):
        """@safe captures the exception as the Failure payload."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        result = divide(10, 0)
        assert isinstance(result, Failure)
        assert isinstance(result.error, ZeroDivisionError)

    def test_exceptions_param_limits_capture(self):
        """@safe(exceptions=...) lets other exceptions propagate."""

        @safe(exceptions=(KeyError,))
        def lookup(table: dict[str, int], key: str) -> int:
            if key == '':
                raise ValueError('empty key')
            return table[key]

        assert lookup({'a': 1}, 'a') == Success(1)
        assert isinstance(lookup({}, 'a').error, KeyError)
        with pytest.raises(ValueError, match='empty key'):
            lookup({}, '')

    def test_os_error_boundary(self, tmp_path):
        """An OS-level failure becomes a Failure instead of escaping."""

        @safe(exceptions=(OSError,))
        def read(path: str) -> str:
            with open(path) as f:
                return f.read()

        target = tmp_path / 'data.txt'
        target.write_text('hello')
        assert read(str(target)) == Success('hello')
        assert isinstance(read(str(tmp_path / 'missing.txt')).error, FileNotFoundError)

    def test_preserves_function_name(self):
        @safe
        def my_function() -> None:
            pass

        assert my_function.__name__ == 'my_function'

    def test_does_not_capture_propagate(self):
        """Propagate from .bail() passes through @safe to @early_return."""

        @early_return
        @safe
        def inner() -> int:
            return Failure('stop').bail()

        assert inner() == Failure('stop')

    def test_works_on_methods(self):
        class Parser:
            def __init__(self, base: int) -> None:
                self.base = base

            @safe(exceptions=(ValueError,))
            def parse(self, raw: str) -> int:
                return int(raw, self.base)

        assert Parser(16).parse('ff') == Success(255)
        assert Parser(10).parse('ff').is_failure()


class TestSafeAsyncDecorator:
    """Tests for @safe_async."""

    async def test_returns_success(self):
        @safe_async
        async def fetch(x: int) -> int:
            return x * 2

        assert await fetch(5) == Success(10)

    async def test_returns_failure(self):
        @safe_async
        async def fail() -> int:
            raise ValueError('async error')

        result = await fail()
        assert isinstance(result, Failure)
        assert isinstance(result.error, ValueError)

    async def test_exceptions_param(self):
        @safe_async(exceptions=(ValueError,))
        async def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise TypeError('zero')
            return x

        assert await risky(5) == Success(5)
        assert (await risky(-1)).is_failure()
        with pytest.raises(TypeError):
            await risky(0)


class TestEarlyReturnDecorator:
    """Tests for @early_return and .bail()."""

    def test_success_path(self):
        @early_return
        def add(a: Outcome[int, str], b: Outcome[int, str]) -> Outcome[int, str]:
            return Success(a.bail() + b.bail())

        assert add(Success(1), Success(2)) == Success(3)

    def test_first_failure_returned_unchanged(self):
        @early_return
        def add(a: Outcome[int, str], b: Outcome[int, str]) -> Outcome[int, str]:
            return Success(a.bail() + b.bail())

        first = Failure('first')
        assert add(first, Failure('second')) is first

    def test_later_steps_never_run(self, recorder):
        """Statements after a failing bail() are not evaluated."""

        @early_return
        def pipeline() -> Outcome[str, str]:
            value = Failure('not found').bail()
            recorder(value)
            return Success(value)

        assert pipeline() == Failure('not found')
        assert recorder.calls == []

    def test_empty_propagates(self):
        @early_return
        def first_char(text: str):
            char = (Present(text[0]) if text else Empty).bail()
            return Present(char.upper())

        assert first_char('abc') == Present('A')
        assert first_char('') == Empty

    def test_without_decorator_propagate_escapes(self):
        """Without @early_return, bail() on Failure raises Propagate."""

        def undecorated() -> int:
            return Failure('e').bail()

        with pytest.raises(Propagate):
            undecorated()

    def test_preserves_function_name(self):
        @early_return
        def my_function() -> Outcome[None, str]:
            return Success(None)

        assert my_function.__name__ == 'my_function'

    async def test_async_function(self, recorder):
        @early_return
        async def load(source: Outcome[int, str]) -> Outcome[int, str]:
            value = source.bail()
            recorder(value)
            return Success(value + 1)

        assert await load(Success(1)) == Success(2)
        assert await load(Failure('offline')) == Failure('offline')
        assert recorder.calls == [1]


class TestDoDecorator:
    """Tests for @do generator notation."""

    def test_all_steps_succeed(self):
        @do
        def compute():
            x = yield Success(1)
            y = yield Present(2)
            return x + y

        assert compute() == Success(3)

    def test_failure_short_circuits(self, recorder):
        @do
        def compute():
            x = yield Failure('not found')
            recorder(x)
            y = yield Success(2)
            return x + y

        assert compute() == Failure('not found')
        assert recorder.calls == []

    def test_empty_becomes_failure_none(self):
        @do
        def compute():
            x = yield Empty
            return x

        assert compute() == Failure(None)

    def test_generator_is_closed_on_failure(self):
        cleaned_up: list[bool] = []

        @do
        def compute():
            try:
                yield Failure('e')
            finally:
                cleaned_up.append(True)

        compute()
        assert cleaned_up == [True]

    def test_plain_yield_rejected(self):
        @do
        def compute():
            yield 42
            return 0

        with pytest.raises(VariantError, match='do'):
            compute()

    def test_arguments_forwarded(self):
        @do
        def scale(base: int, *, factor: int):
            value = yield Success(base)
            return value * factor

        assert scale(3, factor=4) == Success(12)
