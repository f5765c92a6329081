"""Tests for logging configuration, hooks and failure-boundary events."""

from __future__ import annotations

from typing import Any

import structlog

from fallible import Failure, early_return, init, safe
from fallible._logging import (
    add_log_hook,
    configure_logging,
    get_logger,
    remove_log_hook,
)


def _capture() -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []
    add_log_hook(received.append)
    return received


class TestLogHooks:
    """Tests for logging hooks."""

    def test_hook_receives_log_events(self) -> None:
        configure_logging(level='DEBUG')
        received = _capture()

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        logger = get_logger('test')
        logger.info('First')
        remove_log_hook(hook)
        logger.info('Second')

        assert calls == ['called']

    def test_failing_hook_does_not_break_logging(self) -> None:
        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failure')

        configure_logging(level='DEBUG')
        add_log_hook(broken)
        received = _capture()

        get_logger('test').info('still logged')

        assert any(e.get('event') == 'still logged' for e in received)

    def test_level_filters_debug(self) -> None:
        configure_logging(level='INFO')
        received = _capture()

        get_logger('test').debug('hidden')

        assert received == []


class TestBoundaryEvents:
    """Tests for the debug events emitted by @safe and @early_return."""

    def test_safe_logs_captured_exception(self) -> None:
        init(log_level='DEBUG')
        received = _capture()

        @safe
        def boom() -> None:
            raise KeyError('k')

        boom()

        entries = [e for e in received if e.get('event') == 'captured exception']
        assert len(entries) == 1
        assert entries[0]['exc_type'] == 'KeyError'
        assert entries[0]['function'].endswith('boom')

    def test_safe_respects_log_failures(self) -> None:
        init(log_level='DEBUG', log_failures=False)
        received = _capture()

        @safe
        def boom() -> None:
            raise KeyError('k')

        boom()

        assert not any(e.get('event') == 'captured exception' for e in received)

    def test_early_return_logs_short_circuit(self) -> None:
        init(log_level='DEBUG')
        received = _capture()

        @early_return
        def stop():
            return Failure('halt').bail()

        assert stop() == Failure('halt')

        entries = [e for e in received if e.get('event') == 'short-circuited']
        assert len(entries) == 1
        assert entries[0]['value'] == "Failure(error='halt')"

    def test_silent_when_unconfigured(self, capsys) -> None:
        """Nothing is printed when the application never configured structlog."""
        assert not structlog.is_configured()

        @safe
        def boom() -> None:
            raise KeyError('k')

        boom()

        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err == ''
