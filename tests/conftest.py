"""Pytest configuration and shared fixtures for fallible tests."""

import pytest
import structlog

from fallible import _config, _logging


@pytest.fixture
def recorder():
    """A callable that records every argument it is called with."""

    class Recorder:
        def __init__(self) -> None:
            self.calls: list[object] = []

        def __call__(self, value: object) -> object:
            self.calls.append(value)
            return value

    return Recorder()


@pytest.fixture(autouse=True)
def isolated_config():
    """Reset configuration, log hooks and structlog around each test."""
    _config.reset()
    _logging.clear_log_hooks()
    structlog.reset_defaults()
    yield
    _config.reset()
    _logging.clear_log_hooks()
    structlog.reset_defaults()
