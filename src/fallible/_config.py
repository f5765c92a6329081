"""Library configuration: FallibleConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fallible._logging import configure_logging

__all__ = [
    'FallibleConfig',
    'get_config',
    'init',
]

_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class FallibleConfig:
    """Configuration for fallible's logging at failure boundaries.

    Attributes:
        log_level: Logging level (e.g., "DEBUG"). None = leave logging alone.
        json_output: Render log events as JSON lines rather than console text.
        log_failures: Emit a debug event when @safe captures an exception.
    """

    log_level: str | None = None
    json_output: bool = True
    log_failures: bool = True


# Set by init(), or lazily by get_config()
_config: FallibleConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, warning on unrecognised values."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    logging.warning("Unknown %s value '%s', using %s", name, raw, default)
    return default


def _env_log_level() -> str | None:
    raw = os.environ.get('FALLIBLE_LOG_LEVEL', '').strip().upper()
    if not raw:
        return None
    if raw not in logging.getLevelNamesMapping():
        logging.warning("Unknown FALLIBLE_LOG_LEVEL value '%s', ignoring", raw)
        return None
    return raw


def _check_log_level(level: str) -> str:
    normalised = level.strip().upper()
    if normalised not in logging.getLevelNamesMapping():
        raise ValueError(f'Unknown log level: {level!r}')
    return normalised


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    log_failures: bool | None = None,
) -> FallibleConfig:
    """Initialize fallible with the given configuration.

    Unspecified arguments fall back to the environment:
    FALLIBLE_LOG_LEVEL, FALLIBLE_LOG_JSON and FALLIBLE_LOG_FAILURES.

    Args:
        log_level: Logging level ("DEBUG", "INFO", ...). None = silent.
        json_output: JSON log lines (True) or console rendering (False).
        log_failures: Whether @safe logs the exceptions it captures.

    Returns:
        The FallibleConfig that was set.

    Raises:
        ValueError: If log_level is not a known logging level name.

    Example:
        ```python
        import fallible

        fallible.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = FallibleConfig(
        log_level=_check_log_level(log_level) if log_level is not None else _env_log_level(),
        json_output=json_output if json_output is not None else _env_flag('FALLIBLE_LOG_JSON', True),
        log_failures=log_failures if log_failures is not None else _env_flag('FALLIBLE_LOG_FAILURES', True),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> FallibleConfig:
    """Get the current configuration, creating the default on first use.

    The default is built from defaults only; environment variables are read
    by init().
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = FallibleConfig()
    return _config


def reset() -> None:
    """Forget the current configuration. Mainly for tests."""
    global _config  # noqa: PLW0603

    _config = None
