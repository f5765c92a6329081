"""Structured logging for fallible.

The library only emits DEBUG events at its failure boundaries (@safe
capturing an exception, @early_return short-circuiting) and never
configures logging on import. Applications opt in through
configure_logging() or fallible.init(log_level=...).

Uses structlog's ProcessorFormatter so structlog events and stdlib records
from other libraries share one output pipeline.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'log_debug',
    'remove_log_hook',
]


def _get_shared_processors() -> list[Any]:
    """Processors shared between structlog and stdlib foreign records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _hook_processor,
    ]


def _get_structlog_processors() -> list[Any]:
    """Full processor chain for structlog loggers."""
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog and the stdlib root logger for unified output.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name, conventionally the module's __name__.

    Returns:
        A structlog BoundLogger proxy.
    """
    return structlog.get_logger(name)


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of each log event dict.

    Args:
        hook: Callable that receives the event dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered hook. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S112
            continue  # a failing hook must not break logging
    return event_dict


def log_debug(logger: Any, event: str, **fields: Any) -> None:
    """Emit a debug event only once the application has configured structlog.

    An unconfigured structlog prints every level to stdout, which a library
    must not do on its own.
    """
    if structlog.is_configured():
        logger.debug(event, **fields)
