"""Decorators: @safe, @safe_async, @early_return and @do."""

from fallible.decorators.do import do
from fallible.decorators.early_return import early_return
from fallible.decorators.safe import safe, safe_async

__all__ = [
    'do',
    'early_return',
    'safe',
    'safe_async',
]
