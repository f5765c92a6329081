"""Composition utilities: pipe(), compose() and identity()."""

from fallible.compose.pipe import compose, identity, pipe

__all__ = [
    'compose',
    'identity',
    'pipe',
]
