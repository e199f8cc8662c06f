"""Scoring engines for the supported sports."""

from . import bowling

__all__ = [
    "bowling",
]
