"""Scoring engine for ten-pin bowling."""

from . import aggregate, bowling, frames, throws

__all__ = [
    "aggregate",
    "bowling",
    "frames",
    "throws",
]
