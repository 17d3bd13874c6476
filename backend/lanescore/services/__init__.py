"""Helpers around the scoring engine (pure functions, no I/O)."""

from .validation import (
    validate_frame_order,
    validate_frame_shape,
    validate_frames,
)
from .entry_modes import from_final_score, from_frame_aggregates, from_pin_by_pin
from .stats import frame_stats, throw_notation

__all__ = [
    "validate_frame_order",
    "validate_frame_shape",
    "validate_frames",
    "from_final_score",
    "from_frame_aggregates",
    "from_pin_by_pin",
    "frame_stats",
    "throw_notation",
]
