"""Ten-pin bowling scoring and frame-state engine."""

from .exceptions import (
    IllegalThrow,
    InvalidEntry,
    InvalidFrameShape,
    ProblemDetail,
    ScoringError,
    UnreachableScore,
)
from .schemas import PENDING, Cursor, Frame, FrameStats, Game
from .scoring.bowling import (
    add_throw,
    calculate_game_score,
    create_empty_game,
    is_frame_complete,
    preview_throw,
)
from .scoring.frames import FrameOutcome, FrameState, TenthFrameKind, classify
from .scoring.throws import can_accept_throw, max_legal_pins
from .services import (
    frame_stats,
    from_final_score,
    from_frame_aggregates,
    from_pin_by_pin,
    throw_notation,
)

__all__ = [
    "IllegalThrow",
    "InvalidEntry",
    "InvalidFrameShape",
    "ProblemDetail",
    "ScoringError",
    "UnreachableScore",
    "PENDING",
    "Cursor",
    "Frame",
    "FrameStats",
    "Game",
    "add_throw",
    "calculate_game_score",
    "create_empty_game",
    "is_frame_complete",
    "preview_throw",
    "FrameOutcome",
    "FrameState",
    "TenthFrameKind",
    "classify",
    "can_accept_throw",
    "max_legal_pins",
    "frame_stats",
    "from_final_score",
    "from_frame_aggregates",
    "from_pin_by_pin",
    "throw_notation",
]
