"""Cumulative frame scores with strike and spare lookahead."""
import logging
from typing import Any, List, Optional, Sequence, Tuple

from ..schemas import MAX_FRAMES, MAX_PINS, PENDING, Frame, Game
from .frames import FrameOutcome, classify, frame_done, locate_cursor

logger = logging.getLogger(__name__)

_BONUS_BALLS = {FrameOutcome.STRIKE: 2, FrameOutcome.SPARE: 1}


def _lookahead(throws_by_frame: Sequence[Sequence[int]], index: int, count: int) -> Optional[int]:
    """Sum the next ``count`` balls after frame ``index``, or ``None`` if not bowled yet."""
    balls: List[int] = []
    for throws in throws_by_frame[index + 1:]:
        balls.extend(throws)
        if len(balls) >= count:
            return sum(balls[:count])
    return None


def frame_values(throws_by_frame: Sequence[Sequence[int]]) -> List[Optional[int]]:
    """Return each frame's own value, ``None`` where bonus balls are missing.

    ``throws_by_frame[0]`` is frame 1. The tenth frame is worth the pins it
    holds; a strike or spare in frames 1-9 is worth 10 plus its bonus balls;
    anything else is worth the pins recorded so far.
    """
    values: List[Optional[int]] = []
    for index, throws in enumerate(throws_by_frame):
        frame_number = index + 1
        bonus_balls = None
        if frame_number < MAX_FRAMES:
            bonus_balls = _BONUS_BALLS.get(classify(throws, frame_number).outcome)
        if bonus_balls is None:
            values.append(sum(throws))
            continue
        bonus = _lookahead(throws_by_frame, index, bonus_balls)
        values.append(None if bonus is None else MAX_PINS + bonus)
    return values


def score_frames(frames: Sequence[Frame]) -> Tuple[Frame, ...]:
    """Return new frames annotated with cumulative scores.

    Every call re-derives all ten frames from their throws. A strike or spare
    whose bonus balls are missing is ``"pending"``, and so is every frame
    after it.
    """
    ordered = sorted(frames, key=lambda f: f.frame_number)
    values = frame_values([frame.throws for frame in ordered])
    scored: List[Frame] = []
    running = 0
    pending = False
    for frame, value in zip(ordered, values):
        if value is None:
            pending = True
        elif not pending:
            running += value
        scored.append(
            frame.model_copy(
                update={
                    "cumulative_score": PENDING if pending else running,
                    "is_complete": frame_done(frame),
                }
            )
        )
    logger.debug(
        "Scored frames: %s",
        [frame.cumulative_score for frame in scored],
    )
    return tuple(scored)


def total_score(frames: Sequence[Frame]) -> int:
    """Last concrete cumulative score, or 0 when nothing is resolved."""
    for frame in reversed(frames):
        if not frame.is_pending:
            return int(frame.cumulative_score)
    return 0


def build_game(frames: Sequence[Frame], **fields: Any) -> Game:
    """Score ``frames`` and derive the game-level total and cursor."""
    scored = score_frames(frames)
    cursor, complete = locate_cursor(scored)
    return Game(
        frames=scored,
        total_score=total_score(scored),
        is_complete=complete,
        cursor=cursor,
        **fields,
    )
