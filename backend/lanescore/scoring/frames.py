"""Frame classification and the game cursor.

Frames 1-9 end after a strike or after two balls. The tenth frame is one of
three closed variants once its first balls are known:

``TenthFrameKind.OPEN``
    two balls without a mark, no bonus ball.
``TenthFrameKind.STRIKE_BONUS``
    first ball is a strike, two more balls follow.
``TenthFrameKind.SPARE_BONUS``
    first two balls make a spare, one more ball follows.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..schemas import MAX_FRAMES, MAX_PINS, Cursor, Frame


class FrameOutcome(str, Enum):
    STRIKE = "strike"
    SPARE = "spare"
    OPEN = "open"
    INCOMPLETE = "incomplete"


class TenthFrameKind(str, Enum):
    OPEN = "open"
    STRIKE_BONUS = "strike_bonus"
    SPARE_BONUS = "spare_bonus"


@dataclass(frozen=True)
class FrameState:
    is_complete: bool
    outcome: FrameOutcome
    tenth_kind: Optional[TenthFrameKind] = None


_INCOMPLETE = FrameState(False, FrameOutcome.INCOMPLETE)


def tenth_frame_kind(throws: Sequence[int]) -> Optional[TenthFrameKind]:
    """Return the tenth-frame variant, or ``None`` while it is still unknown."""
    if not throws:
        return None
    if throws[0] == MAX_PINS:
        return TenthFrameKind.STRIKE_BONUS
    if len(throws) < 2:
        return None
    if throws[0] + throws[1] == MAX_PINS:
        return TenthFrameKind.SPARE_BONUS
    return TenthFrameKind.OPEN


def _classify_regular(throws: Sequence[int]) -> FrameState:
    if not throws:
        return _INCOMPLETE
    if throws[0] == MAX_PINS:
        return FrameState(True, FrameOutcome.STRIKE)
    if len(throws) < 2:
        return _INCOMPLETE
    if throws[0] + throws[1] == MAX_PINS:
        return FrameState(True, FrameOutcome.SPARE)
    return FrameState(True, FrameOutcome.OPEN)


def _classify_tenth(throws: Sequence[int]) -> FrameState:
    kind = tenth_frame_kind(throws)
    if kind is None:
        return _INCOMPLETE
    if kind is TenthFrameKind.OPEN:
        return FrameState(True, FrameOutcome.OPEN, kind)
    if len(throws) < 3:
        return FrameState(False, FrameOutcome.INCOMPLETE, kind)
    outcome = (
        FrameOutcome.STRIKE
        if kind is TenthFrameKind.STRIKE_BONUS
        else FrameOutcome.SPARE
    )
    return FrameState(True, outcome, kind)


def classify(throws: Sequence[int], frame_number: int) -> FrameState:
    if frame_number < MAX_FRAMES:
        return _classify_regular(throws)
    return _classify_tenth(throws)


def is_frame_complete(throws: Sequence[int], frame_number: int) -> bool:
    return classify(throws, frame_number).is_complete


def frame_done(frame: Frame) -> bool:
    """A frame stays complete once flagged, whatever its throws say."""
    return frame.is_complete or is_frame_complete(frame.throws, frame.frame_number)


def locate_cursor(frames: Sequence[Frame]) -> Tuple[Cursor, bool]:
    """Return the active position and whether the game is over.

    A finished game leaves the cursor on the last ball of frame 10.
    """
    last = frames[-1]
    if frame_done(last):
        return Cursor(current_frame=MAX_FRAMES, current_throw=max(1, len(last.throws))), True
    active = next(frame for frame in frames if not frame_done(frame))
    cursor = Cursor(
        current_frame=active.frame_number,
        current_throw=len(active.throws) + 1,
    )
    return cursor, False
