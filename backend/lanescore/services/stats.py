from __future__ import annotations

from typing import List, Sequence

from ..schemas import MAX_FRAMES, MAX_PINS, Frame, FrameStats
from ..scoring.frames import FrameOutcome, classify


def _tenth_frame_marks(throws: Sequence[int]) -> tuple[int, int]:
    marks = throw_notation(throws)
    return marks.count("X"), marks.count("/")


def frame_stats(frames: Sequence[Frame]) -> FrameStats:
    """Count strikes, spares and open frames across a game.

    Every strike ball of the tenth frame counts, so a perfect game has 12
    strikes. Frames still in progress are not counted as open.
    """
    strikes = spares = opens = 0
    for frame in frames:
        if frame.frame_number < MAX_FRAMES:
            outcome = classify(frame.throws, frame.frame_number).outcome
            if outcome is FrameOutcome.STRIKE:
                strikes += 1
            elif outcome is FrameOutcome.SPARE:
                spares += 1
            elif outcome is FrameOutcome.OPEN:
                opens += 1
            continue
        tenth_strikes, tenth_spares = _tenth_frame_marks(frame.throws)
        strikes += tenth_strikes
        spares += tenth_spares
        if classify(frame.throws, frame.frame_number).outcome is FrameOutcome.OPEN:
            opens += 1
    return FrameStats(strikes=strikes, spares=spares, opens=opens)


def throw_notation(throws: Sequence[int]) -> List[str]:
    """Render throws with scorecard symbols: X strike, / spare, - gutter."""
    marks: List[str] = []
    standing = MAX_PINS
    fresh_rack = True
    for pins in throws:
        if pins == standing and fresh_rack:
            marks.append("X")
        elif pins == standing:
            marks.append("/")
        elif pins == 0:
            marks.append("-")
        else:
            marks.append(str(pins))
        standing -= pins
        fresh_rack = standing == 0
        if fresh_rack:
            standing = MAX_PINS
    return marks
