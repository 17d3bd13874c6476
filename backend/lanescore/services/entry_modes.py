"""Build games from the lossy entry modes.

Only pin-by-pin entry records what really happened. Frame-by-frame and
final-score entry produce a plausible ball sequence that adds up to what the
bowler reported, which is enough for totals and averages but not for
ball-level analysis.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from pydantic import ValidationError

from ..exceptions import InvalidEntry, UnreachableScore
from ..schemas import (
    MAX_FRAMES,
    MAX_PINS,
    FinalScoreEntry,
    Frame,
    FrameAggregatesEntry,
    Game,
)
from ..scoring.aggregate import build_game
from ..scoring.throws import can_accept_throw, max_legal_pins
from .stats import throw_notation
from .validation import validate_frame_order, validate_frame_shape, validate_frames

logger = logging.getLogger(__name__)

Throws = Tuple[int, ...]


def from_pin_by_pin(frames: Sequence[Any], notes: Optional[str] = None) -> Game:
    """Score frames entered ball by ball.

    Completion is re-derived from the throws; flags sent by the client are
    ignored.
    """
    validated = [
        frame.model_copy(update={"is_complete": False})
        for frame in validate_frames(frames)
    ]
    validate_frame_order(validated)
    return build_game(validated, entry_mode="pin_by_pin", notes=notes)


def _split_tenth(pins: int) -> Throws:
    if pins < MAX_PINS:
        return (pins, 0)
    if pins < 2 * MAX_PINS:
        return (MAX_PINS, pins - MAX_PINS, 0)
    return (MAX_PINS, MAX_PINS, pins - 2 * MAX_PINS)


def from_frame_aggregates(values: Sequence[int], notes: Optional[str] = None) -> Game:
    """Build a game from one pin count per frame.

    Frames 1-9 hold a single synthetic ball with the frame's pins, so a 10 is
    scored as a strike against whatever the next frames hold. Frame 10 (up to
    30 pins) is split into legal balls.
    """
    try:
        entry = FrameAggregatesEntry(values=list(values), notes=notes)
    except ValidationError as exc:
        raise InvalidEntry(f"frame values are invalid: {exc}") from exc

    frames = [
        Frame(frame_number=number, throws=(pins,), is_complete=True)
        for number, pins in enumerate(entry.values[:-1], start=1)
    ]
    frames.append(
        Frame(
            frame_number=MAX_FRAMES,
            throws=_split_tenth(entry.values[-1]),
            is_complete=True,
        )
    )
    return build_game(frames, entry_mode="frame_by_frame", notes=entry.notes)


class _Play(NamedTuple):
    """A complete frame and the marks it shows on the scorecard."""

    balls: Throws
    strikes: int
    spares: int


# (next-ball multiplier, ball-after multiplier, strikes, spares)
_Key = Tuple[int, int, int, int]


def _complete_frames(frame_number: int) -> List[_Play]:
    """Every ball sequence that finishes the frame legally."""
    plays, partial = [], [()]
    while partial:
        throws = partial.pop()
        if throws and not can_accept_throw(throws, frame_number):
            marks = throw_notation(throws)
            plays.append(_Play(throws, marks.count("X"), marks.count("/")))
            continue
        ceiling = max_legal_pins(throws, frame_number)
        partial.extend(throws + (pins,) for pins in range(ceiling + 1))
    return sorted(plays)


_REGULAR_PLAYS = _complete_frames(1)
_TENTH_PLAYS = _complete_frames(MAX_FRAMES)


def _advance(key: _Key, play: _Play, tracked: Tuple[bool, bool]) -> Tuple[_Key, int]:
    """Score ``play`` after the frames summarised by ``key``.

    Returns the key after the frame and the points the frame adds to the game,
    including the bonus it pays to earlier strikes and spares.
    """
    carry = key[:2]
    value = sum(play.balls) + sum(m * pins for m, pins in zip(carry, play.balls))
    leftover = carry[len(play.balls):] + (0, 0)
    bonus_balls = 2 if play.strikes else play.spares
    strikes = key[2] + play.strikes if tracked[0] else 0
    spares = key[3] + play.spares if tracked[1] else 0
    after = (
        leftover[0] + min(bonus_balls, 1),
        leftover[1] + max(bonus_balls - 1, 0),
        strikes,
        spares,
    )
    return after, value


def _reachable(entry: FinalScoreEntry, tracked: Tuple[bool, bool]) -> List[Dict[_Key, int]]:
    """Totals reachable after each frame, as bitmasks keyed by running state.

    ``layers[n]`` describes the game after frames 1..n; bit ``t`` of a mask is
    set when some legal sequence of those frames scores ``t``.
    """
    limit = (1 << (entry.total_score + 1)) - 1
    wanted = (entry.strikes or 0, entry.spares or 0)
    layers: List[Dict[_Key, int]] = [{(0, 0, 0, 0): 1}]
    for _ in range(1, MAX_FRAMES):
        layer: Dict[_Key, int] = {}
        for key, mask in layers[-1].items():
            for play in _REGULAR_PLAYS:
                after, value = _advance(key, play, tracked)
                if after[2] > wanted[0] or after[3] > wanted[1]:
                    continue
                shifted = (mask << value) & limit
                if shifted:
                    layer[after] = layer.get(after, 0) | shifted
        layers.append(layer)
    return layers


def _reconstruct(entry: FinalScoreEntry) -> Optional[List[Throws]]:
    """Pick one legal ball sequence per frame that scores ``entry`` exactly.

    Walks back from frame 10, only taking frames that leave a reachable total
    for the frames before them. Among those, the frame whose pins are closest
    to an even share of what is left wins, which keeps games plausible.
    """
    tracked = (entry.strikes is not None, entry.spares is not None)
    wanted = (entry.strikes or 0, entry.spares or 0)
    layers = _reachable(entry, tracked)

    remaining = entry.total_score
    following: Optional[_Key] = None
    chosen: List[Throws] = []
    for number in range(MAX_FRAMES, 0, -1):
        plays = _TENTH_PLAYS if number == MAX_FRAMES else _REGULAR_PLAYS
        share = remaining / number
        best = None
        for key, mask in layers[number - 1].items():
            for play in plays:
                after, value = _advance(key, play, tracked)
                if following is None:
                    if after[2:] != wanted:
                        continue
                elif after != following:
                    continue
                if value > remaining or not (mask >> (remaining - value)) & 1:
                    continue
                rank = abs(sum(play.balls) - share)
                if best is None or rank < best[0]:
                    best = (rank, key, play, value)
        if best is None:
            return None
        _, following, play, value = best
        chosen.append(play.balls)
        remaining -= value
    chosen.reverse()
    return chosen


def from_final_score(
    total: int,
    strikes: Optional[int] = None,
    spares: Optional[int] = None,
    notes: Optional[str] = None,
) -> Game:
    """Build a game from its final score and optional strike/spare counts.

    Every frame is drawn from the balls a real frame could hold, so the game
    scores ``total`` exactly without clamping anything. When a count is
    omitted any number of those marks may be used. Raises
    :class:`UnreachableScore` if no legal game with those counts adds up to
    ``total``.
    """
    try:
        entry = FinalScoreEntry(
            total_score=total, strikes=strikes, spares=spares, notes=notes
        )
    except ValidationError as exc:
        raise InvalidEntry(f"final score entry is invalid: {exc}") from exc

    chosen = _reconstruct(entry)
    if chosen is None:
        logger.warning(
            "No legal game scores %d with strikes=%r spares=%r",
            entry.total_score,
            entry.strikes,
            entry.spares,
        )
        raise UnreachableScore(entry.total_score, entry.strikes, entry.spares)

    logger.debug("Reconstructed a %d game as %s", entry.total_score, chosen)
    frames = []
    for number, throws in enumerate(chosen, start=1):
        validate_frame_shape(throws, number)
        frames.append(Frame(frame_number=number, throws=throws, is_complete=True))
    return build_game(
        frames,
        entry_mode="final_score",
        strikes=entry.strikes,
        spares=entry.spares,
        notes=entry.notes,
    )
