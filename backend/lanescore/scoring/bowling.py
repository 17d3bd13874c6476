"""Ten-pin bowling game operations.

Every function takes a game snapshot and returns a new one; nothing is kept
between calls.
"""
import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from .. import config as settings
from ..exceptions import IllegalThrow
from ..schemas import MAX_FRAMES, EntryMode, Frame, Game
from ..services.validation import validate_frame_order, validate_frames
from .aggregate import build_game, score_frames
from .frames import is_frame_complete, locate_cursor
from .throws import validate_throw

logger = logging.getLogger(__name__)

__all__ = [
    "create_empty_game",
    "is_frame_complete",
    "calculate_game_score",
    "build_game",
    "add_throw",
    "preview_throw",
    "init_state",
    "apply",
    "summary",
]


def create_empty_game(entry_mode: Optional[EntryMode] = None) -> Game:
    frames = tuple(Frame(frame_number=n) for n in range(1, MAX_FRAMES + 1))
    return Game(frames=frames, entry_mode=entry_mode or settings.DEFAULT_ENTRY_MODE)


def calculate_game_score(frames: Sequence[Any]) -> Tuple[Frame, ...]:
    """Validate ``frames`` and return freshly scored copies."""
    validated = validate_frames(frames)
    validate_frame_order(validated)
    return score_frames(validated)


def add_throw(game: Game, pins: int) -> Game:
    """Record one ball at the cursor and return the rescored game.

    Raises :class:`IllegalThrow` without touching ``game`` when the game is
    over or ``pins`` is more than the pins left standing. The target frame
    comes from the frames themselves, not from ``game.cursor``.
    """
    cursor, complete = locate_cursor(game.frames)
    if complete:
        logger.warning("Rejected throw of %r: game is already complete", pins)
        raise IllegalThrow("game is already complete")

    index = cursor.current_frame - 1
    frame = game.frames[index]
    try:
        validate_throw(frame.throws, frame.frame_number, pins)
    except IllegalThrow:
        logger.warning(
            "Rejected throw of %r in frame %d after %s",
            pins,
            frame.frame_number,
            list(frame.throws),
        )
        raise

    updated = frame.model_copy(update={"throws": frame.throws + (pins,)})
    frames = game.frames[:index] + (updated,) + game.frames[index + 1:]
    logger.debug("Frame %d throws now %s", frame.frame_number, list(updated.throws))
    return build_game(
        frames,
        entry_mode=game.entry_mode,
        strikes=game.strikes,
        spares=game.spares,
        notes=game.notes,
    )


def preview_throw(game: Game, pins: int) -> Game:
    """Score a hypothetical ball; ``game`` itself is left as it was."""
    return add_throw(game, pins)


# ROLL event interface for hosts that replay a game ball by ball.


def init_state(config: Dict) -> Dict:
    return {"config": config, "game": create_empty_game(config.get("entryMode"))}


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    if "pins" not in event:
        raise ValueError("ROLL event is missing pins")
    try:
        game = add_throw(state["game"], event["pins"])
    except IllegalThrow as exc:
        raise ValueError(exc.detail) from exc
    return {**state, "game": game}


def summary(state: Dict) -> Dict:
    game: Game = state["game"]
    return {
        "frames": [list(frame.throws) for frame in game.frames],
        "scores": [frame.cumulative_score for frame in game.frames],
        "total": game.total_score,
        "complete": game.is_complete,
    }
