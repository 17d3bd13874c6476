from typing import Any, List, Sequence

from pydantic import ValidationError

from ..exceptions import IllegalThrow, InvalidFrameShape
from ..schemas import MAX_FRAMES, Frame
from ..scoring.frames import frame_done
from ..scoring.throws import validate_throw


def validate_frame_shape(throws: Sequence[int], frame_number: int) -> None:
    """Validate a frame's throws by replaying them one ball at a time.

    Rules:
    - Frame number must be between 1 and 10
    - Each throw is an integer between 0 and the pins left standing
    - Frames 1-9 hold at most two balls and nothing after a strike
    - Frame 10 holds a third ball only after a strike or spare
    """
    if not 1 <= frame_number <= MAX_FRAMES:
        raise InvalidFrameShape(f"frame number must be between 1 and 10 (got {frame_number})")
    replayed: List[int] = []
    for pins in throws:
        try:
            validate_throw(replayed, frame_number, pins)
        except IllegalThrow as exc:
            raise InvalidFrameShape(
                f"frame {frame_number} throws {list(throws)} are impossible: {exc.detail}"
            ) from exc
        replayed.append(pins)


def coerce_frame(raw: Any, frame_number: int | None = None) -> Frame:
    """Build a :class:`Frame` from a model, a mapping or a bare list of throws."""
    if isinstance(raw, Frame):
        return raw
    if isinstance(raw, (list, tuple)):
        raw = {"frame_number": frame_number, "throws": raw}
    if not isinstance(raw, dict):
        raise InvalidFrameShape(f"frame #{frame_number} must be an object or a list of throws")
    data = {
        "frame_number": raw.get("frame_number", frame_number),
        "throws": raw.get("throws") or (),
        "is_complete": raw.get("is_complete", False),
    }
    try:
        return Frame(**data)
    except ValidationError as exc:
        raise InvalidFrameShape(f"frame #{frame_number} is malformed: {exc}") from exc


def validate_frames(frames: Sequence[Any]) -> List[Frame]:
    """Coerce and validate a full game's worth of frames."""
    if isinstance(frames, (str, bytes)) or not isinstance(frames, Sequence):
        raise InvalidFrameShape("frames must be provided as a sequence")
    if len(frames) != MAX_FRAMES:
        raise InvalidFrameShape(f"a game must have exactly {MAX_FRAMES} frames (got {len(frames)})")

    coerced = [coerce_frame(raw, number) for number, raw in enumerate(frames, start=1)]
    coerced.sort(key=lambda f: f.frame_number)
    numbers = [frame.frame_number for frame in coerced]
    if numbers != list(range(1, MAX_FRAMES + 1)):
        raise InvalidFrameShape("frames must be numbered 1 to 10 exactly once")

    for frame in coerced:
        validate_frame_shape(frame.throws, frame.frame_number)
    return coerced


def validate_frame_order(frames: Sequence[Frame]) -> None:
    """Reject throws recorded after a frame that is still in progress."""
    open_frame = None
    for frame in frames:
        if open_frame is not None and frame.throws:
            raise InvalidFrameShape(
                f"frame {frame.frame_number} has throws but frame {open_frame} is not finished"
            )
        if open_frame is None and not frame_done(frame):
            open_frame = frame.frame_number
