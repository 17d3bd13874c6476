"""Legal pin counts for the next ball of a frame."""
from typing import Sequence

from ..exceptions import IllegalThrow
from ..schemas import MAX_FRAMES, MAX_PINS


def _tenth_allows_bonus(throws: Sequence[int]) -> bool:
    first, second = throws[0], throws[1]
    return first == MAX_PINS or first + second == MAX_PINS


def can_accept_throw(throws: Sequence[int], frame_number: int) -> bool:
    """Return ``True`` if another ball may be rolled in this frame."""
    count = len(throws)
    if frame_number < MAX_FRAMES:
        if count == 0:
            return True
        return count == 1 and throws[0] != MAX_PINS
    if count < 2:
        return True
    if count == 2:
        return _tenth_allows_bonus(throws)
    return False


def max_legal_pins(throws: Sequence[int], frame_number: int) -> int:
    """Return the most pins the next ball of the frame can knock down.

    Returns 0 when the frame cannot take another ball; use
    :func:`can_accept_throw` to tell that apart from a legitimate zero.
    """
    if not can_accept_throw(throws, frame_number):
        return 0
    count = len(throws)
    if count == 0:
        return MAX_PINS
    if frame_number < MAX_FRAMES:
        return MAX_PINS - throws[0]
    if count == 1:
        # pins are reset after a first-ball strike
        return MAX_PINS if throws[0] == MAX_PINS else MAX_PINS - throws[0]
    first, second = throws[0], throws[1]
    if first == MAX_PINS:
        return MAX_PINS if second == MAX_PINS else MAX_PINS - second
    # spare: fresh rack for the bonus ball
    return MAX_PINS


def validate_throw(throws: Sequence[int], frame_number: int, pins) -> int:
    """Check ``pins`` against the frame and return it unchanged.

    Raises :class:`IllegalThrow` instead of clamping.
    """
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise IllegalThrow(f"pins must be an integer (got {pins!r})")
    if not can_accept_throw(throws, frame_number):
        raise IllegalThrow(f"frame {frame_number} cannot accept another throw")
    ceiling = max_legal_pins(throws, frame_number)
    if pins < 0 or pins > ceiling:
        raise IllegalThrow(
            f"frame {frame_number} throw {len(throws) + 1} must be between 0 and {ceiling} (got {pins})"
        )
    return pins
