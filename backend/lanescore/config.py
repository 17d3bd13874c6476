import logging
import os

logger = logging.getLogger(__name__)

ENTRY_MODES = ("pin_by_pin", "frame_by_frame", "final_score")


def _canon_entry_mode(val):
    """
    Normalize an entry mode name:
      - defaults to 'pin_by_pin' when unset/empty
      - lower-cases and accepts dashes in place of underscores
      - falls back to the default for unknown modes
    """
    val = (val or "pin_by_pin").strip().lower().replace("-", "_")
    if val not in ENTRY_MODES:
        logger.warning(
            "LANESCORE_DEFAULT_ENTRY_MODE %r is not one of %s; defaulting to pin_by_pin",
            val,
            ", ".join(ENTRY_MODES),
        )
        return "pin_by_pin"
    return val


DEFAULT_ENTRY_MODE = _canon_entry_mode(os.getenv("LANESCORE_DEFAULT_ENTRY_MODE"))
