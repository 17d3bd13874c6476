from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    field_validator,
    model_validator,
)

MAX_PINS = 10
MAX_FRAMES = 10
MAX_SCORE = 300

PENDING = "pending"

# (strikes, spares) a finished tenth frame can show
TENTH_FRAME_MARKS = ((0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (3, 0))

EntryMode = Literal["pin_by_pin", "frame_by_frame", "final_score"]

Pins = Annotated[StrictInt, Field(ge=0, le=MAX_PINS)]
CumulativeScore = Union[Annotated[int, Field(ge=0, le=MAX_SCORE)], Literal["pending"]]


class Frame(BaseModel):
    frame_number: int = Field(..., ge=1, le=MAX_FRAMES)
    throws: Tuple[Pins, ...] = Field(default=(), max_length=3)
    cumulative_score: CumulativeScore = 0
    is_complete: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def is_pending(self) -> bool:
        return self.cumulative_score == PENDING


class Cursor(BaseModel):
    current_frame: int = Field(1, ge=1, le=MAX_FRAMES)
    current_throw: int = Field(1, ge=1, le=3)

    model_config = ConfigDict(frozen=True)


class Game(BaseModel):
    frames: Tuple[Frame, ...]
    total_score: int = Field(0, ge=0, le=MAX_SCORE)
    is_complete: bool = False
    entry_mode: EntryMode = "pin_by_pin"
    cursor: Cursor = Cursor()
    strikes: Optional[int] = None
    spares: Optional[int] = None
    notes: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("frames")
    @classmethod
    def _validate_frames(cls, value: Tuple[Frame, ...]) -> Tuple[Frame, ...]:
        if len(value) != MAX_FRAMES:
            raise ValueError(f"a game must have exactly {MAX_FRAMES} frames")
        numbers = [frame.frame_number for frame in value]
        if numbers != list(range(1, MAX_FRAMES + 1)):
            raise ValueError("frames must be numbered 1 to 10 in order")
        return value


class FrameStats(BaseModel):
    strikes: int = 0
    spares: int = 0
    opens: int = 0


class FinalScoreEntry(BaseModel):
    total_score: int = Field(..., ge=0, le=MAX_SCORE)
    strikes: Optional[int] = Field(default=None, ge=0, le=12)
    spares: Optional[int] = Field(default=None, ge=0, le=10)
    notes: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_mark_counts(self) -> "FinalScoreEntry":
        strikes = self.strikes or 0
        spares = self.spares or 0
        fits = any(
            strikes >= tenth_strikes
            and spares >= tenth_spares
            and strikes + spares - tenth_strikes - tenth_spares <= MAX_FRAMES - 1
            for tenth_strikes, tenth_spares in TENTH_FRAME_MARKS
        )
        if not fits:
            raise ValueError(
                f"{strikes} strikes and {spares} spares do not fit in one game"
            )
        return self


class FrameAggregatesEntry(BaseModel):
    values: List[StrictInt] = Field(..., min_length=MAX_FRAMES, max_length=MAX_FRAMES)
    notes: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("values")
    @classmethod
    def _validate_values(cls, value: List[int]) -> List[int]:
        for number, pins in enumerate(value, start=1):
            ceiling = 3 * MAX_PINS if number == MAX_FRAMES else MAX_PINS
            if pins < 0 or pins > ceiling:
                raise ValueError(
                    f"frame {number} pin value must be between 0 and {ceiling}"
                )
        return value
