from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class ScoringError(Exception):
    """Base class for scoring engine errors."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def to_problem(self, instance: str | None = None) -> ProblemDetail:
        return ProblemDetail(
            type=self.type,
            title=self.title,
            detail=self.detail,
            status=self.status_code,
            instance=instance,
            code=self.code,
        )


class IllegalThrow(ScoringError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=400,
            title="Illegal throw",
            detail=detail,
            code="illegal_throw",
        )


class InvalidFrameShape(ScoringError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=422,
            title="Invalid frame",
            detail=detail,
            code="invalid_frame_shape",
        )


class InvalidEntry(ScoringError):
    def __init__(self, detail: str, *, code: str = "invalid_entry") -> None:
        super().__init__(
            status_code=422,
            title="Invalid game entry",
            detail=detail,
            code=code,
        )


class UnreachableScore(InvalidEntry):
    """No legal throw sequence matching the supplied total was found."""

    def __init__(self, total: int, strikes: int | None, spares: int | None) -> None:
        counts = []
        if strikes is not None:
            counts.append(f"{strikes} strike(s)")
        if spares is not None:
            counts.append(f"{spares} spare(s)")
        suffix = f" with {' and '.join(counts)}" if counts else ""
        super().__init__(
            f"a score of {total}{suffix} cannot be reconstructed",
            code="unreachable_score",
        )
        self.total = total
        self.strikes = strikes
        self.spares = spares
