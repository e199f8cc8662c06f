from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .scoring.bowling import Frame, ScoreCard


class ScoreCardCreate(BaseModel):
    # Tokens are validated by the score card itself so the offending value
    # can be reported verbatim.
    rolls: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class FrameOut(BaseModel):
    frame: int
    first: str
    second: Optional[str] = None
    points: Optional[int] = None

    @classmethod
    def from_frame(cls, frame: Frame) -> "FrameOut":
        return cls(
            frame=frame.number,
            first=str(frame.first),
            second=str(frame.second) if frame.second is not None else None,
            points=frame.total_points,
        )


class ScoreCardOut(BaseModel):
    frames: List[FrameOut]
    frame_scores: List[Optional[int]]
    total: int
    display: str

    @classmethod
    def from_card(cls, card: ScoreCard) -> "ScoreCardOut":
        return cls(
            frames=[FrameOut.from_frame(frame) for frame in card.frames],
            frame_scores=card.get_frame_scores(),
            total=card.score,
            display=str(card),
        )
