"""Ten-pin bowling score card built from a flat sequence of roll tokens.

Tokens are the integers ``0``-``9``, ``"X"`` for a strike and ``"/"`` for a
spare.  Rolls are grouped into frames, and each frame is scored with the usual
strike/spare look-ahead into the frames that follow it.  A frame whose bonus
rolls have not been bowled yet is *undetermined* and reported as ``None``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

ALL_PINS = 10


class Mark(str, Enum):
    STRIKE = "X"
    SPARE = "/"

    def __str__(self) -> str:
        return self.value


RollOutcome = Union[Mark, int]


class InvalidRollToken(ValueError):
    """Raised when a roll token is not 0-9, ``X`` or ``/``."""

    def __init__(self, token: Any, position: Optional[int] = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"invalid roll token {token!r}{where}: expected 0-9, '/' or 'X'"
        )
        self.token = token
        self.position = position


def parse_roll_token(token: Any, position: Optional[int] = None) -> RollOutcome:
    """Return the outcome a token stands for or raise ``InvalidRollToken``."""

    if isinstance(token, str):
        if token == Mark.STRIKE.value:
            return Mark.STRIKE
        if token == Mark.SPARE.value:
            return Mark.SPARE
    # bool is a subclass of int and is rejected on purpose
    elif isinstance(token, int) and not isinstance(token, bool):
        if 0 <= token < ALL_PINS:
            return token
    logger.debug("Rejected roll token %r at position %s", token, position)
    raise InvalidRollToken(token, position)


@dataclass
class Roll:
    outcome: RollOutcome
    points: int = 0

    @property
    def is_strike(self) -> bool:
        return self.outcome is Mark.STRIKE

    @property
    def is_spare(self) -> bool:
        return self.outcome is Mark.SPARE

    @property
    def pins(self) -> int:
        """Pins knocked down by this ball alone."""
        if isinstance(self.outcome, Mark):
            return self.points
        return self.outcome

    def calculate(self, previous: Optional["Roll"] = None) -> int:
        if self.is_strike:
            self.points = ALL_PINS
        elif self.is_spare:
            if previous is None:
                raise InvalidRollToken(Mark.SPARE.value)
            self.points = ALL_PINS - previous.pins
        else:
            self.points = self.outcome
        return self.points

    def __str__(self) -> str:
        return str(self.outcome)


@dataclass
class Frame:
    """One or two rolls; ``second`` is ``None`` for a strike or an unfinished frame."""

    index: int
    first: Roll
    second: Optional[Roll] = None
    total_points: Optional[int] = None

    def __post_init__(self) -> None:
        self.first.calculate(None)
        if self.second is not None:
            self.second.calculate(self.first)

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def is_strike(self) -> bool:
        return self.first.is_strike

    @property
    def is_spare(self) -> bool:
        return self.second is not None and self.second.is_spare

    def compute_total(self, frames: Sequence["Frame"]) -> Optional[int]:
        """Resolve ``total_points`` using the rolls of later frames.

        Frames are read by position and never modified.  The total stays
        ``None`` while the bonus rolls it needs are missing.
        """

        following = frames[self.index + 1] if len(frames) > self.index + 1 else None

        if self.is_strike:
            self.total_points = None
            if following is None:
                return None
            bonus = following.first.points
            if following.second is not None:
                bonus += following.second.points
            elif len(frames) > self.index + 2:
                bonus += frames[self.index + 2].first.points
            else:
                return None
            self.total_points = ALL_PINS + bonus
        elif self.is_spare:
            if following is None:
                self.total_points = None
            else:
                self.total_points = ALL_PINS + following.first.points
        elif self.second is None:
            self.total_points = None
        else:
            self.total_points = self.first.points + self.second.points
        return self.total_points

    def __str__(self) -> str:
        second = self.second if self.second is not None else "-"
        points = self.total_points if self.total_points is not None else "?"
        return f"Frame {self.number}: {self.first} {second} points={points}"


class ScoreCard:
    """Groups roll tokens into frames and totals the game.

    Construction validates every token and fails on the first bad one, so a
    ``ScoreCard`` that exists always holds a well formed frame list.  Call
    :meth:`calculate` before reading scores.
    """

    def __init__(self, rolls: Sequence[Any]) -> None:
        self.rolls: Tuple[Any, ...] = tuple(rolls)
        self.score = 0
        frames: List[Frame] = []
        carry: Optional[int] = None

        for position, token in enumerate(self.rolls):
            outcome = parse_roll_token(token, position)
            if outcome is Mark.STRIKE:
                if carry is not None:
                    # a strike cannot be the second ball of a frame
                    raise InvalidRollToken(token, position)
                frames.append(Frame(len(frames), Roll(Mark.STRIKE)))
            elif outcome is Mark.SPARE:
                if carry is None:
                    raise InvalidRollToken(token, position)
                frames.append(Frame(len(frames), Roll(carry), Roll(Mark.SPARE)))
                carry = None
            elif carry is not None:
                frames.append(Frame(len(frames), Roll(carry), Roll(outcome)))
                carry = None
            else:
                carry = outcome

        if carry is not None:
            frames.append(Frame(len(frames), Roll(carry)))

        self._frames: Tuple[Frame, ...] = tuple(frames)

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return self._frames

    def calculate(self) -> int:
        """Score every frame in order and return the aggregate.

        The aggregate is reset first, so calling this again gives the same
        result.  Undetermined frames add nothing.
        """

        self.score = 0
        for frame in self._frames:
            total = frame.compute_total(self._frames)
            if total is not None:
                self.score += total
        logger.debug(
            "Scored %d frame(s) from %d roll(s): total=%d",
            len(self._frames),
            len(self.rolls),
            self.score,
        )
        return self.score

    def get_frame_scores(self) -> List[Optional[int]]:
        return [frame.total_points for frame in self._frames]

    def __str__(self) -> str:
        lines = [str(frame) for frame in self._frames]
        lines.append(f"Bowling Score: {self.score}")
        return "\n".join(lines)


def score_rolls(rolls: Sequence[Any]) -> ScoreCard:
    """Build and calculate a score card in one step."""

    card = ScoreCard(rolls)
    card.calculate()
    return card


# Engine contract shared with the other sports: init_state / apply / summary.

def init_state(config: Dict) -> Dict:
    return {"config": config, "rolls": []}


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    token = event.get("roll")
    rolls = state["rolls"]
    # validates the token in the context of the frames bowled so far
    ScoreCard([*rolls, token])
    rolls.append(token)
    return state


def summary(state: Dict) -> Dict:
    card = score_rolls(state["rolls"])
    return {
        "rolls": list(card.rolls),
        "frames": [
            [str(frame.first)]
            + ([str(frame.second)] if frame.second is not None else [])
            for frame in card.frames
        ],
        "scores": card.get_frame_scores(),
        "total": card.score,
    }
