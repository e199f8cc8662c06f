from __future__ import annotations

import logging

from fastapi import APIRouter

from ..config import MAX_ROLLS_PER_CARD
from ..exceptions import InvalidRolls, TooManyRolls
from ..schemas import ScoreCardCreate, ScoreCardOut
from ..scoring.bowling import InvalidRollToken, score_rolls

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bowling", tags=["bowling"])


# POST /api/v0/bowling/scorecards
@router.post("/scorecards", response_model=ScoreCardOut)
def create_scorecard(body: ScoreCardCreate) -> ScoreCardOut:
    if len(body.rolls) > MAX_ROLLS_PER_CARD:
        raise TooManyRolls(len(body.rolls), MAX_ROLLS_PER_CARD)

    try:
        card = score_rolls(body.rolls)
    except InvalidRollToken as exc:
        logger.info("Rejected score card: %s", exc)
        raise InvalidRolls(exc.token, exc.position, str(exc)) from exc

    return ScoreCardOut.from_card(card)
