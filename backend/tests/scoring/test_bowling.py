import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from app.scoring.bowling import (
    Frame,
    InvalidRollToken,
    Mark,
    Roll,
    ScoreCard,
    parse_roll_token,
    score_rolls,
)

MIXED_GAME = ["X", 0, 0, "X", "X", 1, "/", 5, "/", 0, 0, "X", 0, 0, "X", 0, 0]


@pytest.mark.parametrize(
    "rolls, expected",
    [
        (["X"] * 12, 300),
        ([0] * 20, 0),
        ([0] * 18 + ["X", "X", "X"], 30),
        (MIXED_GAME, 96),
        ([4, 5, "X", 8], 9),
        ([4, 5, "X", 8, 1], 37),
        ([], 0),
    ],
)
def test_total_score(rolls, expected):
    card = ScoreCard(rolls)
    assert card.calculate() == expected
    assert card.score == expected


@pytest.mark.parametrize(
    "rolls, expected",
    [
        (MIXED_GAME, [10, 0, 21, 20, 15, 10, 0, 10, 0, 10, 0]),
        ([4, 5, "X", 8], [9, None, None]),
        ([4, 5, "X", 8, 1], [9, 19, 9]),
        ([0] * 20, [0] * 10),
        (["X"] * 12, [30] * 10 + [None, None]),
    ],
)
def test_frame_scores(rolls, expected):
    card = score_rolls(rolls)
    assert card.get_frame_scores() == expected


def test_frames_are_grouped_from_tokens():
    card = ScoreCard([3, "/", "X", 7, 2, 6])
    frames = card.frames

    assert [f.index for f in frames] == [0, 1, 2, 3]
    assert frames[0].first.outcome == 3 and frames[0].second.outcome is Mark.SPARE
    assert frames[1].is_strike and frames[1].second is None
    assert (frames[2].first.points, frames[2].second.points) == (7, 2)
    # trailing single ball becomes an unfinished frame
    assert frames[3].first.points == 6 and frames[3].second is None


def test_spare_needs_next_frame():
    assert score_rolls([3, "/"]).get_frame_scores() == [None]
    card = score_rolls([3, "/", 4])
    assert card.get_frame_scores() == [14, None]
    assert card.score == 14


def test_strike_followed_by_unfinished_frame_is_undetermined():
    card = score_rolls(["X", 5])
    assert card.get_frame_scores() == [None, None]
    assert card.score == 0


def test_double_strike_waits_for_third_ball():
    assert score_rolls(["X", "X"]).get_frame_scores() == [None, None]
    assert score_rolls(["X", "X", 4]).get_frame_scores() == [24, None, None]


def test_undetermined_is_not_zero():
    card = score_rolls([0, 0, "X"])
    scores = card.get_frame_scores()
    assert scores[0] == 0
    assert scores[1] is None


def test_scores_before_calculate_are_unset():
    card = ScoreCard([4, 5])
    assert card.get_frame_scores() == [None]
    assert card.score == 0


def test_calculate_twice_does_not_double_count():
    card = ScoreCard(MIXED_GAME)
    card.calculate()
    first = card.get_frame_scores()
    assert card.calculate() == 96
    assert card.get_frame_scores() == first


def test_get_frame_scores_is_stable():
    card = score_rolls([4, 5, "X", 8, 1])
    assert card.get_frame_scores() == card.get_frame_scores()


@pytest.mark.parametrize(
    "rolls, bad_token",
    [
        ([0, 1, 2, 3, 4, 186282, "Light"], 186282),
        ([None], None),
        ([10], 10),
        ([-1], -1),
        ([1, "Light"], "Light"),
        (["x"], "x"),
        ([True], True),
        ([2.5], 2.5),
        (["5"], "5"),
    ],
)
def test_invalid_tokens_are_rejected(rolls, bad_token):
    with pytest.raises(InvalidRollToken) as excinfo:
        ScoreCard(rolls)
    assert excinfo.value.token == bad_token
    assert excinfo.value.position == rolls.index(bad_token)


def test_spare_without_first_ball_is_rejected():
    with pytest.raises(InvalidRollToken, match="position 0"):
        ScoreCard(["/"])
    with pytest.raises(InvalidRollToken, match="position 2"):
        ScoreCard([3, "/", "/"])
    with pytest.raises(InvalidRollToken):
        ScoreCard(["X", "/"])


def test_strike_as_second_ball_is_rejected():
    with pytest.raises(InvalidRollToken) as excinfo:
        ScoreCard([5, "X"])
    assert excinfo.value.position == 1


def test_invalid_roll_token_is_value_error():
    with pytest.raises(ValueError, match="expected 0-9"):
        parse_roll_token("Light")


def test_parse_roll_token():
    assert parse_roll_token("X") is Mark.STRIKE
    assert parse_roll_token("/") is Mark.SPARE
    assert parse_roll_token(0) == 0
    assert parse_roll_token(9) == 9


def test_roll_points():
    first = Roll(7)
    assert first.calculate() == 7
    spare = Roll(Mark.SPARE)
    assert spare.calculate(first) == 3
    assert spare.pins == 3
    assert Roll(Mark.STRIKE).calculate() == 10


def test_frame_resolves_roll_points_on_construction():
    frame = Frame(0, Roll(2), Roll(Mark.SPARE))
    assert frame.first.points == 2
    assert frame.second.points == 8
    assert frame.total_points is None


def test_frame_rendering():
    card = score_rolls(["X", 3, "/", 4])
    lines = str(card).splitlines()
    assert lines[0] == "Frame 1: X - points=20"
    assert lines[1] == "Frame 2: 3 / points=14"
    assert lines[2] == "Frame 3: 4 - points=?"
    assert lines[-1] == "Bowling Score: 34"
