import pytest

from gambitratings.exceptions import (
    InvalidGames,
    InvalidKFactor,
    InvalidPlayerNumber,
    InvalidRating,
    InvalidRound,
    InvalidScore,
)
from gambitratings.utils import round_half_away
from gambitratings.utils.validation import (
    leading_float,
    leading_int,
    validate_games,
    validate_games_strict,
    validate_kfactor_strict,
    validate_player_number,
    validate_player_number_strict,
    validate_rating_strict,
    validate_round_strict,
    validate_score,
    validate_score_strict,
)


def test_leading_numbers():
    assert leading_int(" 12abc") == 12
    assert leading_int("-3") == -3
    assert leading_int("abc") == 0
    assert leading_float(" 2000.5 ") == 2000.5
    assert leading_float("x") == 0.0


def test_player_numbers():
    assert validate_player_number_strict(1) == 1
    assert validate_player_number_strict("  0  ") == 0
    assert validate_player_number_strict(" -1 ") == -1
    assert not validate_player_number("abc").is_valid
    with pytest.raises(InvalidPlayerNumber, match="invalid player num"):
        validate_player_number_strict("")


def test_ratings():
    assert validate_rating_strict(" 1000 ") == 1000.0
    assert validate_rating_strict(1234.5) == 1234.5
    assert validate_rating_strict(0) == 0.0
    assert validate_rating_strict(-1) == -1.0
    with pytest.raises(InvalidRating):
        validate_rating_strict("high")


def test_kfactors_must_be_positive():
    assert validate_kfactor_strict(" 10.0 ") == 10.0
    for bad in (0, -1, "none"):
        with pytest.raises(InvalidKFactor, match="invalid player k-factor"):
            validate_kfactor_strict(bad)


def test_games_range():
    assert validate_games_strict(1) == 1
    assert validate_games_strict("  15  ") == 15
    assert validate_games_strict(19) == 19
    assert not validate_games(20).is_valid
    for bad in (0, 20, 21, "x"):
        with pytest.raises(InvalidGames):
            validate_games_strict(bad)


def test_rounds_must_be_positive():
    assert validate_round_strict("3") == 3
    for bad in (0, -1, "first"):
        with pytest.raises(InvalidRound, match="invalid round number"):
            validate_round_strict(bad)


@pytest.mark.parametrize(
    "token,expected",
    [
        ("W", 1.0),
        ("w", 1.0),
        (1, 1.0),
        (1.0, 1.0),
        ("+", 1.0),
        ("D", 0.5),
        ("d", 0.5),
        ("½", 0.5),
        ("=", 0.5),
        (0.5, 0.5),
        ("L", 0.0),
        ("l", 0.0),
        (0, 0.0),
        (0.0, 0.0),
        ("-", 0.0),
        (" W ", 1.0),
    ],
)
def test_score_tokens(token, expected):
    assert validate_score_strict(token) == expected


@pytest.mark.parametrize("token", ["", "X", "2", True, False, None])
def test_invalid_scores(token):
    assert not validate_score(token).is_valid
    with pytest.raises(InvalidScore, match="invalid score"):
        validate_score_strict(token)


def test_round_half_away():
    assert round_half_away(0.5) == 1
    assert round_half_away(1.5) == 2
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(2.4) == 2


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_rejected(value):
    assert leading_int(value) == 0
    assert leading_float(value) == 0.0
    with pytest.raises(InvalidPlayerNumber):
        validate_player_number_strict(value)
    with pytest.raises(InvalidRound):
        validate_round_strict(value)
    with pytest.raises(InvalidGames):
        validate_games_strict(value)
    with pytest.raises(InvalidRating):
        validate_rating_strict(value)
    with pytest.raises(InvalidKFactor):
        validate_kfactor_strict(value)


def test_overflowing_strings_rejected():
    with pytest.raises(InvalidRating):
        validate_rating_strict("1e999")
    with pytest.raises(InvalidKFactor):
        validate_kfactor_strict("1e999")
