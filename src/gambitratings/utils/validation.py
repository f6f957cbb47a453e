"""Validation utilities for Gambit Ratings.

Player and result attributes arrive from files, databases or forms, often as
whitespace-padded strings. This module coerces them with consistent error
handling: every ``validate_*`` function returns a ValidationResult and every
``validate_*_strict`` function returns the clean value or raises.
"""

# Gambit Ratings
# Copyright (C) 2025  Gambit Ratings developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import math
import re
from typing import Any, Optional

from gambitratings.constants import (
    DRAW_SCORE,
    DRAW_TOKENS,
    LOSS_SCORE,
    LOSS_TOKENS,
    MAX_PROVISIONAL_GAMES,
    WIN_SCORE,
    WIN_TOKENS,
)
from gambitratings.exceptions import (
    InvalidGames,
    InvalidKFactor,
    InvalidPlayerNumber,
    InvalidRating,
    InvalidRound,
    InvalidScore,
)

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def leading_int(value: Any) -> int:
    """Read the integer at the start of a value, 0 if there is none."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def leading_float(value: Any) -> float:
    """Read the number at the start of a value, 0.0 if there is none."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0
    match = _LEADING_FLOAT.match(str(value))
    if not match:
        return 0.0
    number = float(match.group(1))
    return number if math.isfinite(number) else 0.0


def _looks_like_zero(value: Any) -> bool:
    match = _LEADING_FLOAT.match(str(value))
    return bool(match) and float(match.group(1)) == 0.0


# ========== Player Attribute Validation ==========


def validate_player_number(num: Any) -> ValidationResult:
    """Validate a player number. Zero and negative numbers are allowed.

    Args:
        num: Number, or a string holding one (padding is fine)

    Returns:
        ValidationResult with the integer as sanitized value
    """
    value = leading_int(num)
    if value == 0 and not _looks_like_zero(num):
        return ValidationResult(
            is_valid=False,
            error_message=f"invalid player num ({num})",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_player_number_strict(num: Any) -> int:
    """Validate a player number and return it or raise InvalidPlayerNumber."""
    result = validate_player_number(num)
    if not result.is_valid:
        raise InvalidPlayerNumber(result.error_message)
    return result.sanitized_value


def validate_rating(rating: Any) -> ValidationResult:
    """Validate a rating. Any number is accepted, including zero and negatives.

    Args:
        rating: Number, or a string holding one

    Returns:
        ValidationResult with the rating as a float
    """
    value = leading_float(rating)
    if value == 0.0 and not _looks_like_zero(rating):
        return ValidationResult(
            is_valid=False,
            error_message=f"invalid player rating ({rating})",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_rating_strict(rating: Any) -> float:
    """Validate a rating and return it or raise InvalidRating."""
    result = validate_rating(rating)
    if not result.is_valid:
        raise InvalidRating(result.error_message)
    return result.sanitized_value


def validate_kfactor(kfactor: Any) -> ValidationResult:
    """Validate a K-factor, which must be strictly positive."""
    value = leading_float(kfactor)
    if value <= 0.0:
        return ValidationResult(
            is_valid=False,
            error_message=f"invalid player k-factor ({kfactor})",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_kfactor_strict(kfactor: Any) -> float:
    """Validate a K-factor and return it or raise InvalidKFactor."""
    result = validate_kfactor(kfactor)
    if not result.is_valid:
        raise InvalidKFactor(result.error_message)
    return result.sanitized_value


def validate_games(games: Any) -> ValidationResult:
    """Validate the number of games behind a provisional rating (1 to 19)."""
    value = leading_int(games)
    if value <= 0 or value > MAX_PROVISIONAL_GAMES:
        return ValidationResult(
            is_valid=False,
            error_message=f"invalid number of games ({games})",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_games_strict(games: Any) -> int:
    """Validate a provisional game count and return it or raise InvalidGames."""
    result = validate_games(games)
    if not result.is_valid:
        raise InvalidGames(result.error_message)
    return result.sanitized_value


# ========== Result Validation ==========


def validate_round(round_number: Any) -> ValidationResult:
    """Validate a round number, which must be a positive integer."""
    value = leading_int(round_number)
    if value <= 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"invalid round number ({round_number})",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_round_strict(round_number: Any) -> int:
    """Validate a round number and return it or raise InvalidRound."""
    result = validate_round(round_number)
    if not result.is_valid:
        raise InvalidRound(result.error_message)
    return result.sanitized_value


def validate_score(score: Any) -> ValidationResult:
    """Validate a game score given as a number or a letter.

    Accepts W/w/1/1.0/+ for a win, D/d/½/=/0.5 for a draw and
    L/l/0/0.0/- for a loss, with optional surrounding whitespace.

    Args:
        score: Score to validate

    Returns:
        ValidationResult with 1.0, 0.5 or 0.0 as sanitized value
    """
    if isinstance(score, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"invalid score ({score})",
        )

    token = str(score).strip()
    if token in WIN_TOKENS:
        return ValidationResult(is_valid=True, sanitized_value=WIN_SCORE)
    if token in DRAW_TOKENS:
        return ValidationResult(is_valid=True, sanitized_value=DRAW_SCORE)
    if token in LOSS_TOKENS:
        return ValidationResult(is_valid=True, sanitized_value=LOSS_SCORE)

    return ValidationResult(
        is_valid=False,
        error_message=f"invalid score ({score})",
    )


def validate_score_strict(score: Any) -> float:
    """Validate a score and return it as a float or raise InvalidScore."""
    result = validate_score(score)
    if not result.is_valid:
        raise InvalidScore(result.error_message)
    return result.sanitized_value
