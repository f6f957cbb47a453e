"""Exceptions for use in Gambit Ratings"""

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

from typing import Any, Optional

# ========== Base Application Exception ==========


class GambitRatingsException(Exception):
    """Base exception for all Gambit Ratings errors.

    All custom exceptions in the package inherit from this class.
    This enables catching all rating-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(GambitRatingsException):
    """Base exception for input validation errors."""

    pass


class InvalidPlayerNumber(ValidationException):
    """Raised when a player number cannot be read as an integer."""

    pass


class InvalidRating(ValidationException):
    """Raised when a rating cannot be read as a number."""

    pass


class InvalidKFactor(ValidationException):
    """Raised when a K-factor is not a positive number."""

    pass


class InvalidGames(ValidationException):
    """Raised when a provisional game count is outside 1 to 19."""

    pass


class InvalidRound(ValidationException):
    """Raised when a round number is not a positive integer."""

    pass


class InvalidScore(ValidationException):
    """Raised when a score is not a recognised win, draw or loss."""

    pass


class InvalidDate(ValidationException):
    """Raised when a date string cannot be parsed."""

    pass


class MissingKFactorInput(ValidationException):
    """Raised when a K-factor calculation lacks one of its inputs."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing {field} for K-factor calculation")
        self.field = field


# ========== Player Exceptions ==========


class PlayerException(GambitRatingsException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerCombination(PlayerException):
    """Raised when rating, K-factor and games do not describe a player kind."""

    pass


# ========== Result Exceptions ==========


class ResultException(GambitRatingsException):
    """Base exception for result recording errors."""

    pass


class InvalidOpponent(ResultException):
    """Raised when a result's opponent is not a player."""

    pass


class InconsistentResult(ResultException):
    """Raised when a round already holds a different result."""

    def __init__(self, round_number: int) -> None:
        super().__init__(f"inconsistent result in round {round_number}")
        self.round = round_number


class SelfPlay(ResultException):
    """Raised when a player is given a result against themselves."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(GambitRatingsException):
    """Base exception for tournament-related errors."""

    pass


class DuplicatePlayer(TournamentException):
    """Raised when attempting to add a player number that already exists."""

    def __init__(self, num: int) -> None:
        super().__init__(f"player with number {num} already exists")
        self.num = num


class UnknownPlayer(TournamentException):
    """Raised when a player number is not in the tournament."""

    def __init__(self, num: Any) -> None:
        super().__init__(f"no such player number ({num})")
        self.num = num


# ========== Rating Exceptions ==========


class RatingException(GambitRatingsException):
    """Base exception for errors raised while rating a tournament."""

    pass


class NonConvergence(RatingException):
    """Raised when performance estimation does not stabilise in time."""

    def __init__(self, iterations: int, phase: Optional[int] = None) -> None:
        where = f" in phase {phase}" if phase is not None else ""
        super().__init__(
            f"performance rating estimation did not converge{where} "
            f"after {iterations} iterations"
        )
        self.iterations = iterations
        self.phase = phase


# ========== Configuration Exceptions ==========


class ConfigurationException(GambitRatingsException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when rating configuration data is invalid."""

    pass
