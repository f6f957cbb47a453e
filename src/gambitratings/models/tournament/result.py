"""A single game result from one player's side."""

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

from __future__ import annotations

from typing import Any, Optional

from gambitratings.constants import (
    ELO_SCALE,
    KIND_RATED,
    RATING_MODE_OPPONENT,
    RATING_MODE_START,
)
from gambitratings.exceptions import InvalidOpponent
from gambitratings.models.player.abc_player import PlayerABC
from gambitratings.utils.validation import validate_round_strict, validate_score_strict


def expected_score(rating: float, opponent_rating: float) -> float:
    """Elo expected score of a player against an opponent.

    Returns a value in (0, 1); 0.5 for equal ratings.
    """
    return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / ELO_SCALE))


class Result:
    """The outcome of one game as seen by one of the two players.

    Each game is stored twice, once in each player's results, each copy
    pointing at the other player as its opponent. Results are created by
    ``Tournament.add_result`` and never change afterwards, apart from the
    figures filled in when the tournament is rated.

    Attributes
    ----------
    round : int
        Round number, 1 or more.
    opponent : PlayerABC
        The other player in the game.
    score : float
        1.0 for a win, 0.5 for a draw, 0.0 for a loss.
    expected_score : float or None
        Elo expected score, ``None`` until rated or if the game is
        unratable because one side has no usable rating.
    rating_change : float or None
        Rating change from this game, only for rated players.
    """

    def __init__(self, round_number: Any, opponent: Any, score: Any) -> None:
        self._round: int = validate_round_strict(round_number)
        if not isinstance(opponent, PlayerABC):
            raise InvalidOpponent(
                f"invalid opponent class ({type(opponent).__name__})"
            )
        self._opponent: PlayerABC = opponent
        self._score: float = validate_score_strict(score)
        self.expected_score: Optional[float] = None
        self.rating_change: Optional[float] = None

    @property
    def round(self) -> int:
        return self._round

    @property
    def opponent(self) -> PlayerABC:
        return self._opponent

    @property
    def score(self) -> float:
        return self._score

    @property
    def opponents_score(self) -> float:
        """The score from the opponent's side of the board."""
        return 1.0 - self._score

    def reset(self) -> None:
        self.expected_score = None
        self.rating_change = None

    def rate(self, owner: PlayerABC) -> None:
        """Fill in expected score and rating change for the owning player.

        Args:
            owner: The player this result belongs to
        """
        owner_rating = owner.new_rating(RATING_MODE_START)
        opponent_rating = self._opponent.new_rating(RATING_MODE_OPPONENT)
        if owner_rating is None or opponent_rating is None:
            return
        self.expected_score = expected_score(owner_rating, opponent_rating)
        if owner.kind == KIND_RATED:
            self.rating_change = (self._score - self.expected_score) * owner.kfactor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (
            self._round == other._round
            and self._opponent is other._opponent
            and self._score == other._score
        )

    def __hash__(self) -> int:
        return hash((self._round, id(self._opponent), self._score))

    def __repr__(self) -> str:
        return (
            f"Result(round={self._round}, opponent={self._opponent.num}, "
            f"score={self._score})"
        )
