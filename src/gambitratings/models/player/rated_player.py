"""A player with a full rating and a K-factor."""

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

from gambitratings.constants import (
    BONUS_BASE_THRESHOLD,
    BONUS_JUNIOR_KFACTOR,
    BONUS_JUNIOR_MULTIPLIER,
    BONUS_MIN_CHANGE,
    BONUS_MIN_KFACTOR,
    BONUS_MIN_RESULTS,
    BONUS_RATING_CEILING,
    BONUS_THRESHOLD_PER_GAME,
    KIND_RATED,
    RATING_MODE_NEW,
    RATING_MODE_OPPONENT,
    RATING_MODE_START,
)
from gambitratings.models.player.abc_player import PlayerABC
from gambitratings.type_hints import RatingMode
from gambitratings.utils import round_half_away, setup_logger

logger = setup_logger(__name__)


class RatedPlayer(PlayerABC):
    """A player holding a full rating, adjusted by K-factor after the event.

    Rated players are the only kind whose rating changes by the Elo formula
    and the only kind that can earn a bonus for an exceptional result.

    Attributes:
        bonus_rating: Rating including the bonus, set only when a bonus was
            granted. Opponents are rated against this figure.
        pb_rating: Rounded rating plus change before any bonus, recorded
            whenever the player was considered for a bonus
        pb_performance: Rounded performance at the same moment
    """

    kind = KIND_RATED

    def __init__(
        self, num: int, rating: float, kfactor: float, desc: Any = None
    ) -> None:
        super().__init__(num, desc)
        self._rating: float = rating
        self._kfactor: float = kfactor
        self._bonus: int = 0
        self.bonus_rating: Optional[float] = None
        self.pb_rating: Optional[int] = None
        self.pb_performance: Optional[int] = None

    @property
    def full_rating(self) -> bool:
        return True

    @property
    def rating(self) -> float:
        return self._rating

    @property
    def kfactor(self) -> float:
        return self._kfactor

    @property
    def bonus(self) -> int:
        return self._bonus

    def new_rating(self, mode: RatingMode = RATING_MODE_NEW) -> Optional[float]:
        if mode == RATING_MODE_START:
            return self._rating
        if mode == RATING_MODE_OPPONENT:
            return self.bonus_rating if self.bonus_rating is not None else self._rating
        return self._rating + self.rating_change + self._bonus

    def reset(self) -> None:
        super().reset()
        self._bonus = 0
        self.bonus_rating = None
        self.pb_rating = None
        self.pb_performance = None

    def rate(self, update_bonus: bool = False) -> None:
        """Rate every result, optionally refreshing an existing bonus rating.

        Args:
            update_bonus: Recompute the bonus rating from the current rating
                change. A bonus is never granted or removed here.
        """
        super().rate(update_bonus)
        if update_bonus and self.bonus_rating is not None and self._bonus > 0:
            self.bonus_rating = self._rating + self._bonus + self.rating_change

    def calculate_bonus(self, allow_new_bonus: bool = True) -> bool:
        """Award a bonus for a rating gain well beyond expectations.

        Intermediate figures are rounded at the same points as the legacy
        rating database, which the published ratings depend on.

        Args:
            allow_new_bonus: If False, no bonus is granted or recalculated; a
                bonus already held only has its bonus rating refreshed

        Returns:
            True if a bonus was granted, or refreshed while new bonuses are
            refused
        """
        num_results = len(self._results)
        if (
            self._kfactor <= BONUS_MIN_KFACTOR
            or num_results <= BONUS_MIN_RESULTS
            or self._rating >= BONUS_RATING_CEILING
        ):
            return False

        change = self.rating_change
        self.pb_rating = round_half_away(self._rating + change)
        if self.performance is not None:
            self.pb_performance = round_half_away(self.performance)

        if not allow_new_bonus:
            if self._bonus <= 0:
                return False
            self.bonus_rating = self._rating + change + self._bonus
            return True
        if change <= BONUS_MIN_CHANGE or self._rating + change >= BONUS_RATING_CEILING:
            return False

        threshold = BONUS_BASE_THRESHOLD + BONUS_THRESHOLD_PER_GAME * (
            num_results - BONUS_MIN_RESULTS
        )
        bonus = round_half_away(change - threshold)
        if bonus <= 0:
            return False
        if self._kfactor >= BONUS_JUNIOR_KFACTOR:
            bonus = round_half_away(BONUS_JUNIOR_MULTIPLIER * bonus)

        for ceiling in (BONUS_RATING_CEILING, self.performance):
            if ceiling is None:
                continue
            if self._rating + change + bonus >= ceiling:
                bonus = round_half_away(ceiling - self._rating - change)
        if bonus <= 0:
            return False

        self._bonus = bonus
        self.bonus_rating = self._rating + change + bonus
        logger.debug(
            "Player %s earned a bonus of %d (change %.1f)", self.num, bonus, change
        )
        return True

    def to_dict(self):
        data = super().to_dict()
        data.update(
            {
                "bonus_rating": self.bonus_rating,
                "pb_rating": self.pb_rating,
                "pb_performance": self.pb_performance,
            }
        )
        return data
