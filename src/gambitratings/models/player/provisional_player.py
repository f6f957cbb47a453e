"""A player with a provisional rating from a handful of earlier games."""

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

from typing import Any, Optional, Tuple

from gambitratings.constants import KIND_PROVISIONAL, RATING_MODE_NEW
from gambitratings.models.player.abc_player import PlayerABC
from gambitratings.type_hints import RatingMode


class ProvisionalPlayer(PlayerABC):
    """A player whose rating rests on fewer than 20 earlier games.

    The new rating is a performance over the tournament games plus the
    earlier ones, each earlier game counted at the provisional rating.
    """

    kind = KIND_PROVISIONAL

    def __init__(self, num: int, rating: float, games: int, desc: Any = None) -> None:
        super().__init__(num, desc)
        self._rating: float = rating
        self._games: int = games

    @property
    def rating(self) -> float:
        return self._rating

    @property
    def games(self) -> int:
        return self._games

    def new_rating(self, mode: RatingMode = RATING_MODE_NEW) -> Optional[float]:
        return self.performance

    def _prior_games(self) -> Tuple[int, float]:
        return self._games, self._games * self._rating
