"""A player with a fixed rating from another federation."""

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

from typing import Any

from gambitratings.constants import KIND_FOREIGN, RATING_MODE_NEW
from gambitratings.models.player.abc_player import PlayerABC
from gambitratings.type_hints import RatingMode


class ForeignPlayer(PlayerABC):
    """A player whose rating is used as given and never adjusted.

    Typically a visiting player with a FIDE rating but no local membership.
    A performance is still calculated.
    """

    kind = KIND_FOREIGN

    def __init__(self, num: int, rating: float, desc: Any = None) -> None:
        super().__init__(num, desc)
        self._rating: float = rating

    @property
    def full_rating(self) -> bool:
        return True

    @property
    def rating(self) -> float:
        return self._rating

    def new_rating(self, mode: RatingMode = RATING_MODE_NEW) -> float:
        return self._rating
