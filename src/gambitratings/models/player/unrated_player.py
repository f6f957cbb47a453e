"""A player with no rating and no rated games."""

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

from typing import Optional

from gambitratings.constants import KIND_UNRATED, RATING_MODE_NEW
from gambitratings.models.player.abc_player import PlayerABC
from gambitratings.type_hints import RatingMode


class UnratedPlayer(PlayerABC):
    """A newcomer, rated purely on tournament performance."""

    kind = KIND_UNRATED

    def new_rating(self, mode: RatingMode = RATING_MODE_NEW) -> Optional[float]:
        return self.performance
