"""Gambit Ratings - rating engine for chess tournaments.

Typical use::

    from gambitratings import Tournament

    t = Tournament(start="2008-02-01")
    t.add_player(1, rating=2000, kfactor=16, desc="Orr, Mark")
    t.add_player(2, rating=1600, games=10)
    t.add_player(3)
    t.add_result(1, 1, 2, "W")
    t.add_result(2, 2, 3, "=")
    t.rate()
    print(t.player(1).new_rating())
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

from gambitratings.models.player import (
    ForeignPlayer,
    PlayerABC,
    PlayerFactory,
    ProvisionalPlayer,
    RatedPlayer,
    UnratedPlayer,
    create_player,
    icu_kfactor,
)
from gambitratings.models.tournament import RatingConfig, Result, Tournament
from gambitratings.utils.dates import parse_date

__version__ = "0.1.0"

__all__ = [
    "Tournament",
    "Result",
    "RatingConfig",
    "PlayerABC",
    "RatedPlayer",
    "ProvisionalPlayer",
    "UnratedPlayer",
    "ForeignPlayer",
    "PlayerFactory",
    "create_player",
    "icu_kfactor",
    "parse_date",
]
