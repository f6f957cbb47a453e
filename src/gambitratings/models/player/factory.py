"""Factory for creating players of the right kind with validation.

This module implements the Factory pattern for player creation,
providing a single point of entry that validates the loosely typed
attributes and picks the player kind from which of them are present.
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

from typing import Any

from gambitratings.exceptions import InvalidPlayerCombination
from gambitratings.models.player.abc_player import PlayerABC
from gambitratings.models.player.foreign_player import ForeignPlayer
from gambitratings.models.player.provisional_player import ProvisionalPlayer
from gambitratings.models.player.rated_player import RatedPlayer
from gambitratings.models.player.unrated_player import UnratedPlayer
from gambitratings.utils import setup_logger
from gambitratings.utils.validation import (
    validate_games_strict,
    validate_kfactor_strict,
    validate_player_number_strict,
    validate_rating_strict,
)

logger = setup_logger(__name__)


class PlayerFactory:
    """Factory for creating RatedPlayer, ProvisionalPlayer, UnratedPlayer
    and ForeignPlayer instances.

    The kind follows from which of ``rating``, ``kfactor`` and ``games``
    are given:

    ======== ======== ======== ==============
    rating   kfactor  games    kind
    ======== ======== ======== ==============
    yes      yes      no       rated
    yes      no       yes      provisional
    yes      no       no       foreign
    no       no       no       unrated
    ======== ======== ======== ==============

    Any other combination is rejected.

    Example:
        >>> factory = PlayerFactory()
        >>> factory.create_player(1, rating=2000, kfactor=16).kind
        'rated'
        >>> factory.create_player(" 2 ", rating=" 1600 ", games="10").kind
        'provisional'
    """

    def create_player(
        self,
        num: Any,
        rating: Any = None,
        kfactor: Any = None,
        games: Any = None,
        desc: Any = None,
    ) -> PlayerABC:
        """Validate player attributes and create a player of the matching kind.

        Args:
            num: Player number (integer or string)
            rating: Rating, for rated, provisional and foreign players
            kfactor: K-factor, for rated players only
            games: Number of earlier games, for provisional players only
            desc: Optional description, any object

        Returns:
            A player of the kind implied by the attributes

        Raises:
            InvalidPlayerNumber: If num is not an integer
            InvalidRating: If rating is not a number
            InvalidKFactor: If kfactor is not positive
            InvalidGames: If games is not between 1 and 19
            InvalidPlayerCombination: If the attributes match no kind
        """
        num = validate_player_number_strict(num)
        if rating is not None:
            rating = validate_rating_strict(rating)
        if kfactor is not None:
            kfactor = validate_kfactor_strict(kfactor)
        if games is not None:
            games = validate_games_strict(games)

        has_rating = rating is not None
        has_kfactor = kfactor is not None
        has_games = games is not None

        if has_rating and has_kfactor and not has_games:
            player = RatedPlayer(num, rating, kfactor, desc=desc)
        elif has_rating and not has_kfactor and has_games:
            player = ProvisionalPlayer(num, rating, games, desc=desc)
        elif has_rating and not has_kfactor and not has_games:
            player = ForeignPlayer(num, rating, desc=desc)
        elif not has_rating and not has_kfactor and not has_games:
            player = UnratedPlayer(num, desc=desc)
        else:
            raise InvalidPlayerCombination(
                f"invalid combination of player attributes for player {num}"
            )

        logger.debug("Created %s player %s", player.kind, num)
        return player


# Global factory instance for convenience
default_factory = PlayerFactory()


def create_player(num: Any, **kwargs: Any) -> PlayerABC:
    """Convenience function to create a player using the default factory.

    Example:
        >>> player = create_player(1, rating=2000, kfactor=16)
    """
    return default_factory.create_player(num, **kwargs)
