"""Interface shared by every kind of rated-tournament player."""

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

# lets you refer to a type before it exists, deferring resolution until later.
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from gambitratings.constants import (
    PERFORMANCE_SPREAD,
    RATING_MODE_NEW,
    RATING_MODE_OPPONENT,
)
from gambitratings.exceptions import InconsistentResult, SelfPlay
from gambitratings.type_hints import PlayerKind, RatingMode
from gambitratings.utils import setup_logger

if TYPE_CHECKING:
    from gambitratings.models.tournament.result import Result

logger = setup_logger(__name__)


class PlayerABC(ABC):
    """
    Abstract base class for the four kinds of player a tournament can rate.

    The kinds form a closed set. Each concrete class stores only the
    attributes its kind owns:

    ================== ============= ==========================
    class              kind          own attributes
    ================== ============= ==========================
    RatedPlayer        rated         rating, kfactor, bonus
    ProvisionalPlayer  provisional   rating, games
    UnratedPlayer      unrated       (none)
    ForeignPlayer      foreign       rating
    ================== ============= ==========================

    This base class holds what every kind shares: the player number, an
    opaque description, the round-ordered results and the performance
    figures worked out while the tournament is rated. The read-only
    ``rating``, ``kfactor``, ``games`` and ``bonus`` properties answer
    ``None`` where a kind has no such attribute.

    Attributes
    ----------
    num : int
        Player number, unique within a tournament. May be zero or negative.
    desc : object
        Anything the caller wants to attach, typically a name. Never used
        in calculations.
    performance : float or None
        Tournament performance rating, ``None`` until the player has at
        least one game against an opponent with a usable rating.

    Notes
    -----
    Players are created through :class:`PlayerFactory`, usually via
    ``Tournament.add_player``, and get their results through
    ``Tournament.add_result``.
    """

    kind: PlayerKind

    def __init__(self, num: int, desc: Any = None) -> None:
        self._num: int = num
        self.desc: Any = desc
        self._results: List[Result] = []
        self.performance: Optional[float] = None
        self._estimated_performance: Optional[float] = None

    # ========== Identity ==========

    @property
    def num(self) -> int:
        """Immutable player number."""
        return self._num

    @property
    def full_rating(self) -> bool:
        """Whether the player's rating is fixed for the tournament."""
        return False

    @property
    def rating(self) -> Optional[float]:
        """Rating brought into the tournament, if the kind has one."""
        return None

    @property
    def kfactor(self) -> Optional[float]:
        """K-factor, only held by rated players."""
        return None

    @property
    def games(self) -> Optional[int]:
        """Prior games, only held by provisional players."""
        return None

    @property
    def bonus(self) -> Optional[int]:
        """Bonus, only awarded to rated players."""
        return None

    # ========== Results ==========

    @property
    def results(self) -> List[Result]:
        """The player's results in round order."""
        return list(self._results)

    def check_result(self, result: Result) -> bool:
        """Check a result against those already held, without attaching it.

        Returns:
            True if an equal result is already held for the round

        Raises:
            SelfPlay: If the result's opponent is this player
            InconsistentResult: If the round already holds a different result
        """
        if result.opponent is self:
            raise SelfPlay("players cannot score results against themselves")
        for existing in self._results:
            if existing.round == result.round:
                if existing != result:
                    raise InconsistentResult(result.round)
                return True
        return False

    def add_result(self, result: Result) -> None:
        """Attach a result, keeping the list ordered by round.

        Adding a result equal to the one already held for its round changes
        nothing.

        Raises:
            SelfPlay: If the result's opponent is this player
            InconsistentResult: If the round already holds a different result
        """
        if self.check_result(result):
            logger.debug(
                "Player %s already has this result in round %s",
                self.num,
                result.round,
            )
            return
        self._results.append(result)
        self._results.sort(key=lambda r: r.round)

    @property
    def score(self) -> float:
        """Sum of the player's scores."""
        return sum((r.score for r in self._results), 0.0)

    @property
    def expected_score(self) -> float:
        """Sum of expected scores over all rated results."""
        return sum((r.expected_score or 0.0 for r in self._results), 0.0)

    @property
    def rating_change(self) -> float:
        """Sum of per-game rating changes. Zero except for rated players."""
        return sum((r.rating_change or 0.0 for r in self._results), 0.0)

    # ========== Ratings ==========

    @abstractmethod
    def new_rating(self, mode: RatingMode = RATING_MODE_NEW) -> Optional[float]:
        """The player's rating in the requested mode.

        Args:
            mode: ``start`` for the rating used when rating the player's own
                games, ``opponent`` for the rating opponents see, ``new``
                for the rating after the tournament

        Returns:
            The rating, or ``None`` while the player cannot be rated
        """
        raise NotImplementedError

    def _prior_games(self) -> Tuple[int, float]:
        """Games played before the tournament and their rating total."""
        return 0, 0.0

    def reset(self) -> None:
        """Forget everything worked out by a previous rating run."""
        self.performance = None
        self._estimated_performance = None
        for result in self._results:
            result.reset()

    def estimate_performance(self) -> None:
        """Estimate a performance from opponents' current ratings.

        Games against opponents without a usable rating are skipped. The
        estimate is held back until update_performance() so that every
        player in a sweep sees the same opponent figures.
        """
        games, total = 0, 0.0
        for result in self._results:
            opponent_rating = result.opponent.new_rating(RATING_MODE_OPPONENT)
            if opponent_rating is None:
                continue
            games += 1
            total += opponent_rating + (2 * result.score - 1) * PERFORMANCE_SPREAD
        if games > 0:
            old_games, old_total = self._prior_games()
            self._estimated_performance = (total + old_total) / (games + old_games)

    def update_performance(self, threshold: float) -> bool:
        """Adopt the latest estimate and report whether it had settled.

        Args:
            threshold: Largest change still counted as stable

        Returns:
            True if the performance moved by less than the threshold, or if
            there is still neither a performance nor an estimate
        """
        current, estimate = self.performance, self._estimated_performance
        if current is not None and estimate is not None:
            stable = abs(current - estimate) < threshold
        else:
            stable = current is None and estimate is None
        if estimate is not None:
            self.performance = estimate
        return stable

    def rate(self, update_bonus: bool = False) -> None:
        """Work out expected scores and rating changes for every result."""
        for result in self._results:
            result.rate(self)

    def calculate_bonus(self, allow_new_bonus: bool = True) -> bool:
        """Only rated players can earn a bonus."""
        return False

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Summarise the player's inputs and rating outputs."""
        return {
            "num": self.num,
            "kind": self.kind,
            "desc": self.desc,
            "rating": self.rating,
            "kfactor": self.kfactor,
            "games": self.games,
            "score": self.score,
            "expected_score": self.expected_score,
            "rating_change": self.rating_change,
            "performance": self.performance,
            "new_rating": self.new_rating(),
            "bonus": self.bonus,
        }

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"{type(self).__name__}(num={self.num}, rating={self.rating})"

    def __str__(self) -> str:
        """Return human-readable string representation.

        Example
        -------
            Kasparov, Garry (8)
        """
        if self.desc is not None:
            return f"{self.desc} ({self.num})"
        return f"Player {self.num}"
