"""Main Tournament class - the entry point for rating one event.

Players are registered, game results entered, and then the whole event is
rated in one go. The work is delegated to ResultRecorder and RatingCalculator.
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

from collections.abc import Mapping
from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union

from gambitratings.constants import DEFAULT_PRESET
from gambitratings.controllers.tournament import RatingCalculator, ResultRecorder
from gambitratings.exceptions import DuplicatePlayer, InvalidPlayerNumber
from gambitratings.models.player import PlayerABC, PlayerFactory, icu_kfactor
from gambitratings.type_hints import (
    DateInput,
    KFactorRule,
    NumberInput,
    PlayerRef,
    ScoreInput,
)
from gambitratings.utils import setup_logger
from gambitratings.utils.dates import parse_date
from gambitratings.utils.validation import validate_player_number_strict

from .rating_config import RatingConfig
from .result import Result

logger = setup_logger(__name__)


class Tournament:
    """A single tournament to be rated.

    This class coordinates rating through specialized managers:
    - PlayerFactory: validates player attributes and picks the player kind
    - ResultRecorder: resolves players and stores both sides of each game
    - RatingCalculator: runs the performance and rating passes

    Example:
        >>> t = Tournament(desc="Club Championship", start="2010-07-10")
        >>> rated = t.add_player(1, rating=2000, kfactor=16)
        >>> newcomer = t.add_player(2)
        >>> games = t.add_result(1, 1, 2, "W")
        >>> t.rate()
    """

    def __init__(
        self,
        desc: Any = None,
        start: Optional[DateInput] = None,
        no_bonuses: bool = False,
        kfactor_rule: Optional[KFactorRule] = None,
    ) -> None:
        """Initialize an empty tournament.

        Args
        ----
        desc: Anything describing the event, typically its name
        start: Start date, needed when K-factors are worked out from
            date of birth and membership
        no_bonuses: Never award bonuses
        kfactor_rule: Callable turning K-factor inputs into a K-factor,
            icu_kfactor by default
        """
        self.desc: Any = desc
        self._start: Optional[date] = None
        if start is not None:
            self.start = start
        self._no_bonuses: bool = bool(no_bonuses)
        self.kfactor_rule: KFactorRule = kfactor_rule or icu_kfactor

        self._players: Dict[int, PlayerABC] = {}
        self._iterations1: Optional[int] = None
        self._iterations2: Optional[int] = None

        # Specialized managers
        self.player_factory = PlayerFactory()
        self.result_recorder = ResultRecorder()
        self.rating_calculator = RatingCalculator()

    # ========== Properties ==========

    @property
    def start(self) -> Optional[date]:
        """Get tournament start date."""
        return self._start

    @start.setter
    def start(self, value: DateInput) -> None:
        """Set tournament start date from a date or a date string."""
        self._start = parse_date(value)

    @property
    def no_bonuses(self) -> bool:
        return self._no_bonuses

    @no_bonuses.setter
    def no_bonuses(self, value: Any) -> None:
        self._no_bonuses = bool(value)

    @property
    def iterations1(self) -> Optional[int]:
        """Phase 1 estimation sweeps in the last rating run."""
        return self._iterations1

    @property
    def iterations2(self) -> Optional[int]:
        """Phase 2 estimation sweeps in the last rating run."""
        return self._iterations2

    @property
    def players(self) -> List[PlayerABC]:
        """All players in ascending order of player number."""
        return [self._players[num] for num in sorted(self._players)]

    def player(self, num: Any) -> Optional[PlayerABC]:
        """Get a player by number, or None if there is no such player."""
        try:
            num = validate_player_number_strict(num)
        except InvalidPlayerNumber:
            return None
        return self._players.get(num)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, num: Any) -> bool:
        return self.player(num) is not None

    # ========== Player Management ==========

    def add_player(
        self,
        num: NumberInput,
        rating: Optional[NumberInput] = None,
        kfactor: Any = None,
        games: Optional[NumberInput] = None,
        desc: Any = None,
    ) -> PlayerABC:
        """Register a player.

        Args:
            num: Player number, unique within the tournament
            rating: Rating brought into the tournament
            kfactor: K-factor, or a mapping with ``dob`` and ``joined`` dates
                from which the K-factor rule works it out
            games: Prior games of a provisionally rated player
            desc: Anything, typically the player's name

        Returns:
            The new player

        Raises:
            InvalidPlayerNumber: If the number is malformed
            DuplicatePlayer: If the number is already taken
            MissingKFactorInput: If the K-factor rule lacks an input
            InvalidPlayerCombination: If the attributes fit no player kind
        """
        num = validate_player_number_strict(num)
        if num in self._players:
            raise DuplicatePlayer(num)

        if isinstance(kfactor, Mapping):
            kfactor = self.kfactor_rule(
                {**kfactor, "rating": rating, "start": self._start}
            )

        player = self.player_factory.create_player(
            num, rating=rating, kfactor=kfactor, games=games, desc=desc
        )
        self._players[num] = player
        logger.debug("Added %s player %s", player.kind, num)
        return player

    # ========== Results ==========

    def add_result(
        self,
        round_number: NumberInput,
        player: PlayerRef,
        opponent: PlayerRef,
        score: ScoreInput,
    ) -> Tuple[Result, Result]:
        """Record a game result. See ResultRecorder.record_result."""
        return self.result_recorder.record_result(
            round_number, player, opponent, score, self._players
        )

    # ========== Rating ==========

    def rate(self, config: Union[RatingConfig, str, None] = None) -> None:
        """Rate the tournament.

        Args:
            config: A RatingConfig, the name of a preset ("legacy",
                "converged" or "improved"), or None for the legacy algorithm

        Raises:
            NonConvergence: If performance estimation does not settle
            InvalidConfigurationException: If a preset name is unknown
        """
        if config is None:
            config = RatingConfig.preset(DEFAULT_PRESET)
        elif isinstance(config, str):
            config = RatingConfig.preset(config)

        self._iterations1, self._iterations2 = self.rating_calculator.rate(
            self.players, config, no_bonuses=self._no_bonuses
        )

    def to_dict(self) -> Dict[str, Any]:
        """Summarise the tournament and its rated players."""
        return {
            "desc": self.desc,
            "start": self._start.isoformat() if self._start else None,
            "no_bonuses": self._no_bonuses,
            "iterations1": self._iterations1,
            "iterations2": self._iterations2,
            "players": [p.to_dict() for p in self.players],
        }

    def __repr__(self) -> str:
        return f"Tournament(desc={self.desc!r}, players={len(self._players)})"
