"""Result recording for rated tournaments.

Each game is entered once and stored twice, once from each side of the board.
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

from typing import Dict, Tuple

from gambitratings.exceptions import UnknownPlayer
from gambitratings.models.player import PlayerABC
from gambitratings.models.tournament.result import Result
from gambitratings.type_hints import NumberInput, PlayerRef, ScoreInput
from gambitratings.utils import setup_logger
from gambitratings.utils.validation import validate_player_number

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles resolving players and recording game results.

    This class is responsible for:
    - Looking up players given either as objects or as player numbers
    - Building the pair of mirrored results for a game
    - Attaching each result to its owner, which enforces the per-round rules
    """

    def record_result(
        self,
        round_number: NumberInput,
        player: PlayerRef,
        opponent: PlayerRef,
        score: ScoreInput,
        players: Dict[int, PlayerABC],
    ) -> Tuple[Result, Result]:
        """Record one game between two tournament players.

        Args:
            round_number: Round the game was played in
            player: Player object or player number
            opponent: Opponent object or player number
            score: The player's score, e.g. "1", "=", 0.5, "L"
            players: Dictionary of all players (num -> player)

        Returns:
            The player's and the opponent's Result objects

        Raises:
            UnknownPlayer: If either player is not in the tournament
            InvalidRound, InvalidScore: If the round or score is malformed
            SelfPlay, InconsistentResult: If the game clashes with the
                players' existing results
        """
        player = self._resolve_player(player, players)
        opponent = self._resolve_player(opponent, players)

        result = Result(round_number, opponent, score)
        mirror = Result(round_number, player, result.opponents_score)

        # both sides are checked before either is attached
        player.check_result(result)
        opponent.check_result(mirror)
        player.add_result(result)
        opponent.add_result(mirror)

        logger.debug(
            "Round %s: %s scored %s against %s",
            result.round,
            player.num,
            result.score,
            opponent.num,
        )
        return result, mirror

    def _resolve_player(
        self, ref: PlayerRef, players: Dict[int, PlayerABC]
    ) -> PlayerABC:
        """Find a player by object or number.

        Player objects must be the ones registered with this tournament.
        """
        if isinstance(ref, PlayerABC):
            if players.get(ref.num) is not ref:
                raise UnknownPlayer(ref.num)
            return ref
        checked = validate_player_number(ref)
        if not checked.is_valid:
            raise UnknownPlayer(ref)
        num = checked.sanitized_value
        player = players.get(num)
        if player is None:
            raise UnknownPlayer(num)
        return player
