"""Two-phase performance and rating calculation for one tournament."""

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

from typing import List, Tuple

from gambitratings.exceptions import NonConvergence
from gambitratings.models.player import PlayerABC
from gambitratings.models.tournament.rating_config import RatingConfig
from gambitratings.utils import setup_logger

logger = setup_logger(__name__)


class RatingCalculator:
    """Rates every player of a tournament.

    Phase 1 estimates a performance for each player from the opponents'
    ratings, repeating until the estimates settle, and then works out
    expected scores and rating changes. Phase 2 runs only when at least one
    rated player earns a bonus: opponents of a bonus earner are re-rated
    against the boosted rating, and performances are estimated again.

    The calculator keeps no state of its own between runs, so rating the
    same players twice gives the same answer.
    """

    def rate(
        self,
        players: List[PlayerABC],
        config: RatingConfig,
        no_bonuses: bool = False,
    ) -> Tuple[int, int]:
        """Rate all players.

        Args:
            players: Every player in the tournament
            config: Iteration budgets, threshold and bonus options
            no_bonuses: Skip phase 2 entirely

        Returns:
            Number of estimation sweeps in phase 1 and in phase 2

        Raises:
            NonConvergence: If performances do not settle within the budget
        """
        for player in players:
            player.reset()

        iterations1 = self._iterate(
            players, config.max_iterations_phase1, config.convergence_threshold, 1
        )
        for player in players:
            player.rate()

        bonuses = 0
        iterations2 = 0
        if not no_bonuses:
            bonuses = self._calculate_bonuses(players, allow_new_bonus=True)
        if bonuses > 0:
            for player in players:
                player.rate(update_bonus=config.update_bonuses)
            iterations2 = self._iterate(
                players, config.max_iterations_phase2, config.convergence_threshold, 2
            )
            if config.allow_phase2_new_bonuses:
                bonuses = self._calculate_bonuses(players, allow_new_bonus=True)

        logger.info(
            "Rated %d players with %s preset: %d + %d iterations, %d bonuses",
            len(players),
            config.name,
            iterations1,
            iterations2,
            bonuses,
        )
        return iterations1, iterations2

    def _iterate(
        self,
        players: List[PlayerABC],
        max_iterations: int,
        threshold: float,
        phase: int,
    ) -> int:
        """Re-estimate performances until every player is stable.

        Every player is updated on every sweep, even once one is found to
        have moved. A budget of a single sweep is never checked.
        """
        stable, count = False, 0
        while not stable and count < max_iterations:
            for player in players:
                player.estimate_performance()
            stable = True
            for player in players:
                stable = player.update_performance(threshold) and stable
            count += 1
        if max_iterations > 1 and not stable:
            logger.error(
                "Performance estimation did not converge in phase %d after %d "
                "iterations (threshold %s)",
                phase,
                count,
                threshold,
            )
            raise NonConvergence(count, phase=phase)
        return count

    def _calculate_bonuses(self, players: List[PlayerABC], allow_new_bonus: bool) -> int:
        """Give each player the chance of a bonus, returning how many got one."""
        return sum(
            1 for player in players if player.calculate_bonus(allow_new_bonus)
        )
