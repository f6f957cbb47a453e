"""RatingConfig data class."""

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

from dataclasses import asdict, dataclass
from typing import Any, Dict

from gambitratings.constants import (
    DEFAULT_MAX_ITERATIONS,
    IMPROVED_THRESHOLD,
    LEGACY_PHASE2_ITERATIONS,
    LEGACY_THRESHOLD,
    PRESET_CONVERGED,
    PRESET_IMPROVED,
    PRESET_LEGACY,
)
from gambitratings.exceptions import InvalidConfigurationException


@dataclass(frozen=True)
class RatingConfig:
    """Tuning knobs of the two-phase rating algorithm.

    Attributes
    ----------
    max_iterations_phase1 : int
        Sweep budget for estimating performances before bonuses.
    max_iterations_phase2 : int
        Sweep budget for re-estimating performances once bonuses are in.
        With a budget of 1 a single unchecked sweep is made.
    convergence_threshold : float
        A performance moving by less than this counts as stable.
    allow_phase2_new_bonuses : bool
        Recalculate bonuses once more after the phase 2 estimates. This is
        the legacy scheme, where a player could pick up a bonus only
        because an opponent's bonus raised their performance.
    update_bonuses : bool
        Refresh bonus ratings from the phase 2 rating changes before the
        phase 2 estimates.
    name : str
        Preset name, or "custom".
    """

    max_iterations_phase1: int = DEFAULT_MAX_ITERATIONS
    max_iterations_phase2: int = LEGACY_PHASE2_ITERATIONS
    convergence_threshold: float = LEGACY_THRESHOLD
    allow_phase2_new_bonuses: bool = True
    update_bonuses: bool = False
    name: str = "custom"

    def __post_init__(self) -> None:
        for field_name in ("max_iterations_phase1", "max_iterations_phase2"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise InvalidConfigurationException(
                    f"{field_name} must be a positive integer: {value!r}"
                )
        if self.convergence_threshold <= 0:
            raise InvalidConfigurationException(
                f"convergence_threshold must be positive: {self.convergence_threshold!r}"
            )

    @classmethod
    def preset(cls, name: str) -> "RatingConfig":
        """Look up a named preset: legacy, converged or improved.

        Raises:
            InvalidConfigurationException: If the name is unknown
        """
        try:
            return PRESETS[name.strip().lower()]
        except (KeyError, AttributeError) as exc:
            raise InvalidConfigurationException(
                f"Unknown rating preset: {name!r} "
                f"(expected one of {', '.join(sorted(PRESETS))})"
            ) from exc

    @classmethod
    def for_version(cls, version: int) -> "RatingConfig":
        """Preset matching a numbered algorithm version.

        0 is the legacy algorithm, 1 adds convergence after bonuses and
        2 or later is the improved algorithm.
        """
        version = int(version)
        if version >= 2:
            return PRESETS[PRESET_IMPROVED]
        if version == 1:
            return PRESETS[PRESET_CONVERGED]
        return PRESETS[PRESET_LEGACY]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RatingConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            max_iterations_phase1=data.get(
                "max_iterations_phase1", DEFAULT_MAX_ITERATIONS
            ),
            max_iterations_phase2=data.get(
                "max_iterations_phase2", LEGACY_PHASE2_ITERATIONS
            ),
            convergence_threshold=data.get("convergence_threshold", LEGACY_THRESHOLD),
            allow_phase2_new_bonuses=data.get("allow_phase2_new_bonuses", True),
            update_bonuses=data.get("update_bonuses", False),
            name=data.get("name", "custom"),
        )


PRESETS: Dict[str, RatingConfig] = {
    PRESET_LEGACY: RatingConfig(name=PRESET_LEGACY),
    PRESET_CONVERGED: RatingConfig(
        max_iterations_phase2=DEFAULT_MAX_ITERATIONS,
        name=PRESET_CONVERGED,
    ),
    PRESET_IMPROVED: RatingConfig(
        max_iterations_phase2=DEFAULT_MAX_ITERATIONS,
        convergence_threshold=IMPROVED_THRESHOLD,
        allow_phase2_new_bonuses=False,
        update_bonuses=True,
        name=PRESET_IMPROVED,
    ),
}
