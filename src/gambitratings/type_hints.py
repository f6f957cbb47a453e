"""Type hints used in Gambit Ratings."""

from datetime import date
from typing import TYPE_CHECKING, Callable, Literal, Mapping, Union

if TYPE_CHECKING:
    from gambitratings.models.player.abc_player import PlayerABC

# Player kinds
PlayerKind = Literal["rated", "provisional", "unrated", "foreign"]

# Modes accepted by PlayerABC.new_rating
RatingMode = Literal["start", "opponent", "new"]

# Loosely typed inputs accepted at the package boundary
NumberInput = Union[int, float, str]
ScoreInput = Union[int, float, str]
DateInput = Union[date, str]

# A player given either as an object or by number
PlayerRef = Union["PlayerABC", int, str]

# Callable computing a K-factor from rating, start, dob and joined
KFactorRule = Callable[[Mapping], float]
