from gambitratings.models.player.abc_player import PlayerABC
from gambitratings.models.player.factory import PlayerFactory, create_player
from gambitratings.models.player.foreign_player import ForeignPlayer
from gambitratings.models.player.kfactor import icu_kfactor
from gambitratings.models.player.provisional_player import ProvisionalPlayer
from gambitratings.models.player.rated_player import RatedPlayer
from gambitratings.models.player.unrated_player import UnratedPlayer

__all__ = [
    "PlayerABC",
    "RatedPlayer",
    "ProvisionalPlayer",
    "UnratedPlayer",
    "ForeignPlayer",
    "PlayerFactory",
    "create_player",
    "icu_kfactor",
]
