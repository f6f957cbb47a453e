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

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Accepted spellings of each outcome (compared after str() and strip())
WIN_TOKENS = ("1", "1.0", "W", "w", "+")
DRAW_TOKENS = ("0.5", "½", "=", "D", "d")
LOSS_TOKENS = ("0", "0.0", "L", "l", "-")

# Player kinds
KIND_RATED = "rated"
KIND_PROVISIONAL = "provisional"
KIND_UNRATED = "unrated"
KIND_FOREIGN = "foreign"

# Which rating new_rating() reports
RATING_MODE_START = "start"  # rating the player brought into the tournament
RATING_MODE_OPPONENT = "opponent"  # rating opponents see, bonus included
RATING_MODE_NEW = "new"  # rating after the tournament

# Elo
ELO_SCALE = 400.0
PERFORMANCE_SPREAD = 400.0

# Provisional players with 20 or more games hold a full rating
MAX_PROVISIONAL_GAMES = 19

# K-factor rule
KFACTOR_RATING_THRESHOLD = 2100
KFACTOR_HIGH_RATED = 16
KFACTOR_JUNIOR = 40
KFACTOR_NEW_MEMBER = 32
KFACTOR_STANDARD = 24
JUNIOR_AGE_LIMIT = 21
NEW_MEMBER_YEARS = 8
DAYS_PER_YEAR = 366.0

# Bonus scheme
BONUS_RATING_CEILING = 2100
BONUS_MIN_KFACTOR = 24  # K-factor must exceed this
BONUS_MIN_RESULTS = 4  # number of results must exceed this
BONUS_MIN_CHANGE = 35  # rating change must exceed this
BONUS_BASE_THRESHOLD = 32
BONUS_THRESHOLD_PER_GAME = 3
BONUS_JUNIOR_KFACTOR = 40
BONUS_JUNIOR_MULTIPLIER = 1.25

# Algorithm presets
PRESET_LEGACY = "legacy"
PRESET_CONVERGED = "converged"
PRESET_IMPROVED = "improved"
DEFAULT_PRESET = PRESET_LEGACY

DEFAULT_MAX_ITERATIONS = 30
LEGACY_PHASE2_ITERATIONS = 1
LEGACY_THRESHOLD = 0.5
IMPROVED_THRESHOLD = 0.1
