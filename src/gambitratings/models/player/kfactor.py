"""K-factor rule for rated players."""

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

from typing import Any, Mapping

from gambitratings.constants import (
    JUNIOR_AGE_LIMIT,
    KFACTOR_HIGH_RATED,
    KFACTOR_JUNIOR,
    KFACTOR_NEW_MEMBER,
    KFACTOR_RATING_THRESHOLD,
    KFACTOR_STANDARD,
    NEW_MEMBER_YEARS,
)
from gambitratings.exceptions import MissingKFactorInput
from gambitratings.utils.dates import age_in_years
from gambitratings.utils.validation import validate_rating_strict

KFACTOR_INPUTS = ("rating", "start", "dob", "joined")


def icu_kfactor(args: Mapping[str, Any]) -> int:
    """Calculate a K-factor from rating, age and experience.

    * 16 for players rated 2100 and over, otherwise
    * 40 for players aged under 21 at the start of the tournament, otherwise
    * 32 for players who have been members for less than 8 years, otherwise
    * 24

    Args:
        args: Mapping with ``rating``, ``start`` (tournament start date),
            ``dob`` (date of birth) and ``joined`` (membership date). Dates
            may be strings.

    Returns:
        The K-factor

    Raises:
        MissingKFactorInput: If any of the four inputs is missing
    """
    for name in KFACTOR_INPUTS:
        if args.get(name) is None:
            raise MissingKFactorInput(name)

    rating = validate_rating_strict(args["rating"])
    if rating >= KFACTOR_RATING_THRESHOLD:
        return KFACTOR_HIGH_RATED
    if age_in_years(args["dob"], args["start"]) < JUNIOR_AGE_LIMIT:
        return KFACTOR_JUNIOR
    if age_in_years(args["joined"], args["start"]) < NEW_MEMBER_YEARS:
        return KFACTOR_NEW_MEMBER
    return KFACTOR_STANDARD
