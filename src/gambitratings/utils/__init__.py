"""Shared helpers for Gambit Ratings."""

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

import logging
import math

PACKAGE_LOGGER = "gambitratings"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module of this package.

    Handlers are left to the application; the package logger only carries a
    NullHandler so that library use stays silent by default.

    Args:
        name: Usually the calling module's __name__

    Returns:
        The configured logger
    """
    return logging.getLogger(name)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's round() sends halves to the even neighbour; rating figures
    published by the federation were produced with halves going up.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
