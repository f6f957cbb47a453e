"""Date parsing and age calculation."""

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

import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as date_parser

from gambitratings.constants import DAYS_PER_YEAR
from gambitratings.exceptions import InvalidDate
from gambitratings.type_hints import DateInput

# d/m/yyyy or m/d/yyyy with any single non-digit separator
_NUMERIC_DATE = re.compile(r"^(\d{1,2})\D(\d{1,2})\D(\d{4})$")
_YEAR_FIRST = re.compile(r"^\d{4}")


def parse_date(value: DateInput) -> date:
    """Parse a date, preferring day/month/year for ambiguous numeric dates.

    Examples:
        >>> parse_date("1955-11-09")
        datetime.date(1955, 11, 9)
        >>> parse_date("02/03/2009")
        datetime.date(2009, 3, 2)
        >>> parse_date("02/23/2009")
        datetime.date(2009, 2, 23)
        >>> parse_date("16th June 1986")
        datetime.date(1986, 6, 16)

    Args:
        value: A date, a datetime or anything whose str() is a date

    Returns:
        The parsed calendar date

    Raises:
        InvalidDate: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not re.search(r"\d", text):
        raise InvalidDate(f"invalid date ({value})")

    match = _NUMERIC_DATE.match(text)
    if match:
        first, second, year = (int(group) for group in match.groups())
        # A middle group above 12 cannot be a month
        month, day = (first, second) if second > 12 else (second, first)
        try:
            return date(year, month, day)
        except ValueError as exc:
            raise InvalidDate(f"invalid date ({value})") from exc

    try:
        dayfirst = not _YEAR_FIRST.match(text)
        return date_parser.parse(text, dayfirst=dayfirst).date()
    except (ValueError, OverflowError) as exc:
        raise InvalidDate(f"invalid date ({value})") from exc


def age_in_years(start: DateInput, reference: Optional[DateInput] = None) -> float:
    """Fractional years from start to reference (default today).

    The day-of-year difference is always divided by 366, whatever the
    years involved. Ages near a birthday can therefore differ slightly from
    a calendar-accurate age; published K-factors depend on this.

    Args:
        start: Earlier date (birth or joining date)
        reference: Later date, today when omitted

    Returns:
        Age in years, negative if reference precedes start
    """
    start_date = parse_date(start)
    reference_date = parse_date(reference) if reference is not None else date.today()
    years = reference_date.year - start_date.year
    days = reference_date.timetuple().tm_yday - start_date.timetuple().tm_yday
    return years + days / DAYS_PER_YEAR
