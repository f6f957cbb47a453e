from datetime import date, datetime

import pytest

from gambitratings.exceptions import InvalidDate
from gambitratings.utils.dates import age_in_years, parse_date


def test_iso_dates():
    assert parse_date("2001-01-01") == date(2001, 1, 1)
    assert parse_date("1955-11-09") == date(1955, 11, 9)


def test_day_first_preferred_when_ambiguous():
    assert parse_date("02/03/2009") == date(2009, 3, 2)
    assert parse_date("30/03/2009") == date(2009, 3, 30)
    assert parse_date("9/8/2006") == date(2006, 8, 9)


def test_month_first_when_no_alternative():
    assert parse_date("03/30/2009") == date(2009, 3, 30)
    assert parse_date("02/23/2009") == date(2009, 2, 23)


def test_other_separators():
    assert parse_date("02.03.2009") == date(2009, 3, 2)
    assert parse_date("02-03-2009") == date(2009, 3, 2)


def test_month_names():
    assert parse_date("9th Nov 1955") == date(1955, 11, 9)
    assert parse_date("16th June 1986") == date(1986, 6, 16)


def test_date_objects_pass_through():
    assert parse_date(date(2013, 7, 1)) == date(2013, 7, 1)
    assert parse_date(datetime(2013, 7, 1, 12, 30)) == date(2013, 7, 1)


@pytest.mark.parametrize("value", ["2010-13-32", "31/02/2009", "", "no date here"])
def test_invalid_dates(value):
    with pytest.raises(InvalidDate, match="invalid date"):
        parse_date(value)


def test_age_in_years():
    assert age_in_years("1989-07-10", "2010-07-10") == pytest.approx(21.0)
    assert age_in_years("1989-07-11", "2010-07-10") < 21
    assert age_in_years("2010-07-10", "1989-07-10") == pytest.approx(-21.0)


def test_age_in_years_uses_fixed_year_length():
    # 1 Jan to 31 Dec of the same year is 364 days in a non-leap year
    assert age_in_years("2009-01-01", "2009-12-31") == pytest.approx(364 / 366.0)


def test_iso_dates_keep_month_and_day():
    assert parse_date("2010-07-10") == date(2010, 7, 10)
    assert parse_date("1989-08-01") == date(1989, 8, 1)
    assert parse_date("2002/03/04") == date(2002, 3, 4)


def test_iso_strings_agree_with_date_objects():
    from_strings = age_in_years("1989-08-01", "2010-07-10")
    assert age_in_years(date(1989, 8, 1), "2010-07-10") == pytest.approx(from_strings)
    assert age_in_years("1989-08-01", date(2010, 7, 10)) == pytest.approx(from_strings)
    assert 20 < from_strings < 21
