from datetime import date

import pytest

from gambitratings.exceptions import MissingKFactorInput
from gambitratings.models.player import icu_kfactor


def _kfactor(**overrides):
    args = {
        "rating": 2000,
        "start": "2010-07-10",
        "dob": "1955-11-09",
        "joined": "1974-01-01",
    }
    args.update(overrides)
    return icu_kfactor(args)


def test_high_rated_players():
    assert _kfactor(rating=2101) == 16
    assert _kfactor(rating=2100) == 16
    assert _kfactor(rating=2099) != 16


def test_juniors():
    assert _kfactor(dob="1989-07-11", joined="1999-01-01") == 40
    assert _kfactor(dob="1989-07-10", joined="1999-01-01") != 40
    assert _kfactor(dob="1989-07-09", joined="1999-01-01") != 40


def test_new_members():
    assert _kfactor(dob="1989-01-01", joined="2002-07-11") == 32
    assert _kfactor(dob="1989-01-01", joined="2002-07-10") != 32
    assert _kfactor(dob="1989-01-01", joined="2002-07-09") != 32


def test_everyone_else():
    assert _kfactor(dob="1989-01-01", joined="2002-01-01") == 24


@pytest.mark.parametrize("missing", ["rating", "start", "dob", "joined"])
def test_missing_inputs(missing):
    with pytest.raises(MissingKFactorInput) as excinfo:
        _kfactor(**{missing: None})
    assert excinfo.value.field == missing


def test_inputs_checked_in_order():
    with pytest.raises(MissingKFactorInput) as excinfo:
        icu_kfactor({"dob": "1989-01-01"})
    assert excinfo.value.field == "rating"


def test_date_objects_mixed_with_strings():
    start = date(2010, 7, 10)
    assert _kfactor(start=start, dob="1989-08-01", joined="1980-01-01") == 40
    assert _kfactor(start="2010-07-10", dob=date(1989, 8, 1), joined="1980-01-01") == 40
    assert _kfactor(start=start, dob="1989-07-09", joined="2002-08-01") == 32
