from datetime import date

import pytest

from gambitratings import Tournament
from gambitratings.exceptions import (
    DuplicatePlayer,
    InconsistentResult,
    InvalidDate,
    InvalidPlayerCombination,
    InvalidPlayerNumber,
    MissingKFactorInput,
    SelfPlay,
    UnknownPlayer,
)


def _three_player_tournament():
    t = Tournament()
    for num in (10, 20, 30):
        t.add_player(num)
    t.add_result(1, 10, 20, "W")
    return t


def test_optional_attributes():
    t = Tournament(desc="Irish Championship 2010", start="02/03/2010")
    assert t.desc == "Irish Championship 2010"
    assert t.start == date(2010, 3, 2)
    assert not t.no_bonuses
    assert t.iterations1 is None
    assert t.iterations2 is None

    t = Tournament()
    assert t.desc is None
    assert t.start is None


def test_setters():
    t = Tournament()
    t.desc = 1
    t.start = "2010-07-10"
    t.no_bonuses = "yes"
    assert t.desc == 1
    assert t.start == date(2010, 7, 10)
    assert t.no_bonuses is True
    with pytest.raises(InvalidDate):
        t.start = "2010-13-32"


def test_players_in_number_order():
    t = Tournament()
    for num in (3, -1, 2, 0):
        t.add_player(num)
    assert [p.num for p in t.players] == [-1, 0, 2, 3]
    assert len(t) == 4


def test_player_lookup():
    t = Tournament()
    p = t.add_player(2, rating=1500)
    assert t.player(2) is p
    assert t.player(" 2 ") is p
    assert t.player(1) is None
    assert t.player("nobody") is None
    assert 2 in t
    assert 5 not in t


def test_string_attributes_with_padding():
    t = Tournament()
    p = t.add_player("  0  ", rating="  2000.5  ", kfactor="  20.5  ")
    assert p.num == 0
    assert isinstance(p.num, int)
    assert p.rating == 2000.5
    assert isinstance(p.rating, float)
    assert p.kfactor == 20.5
    p = t.add_player("  -1  ", rating="  2000.5  ", games="  15  ")
    assert p.games == 15
    assert isinstance(p.games, int)


def test_player_kinds():
    t = Tournament()
    assert t.add_player(3, rating=2000, kfactor=16).kind == "rated"
    assert t.add_player(4, rating=1600, games=10).kind == "provisional"
    assert t.add_player(5).kind == "unrated"
    assert t.add_player(6, rating=2500).kind == "foreign"
    with pytest.raises(InvalidPlayerCombination):
        t.add_player(7, rating=2000, kfactor=16, games=10)
    with pytest.raises(InvalidPlayerCombination):
        t.add_player(7, kfactor=16)
    assert 7 not in t


def test_duplicate_player():
    t = Tournament()
    t.add_player(1)
    t.add_player(2)
    with pytest.raises(DuplicatePlayer) as excinfo:
        t.add_player(" 2 ", rating=1500)
    assert excinfo.value.num == 2


def test_invalid_player_number():
    with pytest.raises(InvalidPlayerNumber):
        Tournament().add_player("abc")


def test_kfactor_worked_out_from_dates():
    t = Tournament(start="2010-07-10")
    cases = [
        (2101, "1989-07-11", "1999-01-01", 16),
        (2000, "1989-07-11", "1999-01-01", 40),
        (2000, "1955-11-09", "2002-07-11", 32),
        (2000, "1955-11-09", "1974-01-01", 24),
    ]
    for num, (rating, dob, joined, expected) in enumerate(cases, start=1):
        p = t.add_player(num, rating=rating, kfactor={"dob": dob, "joined": joined})
        assert p.kfactor == expected


def test_kfactor_needs_start_date():
    t = Tournament()
    with pytest.raises(MissingKFactorInput) as excinfo:
        t.add_player(1, rating=2000, kfactor={"dob": "1989-07-11", "joined": "1999-01-01"})
    assert excinfo.value.field == "start"


def test_custom_kfactor_rule():
    seen = {}

    def flat_rule(args):
        seen.update(args)
        return 20

    t = Tournament(start="2010-07-10", kfactor_rule=flat_rule)
    p = t.add_player(1, rating=1800, kfactor={"club": "Bray"})
    assert p.kfactor == 20
    assert seen == {"club": "Bray", "rating": 1800, "start": date(2010, 7, 10)}


def test_result_added_to_both_players():
    t = Tournament()
    p1 = t.add_player(1)
    p2 = t.add_player(2)
    r1, r2 = t.add_result(1, 1, 2, "W")

    assert p1.results == [r1]
    assert r1.round == 1
    assert r1.opponent is p2
    assert r1.score == 1.0

    assert p2.results == [r2]
    assert r2.round == 1
    assert r2.opponent is p1
    assert r2.score == 0.0


def test_players_by_object_or_number():
    t = Tournament()
    p1 = t.add_player(1)
    t.add_player(2)
    t.add_result(1, p1, 2, "D")
    assert t.player(2).results[0].opponent is p1


def test_unknown_players():
    t = Tournament()
    t.add_player(1)
    with pytest.raises(UnknownPlayer, match=r"no such player number \(2\)") as excinfo:
        t.add_result(1, 1, 2, "W")
    assert excinfo.value.num == 2
    with pytest.raises(UnknownPlayer):
        t.add_result(1, 3, 1, "W")
    assert t.player(1).results == []


def test_player_from_another_tournament_is_unknown():
    other = Tournament()
    stranger = other.add_player(2)
    t = Tournament()
    t.add_player(1)
    t.add_player(2)
    with pytest.raises(UnknownPlayer):
        t.add_result(1, 1, stranger, "W")


def test_same_result_twice_changes_nothing():
    t = _three_player_tournament()
    t.add_result(1, 20, 10, "L")
    t.add_result(1, 10, 20, "W")
    assert len(t.player(10).results) == 1
    assert len(t.player(20).results) == 1


def test_different_results_in_same_round():
    t = _three_player_tournament()
    with pytest.raises(InconsistentResult, match="inconsistent"):
        t.add_result(1, 10, 30, "W")
    with pytest.raises(InconsistentResult, match="inconsistent"):
        t.add_result(1, 10, 20, "L")


def test_no_results_against_self():
    t = _three_player_tournament()
    with pytest.raises(SelfPlay):
        t.add_result(2, 10, 10, "D")


def test_results_in_round_order():
    t = Tournament()
    for num in range(5):
        t.add_player(num)
    for rnd in (3, 1):
        t.add_result(rnd, 0, rnd, "W")
    for rnd in (4, 2):
        t.add_result(rnd, 0, rnd, "L")
    assert [r.round for r in t.player(0).results] == [1, 2, 3, 4]


def test_before_rating():
    t = Tournament()
    for num in range(1, 3):
        t.add_player(num, kfactor=10 * num, rating=2200 - 100 * (num - 1))
    t.add_result(1, 1, 2, "W")
    for p in t.players:
        assert p.expected_score == 0.0
        assert p.rating_change == 0.0
        assert p.new_rating() == p.rating


def test_to_dict():
    t = Tournament(desc="Club", start="2010-07-10")
    t.add_player(1, rating=1500)
    data = t.to_dict()
    assert data["desc"] == "Club"
    assert data["start"] == "2010-07-10"
    assert [p["num"] for p in data["players"]] == [1]


def test_iso_start_date_and_kfactor():
    t = Tournament(start="2010-07-10")
    assert t.start == date(2010, 7, 10)
    p = t.add_player(
        1, rating=1500, kfactor={"dob": "1989-08-01", "joined": "1980-01-01"}
    )
    assert p.kfactor == 40


def test_rejected_result_leaves_neither_side_changed():
    t = Tournament()
    for num in (1, 2, 3):
        t.add_player(num)
    t.add_result(1, 1, 2, "W")
    with pytest.raises(InconsistentResult):
        t.add_result(1, 3, 1, "W")
    assert t.player(3).results == []
    assert [r.opponent.num for r in t.player(1).results] == [2]
    with pytest.raises(InconsistentResult):
        t.add_result(1, 1, 3, "W")
    assert t.player(3).results == []


@pytest.mark.parametrize("num", [float("nan"), float("inf")])
def test_non_finite_player_number(num):
    with pytest.raises(InvalidPlayerNumber):
        Tournament().add_player(num)
