from datetime import time

import pytest

from examslots.clustering import (
    cluster, create_schedule_sets, find_first_fit, populate_schedule_sets,
)
from examslots.models import Offering, ScheduleSet
from examslots.overlap import is_once_a_week, offerings_overlap, overlaps, shares_day
from examslots.scheduling.validation import members_overlap_representative
from examslots.synthesis import synthesize_offerings


def _clustered(make_session, codes, lines, strategy='first_fit'):
    session = make_session()
    session.offerings = synthesize_offerings(lines, codes)
    cluster(session, strategy)
    return session


def _offering(label):
    return Offering.from_record(label)


def test_overlaps_is_one_sided_closed_interval():
    assert overlaps(time(8), time(9), time(8, 30), time(9, 30))
    assert overlaps(time(8), time(9), time(7), time(8))
    assert overlaps(time(8), time(9), time(9), time(10))
    assert not overlaps(time(8), time(9), time(9, 1), time(10))
    # course wrapping the whole set: neither endpoint inside
    assert not overlaps(time(8), time(9), time(7), time(10))


def test_offerings_overlap_is_symmetric():
    wide = _offering("07:00AM-10:00AM!M")
    narrow = _offering("08:00AM-09:00AM!MW")
    assert offerings_overlap(wide, narrow)
    assert offerings_overlap(narrow, wide)
    assert not offerings_overlap(narrow, _offering("08:00AM-09:00AM!T"))


def test_shares_day():
    assert shares_day("MTW", "WRF")
    assert not shares_day("MT", "RF")


def test_once_a_week_predicate():
    assert is_once_a_week("M", time(17, 30))
    assert is_once_a_week("M", time(19, 0))
    assert not is_once_a_week("M", time(17, 29))
    assert is_once_a_week("S", time(8, 0))
    assert not is_once_a_week("MT", time(20, 0))
    assert not is_once_a_week("FS", time(8, 0))
    assert is_once_a_week("T", time(16, 0), cutoff="04:00PM")


def test_one_set_per_offering_in_order(make_session, codes):
    session = make_session()
    session.offerings = synthesize_offerings(["08:00AM-09:00AM"], codes)
    sets = create_schedule_sets(session)
    assert len(sets) == 21
    assert [s.founder for s in sets] == session.offerings
    assert sets[0].id == "Set-08:00AM-09:00AM!F"
    assert all(not s.members for s in sets)
    assert all(v is None for v in session.assigned_to_set.values())


def test_every_offering_placed_once(make_session, codes):
    session = _clustered(make_session, codes, ["08:00AM-09:00AM"])
    assert all(v is not None for v in session.assigned_to_set.values())
    placed = [m for s in session.schedule_sets for m in s.members]
    assert len(placed) == 21
    assert set(placed) == set(session.offerings)


def test_first_fit_groups(make_session, codes):
    session = _clustered(make_session, codes, ["08:00AM-09:00AM"])
    by_id = {s.id: s for s in session.schedule_sets}
    mt = by_id["Set-08:00AM-09:00AM!MT"]
    assert [m.days for m in mt.members] == [
        "M", "MT", "MTW", "MTWR", "MTWRF", "MTWRFS", "T", "TW", "TWR", "TWRF", "TWRFS"]
    assert [m.days for m in by_id["Set-08:00AM-09:00AM!FS"].members] == ["F", "FS"]
    assert [m.days for m in by_id["Set-08:00AM-09:00AM!MTW"].members] == ["W", "WR", "WRF", "WRFS"]
    assert [m.days for m in by_id["Set-08:00AM-09:00AM!MTWR"].members] == ["R", "RF", "RFS"]
    # single-day daytime founders can never be joined
    assert not by_id["Set-08:00AM-09:00AM!M"].members


def test_overlapping_monday_classes_share_a_set(make_session, codes):
    session = _clustered(make_session, codes, ["08:00AM-09:00AM", "08:30AM-09:30AM"])
    a = session.assigned_to_set[_offering("08:00AM-09:00AM!M")]
    b = session.assigned_to_set[_offering("08:30AM-09:30AM!M")]
    assert a is b


def test_disjoint_times_do_not_share_a_set(make_session, codes):
    session = _clustered(make_session, codes, ["08:00AM-09:00AM", "11:00AM-12:00PM"])
    a = session.assigned_to_set[_offering("08:00AM-09:00AM!M")]
    b = session.assigned_to_set[_offering("11:00AM-12:00PM!M")]
    assert a is not b


def test_members_overlap_representative(make_session, codes):
    lines = ["08:00AM-09:00AM", "08:30AM-09:50AM", "09:40AM-11:00AM", "01:00PM-02:15PM", "06:00PM-08:45PM"]
    session = _clustered(make_session, codes, lines)
    assert members_overlap_representative(session)


def test_saturday_routed_to_evening_set(make_session, codes):
    session = _clustered(make_session, codes, ["10:00AM-11:00AM"])
    assert list(session.evening_sets) == ["S"]
    saturday = session.evening_sets["S"]
    assert [m.label for m in saturday.members] == ["10:00AM-11:00AM!S"]


def test_one_evening_set_per_weekday(make_session, codes):
    session = _clustered(make_session, codes, ["06:00PM-07:00PM", "07:00PM-08:00PM"])
    assert sorted(session.evening_sets) == sorted(codes)
    monday = session.evening_sets["M"]
    # the last qualifying founder holds the designation
    assert monday.founder == _offering("07:00PM-08:00PM!M")
    assert set(monday.members) == {_offering("06:00PM-07:00PM!M"), _offering("07:00PM-08:00PM!M")}
    # the other Monday evening founder keeps an empty set
    other = [s for s in session.schedule_sets if s.founder == _offering("06:00PM-07:00PM!M")][0]
    assert other is not monday
    assert not other.members


def test_find_first_fit_skips_single_day_sets():
    single = ScheduleSet.founded_by(_offering("08:00AM-09:00AM!M"))
    double = ScheduleSet.founded_by(_offering("08:00AM-09:00AM!MT"))
    assert find_first_fit([single, double], _offering("08:15AM-08:45AM!M")) is double
    assert find_first_fit([single], _offering("08:15AM-08:45AM!M")) is None


def test_populate_skips_already_placed(make_session, codes):
    session = make_session()
    session.offerings = synthesize_offerings(["08:00AM-09:00AM"], codes)
    create_schedule_sets(session)
    first = session.offerings[0]
    target = session.schedule_sets[-1]
    session.assigned_to_set[first] = target
    populate_schedule_sets(session)
    assert session.assigned_to_set[first] is target
    assert first not in target.members


def test_components_strategy(make_session, codes):
    session = _clustered(make_session, codes, ["08:00AM-09:00AM", "08:30AM-09:30AM"], strategy='components')
    assert list(session.evening_sets) == ["S"]
    assert len(session.schedule_sets) == 2
    regular = [s for s in session.schedule_sets if s is not session.evening_sets["S"]][0]
    assert len(regular.members) == 40
    assert all(v is not None for v in session.assigned_to_set.values())


def test_components_keep_disjoint_times_apart(make_session, codes):
    session = _clustered(make_session, codes, ["08:00AM-09:00AM", "11:00AM-12:00PM"], strategy='components')
    assert len(session.schedule_sets) == 3


def test_unknown_strategy(make_session):
    with pytest.raises(ValueError):
        cluster(make_session(), 'kmeans')
