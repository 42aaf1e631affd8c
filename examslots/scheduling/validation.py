from typing import Iterable, Sequence

from ..models import Offering, SchedulingSession
from ..overlap import overlaps, shares_day


def patterns_contiguous(offerings: Iterable[Offering], codes: Sequence[str]) -> bool:
    alphabet = "".join(codes)
    for o in offerings:
        if not o.days or o.days not in alphabet:
            return False
    return True


def members_overlap_representative(session: SchedulingSession) -> bool:
    evening = {id(s) for s in session.evening_sets.values()}
    for s in session.schedule_sets:
        if id(s) in evening:
            continue
        for o in s.members:
            if not shares_day(s.days, o.days):
                return False
            if not overlaps(s.start, s.end, o.start, o.end):
                return False
    return True


def evening_sets_on_own_day(session: SchedulingSession) -> bool:
    for day, s in session.evening_sets.items():
        if not s.members:
            continue
        if s.slot is None or not s.slot.evening or s.slot.day != day:
            return False
    return True


def slot_state_consistent(session: SchedulingSession) -> bool:
    for slot in session.slots.values():
        if slot.evening:
            if not slot.filled:
                return False
        elif slot.filled != (slot.assigned_set is not None):
            return False
    return True


def no_double_booking(session: SchedulingSession) -> bool:
    seen = set()
    for slot in session.slots.values():
        s = slot.assigned_set
        if s is None:
            continue
        if id(s) in seen or s.slot is not slot:
            return False
        seen.add(id(s))
    for s in session.schedule_sets:
        if s.scheduled != (s.slot is not None):
            return False
        if s.slot is not None and s.slot.assigned_set is not s:
            return False
    return True
