from datetime import time

from .models import Offering, parse_time


def overlaps(set_start: time, set_finish: time, start: time, finish: time) -> bool:
    """True if the course's start or finish falls inside the set's closed range."""
    return ((set_start <= start <= set_finish) or
            (set_start <= finish <= set_finish))


def offerings_overlap(a: Offering, b: Offering) -> bool:
    """Symmetric overlap: shared day and either range touching the other."""
    if not shares_day(a.days, b.days):
        return False
    return overlaps(a.start, a.end, b.start, b.end) or overlaps(b.start, b.end, a.start, a.end)


def shares_day(days_a: str, days_b: str) -> bool:
    return bool(set(days_a) & set(days_b))


def is_once_a_week(days: str, start: time, cutoff="05:30PM", saturday: str = "S") -> bool:
    """Single-day classes that meet on Saturday or in the evening."""
    if len(days) != 1:
        return False
    if days.startswith(saturday):
        return True
    if not isinstance(cutoff, time):
        cutoff = parse_time(cutoff)
    return start >= cutoff
