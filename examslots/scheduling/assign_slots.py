import logging
from typing import List, Tuple

from ..algorithms.candidate_pool import CandidatePool
from ..models import ExamSlot, ScheduleSet, SchedulingSession
from ..overlap import is_once_a_week
from ..slots import evening_slots, open_regular_slots

logger = logging.getLogger(__name__)


def assign_once_a_week_sets(session: SchedulingSession) -> List[Tuple[ScheduleSet, ExamSlot]]:
    """Put each weekday's evening set into that weekday's evening slot."""
    by_day = {slot.day: slot for slot in evening_slots(session.slots)}
    placed = []
    for day, schedule_set in session.evening_sets.items():
        if not schedule_set.members:
            continue
        slot = by_day.get(day)
        if slot is None:
            raise ValueError(f"No evening slot for weekday {day!r}")
        slot.assign(schedule_set)
        placed.append((schedule_set, slot))
    logger.info("Assigned %d once-a-week sets to evening slots", len(placed))
    return placed


def assign_regular_sets(session: SchedulingSession) -> List[Tuple[ScheduleSet, ExamSlot]]:
    """Randomly pair unscheduled sets with open regular slots until either runs out."""
    cfg = session.config
    sets = CandidatePool(session.unscheduled_sets(), session.rng)
    slots = CandidatePool(open_regular_slots(session.slots), session.rng)
    placed = []
    while True:
        schedule_set = sets.draw()
        if schedule_set is None:
            break
        slot = slots.draw()
        if slot is None:
            break
        if is_once_a_week(schedule_set.days, schedule_set.start,
                          cfg["evening_cutoff"], cfg["saturday_code"]):
            slot.evening = True
        slot.assign(schedule_set)
        placed.append((schedule_set, slot))
    left = len(session.unscheduled_sets())
    if left:
        logger.info("Ran out of regular slots; %d schedule sets left unscheduled", left)
    logger.info("Assigned %d schedule sets to regular slots", len(placed))
    return placed


def create_schedule(session: SchedulingSession) -> SchedulingSession:
    # one-day-a-week classes first
    assign_once_a_week_sets(session)
    assign_regular_sets(session)
    return session
