import logging
from typing import Dict, List, Optional

import networkx as nx

from .graph_build import build_overlap_graph
from .models import Offering, ScheduleSet, SchedulingSession
from .overlap import is_once_a_week, overlaps, shares_day

logger = logging.getLogger(__name__)


def _once_a_week(session: SchedulingSession, days: str, start) -> bool:
    cfg = session.config
    return is_once_a_week(days, start, cfg["evening_cutoff"], cfg["saturday_code"])


def create_schedule_sets(session: SchedulingSession) -> List[ScheduleSet]:
    """One set per offering, founded by that offering, in offering order.

    A set whose founder is a once-a-week class becomes its weekday's evening
    set; a later founder for the same weekday takes over the designation.
    """
    for offering in session.offerings:
        schedule_set = ScheduleSet.founded_by(offering)
        session.schedule_sets.append(schedule_set)
        session.assigned_to_set[offering] = None
        if _once_a_week(session, schedule_set.days, schedule_set.start):
            session.evening_sets[schedule_set.days] = schedule_set
    logger.info("Created %d schedule sets (%d evening)",
                len(session.schedule_sets), len(session.evening_sets))
    return session.schedule_sets


def find_first_fit(schedule_sets: List[ScheduleSet], offering: Offering) -> Optional[ScheduleSet]:
    for schedule_set in schedule_sets:
        if (len(schedule_set.days) > 1 and                    # keeps evening sets from capturing everything
                shares_day(schedule_set.days, offering.days) and
                overlaps(schedule_set.start, schedule_set.end, offering.start, offering.end)):
            return schedule_set
    return None


def assign_to_schedule_set(session: SchedulingSession, offering: Offering) -> Optional[ScheduleSet]:
    if _once_a_week(session, offering.days, offering.start):
        target = session.evening_sets.get(offering.days)
    else:
        target = find_first_fit(session.schedule_sets, offering)
    if target is None:
        return None
    target.add_member(offering)
    session.assigned_to_set[offering] = target
    return target


def populate_schedule_sets(session: SchedulingSession) -> List[ScheduleSet]:
    unplaced = 0
    for offering in session.offerings:
        if session.assigned_to_set.get(offering) is None:
            if assign_to_schedule_set(session, offering) is None:
                unplaced += 1
    if unplaced:
        logger.info("%d offerings matched no schedule set", unplaced)
    logger.info("Populated %d schedule sets", sum(1 for s in session.schedule_sets if s.members))
    return session.schedule_sets


def cluster_components(session: SchedulingSession) -> List[ScheduleSet]:
    """Alternative clustering: connected components of the overlap graph.

    Once-a-week classes still go to one set per weekday. Every other set is
    founded by the earliest offering of its component.
    """
    position: Dict[Offering, int] = {o: i for i, o in enumerate(session.offerings)}
    regular: List[Offering] = []
    for offering in session.offerings:
        if _once_a_week(session, offering.days, offering.start):
            evening = session.evening_sets.get(offering.days)
            if evening is None:
                evening = ScheduleSet.founded_by(offering)
                session.evening_sets[offering.days] = evening
            evening.add_member(offering)
            session.assigned_to_set[offering] = evening
        else:
            regular.append(offering)

    components = [sorted(c, key=position.__getitem__)
                  for c in nx.connected_components(build_overlap_graph(regular))]
    components.sort(key=lambda c: position[c[0]])
    founded = {s.founder: s for s in session.evening_sets.values()}
    for members in components:
        schedule_set = ScheduleSet.founded_by(members[0])
        for offering in members:
            schedule_set.add_member(offering)
            session.assigned_to_set[offering] = schedule_set
        founded[members[0]] = schedule_set
    session.schedule_sets = sorted(founded.values(), key=lambda s: position[s.founder])
    logger.info("Grouped %d offerings into %d components",
                len(session.offerings), len(session.schedule_sets))
    return session.schedule_sets


def cluster(session: SchedulingSession, strategy: str = 'first_fit') -> List[ScheduleSet]:
    if strategy == 'first_fit':
        create_schedule_sets(session)
        return populate_schedule_sets(session)
    if strategy == 'components':
        return cluster_components(session)
    raise ValueError("strategy must be 'first_fit' or 'components'")
