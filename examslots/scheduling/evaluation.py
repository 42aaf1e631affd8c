from typing import Optional
import networkx as nx

from ..graph_build import build_overlap_graph
from ..models import SchedulingSession
from .validation import (
    evening_sets_on_own_day, members_overlap_representative,
    no_double_booking, patterns_contiguous, slot_state_consistent,
)


def count_exam_clashes(G: nx.Graph, session: SchedulingSession) -> int:
    """Member pairs sharing a slot whose classes do not overlap.

    A student can be enrolled in both, so both exams land at the same time.
    First-fit clustering only compares members with the set's founder, so
    this can be non-zero.
    """
    clashes = 0
    for slot in session.slots.values():
        s = slot.assigned_set
        if s is None:
            continue
        members = s.members
        for i in range(len(members)):
            for j in range(i + 1, len(members)):
                if not G.has_edge(members[i], members[j]):
                    clashes += 1
    return clashes


def scheduled_members(session: SchedulingSession):
    """Offerings of every set that holds a slot, in slot order."""
    members = []
    for sid in sorted(session.slots):
        s = session.slots[sid].assigned_set
        if s is not None:
            members.extend(s.members)
    return members


def summary(session: SchedulingSession, G: Optional[nx.Graph] = None) -> str:
    # only slot-sharing pairs matter for clashes, so skip unscheduled offerings
    if G is None:
        G = build_overlap_graph(scheduled_members(session))
    n = len(session.offerings)
    m = G.number_of_edges()
    total_slots = len(session.slots)
    used = sum(1 for s in session.slots.values() if s.assigned_set is not None)
    scheduled = sum(1 for s in session.schedule_sets if s.scheduled)
    unscheduled = len(session.schedule_sets) - scheduled
    ok_pat = patterns_contiguous(session.offerings, session.config["weekday_codes"])
    ok_rep = members_overlap_representative(session)
    ok_eve = evening_sets_on_own_day(session)
    ok_state = slot_state_consistent(session) and no_double_booking(session)
    clashes = count_exam_clashes(G, session)
    warning = ""
    if unscheduled:
        warning = (
            f"Warning: slots={total_slots} ran out before sets={len(session.schedule_sets)}; "
            f"{unscheduled} sets have no exam slot.\n"
        )
    return (
        f"Offerings: {n}  In slots: {G.number_of_nodes()}  Overlap edges: {m}\n"
        f"Slots available: {total_slots}  Holding a set: {used}\n"
        f"Schedule sets: {len(session.schedule_sets)}  Scheduled: {scheduled}  Unscheduled: {unscheduled}\n"
        f"Valid (patterns): {ok_pat}  Valid (representatives): {ok_rep}  "
        f"Valid (evening days): {ok_eve}  Valid (slot state): {ok_state}\n"
        f"Exam clashes in shared slots: {clashes}\n"
        f"{warning}"
    )
