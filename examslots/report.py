"""
examslots/report.py
===================
Plain-text rendering of the finished schedule: every slot with its set and
member offerings, followed by summary counts.
"""

from dataclasses import dataclass, field
from typing import List

from .models import ExamSlot, ScheduleSet, SchedulingSession, format_time
from .slots import all_slots, filled_slots

SEPARATOR = ";;;;;;;;"


@dataclass
class ScheduleStats:
    total_offerings: int = 0
    slots_used: int = 0
    used_slot_ids: List[str] = field(default_factory=list)
    offerings_in_slots: int = 0
    total_sets: int = 0


def render_schedule_set(schedule_set: ScheduleSet) -> str:
    lines = [
        "",
        schedule_set.id,
        f"From:    {format_time(schedule_set.start)}",
        f"To:      {format_time(schedule_set.end)}",
        f"On:      {schedule_set.days}",
        "In slot: " + (schedule_set.slot.id if schedule_set.slot is not None else "?"),
    ]
    lines += [f"   {member.label}" for member in schedule_set.members]
    return "\n".join(lines) + "\n"


def render_exam_slot(slot: ExamSlot) -> str:
    text = f"\n{slot.id}\n"
    text += "Set of classes assigned to this slot:\n"
    text += "(The set, named after a day/time, includes all classes that overlap.)\n"
    if slot.assigned_set is not None:
        text += render_schedule_set(slot.assigned_set)
    text += SEPARATOR + "\n"
    return text


def render_schedule_sets(session: SchedulingSession) -> str:
    return "".join("\n" + render_schedule_set(s) for s in session.schedule_sets) + ";;;;;\n"


def render_report(session: SchedulingSession) -> str:
    body = "".join(render_exam_slot(slot) for slot in all_slots(session.slots))
    return body + "\nThat's it, folks!\n"


def collect_stats(session: SchedulingSession) -> ScheduleStats:
    used = filled_slots(session.slots)
    return ScheduleStats(
        total_offerings=len(session.offerings),
        slots_used=len(used),
        used_slot_ids=[slot.id for slot in used],
        offerings_in_slots=sum(len(slot.assigned_set.members) for slot in used
                               if slot.assigned_set is not None),
        total_sets=len(session.schedule_sets),
    )


def render_stats(stats: ScheduleStats) -> str:
    lines = [
        SEPARATOR,
        "",
        f"Total course offerings: {stats.total_offerings}",
        "",
        f"Slots used:             {stats.slots_used}",
    ]
    lines += stats.used_slot_ids
    lines += [
        "",
        f"Total offerings in slots: {stats.offerings_in_slots}",
        f"Total schedule sets:      {stats.total_sets}",
    ]
    return "\n".join(lines) + "\n"
