from typing import Dict, List

from .models import ExamSlot


def create_exam_slots(config: dict) -> Dict[str, ExamSlot]:
    """Evening slot for every weekday plus the regular slots of each exam day."""
    slots: Dict[str, ExamSlot] = {}
    for day in config["weekday_codes"]:
        label = day + config["evening_suffix"]
        sid = f"ExamSlot-{label}"
        slots[sid] = ExamSlot(id=sid, day=day, label=label, evening=True)
    for day in config["exam_days"]:
        for suffix in config["regular_slots"]:
            label = day + suffix
            sid = f"ExamSlot-{label}"
            slots[sid] = ExamSlot(id=sid, day=day, label=label, evening=False)
    return slots


def all_slots(slots: Dict[str, ExamSlot]) -> List[ExamSlot]:
    return [slots[sid] for sid in sorted(slots)]


def evening_slots(slots: Dict[str, ExamSlot]) -> List[ExamSlot]:
    return [s for s in slots.values() if s.evening]


def open_regular_slots(slots: Dict[str, ExamSlot]) -> List[ExamSlot]:
    return [s for s in slots.values() if not s.filled and not s.evening]


def filled_slots(slots: Dict[str, ExamSlot]) -> List[ExamSlot]:
    return [s for s in all_slots(slots) if s.filled]
