import random
from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Dict, List, Optional, Tuple

TIME_FORMATS = ("%I:%M%p", "%I:%M %p", "%H:%M")


def parse_time(text) -> Optional[time]:
    """Parse '08:00AM', '08:00 AM' or '20:00' into a time, None if unparsable."""
    if text is None:
        return None
    s = str(text).strip().upper()
    if not s:
        return None
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(s, fmt).time()
        except ValueError:
            continue
    return None


def format_time(t: time) -> str:
    return t.strftime("%I:%M%p")


def _bad_split(two_parts: List[str]) -> bool:
    return len(two_parts) < 2 or not two_parts[0].strip() or not two_parts[1].strip()


def split_record(record: str) -> Tuple[str, str, str]:
    """Split '08:00AM-09:00AM!MTW' into ('08:00AM', '09:00AM', 'MTW').

    Returns three empty strings when either split has an empty side.
    """
    empty = ('', '', '')
    parts = str(record).strip().split('!')
    if _bad_split(parts):
        return empty
    times = parts[0].split('-')
    if _bad_split(times):
        return empty
    return times[0].strip(), times[1].strip(), parts[1].strip()


@dataclass(frozen=True)
class Offering:
    start: time
    end: time
    days: str  # contiguous run of weekday codes, e.g. 'MTW'

    @property
    def time_range(self) -> str:
        return f"{format_time(self.start)}-{format_time(self.end)}"

    @property
    def label(self) -> str:
        return f"{self.time_range}!{self.days}"

    @classmethod
    def from_record(cls, record: str) -> Optional["Offering"]:
        st, ft, dow = split_record(record)
        if not dow:
            return None
        start, end = parse_time(st), parse_time(ft)
        if start is None or end is None:
            return None
        return cls(start=start, end=end, days=dow)

    def __str__(self) -> str:
        return self.label


@dataclass(eq=False)
class ScheduleSet:
    """Offerings sharing one exam slot.

    The founder supplies the representative start/end/days that later
    offerings are compared against; it is not a member until the populate
    pass places it.
    """
    id: str
    start: time
    end: time
    days: str
    founder: Optional[Offering] = None
    members: List[Offering] = field(default_factory=list)
    scheduled: bool = False
    slot: Optional["ExamSlot"] = field(default=None, repr=False)

    @classmethod
    def founded_by(cls, offering: Offering) -> "ScheduleSet":
        return cls(id=f"Set-{offering.label}", start=offering.start, end=offering.end,
                   days=offering.days, founder=offering)

    def add_member(self, member: Offering):
        if member not in self.members:
            self.members.append(member)

    def schedule(self, slot: "ExamSlot"):
        if self.scheduled:
            raise ValueError(f"{self.id} is already scheduled in {self.slot.id}")
        self.scheduled = True
        self.slot = slot


@dataclass(eq=False)
class ExamSlot:
    id: str
    day: str
    label: str
    evening: bool = False
    filled: bool = False
    assigned_set: Optional[ScheduleSet] = field(default=None, repr=False)

    def __post_init__(self):
        # evening slots count as used before anything is assigned to them
        if self.evening:
            self.filled = True

    def assign(self, schedule_set: ScheduleSet):
        if self.assigned_set is not None:
            raise ValueError(f"{self.id} already holds {self.assigned_set.id}")
        schedule_set.schedule(self)
        self.assigned_set = schedule_set
        self.filled = True


@dataclass
class SchedulingSession:
    config: dict
    rng: random.Random = field(default_factory=random.Random)
    offerings: List[Offering] = field(default_factory=list)
    schedule_sets: List[ScheduleSet] = field(default_factory=list)
    # weekday code -> designated once-a-week set
    evening_sets: Dict[str, ScheduleSet] = field(default_factory=dict)
    # slot id -> slot
    slots: Dict[str, ExamSlot] = field(default_factory=dict)
    # offering -> set it joined (None until placed)
    assigned_to_set: Dict[Offering, Optional[ScheduleSet]] = field(default_factory=dict)

    def unscheduled_sets(self) -> List[ScheduleSet]:
        return [s for s in self.schedule_sets if not s.scheduled]
