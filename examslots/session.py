import logging
import random
from typing import Iterable, Optional

from .clustering import cluster
from .config import get_active_config
from .models import SchedulingSession, parse_time
from .scheduling.assign_slots import create_schedule
from .slots import create_exam_slots
from .synthesis import synthesize_offerings

logger = logging.getLogger(__name__)


def build_session(time_ranges: Iterable[str], config: Optional[dict] = None,
                  seed: Optional[int] = None, strategy: str = 'first_fit') -> SchedulingSession:
    """Synthesize offerings, cluster them, build the slot pool and assign."""
    if config is None:
        config = get_active_config()
    if parse_time(config["evening_cutoff"]) is None:
        raise ValueError(f"evening_cutoff must look like 05:30PM, got {config['evening_cutoff']!r}")
    session = SchedulingSession(config=config, rng=random.Random(seed))
    session.offerings = synthesize_offerings(time_ranges, config["weekday_codes"])
    cluster(session, strategy)
    session.slots = create_exam_slots(config)
    create_schedule(session)
    logger.info("Scheduled %d of %d sets",
                len(session.schedule_sets) - len(session.unscheduled_sets()),
                len(session.schedule_sets))
    return session


def generate_time_ranges(n: int, seed: Optional[int] = None):
    """Random 'HH:MMAM-HH:MMPM' lines on the half hour, 50-180 minutes long."""
    rng = random.Random(seed)
    lines = []
    for _ in range(n):
        start = rng.randrange(7 * 2, 21 * 2) * 30
        end = min(start + rng.choice([50, 75, 80, 110, 170, 180]), 23 * 60 + 59)
        lines.append(f"{_clock(start)}-{_clock(end)}")
    return lines


def _clock(minutes: int) -> str:
    h, m = divmod(minutes, 60)
    suffix = "AM" if h < 12 else "PM"
    return f"{(h % 12) or 12:02d}:{m:02d}{suffix}"
