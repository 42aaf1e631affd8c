import csv
import io
import os
from datetime import datetime
from typing import IO, List, Optional, Union

from .models import SchedulingSession
from .slots import all_slots

TextOrPath = Union[str, os.PathLike, IO]


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        if hasattr(src, 'seek'):
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def load_time_ranges(src: TextOrPath) -> List[str]:
    """One raw time range per line; blank lines and '#' comments are dropped."""
    lines: List[str] = []
    f, should_close = _open_text(src)
    try:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            lines.append(line)
    finally:
        if should_close:
            f.close()
    return lines


def report_file_name(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return "schedule-" + now.strftime("%Y-%m-%d-%H-%M-%S") + ".dat"


def write_report(path: str, text: str):
    with open(path, 'w') as f:
        f.write(text)


def schedule_rows(session: SchedulingSession):
    rows = []
    for slot in all_slots(session.slots):
        s = slot.assigned_set
        if s is None:
            continue
        for member in s.members:
            rows.append((slot.id, s.id, member.label))
    return rows


def save_schedule_csv(path: str, session: SchedulingSession):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f)
        w.writerow(['slot_id', 'set_id', 'offering'])
        for row in schedule_rows(session):
            w.writerow(row)
