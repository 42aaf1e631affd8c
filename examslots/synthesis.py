import logging
from typing import Iterable, List, Sequence

from .models import Offering

logger = logging.getLogger(__name__)


def day_patterns(codes: Sequence[str]) -> List[str]:
    """Every contiguous run of the weekday alphabet.

    For 'MTWRFS': M, MT, MTW, ..., MTWRFS, T, TW, ..., S (21 patterns).
    """
    patterns: List[str] = []
    for i in range(len(codes)):
        run = codes[i]
        patterns.append(run)
        for j in range(i + 1, len(codes)):
            run += codes[j]
            patterns.append(run)
    return patterns


def expand_time_range(time_range: str, codes: Sequence[str]) -> List[Offering]:
    """Pair one raw 'HH:MMAM-HH:MMPM' line with every day pattern.

    Returns an empty list when the line does not parse or already carries
    its own '!days' suffix.
    """
    if '!' in time_range:
        return []
    offerings: List[Offering] = []
    for pattern in day_patterns(codes):
        offering = Offering.from_record(f"{time_range}!{pattern}")
        if offering is None:
            return []
        offerings.append(offering)
    return offerings


def synthesize_offerings(time_ranges: Iterable[str], codes: Sequence[str]) -> List[Offering]:
    seen = set()
    offerings: List[Offering] = []
    for record in time_ranges:
        record = record.strip()
        if not record:
            continue
        expanded = expand_time_range(record, codes)
        if not expanded:
            logger.warning("Skipping malformed time range %r", record)
            continue
        for offering in expanded:
            if offering not in seen:
                seen.add(offering)
                offerings.append(offering)
    # lexicographic on the pattern string, not weekday order: 'F' < 'M' < 'R' ...
    offerings.sort(key=lambda o: o.days)
    logger.info("Synthesized %d offerings", len(offerings))
    return offerings
