import logging
from datetime import datetime
from typing import Optional

from foodtrucks.types import TimeContext

logger = logging.getLogger(__name__)

# Sunday=1 .. Saturday=7
DAY_NAMES = {
    1: "Sunday",
    2: "Monday",
    3: "Tuesday",
    4: "Wednesday",
    5: "Thursday",
    6: "Friday",
    7: "Saturday",
}


def day_ordinal(now: datetime) -> int:
    # Python isoweekday: Mon=1..Sun=7
    return now.isoweekday() % 7 + 1


def day_name_for_ordinal(ordinal: int) -> str:
    """
    Map a Sunday-first weekday ordinal to its English name.
    Anything outside 1..7 falls back to "Saturday".
    """
    name = DAY_NAMES.get(ordinal)
    if name is None:
        logger.warning("Unrecognized weekday ordinal %r, defaulting to Saturday", ordinal)
        return "Saturday"
    return name


def resolve_time_context(now: datetime) -> TimeContext:
    return TimeContext(
        day_name=day_name_for_ordinal(day_ordinal(now)),
        hour=now.hour,
        minute=now.minute,
    )


def parse_hh_colon_mm(value: str) -> Optional[tuple[int, int]]:
    """
    Split "H:MM" / "HH:MM" on ':' and parse the first two components.
    Returns None when there are fewer than two components or they are not integers.
    """
    parts = value.split(":")
    if len(parts) < 2:
        return None
    hh, mm = parts[0], parts[1]
    if not (hh.isascii() and hh.isdecimal() and mm.isascii() and mm.isdecimal()):
        return None
    return int(hh), int(mm)
