from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TruckListing:
    # Any field may be missing in the source payload; validity is decided by the open-now filter
    start_time: Optional[str]     # "H:MM" or "HH:MM", 24-hour
    end_time: Optional[str]
    day_of_week: Optional[str]    # "Monday"
    vendor_name: Optional[str]    # permit applicant
    address: Optional[str]        # free-form location description


@dataclass(frozen=True)
class TimeContext:
    day_name: str
    hour: int                     # 0..23
    minute: int                   # 0..59
