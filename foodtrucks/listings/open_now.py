from typing import Iterable, Optional

from foodtrucks.types import TruckListing
from foodtrucks.utils.time import parse_hh_colon_mm


def listing_window(listing: Optional[TruckListing], day_name: str) -> Optional[tuple[int, int, int, int]]:
    """
    Returns (start_hour, start_min, end_hour, end_min) for a listing that is valid for day_name,
    or None when the listing should be skipped.
    """
    if listing is None:
        return None
    if (
        listing.start_time is None
        or listing.end_time is None
        or listing.vendor_name is None
        or listing.address is None
        or listing.day_of_week is None
        or listing.day_of_week != day_name
    ):
        return None

    start = parse_hh_colon_mm(listing.start_time)
    end = parse_hh_colon_mm(listing.end_time)
    if start is None or end is None:
        return None
    return start[0], start[1], end[0], end[1]


def is_open_at(hour: int, minute: int, start_hour: int, start_min: int, end_hour: int, end_min: int) -> bool:
    """
    Same-day window check; windows that cross midnight are not wrapped.
    """
    if start_hour < hour < end_hour:
        return True
    if hour == start_hour:
        return minute >= start_min and (start_hour != end_hour or minute < end_min)
    if hour == end_hour:
        return minute < end_min and (start_hour != end_hour or minute > start_min)
    return False


def filter_open_now(
    listings: Iterable[Optional[TruckListing]],
    day_name: str,
    hour: int,
    minute: int,
) -> list[TruckListing]:
    open_now: list[TruckListing] = []
    for listing in listings:
        window = listing_window(listing, day_name)
        if window is None:
            continue
        if is_open_at(hour, minute, *window):
            open_now.append(listing)
    return open_now
