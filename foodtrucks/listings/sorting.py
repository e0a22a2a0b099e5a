from functools import cmp_to_key
from typing import Callable, Iterable

from foodtrucks.types import TruckListing

Comparator = Callable[[TruckListing, TruckListing], int]


def compare_vendor_names(a: TruckListing, b: TruckListing) -> int:
    left = (a.vendor_name or "").lower()
    right = (b.vendor_name or "").lower()
    return (left > right) - (left < right)


def sort_listings(listings: Iterable[TruckListing], compare: Comparator = compare_vendor_names) -> list[TruckListing]:
    # sorted() is stable, so equal names keep their filter order
    return sorted(listings, key=cmp_to_key(compare))
