import math
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from foodtrucks.types import TruckListing

COLUMN_WIDTH = 25
COLUMN_GAP = " " * 5
PAGE_SIZE = 10


@dataclass(frozen=True)
class PageSummary:
    pages_shown: int
    rows_shown: int
    total_pages: int


def format_row(name: Optional[str], address: Optional[str]) -> str:
    """Both columns left-justified and cut to COLUMN_WIDTH, with a trailing space."""
    w = COLUMN_WIDTH
    return f"{str(name):<{w}.{w}}{COLUMN_GAP}{str(address):<{w}.{w}} "


def wants_to_stop(answer: str) -> bool:
    return answer[:1] in ("N", "n")


def present_listings(
    listings: Sequence[TruckListing],
    out: TextIO,
    inp: TextIO,
    *,
    page_size: int = PAGE_SIZE,
) -> PageSummary:
    print(format_row("NAME", "ADDRESS"), file=out)

    total_pages = math.ceil(len(listings) / page_size)
    pages_shown = 0
    rows_shown = 0

    for page_start in range(0, len(listings), page_size):
        for listing in listings[page_start:page_start + page_size]:
            print(format_row(listing.vendor_name, listing.address), file=out)
            rows_shown += 1
        pages_shown += 1

        if pages_shown < total_pages:
            out.write(f"(Page {pages_shown} of {total_pages}) Show next page? Y/N : ")
            out.flush()
            answer = inp.readline()
            # readline() returns "" only at end of input
            if answer == "" or wants_to_stop(answer):
                break

    return PageSummary(pages_shown=pages_shown, rows_shown=rows_shown, total_pages=total_pages)
