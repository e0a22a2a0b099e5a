import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from foodtrucks.listings.open_now import filter_open_now
from foodtrucks.listings.sorting import sort_listings
from foodtrucks.sources.base import BaseSource
from foodtrucks.types import TimeContext, TruckListing
from foodtrucks.utils.time import resolve_time_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinderResult:
    ctx: TimeContext
    fetched: int
    open_now: list[TruckListing]


def find_open_trucks(source: BaseSource, now: datetime, *, day_name: Optional[str] = None) -> FinderResult:
    """
    resolve time -> fetch today's listings -> keep those open now -> sort by vendor name.
    day_name overrides the weekday derived from now.
    """
    ctx = resolve_time_context(now)
    if day_name is not None:
        ctx = TimeContext(day_name=day_name, hour=ctx.hour, minute=ctx.minute)

    logger.info("Finding trucks open on %s at %02d:%02d", ctx.day_name, ctx.hour, ctx.minute)

    listings = source.fetch_listings(ctx)
    open_now = sort_listings(filter_open_now(listings, ctx.day_name, ctx.hour, ctx.minute))

    logger.info("%d of %d listings open now", len(open_now), len(listings))
    return FinderResult(ctx=ctx, fetched=len(listings), open_now=open_now)
