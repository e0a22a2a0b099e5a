import logging
from typing import Optional

import httpx

from foodtrucks.core.config import FinderConfig, load_config
from foodtrucks.sources.base import BaseSource
from foodtrucks.types import TimeContext, TruckListing

from .decode import decode_listings
from .http import get_text, make_client

logger = logging.getLogger(__name__)


def build_query_url(day_name: str, base_url: str) -> str:
    # Day names need no escaping; the whole day is fetched and filtered client-side
    return f"{base_url}?dayofweekstr={day_name}"


class SfGovSource(BaseSource):
    """
    San Francisco mobile food schedule:
      - GET <base_url>?dayofweekstr=<Day> for every permit scheduled today
    """

    def __init__(self, cfg: Optional[FinderConfig] = None, *, transport: Optional[httpx.BaseTransport] = None):
        self.cfg = cfg or load_config()
        self.transport = transport
        logger.debug("SF Gov source configured base_url=%s timeout=%.1f", self.cfg.base_url, self.cfg.timeout)

    def fetch_listings(self, ctx: TimeContext) -> list[TruckListing]:
        url = build_query_url(ctx.day_name, self.cfg.base_url)
        logger.info("Fetching food truck schedule for %s", ctx.day_name)

        with make_client(self.cfg, transport=self.transport) as client:
            body = get_text(client, url)

        listings = decode_listings(body)
        logger.info("Source returned %d listings for %s", len(listings), ctx.day_name)
        return listings
