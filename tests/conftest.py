import json

import httpx
import pytest

from foodtrucks.core.config import DEFAULT_BASE_URL, FinderConfig
from foodtrucks.types import TruckListing


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "FOODTRUCKS_BASE_URL",
        "FOODTRUCKS_TIMEOUT_SECONDS",
        "FOODTRUCKS_PAGE_SIZE",
        "FOODTRUCKS_TIMEZONE",
        "FOODTRUCKS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cfg():
    return FinderConfig(
        base_url=DEFAULT_BASE_URL,
        timeout=5.0,
        page_size=10,
        timezone=None,
        log_level="WARNING",
    )


def make_listing(
    name="Taco Spot",
    address="Main St",
    day="Monday",
    start="07:00",
    end="15:00",
) -> TruckListing:
    return TruckListing(start_time=start, end_time=end, day_of_week=day, vendor_name=name, address=address)


def json_transport(payload, status_code=200, seen=None):
    """MockTransport answering every request with payload (JSON-encoded unless already a str)."""
    body = payload if isinstance(payload, str) else json.dumps(payload)

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, text=body, headers={"Content-Type": "application/json"})

    return httpx.MockTransport(handler)
