import logging

from pydantic import ValidationError

from foodtrucks.core.errors import DecodeError
from foodtrucks.schemas.listing import SODA_PAYLOAD, SodaTruckRecord
from foodtrucks.types import TruckListing

logger = logging.getLogger(__name__)


def record_to_listing(record: SodaTruckRecord) -> TruckListing:
    return TruckListing(
        start_time=record.start24,
        end_time=record.end24,
        day_of_week=record.dayofweekstr,
        vendor_name=record.applicant,
        address=record.location,
    )


def decode_listings(body: str) -> list[TruckListing]:
    """
    Parse the response body as a JSON array of truck objects.
    Unknown keys are ignored and missing keys stay None.
    """
    try:
        records = SODA_PAYLOAD.validate_json(body)
    except ValidationError as e:
        first = e.errors()[0] if e.error_count() else {}
        msg = first.get("msg", str(e))
        loc = ".".join(str(p) for p in first.get("loc", ()))
        raise DecodeError(f"Response is not a JSON array of objects: {msg}" + (f" at {loc}" if loc else "")) from e

    listings = [record_to_listing(r) for r in records if r is not None]
    logger.debug("Decoded %d listings (%d null entries dropped)", len(listings), len(records) - len(listings))
    return listings
