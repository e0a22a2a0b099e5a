import json

import pytest

from foodtrucks.core.errors import DecodeError
from foodtrucks.sources.sfgov.decode import decode_listings


def record(i):
    return {
        "start24": f"{i % 24:02d}:00",
        "end24": "23:00",
        "dayofweekstr": "Friday",
        "applicant": f"Vendor {i}",
        "location": f"{i} Market St",
    }


def test_decodes_every_field_in_source_order():
    source = [record(i) for i in range(7)]
    listings = decode_listings(json.dumps(source))

    assert len(listings) == 7
    for raw, listing in zip(source, listings):
        assert listing.start_time == raw["start24"]
        assert listing.end_time == raw["end24"]
        assert listing.day_of_week == raw["dayofweekstr"]
        assert listing.vendor_name == raw["applicant"]
        assert listing.address == raw["location"]


def test_unknown_fields_ignored_and_missing_left_absent():
    body = json.dumps([{"applicant": "Only Name", "permit": "17MFF-0001", "latitude": "37.7"}])
    (listing,) = decode_listings(body)

    assert listing.vendor_name == "Only Name"
    assert listing.start_time is None
    assert listing.end_time is None
    assert listing.day_of_week is None
    assert listing.address is None


def test_explicit_nulls_and_null_entries():
    body = json.dumps([None, {"applicant": None, "location": "Pier 39"}])
    (listing,) = decode_listings(body)

    assert listing.vendor_name is None
    assert listing.address == "Pier 39"


def test_numbers_are_read_as_strings():
    (listing,) = decode_listings('[{"applicant": 42, "location": "Somewhere"}]')
    assert listing.vendor_name == "42"


def test_empty_array():
    assert decode_listings("[]") == []


@pytest.mark.parametrize(
    "body",
    [
        "",
        "not json",
        '[{"applicant": "x"',
        '{"applicant": "x"}',
        '"Monday"',
        "[1, 2]",
        '[["nested"]]',
    ],
)
def test_rejects_non_array_payloads(body):
    with pytest.raises(DecodeError):
        decode_listings(body)


def test_booleans_are_read_as_strings_not_rejected():
    body = json.dumps([record(1), {"applicant": True, "location": "X", "start24": False}])
    first, second = decode_listings(body)

    assert first.vendor_name == "Vendor 1"
    assert second.vendor_name == "true"
    assert second.start_time == "false"
