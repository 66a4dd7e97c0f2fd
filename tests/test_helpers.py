"""Date normalization and number/timestamp rendering."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from bizops.utils.helpers import format_date, iso_timestamp, plain_number


@pytest.mark.parametrize(
    "raw",
    [
        "2024-03-05",
        "2024-3-5",
        "05/03/2024",
        "2024/03/05",
        "05-03-2024",
        "2024-03-05T14:30:00",
        "2024-03-05T14:30:00.000Z",
        date(2024, 3, 5),
        datetime(2024, 3, 5, 23, 59),
    ],
)
def test_format_date_normalizes_to_iso(raw) -> None:
    assert format_date(raw) == "2024-03-05"


@pytest.mark.parametrize("raw", ["", None, "yesterday", "2024-13-40"])
def test_format_date_rejects_garbage(raw) -> None:
    with pytest.raises(ValueError):
        format_date(raw)


def test_plain_number_drops_trailing_zero() -> None:
    assert plain_number(10.0) == "10"
    assert plain_number(8) == "8"
    assert plain_number(10.5) == "10.5"
    assert plain_number(None) == "0"


def test_iso_timestamp_uses_millis_and_z() -> None:
    dt = datetime(2024, 1, 1, 9, 30, 0, 123456, tzinfo=timezone.utc)
    assert iso_timestamp(dt) == "2024-01-01T09:30:00.123Z"
    assert iso_timestamp(datetime(2024, 1, 1, 9, 30)) == "2024-01-01T09:30:00.000Z"
    assert iso_timestamp(None) is None
