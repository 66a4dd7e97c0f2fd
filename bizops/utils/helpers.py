# bizops/utils/helpers.py
from datetime import date, datetime, timezone

_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%Y/%m/%d", "%d-%m-%Y")


def parse_date(value) -> date:
    """Accept date/datetime objects, ISO dates/datetimes and a few common layouts."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    v = str(value or "").strip()
    if not v:
        raise ValueError("Empty date")
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(v, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(f"Unsupported date format: {v!r}") from None


def format_date(value) -> str:
    """Normalize any accepted date representation to YYYY-MM-DD."""
    return parse_date(value).isoformat()


def iso_timestamp(dt: datetime | None) -> str | None:
    """UTC ISO-8601 with millisecond precision and a trailing Z (2024-01-01T09:30:00.000Z)."""
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def display_time(dt: datetime) -> str:
    """Local wall-clock time, e.g. '3:04:05 PM'."""
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime("%I:%M:%S %p").lstrip("0")


def plain_number(n) -> str:
    """Render 10.0 as '10' and 10.5 as '10.5'."""
    n = float(n or 0)
    if n.is_integer():
        return str(int(n))
    return repr(n)
