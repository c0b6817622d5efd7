"""Timezone-aware conversion of park date and clock strings."""

from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from park_times.errors import ParseError

# Date immediately followed by a 4-digit clock token, e.g. "2024-06-012300"
SOURCE_FORMAT = "%Y-%m-%d%H%M"
RAW_DATE_FORMAT = "%Y-%m-%d"

UTC = ZoneInfo("UTC")

# Offset with a colon, e.g. "-04:00". strftime only knows it from 3.12 on.
COLON_OFFSET = "%:z"


def _zone(timezone: str) -> ZoneInfo:
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ParseError(f"Unknown timezone: {timezone}") from e


def normalize(
    date_time_raw: str,
    source_format: str,
    timezone: str,
    output_format: str,
    rollover: bool = False,
) -> str:
    """
    Convert a raw local date/time string into a formatted timestamp.

    The raw string is read as wall-clock time in `timezone`. With
    `rollover`, one calendar day is added before formatting (closing times
    past midnight are stamped with the opening day's date upstream).

    Args:
        date_time_raw: Raw string, e.g. "2024-06-012300"
        source_format: strptime format the raw string must match exactly
        timezone: IANA timezone name
        output_format: strftime format for the result
        rollover: Shift the result forward by one day

    Returns:
        Formatted timestamp string

    Raises:
        ParseError: If the string does not match or the timezone is unknown
    """
    zone = _zone(timezone)

    try:
        parsed = datetime.strptime(date_time_raw, source_format)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Cannot parse {date_time_raw!r} as {source_format!r}: {e}") from e

    if rollover:
        parsed = parsed + timedelta(days=1)

    # Round-trip through UTC so wall-clock times skipped by a DST jump
    # move forward to a real local time
    local = parsed.replace(tzinfo=zone).astimezone(UTC).astimezone(zone)

    return format_timestamp(local, output_format)


def format_timestamp(value: datetime, output_format: str) -> str:
    """Format an aware datetime, expanding %:z to a "+HH:MM" offset."""
    if COLON_OFFSET in output_format:
        offset = value.strftime("%z")
        if offset:
            offset = f"{offset[:3]}:{offset[3:5]}"
        output_format = output_format.replace(COLON_OFFSET, offset)
    return value.strftime(output_format)


def clock_token(raw: str) -> str:
    """
    Reduce a clock value to its HHmm digits.

    "2300", "23:00" and "23:00:00" all become "2300". Anything else is
    returned as-is and will fail to parse.
    """
    token = raw.strip().replace(":", "")
    if len(token) >= 4 and token[:4].isdigit():
        return token[:4]
    return raw


def needs_rollover(raw_clock: str) -> bool:
    """Closing clock values starting with "0" are past midnight."""
    return bool(raw_clock) and raw_clock.strip().startswith("0")


def reformat_date(raw_date: str, date_format: str) -> str:
    """Reformat a YYYY-MM-DD date string."""
    try:
        parsed = datetime.strptime(raw_date, RAW_DATE_FORMAT)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Cannot parse date {raw_date!r}: {e}") from e
    return parsed.strftime(date_format)


def park_today(timezone: str, now: Optional[datetime] = None) -> str:
    """
    Get the current date at the park as YYYY-MM-DD.

    Args:
        timezone: Park IANA timezone
        now: Instant to convert, defaults to the current time.
            Naive values are taken as UTC.
    """
    zone = _zone(timezone)
    if now is None:
        return datetime.now(zone).strftime(RAW_DATE_FORMAT)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now.astimezone(zone).strftime(RAW_DATE_FORMAT)
