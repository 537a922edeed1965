"""
Relative date formatting.

Turns feed publish dates (RFC 822, ISO 8601 or anything python-dateutil
understands) into short "N units ago" labels.
"""

from datetime import datetime, timezone

from dateutil import parser as date_parser

UNKNOWN_DATE = "Unknown date"


def parse_date(value: str | None) -> datetime | None:
    """
    Parse a feed date string into an aware datetime.

    Naive timestamps are taken as UTC, and the result is converted to UTC.

    Args:
        value: Raw date string.

    Returns:
        Parsed datetime, or None if the value is empty or unparseable.
    """
    if not value or not value.strip():
        return None
    try:
        parsed = date_parser.parse(value.strip())
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        # Offsets of a day or more and instants outside the datetime range fail here
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit if count == 1 else unit + 's'} ago"


def format_short_date(value: datetime, now: datetime) -> str:
    """Format as "Mar 5", adding the year only when it differs from now's."""
    label = f"{value:%b} {value.day}"
    if value.year != now.year:
        label = f"{label}, {value.year}"
    return label


def format_relative_date(value: str | None, now: datetime | None = None) -> str:
    """
    Format a date relative to now.

    Elapsed time is floored to whole units: under 60 minutes gives minutes,
    under 24 hours gives hours, under 30 days gives days, and anything older
    falls back to a short date. Future dates count as 0 minutes.

    Args:
        value: Raw date string.
        now: Reference time; defaults to the current UTC time.

    Returns:
        Human readable label, or "Unknown date" for unparseable input.
    """
    published = parse_date(value)
    if published is None:
        return UNKNOWN_DATE

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    try:
        seconds = max(0.0, (now - published).total_seconds())
        local = published.astimezone(now.tzinfo)
    except (ValueError, OverflowError):
        return UNKNOWN_DATE

    minutes = int(seconds // 60)
    if minutes < 60:
        return _plural(minutes, "min")

    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")

    days = hours // 24
    if days < 30:
        return _plural(days, "day")

    return format_short_date(local, now)
