"""Calendar-day helpers for ISO "YYYY-MM-DD" strings.

Providers disagree on kickoff dates by a day around midnight UTC, so
matching works on whole calendar days. Nothing here raises on bad input:
unparseable dates come back as None (or unchanged, for shift_date).
"""

from datetime import date, datetime, timedelta

ISO_DATE_FORMAT = "%Y-%m-%d"


def parse_iso_date(value: str | None) -> date | None:
    """Parse a "YYYY-MM-DD" string, returning None when absent or invalid."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None


def shift_date(value: str, days: int) -> str:
    """Move an ISO date by whole days.

    Invalid input is returned unchanged so lookups fall back to the exact key.
    """
    parsed = parse_iso_date(value)
    if parsed is None:
        return value
    return (parsed + timedelta(days=days)).strftime(ISO_DATE_FORMAT)


def date_offset_days(a: str | None, b: str | None) -> float | None:
    """Absolute distance between two ISO dates in days, or None if either is unusable."""
    a_date = parse_iso_date(a)
    b_date = parse_iso_date(b)
    if a_date is None or b_date is None:
        return None
    return float(abs((a_date - b_date).days))
