# =============================================================================
# lib/formatting.py - Display Formatting Helpers
# =============================================================================
# en-US renderings used in generated contracts, PDFs and signature displays.
# Day numbers and hours are built by hand; strftime has no portable
# unpadded-day flag.
# =============================================================================

import re
from datetime import date, datetime

from lib.utils import parse_iso_datetime

_WHITESPACE_RE = re.compile(r"\s+")


def parse_event_date(value: str) -> date:
    """
    Parse an event date given as "YYYY-MM-DD" or a full ISO timestamp.

    The whole string must parse; only the calendar date is kept, so
    "2025-06-14" never shifts a day because of time zones.

    Raises:
        ValueError: If the value is not an ISO date
    """
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        return parse_iso_datetime(value).date()


def format_currency(amount: float) -> str:
    """
    Format dollars the way en-US currency formatting does.

    Example:
        format_currency(2500) -> "$2,500.00"
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_long_date(value: str | date) -> str:
    """
    Example:
        format_long_date("2025-06-14") -> "Saturday, June 14, 2025"
    """
    d = parse_event_date(value) if isinstance(value, str) else value
    return f"{d.strftime('%A')}, {d.strftime('%B')} {d.day}, {d.year}"


def format_short_date(value: date | datetime) -> str:
    """
    Example:
        format_short_date(date(2025, 6, 14)) -> "6/14/2025"
    """
    return f"{value.month}/{value.day}/{value.year}"


def _format_clock(dt: datetime) -> str:
    return f"{dt.strftime('%I')}:{dt.strftime('%M')} {dt.strftime('%p')}"


def format_timestamp(value: str, long_month: bool = False) -> str:
    """
    Format an ISO timestamp for display.

    Example:
        format_timestamp("2025-06-14T15:30:00Z") -> "Jun 14, 2025, 03:30 PM"
        format_timestamp("2025-06-14T15:30:00Z", long_month=True) -> "June 14, 2025, 03:30 PM"
    """
    dt = parse_iso_datetime(value)
    month = dt.strftime("%B" if long_month else "%b")
    return f"{month} {dt.day}, {dt.year}, {_format_clock(dt)}"


def slugify_client_name(name: str) -> str:
    """
    Lowercase a client name and join its words with dashes.

    Example:
        slugify_client_name("Emma  & James") -> "emma-&-james"
    """
    return _WHITESPACE_RE.sub("-", name.strip()).lower()
