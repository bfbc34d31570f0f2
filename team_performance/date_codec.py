"""Conversion between display dates, date-picker values and API query values.

Display dates use the ``DD/MM/YYYY`` form shown throughout the dashboard and
sent verbatim (URL-encoded) to the statistics API. Date pickers work with ISO
``YYYY-MM-DD`` values.
"""

import re
from datetime import date, datetime
from typing import Optional
from urllib.parse import quote

DISPLAY_FORMAT = '%d/%m/%Y'

# Layouts tried after ISO parsing fails, in order
LOCALIZED_FORMATS = [
    '%Y/%m/%d',
    '%m/%d/%Y',
    '%b %d, %Y',
    '%B %d, %Y',
    '%d %b %Y',
    '%d %B %Y',
    '%a %b %d %Y',
]

_DISPLAY_DATE_RE = re.compile(r'^\d{1,2}/\d{1,2}/\d{4}$')


class DateFormatError(ValueError):
    """Raised when a date string does not have the expected shape."""


def to_query_param(value: str) -> str:
    """URL-encode a display date verbatim for use as a query value."""
    return quote(value, safe="-_.!~*'()")


def to_input_value(value: str) -> str:
    """Convert ``DD/MM/YYYY`` to ``YYYY-MM-DD`` for date-picker widgets.

    Raises:
        DateFormatError: If the value is not three slash-separated components
    """
    parts = value.split('/')
    if len(parts) != 3 or not all(parts):
        raise DateFormatError(f"Expected DD/MM/YYYY, got '{value}'")
    day, month, year = parts
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def _parse_any(value: str) -> Optional[datetime]:
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        pass
    for layout in LOCALIZED_FORMATS:
        try:
            return datetime.strptime(text, layout)
        except ValueError:
            continue
    return None


def from_input_value(value: str) -> str:
    """Parse an ISO or localized date string and reformat it as ``DD/MM/YYYY``.

    Raises:
        DateFormatError: If the value cannot be parsed as a date
    """
    parsed = _parse_any(value)
    if parsed is None:
        raise DateFormatError(f"Unrecognized date '{value}'")
    return f"{parsed.day:02d}/{parsed.month:02d}/{parsed.year}"


def is_display_date(value: Optional[str]) -> bool:
    """Return True if the value is a real calendar date in ``DD/MM/YYYY`` form."""
    if not value or not _DISPLAY_DATE_RE.match(value):
        return False
    try:
        parse_display_date(value)
    except DateFormatError:
        return False
    return True


def parse_display_date(value: str) -> date:
    try:
        return datetime.strptime(value, DISPLAY_FORMAT).date()
    except ValueError as e:
        raise DateFormatError(f"Invalid display date '{value}': {e}") from e


def is_ordered(start: str, end: str) -> bool:
    """Check that ``start`` is not chronologically after ``end``."""
    return parse_display_date(start) <= parse_display_date(end)


def format_timestamp(value: str) -> str:
    """Render an API timestamp like ``Aug 25, 2025, 01:59 PM``.

    Zoned values are shown in local time. Values that cannot be parsed are
    returned unchanged, and a missing value renders as an empty string.
    """
    parsed = _parse_any(value or '')
    if parsed is None:
        return value or ''
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime('%b %d, %Y, %I:%M %p')
