"""Date handling helpers for RSS Writer."""

from datetime import UTC, datetime
from email.utils import format_datetime

from dateutil import parser as date_parser


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_rfc822(value: datetime) -> str:
    """Format a datetime the way RSS dates are written.

    Args:
        value: Datetime to format

    Returns:
        Text such as ``Sat, 07 Sep 2002 00:00:01 GMT``
    """
    return format_datetime(ensure_utc(value), usegmt=True)


def parse_date(value: str | datetime) -> datetime:
    """Parse a date string into an aware UTC datetime.

    Args:
        value: Date text in any format dateutil understands, or a datetime

    Returns:
        Aware datetime in UTC

    Raises:
        ValueError: If the text cannot be parsed as a date
    """
    if isinstance(value, datetime):
        return ensure_utc(value)

    try:
        parsed = date_parser.parse(value)
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Invalid date: {value!r}") from e

    return ensure_utc(parsed)
