"""Codecs for the compact date formats used on the wire.

Optional dates (`YYYYMMDD`) are permissive: the service writes "00000000" for
unknown or not-yet-ended dates and occasionally sends values that do not parse
at all, so anything unreadable decodes to ``None``. Caption timestamps
(`YYYYMMDDHHMMSS`) have no sentinel and malformed values raise ``DecodeError``.
"""

import logging
from datetime import date, datetime, timezone
from typing import Optional

from .constants import DATE_FORMAT, EMPTY_DATE, TIMESTAMP_FORMAT
from .errors import DecodeError

logger = logging.getLogger(__name__)


def _is_digits(value, width: int) -> bool:
    return isinstance(value, str) and len(value) == width and value.isascii() and value.isdigit()


def decode_optional_date(value) -> Optional[date]:
    """Decode an 8-digit date string, returning None for the sentinel or bad input."""
    if value == EMPTY_DATE or not _is_digits(value, 8):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        logger.debug(f"Ignoring unparsable date: {value!r}")
        return None


def encode_optional_date(value: Optional[date]) -> str:
    """Encode a date as `YYYYMMDD`, or the all-zero sentinel for None."""
    if value is None:
        return EMPTY_DATE
    # strftime does not zero-pad years below 1000 on every platform
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def decode_timestamp(value) -> datetime:
    """Decode a 14-digit UTC timestamp string."""
    if not _is_digits(value, 14):
        raise DecodeError(f"Invalid timestamp: {value!r}")
    try:
        parsed = datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise DecodeError(f"Invalid timestamp: {value!r}") from e
    return parsed.replace(tzinfo=timezone.utc)


def encode_timestamp(value: datetime) -> str:
    """Encode a datetime as `YYYYMMDDHHMMSS` in UTC (naive values are taken as UTC)."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"{value.hour:02d}{value.minute:02d}{value.second:02d}"
    )
