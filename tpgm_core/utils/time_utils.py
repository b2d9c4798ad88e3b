"""
Epoch-millisecond helpers.

All time values in tpgm_core are signed milliseconds since
1970-01-01T00:00:00 UTC. No other time zone is ever applied.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Tuple, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

NOW_TOKEN = "now"

MILLIS_PER_DAY = 86_400_000

# Accepted literal layouts, most specific first
LITERAL_FORMATS = (
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d",
)

# strptime alone accepts unpadded fields such as 2020-4-5
LITERAL_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2})?")

# Days in a 400-year Gregorian cycle, and from 0000-03-01 to 1970-01-01
DAYS_PER_ERA = 146_097
EPOCH_DAY_OFFSET = 719_468


def millis_to_datetime(millis: int) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Raises:
        OverflowError: If the value lies outside years 1..9999
    """
    return EPOCH + timedelta(milliseconds=millis)


def millis_to_fields(millis: int) -> Tuple[int, int, int, int, int, int, int]:
    """
    Split epoch milliseconds into proleptic Gregorian UTC calendar fields.

    Works for any integer, including values far outside the datetime range
    (e.g. 2**63 - 1, the usual "valid forever" marker). Year 0 exists and
    years before it are negative.

    @:return    (year, month, day, hour, minute, second, millisecond)
    """
    days, ms_of_day = divmod(millis, MILLIS_PER_DAY)
    seconds, millisecond = divmod(ms_of_day, 1000)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)

    # civil date from day count, with eras starting on March 1st
    z = days + EPOCH_DAY_OFFSET
    era, doe = divmod(z, DAYS_PER_ERA)
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day, hour, minute, second, millisecond


def datetime_to_millis(value: datetime) -> int:
    """
    Convert a datetime to epoch milliseconds.

    Naive datetimes are read as UTC. Sub-millisecond precision is truncated
    towards the past.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // ONE_MILLISECOND


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return datetime_to_millis(datetime.now(timezone.utc))


def parse_time_string(value: str) -> int:
    """
    Parse a literal time string into epoch milliseconds.

    Accepts YYYY-MM-DD, YYYY-MM-DDTHH:MM:SS (zero-padded) and the token
    "now". Date-only strings mean midnight UTC.

    Raises:
        ValueError: If the string matches none of the accepted layouts
    """
    text = value.strip()
    if text.lower() == NOW_TOKEN:
        return now_millis()
    if LITERAL_PATTERN.fullmatch(text):
        for fmt in LITERAL_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
            except ValueError:
                continue
            return datetime_to_millis(parsed.replace(tzinfo=timezone.utc))
    raise ValueError(
        f"'{value}' is not a valid time literal "
        f"(expected YYYY-MM-DD, YYYY-MM-DDTHH:MM:SS or '{NOW_TOKEN}')"
    )


def format_millis(millis: int) -> str:
    """
    Render epoch milliseconds as an ISO-like UTC string.

    Defined for every integer; years outside 0..9999 are printed in full.

    Examples:
        0          -> "1970-01-01T00:00:00"
        1500       -> "1970-01-01T00:00:01.500"
        2**63 - 1  -> "292278994-08-17T07:12:55.807"
    """
    year, month, day, hour, minute, second, ms = millis_to_fields(millis)
    text = f"{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
    if ms:
        text += f".{ms:03d}"
    return text


def as_millis(value: Union[int, datetime]) -> int:
    """
    Accept either epoch milliseconds or a datetime.

    Raises:
        TypeError: For anything else, including bool and float
    """
    if isinstance(value, datetime):
        return datetime_to_millis(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Expected epoch milliseconds as int or a datetime, got {type(value).__name__} [{value!r}]"
        )
    return value
