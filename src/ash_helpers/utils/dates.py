"""
Date Helpers - Parsing date text and rendering PHP-style date formats

Dates are parsed with python-dateutil, extended with the relative forms
("now", "tomorrow", "+1 day", "3 hours ago", "@1700000000") that PHP's
strtotime() understands. Rendering uses the single-letter token format of
PHP's date() so format strings such as "Y-m-d H:i:s" work unchanged.

Part of the Ash Helpers library.

License: MIT
"""

import calendar
import re
import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Dict, Optional, Union
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ..config import get_config
from ..errors import DateParseError

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "Y-m-d H:i:s"

DateInput = Union[str, datetime]
TimezoneInput = Union[str, tzinfo, None]

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_RELATIVE_UNITS = {
    "sec": "seconds",
    "second": "seconds",
    "min": "minutes",
    "minute": "minutes",
    "hour": "hours",
    "day": "days",
    "week": "weeks",
    "fortnight": "fortnights",
    "month": "months",
    "year": "years",
}

_RELATIVE_COMPONENT = re.compile(
    r"\s*([+-]?\s*\d+)\s*(sec|second|min|minute|hour|day|week|fortnight|month|year)s?\b",
    re.IGNORECASE,
)
_AGO = re.compile(r"\s*ago\s*$", re.IGNORECASE)
_TIMESTAMP = re.compile(r"^@(-?\d+)$")

# Keywords strtotime understands on their own or before a time
_DAY_KEYWORDS = {"today": 0, "tomorrow": 1, "yesterday": -1}
_TIME_KEYWORDS = {"midnight": 0, "noon": 12, "midday": 12}


def resolve_timezone(tz: TimezoneInput = None) -> tzinfo:
    """
    Resolve a timezone argument to a tzinfo.

    Args:
        tz: IANA name, tzinfo, or None for the configured timezone

    Returns:
        tzinfo instance
    """
    if tz is None:
        tz = get_config().timezone
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def _parse_relative(text: str, now: datetime) -> Optional[datetime]:
    """Parse "+1 day", "-2 weeks 3 hours", "5 minutes ago"; None if not relative."""
    ago = _AGO.search(text)
    body = text[: ago.start()] if ago else text

    delta = relativedelta()
    pos = 0
    matched = False
    while pos < len(body):
        match = _RELATIVE_COMPONENT.match(body, pos)
        if not match:
            break
        amount = int(match.group(1).replace(" ", ""))
        unit = _RELATIVE_UNITS[match.group(2).lower()]
        if unit == "fortnights":
            unit, amount = "weeks", amount * 2
        delta += relativedelta(**{unit: amount})
        pos = match.end()
        matched = True

    if not matched or body[pos:].strip():
        return None

    return now - delta if ago else now + delta


def _at_time(day: datetime, time_text: str, zone: tzinfo) -> datetime:
    """Apply "10:00", "noon" or similar to a day given by a keyword."""
    if not time_text:
        return day
    if time_text in _TIME_KEYWORDS:
        return day.replace(hour=_TIME_KEYWORDS[time_text])

    try:
        parsed = date_parser.parse(time_text, default=day.replace(tzinfo=None))
    except (ValueError, OverflowError) as e:
        logger.debug(f"Failed to parse time {time_text!r}: {e}")
        raise DateParseError(time_text, str(e)) from e

    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=zone)


def _parse_absolute(value: str, today: datetime) -> datetime:
    """
    Parse absolute date text with dateutil.

    Missing fields come from ``today``, except that a month given without a
    day means the first of that month.
    """
    first = today.replace(day=1)
    on_first = date_parser.parse(value, default=first)
    on_second = date_parser.parse(value, default=first.replace(day=2))
    if on_first.day == on_second.day:
        return on_first

    # No day in the text; a month still counts if it survives a month change
    next_month = first.replace(month=first.month % 12 + 1)
    if date_parser.parse(value, default=next_month).month == on_first.month:
        return on_first

    return date_parser.parse(value, default=today)


def parse_date(text: DateInput, tz: TimezoneInput = None) -> datetime:
    """
    Parse date text into a timezone-aware datetime.

    Naive results are placed in ``tz``; text carrying its own offset keeps it.

    Args:
        text: Date text, or a datetime to normalise
        tz: Timezone for naive values (defaults to the configured timezone)

    Returns:
        Aware datetime

    Raises:
        DateParseError: If the text cannot be parsed
    """
    zone = resolve_timezone(tz)

    if isinstance(text, datetime):
        return text if text.tzinfo is not None else text.replace(tzinfo=zone)

    if not isinstance(text, str) or not text.strip():
        logger.debug(f"Rejected empty date input: {text!r}")
        raise DateParseError(str(text), "empty input")

    value = text.strip()
    keyword = value.lower()
    now = datetime.now(zone)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)

    if keyword == "now":
        return now
    if keyword in _TIME_KEYWORDS:
        return midnight.replace(hour=_TIME_KEYWORDS[keyword])

    head, _, rest = keyword.partition(" ")
    if head in _DAY_KEYWORDS:
        return _at_time(midnight + timedelta(days=_DAY_KEYWORDS[head]), rest.strip(), zone)

    timestamp = _TIMESTAMP.match(value)
    if timestamp:
        try:
            return datetime.fromtimestamp(int(timestamp.group(1)), tz=timezone.utc).astimezone(zone)
        except (OverflowError, OSError, ValueError) as e:
            raise DateParseError(value, str(e)) from e

    relative = _parse_relative(value, now)
    if relative is not None:
        return relative

    try:
        parsed = _parse_absolute(value, midnight.replace(tzinfo=None))
    except (ValueError, OverflowError) as e:
        logger.debug(f"Failed to parse date {value!r}: {e}")
        raise DateParseError(value, str(e)) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    return parsed


def _english_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _offset(dt: datetime, colon: bool, zulu: bool = False) -> str:
    seconds = int(dt.utcoffset().total_seconds())
    if zulu and seconds == 0:
        return "Z"
    sign = "+" if seconds >= 0 else "-"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _timezone_id(dt: datetime) -> str:
    key = getattr(dt.tzinfo, "key", None)
    if key:
        return key
    if dt.utcoffset() == timedelta(0):
        return "UTC"
    return _offset(dt, colon=True)


def _timezone_abbr(dt: datetime) -> str:
    name = dt.tzname()
    if name and not name.startswith(("UTC+", "UTC-")):
        return name
    return _offset(dt, colon=True)


def _swatch(dt: datetime) -> str:
    utc = dt.astimezone(timezone.utc)
    seconds = (utc.hour * 3600 + utc.minute * 60 + utc.second + 3600) % 86400
    return f"{int(seconds / 86.4):03d}"


def _twelve_hour(dt: datetime) -> int:
    return dt.hour % 12 or 12


_FORMATTERS: Dict[str, Callable[[datetime], str]] = {
    # Day
    "d": lambda dt: f"{dt.day:02d}",
    "D": lambda dt: DAY_NAMES[dt.weekday()][:3],
    "j": lambda dt: str(dt.day),
    "l": lambda dt: DAY_NAMES[dt.weekday()],
    "N": lambda dt: str(dt.isoweekday()),
    "S": lambda dt: _english_suffix(dt.day),
    "w": lambda dt: str(dt.isoweekday() % 7),
    "z": lambda dt: str(dt.timetuple().tm_yday - 1),
    # Week
    "W": lambda dt: f"{dt.isocalendar()[1]:02d}",
    # Month
    "F": lambda dt: MONTH_NAMES[dt.month - 1],
    "m": lambda dt: f"{dt.month:02d}",
    "M": lambda dt: MONTH_NAMES[dt.month - 1][:3],
    "n": lambda dt: str(dt.month),
    "t": lambda dt: str(calendar.monthrange(dt.year, dt.month)[1]),
    # Year
    "L": lambda dt: "1" if calendar.isleap(dt.year) else "0",
    "o": lambda dt: str(dt.isocalendar()[0]),
    "Y": lambda dt: f"{dt.year:04d}",
    "y": lambda dt: f"{dt.year % 100:02d}",
    # Time
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
    "B": _swatch,
    "g": lambda dt: str(_twelve_hour(dt)),
    "G": lambda dt: str(dt.hour),
    "h": lambda dt: f"{_twelve_hour(dt):02d}",
    "H": lambda dt: f"{dt.hour:02d}",
    "i": lambda dt: f"{dt.minute:02d}",
    "s": lambda dt: f"{dt.second:02d}",
    "u": lambda dt: f"{dt.microsecond:06d}",
    "v": lambda dt: f"{dt.microsecond // 1000:03d}",
    # Timezone
    "e": _timezone_id,
    "I": lambda dt: "1" if dt.dst() else "0",
    "O": lambda dt: _offset(dt, colon=False),
    "P": lambda dt: _offset(dt, colon=True),
    "p": lambda dt: _offset(dt, colon=True, zulu=True),
    "T": _timezone_abbr,
    "Z": lambda dt: str(int(dt.utcoffset().total_seconds())),
    # Full date/time
    "c": lambda dt: render_php_format(dt, "Y-m-d\\TH:i:sP"),
    "r": lambda dt: render_php_format(dt, "D, d M Y H:i:s O"),
    "U": lambda dt: str(int(dt.timestamp())),
}


def render_php_format(dt: datetime, date_format: str) -> str:
    """
    Render an aware datetime using PHP date() format tokens.

    A backslash escapes the following character; characters that are not
    tokens are copied as they are.

    Args:
        dt: Aware datetime to render
        date_format: PHP date() format string

    Returns:
        Rendered text
    """
    parts = []
    chars = iter(date_format)
    for char in chars:
        if char == "\\":
            parts.append(next(chars, ""))
        elif char in _FORMATTERS:
            parts.append(_FORMATTERS[char](dt))
        else:
            parts.append(char)
    return "".join(parts)


def format_date(
    date: DateInput,
    date_format: str = DEFAULT_DATE_FORMAT,
    tz: TimezoneInput = None,
) -> str:
    """
    Format a date string into a specified format.

    The text is parsed to a point in time and rendered in ``tz``.

    Args:
        date: Date text (or datetime)
        date_format: PHP date() format string
        tz: Timezone to render in (defaults to the configured timezone)

    Returns:
        Formatted date text

    Raises:
        DateParseError: If the date text cannot be parsed
    """
    zone = resolve_timezone(tz)
    moment = parse_date(date, zone).astimezone(zone)
    return render_php_format(moment, date_format)


def carbon_date(date: Optional[DateInput] = None, tz: TimezoneInput = None) -> datetime:
    """
    Return an aware datetime for a given date, or the current date and time.

    Args:
        date: Optional date text (or datetime)
        tz: Timezone for naive values and for "now"

    Returns:
        Aware datetime

    Raises:
        DateParseError: If the date text cannot be parsed
    """
    if not date:
        return datetime.now(resolve_timezone(tz))
    return parse_date(date, tz)
