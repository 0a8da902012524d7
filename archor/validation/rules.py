"""Leaf predicates for RSS 2.0 scalar values.

Every predicate takes the decoded text (or None) and returns a bool. They
never raise: None, empty strings and garbage simply fail.
"""

import re
from datetime import datetime

from pydantic import AnyUrl, TypeAdapter, ValidationError

from archor.constants import HOUR_MAX, HOUR_MIN, IMAGE_MAX_HEIGHT, IMAGE_MAX_WIDTH, RSS_VERSION

_URL_ADAPTER = TypeAdapter(AnyUrl)

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# RFC 822 section 5, with the RSS 2.0 allowance for four-digit years.
_RFC822_PATTERN = re.compile(
    r"(?:(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun),\s*)?"
    r"(?P<day>\d{1,2})\s+"
    r"(?P<month>" + "|".join(_MONTHS) + r")\s+"
    r"(?P<year>\d{4}|\d{2})\s+"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?\s+"
    r"(?:UT|GMT|EST|EDT|CST|CDT|MST|MDT|PST|PDT|[A-IK-Z]|[+-]\d{4})"
)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def always_valid(value: str | None) -> bool:
    """Placeholder for rules RSS 2.0 names but archor does not enforce yet.

    Used for <language> (ISO 639 codes), <cloud> and <skipDays> day names.
    """
    return True


def is_non_empty(value: str | None) -> bool:
    """Whether value is a string other than "". Whitespace-only text counts."""
    return isinstance(value, str) and value != ""


def is_version(value: str | None) -> bool:
    """Whether value is the only RSS version archor accepts."""
    return value == RSS_VERSION


def is_valid_url(value: str | None) -> bool:
    """Whether value is a syntactically valid absolute URL.

    Only the syntax is checked, the URL is never fetched.

    Examples:
        >>> is_valid_url("http://example.com")
        True
        >>> is_valid_url("not a url")
        False
    """
    if not is_non_empty(value):
        return False
    try:
        _URL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return False
    return True


def is_valid_rfc822(value: str | None) -> bool:
    """Whether value is an RFC 822 date-time.

    Two- and four-digit years are both accepted (four preferred). Named and
    numeric zones are accepted; the day, time and month must exist on the
    calendar.

    Examples:
        >>> is_valid_rfc822("Sun, 06 Sep 2009 16:20:00 +0000")
        True
        >>> is_valid_rfc822("06 Sep 09 16:20 GMT")
        True
        >>> is_valid_rfc822("not a date")
        False
    """
    if not isinstance(value, str):
        return False
    match = _RFC822_PATTERN.fullmatch(value.strip())
    if match is None:
        return False

    year = int(match["year"])
    if len(match["year"]) == 2:
        # Same pivot as email.utils.parsedate_tz
        year += 1900 if year > 68 else 2000

    try:
        datetime(
            year,
            _MONTHS.index(match["month"]) + 1,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"] or 0),
        )
    except ValueError:
        return False
    return True


def is_bounded_int(
    value: str | None,
    minimum: int | None = None,
    maximum: int | None = None,
) -> bool:
    """Whether value is a base-10 integer within [minimum, maximum].

    Args:
        value: Decoded text, surrounding whitespace is ignored
        minimum: Inclusive lower bound, unbounded when None
        maximum: Inclusive upper bound, unbounded when None

    Returns:
        False for non-numeric text or values out of range
    """
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return False

    try:
        number = int(text)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit.
        return False
    if minimum is not None and number < minimum:
        return False
    if maximum is not None and number > maximum:
        return False
    return True


def is_positive_int(value: str | None) -> bool:
    """<ttl>: a positive number of minutes."""
    return is_bounded_int(value, minimum=1)


def is_valid_width(value: str | None) -> bool:
    """<image><width>: 0-144 pixels."""
    return is_bounded_int(value, minimum=0, maximum=IMAGE_MAX_WIDTH)


def is_valid_height(value: str | None) -> bool:
    """<image><height>: 0-400 pixels."""
    return is_bounded_int(value, minimum=0, maximum=IMAGE_MAX_HEIGHT)


def is_valid_hour(value: str | None) -> bool:
    """<skipHours><hour>: 0-23, GMT."""
    return is_bounded_int(value, minimum=HOUR_MIN, maximum=HOUR_MAX)
