"""Relative-time phrases like "3 hours ago"."""

from toolkit.core.errors import PreconditionViolation
from toolkit.utils.text import group_digits, pluralize

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
MONTH = 2_628_288
YEAR = 365 * DAY

# (upper bound inclusive, divisor, unit); first match wins
BUCKETS = (
    (MINUTE, 1, "second"),
    (HOUR, MINUTE, "minute"),
    (DAY, HOUR, "hour"),
    (MONTH, DAY, "day"),
    (YEAR, MONTH, "month"),
)


def format_relative_time(seconds, delimiter=","):
    """Describe `seconds` elapsed as "<N> <unit(s)> ago".

    An exact bucket boundary stays in the smaller unit, so 60 is
    "60 seconds ago" and 61 is "1 minute ago". Only year counts are grouped
    with `delimiter`.
    """
    if not isinstance(seconds, int) or isinstance(seconds, bool):
        raise PreconditionViolation("seconds must be an integer", argument="seconds", value=seconds)
    if seconds < 0:
        raise PreconditionViolation("seconds must be non-negative", argument="seconds", value=seconds)
    if not isinstance(delimiter, str):
        raise PreconditionViolation("delimiter must be a string", argument="delimiter", value=delimiter)

    for upper, divisor, unit in BUCKETS:
        if seconds <= upper:
            count = seconds // divisor
            return f"{count} {pluralize(count, unit)} ago"

    count = seconds // YEAR
    return f"{group_digits(count, delimiter)} {pluralize(count, 'year')} ago"
