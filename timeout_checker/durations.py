"""
Duration extraction from single lines of source or documentation text.

Both file formats spell timeouts loosely, e.g.::

    Create: schema.DefaultTimeout(30 * time.Minute),
    * `create` - (Default `30 minutes`) Used when creating the Widget.

Only the first run of digits and the first ``hour``/``minute`` word after
it are considered. Anything unrecognizable counts as a zero duration.
"""

from __future__ import annotations

import logging
import re
from datetime import timedelta

logger = logging.getLogger(__name__)

DURATION_PATTERN = re.compile(r"(\d+).*?(hour|minute)", re.IGNORECASE | re.ASCII)
TOKEN_PATTERN = re.compile(r"^(\d+)([hm])$", re.ASCII)

# Unit letters accepted in compact duration tokens
UNIT_KEYWORDS: dict[str, str] = {
    "h": "hours",
    "m": "minutes",
}


def parse_duration_token(token: str) -> timedelta:
    """Parse a compact token such as ``30m`` or ``2h``.

    Raises:
        ValueError: If the token is malformed or out of range.
    """
    match = TOKEN_PATTERN.match(token)
    if not match:
        raise ValueError(f"invalid duration token '{token}'")

    value, unit = match.groups()
    try:
        return timedelta(**{UNIT_KEYWORDS[unit]: int(value)})
    except OverflowError as exc:
        raise ValueError(f"duration token '{token}' out of range") from exc


def extract_duration(line: str) -> timedelta:
    """Extract the duration declared on a line.

    Args:
        line: One line of text, without regard to its format.

    Returns:
        The duration, or a zero ``timedelta`` when the line declares none
        or the value cannot be represented.

    Examples:
        >>> extract_duration("Create: schema.DefaultTimeout(30 * time.Minute),")
        datetime.timedelta(seconds=1800)
        >>> extract_duration("Read: schema.DefaultTimeout(defaultTimeout),")
        datetime.timedelta(0)
    """
    match = DURATION_PATTERN.search(line)
    if not match:
        return timedelta()

    digits, unit = match.groups()
    token = f"{digits}{unit[0].lower()}"
    try:
        return parse_duration_token(token)
    except ValueError as exc:
        logger.debug("unable to parse duration expression: %s", exc)
        return timedelta()


def format_duration(duration: timedelta) -> str:
    """Render a duration the way Go's ``time.Duration`` prints it.

    >>> format_duration(timedelta(minutes=90))
    '1h30m0s'
    >>> format_duration(timedelta())
    '0s'
    """
    total = int(duration.total_seconds())
    if total == 0:
        return "0s"

    sign = "-" if total < 0 else ""
    hours, remainder = divmod(abs(total), 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"
