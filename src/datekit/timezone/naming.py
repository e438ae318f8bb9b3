"""Offset formatting, zone-name ordering and parameterization helpers."""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Any, Optional

from datekit._text import ensure_string, parameterize

SECONDS_PER_DAY = 86400

_DISPLAY_NAME = re.compile(r"^(\([a-z]+([+-])(\d{2})(:?)(\d{2})\)\s(.+))$", re.IGNORECASE)
_OFFSET_PREFIX = re.compile(r"^([+-]?(\d{2})(:?)(\d{2})@)")


def rationalize_offset(seconds: int) -> Fraction:
    """Offset in seconds as a fraction of a day."""
    return Fraction(int(seconds), SECONDS_PER_DAY)


def seconds_to_utc_offset(seconds: int, colon: bool = True) -> str:
    sign = "-" if seconds < 0 else "+"
    hours, remainder = divmod(abs(int(seconds)), 3600)
    minutes = remainder // 60
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def format_offset(offset: Any, colon: bool = True) -> Optional[str]:
    """
    Format an offset as ``±HH:MM`` (or ``±HHMM`` without ``colon``).

    ``offset`` is either a number of seconds or a fraction of a day as
    returned by :func:`rationalize_offset`; anything else gives ``None``.
    """
    if isinstance(offset, Fraction):
        offset = int(offset * SECONDS_PER_DAY)
    if isinstance(offset, bool) or not isinstance(offset, int):
        return None
    return seconds_to_utc_offset(offset, colon)


def location_name(display: Any) -> str:
    parts = ensure_string(display).split(" ", 1)
    return parts[1] if len(parts) > 1 else ""


def compare(left: Any, right: Any) -> int:
    """
    Order two zone display strings by location name, ignoring the
    ``(GMT±HH:MM)`` prefix. Returns -1, 0 or 1.
    """
    a, b = location_name(left), location_name(right)
    return (a > b) - (a < b)


def parameterize_zone(tz: Any, with_offset: bool = True) -> str:
    """
    Search-safe representation of a zone display string::

        parameterize_zone("(GMT-08:00) Pacific Time (US & Canada)")
        # → "-0800@pacific-time-us-canada"
        parameterize_zone("-0800@pacific-time-us-canada", False)
        # → "pacific-time-us-canada"
    """
    tz = tz if isinstance(tz, str) else str(tz)

    match = _DISPLAY_NAME.match(tz)
    if match:
        slug = parameterize(match.group(6))
        if with_offset:
            return f"{match.group(2)}{match.group(3)}{match.group(5)}@{slug}"
        return slug
    if not with_offset:
        return _OFFSET_PREFIX.sub("", tz)
    return parameterize(tz)
