"""
datekit.timezone
~~~~~~~~~~~~~~~~

Named timezones over an external offset/DST data source (``zoneinfo`` by
default): offsets, DST periods, display names and URL-safe
parameterization.

Basic usage::

    from datekit.timezone import TimezoneResolver

    resolver = TimezoneResolver()
    zone = resolver.find("(GMT+01:00) Europe/Paris")
    zone.dst_period(2024)                      # → DstPeriod(start=..., end=...)
    zone.to_str_with_dst()                     # → "(GMT+02:00) Europe/Paris (DST)"
    resolver.unparameterize_zone("europe-paris", as_string=True)

Public API
----------
TimezoneResolver  Zone lookup, listing and (un)parameterization.
TimeZone          A single named zone.
DstPeriod         A span of Daylight Saving Time.
ZoneInfoSource    Default data source backed by :mod:`zoneinfo`.
TimezoneError     Raised for unknown tz identifiers.
"""

from __future__ import annotations

from datekit.timezone._exceptions import TimezoneError
from datekit.timezone.cache import ZoneNameCache
from datekit.timezone.mapping import MAPPING
from datekit.timezone.naming import compare, format_offset, parameterize_zone, rationalize_offset
from datekit.timezone.resolver import TimezoneResolver
from datekit.timezone.source import TimezoneDataSource, ZoneInfoSource, ZonePeriod
from datekit.timezone.zone import DstPeriod, TimeZone

__all__ = [
    "MAPPING",
    "DstPeriod",
    "TimeZone",
    "TimezoneDataSource",
    "TimezoneError",
    "TimezoneResolver",
    "ZoneInfoSource",
    "ZoneNameCache",
    "ZonePeriod",
    "compare",
    "format_offset",
    "parameterize_zone",
    "rationalize_offset",
]
