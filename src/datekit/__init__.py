"""
datekit
~~~~~~~

Calendar queries and timezone resolution.

Basic usage::

    from datekit import CalendarQuery, TimezoneResolver

    resolver = TimezoneResolver()
    query = CalendarQuery(resolver=resolver)
    query.easter(2016)                                   # → date(2016, 3, 27)
    resolver.parameterize_zone("(GMT-08:00) Pacific Time (US & Canada)")
                                                         # → "-0800@pacific-time-us-canada"

Public API
----------
CalendarQuery     Day/month/year enumeration, Easter, formats, strftime.
TimezoneResolver  Zone lookup, listing and parameterization.
TimeZone          A single named zone with offset/DST queries.
DatekitSettings   Environment-driven configuration.
DatekitError      Base exception for the package.
"""

from __future__ import annotations

import logging

from datekit._exceptions import DatekitError
from datekit.calendar import CalendarQuery, DateNames
from datekit.settings import DatekitSettings
from datekit.timezone import TimeZone, TimezoneResolver

root_logger = logging.getLogger(name=__name__)
if not root_logger.handlers:
    root_logger.addHandler(logging.NullHandler())

__all__ = [
    "CalendarQuery",
    "DateNames",
    "DatekitError",
    "DatekitSettings",
    "TimeZone",
    "TimezoneResolver",
]
