"""
datekit.calendar
~~~~~~~~~~~~~~~~

Calendar queries over a locale name table and a table of symbolic date
formats: day/month/year choices, Easter, format lookup and validation, and
locale-aware strftime.

Basic usage::

    from datekit.calendar import CalendarQuery

    query = CalendarQuery()
    query.months()[0]                  # → {"value": "01", "label": "Jan"}
    query.easter(2013)                 # → date(2013, 3, 31)
    query.is_valid("2020-01-01", "%F") # → True

NumPy integer arrays are accepted by ``easter``::

    import numpy as np
    query.easter(np.array([2013, 2016, 2024]))

Public API
----------
CalendarQuery  The main class.
DateNames      Localized day and month names.
ParseResult    Outcome of ``CalendarQuery.parse``.
easter         Gregorian Easter for a year or an array of years.
CalendarError  Raised when a calendar query lacks a collaborator.
"""

from __future__ import annotations

from datekit.calendar._exceptions import CalendarError
from datekit.calendar.calendar import CalendarQuery
from datekit.calendar.easter import easter
from datekit.calendar.formats import ParseResult
from datekit.calendar.names import DateNames

__all__ = [
    "CalendarError",
    "CalendarQuery",
    "DateNames",
    "ParseResult",
    "easter",
]
