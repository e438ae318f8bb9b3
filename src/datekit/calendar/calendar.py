from __future__ import annotations

import logging
import re
from datetime import date, datetime, timezone, tzinfo
from fractions import Fraction
from typing import Any, Callable, Mapping, Optional, Union

import numpy as np

from datekit.settings import DEFAULT_DATE_FORMATS, DatekitSettings
from datekit.timezone import TimeZone, TimezoneResolver, ZoneInfoSource

from ._exceptions import CalendarError
from .easter import easter as _easter
from .formats import ParseResult, expand_shorthands, parse, resolve_format
from .names import DateNames

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]
Choice = dict[str, Any]

_NAME_DIRECTIVE = re.compile(r"(?<!%)%([aAbB])")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CalendarQuery:
    """
    Calendar facts and formatting driven by a locale name table and a table
    of symbolic date formats.

    ``clock`` supplies "now" wherever a year or instant is omitted; ``zone``
    is the target of the ``local_*`` helpers; ``resolver`` answers the
    timezone listing helpers.
    """

    def __init__(
        self,
        names: Optional[DateNames] = None,
        formats: Optional[Mapping[str, str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        zone: Optional[tzinfo] = None,
        resolver: Optional[TimezoneResolver] = None,
    ) -> None:
        self._names = names if names is not None else DateNames.from_locale("en")
        self._formats: Mapping[str, str] = dict(
            DEFAULT_DATE_FORMATS if formats is None else formats
        )
        self._clock = clock or _utc_now
        self._zone: tzinfo = zone if zone is not None else timezone.utc
        self._resolver = resolver

    @classmethod
    def from_settings(
        cls,
        settings: Optional[DatekitSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
        resolver: Optional[TimezoneResolver] = None,
    ) -> "CalendarQuery":
        settings = settings or DatekitSettings()
        return cls(
            names=DateNames.from_locale(settings.locale),
            formats=settings.date_formats,
            clock=clock,
            zone=ZoneInfoSource().zone_info(settings.time_zone) if settings.time_zone else None,
            resolver=resolver,
        )

    # ── enumerations ─────────────────────────────────────────────────────

    def days(self, short: bool = True) -> list[Choice]:
        names = self._names.days(short)
        return [{"value": str(i), "label": names[i - 1]} for i in range(1, 8)]

    def months(self, short: bool = True) -> list[Choice]:
        names = self._names.months(short)
        return [{"value": f"{i:02d}", "label": names[i - 1]} for i in range(1, 13)]

    def years(
        self,
        offset: int = 10,
        also_future: bool = True,
        reference: Optional[int] = None,
        as_objects: bool = False,
    ) -> list[Union[int, Choice]]:
        """
        Years from ``reference - offset`` to ``reference`` (or to
        ``reference + offset`` with ``also_future``), both ends included::

            query.years(3, False, 2010)   # → [2007, 2008, 2009, 2010]
        """
        y = reference if reference is not None else self._clock().year
        stop = y + offset if also_future else y
        return [
            {"value": year, "label": year} if as_objects else year
            for year in range(y - offset, stop + 1)
        ]

    def easter(self, year: Union[int, np.ndarray, None] = None) -> Union[date, np.ndarray]:
        if year is None:
            year = self._clock().year
        return _easter(year)

    # ── formats ──────────────────────────────────────────────────────────

    def custom_format(self, key: Any) -> str:
        return resolve_format(self._formats, key)

    def parse(self, value: Any, format: Any = "default") -> ParseResult:
        return parse(value, self.custom_format(format))

    def is_valid(self, value: Any, format: Any = "default") -> bool:
        return self.parse(value, format).ok

    def lstrftime(self, value: DateLike, format: Any = "default") -> str:
        """
        strftime with ``%a %A %b %B`` taken from the locale name table.

        A directive preceded by another ``%`` is left alone.
        """
        names = self._names
        substitutions = {
            "a": names.short_days[value.weekday()],
            "A": names.long_days[value.weekday()],
            "b": names.short_months[value.month - 1],
            "B": names.long_months[value.month - 1],
        }
        fmt = expand_shorthands(self.custom_format(format))
        fmt = _NAME_DIRECTIVE.sub(
            lambda m: substitutions[m.group(1)].replace("%", "%%"), fmt
        )
        return value.strftime(fmt)

    def local_strftime(self, value: DateLike, format: Any = "default") -> str:
        return self._localize(value).strftime(expand_shorthands(self.custom_format(format)))

    def local_lstrftime(self, value: DateLike, format: Any = "default") -> str:
        return self.lstrftime(self._localize(value), format)

    def _localize(self, value: DateLike) -> DateLike:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.astimezone(self._zone)
        return value

    # ── date helpers ─────────────────────────────────────────────────────

    @staticmethod
    def utc_time(value: DateLike) -> datetime:
        """``value`` in UTC, truncated to whole seconds."""
        if not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).replace(microsecond=0)

    def in_months(self, value: DateLike, base: Optional[int] = None) -> int:
        """
        Months from the start of ``base`` (default: current year) to ``value``::

            query.in_months(date(2013, 6, 1), 2011)   # → 30
        """
        base = base if base is not None else self._clock().year
        return (value.year - base) * 12 + value.month

    @staticmethod
    def padded_month(value: DateLike) -> str:
        return f"{value.month:02d}"

    # ── timezones ────────────────────────────────────────────────────────

    @property
    def resolver(self) -> TimezoneResolver:
        if self._resolver is None:
            raise CalendarError("No timezone resolver configured for this calendar.")
        return self._resolver

    def timezones(self) -> list[TimeZone]:
        return self.resolver.all()

    def list_timezones(self, with_dst: bool = True, dst_label: Optional[str] = None) -> list[str]:
        return self.resolver.list_all(with_dst, dst_label)

    def find_timezone(self, name: str, dst_label: Optional[str] = None) -> Optional[TimeZone]:
        return self.resolver.find(name, dst_label)

    def parameterize_zone(self, tz: Union[str, TimeZone], with_offset: bool = True) -> str:
        return self.resolver.parameterize_zone(tz, with_offset)

    def unparameterize_zone(
        self,
        tz: Union[str, TimeZone],
        as_string: bool = False,
        dst_label: Optional[str] = None,
    ) -> Union[str, TimeZone, None]:
        return self.resolver.unparameterize_zone(tz, as_string, dst_label)

    def rationalize_offset(self, offset: Union[int, TimeZone]) -> Fraction:
        return self.resolver.rationalize_offset(offset)

    def __repr__(self) -> str:
        return (
            f"CalendarQuery(formats={len(self._formats)}, "
            f"zone={self._zone!r}, "
            f"resolver={self._resolver is not None})"
        )
