from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import cached_property
from fractions import Fraction
from typing import Callable, Optional, Union

from datekit.reference import Moment, Reference, Year
from datekit.settings import DEFAULT_DST_LABEL

from .naming import parameterize_zone, rationalize_offset, seconds_to_utc_offset
from .source import TimezoneDataSource, ZonePeriod, as_utc

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
Offset = Union[int, Fraction]

_VERBATIM_ALIASES = ("International Date Line West", "UTC")
_PATH_TAIL = re.compile(r"/.*")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DstPeriod:
    """
    A span of Daylight Saving Time for one zone.

    ``start`` is the first instant with DST active and ``end`` the first
    instant after it with DST inactive, both in UTC. Either is ``None`` when
    no transition lies within a year of the sampled date. Both are searched
    for on first access only.
    """

    utc_offset: int
    std_offset: int
    sample: datetime
    locate: Callable[[datetime, bool], Optional[datetime]] = field(repr=False, compare=False)

    @property
    def utc_total_offset(self) -> int:
        return self.utc_offset + self.std_offset

    @cached_property
    def start(self) -> Optional[datetime]:
        return self.locate(self.sample, False)

    @cached_property
    def end(self) -> Optional[datetime]:
        return self.locate(self.sample, True)


class TimeZone:
    """
    A named timezone: friendly name, tz identifier and offset/DST queries
    answered from a :class:`TimezoneDataSource`.
    """

    _SEARCH_DAYS: int = 366

    def __init__(
        self,
        name: str,
        source: TimezoneDataSource,
        clock: Optional[Clock] = None,
        identifier: Optional[str] = None,
    ) -> None:
        self._name = name
        self._source = source
        self._clock: Clock = clock or utc_now
        self._identifier = identifier or source.mapping.get(name, name)
        self._aliases: Optional[list[str]] = None
        self._dst_periods: dict[int, Optional[DstPeriod]] = {}

    # ── identity ─────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def aliases(self) -> list[str]:
        """City/region display names sharing this zone's tz identifier."""
        if self._aliases is None:
            mapping = self._source.mapping
            reference = mapping.get(self._name, self._name).replace("_", " ")
            candidates = [reference] + [
                self._format_alias(name, zone, reference) for name, zone in mapping.items()
            ]
            self._aliases = sorted({a for a in candidates if a is not None})
        return self._aliases

    @staticmethod
    def _format_alias(name: str, zone: str, reference: str) -> Optional[str]:
        if zone.replace("_", " ") != reference:
            return None
        if name in _VERBATIM_ALIASES or "(US & Canada)" in name:
            return name
        return _PATH_TAIL.sub(lambda _: f"/{name}", reference, count=1)

    @property
    def current_alias(self) -> str:
        for zone_alias in self.aliases:
            if zone_alias == self._identifier:
                return zone_alias
        return self.aliases[0]

    # ── offsets ──────────────────────────────────────────────────────────

    def period_for_utc(self, instant: datetime) -> ZonePeriod:
        return self._source.period_for_instant(self._identifier, as_utc(instant))

    @property
    def utc_offset(self) -> int:
        """Standard (non-DST) offset from UTC in seconds."""
        return self.period_for_utc(self._clock()).utc_offset

    def formatted_offset(self, colon: bool = True) -> str:
        return seconds_to_utc_offset(self.utc_offset, colon)

    def offset(self, rational: bool = False) -> Offset:
        rv = self.utc_offset
        return rationalize_offset(rv) if rational else rv

    def current_offset(self, rational: bool = False, date: Optional[datetime] = None) -> Offset:
        """Offset in effect at ``date`` (default: now), DST included."""
        date = date or self._clock()
        period = self.period_for_utc(date)
        # DST may be active on dates the yearly Jan/Jul sample misses.
        rv = period.utc_total_offset if period.is_dst else self.utc_offset
        return rationalize_offset(rv) if rational else rv

    def dst_offset(self, rational: bool = False, year: Optional[int] = None) -> Offset:
        """Total UTC offset while DST is active, or 0 if DST is not used in ``year``."""
        period = self.dst_period(year)
        rv = period.utc_total_offset if period else 0
        return rationalize_offset(rv) if rational else rv

    def dst_correction(self, rational: bool = False, year: Optional[int] = None) -> Offset:
        """Amount added to the standard offset while DST is active."""
        period = self.dst_period(year)
        rv = period.std_offset if period else 0
        return rationalize_offset(rv) if rational else rv

    # ── DST ──────────────────────────────────────────────────────────────

    def dst_period(self, year: Optional[int] = None) -> Optional[DstPeriod]:
        """
        DST period for ``year`` (default: current year), or ``None``.

        Only two instants are sampled: Jul 15 (northern summer) and then
        Jan 15 (southern summer). Zones whose DST covers neither date are
        reported as not using DST.
        """
        year = year if year is not None else self._clock().year
        if year not in self._dst_periods:
            self._dst_periods[year] = self._build_dst_period(year)
        return self._dst_periods[year]

    def _build_dst_period(self, year: int) -> Optional[DstPeriod]:
        northern_summer = datetime(year, 7, 15, tzinfo=timezone.utc)
        southern_summer = datetime(year, 1, 15, tzinfo=timezone.utc)

        sample = northern_summer
        period = self.period_for_utc(sample)
        if not period.is_dst:
            sample = southern_summer
            period = self.period_for_utc(sample)
        if not period.is_dst:
            logger.debug("%s does not use DST in %d.", self._identifier, year)
            return None

        return DstPeriod(
            utc_offset=period.utc_offset,
            std_offset=period.std_offset,
            sample=sample,
            locate=self._dst_boundary,
        )

    def _dst_boundary(self, sample: datetime, forward: bool) -> Optional[datetime]:
        step = 86400 if forward else -86400
        inside = int(sample.timestamp())
        for _ in range(self._SEARCH_DAYS):
            outside = inside + step
            if not self._is_dst_at(outside):
                break
            inside = outside
        else:
            return None

        lo, hi = (inside, outside) if forward else (outside, inside)
        # lo and hi straddle the transition; narrow to one second.
        while hi - lo > 1:
            middle = (lo + hi) // 2
            if self._is_dst_at(middle) == forward:
                lo = middle
            else:
                hi = middle
        return datetime.fromtimestamp(hi, tz=timezone.utc)

    def _is_dst_at(self, timestamp: int) -> bool:
        return self.period_for_utc(datetime.fromtimestamp(timestamp, tz=timezone.utc)).is_dst

    def uses_dst(self, reference: Optional[Reference] = None) -> bool:
        """
        Whether DST applies.

        With a :class:`Moment`, DST must be used in that year and be active
        at that instant. With a :class:`Year` (or nothing, meaning the
        current year) only the yearly period is checked.
        """
        if isinstance(reference, Moment):
            return (
                self.dst_period(reference.year) is not None
                and self.period_for_utc(reference.value).is_dst
            )
        year = reference.value if isinstance(reference, Year) else None
        return self.dst_period(year) is not None

    def _uses_dst_in(self, year: Optional[int]) -> bool:
        return self.uses_dst(Year(year) if year is not None else None)

    # ── representations ──────────────────────────────────────────────────

    def dst_name(
        self,
        dst_label: Optional[str] = None,
        year: Optional[int] = None,
        name: Optional[str] = None,
    ) -> Optional[str]:
        dst_label = dst_label or DEFAULT_DST_LABEL
        name = name or self._name
        return f"{name} {dst_label}" if self._uses_dst_in(year) else None

    def to_str(self, name: Optional[str] = None, colon: bool = True) -> str:
        name = name or self.current_alias
        return f"(GMT{self.formatted_offset(colon)}) {name}"

    def to_str_with_dst(
        self,
        dst_label: Optional[str] = None,
        year: Optional[int] = None,
        name: Optional[str] = None,
    ) -> Optional[str]:
        dst_label = dst_label or DEFAULT_DST_LABEL
        name = name or self.current_alias

        period = self.dst_period(year)
        if period is None:
            return None
        return f"(GMT{seconds_to_utc_offset(period.utc_total_offset)}) {name} {dst_label}"

    def to_str_parameterized(self, with_offset: bool = True, name: Optional[str] = None) -> str:
        return parameterize_zone(name or self.to_str(), with_offset)

    def to_str_with_dst_parameterized(
        self,
        dst_label: Optional[str] = None,
        with_offset: bool = True,
        year: Optional[int] = None,
        name: Optional[str] = None,
    ) -> Optional[str]:
        rv = self.to_str_with_dst(dst_label, year, name)
        return parameterize_zone(rv, with_offset) if rv else None

    def __str__(self) -> str:
        return f"(GMT{self.formatted_offset()}) {self._name}"

    def __repr__(self) -> str:
        return f"TimeZone(name={self._name!r}, identifier={self._identifier!r})"
