from __future__ import annotations

import logging
from fractions import Fraction
from functools import cmp_to_key
from typing import Any, Optional, Union

from datekit.settings import DEFAULT_DST_LABEL, DatekitSettings

from . import naming
from .cache import ZoneNameCache
from .source import TimezoneDataSource, ZoneInfoSource
from .zone import Clock, TimeZone, utc_now

logger = logging.getLogger(__name__)

STANDARD_KEY = "STANDARD"


class TimezoneResolver:
    """
    Lookup, listing and parameterization over every zone of a data source.

    Zone objects and display-name lists are built on first use and kept for
    the lifetime of the resolver.
    """

    def __init__(
        self,
        source: Optional[TimezoneDataSource] = None,
        clock: Optional[Clock] = None,
        dst_label: str = DEFAULT_DST_LABEL,
        cache: Optional[ZoneNameCache] = None,
    ) -> None:
        self._source: TimezoneDataSource = source if source is not None else ZoneInfoSource()
        self._clock: Clock = clock or utc_now
        self._dst_label = dst_label
        self._cache = cache if cache is not None else ZoneNameCache()
        self._zones: Optional[list[TimeZone]] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[DatekitSettings] = None,
        source: Optional[TimezoneDataSource] = None,
        clock: Optional[Clock] = None,
    ) -> "TimezoneResolver":
        settings = settings or DatekitSettings()
        return cls(source=source, clock=clock, dst_label=settings.dst_label)

    # ── zones ────────────────────────────────────────────────────────────

    def all(self) -> list[TimeZone]:
        """Every zone of the source, by standard offset then name."""
        if self._zones is None:
            zones = [
                TimeZone(name, self._source, clock=self._clock)
                for name in self._source.mapping
            ]
            zones.sort(key=lambda zone: (zone.utc_offset, zone.name))
            self._zones = zones
            logger.debug("Loaded %d timezones.", len(zones))
        return self._zones

    def zone(self, name: str) -> Optional[TimeZone]:
        """Zone by friendly name (``"Paris"``) or tz identifier (``"Europe/Paris"``)."""
        for candidate in self.all():
            if candidate.name == name:
                return candidate
        for candidate in self.all():
            if candidate.identifier == name:
                return candidate
        return None

    @property
    def cache(self) -> ZoneNameCache:
        return self._cache

    # ── offsets ──────────────────────────────────────────────────────────

    @staticmethod
    def rationalize_offset(offset: Union[int, TimeZone]) -> Fraction:
        if isinstance(offset, TimeZone):
            offset = offset.utc_offset
        return naming.rationalize_offset(offset)

    @staticmethod
    def format_offset(offset: Any, colon: bool = True) -> Optional[str]:
        return naming.format_offset(offset, colon)

    # ── lookup ───────────────────────────────────────────────────────────

    def find(self, name: str, dst_label: Optional[str] = None) -> Optional[TimeZone]:
        """Zone whose plain or DST display string (for any alias) equals ``name``."""
        dst_label = dst_label or self._dst_label
        for zone in self.all():
            for zone_alias in zone.aliases:
                if name == zone.to_str(zone_alias):
                    return zone
                if name == zone.to_str_with_dst(dst_label, None, zone_alias):
                    return zone
        logger.debug("No timezone matches %r.", name)
        return None

    def list_all(self, with_dst: bool = True, dst_label: Optional[str] = None) -> list[str]:
        """
        Display strings of all zones.

        The standard list has one ``(GMT±HH:MM) alias`` entry per alias in
        zone order. The DST list adds ``(GMT±HH:MM) alias (DST)`` entries for
        zones using DST, deduplicated and sorted by location name.
        """
        dst_label = dst_label or self._dst_label
        if with_dst:
            return self._cache.get_or_build(
                f"DST[{dst_label}]-{STANDARD_KEY}", lambda: self._build_dst_list(dst_label)
            )
        return self._cache.get_or_build(STANDARD_KEY, self._build_standard_list)

    def _build_standard_list(self) -> list[str]:
        names = (zone.to_str(zone_alias) for zone in self.all() for zone_alias in zone.aliases)
        return list(dict.fromkeys(names))

    def _build_dst_list(self, dst_label: str) -> list[str]:
        names: list[str] = []
        for zone in self.all():
            uses_dst = zone.uses_dst()
            for zone_alias in zone.aliases:
                names.append(zone.to_str(zone_alias))
                if uses_dst and not zone_alias.endswith(dst_label):
                    names.append(zone.to_str_with_dst(dst_label, None, zone_alias))
        return sorted(dict.fromkeys(names), key=cmp_to_key(self.compare))

    # ── names ────────────────────────────────────────────────────────────

    @staticmethod
    def compare(left: Union[str, TimeZone], right: Union[str, TimeZone]) -> int:
        if isinstance(left, TimeZone):
            left = left.to_str()
        if isinstance(right, TimeZone):
            right = right.to_str()
        return naming.compare(left, right)

    @staticmethod
    def parameterize_zone(tz: Union[str, TimeZone], with_offset: bool = True) -> str:
        return naming.parameterize_zone(tz, with_offset)

    def unparameterize_zone(
        self,
        tz: Union[str, TimeZone],
        as_string: bool = False,
        dst_label: Optional[str] = None,
    ) -> Union[str, TimeZone, None]:
        """
        Reverse :meth:`parameterize_zone`: the first listed zone whose slug
        ends with the slug of ``tz``, as a display string or as a zone.
        """
        query = naming.parameterize_zone(tz, False)
        for candidate in self.list_all(True, dst_label):
            if naming.parameterize_zone(candidate, False).endswith(query):
                return candidate if as_string else self.find(candidate, dst_label)
        logger.debug("No timezone matches parameterized %r.", query)
        return None

    def __repr__(self) -> str:
        return f"TimezoneResolver(source={self._source!r}, dst_label={self._dst_label!r})"
