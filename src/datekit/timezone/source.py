from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ._exceptions import TimezoneError
from .mapping import MAPPING

logger = logging.getLogger(__name__)

_SEASON_STEPS = (91, 182, 273)


@dataclass(frozen=True)
class ZonePeriod:
    """Offsets in effect for a zone at one instant, in seconds."""

    utc_offset: int
    std_offset: int

    @property
    def utc_total_offset(self) -> int:
        return self.utc_offset + self.std_offset

    @property
    def is_dst(self) -> bool:
        return self.std_offset != 0


class TimezoneDataSource(Protocol):
    mapping: Mapping[str, str]

    def period_for_instant(self, identifier: str, instant: datetime) -> ZonePeriod:
        ...


def as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


class ZoneInfoSource:
    """Timezone data backed by the IANA database through :mod:`zoneinfo`."""

    def __init__(self, mapping: Optional[Mapping[str, str]] = None) -> None:
        self.mapping: Mapping[str, str] = dict(MAPPING if mapping is None else mapping)
        self._zones: dict[str, ZoneInfo] = {}

    def zone_info(self, identifier: str) -> ZoneInfo:
        zone = self._zones.get(identifier)
        if zone is None:
            try:
                zone = ZoneInfo(identifier)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise TimezoneError(f"Unknown timezone identifier {identifier!r}.") from exc
            self._zones[identifier] = zone
        return zone

    def period_for_instant(self, identifier: str, instant: datetime) -> ZonePeriod:
        total, correction = self._offsets(identifier, instant)
        if correction < 0:
            # Negative DST (Europe/Dublin): the shifted winter time is reported
            # as standard time.
            return ZonePeriod(utc_offset=total, std_offset=0)
        if correction == 0:
            for days in _SEASON_STEPS:
                other_total, other_correction = self._offsets(identifier, instant + timedelta(days=days))
                if other_correction < 0 and other_total - other_correction == total:
                    return ZonePeriod(utc_offset=other_total, std_offset=-other_correction)
        return ZonePeriod(utc_offset=total - correction, std_offset=correction)

    def _offsets(self, identifier: str, instant: datetime) -> tuple[int, int]:
        local = as_utc(instant).astimezone(self.zone_info(identifier))
        dst = local.dst()
        correction = int(dst.total_seconds()) if dst is not None else 0
        return int(local.utcoffset().total_seconds()), correction

    def __repr__(self) -> str:
        return f"ZoneInfoSource(zones={len(self.mapping)})"
