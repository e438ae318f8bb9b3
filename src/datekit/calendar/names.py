from __future__ import annotations

from babel.dates import get_day_names, get_month_names
from pydantic import BaseModel, ConfigDict


class DateNames(BaseModel):
    """
    Localized day and month names, Monday and January first.

    Lengths (7 days, 12 months) are trusted, not checked.
    """

    model_config = ConfigDict(frozen=True)

    short_days: tuple[str, ...]
    long_days: tuple[str, ...]
    short_months: tuple[str, ...]
    long_months: tuple[str, ...]

    @classmethod
    def from_locale(cls, locale: str = "en") -> "DateNames":
        """Names from Babel's CLDR data for ``locale``."""
        return cls(
            short_days=_ordered(get_day_names("abbreviated", locale=locale), range(7)),
            long_days=_ordered(get_day_names("wide", locale=locale), range(7)),
            short_months=_ordered(get_month_names("abbreviated", locale=locale), range(1, 13)),
            long_months=_ordered(get_month_names("wide", locale=locale), range(1, 13)),
        )

    def days(self, short: bool = True) -> tuple[str, ...]:
        return self.short_days if short else self.long_days

    def months(self, short: bool = True) -> tuple[str, ...]:
        return self.short_months if short else self.long_months


def _ordered(names, keys) -> tuple[str, ...]:
    return tuple(str(names[key]) for key in keys)
