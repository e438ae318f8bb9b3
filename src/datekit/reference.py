"""Explicit reference points for year-or-instant queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class Year:
    value: int


@dataclass(frozen=True)
class Moment:
    value: datetime

    @property
    def year(self) -> int:
        return self.value.year


Reference = Union[Year, Moment]
