from __future__ import annotations

from datetime import date
from typing import Union

import numpy as np

YearLike = Union[int, "np.ndarray"]


def easter_month_day(year: YearLike) -> tuple[YearLike, YearLike]:
    """
    Month and day of Gregorian Easter (Anonymous Gregorian algorithm).

    Pure integer arithmetic; works element-wise on NumPy integer arrays.
    """
    a = year % 19
    b = year // 100
    c = year % 100

    f1 = b - b // 4 - (b - (b + 8) // 25 + 1) // 3
    f2 = b % 4
    f3 = c // 4
    f4 = c % 4

    h = (19 * a + f1 + 15) % 30
    l = (32 + 2 * f2 + 2 * f3 - h - f4) % 7
    m = (a + 11 * h + 22 * l) // 451

    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return month, day


def easter(year: YearLike) -> Union[date, np.ndarray]:
    """
    Easter Sunday for ``year``.

    A scalar year gives a :class:`datetime.date`; an integer array gives a
    ``datetime64[D]`` array of the same shape::

        easter(2016)                          # → date(2016, 3, 27)
        easter(np.array([2013, 2025]))        # → ['2013-03-31', '2025-04-20']
    """
    years = np.asarray(year, dtype=np.int64)
    month, day = easter_month_day(years)

    if years.ndim == 0:
        return date(int(years), int(month), int(day))

    return (
        (years - 1970).astype("datetime64[Y]")
        + (month - 1).astype("timedelta64[M]")
        + (day - 1).astype("timedelta64[D]")
    )
