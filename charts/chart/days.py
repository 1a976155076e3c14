"""Chronological day enumeration for a single calendar year.

A day's ``index`` is a flat counter from January 1, never a (week, weekday)
pair, so grid layout has no influence on the wire format.
"""

from __future__ import annotations

import calendar
import datetime
from dataclasses import dataclass
from typing import Iterator, Protocol


class DateLike(Protocol):
    year: int
    month: int
    day: int


@dataclass(frozen=True, slots=True)
class CalendarDay:
    """One day of a year together with its chronological position."""

    index: int
    year: int
    month: int
    day: int

    @property
    def date(self) -> datetime.date:
        """Return the day as ``datetime.date`` (only for years up to 9999)."""

        if self.year > datetime.MAXYEAR:
            raise ValueError(f"year {self.year} is not representable as datetime.date")
        return datetime.date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def _month_lengths(year: int) -> list[int]:
    # calendar.monthrange applies proleptic Gregorian rules past datetime.MAXYEAR too.
    return [calendar.monthrange(year, month)[1] for month in range(1, 13)]


def day_count(year: int) -> int:
    """Number of days in ``year`` (365 or 366)."""

    return sum(_month_lengths(year))


def enumerate_days(year: int) -> Iterator[CalendarDay]:
    """Yield every day of ``year`` in chronological order, starting January 1."""

    index = 0
    for month, length in enumerate(_month_lengths(year), start=1):
        for day in range(1, length + 1):
            yield CalendarDay(index=index, year=year, month=month, day=day)
            index += 1


def day_at(year: int, index: int) -> CalendarDay:
    """Resolve a chronological index to its day, raising IndexError past the year's end."""

    if index < 0:
        raise IndexError(f"day index {index} is negative")

    remaining = index
    for month, length in enumerate(_month_lengths(year), start=1):
        if remaining < length:
            return CalendarDay(index=index, year=year, month=month, day=remaining + 1)
        remaining -= length

    raise IndexError(f"day index {index} is out of range for year {year}")


def index_of(year: int, value: DateLike) -> int:
    """Return the chronological index of ``value`` within ``year``."""

    if value.year != year:
        raise ValueError(f"{value.year}-{value.month:02d}-{value.day:02d} is not in year {year}")

    lengths = _month_lengths(year)
    if not 1 <= value.month <= 12 or not 1 <= value.day <= lengths[value.month - 1]:
        raise ValueError(f"invalid day {value.year}-{value.month:02d}-{value.day:02d}")

    return sum(lengths[: value.month - 1]) + value.day - 1
