"""The chart value: one year plus the chronological indices of its marked days."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from charts.chart.days import CalendarDay, DateLike, day_at, day_count, index_of


@dataclass(frozen=True, slots=True)
class ChartSelection:
    """Marked days of a single year.

    ``selected`` is normalized to a sorted tuple of distinct indices, so two
    selections with the same days compare equal regardless of input order.
    Range checks against the year happen in the codec, not here.
    """

    year: int
    selected: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected", tuple(sorted(set(self.selected))))

    @classmethod
    def from_flags(cls, year: int, flags: Iterable[bool]) -> "ChartSelection":
        """Build a selection from one boolean per day in chronological order."""

        return cls(year=year, selected=tuple(index for index, marked in enumerate(flags) if marked))

    @classmethod
    def from_dates(cls, dates: Iterable[DateLike], *, year: int | None = None) -> "ChartSelection":
        """Build a selection from marked dates.

        When ``year`` is omitted it is taken from the first date. Every date
        must belong to that year.
        """

        values = list(dates)
        if year is None:
            if not values:
                raise ValueError("year is required when no dates are given")
            year = values[0].year

        return cls(year=year, selected=tuple(index_of(year, value) for value in values))

    @property
    def is_empty(self) -> bool:
        return not self.selected

    def days(self) -> list[CalendarDay]:
        """Resolve every selected index to its calendar day."""

        return [day_at(self.year, index) for index in self.selected]

    def flags(self) -> list[bool]:
        """One boolean per day of the year, True for marked days."""

        marked = set(self.selected)
        return [index in marked for index in range(day_count(self.year))]
