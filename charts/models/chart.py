"""Pydantic request/response models for the chart API."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from charts.chart import ChartSelection

# One index per day of a leap year.
MAX_DAYS = 366


class EncodeChartRequest(BaseModel):
    """Chart to encode, given either as day indices or as ISO dates."""

    model_config = ConfigDict(extra="forbid")

    year: Optional[int] = None
    days: Optional[List[int]] = Field(default=None, max_length=MAX_DAYS)
    dates: Optional[List[date]] = Field(default=None, max_length=MAX_DAYS)

    @model_validator(mode="after")
    def check_one_source(self) -> "EncodeChartRequest":
        if self.days is not None and self.dates is not None:
            raise ValueError("give either 'days' or 'dates', not both")
        if self.days is not None and self.year is None:
            raise ValueError("'year' is required together with 'days'")
        return self


class EncodeChartResponse(BaseModel):
    chart: str
    url: str


class ChartResponse(BaseModel):
    """Decoded chart as the page needs it for repainting."""

    year: int
    days: List[int]
    dates: List[str]

    @classmethod
    def from_selection(cls, selection: ChartSelection) -> "ChartResponse":
        return cls(
            year=selection.year,
            days=list(selection.selected),
            dates=[day.isoformat() for day in selection.days()],
        )


class LoadedChartResponse(ChartResponse):
    preview: bool = False
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    detail: str
