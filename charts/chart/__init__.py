"""Chart state model and its URL-safe serialization."""

from charts.chart.codec import MAX_YEAR, MIN_YEAR, decode, decode_chart, encode, encode_chart
from charts.chart.days import CalendarDay, day_at, day_count, enumerate_days, index_of
from charts.chart.errors import (
    ChartEncodingError,
    DateOutOfRange,
    MalformedEncoding,
    NonCanonicalEncoding,
    Truncated,
    UnsupportedVersion,
    YearOutOfRange,
)
from charts.chart.selection import ChartSelection
from charts.chart.transport import FORMAT_VERSION, unwrap, wrap

__all__ = [
    "CalendarDay",
    "ChartSelection",
    "ChartEncodingError",
    "DateOutOfRange",
    "FORMAT_VERSION",
    "MAX_YEAR",
    "MIN_YEAR",
    "MalformedEncoding",
    "NonCanonicalEncoding",
    "Truncated",
    "UnsupportedVersion",
    "YearOutOfRange",
    "day_at",
    "day_count",
    "decode",
    "decode_chart",
    "encode",
    "encode_chart",
    "enumerate_days",
    "index_of",
    "unwrap",
    "wrap",
]
