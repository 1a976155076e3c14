"""API models"""

from charts.models.chart import (
    ChartResponse,
    EncodeChartRequest,
    EncodeChartResponse,
    ErrorResponse,
    LoadedChartResponse,
)

__all__ = [
    "ChartResponse",
    "EncodeChartRequest",
    "EncodeChartResponse",
    "ErrorResponse",
    "LoadedChartResponse",
]
