"""Chart service helpers."""

from charts.services.chart_loader import LoadedChart, default_year, load_chart, share_path, share_url

__all__ = [
    "LoadedChart",
    "default_year",
    "load_chart",
    "share_path",
    "share_url",
]
