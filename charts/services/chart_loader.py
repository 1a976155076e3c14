"""Loading charts from share links and building links for sharing them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional
from urllib.parse import urlencode

from charts.chart import ChartEncodingError, ChartSelection, decode, encode
from charts.config.settings import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadedChart:
    """Chart ready to be painted, plus how it was obtained."""

    selection: ChartSelection
    preview: bool = False
    error: Optional[str] = None


def default_year(today: Callable[[], date] = date.today) -> int:
    """Year shown when nothing else determines it."""

    configured = getattr(settings, "CHART_DEFAULT_YEAR", None)
    if configured is not None:
        return configured
    return today().year


def load_chart(encoded: Optional[str], *, fallback_year: Optional[int] = None) -> LoadedChart:
    """Decode a shared chart, falling back to an empty chart on any invalid link.

    A successfully decoded link is a preview of someone else's chart. An
    invalid one is never surfaced as an exception: the caller gets an empty
    chart for the fallback year and the error kind for display.
    """

    year = fallback_year if fallback_year is not None else default_year()
    if encoded is None:
        return LoadedChart(selection=ChartSelection(year=year))

    try:
        selection = decode(encoded)
    except ChartEncodingError as exc:
        logger.warning(f"Rejected shared chart ({exc.kind}): {exc}")
        return LoadedChart(selection=ChartSelection(year=year), error=exc.kind)

    logger.debug(f"Loaded shared chart for {selection.year} with {len(selection.selected)} days")
    return LoadedChart(selection=selection, preview=True)


def share_path(selection: ChartSelection) -> str:
    """Relative link that restores ``selection`` when opened."""

    param = getattr(settings, "CHART_SHARE_QUERY_PARAM", "s")
    return "/?" + urlencode({param: encode(selection)})


def share_url(selection: ChartSelection, base_url: str) -> str:
    """Absolute share link rooted at ``base_url``."""

    return base_url.rstrip("/") + share_path(selection)
