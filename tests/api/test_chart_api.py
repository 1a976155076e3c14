from __future__ import annotations

from typing import Any

import httpx
import pytest

from charts.main import app


async def _request(method: str, url: str, **kwargs: Any) -> httpx.Response:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        return await client.request(method, url, **kwargs)


@pytest.mark.asyncio
async def test_health_check() -> None:
    response = await _request("GET", "/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_encode_from_day_indices() -> None:
    response = await _request("POST", "/api/chart/encode", json={"year": 2024, "days": [7, 0]})

    assert response.status_code == 200
    assert response.json() == {"chart": "0B-iB", "url": "/?s=0B-iB"}


@pytest.mark.asyncio
async def test_encode_from_dates_infers_year() -> None:
    response = await _request("POST", "/api/chart/encode", json={"dates": ["2024-01-01", "2024-01-08"]})

    assert response.status_code == 200
    assert response.json()["chart"] == "0B-iB"


@pytest.mark.asyncio
async def test_encode_empty_chart_for_explicit_year() -> None:
    response = await _request("POST", "/api/chart/encode", json={"year": 2024, "dates": []})

    assert response.status_code == 200
    assert response.json()["chart"] == "0B-g"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "kind"),
    [
        ({"year": 2023, "days": [365]}, "DateOutOfRange"),
        ({"year": 999, "days": []}, "YearOutOfRange"),
        ({"dates": ["2024-12-31", "2025-01-01"]}, "DateOutOfRange"),
    ],
)
async def test_encode_reports_codec_errors(body: dict[str, Any], kind: str) -> None:
    response = await _request("POST", "/api/chart/encode", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == kind


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"year": 2024, "days": [0], "dates": ["2024-01-01"]},
        {"days": [0]},
        {"year": 2024, "days": [0], "chart": "0B-iB"},
    ],
)
async def test_encode_validates_request_shape(body: dict[str, Any]) -> None:
    response = await _request("POST", "/api/chart/encode", json=body)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_decode_returns_days_and_dates() -> None:
    response = await _request("GET", "/api/chart/decode", params={"s": "0B-iB"})

    assert response.status_code == 200
    assert response.json() == {"year": 2024, "days": [0, 7], "dates": ["2024-01-01", "2024-01-08"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("link", "kind"),
    [
        ("1B-iB", "UnsupportedVersion"),
        ("0B-i=B", "MalformedEncoding"),
        ("0Bw", "Truncated"),
        ("0B-iBAA", "NonCanonicalEncoding"),
    ],
)
async def test_decode_names_the_failure(link: str, kind: str) -> None:
    response = await _request("GET", "/api/chart/decode", params={"s": link})

    assert response.status_code == 400
    assert response.json()["error"] == kind


@pytest.mark.asyncio
async def test_decode_rejects_oversized_input() -> None:
    response = await _request("GET", "/api/chart/decode", params={"s": "0" + "A" * 400})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_load_shared_chart_as_preview() -> None:
    response = await _request("GET", "/api/chart", params={"s": "0B-iB"})

    body = response.json()
    assert response.status_code == 200
    assert body["preview"] is True
    assert body["error"] is None
    assert body["days"] == [0, 7]


@pytest.mark.asyncio
async def test_load_invalid_link_falls_back_to_empty_chart() -> None:
    response = await _request("GET", "/api/chart", params={"s": "0B-iBAA", "year": 2024})

    assert response.status_code == 200
    assert response.json() == {
        "year": 2024,
        "days": [],
        "dates": [],
        "preview": False,
        "error": "NonCanonicalEncoding",
    }
