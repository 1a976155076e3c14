"""FastAPI application entry point"""

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Dict, Any, Optional
import logging

from charts.chart import MAX_YEAR, MIN_YEAR, ChartEncodingError, ChartSelection, DateOutOfRange, decode, encode
from charts.config.settings import settings
from charts.models import (
    ChartResponse,
    EncodeChartRequest,
    EncodeChartResponse,
    ErrorResponse,
    LoadedChartResponse,
)
from charts.services import default_year, load_chart, share_path

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Encode and decode shareable calendar charts",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ChartEncodingError)
async def chart_encoding_error_handler(request: Request, exc: ChartEncodingError):
    """Report codec failures as 400 with the error kind"""
    logger.warning(f"Chart request {request.url.path} rejected ({exc.kind}): {exc}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=exc.kind, detail=str(exc)).model_dump(),
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "endpoints": {
            "health": "/api/health",
            "encode": "POST /api/chart/encode",
            "decode": "GET /api/chart/decode?s=<chart>",
            "load": "GET /api/chart?s=<chart>",
        }
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint for serverless platforms"""
    return {
        "status": "healthy",
        "service": "charts",
        "version": settings.APP_VERSION
    }


@app.post("/api/chart/encode", response_model=EncodeChartResponse)
async def encode_chart(payload: EncodeChartRequest):
    """
    Encode a chart into its shareable form

    Body is either {"year": 2024, "days": [0, 7]} with chronological
    day indices, or {"dates": ["2024-01-01"]} with ISO dates (year is
    taken from the dates when omitted).
    """
    if payload.days is not None:
        selection = ChartSelection(year=payload.year, selected=tuple(payload.days))
    else:
        dates = payload.dates or []
        year = payload.year
        if year is None and not dates:
            year = default_year()
        try:
            selection = ChartSelection.from_dates(dates, year=year)
        except ValueError as e:
            raise DateOutOfRange(str(e)) from e

    chart = encode(selection)
    logger.info(f"Encoded chart for {selection.year} with {len(selection.selected)} days")
    return EncodeChartResponse(chart=chart, url=share_path(selection))


@app.get("/api/chart/decode", response_model=ChartResponse)
async def decode_chart(s: str = Query(..., max_length=settings.CHART_MAX_ENCODED_LENGTH)):
    """Decode a chart strictly, answering 400 with the error kind when invalid"""
    return ChartResponse.from_selection(decode(s))


@app.get("/api/chart", response_model=LoadedChartResponse)
async def load_shared_chart(
    s: Optional[str] = Query(None, max_length=settings.CHART_MAX_ENCODED_LENGTH),
    year: Optional[int] = Query(None, ge=MIN_YEAR, le=MAX_YEAR),
):
    """
    Load the chart for a page visit

    Invalid links never fail the request: an empty chart for the
    requested (or default) year is returned together with the error kind.
    """
    loaded = load_chart(s, fallback_year=year)
    chart = ChartResponse.from_selection(loaded.selection)
    return LoadedChartResponse(**chart.model_dump(), preview=loaded.preview, error=loaded.error)


# AWS Lambda handler
def lambda_handler(event: Dict[str, Any], context: Any):
    """AWS Lambda handler serving the API through API Gateway events"""
    logger.info(f"Lambda invoked with path: {event.get('rawPath') or event.get('path')}")

    from mangum import Mangum
    handler = Mangum(app)
    return handler(event, context)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "charts.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
