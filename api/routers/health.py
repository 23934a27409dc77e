"""
Health, readiness, and metrics endpoints.

- /health: Liveness probe (is the app running?)
- /ready: Readiness probe (is the database reachable?)
- /metrics: Prometheus text format request metrics
- /metrics/json: The same metrics as JSON
"""
import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from core.datetime_utils import format_iso, utc_now
from core.dependencies import get_database
from core.middleware import get_metrics_collector

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health & Observability"])

SERVICE_NAME = "Health Tracker API"
SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str


class DependencyStatus(BaseModel):
    name: str
    status: str  # "ok" or "unavailable"
    latency_ms: Optional[float] = None
    message: Optional[str] = None


class ReadyResponse(BaseModel):
    status: str  # "ready" or "not_ready"
    dependencies: List[DependencyStatus]
    timestamp: str


class MetricsResponse(BaseModel):
    http_requests_total: int
    http_requests_2xx_total: int
    http_requests_4xx_total: int
    http_requests_5xx_total: int
    http_request_duration_ms_p50: float
    http_request_duration_ms_p95: float
    http_request_duration_ms_p99: float


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health_check() -> HealthResponse:
    """Always 200 while the process is up. Does not touch dependencies."""
    return HealthResponse(
        status="healthy",
        version=SERVICE_VERSION,
        timestamp=format_iso(utc_now())
    )


def _check_database(db) -> DependencyStatus:
    """Run a trivial query against SQLite."""
    start = time.perf_counter()
    try:
        conn = db.get_connection()
        try:
            conn.execute("SELECT 1")
        finally:
            conn.close()
    except Exception as e:
        latency_ms = (time.perf_counter() - start) * 1000
        logger.error("Database health check failed", extra={"error": str(e)})
        return DependencyStatus(
            name="database",
            status="unavailable",
            latency_ms=round(latency_ms, 2),
            message=f"Connection failed: {type(e).__name__}"
        )

    latency_ms = (time.perf_counter() - start) * 1000
    return DependencyStatus(
        name="database",
        status="ok",
        latency_ms=round(latency_ms, 2),
        message="SQLite connection healthy"
    )


@router.get(
    "/ready",
    response_model=ReadyResponse,
    summary="Readiness probe",
    description="Checks the database. Returns 503 if it is unavailable."
)
async def readiness_check(response: Response, db=Depends(get_database)) -> ReadyResponse:
    db_status = _check_database(db)

    if db_status.status == "ok":
        status = "ready"
    else:
        status = "not_ready"
        response.status_code = 503

    return ReadyResponse(
        status=status,
        dependencies=[db_status],
        timestamp=format_iso(utc_now())
    )


@router.get("/metrics", summary="Prometheus metrics")
async def get_metrics() -> Response:
    collector = get_metrics_collector()
    return Response(
        content=collector.get_prometheus_format(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@router.get("/metrics/json", response_model=MetricsResponse, summary="JSON metrics")
async def get_metrics_json() -> MetricsResponse:
    return MetricsResponse(**get_metrics_collector().get_summary())


@router.get("/", summary="API root")
async def root() -> Dict[str, Any]:
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "docs": "/docs",
        "health": "/health",
        "ready": "/ready",
        "metrics": "/metrics"
    }
