"""
Request logging and in-memory request metrics for the tracker API.

Requests are counted per route template (for example
``/api/v1/users/{user_id}``), so per-record lookups fold into one series
instead of one series per id. Latency percentiles come from a bounded
window of recent requests.

Exposed by /metrics and /metrics/json in api/routers/health.py.
"""

import logging
import time
import uuid
from collections import Counter, deque
from typing import Callable, Deque, Dict, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.logging_config import set_request_id, clear_request_id

logger = logging.getLogger(__name__)

UNMATCHED_ROUTE = "<unmatched>"

# Operational and docs routes: counted, never logged
QUIET_ROUTES = frozenset({
    "/health", "/ready", "/metrics", "/metrics/json", "/docs", "/redoc", "/openapi.json",
})

RouteKey = Tuple[str, str]


def status_class(status_code: int) -> str:
    """'2xx', '4xx', ... for a status code."""
    return f"{status_code // 100}xx"


def route_template(request: Request) -> str:
    """Path template of the route that served the request."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


class MetricsCollector:
    """Counters by status class and route, plus a latency window."""

    def __init__(self, window: int = 1000):
        self._durations: Deque[float] = deque(maxlen=window)
        self.total_requests = 0
        self.by_status: Counter = Counter()
        self.by_route: Counter = Counter()

    def record(self, method: str, route: str, status_code: int, duration_ms: float) -> None:
        self.total_requests += 1
        self.by_status[status_class(status_code)] += 1
        self.by_route[(method, route)] += 1
        self._durations.append(duration_ms)

    def latency_ms(self, quantile: float) -> float:
        if not self._durations:
            return 0.0
        ordered = sorted(self._durations)
        index = min(int(len(ordered) * quantile), len(ordered) - 1)
        return round(ordered[index], 2)

    def get_summary(self) -> Dict[str, float]:
        return {
            "http_requests_total": self.total_requests,
            "http_requests_2xx_total": self.by_status["2xx"],
            "http_requests_4xx_total": self.by_status["4xx"],
            "http_requests_5xx_total": self.by_status["5xx"],
            "http_request_duration_ms_p50": self.latency_ms(0.50),
            "http_request_duration_ms_p95": self.latency_ms(0.95),
            "http_request_duration_ms_p99": self.latency_ms(0.99),
        }

    def get_prometheus_format(self) -> str:
        """Prometheus text exposition of the current counters."""
        out = [
            "# HELP http_requests_total Total HTTP requests",
            "# TYPE http_requests_total counter",
            f"http_requests_total {self.total_requests}",
            "# HELP http_requests_by_status HTTP requests by status class",
            "# TYPE http_requests_by_status counter",
        ]
        out += [
            f'http_requests_by_status{{status="{cls}"}} {count}'
            for cls, count in sorted(self.by_status.items())
        ]
        out += [
            "# HELP http_requests_by_route HTTP requests by method and route template",
            "# TYPE http_requests_by_route counter",
        ]
        out += [
            f'http_requests_by_route{{method="{method}",route="{route}"}} {count}'
            for (method, route), count in sorted(self.by_route.items())
        ]
        out += [
            "# HELP http_request_duration_ms Request duration in milliseconds",
            "# TYPE http_request_duration_ms gauge",
        ]
        out += [
            f'http_request_duration_ms{{quantile="{q}"}} {self.latency_ms(q)}'
            for q in (0.5, 0.95, 0.99)
        ]
        return "\n".join(out) + "\n"


metrics_collector = MetricsCollector()


def get_metrics_collector() -> MetricsCollector:
    return metrics_collector


class LoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id, logs it and feeds the metrics collector."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = uuid.uuid4().hex[:8]
        set_request_id(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error while serving request",
                extra={"method": request.method, "path": request.url.path}
            )
            raise
        finally:
            clear_request_id()

        duration_ms = (time.perf_counter() - started) * 1000
        route = route_template(request)
        metrics_collector.record(request.method, route, response.status_code, duration_ms)

        if route not in QUIET_ROUTES:
            logger.log(
                logging.WARNING if response.status_code >= 400 else logging.INFO,
                f"{request.method} {route} -> {response.status_code}",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "duration_ms": round(duration_ms, 2),
                }
            )

        response.headers["X-Request-ID"] = request_id
        return response
