from __future__ import annotations

import logging
import time
from collections.abc import Callable

from prometheus_client import Counter, Histogram, start_http_server
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from greeter.constants import HOST

logger = logging.getLogger(__name__)

UNMATCHED_PATH = "unmatched"

REQUEST_COUNTER = Counter(
    "greeter_request_total",
    "Total HTTP requests",
    ["method", "path", "status_code"],
)
REQUEST_LATENCY = Histogram(
    "greeter_request_duration_seconds",
    "HTTP request latency",
    ["method", "path"],
)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Collect Prometheus metrics for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start
        # Label by route template so stray paths don't grow the series count.
        route = request.scope.get("route")
        path_template = getattr(route, "path", UNMATCHED_PATH)
        REQUEST_COUNTER.labels(
            request.method, path_template, response.status_code
        ).inc()
        REQUEST_LATENCY.labels(request.method, path_template).observe(duration)
        return response


def start_metrics_server(port: int) -> None:
    """Expose the default registry on its own listener, off the app's routes."""
    start_http_server(port, addr=HOST)
    logger.info("Metrics on http://%s:%s/metrics", HOST, port)
