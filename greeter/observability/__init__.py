"""Logging and metrics wiring."""

from __future__ import annotations

from greeter.observability.logging import configure_logging
from greeter.observability.metrics import MetricsMiddleware, start_metrics_server

__all__ = [
    "MetricsMiddleware",
    "configure_logging",
    "start_metrics_server",
]
