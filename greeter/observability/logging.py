from __future__ import annotations

import logging
from logging.config import dictConfig

from asgi_correlation_id.context import correlation_id
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "greeter"


class CorrelationIdFilter(logging.Filter):
    """Attach the current request correlation ID to each log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id.get() or "unknown"
        return True


def configure_logging(level: str = "INFO") -> None:
    """Send app and uvicorn logs to stderr as one JSON object per line.

    uvicorn's access logger is muted: requests are never logged.
    """
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {"with_correlation": {"()": CorrelationIdFilter}},
            "formatters": {
                "json": {
                    "()": jsonlogger.JsonFormatter,
                    "fmt": (
                        "%(asctime)s %(levelname)s %(name)s "
                        "%(message)s %(correlation_id)s"
                    ),
                    "rename_fields": {"asctime": "timestamp", "levelname": "level"},
                    "static_fields": {"service": SERVICE_NAME},
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "filters": ["with_correlation"],
                }
            },
            "root": {"handlers": ["stderr"], "level": level},
            "loggers": {
                "uvicorn.error": {
                    "handlers": ["stderr"],
                    "level": level,
                    "propagate": False,
                },
                "uvicorn.access": {
                    "handlers": [],
                    "level": logging.CRITICAL + 1,
                    "propagate": False,
                },
            },
        }
    )
