"""
Logging configuration for the billing notification handler.

JSON lines on stdout. The Lambda request ID is bound per invocation through
structlog's contextvars, so every event of one invocation carries it.
"""

import logging
import sys
import time

import structlog


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured logging for the handler.

    The Lambda runtime installs its own root handler before the handler
    module is imported, so the root logger is replaced rather than extended.

    Args:
        service_name: Name of the service for log context
        level: Standard log level name
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level.upper(),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def bind_invocation(request_id: str) -> None:
    """Reset the log context and bind the Lambda request ID for one invocation."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)


class Timer:
    """Context manager for timing operations."""

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds."""
        return round((self._end - self._start) * 1000, 2)
