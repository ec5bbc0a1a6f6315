"""
Logging configuration with request ID support.

Every record emitted under the "lodge" logger carries the id of the request
being served, or "-" outside of a request.
"""

import logging
import uuid
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class RequestIDFilter(logging.Filter):
    """Logging filter to add request ID to log records"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def new_request_id() -> str:
    """Short 8-character id"""
    return uuid.uuid4().hex[:8]


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install the application handler on the "lodge" logger (idempotent)."""
    logger = logging.getLogger("lodge")
    logger.setLevel(level.upper())

    for handler in logger.handlers:
        if getattr(handler, "lodge_handler", False):
            return logger

    handler = logging.StreamHandler()
    handler.lodge_handler = True
    handler.addFilter(RequestIDFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
