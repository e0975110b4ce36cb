"""
Log filters adding the PendingRequest correlation id and static fields.
"""

import logging
from contextvars import ContextVar
from typing import Any, Dict, Optional

# ContextVar: каждый поток и каждая asyncio-задача видят свой id
_correlation_id: ContextVar[Optional[str]] = ContextVar("api_connector_correlation_id", default=None)


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID for the current context (senders use the PendingRequest id)."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """
    Adds ``correlation_id`` to every record emitted while a request is in flight.

    Example:
        >>> handler.addFilter(CorrelationIdFilter())
        >>> set_correlation_id(pending_request.request_id)
        >>> logger.info("Request started")  # correlation_id=<request id>
    """

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id and not hasattr(record, 'correlation_id'):
            record.correlation_id = correlation_id
        return True


class ExtraFieldsFilter(logging.Filter):
    """Adds static fields (service, environment, ...) to all records."""

    def __init__(self, extra_fields: Dict[str, Any]):
        super().__init__()
        self.extra_fields = extra_fields

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
