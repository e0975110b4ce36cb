"""
Structured logging for api-connector senders.

Example:
    >>> from api_connector.core.logging import LoggingConfig
    >>> from api_connector.core.config import SenderConfig
    >>> from api_connector.senders import RequestsSender
    >>>
    >>> config = SenderConfig.create(logging=LoggingConfig.create(level="DEBUG", format="json"))
    >>> connector.with_sender(RequestsSender(config))
"""

from .config import LogFormat, LoggingConfig, LogLevel
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .logger import ConnectorLogger

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "ConnectorLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
