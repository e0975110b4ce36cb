"""
Structured logger used by senders when SenderConfig.logging is set.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, List, Optional

from ...utils.sanitizer import mask_sensitive_data
from .config import LoggingConfig, LogLevel
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .formatters import get_formatter


class ConnectorLogger:
    """
    Thin wrapper around a stdlib logger with masking of secrets.

    Keyword arguments passed to the log methods become record attributes
    (``extra``) after ``mask_sensitive_data`` replaced tokens, passwords and
    Authorization values.

    Example:
        >>> logger = ConnectorLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Request started", method="GET", url="https://api.com?api_key=s3cr3t")
        >>> logger.close()
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "api_connector.sender"):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        level = self._get_level(self.config.level)

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._logger.handlers.clear()

        filters: List[logging.Filter] = []
        if self.config.enable_correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(ExtraFieldsFilter(self.config.extra_fields))

        formatter = get_formatter(self.config.format.value)

        if self.config.enable_console:
            self._add_handler(logging.StreamHandler(sys.stdout), level, formatter, filters)

        if self.config.file_path:
            Path(self.config.file_path).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=self.config.file_path,
                maxBytes=self.config.max_bytes,
                backupCount=self.config.backup_count,
                encoding='utf-8'
            )
            self._add_handler(file_handler, level, formatter, filters)

    def _add_handler(
        self,
        handler: logging.Handler,
        level: int,
        formatter: logging.Formatter,
        filters: List[logging.Filter]
    ) -> None:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        for f in filters:
            handler.addFilter(f)
        self._logger.addHandler(handler)

    def _get_level(self, level: LogLevel) -> int:
        return getattr(logging, level.value)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra=mask_sensitive_data(kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def close(self) -> None:
        """Flush and close handlers. Idempotent."""
        if self._closed:
            return

        for handler in self._logger.handlers[:]:
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
