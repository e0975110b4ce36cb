# src/api_connector/senders/sender.py

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..core.config import SenderConfig, TimeoutConfig
from ..core.enums import BodyFormat
from ..core.logging import ConnectorLogger, clear_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest
    from ..core.response import Response


class Sender(ABC):
    """
    Транспорт: превращает PendingRequest в Response.

    Implementations raise ``TransportException`` subclasses for I/O failures
    and never raise for HTTP error statuses; use ``Response.throw()`` or the
    ``AlwaysThrowOnErrors`` plugin for that.
    """

    def __init__(self, config: Optional[SenderConfig] = None):
        self.config = config or SenderConfig()
        self._logger: Optional[ConnectorLogger] = (
            ConnectorLogger(self.config.logging, name=f"api_connector.sender.{type(self).__name__}")
            if self.config.logging and self.config.logging.has_output() else None
        )

    @abstractmethod
    def send(self, pending_request: 'PendingRequest') -> 'Response':
        """Выполнить запрос синхронно."""
        pass

    @abstractmethod
    async def send_async(self, pending_request: 'PendingRequest') -> 'Response':
        """Выполнить запрос асинхронно."""
        pass

    def close(self) -> None:
        if self._logger is not None:
            self._logger.close()

    # ==================== Helpers for subclasses ====================

    def resolve_timeout(self, pending_request: 'PendingRequest') -> TimeoutConfig:
        timeout = pending_request.config.get('timeout')
        if timeout is None:
            return self.config.timeout
        return TimeoutConfig.coerce(timeout)

    def resolve_verify(self, pending_request: 'PendingRequest') -> bool:
        return pending_request.config.get('verify', self.config.verify_ssl)

    def resolve_allow_redirects(self, pending_request: 'PendingRequest') -> bool:
        return pending_request.config.get('allow_redirects', self.config.allow_redirects)

    def build_body_options(self, pending_request: 'PendingRequest') -> Dict[str, Any]:
        """
        Map the merged body bag to transport keyword arguments.

        Empty body -> nothing; FORM -> ``data``; JSON (or unset) -> ``json``.
        """
        if pending_request.body.is_empty():
            return {}

        body = pending_request.body.to_dict()
        if pending_request.body_format == BodyFormat.FORM:
            return {'data': body}
        return {'json': body}

    def build_headers(self, pending_request: 'PendingRequest') -> Dict[str, str]:
        headers = dict(self.config.headers)
        headers.update({key: str(value) for key, value in pending_request.headers.to_dict().items()})
        return headers

    # ==================== Logging ====================

    def _log_started(self, pending_request: 'PendingRequest') -> float:
        if self._logger:
            set_correlation_id(pending_request.request_id)
            self._logger.info(
                "Request started",
                method=pending_request.method.value,
                url=pending_request.get_full_url(),
            )
        return time.monotonic()

    def _log_completed(self, pending_request: 'PendingRequest', response: 'Response', started: float) -> None:
        if self._logger:
            self._logger.info(
                "Request completed",
                method=pending_request.method.value,
                url=pending_request.get_full_url(),
                status=response.status,
                duration_ms=round((time.monotonic() - started) * 1000, 2),
                response_size=len(response.content),
            )

    def _log_failed(self, pending_request: 'PendingRequest', error: Exception, started: float) -> None:
        if self._logger:
            self._logger.error(
                "Request failed",
                method=pending_request.method.value,
                url=pending_request.get_full_url(),
                error=str(error),
                error_type=type(error).__name__,
                duration_ms=round((time.monotonic() - started) * 1000, 2),
            )

    def _log_finished(self) -> None:
        if self._logger:
            clear_correlation_id()
