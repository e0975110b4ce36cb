# src/api_connector/plugins/builtin.py
"""Bundled plugins."""

import logging
from typing import TYPE_CHECKING, Optional

from ..core.config import TimeoutConfig
from ..core.enums import BodyFormat
from ..utils.sanitizer import mask_url
from .plugin import Plugin

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest
    from ..core.response import Response

logger = logging.getLogger(__name__)


class AcceptsJson(Plugin):
    """Accept: application/json."""

    def boot(self, pending_request, owner) -> None:
        pending_request.headers.add('Accept', 'application/json')


class HasJsonBody(Plugin):
    """Send the body bag as JSON."""

    def boot(self, pending_request, owner) -> None:
        pending_request.body_format = BodyFormat.JSON
        pending_request.headers.add('Content-Type', 'application/json')


class HasFormBody(Plugin):
    """Send the body bag as application/x-www-form-urlencoded."""

    def boot(self, pending_request, owner) -> None:
        pending_request.body_format = BodyFormat.FORM
        pending_request.headers.add('Content-Type', 'application/x-www-form-urlencoded')


class HasTimeout(Plugin):
    """
    Per-connector or per-request timeout, stored in the ``timeout`` config key.

    Example:
        >>> plugins = (HasTimeout(connect=5, read=60),)
    """

    def __init__(self, connect: float = 10, read: float = 30):
        self.timeout = TimeoutConfig(connect=connect, read=read)

    def boot(self, pending_request, owner) -> None:
        pending_request.config.add('timeout', self.timeout)

    def __repr__(self) -> str:
        return f"HasTimeout(connect={self.timeout.connect}, read={self.timeout.read})"


class AlwaysThrowOnErrors(Plugin):
    """Raise RequestException for every 4xx/5xx response."""

    def boot(self, pending_request, owner) -> None:
        pending_request.middleware.on_response(self._throw, name='always_throw_on_errors')

    @staticmethod
    def _throw(response: 'Response') -> 'Response':
        return response.throw()


class LoggingPlugin(Plugin):
    """
    Log each request and response through the standard ``logging`` module.

    URLs are masked with ``mask_url`` before they reach the log.
    """

    def __init__(self, logger_name: Optional[str] = None, level: int = logging.INFO):
        self.logger = logging.getLogger(logger_name) if logger_name else logger
        self.level = level

    def boot(self, pending_request, owner) -> None:
        pending_request.middleware.on_request(self._log_request, name='logging_plugin')
        pending_request.middleware.on_response(self._log_response, name='logging_plugin')

    def _log_request(self, pending_request: 'PendingRequest') -> None:
        self.logger.log(
            self.level,
            "Sending %s %s",
            pending_request.method.value,
            mask_url(pending_request.get_full_url()),
            extra={'request_id': pending_request.request_id},
        )

    def _log_response(self, response: 'Response') -> None:
        pending_request = response.get_pending_request()
        self.logger.log(
            self.level,
            "Received %s for %s %s%s",
            response.status,
            pending_request.method.value,
            mask_url(pending_request.get_full_url()),
            " (mocked)" if response.is_mocked() else "",
            extra={'request_id': pending_request.request_id},
        )
