# src/api_connector/senders/requests_sender.py

import asyncio
from typing import TYPE_CHECKING, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException

from ..core.config import SenderConfig
from ..core.exceptions import classify_transport_exception
from .sender import Sender
from .session_manager import ThreadSafeSessionManager

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest
    from ..core.response import Response


class RequestsSender(Sender):
    """
    Sender на базе requests (по умолчанию).

    Each thread gets its own ``requests.Session``. ``send_async`` runs the
    blocking call in the event loop's default executor.

    Example:
        >>> connector.with_sender(RequestsSender(SenderConfig.create(timeout=(3, 60))))
    """

    def __init__(self, config: Optional[SenderConfig] = None):
        super().__init__(config)
        self._session_manager = ThreadSafeSessionManager(session_factory=self._create_session)

    def _create_session(self) -> requests.Session:
        session = requests.Session()

        # Ретраи не выполняются на этом уровне
        adapter = HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        return session

    @property
    def session(self) -> requests.Session:
        """Session of the current thread."""
        return self._session_manager.get_session()

    def send(self, pending_request: 'PendingRequest') -> 'Response':
        """
        Raises:
            TransportException: requests raised (timeout, connection, proxy, ...)
        """
        started = self._log_started(pending_request)

        try:
            try:
                raw = self.session.request(
                    method=pending_request.method.value,
                    url=pending_request.url,
                    headers=self.build_headers(pending_request),
                    params=pending_request.query.to_dict() or None,
                    timeout=self.resolve_timeout(pending_request).as_tuple(),
                    verify=self.resolve_verify(pending_request),
                    allow_redirects=self.resolve_allow_redirects(pending_request),
                    **self.build_body_options(pending_request),
                )
            except RequestException as e:
                error = classify_transport_exception(e, pending_request.url)
                self._log_failed(pending_request, error, started)
                raise error from e

            response = pending_request.create_response(
                status=raw.status_code,
                headers=raw.headers,
                content=raw.content,
                raw=raw,
            )
            self._log_completed(pending_request, response, started)
            return response
        finally:
            self._log_finished()

    async def send_async(self, pending_request: 'PendingRequest') -> 'Response':
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.send, pending_request)

    def get_active_sessions_count(self) -> int:
        return self._session_manager.get_active_sessions_count()

    def close(self) -> None:
        self._session_manager.close_all()
        super().close()
