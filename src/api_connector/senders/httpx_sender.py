# src/api_connector/senders/httpx_sender.py

import threading
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from ..core.config import SenderConfig
from ..core.exceptions import classify_transport_exception
from .sender import Sender

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest
    from ..core.response import Response


class HttpxSender(Sender):
    """
    Sender на базе httpx: синхронный ``httpx.Client`` и ``httpx.AsyncClient``.

    Clients are created lazily. SSL verification is a client-level setting in
    httpx, so the per-request ``verify`` config key is not honoured here;
    ``SenderConfig.verify_ssl`` applies.

    Example:
        >>> Config.set_default_sender(HttpxSender)
        >>> response = await connector.send_async(GetUserRequest(1))
    """

    def __init__(self, config: Optional[SenderConfig] = None):
        super().__init__(config)
        self._client: Optional[httpx.Client] = None
        self._async_client: Optional[httpx.AsyncClient] = None
        self._lock = threading.Lock()

    def _client_options(self) -> Dict[str, Any]:
        return {
            "verify": self.config.verify_ssl,
            "headers": dict(self.config.headers),
        }

    def _get_client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(**self._client_options())
            return self._client

    def _get_async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(**self._client_options())
        return self._async_client

    def _request_options(self, pending_request: 'PendingRequest') -> Dict[str, Any]:
        timeout = self.resolve_timeout(pending_request)
        return {
            "method": pending_request.method.value,
            "url": pending_request.url,
            "headers": self.build_headers(pending_request),
            "params": pending_request.query.to_dict() or None,
            "timeout": httpx.Timeout(timeout.read, connect=timeout.connect),
            "follow_redirects": self.resolve_allow_redirects(pending_request),
            **self.build_body_options(pending_request),
        }

    def _to_response(self, pending_request: 'PendingRequest', raw: httpx.Response) -> 'Response':
        return pending_request.create_response(
            status=raw.status_code,
            headers=raw.headers,
            content=raw.content,
            raw=raw,
        )

    def send(self, pending_request: 'PendingRequest') -> 'Response':
        started = self._log_started(pending_request)

        try:
            try:
                raw = self._get_client().request(**self._request_options(pending_request))
            except httpx.HTTPError as e:
                error = classify_transport_exception(e, pending_request.url)
                self._log_failed(pending_request, error, started)
                raise error from e

            response = self._to_response(pending_request, raw)
            self._log_completed(pending_request, response, started)
            return response
        finally:
            self._log_finished()

    async def send_async(self, pending_request: 'PendingRequest') -> 'Response':
        started = self._log_started(pending_request)

        try:
            try:
                raw = await self._get_async_client().request(**self._request_options(pending_request))
            except httpx.HTTPError as e:
                error = classify_transport_exception(e, pending_request.url)
                self._log_failed(pending_request, error, started)
                raise error from e

            response = self._to_response(pending_request, raw)
            self._log_completed(pending_request, response, started)
            return response
        finally:
            self._log_finished()

    def close(self) -> None:
        """Close the sync client; use ``aclose`` for the async client."""
        if self._client is not None:
            self._client.close()
            self._client = None
        super().close()

    async def aclose(self) -> None:
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None
        self.close()
