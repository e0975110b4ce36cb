# src/api_connector/core/connector.py
"""Base API definition shared by every request sent to the same service."""

from typing import TYPE_CHECKING, Optional, Type

from .config import Config
from .enums import BodyFormat
from .properties import HasRequestProperties

if TYPE_CHECKING:
    from ..faking.mock_client import MockClient
    from ..senders.sender import Sender
    from .pending_request import PendingRequest
    from .request import Request
    from .response import Response


class Connector(HasRequestProperties):
    """
    Базовое определение API.

    Holds the base URL and the defaults shared by every request: headers,
    query, body, config, authenticator, middleware and plugins. Create one
    instance per API and reuse it.

    Example:
        >>> class GitHubConnector(Connector):
        ...     base_url = "https://api.github.com"
        ...
        ...     def default_headers(self):
        ...         return {"Accept": "application/vnd.github+json"}
        ...
        >>> connector = GitHubConnector()
        >>> connector.authenticate(TokenAuthenticator("ghp_..."))
        >>> response = connector.send(GetRepoRequest("octocat", "hello-world"))
    """

    base_url: str = ""

    # Response subclass used when the request does not define one
    response_class: Optional[Type['Response']] = None

    # Body encoding used when the request does not define one
    body_format: Optional[BodyFormat] = None

    def resolve_base_url(self) -> str:
        return self.base_url

    # ==================== Sender ====================

    def default_sender(self) -> 'Sender':
        """Sender created on first use; defaults to the global Config sender."""
        return Config.create_default_sender()

    def sender(self) -> 'Sender':
        sender = getattr(self, '_sender', None)
        if sender is None:
            sender = self.default_sender()
            self._sender = sender
        return sender

    def with_sender(self, sender: 'Sender') -> 'Connector':
        self._sender = sender
        return self

    # ==================== Sending ====================

    def create_pending_request(
        self,
        request: 'Request',
        mock_client: Optional['MockClient'] = None,
    ) -> 'PendingRequest':
        """Build the merged, authenticated and booted PendingRequest without sending it."""
        from .pending_request import PendingRequest

        return PendingRequest(request, connector=self, mock_client=mock_client)

    def send(self, request: 'Request', mock_client: Optional['MockClient'] = None) -> 'Response':
        """
        Отправить запрос через этот коннектор.

        Args:
            request: Request instance
            mock_client: MockClient overriding the request/connector mock client

        Returns:
            Response (or the request's response_class)

        Raises:
            InvalidResponseClassException: response_class is not a Response subclass
            TransportException: Transport failed
            NoMockResponseFoundException: Mock client has no matching response
        """
        return self.create_pending_request(request, mock_client).send()

    async def send_async(self, request: 'Request', mock_client: Optional['MockClient'] = None) -> 'Response':
        """Coroutine counterpart of ``send`` with identical merge/auth semantics."""
        return await self.create_pending_request(request, mock_client).send_async()

    def close(self) -> None:
        """Release the cached sender's connections."""
        sender = getattr(self, '_sender', None)
        if sender is not None:
            sender.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
