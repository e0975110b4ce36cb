# src/api_connector/core/pending_request.py
"""
PendingRequest: merged, authenticated and booted snapshot of a (Connector, Request) pair.

Construction runs in a fixed order; later steps may read what earlier steps produced:

    1. resolve the connector
    2. resolve and validate the response class
    3. resolve the mock client
    4. merge headers, query, body, config and middleware (connector first, request second)
    5. apply the authenticator
    6. boot the connector, then the request
    7. boot plugins: connector plugins, then request plugins
"""

import logging
import uuid
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Type

from ..utils.url import build_query_string, join_url
from .config import Config
from .enums import BodyFormat, Method
from .exceptions import InvalidConnectorException, InvalidResponseClassException
from .response import Response

if TYPE_CHECKING:
    from ..auth.base import Authenticator
    from ..faking.mock_client import MockClient
    from ..plugins.plugin import Plugin
    from ..senders.sender import Sender
    from .connector import Connector
    from .request import Request

logger = logging.getLogger(__name__)


class PendingRequest:
    """
    Transport-ready request description.

    Built exactly once per send and owned by that send. The connector's and
    request's own bags are never modified: sending the same Request twice
    produces two independent PendingRequests.

    Attributes:
        request_id: Unique id, used as the logging correlation id
        method: HTTP method
        url: Base URL joined with the request endpoint (without query string)
        headers, query, body, config: Merged PropertyBags
        middleware: Merged MiddlewarePipeline (global, connector, request)
        authenticator: Authenticator that was applied, or None
        sender: Sender resolved from the connector
        mock_client: MockClient that replaces the sender, or None
    """

    def __init__(
        self,
        request: 'Request',
        connector: Optional['Connector'] = None,
        mock_client: Optional['MockClient'] = None,
    ):
        from .connector import Connector

        if connector is None:
            connector = request.get_connector()

        if not isinstance(connector, Connector):
            raise InvalidConnectorException()

        self.request = request
        self.connector = connector
        self.request_id = str(uuid.uuid4())
        self.method: Method = request.get_method()
        self.url: str = join_url(connector.resolve_base_url(), request.resolve_endpoint())
        self.response_class: Type[Response] = self._resolve_response_class()
        self.mock_client: Optional['MockClient'] = self._resolve_mock_client(mock_client)
        self.body_format: Optional[BodyFormat] = request.body_format or connector.body_format
        self.sender: 'Sender' = connector.sender()
        self.authenticator: Optional['Authenticator'] = None

        self._merge_request_properties() \
            ._run_authenticator() \
            ._run_boot_on_connector_and_request() \
            ._boot_plugins()

        logger.debug(
            "PendingRequest %s built: %s %s (mocked=%s)",
            self.request_id, self.method.value, self.url, self.mock_client is not None
        )

    # ==================== Construction steps ====================

    def _resolve_response_class(self) -> Type[Response]:
        response_class = self.request.response_class or self.connector.response_class or Response

        if not (isinstance(response_class, type) and issubclass(response_class, Response)):
            raise InvalidResponseClassException(response_class)

        return response_class

    def _resolve_mock_client(self, mock_client: Optional['MockClient']) -> Optional['MockClient']:
        if mock_client is not None:
            return mock_client
        if self.request.get_mock_client() is not None:
            return self.request.get_mock_client()
        return self.connector.get_mock_client()

    def _merge_request_properties(self) -> 'PendingRequest':
        connector, request = self.connector, self.request

        self.headers = connector.headers.merge(request.headers)
        self.query = connector.query.merge(request.query)
        self.body = connector.body.merge(request.body)
        self.config = connector.config.merge(request.config)
        self.middleware = Config.middleware().merge(connector.middleware, request.middleware)

        return self

    def _run_authenticator(self) -> 'PendingRequest':
        authenticator = self.request.get_authenticator() or self.connector.get_authenticator()

        if authenticator is not None:
            authenticator.apply(self)
            self.authenticator = authenticator

        return self

    def _run_boot_on_connector_and_request(self) -> 'PendingRequest':
        self.connector.boot(self)
        self.request.boot(self)

        return self

    def _boot_plugins(self) -> 'PendingRequest':
        booted: List[int] = []

        for owner in (self.connector, self.request):
            for plugin in owner.plugins:
                if id(plugin) in booted:
                    continue
                booted.append(id(plugin))
                plugin.boot(self, owner)

        return self

    # ==================== Helpers ====================

    def get_full_url(self) -> str:
        """URL with the merged query string appended."""
        query_string = build_query_string(self.query.to_dict())
        if not query_string:
            return self.url
        separator = '&' if '?' in self.url else '?'
        return f"{self.url}{separator}{query_string}"

    def get_sender(self) -> 'Sender':
        return self.sender

    def get_request(self) -> 'Request':
        return self.request

    def get_connector(self) -> 'Connector':
        return self.connector

    def get_plugins(self) -> List['Plugin']:
        return [*self.connector.plugins, *self.request.plugins]

    def create_response(
        self,
        status: int,
        headers: Optional[Mapping[str, str]],
        content: bytes,
        raw: Any = None,
        mocked: bool = False,
    ) -> Response:
        """Build the configured response class for this request."""
        return self.response_class(status, headers, content, self, raw=raw, mocked=mocked)

    # ==================== Dispatch ====================

    def _dispatch_to_mock(self) -> Response:
        mock_client = self.mock_client
        mock_client.record(self)
        response = mock_client.match(self).to_response(self)
        mock_client.record_response(response)
        return response

    def send(self) -> Response:
        """
        Run request middleware, dispatch to the mock client or sender, run response middleware.

        Raises:
            TransportException: The sender failed
            NoMockResponseFoundException: The mock client has nothing for this request
        """
        pending_request = self.middleware.execute_request_pipeline(self)

        if pending_request.mock_client is not None:
            response = pending_request._dispatch_to_mock()
        else:
            response = pending_request.sender.send(pending_request)

        return pending_request.middleware.execute_response_pipeline(response)

    async def send_async(self) -> Response:
        pending_request = self.middleware.execute_request_pipeline(self)

        if pending_request.mock_client is not None:
            response = pending_request._dispatch_to_mock()
        else:
            response = await pending_request.sender.send_async(pending_request)

        return pending_request.middleware.execute_response_pipeline(response)

    def __repr__(self) -> str:
        return f"<PendingRequest {self.method.value} {self.url}>"
