# src/api_connector/core/request.py
"""Single endpoint definition."""

from typing import TYPE_CHECKING, Optional, Type, Union

from .enums import BodyFormat, Method
from .exceptions import InvalidConnectorException
from .properties import HasRequestProperties

if TYPE_CHECKING:
    from ..faking.mock_client import MockClient
    from .connector import Connector
    from .response import Response


class Request(HasRequestProperties):
    """
    Описание одного эндпоинта.

    Subclasses set ``method`` and implement ``resolve_endpoint()``. Request
    properties override connector properties with the same key.

    Attributes:
        method: HTTP method
        endpoint: Static endpoint; override resolve_endpoint() for dynamic paths
        connector: Connector class or instance enabling ``request.send()``
        response_class: Response subclass to build (overrides the connector's)
        body_format: Body encoding; None lets the connector or a plugin decide

    Example:
        >>> class GetUserRequest(Request):
        ...     method = Method.GET
        ...     connector = ApiConnector
        ...
        ...     def __init__(self, user_id):
        ...         self.user_id = user_id
        ...
        ...     def resolve_endpoint(self):
        ...         return f"/users/{self.user_id}"
    """

    method: Method = Method.GET
    endpoint: str = ""
    connector: Optional[Union[Type['Connector'], 'Connector']] = None
    response_class: Optional[Type['Response']] = None
    body_format: Optional[BodyFormat] = None

    def resolve_endpoint(self) -> str:
        return self.endpoint

    def get_method(self) -> Method:
        return Method(self.method)

    def get_connector(self) -> Optional['Connector']:
        """
        Resolve the connector instance for this request.

        A connector class is instantiated once and cached on the request.
        """
        from .connector import Connector

        resolved = getattr(self, '_resolved_connector', None)
        if resolved is not None:
            return resolved

        candidate = self.connector
        if isinstance(candidate, type) and issubclass(candidate, Connector):
            candidate = candidate()
        if candidate is not None and not isinstance(candidate, Connector):
            raise InvalidConnectorException(
                f"{type(self).__name__}.connector must be a Connector class or instance, "
                f"got {candidate!r}."
            )

        self._resolved_connector = candidate
        return candidate

    def set_connector(self, connector: 'Connector') -> 'Request':
        self._resolved_connector = connector
        return self

    def send(self, mock_client: Optional['MockClient'] = None) -> 'Response':
        """
        Send through the associated connector.

        Raises:
            InvalidConnectorException: The request has no connector
        """
        connector = self.get_connector()
        if connector is None:
            raise InvalidConnectorException()
        return connector.send(self, mock_client)

    async def send_async(self, mock_client: Optional['MockClient'] = None) -> 'Response':
        connector = self.get_connector()
        if connector is None:
            raise InvalidConnectorException()
        return await connector.send_async(self, mock_client)
