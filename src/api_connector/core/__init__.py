"""Core модули: коннектор, запрос, сборка PendingRequest, ответ."""

from .config import Config, SenderConfig, TimeoutConfig
from .connector import Connector
from .enums import BodyFormat, Method
from .exceptions import (
    ClientException,
    ConnectionError,
    ConnectorException,
    FatalError,
    InvalidArgumentException,
    InvalidConnectorException,
    InvalidResponseClassException,
    InvalidResponseError,
    InvalidStateException,
    NoMockResponseFoundException,
    OAuthConfigValidationException,
    ProxyError,
    RequestException,
    ServerException,
    TimeoutError,
    TransportException,
    classify_transport_exception,
)
from .middleware import MiddlewarePipeline
from .pending_request import PendingRequest
from .property_bag import PropertyBag
from .request import Request
from .response import Response

__all__ = [
    # Config
    "Config",
    "SenderConfig",
    "TimeoutConfig",
    # Core
    "Connector",
    "Request",
    "PendingRequest",
    "Response",
    "PropertyBag",
    "MiddlewarePipeline",
    "Method",
    "BodyFormat",
    # Exceptions
    "ConnectorException",
    "FatalError",
    "InvalidConnectorException",
    "InvalidResponseClassException",
    "InvalidStateException",
    "OAuthConfigValidationException",
    "NoMockResponseFoundException",
    "InvalidResponseError",
    "InvalidArgumentException",
    "RequestException",
    "ClientException",
    "ServerException",
    "TransportException",
    "TimeoutError",
    "ConnectionError",
    "ProxyError",
    "classify_transport_exception",
]
