"""api-connector - build API clients from Connector and Request classes."""

import logging
from importlib.metadata import PackageNotFoundError, version

from .auth import (
    AccessTokenAuthenticator,
    Authenticator,
    BasicAuthenticator,
    HeaderAuthenticator,
    QueryAuthenticator,
    TokenAuthenticator,
)
from .core.config import Config, SenderConfig, TimeoutConfig
from .core.connector import Connector
from .core.enums import BodyFormat, Method
from .core.exceptions import (
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
from .core.logging import LoggingConfig
from .core.middleware import MiddlewarePipeline
from .core.pending_request import PendingRequest
from .core.property_bag import PropertyBag
from .core.request import Request
from .core.response import Response
from .faking import MockClient, MockResponse
from .oauth2 import AuthorizationCodeGrant, OAuthConfig
from .plugins import (
    AcceptsJson,
    AlwaysThrowOnErrors,
    HasFormBody,
    HasJsonBody,
    HasTimeout,
    LoggingPlugin,
    Plugin,
)
from .senders import HttpxSender, RequestsSender, Sender
from .core.env_config import load_from_env, load_oauth_config_from_env, load_sender_from_env

try:
    __version__ = version("api-connector-core")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Библиотека не настраивает логирование сама
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    "Connector",
    "Request",
    "PendingRequest",
    "Response",
    "PropertyBag",
    "MiddlewarePipeline",
    "Method",
    "BodyFormat",
    # Config
    "Config",
    "SenderConfig",
    "TimeoutConfig",
    "LoggingConfig",
    "load_from_env",
    "load_sender_from_env",
    "load_oauth_config_from_env",
    # Auth
    "Authenticator",
    "TokenAuthenticator",
    "BasicAuthenticator",
    "QueryAuthenticator",
    "HeaderAuthenticator",
    "AccessTokenAuthenticator",
    # Senders
    "Sender",
    "RequestsSender",
    "HttpxSender",
    # Faking
    "MockClient",
    "MockResponse",
    # Plugins
    "Plugin",
    "AcceptsJson",
    "HasJsonBody",
    "HasFormBody",
    "HasTimeout",
    "AlwaysThrowOnErrors",
    "LoggingPlugin",
    # OAuth2
    "AuthorizationCodeGrant",
    "OAuthConfig",
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
    "__version__",
]
