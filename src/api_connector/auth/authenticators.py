# src/api_connector/auth/authenticators.py

import base64
from typing import TYPE_CHECKING

from .base import Authenticator

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest


class TokenAuthenticator(Authenticator):
    """Authorization: <prefix> <token> (Bearer by default)."""

    def __init__(self, token: str, prefix: str = "Bearer"):
        """
        Args:
            token: Токен
            prefix: Префикс схемы ('Bearer', 'Token', ...)
        """
        self.token = token
        self.prefix = prefix

    def apply(self, pending_request: 'PendingRequest') -> None:
        value = f"{self.prefix} {self.token}".strip()
        pending_request.headers.add('Authorization', value)


class BasicAuthenticator(Authenticator):
    """HTTP Basic аутентификация."""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def apply(self, pending_request: 'PendingRequest') -> None:
        credentials = f"{self.username}:{self.password}".encode("utf-8")
        encoded = base64.b64encode(credentials).decode("ascii")
        pending_request.headers.add('Authorization', f"Basic {encoded}")


class QueryAuthenticator(Authenticator):
    """Credential sent as a query parameter (e.g. ``?api_key=...``)."""

    def __init__(self, parameter: str, value: str):
        self.parameter = parameter
        self.value = value

    def apply(self, pending_request: 'PendingRequest') -> None:
        pending_request.query.add(self.parameter, self.value)


class HeaderAuthenticator(Authenticator):
    """Credential sent in a custom header (e.g. ``X-API-Key``)."""

    def __init__(self, value: str, header: str = "X-API-Key"):
        self.header = header
        self.value = value

    def apply(self, pending_request: 'PendingRequest') -> None:
        pending_request.headers.add(self.header, self.value)
