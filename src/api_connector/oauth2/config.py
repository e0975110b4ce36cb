# src/api_connector/oauth2/config.py

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional

from ..core.exceptions import OAuthConfigValidationException

if TYPE_CHECKING:
    from datetime import datetime

    from ..auth.access_token import AccessTokenAuthenticator
    from ..core.request import Request

RequestModifier = Callable[['Request'], None]
AuthenticatorFactory = Callable[[str, Optional[str], Optional['datetime']], 'AccessTokenAuthenticator']
UserRequestFactory = Callable[['OAuthConfig'], 'Request']


@dataclass
class OAuthConfig:
    """
    Настройки OAuth2 authorization-code flow.

    Mutable on purpose: connectors expose a single instance through
    ``oauth_config`` and callers tweak it (``default_scopes``,
    ``request_modifier``) at runtime.

    Attributes:
        client_id: OAuth client id
        client_secret: OAuth client secret
        redirect_uri: Callback registered with the provider
        authorize_endpoint: Relative to the connector base URL unless absolute
        token_endpoint: Token exchange and refresh endpoint
        user_endpoint: Endpoint returning the authenticated user
        default_scopes: Prepended to the scopes of every authorization URL
        scope_separator: Joins scopes in the authorization URL
        request_modifier: Called with every OAuth request before it is sent
        authenticator_factory: ``(access, refresh, expires_at) -> authenticator``
        user_request_factory: ``(oauth_config) -> Request`` for get_user()
    """

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    authorize_endpoint: str = "authorize"
    token_endpoint: str = "token"
    user_endpoint: str = "user"
    default_scopes: List[str] = field(default_factory=list)
    scope_separator: str = " "
    request_modifier: Optional[RequestModifier] = None
    authenticator_factory: Optional[AuthenticatorFactory] = None
    user_request_factory: Optional[UserRequestFactory] = None

    def validate(self) -> bool:
        """
        Raises:
            OAuthConfigValidationException: client id, client secret or redirect URI is empty
        """
        if not self.client_id:
            raise OAuthConfigValidationException("The Client ID is empty or has not been provided.")

        if not self.client_secret:
            raise OAuthConfigValidationException("The Client Secret is empty or has not been provided.")

        if not self.redirect_uri:
            raise OAuthConfigValidationException("The Redirect URI is empty or has not been provided.")

        return True

    def __repr__(self) -> str:
        return (
            f"OAuthConfig(client_id={self.client_id!r}, client_secret='***', "
            f"redirect_uri={self.redirect_uri!r}, default_scopes={self.default_scopes!r})"
        )
