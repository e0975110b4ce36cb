# src/api_connector/oauth2/authorization_code_grant.py
"""
OAuth2 authorization-code flow для Connector.

Flow:
    1. get_authorization_url() -> redirect the user, state is remembered
    2. get_access_token(code, state, expected_state) -> AccessTokenAuthenticator
    3. refresh_access_token(authenticator) when it expires
    4. get_user(authenticator) -> Response

Every precondition (config, state, refresh token) is checked before any I/O.
"""

import hmac
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Union

from ..auth.access_token import AccessTokenAuthenticator
from ..core.exceptions import InvalidArgumentException, InvalidResponseError, InvalidStateException
from ..utils.url import build_query_string, join_url
from .config import OAuthConfig, RequestModifier
from .requests import GetAccessTokenRequest, GetRefreshTokenRequest, GetUserRequest

if TYPE_CHECKING:
    from ..auth.base import Authenticator
    from ..core.request import Request
    from ..core.response import Response

logger = logging.getLogger(__name__)


class AuthorizationCodeGrant:
    """
    Mixin for Connector subclasses.

    Example:
        >>> class SpotifyConnector(AuthorizationCodeGrant, Connector):
        ...     base_url = "https://accounts.spotify.com"
        ...
        ...     def default_oauth_config(self):
        ...         return OAuthConfig(client_id="id", client_secret="secret",
        ...                            redirect_uri="https://app.example.com/callback")
        ...
        >>> connector = SpotifyConnector()
        >>> url = connector.get_authorization_url(["user-read-email"])
        >>> # ... user comes back with ?code=...&state=...
        >>> authenticator = connector.get_access_token(code, state, connector.get_state())
    """

    def default_oauth_config(self) -> OAuthConfig:
        return OAuthConfig()

    @property
    def oauth_config(self) -> OAuthConfig:
        config = getattr(self, '_oauth_config', None)
        if config is None:
            config = self.default_oauth_config()
            self._oauth_config = config
        return config

    def get_state(self) -> Optional[str]:
        """State generated or supplied by the last get_authorization_url() call."""
        return getattr(self, '_state', None)

    # ==================== Authorization URL ====================

    def get_authorization_url(
        self,
        scopes: Optional[Iterable[str]] = None,
        state: Optional[str] = None,
        scope_separator: Optional[str] = None,
        additional_query: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Build the URL the user is redirected to.

        Raises:
            OAuthConfigValidationException: Config is incomplete
        """
        config = self.oauth_config
        config.validate()

        separator = config.scope_separator if scope_separator is None else scope_separator
        all_scopes = [*config.default_scopes, *(scopes or [])]

        self._state = state if state is not None else secrets.token_hex(16)

        query = {
            'response_type': 'code',
            'scope': separator.join(all_scopes),
            'client_id': config.client_id,
            'redirect_uri': config.redirect_uri,
            'state': self._state,
            **(additional_query or {}),
        }

        url = join_url(self.resolve_base_url(), config.authorize_endpoint)
        separator = '&' if '?' in url else '?'

        return f"{url}{separator}{build_query_string(query)}"

    # ==================== Tokens ====================

    def get_access_token(
        self,
        code: str,
        state: Optional[str] = None,
        expected_state: Optional[str] = None,
        return_response: bool = False,
        request_modifier: Optional[RequestModifier] = None,
    ) -> Union[AccessTokenAuthenticator, 'Response']:
        """
        Exchange the authorization code for an authenticator.

        Raises:
            OAuthConfigValidationException: Config is incomplete
            InvalidStateException: ``state`` does not match ``expected_state``
            RequestException: Token endpoint answered 4xx/5xx
        """
        config = self.oauth_config
        config.validate()

        if expected_state is not None and not self._states_match(state, expected_state):
            raise InvalidStateException()

        request = self.resolve_access_token_request(code, config)
        response = self._send_oauth_request(request, request_modifier)

        if return_response:
            return response

        response.throw()

        logger.debug("Access token obtained from %s", response.get_pending_request().url)
        return self.create_oauth_authenticator_from_response(response)

    def refresh_access_token(
        self,
        refresh_token: Union[AccessTokenAuthenticator, str],
        return_response: bool = False,
        request_modifier: Optional[RequestModifier] = None,
    ) -> Union[AccessTokenAuthenticator, 'Response']:
        """
        Raises:
            OAuthConfigValidationException: Config is incomplete
            InvalidArgumentException: No refresh token available
            RequestException: Token endpoint answered 4xx/5xx
        """
        config = self.oauth_config
        config.validate()

        if isinstance(refresh_token, AccessTokenAuthenticator):
            refresh_token = refresh_token.get_refresh_token()

        if refresh_token is None:
            raise InvalidArgumentException("The provided OAuthAuthenticator does not contain a refresh token.")

        request = self.resolve_refresh_token_request(config, refresh_token)
        response = self._send_oauth_request(request, request_modifier)

        if return_response:
            return response

        response.throw()

        logger.debug("Access token refreshed via %s", response.get_pending_request().url)
        return self.create_oauth_authenticator_from_response(response, fallback_refresh_token=refresh_token)

    def get_user(
        self,
        authenticator: 'Authenticator',
        request_modifier: Optional[RequestModifier] = None,
    ) -> 'Response':
        config = self.oauth_config
        config.validate()

        request = self.resolve_user_request(config)
        request.authenticate(authenticator)

        return self._send_oauth_request(request, request_modifier)

    # ==================== Factories ====================

    def resolve_access_token_request(self, code: str, oauth_config: OAuthConfig) -> 'Request':
        return GetAccessTokenRequest(code, oauth_config)

    def resolve_refresh_token_request(self, oauth_config: OAuthConfig, refresh_token: str) -> 'Request':
        return GetRefreshTokenRequest(oauth_config, refresh_token)

    def resolve_user_request(self, oauth_config: OAuthConfig) -> 'Request':
        if oauth_config.user_request_factory is not None:
            return oauth_config.user_request_factory(oauth_config)
        return GetUserRequest(oauth_config)

    def create_oauth_authenticator(
        self,
        access_token: str,
        refresh_token: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ) -> AccessTokenAuthenticator:
        factory = self.oauth_config.authenticator_factory
        if factory is not None:
            return factory(access_token, refresh_token, expires_at)
        return AccessTokenAuthenticator(access_token, refresh_token, expires_at)

    def create_oauth_authenticator_from_response(
        self,
        response: 'Response',
        fallback_refresh_token: Optional[str] = None,
    ) -> AccessTokenAuthenticator:
        """
        Raises:
            InvalidResponseError: Body is not a JSON object with an access_token
        """
        data = response.json()
        if not isinstance(data, dict) or not data.get('access_token'):
            raise InvalidResponseError("Token response does not contain an access_token.")

        refresh_token = data.get('refresh_token') or fallback_refresh_token

        expires_at = None
        if data.get('expires_in') is not None:
            expires_at = datetime.now(timezone.utc) + timedelta(seconds=int(data['expires_in']))

        return self.create_oauth_authenticator(data['access_token'], refresh_token, expires_at)

    # ==================== Internals ====================

    def _send_oauth_request(self, request: 'Request', request_modifier: Optional[RequestModifier]) -> 'Response':
        for modifier in (self.oauth_config.request_modifier, request_modifier):
            if modifier is not None:
                modifier(request)

        return self.send(request)

    @staticmethod
    def _states_match(state: Optional[str], expected_state: str) -> bool:
        if state is None:
            return False
        return hmac.compare_digest(state.encode('utf-8'), expected_state.encode('utf-8'))
