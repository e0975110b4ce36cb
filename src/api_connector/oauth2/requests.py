# src/api_connector/oauth2/requests.py
"""Requests sent by the authorization-code flow."""

from typing import Any, Dict

from ..core.enums import Method
from ..core.request import Request
from ..plugins.builtin import HasFormBody
from .config import OAuthConfig


class OAuthRequest(Request):
    """Accept JSON, form-encoded body."""

    plugins = (HasFormBody(),)

    def __init__(self, oauth_config: OAuthConfig):
        self.oauth_config = oauth_config

    def default_headers(self) -> Dict[str, Any]:
        return {'Accept': 'application/json'}


class GetAccessTokenRequest(OAuthRequest):
    """Exchange an authorization code for tokens."""

    method = Method.POST

    def __init__(self, code: str, oauth_config: OAuthConfig):
        super().__init__(oauth_config)
        self.code = code

    def resolve_endpoint(self) -> str:
        return self.oauth_config.token_endpoint

    def default_body(self) -> Dict[str, Any]:
        return {
            'grant_type': 'authorization_code',
            'code': self.code,
            'client_id': self.oauth_config.client_id,
            'client_secret': self.oauth_config.client_secret,
            'redirect_uri': self.oauth_config.redirect_uri,
        }


class GetRefreshTokenRequest(OAuthRequest):
    """Exchange a refresh token for a new access token."""

    method = Method.POST

    def __init__(self, oauth_config: OAuthConfig, refresh_token: str):
        super().__init__(oauth_config)
        self.refresh_token = refresh_token

    def resolve_endpoint(self) -> str:
        return self.oauth_config.token_endpoint

    def default_body(self) -> Dict[str, Any]:
        return {
            'grant_type': 'refresh_token',
            'refresh_token': self.refresh_token,
            'client_id': self.oauth_config.client_id,
            'client_secret': self.oauth_config.client_secret,
        }


class GetUserRequest(OAuthRequest):
    method = Method.GET

    def resolve_endpoint(self) -> str:
        return self.oauth_config.user_endpoint
