from .authorization_code_grant import AuthorizationCodeGrant
from .config import OAuthConfig
from .requests import GetAccessTokenRequest, GetRefreshTokenRequest, GetUserRequest, OAuthRequest

__all__ = [
    "AuthorizationCodeGrant",
    "OAuthConfig",
    "OAuthRequest",
    "GetAccessTokenRequest",
    "GetRefreshTokenRequest",
    "GetUserRequest",
]
