from .access_token import AccessTokenAuthenticator
from .authenticators import BasicAuthenticator, HeaderAuthenticator, QueryAuthenticator, TokenAuthenticator
from .base import Authenticator

__all__ = [
    "Authenticator",
    "TokenAuthenticator",
    "BasicAuthenticator",
    "QueryAuthenticator",
    "HeaderAuthenticator",
    "AccessTokenAuthenticator",
]
