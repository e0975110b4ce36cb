"""
Environment configuration.

Example:
    >>> from api_connector.core.env_config import load_sender_from_env
    >>> connector.with_sender(load_sender_from_env(env_file=".env"))
"""

from .loader import load_from_env, load_oauth_config_from_env, load_sender_from_env
from .validator import ConnectorSettings, OAuthSettings

__all__ = [
    "load_from_env",
    "load_sender_from_env",
    "load_oauth_config_from_env",
    "ConnectorSettings",
    "OAuthSettings",
]
