"""
Load sender and OAuth configuration from environment variables and .env files.

Priority (highest to lowest):
    1. **overrides - explicit parameters
    2. Environment variables
    3. .env file
    4. Defaults
"""

from typing import Optional

from ...oauth2.config import OAuthConfig
from ...senders.httpx_sender import HttpxSender
from ...senders.requests_sender import RequestsSender
from ...senders.sender import Sender
from ..config import SenderConfig, TimeoutConfig
from ..logging.config import LoggingConfig
from .validator import ConnectorSettings, OAuthSettings

SENDERS = {
    "requests": RequestsSender,
    "httpx": HttpxSender,
}


def _settings(env_file: Optional[str]) -> ConnectorSettings:
    if env_file is None:
        return ConnectorSettings()
    return ConnectorSettings(_env_file=env_file)


def _build_sender_config(settings: ConnectorSettings, overrides: dict) -> SenderConfig:
    timeout = TimeoutConfig(
        connect=overrides.get('timeout_connect', settings.timeout_connect),
        read=overrides.get('timeout_read', settings.timeout_read),
    )

    logging_config = None
    if overrides.get('log_enabled', settings.log_enabled):
        logging_config = LoggingConfig.create(
            level=overrides.get('log_level', settings.log_level),
            format=overrides.get('log_format', settings.log_format),
            enable_console=overrides.get('log_enable_console', settings.log_enable_console),
            file_path=overrides.get('log_file_path', settings.log_file_path),
            max_bytes=overrides.get('log_max_bytes', settings.log_max_bytes),
            backup_count=overrides.get('log_backup_count', settings.log_backup_count),
        )

    return SenderConfig(
        timeout=timeout,
        verify_ssl=overrides.get('verify_ssl', settings.verify_ssl),
        allow_redirects=overrides.get('allow_redirects', settings.allow_redirects),
        logging=logging_config,
    )


def load_from_env(env_file: Optional[str] = None, **overrides) -> SenderConfig:
    """
    Build a SenderConfig from ``API_CONNECTOR_*`` variables.

    Example:
        >>> config = load_from_env()
        >>> config = load_from_env(env_file=".env.production", timeout_read=120)
    """
    return _build_sender_config(_settings(env_file), overrides)


def load_sender_from_env(env_file: Optional[str] = None, **overrides) -> Sender:
    """
    Build the configured Sender (``API_CONNECTOR_SENDER=requests|httpx``).

    Example:
        >>> connector.with_sender(load_sender_from_env())
    """
    settings = _settings(env_file)
    name = overrides.pop('sender', settings.sender)

    if name not in SENDERS:
        raise ValueError(f"Unknown sender {name!r}. Available: {', '.join(sorted(SENDERS))}")

    return SENDERS[name](_build_sender_config(settings, overrides))


def load_oauth_config_from_env(env_file: Optional[str] = None, **overrides) -> OAuthConfig:
    """
    Build an OAuthConfig from ``API_CONNECTOR_OAUTH_*`` variables.

    Example:
        >>> class MyConnector(AuthorizationCodeGrant, Connector):
        ...     def default_oauth_config(self):
        ...         return load_oauth_config_from_env()
    """
    settings = OAuthSettings() if env_file is None else OAuthSettings(_env_file=env_file)

    return OAuthConfig(
        client_id=overrides.get('client_id', settings.client_id),
        client_secret=overrides.get('client_secret', settings.client_secret),
        redirect_uri=overrides.get('redirect_uri', settings.redirect_uri),
        authorize_endpoint=overrides.get('authorize_endpoint', settings.authorize_endpoint),
        token_endpoint=overrides.get('token_endpoint', settings.token_endpoint),
        user_endpoint=overrides.get('user_endpoint', settings.user_endpoint),
        default_scopes=list(overrides.get('default_scopes', settings.scopes())),
        scope_separator=overrides.get('scope_separator', settings.scope_separator),
    )
