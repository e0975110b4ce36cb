"""
Pydantic settings for environment configuration.

Variables are read from the process environment and an optional ``.env`` file.
"""

from typing import List, Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectorSettings(BaseSettings):
    """
    Transport settings from ``API_CONNECTOR_*`` variables.

    Example .env file:
        API_CONNECTOR_SENDER=httpx
        API_CONNECTOR_TIMEOUT_CONNECT=5
        API_CONNECTOR_TIMEOUT_READ=60
        API_CONNECTOR_VERIFY_SSL=false
        API_CONNECTOR_LOG_ENABLED=true
        API_CONNECTOR_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix='API_CONNECTOR_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    sender: Literal["requests", "httpx"] = Field(default="requests", description="Transport implementation")

    # Timeouts
    timeout_connect: float = Field(default=10.0, gt=0)
    timeout_read: float = Field(default=30.0, gt=0)

    verify_ssl: bool = Field(default=True)
    allow_redirects: bool = Field(default=True)

    # Logging
    log_enabled: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="text")
    log_enable_console: bool = Field(default=True)
    log_file_path: Optional[str] = None
    log_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    log_backup_count: int = Field(default=5, ge=0)

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('sender', 'log_format', mode='before')
    @classmethod
    def lower_choice(cls, v):
        return v.lower() if isinstance(v, str) else v


class OAuthSettings(BaseSettings):
    """
    OAuth2 client settings from ``API_CONNECTOR_OAUTH_*`` variables.

    Scopes are a comma separated list:
        API_CONNECTOR_OAUTH_DEFAULT_SCOPES=read,write
    """

    model_config = SettingsConfigDict(
        env_prefix='API_CONNECTOR_OAUTH_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    client_id: str = Field(default="")
    client_secret: str = Field(default="")
    redirect_uri: str = Field(default="")
    authorize_endpoint: str = Field(default="authorize")
    token_endpoint: str = Field(default="token")
    user_endpoint: str = Field(default="user")
    default_scopes: str = Field(default="", description="Comma separated scopes")
    scope_separator: str = Field(default=" ")

    @model_validator(mode='after')
    def validate_redirect_uri(self) -> 'OAuthSettings':
        if self.redirect_uri and not self.redirect_uri.lower().startswith(('http://', 'https://')):
            raise ValueError(f"redirect_uri must be an absolute http(s) URL, got {self.redirect_uri!r}")
        return self

    def scopes(self) -> List[str]:
        return [scope.strip() for scope in self.default_scopes.split(',') if scope.strip()]
