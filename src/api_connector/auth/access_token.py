# src/api_connector/auth/access_token.py

import json
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Optional

from .base import Authenticator

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest


class AccessTokenAuthenticator(Authenticator):
    """
    OAuth2 access token with optional refresh token and expiry.

    The expiry is stored as an absolute UTC instant, never as a duration, so a
    token persisted and restored later still expires at the right moment.
    Naive datetimes are interpreted as UTC.

    Example:
        >>> authenticator = connector.get_access_token(code)
        >>> if authenticator.has_expired():
        ...     authenticator = connector.refresh_access_token(authenticator)
        >>> connector.authenticate(authenticator)
    """

    def __init__(
        self,
        access_token: str,
        refresh_token: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ):
        if expires_at is not None and expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)

        self.access_token = access_token
        self.refresh_token = refresh_token
        self.expires_at = expires_at

    def apply(self, pending_request: 'PendingRequest') -> None:
        pending_request.headers.add('Authorization', f"Bearer {self.access_token}")

    def get_access_token(self) -> str:
        return self.access_token

    def get_refresh_token(self) -> Optional[str]:
        return self.refresh_token

    def get_expires_at(self) -> Optional[datetime]:
        return self.expires_at

    def is_refreshable(self) -> bool:
        return self.refresh_token is not None

    def is_not_refreshable(self) -> bool:
        return not self.is_refreshable()

    def has_expired(self) -> bool:
        """True when an expiry is known and has passed. Tokens without expiry never expire."""
        if self.expires_at is None:
            return False
        return self.expires_at <= datetime.now(timezone.utc)

    def has_not_expired(self) -> bool:
        return not self.has_expired()

    # ==================== Persistence ====================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AccessTokenAuthenticator':
        expires_at = data.get("expires_at")
        return cls(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
            expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
        )

    def serialize(self) -> str:
        """JSON string suitable for storing in a database or cache."""
        return json.dumps(self.to_dict())

    @classmethod
    def unserialize(cls, serialized: str) -> 'AccessTokenAuthenticator':
        return cls.from_dict(json.loads(serialized))

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} refreshable={self.is_refreshable()} "
            f"expires_at={self.expires_at.isoformat() if self.expires_at else None}>"
        )
