"""Тесты AccessTokenAuthenticator."""

from datetime import datetime, timedelta, timezone

from api_connector import AccessTokenAuthenticator
from conftest import GetUserRequest


class TestAccessTokenAuthenticator:
    def test_apply_bearer(self, connector):
        connector.authenticate(AccessTokenAuthenticator("access"))

        pending = connector.create_pending_request(GetUserRequest())

        assert pending.headers.get("Authorization") == "Bearer access"

    def test_getters(self):
        expires_at = datetime.now(timezone.utc) + timedelta(hours=1)
        authenticator = AccessTokenAuthenticator("access", "refresh", expires_at)

        assert authenticator.get_access_token() == "access"
        assert authenticator.get_refresh_token() == "refresh"
        assert authenticator.get_expires_at() == expires_at

    def test_refreshable(self):
        assert AccessTokenAuthenticator("a", "r").is_refreshable()
        assert AccessTokenAuthenticator("a").is_not_refreshable()

    def test_expiry(self):
        past = datetime.now(timezone.utc) - timedelta(seconds=1)
        future = datetime.now(timezone.utc) + timedelta(hours=1)

        assert AccessTokenAuthenticator("a", expires_at=past).has_expired()
        assert AccessTokenAuthenticator("a", expires_at=future).has_not_expired()

    def test_without_expiry_never_expires(self):
        assert AccessTokenAuthenticator("a").has_not_expired()

    def test_naive_expiry_is_utc(self):
        authenticator = AccessTokenAuthenticator("a", expires_at=datetime(2030, 1, 1))

        assert authenticator.get_expires_at().tzinfo == timezone.utc

    def test_serialize_roundtrip(self):
        expires_at = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
        original = AccessTokenAuthenticator("access", "refresh", expires_at)

        restored = AccessTokenAuthenticator.unserialize(original.serialize())

        assert restored.get_access_token() == "access"
        assert restored.get_refresh_token() == "refresh"
        assert restored.get_expires_at() == expires_at

    def test_repr_hides_tokens(self):
        text = repr(AccessTokenAuthenticator("access-secret", "refresh-secret"))

        assert "access-secret" not in text
        assert "refresh-secret" not in text
