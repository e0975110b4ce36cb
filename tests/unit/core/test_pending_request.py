"""Тесты сборки PendingRequest: слияние, аутентификация, boot, плагины."""

import pytest

from api_connector import (
    BodyFormat,
    Config,
    Connector,
    InvalidConnectorException,
    InvalidResponseClassException,
    Method,
    MockClient,
    MockResponse,
    PendingRequest,
    Plugin,
    Request,
    Response,
    TokenAuthenticator,
)
from conftest import CreateUserRequest, ExampleConnector, GetUserRequest


class RecordingPlugin(Plugin):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def boot(self, pending_request, owner):
        self.log.append((self.name, type(owner).__name__))


class TestMerge:
    """Connector first, request second."""

    def test_headers_merged_in_order(self, connector, user_request):
        pending = connector.create_pending_request(user_request)

        assert pending.headers.all() == {
            "Accept": "application/json",
            "X-Connector": "yes",
            "X-Request": "yes",
        }

    def test_request_overrides_connector_header(self, connector):
        request = GetUserRequest(1)
        request.headers.add("Accept", "text/plain")

        pending = connector.create_pending_request(request)

        assert pending.headers.get("Accept") == "text/plain"
        assert list(pending.headers)[0] == "Accept"

    def test_query_and_body_merged(self, connector, create_request):
        create_request.query.add("page", 2)
        pending = connector.create_pending_request(create_request)

        assert pending.query.all() == {"page": 2}
        assert pending.body.all() == {"name": "Sam"}

    def test_config_merged(self, connector, user_request):
        connector.config.add("timeout", 5)
        user_request.config.add("verify", False)

        pending = connector.create_pending_request(user_request)

        assert pending.config.all() == {"timeout": 5, "verify": False}

    def test_url_joined(self, connector, user_request):
        pending = connector.create_pending_request(user_request)

        assert pending.url == "https://api.example.com/users/1"
        assert pending.get_full_url() == "https://api.example.com/users/1?page=1"
        assert pending.method == Method.GET

    def test_sources_not_mutated(self, connector, user_request):
        connector.authenticate(TokenAuthenticator("secret"))

        pending = connector.create_pending_request(user_request)
        pending.headers.add("X-Late", "1")

        assert "Authorization" in pending.headers
        assert "Authorization" not in connector.headers
        assert "Authorization" not in user_request.headers
        assert "X-Late" not in user_request.headers
        assert connector.headers.all() == {"Accept": "application/json", "X-Connector": "yes"}

    def test_each_build_is_independent(self, connector, user_request):
        first = connector.create_pending_request(user_request)
        second = connector.create_pending_request(user_request)

        first.headers.add("X-Only-First", "1")

        assert "X-Only-First" not in second.headers
        assert first.request_id != second.request_id


class TestAuthenticatorResolution:
    def test_connector_authenticator_applied(self, connector, user_request):
        connector.authenticate(TokenAuthenticator("connector-token"))

        pending = connector.create_pending_request(user_request)

        assert pending.headers.get("Authorization") == "Bearer connector-token"
        assert isinstance(pending.authenticator, TokenAuthenticator)

    def test_request_authenticator_wins(self, connector, user_request):
        connector.authenticate(TokenAuthenticator("connector-token"))
        user_request.authenticate(TokenAuthenticator("request-token"))

        pending = connector.create_pending_request(user_request)

        assert pending.headers.get("Authorization") == "Bearer request-token"

    def test_default_auth_used(self, user_request):
        class AuthConnector(ExampleConnector):
            def default_auth(self):
                return TokenAuthenticator("default", prefix="Token")

        pending = AuthConnector().create_pending_request(user_request)

        assert pending.headers.get("Authorization") == "Token default"

    def test_no_authenticator(self, connector, user_request):
        pending = connector.create_pending_request(user_request)

        assert pending.authenticator is None
        assert "Authorization" not in pending.headers


class TestBootAndPlugins:
    def test_boot_order(self):
        log = []

        class BootConnector(ExampleConnector):
            plugins = (RecordingPlugin("connector-plugin", log),)

            def boot(self, pending_request):
                log.append(("connector-boot", pending_request.headers.get("Authorization")))

        class BootRequest(GetUserRequest):
            plugins = (RecordingPlugin("request-plugin", log),)

            def boot(self, pending_request):
                log.append(("request-boot", None))

        connector = BootConnector()
        connector.authenticate(TokenAuthenticator("abc"))
        connector.create_pending_request(BootRequest())

        assert log == [
            ("connector-boot", "Bearer abc"),
            ("request-boot", None),
            ("connector-plugin", "BootConnector"),
            ("request-plugin", "BootRequest"),
        ]

    def test_shared_plugin_booted_once(self):
        log = []
        shared = RecordingPlugin("shared", log)

        class SharedConnector(ExampleConnector):
            plugins = (shared,)

        class SharedRequest(GetUserRequest):
            plugins = (shared,)

        pending = SharedConnector().create_pending_request(SharedRequest())

        assert log == [("shared", "SharedConnector")]
        assert pending.get_plugins() == [shared, shared]

    def test_boot_can_modify_pending_request_only(self, user_request):
        class BootConnector(ExampleConnector):
            def boot(self, pending_request):
                pending_request.query.add("booted", "1")

        connector = BootConnector()
        pending = connector.create_pending_request(user_request)

        assert pending.query.get("booted") == "1"
        assert "booted" not in connector.query


class TestResolution:
    def test_response_class_from_request(self, connector):
        class UserResponse(Response):
            pass

        class TypedRequest(GetUserRequest):
            response_class = UserResponse

        pending = connector.create_pending_request(TypedRequest())

        assert pending.response_class is UserResponse

    def test_response_class_from_connector(self, user_request):
        class ConnectorResponse(Response):
            pass

        class TypedConnector(ExampleConnector):
            response_class = ConnectorResponse

        pending = TypedConnector().create_pending_request(user_request)

        assert pending.response_class is ConnectorResponse

    def test_invalid_response_class(self, connector):
        class BadRequest(GetUserRequest):
            response_class = dict

        with pytest.raises(InvalidResponseClassException):
            connector.create_pending_request(BadRequest())

    def test_missing_connector(self):
        with pytest.raises(InvalidConnectorException):
            PendingRequest(GetUserRequest())

    def test_connector_from_request_class_attribute(self):
        class BoundRequest(GetUserRequest):
            connector = ExampleConnector

        pending = PendingRequest(BoundRequest())

        assert isinstance(pending.connector, ExampleConnector)

    def test_body_format_request_over_connector(self):
        class FormConnector(ExampleConnector):
            body_format = BodyFormat.FORM

        class JsonRequest(CreateUserRequest):
            body_format = BodyFormat.JSON

        assert FormConnector().create_pending_request(CreateUserRequest()).body_format == BodyFormat.FORM
        assert FormConnector().create_pending_request(JsonRequest()).body_format == BodyFormat.JSON

    def test_mock_client_precedence(self, connector, user_request):
        connector_mock = MockClient()
        request_mock = MockClient()
        send_mock = MockClient()

        connector.with_mock_client(connector_mock)
        assert connector.create_pending_request(user_request).mock_client is connector_mock

        user_request.with_mock_client(request_mock)
        assert connector.create_pending_request(user_request).mock_client is request_mock

        assert connector.create_pending_request(user_request, send_mock).mock_client is send_mock


class TestMiddlewareMerge:
    def test_global_connector_request_order(self, connector, user_request):
        calls = []

        Config.middleware().on_request(lambda pending: calls.append("global"))
        connector.middleware.on_request(lambda pending: calls.append("connector"))
        user_request.middleware.on_request(lambda pending: calls.append("request"))

        connector.send(user_request, MockClient([MockResponse.make({})]))

        assert calls == ["global", "connector", "request"]

    def test_request_middleware_sees_final_pending_request(self, connector, user_request):
        seen = {}
        user_request.middleware.on_request(lambda pending: seen.update(pending.headers.all()))

        connector.authenticate(TokenAuthenticator("abc"))
        connector.send(user_request, MockClient([MockResponse.make({})]))

        assert seen["Authorization"] == "Bearer abc"

    def test_response_middleware_can_replace_response(self, connector, user_request):
        replacement = {}

        def replace(response):
            new = response.get_pending_request().create_response(201, {}, b"{}", mocked=True)
            replacement["response"] = new
            return new

        connector.middleware.on_response(replace)
        response = connector.send(user_request, MockClient([MockResponse.make({})]))

        assert response is replacement["response"]
        assert response.status == 201
