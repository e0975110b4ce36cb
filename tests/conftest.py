"""
Pytest configuration and fixtures for api-connector-core tests.
"""

import pytest
import responses as responses_lib

from api_connector import (
    Config,
    Connector,
    LoggingConfig,
    Method,
    MockClient,
    MockResponse,
    Request,
)


class ExampleConnector(Connector):
    """Connector with one default header and one default query parameter."""

    base_url = "https://api.example.com"

    def default_headers(self):
        return {"Accept": "application/json", "X-Connector": "yes"}

    def default_query(self):
        return {"page": 1}


class GetUserRequest(Request):
    method = Method.GET

    def __init__(self, user_id=1):
        self.user_id = user_id

    def resolve_endpoint(self):
        return f"/users/{self.user_id}"

    def default_headers(self):
        return {"X-Request": "yes"}


class CreateUserRequest(Request):
    method = Method.POST
    endpoint = "/users"

    def __init__(self, name="Sam"):
        self.name = name

    def default_body(self):
        return {"name": self.name}


@pytest.fixture(autouse=True)
def reset_global_config():
    """Global Config is process-wide: clean it around every test."""
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def base_url():
    return "https://api.example.com"


@pytest.fixture
def connector():
    connector = ExampleConnector()
    yield connector
    connector.close()


@pytest.fixture
def user_request():
    return GetUserRequest(1)


@pytest.fixture
def create_request():
    return CreateUserRequest("Sam")


@pytest.fixture
def mock_client():
    """MockClient answering every request with a JSON body."""
    return MockClient([MockResponse.make({"id": 1, "name": "Sam"})])


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def logging_config():
    return LoggingConfig.create(level="DEBUG", format="json", enable_console=True)


@pytest.fixture
def logging_config_with_file(tmp_path):
    """LoggingConfig writing into a temporary file only."""
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        file_path=str(tmp_path / "connector.log"),
    )
