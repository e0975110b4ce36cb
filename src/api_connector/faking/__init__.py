from .mock_client import MockClient
from .mock_response import MockResponse

__all__ = ["MockClient", "MockResponse"]
