# src/api_connector/faking/mock_response.py

import json
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest
    from ..core.response import Response


class MockResponse:
    """
    Заготовленный ответ для MockClient.

    Body может быть dict/list (кодируется в JSON), str, bytes или None.

    Example:
        >>> MockResponse.make({"id": 1}, status=201)
    """

    def __init__(self, body: Any = None, status: int = 200, headers: Optional[Mapping[str, str]] = None):
        self.body = body
        self.status = status
        self.headers: Dict[str, str] = dict(headers or {})

    @classmethod
    def make(cls, body: Any = None, status: int = 200, headers: Optional[Mapping[str, str]] = None) -> 'MockResponse':
        return cls(body, status, headers)

    def _encode(self) -> bytes:
        if self.body is None:
            return b""
        if isinstance(self.body, bytes):
            return self.body
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return json.dumps(self.body).encode("utf-8")

    def _resolve_headers(self) -> Dict[str, str]:
        headers = dict(self.headers)
        if isinstance(self.body, (dict, list)):
            if not any(key.lower() == "content-type" for key in headers):
                headers["Content-Type"] = "application/json"
        return headers

    def to_response(self, pending_request: 'PendingRequest') -> 'Response':
        """Build the pending request's response class, flagged as mocked."""
        return pending_request.create_response(
            status=self.status,
            headers=self._resolve_headers(),
            content=self._encode(),
            mocked=True,
        )

    def __repr__(self) -> str:
        return f"<MockResponse [{self.status}]>"
