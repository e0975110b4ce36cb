# src/api_connector/core/response.py
"""Transport-independent response wrapper."""

import json
from typing import TYPE_CHECKING, Any, Mapping, Optional

from requests.structures import CaseInsensitiveDict

from .exceptions import ClientException, InvalidResponseError, RequestException, ServerException

if TYPE_CHECKING:
    from .pending_request import PendingRequest


class Response:
    """
    HTTP ответ с обратной ссылкой на PendingRequest.

    Built by a Sender (real I/O) or by the MockClient. Subclass it and set
    ``response_class`` on a Connector or Request to add domain helpers.

    Attributes:
        status: HTTP status code
        headers: Case-insensitive response headers
        content: Raw body bytes
        raw: Underlying transport response (requests/httpx) or None when mocked
    """

    def __init__(
        self,
        status: int,
        headers: Optional[Mapping[str, str]],
        content: bytes,
        pending_request: 'PendingRequest',
        raw: Any = None,
        mocked: bool = False,
    ):
        self.status = status
        self.headers = CaseInsensitiveDict(headers or {})
        self.content = content or b""
        self.raw = raw
        self._pending_request = pending_request
        self._mocked = mocked
        self._decoded_json: Any = None

    def get_pending_request(self) -> 'PendingRequest':
        return self._pending_request

    @property
    def pending_request(self) -> 'PendingRequest':
        return self._pending_request

    def is_mocked(self) -> bool:
        return self._mocked

    # ==================== Body ====================

    @property
    def text(self) -> str:
        return self.content.decode(self._encoding(), errors="replace")

    def body(self) -> str:
        return self.text

    def json(self, key: Optional[str] = None, default: Any = None) -> Any:
        """
        Decode the body as JSON.

        Args:
            key: Optional dot-separated path into the decoded mapping ("data.user.id")
            default: Value returned when ``key`` is missing

        Raises:
            InvalidResponseError: Body is not valid JSON
        """
        if self._decoded_json is None:
            if not self.content:
                self._decoded_json = {}
            else:
                try:
                    self._decoded_json = json.loads(self.text)
                except ValueError as e:
                    raise InvalidResponseError(f"Response body is not valid JSON: {e}") from e

        if key is None:
            return self._decoded_json

        value: Any = self._decoded_json
        for part in key.split('.'):
            if isinstance(value, Mapping) and part in value:
                value = value[part]
            else:
                return default
        return value

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name, default)

    def _encoding(self) -> str:
        content_type = self.headers.get('Content-Type', '')
        for part in content_type.split(';'):
            part = part.strip()
            if part.lower().startswith('charset='):
                return part.split('=', 1)[1].strip('"\'') or 'utf-8'
        return 'utf-8'

    # ==================== Status ====================

    def successful(self) -> bool:
        return 200 <= self.status < 300

    def ok(self) -> bool:
        return self.status == 200

    def redirect(self) -> bool:
        return 300 <= self.status < 400

    def client_error(self) -> bool:
        return 400 <= self.status < 500

    def server_error(self) -> bool:
        return self.status >= 500

    def failed(self) -> bool:
        return self.client_error() or self.server_error()

    def to_exception(self) -> Optional[RequestException]:
        """Build (not raise) the exception matching a failed status, None otherwise."""
        if not self.failed():
            return None

        message = self.text[:200]
        if self.server_error():
            return ServerException(self, message)
        return ClientException(self, message)

    def throw(self) -> 'Response':
        """Raise RequestException for 4xx/5xx, otherwise return self."""
        exception = self.to_exception()
        if exception is not None:
            raise exception
        return self

    def __repr__(self) -> str:
        return f"<{type(self).__name__} [{self.status}]>"
