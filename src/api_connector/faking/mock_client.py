# src/api_connector/faking/mock_client.py
"""
MockClient: заменяет Sender в тестах.

Responses are matched either in order (sequence) or by key (mapping). Every
dispatched PendingRequest is recorded before matching, so assertions see
requests whose match failed too.
"""

import logging
from collections import deque
from fnmatch import fnmatch
from typing import (
    TYPE_CHECKING, Any, Callable, Deque, List, Mapping, Optional, Sequence, Tuple, Union,
)

from ..core.connector import Connector
from ..core.exceptions import NoMockResponseFoundException
from ..core.request import Request
from .mock_response import MockResponse

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest
    from ..core.response import Response

logger = logging.getLogger(__name__)

MockValue = Union[MockResponse, Callable[['PendingRequest'], MockResponse]]


class MockClient:
    """
    Example:
        >>> mock = MockClient([MockResponse.make({"id": 1})])
        >>> connector.with_mock_client(mock)
        >>> connector.send(GetUserRequest(1)).json("id")
        1
        >>> mock.assert_sent(GetUserRequest)
    """

    def __init__(self, responses: Union[Sequence[MockValue], Mapping[Any, MockValue], None] = None):
        self._sequence: Deque[MockValue] = deque()
        self._mapping: List[Tuple[Any, MockValue]] = []

        if isinstance(responses, Mapping):
            self._mapping = list(responses.items())
        elif responses is not None:
            self._sequence = deque(responses)

        # [pending_request, response]; response stays None when no mock matched
        self._history: List[List[Any]] = []

    # ==================== Registration ====================

    def add_response(self, response: MockValue, key: Any = None) -> 'MockClient':
        """Append to the sequence, or register under ``key`` when given."""
        if key is None:
            self._sequence.append(response)
        else:
            self._mapping.append((key, response))
        return self

    # ==================== Recording ====================

    def record(self, pending_request: 'PendingRequest') -> None:
        self._history.append([pending_request, None])

    def record_response(self, response: 'Response') -> None:
        """Attach ``response`` to the slot of the PendingRequest it answers."""
        pending_request = response.get_pending_request()
        for entry in reversed(self._history):
            if entry[0] is pending_request and entry[1] is None:
                entry[1] = response
                return
        self._history.append([pending_request, response])

    def get_recorded_requests(self) -> List['PendingRequest']:
        return [pending_request for pending_request, _ in self._history]

    def get_last_pending_request(self) -> Optional['PendingRequest']:
        return self._history[-1][0] if self._history else None

    def get_last_response(self) -> Optional['Response']:
        return self._history[-1][1] if self._history else None

    # ==================== Matching ====================

    def match(self, pending_request: 'PendingRequest') -> MockResponse:
        """
        Raises:
            NoMockResponseFoundException: Sequence exhausted or no key matched
        """
        value = self._match_mapping(pending_request) if self._mapping else None

        if value is None and self._sequence:
            value = self._sequence.popleft()

        if value is None:
            raise NoMockResponseFoundException(
                pending_request.get_full_url(), type(pending_request.request).__name__
            )

        if not isinstance(value, MockResponse) and callable(value):
            value = value(pending_request)

        logger.debug("Mock response %r matched %s", value, pending_request.url)
        return value

    def _match_mapping(self, pending_request: 'PendingRequest') -> Optional[MockValue]:
        for key, value in self._mapping:
            if self._key_matches(key, pending_request):
                return value
        return None

    @staticmethod
    def _key_matches(key: Any, pending_request: 'PendingRequest') -> bool:
        if isinstance(key, type):
            if issubclass(key, Request):
                return isinstance(pending_request.request, key)
            if issubclass(key, Connector):
                return isinstance(pending_request.connector, key)
            return False
        if isinstance(key, str):
            return fnmatch(pending_request.url, key) or fnmatch(pending_request.get_full_url(), key)
        return False

    # ==================== Assertions ====================

    def _found(self, target: Any) -> int:
        count = 0
        for pending_request, response in self._history:
            if isinstance(target, (type, str)):
                matched = self._key_matches(target, pending_request)
            elif callable(target):
                matched = bool(target(pending_request, response))
            else:
                raise TypeError(f"Unsupported assertion target: {target!r}")

            if matched:
                count += 1
        return count

    def assert_sent(self, target: Any) -> None:
        """
        Args:
            target: Request/Connector subclass, URL glob, or ``(pending_request, response) -> bool``
        """
        if self._found(target) == 0:
            raise AssertionError(f"Expected a request matching {target!r} to be sent.")

    def assert_not_sent(self, target: Any) -> None:
        if self._found(target) > 0:
            raise AssertionError(f"Unexpected request matching {target!r} was sent.")

    def assert_sent_count(self, count: int) -> None:
        sent = len(self._history)
        if sent != count:
            raise AssertionError(f"Expected {count} requests to be sent, {sent} were sent.")

    def assert_nothing_sent(self) -> None:
        if self._history:
            raise AssertionError(f"Expected no requests, {len(self._history)} were sent.")

    def __repr__(self) -> str:
        return f"<MockClient recorded={len(self._history)}>"
