# src/api_connector/core/middleware.py
"""Request/response hook lists attached to connectors, requests and the global config."""

from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

if TYPE_CHECKING:
    from .pending_request import PendingRequest
    from .response import Response

RequestMiddleware = Callable[['PendingRequest'], Optional['PendingRequest']]
ResponseMiddleware = Callable[['Response'], Optional['Response']]


class MiddlewarePipeline:
    """
    Два упорядоченных списка хуков: на запрос и на ответ.

    A request hook receives the PendingRequest right before dispatch and may
    mutate it or return a replacement. A response hook receives the Response
    and may return a replacement. Returning None keeps the current object.

    Example:
        >>> pipeline = MiddlewarePipeline()
        >>> pipeline.on_request(lambda pending: pending.headers.add("X-Trace", "1"))
        >>> pipeline.on_response(lambda response: print(response.status))
    """

    def __init__(self):
        self._request_pipes: List[Tuple[Optional[str], RequestMiddleware]] = []
        self._response_pipes: List[Tuple[Optional[str], ResponseMiddleware]] = []

    def on_request(self, callback: RequestMiddleware, name: Optional[str] = None) -> 'MiddlewarePipeline':
        """
        Register a request hook.

        Args:
            callback: Callable receiving the PendingRequest
            name: Optional unique name; re-registering a name replaces the hook
        """
        self._request_pipes = self._register(self._request_pipes, callback, name)
        return self

    def on_response(self, callback: ResponseMiddleware, name: Optional[str] = None) -> 'MiddlewarePipeline':
        """Register a response hook (see on_request)."""
        self._response_pipes = self._register(self._response_pipes, callback, name)
        return self

    @staticmethod
    def _register(pipes: list, callback: Callable, name: Optional[str]) -> list:
        if name is not None:
            pipes = [(n, c) for n, c in pipes if n != name]
        pipes.append((name, callback))
        return pipes

    def merge(self, *pipelines: Optional['MiddlewarePipeline']) -> 'MiddlewarePipeline':
        """Return a new pipeline: this pipeline's hooks first, then each argument's, in order."""
        merged = MiddlewarePipeline()
        for pipeline in (self, *pipelines):
            if pipeline is None:
                continue
            for name, callback in pipeline._request_pipes:
                merged.on_request(callback, name)
            for name, callback in pipeline._response_pipes:
                merged.on_response(callback, name)
        return merged

    def execute_request_pipeline(self, pending_request: 'PendingRequest') -> 'PendingRequest':
        for _, callback in self._request_pipes:
            result = callback(pending_request)
            if result is not None and result is not pending_request:
                from .pending_request import PendingRequest
                if isinstance(result, PendingRequest):
                    pending_request = result
        return pending_request

    def execute_response_pipeline(self, response: 'Response') -> 'Response':
        from .response import Response

        for _, callback in self._response_pipes:
            result = callback(response)
            if isinstance(result, Response):
                response = result
        return response

    def request_pipes(self) -> List[RequestMiddleware]:
        return [callback for _, callback in self._request_pipes]

    def response_pipes(self) -> List[ResponseMiddleware]:
        return [callback for _, callback in self._response_pipes]

    def __len__(self) -> int:
        return len(self._request_pipes) + len(self._response_pipes)
