"""
Иерархия исключений api-connector.

Классификация:
- TransportException (retryable=True) - сбой транспорта, повтор - забота вызывающего
- FatalError (fatal=True) - ошибка конструирования или пред-проверки, НЕ ретраить
"""

from typing import TYPE_CHECKING, Optional

import httpx
import requests

if TYPE_CHECKING:
    from .response import Response

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ConnectorException(Exception):
    """Базовое исключение api-connector."""

    retryable: bool = False
    fatal: bool = False

    def __init__(self, message: str, **kwargs):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ФАТАЛЬНЫЕ ОШИБКИ (fatal=True)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class FatalError(ConnectorException):
    """
    Фатальная ошибка - НЕ ретраить.

    Примеры: запрос без коннектора, невалидный класс ответа, неверный state.
    """
    fatal = True

class InvalidConnectorException(FatalError):
    """The request has no connector it can be sent through."""

    def __init__(self, message: str = "The request does not have a valid connector."):
        super().__init__(message)

class InvalidResponseClassException(FatalError):
    """
    Configured response class is not a Response implementation.

    Args:
        response_class: The offending value
    """

    def __init__(self, response_class: object = None):
        self.response_class = response_class
        name = getattr(response_class, '__name__', repr(response_class))
        super().__init__(
            f"The provided response class ({name}) must be a subclass of Response."
        )

class InvalidStateException(FatalError):
    """OAuth2 callback state does not match the expected state."""

    def __init__(self, message: str = "Invalid state."):
        super().__init__(message)

class OAuthConfigValidationException(FatalError):
    """OAuthConfig is missing a required value."""
    pass

class NoMockResponseFoundException(FatalError):
    """
    MockClient не нашёл подходящий ответ.

    Args:
        url: URL отправленного запроса
        request_name: Имя класса запроса
    """

    def __init__(self, url: str, request_name: str = ""):
        self.url = url
        self.request_name = request_name

        msg = f"No mock response found for {url}"
        if request_name:
            msg += f" ({request_name})"

        super().__init__(msg)

class InvalidResponseError(FatalError):
    """
    Невалидный ответ.

    Примеры:
    - Битый JSON
    - Ответ токен-эндпоинта без access_token
    """
    pass

class InvalidArgumentException(ConnectorException, ValueError):
    """Precondition on an argument failed (e.g. refresh without a refresh token)."""
    fatal = True

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# HTTP ОТВЕТЫ С ОШИБКОЙ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RequestException(FatalError):
    """
    Ответ со статусом ошибки (4xx/5xx).

    Args:
        response: Response объект
        message: Дополнительное сообщение
    """

    def __init__(self, response: 'Response', message: str = ""):
        self.response = response
        self.status_code = response.status
        self.url = response.get_pending_request().url

        msg = f"HTTP {self.status_code} error for {self.url}"
        if message:
            msg += f": {message}"

        super().__init__(msg)

class ClientException(RequestException):
    """4xx response."""
    pass

class ServerException(RequestException):
    """5xx response."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОШИБКИ ТРАНСПОРТА (retryable=True)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TransportException(ConnectorException):
    """
    Сбой транспорта (I/O). Оригинальное исключение доступно как ``original``.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        original: Исключение транспортной библиотеки
    """
    retryable = True

    def __init__(self, message: str, url: Optional[str] = None, original: Optional[BaseException] = None):
        self.url = url
        self.original = original
        full_message = f"{message}"
        if url:
            full_message += f" (url: {url})"
        super().__init__(full_message)

class TimeoutError(TransportException):
    """Таймаут запроса."""
    pass

class ConnectionError(TransportException):
    """
    Ошибка подключения.

    Примеры:
    - Connection refused
    - Connection reset
    - DNS resolution failed
    """
    pass

class ProxyError(TransportException):
    """Ошибка прокси."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def classify_transport_exception(exc: Exception, url: str) -> TransportException:
    """
    Конвертировать исключения requests/httpx в наши исключения.

    Args:
        exc: Исключение транспортной библиотеки
        url: URL запроса

    Returns:
        TransportException с правильной классификацией

    Examples:
        >>> exc = requests.exceptions.Timeout()
        >>> our_exc = classify_transport_exception(exc, "https://example.com")
        >>> assert isinstance(our_exc, TimeoutError)
    """

    if isinstance(exc, (requests.exceptions.Timeout, httpx.TimeoutException)):
        return TimeoutError("Request timeout", url, original=exc)

    elif isinstance(exc, (requests.exceptions.ProxyError, httpx.ProxyError)):
        return ProxyError("Proxy error", url, original=exc)

    elif isinstance(exc, (requests.exceptions.ConnectionError, httpx.ConnectError, httpx.NetworkError)):
        return ConnectionError("Connection error", url, original=exc)

    else:
        # Неизвестная ошибка транспорта - оборачиваем
        return TransportException(f"Transport error: {exc}", url, original=exc)
