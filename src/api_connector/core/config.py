"""
Система конфигурации для api-connector.

Конфиги отправителей immutable (frozen dataclasses) для потокобезопасности.
Глобальный ``Config`` хранит отправителя по умолчанию и глобальный middleware.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Mapping, Optional, Tuple, Type, Union

from .middleware import MiddlewarePipeline

if TYPE_CHECKING:
    from ..senders.sender import Sender
    from .logging import LoggingConfig

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
    """
    connect: float = 10
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

    @classmethod
    def coerce(cls, value: Union[int, float, Tuple[float, float], 'TimeoutConfig']) -> 'TimeoutConfig':
        """Build from a number, a (connect, read) tuple or an existing TimeoutConfig."""
        if isinstance(value, TimeoutConfig):
            return value
        if isinstance(value, tuple):
            return cls(connect=value[0], read=value[1])
        return cls(connect=value, read=value)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# SENDER CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class SenderConfig:
    """
    Конфигурация транспорта (Sender).

    Per-request config keys ``timeout``, ``verify`` and ``allow_redirects``
    on a PendingRequest take precedence over these values.

    Args:
        timeout: Конфигурация таймаутов
        verify_ssl: Проверять SSL сертификаты
        allow_redirects: Следовать редиректам
        headers: Заголовки, добавляемые к каждому запросу сессии
        logging: Конфигурация логирования (None = без логирования)

    Examples:
        >>> SenderConfig(verify_ssl=False)
        >>> SenderConfig.create(timeout=(3, 60))
    """
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    verify_ssl: bool = True
    allow_redirects: bool = True
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Freeze mutable dicts."""
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    @classmethod
    def create(
        cls,
        timeout: Union[int, float, Tuple[float, float], TimeoutConfig] = 30,
        verify_ssl: bool = True,
        allow_redirects: bool = True,
        headers: Optional[Dict[str, str]] = None,
        logging: Optional['LoggingConfig'] = None,
    ) -> 'SenderConfig':
        """
        Удобный конструктор конфигурации.

        Examples:
            >>> config = SenderConfig.create(timeout=60)
            >>> config = SenderConfig.create(timeout=(5, 60), verify_ssl=False)
        """
        if isinstance(timeout, (int, float)):
            timeout_cfg = TimeoutConfig(connect=10, read=timeout)
        else:
            timeout_cfg = TimeoutConfig.coerce(timeout)

        return cls(
            timeout=timeout_cfg,
            verify_ssl=verify_ssl,
            allow_redirects=allow_redirects,
            headers=headers or {},
            logging=logging,
        )

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# GLOBAL CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Config:
    """
    Process-wide defaults: sender class and global middleware.

    Connectors read these when they lazily create their sender and when a
    PendingRequest merges middleware. Call ``Config.reset()`` between tests.

    Example:
        >>> Config.middleware().on_request(lambda pending: pending.headers.add("X-App", "demo"))
        >>> Config.set_default_sender(HttpxSender)
        >>> Config.reset()
    """

    _default_sender: Optional[Type['Sender']] = None
    _middleware: Optional[MiddlewarePipeline] = None

    @classmethod
    def set_default_sender(cls, sender_class: Type['Sender']) -> None:
        from ..senders.sender import Sender

        if not (isinstance(sender_class, type) and issubclass(sender_class, Sender)):
            raise TypeError(f"{sender_class!r} is not a Sender subclass")
        cls._default_sender = sender_class

    @classmethod
    def default_sender_class(cls) -> Type['Sender']:
        if cls._default_sender is None:
            from ..senders.requests_sender import RequestsSender
            return RequestsSender
        return cls._default_sender

    @classmethod
    def create_default_sender(cls) -> 'Sender':
        return cls.default_sender_class()()

    @classmethod
    def middleware(cls) -> MiddlewarePipeline:
        if cls._middleware is None:
            cls._middleware = MiddlewarePipeline()
        return cls._middleware

    @classmethod
    def reset_default_sender(cls) -> None:
        cls._default_sender = None

    @classmethod
    def reset_middleware(cls) -> None:
        cls._middleware = None

    @classmethod
    def reset(cls) -> None:
        cls.reset_default_sender()
        cls.reset_middleware()
