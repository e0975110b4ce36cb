from .httpx_sender import HttpxSender
from .requests_sender import RequestsSender
from .sender import Sender
from .session_manager import ThreadSafeSessionManager

__all__ = [
    "Sender",
    "RequestsSender",
    "HttpxSender",
    "ThreadSafeSessionManager",
]
