# src/api_connector/auth/base.py

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.pending_request import PendingRequest


class Authenticator(ABC):
    """
    Базовый класс для всех аутентификаторов.

    An authenticator injects credentials into a PendingRequest while it is
    being built. The pipeline calls ``apply`` exactly once per request;
    implementations overwrite keys rather than append so a second call does
    not corrupt the request.
    """

    @abstractmethod
    def apply(self, pending_request: 'PendingRequest') -> None:
        """Add credentials to the pending request's headers, query or body."""
        pass
