# src/api_connector/plugins/plugin.py

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..core.connector import Connector
    from ..core.pending_request import PendingRequest
    from ..core.request import Request


class Plugin(ABC):
    """
    Подключаемая возможность Connector/Request.

    Declared in the owner's ``plugins`` sequence and booted once per
    PendingRequest, after the authenticator and the owner's own ``boot()``.
    Connector plugins boot before request plugins.

    Example:
        >>> class GitHubConnector(Connector):
        ...     plugins = (AcceptsJson(), AlwaysThrowOnErrors())
    """

    @abstractmethod
    def boot(self, pending_request: 'PendingRequest', owner: Union['Connector', 'Request']) -> None:
        """Modify the PendingRequest being built."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
