# src/api_connector/core/properties.py
"""Property bags and authenticator slot shared by Connector and Request."""

from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

from .middleware import MiddlewarePipeline
from .property_bag import PropertyBag

if TYPE_CHECKING:
    from ..auth.base import Authenticator
    from ..faking.mock_client import MockClient
    from ..plugins.plugin import Plugin
    from .pending_request import PendingRequest


class HasRequestProperties:
    """
    Mixin providing lazily-created bags seeded from the ``default_*`` hooks.

    Subclasses override ``default_headers()`` and friends; callers mutate the
    instance bags (``connector.headers.add(...)``). The bags belong to the
    instance and are only read, never written, when a PendingRequest is built.
    """

    # Capability plugins booted for every PendingRequest, in declared order
    plugins: Sequence['Plugin'] = ()

    def default_headers(self) -> Dict[str, Any]:
        return {}

    def default_query(self) -> Dict[str, Any]:
        return {}

    def default_body(self) -> Dict[str, Any]:
        return {}

    def default_config(self) -> Dict[str, Any]:
        return {}

    def default_auth(self) -> Optional['Authenticator']:
        return None

    def _lazy_property(self, attribute: str, factory):
        value = getattr(self, attribute, None)
        if value is None:
            value = factory()
            setattr(self, attribute, value)
        return value

    @property
    def headers(self) -> PropertyBag:
        return self._lazy_property('_headers', lambda: PropertyBag(self.default_headers()))

    @property
    def query(self) -> PropertyBag:
        return self._lazy_property('_query', lambda: PropertyBag(self.default_query()))

    @property
    def body(self) -> PropertyBag:
        return self._lazy_property('_body', lambda: PropertyBag(self.default_body()))

    @property
    def config(self) -> PropertyBag:
        return self._lazy_property('_config', lambda: PropertyBag(self.default_config()))

    @property
    def middleware(self) -> MiddlewarePipeline:
        return self._lazy_property('_middleware', MiddlewarePipeline)

    # ==================== Authentication ====================

    def authenticate(self, authenticator: 'Authenticator'):
        """Attach an authenticator, taking precedence over ``default_auth()``."""
        self._authenticator = authenticator
        return self

    def get_authenticator(self) -> Optional['Authenticator']:
        return getattr(self, '_authenticator', None) or self.default_auth()

    # ==================== Mocking ====================

    def with_mock_client(self, mock_client: Optional['MockClient']):
        self._mock_client = mock_client
        return self

    def get_mock_client(self) -> Optional['MockClient']:
        return getattr(self, '_mock_client', None)

    def has_mock_client(self) -> bool:
        return self.get_mock_client() is not None

    # ==================== Hooks ====================

    def boot(self, pending_request: 'PendingRequest') -> None:
        """Customise the PendingRequest while it is being built."""
        pass
