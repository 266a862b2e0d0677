"""Remote toggle adapters."""

from .client import HttpToggleClient, ServiceToggleClient
from .factory import create_http_coordinator

__all__ = ["HttpToggleClient", "ServiceToggleClient", "create_http_coordinator"]
