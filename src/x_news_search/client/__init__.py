"""X API client modules."""

from .base import SearchClient
from .x_client import XApiError, XClient

__all__ = ["SearchClient", "XApiError", "XClient"]
