"""
Data Providers.

Page views get their data through ``NobtProvider``; the mock implementation
serves a fixture.
"""

from .base import NobtProvider, get_provider
from .mock import SAMPLE_NOBT, MockNobtProvider

__all__ = [
    "NobtProvider",
    "MockNobtProvider",
    "SAMPLE_NOBT",
    "get_provider",
]
