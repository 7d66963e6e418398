"""
Context Adapters - Providers of ambient conversation context.

Implementations:
    - ContextManager: ContextProviderRegistry over registered providers
    - StaticContextProvider: Fixed key/value entries
    - TimeContextProvider: Current date/time and timezone
"""

from .context_manager import ContextManager
from .providers import ContextProvider, StaticContextProvider, TimeContextProvider

__all__ = [
    "ContextManager",
    "ContextProvider",
    "StaticContextProvider",
    "TimeContextProvider",
]
