"""
Outbound Adapters - In-memory implementations of the ports.

These cover tests, development and hosts that keep their tool, model and
context catalogs in process.
"""

from .context import ContextManager, ContextProvider, StaticContextProvider, TimeContextProvider
from .registries import (
    InMemoryModelRegistry,
    InMemoryToolRegistry,
    ToolDefinition,
    normalize_parameters_schema,
)

__all__ = [
    # Context
    "ContextManager",
    "ContextProvider",
    "StaticContextProvider",
    "TimeContextProvider",
    # Registries
    "InMemoryModelRegistry",
    "InMemoryToolRegistry",
    "ToolDefinition",
    "normalize_parameters_schema",
]
