"""
Registry Adapters - In-memory tool and model registries.

Implementations:
    - InMemoryToolRegistry: ToolRegistry backed by a dict of ToolDefinition
    - InMemoryModelRegistry: ModelCapabilityRegistry keyed by provider:model
"""

from .in_memory_model_registry import InMemoryModelRegistry
from .in_memory_tool_registry import InMemoryToolRegistry, ToolDefinition, normalize_parameters_schema

__all__ = [
    "InMemoryModelRegistry",
    "InMemoryToolRegistry",
    "ToolDefinition",
    "normalize_parameters_schema",
]
