"""
Ports - Interfaces for external systems.

Ports define how the policy pipeline reaches its collaborators.
They are implemented by adapters in the adapters layer.
"""

from .context_provider import ContextProviderRegistry
from .model_registry import ModelCapabilities, ModelCapabilityRegistry
from .tool_registry import ToolRegistry

__all__ = [
    "ContextProviderRegistry",
    "ModelCapabilities",
    "ModelCapabilityRegistry",
    "ToolRegistry",
]
