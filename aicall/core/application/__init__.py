"""
Application Layer - Ports and shared services.

This layer defines the interfaces the pipeline needs from the outside
world (ports) and the services policies share (JSON schema handling).
It depends on the domain layer only.
"""

from .ports import (
    ContextProviderRegistry,
    ModelCapabilities,
    ModelCapabilityRegistry,
    ToolRegistry,
)
from .services import (
    JsonSchemaAdapterRegistry,
    JsonSchemaService,
    SchemaWrapperInfo,
)

__all__ = [
    # Ports
    "ContextProviderRegistry",
    "ModelCapabilities",
    "ModelCapabilityRegistry",
    "ToolRegistry",
    # Services
    "JsonSchemaAdapterRegistry",
    "JsonSchemaService",
    "SchemaWrapperInfo",
]
