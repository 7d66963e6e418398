"""
Domain Layer - Pure call data and rules.

This layer contains:
    - Value Objects: Immutable interactions, bodies, runtime messages,
      capabilities and filter specs
    - Entities: Requests and responses that policies rewrite by replacement
    - Exceptions: Domain-specific error types

The domain layer has no knowledge of providers, registries or I/O.
"""

from .entities import AIRequest, AIReturn, ToolCallRequest
from .exceptions import DomainException, InvalidBodyError, SchemaParseError, ToolNotFound
from .value_objects import (
    AgentRole,
    Body,
    BodyBuilder,
    Capability,
    Interaction,
    InteractionKind,
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
    ToolFilter,
    normalize_tool_filter,
)

__all__ = [
    # Entities
    "AIRequest",
    "AIReturn",
    "ToolCallRequest",
    # Value Objects
    "AgentRole",
    "Body",
    "BodyBuilder",
    "Capability",
    "Interaction",
    "InteractionKind",
    "MessageCode",
    "MessageOrigin",
    "MessageSeverity",
    "RuntimeMessage",
    "ToolFilter",
    "normalize_tool_filter",
    # Exceptions
    "DomainException",
    "InvalidBodyError",
    "SchemaParseError",
    "ToolNotFound",
]
