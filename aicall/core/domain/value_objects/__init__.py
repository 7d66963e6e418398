"""
Value Objects - Immutable objects without identity.

Value objects are defined by their attributes, not by an identity.
Two value objects are equal if all their attributes are equal.
They are immutable; changes produce new values.
"""

from .body import Body, BodyBuilder
from .capability import Capability, describe_capability, has_capabilities
from .interaction import AgentRole, Interaction, InteractionKind
from .runtime_message import (
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
    has_at_or_above,
)
from .tool_filter import EXCLUDE_ALL, INCLUDE_ALL, ToolFilter, normalize_tool_filter

__all__ = [
    "Body",
    "BodyBuilder",
    "Capability",
    "describe_capability",
    "has_capabilities",
    "AgentRole",
    "Interaction",
    "InteractionKind",
    "MessageCode",
    "MessageOrigin",
    "MessageSeverity",
    "RuntimeMessage",
    "has_at_or_above",
    "EXCLUDE_ALL",
    "INCLUDE_ALL",
    "ToolFilter",
    "normalize_tool_filter",
]
