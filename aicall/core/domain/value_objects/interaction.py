"""Immutable conversation interactions."""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any


class InteractionKind(Enum):
    """The closed set of interaction kinds a Body can hold."""

    TEXT = "text"
    TOOL_CALL = "tool_call"
    ERROR = "error"
    SYSTEM = "system"
    CONTEXT = "context"


class AgentRole(Enum):
    """Who produced an interaction."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    CONTEXT = "context"
    TOOL = "tool"
    ERROR = "error"


def _freeze_arguments(arguments: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if arguments is None:
        return None
    return MappingProxyType(copy.deepcopy(dict(arguments)))


@dataclass(frozen=True)
class Interaction:
    """
    One typed unit of conversation content.

    Interactions are immutable once constructed. Consumers should match on
    ``kind``; the tool-call fields are only meaningful for TOOL_CALL.

    Attributes:
        kind: Which variant this is (text, tool call, error, system, context)
        agent: Who produced it
        content: Text content (empty for tool calls)
        tool_name: Tool name, TOOL_CALL only
        tool_call_id: Tool call id, TOOL_CALL only
        arguments: Read-only JSON object of arguments, TOOL_CALL only
        result: Tool result once resolved; ``None`` while pending

    Example:
        call = Interaction.tool_call("get_weather", {"city": "NYC"}, call_id="c1")
        call.is_pending_tool_call   # True
        done = call.resolved({"temp": 72})
        done.is_pending_tool_call   # False, ``call`` is unchanged
    """

    kind: InteractionKind
    agent: AgentRole
    content: str = ""
    tool_name: str | None = None
    tool_call_id: str | None = None
    arguments: Mapping[str, Any] | None = None
    result: Any = None

    def __post_init__(self) -> None:
        if self.content is None:
            object.__setattr__(self, "content", "")
        if self.arguments is not None and not isinstance(self.arguments, MappingProxyType):
            object.__setattr__(self, "arguments", _freeze_arguments(self.arguments))

    @property
    def is_tool_call(self) -> bool:
        return self.kind == InteractionKind.TOOL_CALL

    @property
    def is_pending_tool_call(self) -> bool:
        return self.kind == InteractionKind.TOOL_CALL and self.result is None

    @property
    def is_context(self) -> bool:
        return self.kind == InteractionKind.CONTEXT

    @property
    def is_diagnostic(self) -> bool:
        """Diagnostics are surfaced to users but never sent to providers."""
        return self.kind == InteractionKind.ERROR

    def arguments_dict(self) -> dict[str, Any] | None:
        """Get a mutable deep copy of the tool-call arguments."""
        if self.arguments is None:
            return None
        return copy.deepcopy(dict(self.arguments))

    def resolved(self, result: Any) -> "Interaction":
        """Return a copy of this tool call carrying ``result``."""
        if not self.is_tool_call:
            raise ValueError(f"Only tool calls can be resolved, got {self.kind.value}")
        return replace(self, result=result)

    def __repr__(self) -> str:
        if self.is_tool_call:
            return (
                f"Interaction(kind=tool_call, tool_name={self.tool_name!r}, "
                f"id={self.tool_call_id!r}, pending={self.result is None})"
            )
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"Interaction(kind={self.kind.value}, agent={self.agent.value}, content={preview!r})"

    # Factory methods

    @classmethod
    def text(cls, agent: AgentRole, content: str) -> "Interaction":
        return cls(kind=InteractionKind.TEXT, agent=agent, content=content)

    @classmethod
    def user(cls, content: str) -> "Interaction":
        return cls.text(AgentRole.USER, content)

    @classmethod
    def assistant(cls, content: str) -> "Interaction":
        return cls.text(AgentRole.ASSISTANT, content)

    @classmethod
    def system(cls, content: str) -> "Interaction":
        return cls(kind=InteractionKind.SYSTEM, agent=AgentRole.SYSTEM, content=content)

    @classmethod
    def error(cls, content: str, agent: AgentRole = AgentRole.ERROR) -> "Interaction":
        """Create a diagnostic interaction."""
        return cls(kind=InteractionKind.ERROR, agent=agent, content=content)

    @classmethod
    def context(cls, content: str) -> "Interaction":
        return cls(kind=InteractionKind.CONTEXT, agent=AgentRole.CONTEXT, content=content)

    @classmethod
    def tool_call(
        cls,
        name: str | None,
        arguments: Mapping[str, Any] | None = None,
        call_id: str | None = None,
    ) -> "Interaction":
        return cls(
            kind=InteractionKind.TOOL_CALL,
            agent=AgentRole.ASSISTANT,
            tool_name=name,
            tool_call_id=call_id,
            arguments=arguments,
        )
