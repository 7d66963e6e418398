"""Request entities: a full provider request and a standalone tool call."""

from dataclasses import dataclass, field

from ..value_objects.body import Body
from ..value_objects.capability import Capability
from ..value_objects.interaction import Interaction
from ..value_objects.runtime_message import (
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
    has_at_or_above,
)


@dataclass
class AIRequest:
    """
    A request to an LLM provider, created once per call.

    Policies never mutate ``body`` in place; they assign a freshly built
    Body. ``messages`` only ever grows.

    Attributes:
        provider: Provider name (e.g. "openai")
        model: Model name
        endpoint: Provider endpoint
        capability: What the call needs from the model
        body: Conversation and tool/context/schema configuration
        timeout_seconds: Per-call timeout; ``None`` or 0 means unset
        messages: Diagnostics accumulated before dispatch
    """

    provider: str = ""
    model: str = ""
    endpoint: str = ""
    capability: Capability = Capability.TEXT2TEXT
    body: Body = field(default_factory=Body.empty)
    timeout_seconds: int | None = None
    messages: list[RuntimeMessage] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.body is None:
            self.body = Body.empty()
        if self.messages is None:
            self.messages = []

    @property
    def requires_json_output(self) -> bool:
        """True when the call asks the model for JSON-structured output."""
        return Capability.JSON_OUTPUT in self.capability

    @property
    def has_errors(self) -> bool:
        """True when any ERROR message was collected. Used by outer gates."""
        return has_at_or_above(self.messages, MessageSeverity.ERROR)

    def error_messages(self) -> list[RuntimeMessage]:
        return [m for m in self.messages if m.severity == MessageSeverity.ERROR]

    def add_runtime_message(
        self,
        severity: MessageSeverity,
        origin: MessageOrigin,
        message: str,
        code: MessageCode = MessageCode.UNKNOWN,
    ) -> RuntimeMessage:
        runtime_message = RuntimeMessage(severity, origin, message, code)
        self.messages.append(runtime_message)
        return runtime_message


@dataclass
class ToolCallRequest:
    """
    A tool call dispatched on its own, outside a full provider request.

    The body holds the pending tool call. The policy pipeline can normalize
    its timeout and validate the call through
    ``PolicyPipeline.apply_tool_call_policies``.

    Example:
        call = Interaction.tool_call("get_weather", {"city": "NYC"}, call_id="c1")
        tool_request = ToolCallRequest.from_interaction(call, provider="openai", model="gpt-4o")
        await pipeline.apply_tool_call_policies(tool_request)
        if tool_request.has_errors:
            ...
    """

    provider: str = ""
    model: str = ""
    body: Body = field(default_factory=Body.empty)
    timeout_seconds: int | None = None
    messages: list[RuntimeMessage] = field(default_factory=list)

    @classmethod
    def from_interaction(
        cls,
        tool_call: Interaction,
        provider: str | None = None,
        model: str | None = None,
        timeout_seconds: int | None = None,
    ) -> "ToolCallRequest":
        if not tool_call.is_tool_call:
            raise ValueError(f"Expected a tool call interaction, got {tool_call.kind.value}")
        return cls(
            provider=provider or "",
            model=model or "",
            body=Body.empty().with_appended(tool_call),
            timeout_seconds=timeout_seconds,
        )

    @property
    def has_errors(self) -> bool:
        return has_at_or_above(self.messages, MessageSeverity.ERROR)

    def get_tool_call(self) -> Interaction | None:
        """Get the first pending tool call in the body."""
        pending = self.body.pending_tool_calls()
        return pending[0] if pending else None
