"""Response entity returned by a provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..value_objects.body import Body
from ..value_objects.runtime_message import (
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
    has_at_or_above,
)

if TYPE_CHECKING:
    from .request import AIRequest


@dataclass
class AIReturn:
    """
    The provider's reply, mirroring the request shape.

    Attributes:
        body: Interactions returned by the provider
        messages: Diagnostics accumulated after receipt
        request: The request that produced this response
        finish_reason: Provider finish reason (normalized by response policies)
    """

    body: Body = field(default_factory=Body.empty)
    messages: list[RuntimeMessage] = field(default_factory=list)
    request: AIRequest | None = None
    finish_reason: str | None = None

    def __post_init__(self) -> None:
        if self.body is None:
            self.body = Body.empty()
        if self.messages is None:
            self.messages = []

    @property
    def has_errors(self) -> bool:
        return has_at_or_above(self.messages, MessageSeverity.ERROR)

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
