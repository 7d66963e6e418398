"""Shared per-call state and the policy protocols."""

from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ..domain.entities import AIRequest, AIReturn
from ..domain.value_objects import RuntimeMessage


@dataclass
class PolicyContext:
    """
    State shared by every policy in one pipeline pass.

    A fresh context is created for each ``apply_*`` call and dropped when
    the pass finishes. ``provider`` and ``model`` default to the request's.

    Attributes:
        request: The request being processed (may be None on the response side)
        response: The response being processed (response side only)
        provider: Provider name used for provider-specific decisions
        model: Model name used for capability checks
        diagnostics: Messages collected by policies during this pass
    """

    request: AIRequest | None = None
    response: AIReturn | None = None
    provider: str | None = None
    model: str | None = None
    diagnostics: list[RuntimeMessage] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.request is not None:
            if self.provider is None:
                self.provider = self.request.provider
            if self.model is None:
                self.model = self.request.model


@runtime_checkable
class RequestPolicy(Protocol):
    """
    A step that transforms or validates a request before dispatch.

    ``apply`` may be a regular method or a coroutine. It reads and replaces
    ``context.request.body`` and appends to ``context.request.messages``.
    Plain callables taking a ``PolicyContext`` are accepted as well.
    """

    def apply(self, context: PolicyContext) -> Awaitable[None] | None: ...


@runtime_checkable
class ResponsePolicy(Protocol):
    """A step that transforms or validates a response after receipt."""

    def apply(self, context: PolicyContext) -> Awaitable[None] | None: ...
