"""Diagnostic runtime messages attached to requests and responses."""

from dataclasses import dataclass, replace
from enum import Enum, IntEnum


class MessageSeverity(IntEnum):
    """Severity of a runtime message. Ordered so thresholds can be compared."""

    INFO = 0
    WARNING = 1
    ERROR = 2


class MessageOrigin(Enum):
    """Which subsystem emitted a runtime message."""

    RETURN = "return"
    VALIDATION = "validation"


class MessageCode(Enum):
    """Machine-readable codes for well-known diagnostics."""

    UNKNOWN = 0
    UNKNOWN_MODEL = 1
    CAPABILITY_MISMATCH = 2
    TOOL_VALIDATION_ERROR = 3
    BODY_INVALID = 4
    RETURN_INVALID = 5


@dataclass(frozen=True)
class RuntimeMessage:
    """
    One immutable diagnostic message.

    Runtime messages are purely additive: code appends them to a request or
    response and never removes them. Downstream gating logic decides what an
    ERROR means for the call.

    Attributes:
        severity: INFO, WARNING or ERROR
        origin: The subsystem that produced the message
        message: Human-readable text
        code: Optional machine-readable code
        surfaceable: Whether UI layers should show the message
    """

    severity: MessageSeverity
    origin: MessageOrigin
    message: str
    code: MessageCode = MessageCode.UNKNOWN
    surfaceable: bool = True

    def __post_init__(self) -> None:
        if self.message is None:
            object.__setattr__(self, "message", "")

    @property
    def is_error(self) -> bool:
        return self.severity == MessageSeverity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity == MessageSeverity.WARNING

    def with_prefix(self, prefix: str) -> "RuntimeMessage":
        """Return a copy whose text is ``"<prefix> <message>"``."""
        return replace(self, message=f"{prefix} {self.message}")

    def __str__(self) -> str:
        return f"[{self.severity.name}/{self.origin.value}] {self.message}"

    # Factory methods

    @classmethod
    def error(
        cls, message: str, origin: MessageOrigin = MessageOrigin.VALIDATION
    ) -> "RuntimeMessage":
        return cls(MessageSeverity.ERROR, origin, message)

    @classmethod
    def warning(
        cls, message: str, origin: MessageOrigin = MessageOrigin.VALIDATION
    ) -> "RuntimeMessage":
        return cls(MessageSeverity.WARNING, origin, message)

    @classmethod
    def info(
        cls, message: str, origin: MessageOrigin = MessageOrigin.VALIDATION
    ) -> "RuntimeMessage":
        return cls(MessageSeverity.INFO, origin, message)


def has_at_or_above(messages: list[RuntimeMessage], threshold: MessageSeverity) -> bool:
    """Check whether any message reaches the given severity."""
    return any(m is not None and m.severity >= threshold for m in messages)
