"""Validation results and the validator protocol."""

from dataclasses import dataclass, field
from typing import Protocol, TypeVar, runtime_checkable

from ..domain.value_objects import MessageSeverity, RuntimeMessage, has_at_or_above

T = TypeVar("T", contravariant=True)


@dataclass
class ValidationResult:
    """
    Outcome of one validator run.

    A result is valid when no message reaches ``fail_on``. Warnings and
    infos can be present on a valid result.
    """

    messages: list[RuntimeMessage] = field(default_factory=list)
    fail_on: MessageSeverity = MessageSeverity.ERROR

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def of(
        cls, *messages: RuntimeMessage, fail_on: MessageSeverity = MessageSeverity.ERROR
    ) -> "ValidationResult":
        return cls(messages=list(messages), fail_on=fail_on)

    @property
    def is_valid(self) -> bool:
        return not has_at_or_above(self.messages, self.fail_on)

    @property
    def error_count(self) -> int:
        return self._count(MessageSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(MessageSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(MessageSeverity.INFO)

    def _count(self, severity: MessageSeverity) -> int:
        return sum(1 for m in self.messages if m.severity == severity)


@runtime_checkable
class Validator(Protocol[T]):
    """
    Checks one kind of object and reports problems as runtime messages.

    Validators never raise for invalid input and never mutate what they
    validate.
    """

    fail_on: MessageSeverity

    def validate(self, instance: T) -> ValidationResult: ...
