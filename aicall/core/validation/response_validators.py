"""Validators for provider responses."""

from ..application.services import JsonSchemaService
from ..domain.entities import AIRequest, AIReturn
from ..domain.value_objects import (
    AgentRole,
    Body,
    InteractionKind,
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
)
from .base import ValidationResult


def latest_assistant_text(body: Body | None) -> str | None:
    """Get the content of the last non-blank assistant TEXT interaction."""
    if body is None:
        return None
    for interaction in reversed(body.interactions):
        if (
            interaction.kind == InteractionKind.TEXT
            and interaction.agent == AgentRole.ASSISTANT
            and interaction.content.strip()
        ):
            return interaction.content
    return None


class JsonSchemaResponseValidator:
    """
    Checks structured assistant output against the request's JSON schema.

    The assistant text is unwrapped first when the request side wrapped the
    schema for the provider (see ``JsonSchemaService``).
    """

    fail_on = MessageSeverity.ERROR

    def __init__(self, schema_service: JsonSchemaService) -> None:
        self._schemas = schema_service

    def validate(self, response: AIReturn, request: AIRequest | None = None) -> ValidationResult:
        request = request or (response.request if response is not None else None)
        if request is None or response is None:
            return ValidationResult.success()

        if not request.requires_json_output or not request.body.requires_json_output:
            return ValidationResult.success()

        schema_text = request.body.json_output_schema or ""
        if not schema_text.strip():
            return ValidationResult.success()

        content = latest_assistant_text(response.body)
        if content is None:
            return ValidationResult.of(
                RuntimeMessage(
                    MessageSeverity.ERROR,
                    MessageOrigin.VALIDATION,
                    "Expected JSON structured output from assistant, but content is missing",
                    MessageCode.RETURN_INVALID,
                )
            )

        payload = self._schemas.unwrap(content, self._schemas.get_current_wrapper_info())
        ok, error = self._schemas.validate(schema_text, payload)
        if not ok:
            return ValidationResult.of(
                RuntimeMessage(
                    MessageSeverity.ERROR,
                    MessageOrigin.VALIDATION,
                    f"Response JSON does not match schema: {error}",
                    MessageCode.RETURN_INVALID,
                )
            )
        return ValidationResult.success()
