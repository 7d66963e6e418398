"""Validate (and unwrap) structured output returned by the provider."""

import logging

from ...application.services import JsonSchemaService
from ...domain.entities import AIReturn
from ...domain.value_objects import AgentRole, BodyBuilder, Interaction, InteractionKind
from ...validation import JsonSchemaResponseValidator, latest_assistant_text
from ..context import PolicyContext

logger = logging.getLogger(__name__)


class StructuredOutputValidateResponsePolicy:
    """
    Checks the assistant's JSON reply against the request's output schema.

    When the request side wrapped the schema for the provider, the reply is
    unwrapped and the response body is rebuilt with the unwrapped text, so
    callers always see the shape they asked for.
    """

    def __init__(self, schema_service: JsonSchemaService) -> None:
        self._schemas = schema_service
        self._validator = JsonSchemaResponseValidator(schema_service)

    def apply(self, context: PolicyContext) -> None:
        response = context.response
        request = context.request or (response.request if response is not None else None)
        if response is None or request is None:
            return

        if not request.requires_json_output or not request.body.requires_json_output:
            return

        result = self._validator.validate(response, request)
        for message in result.messages:
            response.messages.append(message)
            context.diagnostics.append(message)

        self._replace_wrapped_content(response)

    def _replace_wrapped_content(self, response: AIReturn) -> None:
        content = latest_assistant_text(response.body)
        if content is None:
            return

        unwrapped = self._schemas.unwrap(content, self._schemas.get_current_wrapper_info())
        if unwrapped is None or unwrapped == content:
            return

        interactions = list(response.body.interactions)
        for index in range(len(interactions) - 1, -1, -1):
            interaction = interactions[index]
            if (
                interaction.kind == InteractionKind.TEXT
                and interaction.agent == AgentRole.ASSISTANT
                and interaction.content == content
            ):
                interactions[index] = Interaction.assistant(unwrapped)
                break

        body = response.body
        response.body = (
            BodyBuilder.create()
            .with_tool_filter(body.tool_filter)
            .with_context_filter(body.context_filter)
            .with_json_output_schema(body.json_output_schema)
            .add_range(interactions)
            .build()
        )
        logger.debug("Replaced wrapped structured output with its unwrapped payload")
