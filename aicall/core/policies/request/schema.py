"""Prepare and check the structured-output schema of a request."""

import logging

from ...application.services import JsonSchemaService, minify_json
from ...domain.value_objects import (
    BodyBuilder,
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
)
from ..context import PolicyContext

logger = logging.getLogger(__name__)


class SchemaAttachRequestPolicy:
    """
    Minifies the body's JSON output schema.

    Schemas that do not parse are left alone; SchemaValidateRequestPolicy
    reports them.
    """

    def apply(self, context: PolicyContext) -> None:
        request = context.request
        if request is None:
            return

        schema_text = request.body.json_output_schema
        if not schema_text or not schema_text.strip():
            return

        minified = minify_json(schema_text)
        if minified is None or minified == schema_text:
            return

        request.body = BodyBuilder.from_body(request.body).with_json_output_schema(minified).build()


class SchemaValidateRequestPolicy:
    """
    Checks the output schema of JSON requests and prepares provider wrapping.

    The computed wrapper info is stored on the schema service for the
    current task, so the response side can unwrap the provider's reply.
    Every request clears the info left by an earlier call in the task.
    """

    def __init__(self, schema_service: JsonSchemaService) -> None:
        self._schemas = schema_service

    def apply(self, context: PolicyContext) -> None:
        request = context.request
        if request is None:
            return

        self._schemas.set_current_wrapper_info(None)

        if not request.requires_json_output:
            return

        schema_text = request.body.json_output_schema
        if not schema_text or not schema_text.strip():
            return

        schema, error = self._schemas.try_parse_schema(schema_text)
        if schema is None:
            self._report(
                context,
                RuntimeMessage(
                    MessageSeverity.ERROR,
                    MessageOrigin.VALIDATION,
                    f"JSON output schema could not be parsed: {error}",
                    MessageCode.BODY_INVALID,
                ),
            )
            return

        try:
            _, info = self._schemas.wrap_for_provider(schema, context.provider)
            self._schemas.set_current_wrapper_info(info)
            logger.debug(
                f"Schema wrapping for provider {context.provider!r}: "
                f"wrapped={info.is_wrapped} type={info.wrapper_type or 'object'}"
            )
        except Exception as e:
            logger.warning(f"Could not prepare schema wrapping: {e}")
            self._report(
                context,
                RuntimeMessage(
                    MessageSeverity.WARNING,
                    MessageOrigin.VALIDATION,
                    f"Could not prepare JSON output schema for provider '{context.provider}': {e}",
                ),
            )

    @staticmethod
    def _report(context: PolicyContext, message: RuntimeMessage) -> None:
        context.request.messages.append(message)
        context.diagnostics.append(message)
