"""Validate pending tool calls before the request is dispatched."""

import logging

from ...application.ports import ModelCapabilityRegistry, ToolRegistry
from ...domain.value_objects import Interaction, RuntimeMessage
from ...validation import (
    ToolCapabilityValidator,
    ToolExistsValidator,
    ToolJsonSchemaValidator,
)
from ..context import PolicyContext

logger = logging.getLogger(__name__)


def tool_call_label(tool_call: Interaction) -> str:
    """
    Render the prefix that ties a message to its tool call.

    Example:
        "[tool:get_weather (id: call_1)]"
        "[tool:<unknown>]"
    """
    name = tool_call.tool_name or "<unknown>"
    if tool_call.tool_call_id:
        return f"[tool:{name} (id: {tool_call.tool_call_id})]"
    return f"[tool:{name}]"


class ToolValidationRequestPolicy:
    """
    Runs the tool validators against every pending tool call.

    Messages are labelled with the tool call they belong to and added to
    both the request and the pass diagnostics. Nothing is blocked here;
    callers decide what to do through ``AIRequest.has_errors``.
    """

    def __init__(
        self,
        tool_registry: ToolRegistry,
        model_registry: ModelCapabilityRegistry | None = None,
    ) -> None:
        self._tools = tool_registry
        self._models = model_registry

    def apply(self, context: PolicyContext) -> None:
        request = context.request
        if request is None:
            return

        pending = request.body.pending_tool_calls()
        if not pending:
            return

        validators = [
            ToolExistsValidator(self._tools),
            ToolJsonSchemaValidator(self._tools),
            ToolCapabilityValidator(context.provider, context.model, self._tools, self._models),
        ]

        for tool_call in pending:
            label = tool_call_label(tool_call)
            for validator in validators:
                result = validator.validate(tool_call)
                for message in result.messages:
                    labelled: RuntimeMessage = message.with_prefix(label)
                    context.diagnostics.append(labelled)
                    request.messages.append(labelled)

                if not result.is_valid:
                    logger.debug(
                        f"{type(validator).__name__} rejected {label}: {result.error_count} error(s)"
                    )
