"""
Validators for tool calls.

Three checks run for every pending tool call, in this order:

    ToolExistsValidator      -> is the tool registered at all?
    ToolJsonSchemaValidator  -> do the arguments match its parameters schema?
    ToolCapabilityValidator  -> can the selected model use this tool?

Each later validator passes silently when an earlier one would already
have reported the problem (e.g. an unknown tool has no schema to check).
"""

import logging

from jsonschema.exceptions import SchemaError

from ..application.ports import ModelCapabilityRegistry, ToolRegistry
from ..application.services import schema_violations
from ..domain.value_objects import (
    Capability,
    Interaction,
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
    describe_capability,
)
from .base import ValidationResult

logger = logging.getLogger(__name__)


def _validation_error(message: str, code: MessageCode = MessageCode.TOOL_VALIDATION_ERROR) -> RuntimeMessage:
    return RuntimeMessage(MessageSeverity.ERROR, MessageOrigin.VALIDATION, message, code)


def _validation_warning(message: str, code: MessageCode = MessageCode.UNKNOWN) -> RuntimeMessage:
    return RuntimeMessage(MessageSeverity.WARNING, MessageOrigin.VALIDATION, message, code)


class ToolExistsValidator:
    """Fails tool calls whose tool name is missing or not registered."""

    fail_on = MessageSeverity.ERROR

    def __init__(self, tool_registry: ToolRegistry) -> None:
        self._tools = tool_registry

    def validate(self, tool_call: Interaction) -> ValidationResult:
        if tool_call is None:
            return ValidationResult.of(_validation_error("Tool call instance is null"))

        name = tool_call.tool_name
        if not name or not name.strip():
            return ValidationResult.of(_validation_error("Tool call is missing a tool name"))

        if not self._tools.exists(name):
            return ValidationResult.of(_validation_error(f"Tool '{name}' is not registered"))

        return ValidationResult.success()


class ToolJsonSchemaValidator:
    """
    Checks tool-call arguments against the tool's parameters schema.

    Uses jsonschema's Draft 7 validator and reports one ERROR per
    violation. Tools that are unknown or have no schema pass.
    """

    fail_on = MessageSeverity.ERROR

    def __init__(self, tool_registry: ToolRegistry) -> None:
        self._tools = tool_registry

    def validate(self, tool_call: Interaction) -> ValidationResult:
        if tool_call is None:
            return ValidationResult.of(_validation_error("Tool call instance is null"))

        name = tool_call.tool_name
        if not name or not self._tools.exists(name):
            return ValidationResult.success()

        schema = self._tools.get_schema(name)
        if not schema:
            return ValidationResult.success()

        arguments = tool_call.arguments_dict()
        if arguments is None:
            return ValidationResult.of(
                _validation_error(
                    f"Tool '{name}' requires arguments matching its parameters schema, "
                    f"but arguments are missing"
                )
            )

        try:
            violations = schema_violations(schema, arguments)
        except SchemaError as e:
            logger.warning(f"Tool '{name}' has an invalid parameters schema: {e.message}")
            return ValidationResult.of(
                _validation_warning(f"Parameters schema of tool '{name}' is invalid: {e.message}")
            )

        messages = [
            _validation_error(f"Arguments for tool '{name}' do not match schema: {violation}")
            for violation in violations
        ]
        return ValidationResult.of(*messages)


class ToolCapabilityValidator:
    """
    Checks that the selected provider/model supports what the tool needs.

    Outcomes:
        - No provider/model, no registry, unknown tool, or no requirement: pass
        - Model not in the registry: WARNING, capabilities cannot be verified
        - Model lacks a required capability: ERROR
        - Model deprecated: WARNING, with the replacement when known
    """

    fail_on = MessageSeverity.ERROR

    def __init__(
        self,
        provider: str | None,
        model: str | None,
        tool_registry: ToolRegistry,
        model_registry: ModelCapabilityRegistry | None = None,
    ) -> None:
        self.provider = provider or ""
        self.model = model or ""
        self._tools = tool_registry
        self._models = model_registry

    def validate(self, tool_call: Interaction) -> ValidationResult:
        if tool_call is None:
            return ValidationResult.of(_validation_error("Tool call instance is null"))

        if not self.provider.strip() or not self.model.strip() or self._models is None:
            return ValidationResult.success()

        name = tool_call.tool_name
        if not name or not name.strip() or not self._tools.exists(name):
            return ValidationResult.success()

        required = self._tools.get_capability_requirement(name)
        if required == Capability.NONE:
            return ValidationResult.success()

        capabilities = self._models.get_capabilities(self.provider, self.model)
        if capabilities is None:
            return ValidationResult.of(
                _validation_warning(
                    f"Model '{self.model}' on provider '{self.provider}' is not registered; "
                    f"cannot verify capabilities ({describe_capability(required)}) "
                    f"required by tool '{name}'",
                    MessageCode.UNKNOWN_MODEL,
                )
            )

        messages = []
        if not capabilities.has_capability(required):
            messages.append(
                _validation_error(
                    f"Selected model '{self.model}' on provider '{self.provider}' does not "
                    f"support required capabilities ({describe_capability(required)}) "
                    f"for tool '{name}'",
                    MessageCode.CAPABILITY_MISMATCH,
                )
            )

        if capabilities.deprecated:
            note = f"Model '{self.model}' on provider '{self.provider}' is deprecated"
            if capabilities.replacement_model:
                note += f"; consider '{capabilities.replacement_model}'"
            messages.append(_validation_warning(note))

        return ValidationResult.of(*messages)
