"""
Validation - Checks that report problems as runtime messages.

Validators never raise for invalid input. They return a ValidationResult
whose messages the policies copy onto the request or response.
"""

from .base import ValidationResult, Validator
from .response_validators import JsonSchemaResponseValidator, latest_assistant_text
from .tool_validators import (
    ToolCapabilityValidator,
    ToolExistsValidator,
    ToolJsonSchemaValidator,
)

__all__ = [
    "ValidationResult",
    "Validator",
    # Tool calls
    "ToolCapabilityValidator",
    "ToolExistsValidator",
    "ToolJsonSchemaValidator",
    # Responses
    "JsonSchemaResponseValidator",
    "latest_assistant_text",
]
