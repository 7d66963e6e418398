"""
Request policies, applied before a request is dispatched.

Default order:
    1. RequestTimeoutPolicy
    2. ToolFilterNormalizationRequestPolicy
    3. ToolValidationRequestPolicy
    4. ContextInjectionRequestPolicy
    5. SchemaAttachRequestPolicy
    6. SchemaValidateRequestPolicy
"""

from .context_injection import ContextInjectionRequestPolicy, render_context
from .schema import SchemaAttachRequestPolicy, SchemaValidateRequestPolicy
from .timeout import (
    DEFAULT_TIMEOUT_SECONDS,
    MAX_TIMEOUT_SECONDS,
    MIN_TIMEOUT_SECONDS,
    RequestTimeoutPolicy,
    normalize_timeout,
)
from .tool_filter import ToolFilterNormalizationRequestPolicy
from .tool_validation import ToolValidationRequestPolicy, tool_call_label

__all__ = [
    "ContextInjectionRequestPolicy",
    "render_context",
    "SchemaAttachRequestPolicy",
    "SchemaValidateRequestPolicy",
    "DEFAULT_TIMEOUT_SECONDS",
    "MAX_TIMEOUT_SECONDS",
    "MIN_TIMEOUT_SECONDS",
    "RequestTimeoutPolicy",
    "normalize_timeout",
    "ToolFilterNormalizationRequestPolicy",
    "ToolValidationRequestPolicy",
    "tool_call_label",
]
