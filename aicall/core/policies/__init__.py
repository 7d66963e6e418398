"""
Policies - Composable steps around a provider call.

Request policies run before dispatch, response policies after receipt.
The PolicyPipeline runs them in order and turns failures into
diagnostics instead of aborting the call.
"""

from .context import PolicyContext, RequestPolicy, ResponsePolicy
from .pipeline import PolicyPipeline, create_default_pipeline, policy_name
from .request import (
    ContextInjectionRequestPolicy,
    RequestTimeoutPolicy,
    SchemaAttachRequestPolicy,
    SchemaValidateRequestPolicy,
    ToolFilterNormalizationRequestPolicy,
    ToolValidationRequestPolicy,
    normalize_timeout,
)
from .response import (
    FinishReasonNormalizeResponsePolicy,
    StructuredOutputValidateResponsePolicy,
    normalize_finish_reason,
)

__all__ = [
    # Pipeline
    "PolicyContext",
    "PolicyPipeline",
    "RequestPolicy",
    "ResponsePolicy",
    "create_default_pipeline",
    "policy_name",
    # Request policies
    "ContextInjectionRequestPolicy",
    "RequestTimeoutPolicy",
    "SchemaAttachRequestPolicy",
    "SchemaValidateRequestPolicy",
    "ToolFilterNormalizationRequestPolicy",
    "ToolValidationRequestPolicy",
    "normalize_timeout",
    # Response policies
    "FinishReasonNormalizeResponsePolicy",
    "StructuredOutputValidateResponsePolicy",
    "normalize_finish_reason",
]
