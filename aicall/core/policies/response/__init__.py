"""
Response policies, applied after a provider reply is received.

Default order:
    1. FinishReasonNormalizeResponsePolicy
    2. StructuredOutputValidateResponsePolicy
"""

from .finish_reason import (
    DEFAULT_FINISH_REASON,
    FINISH_REASON_ALIASES,
    FinishReasonNormalizeResponsePolicy,
    normalize_finish_reason,
)
from .structured_output import StructuredOutputValidateResponsePolicy

__all__ = [
    "DEFAULT_FINISH_REASON",
    "FINISH_REASON_ALIASES",
    "FinishReasonNormalizeResponsePolicy",
    "normalize_finish_reason",
    "StructuredOutputValidateResponsePolicy",
]
