"""Map provider-specific finish reasons onto one small vocabulary."""

import logging

from ...domain.value_objects import MessageOrigin, MessageSeverity
from ..context import PolicyContext

logger = logging.getLogger(__name__)

DEFAULT_FINISH_REASON = "stop"

FINISH_REASON_ALIASES: dict[str, str] = {
    # stop
    "stop": "stop",
    "stopped": "stop",
    "completed": "stop",
    "end": "stop",
    "eos": "stop",
    "stop_sequence": "stop",
    # length
    "length": "length",
    "max_tokens": "length",
    "max_token": "length",
    "max_tokens_exceeded": "length",
    "content_length": "length",
    "length_finish": "length",
    # timeout
    "timeout": "timeout",
    "time_out": "timeout",
    "deadline_exceeded": "timeout",
    # cancelled
    "cancelled": "cancelled",
    "canceled": "cancelled",
    "cancel": "cancelled",
    "user_cancelled": "cancelled",
    "aborted": "cancelled",
    "abort": "cancelled",
    # tool calls
    "tool_call": "tool_calls",
    "tool_calls": "tool_calls",
    "function_call": "tool_calls",
    "function_calls": "tool_calls",
    # content filter
    "content_filter": "content_filter",
    "safety": "content_filter",
    "filtered": "content_filter",
    # error
    "error": "error",
    "failed": "error",
}


def normalize_finish_reason(value: str | None) -> tuple[str | None, bool]:
    """
    Normalize one finish reason.

    Matching ignores case and treats "-" and " " like "_".

    Returns:
        ``(normalized, known)``. ``normalized`` is None for blank input and
        the trimmed original when the value is not recognized.

    Example:
        normalize_finish_reason("MAX_TOKENS")  # -> ("length", True)
        normalize_finish_reason("end-turn")    # -> ("end-turn", False)
    """
    if value is None or not value.strip():
        return None, False
    original = value.strip()
    key = original.lower().replace("-", "_").replace(" ", "_")
    if key in FINISH_REASON_ALIASES:
        return FINISH_REASON_ALIASES[key], True
    return original, False


class FinishReasonNormalizeResponsePolicy:
    """Rewrites ``response.finish_reason`` into the shared vocabulary."""

    def apply(self, context: PolicyContext) -> None:
        response = context.response
        if response is None:
            return

        original = response.finish_reason
        normalized, known = normalize_finish_reason(original)

        if normalized is None:
            response.finish_reason = DEFAULT_FINISH_REASON
            response.add_runtime_message(
                MessageSeverity.WARNING,
                MessageOrigin.RETURN,
                f"Finish reason missing; defaulted to '{DEFAULT_FINISH_REASON}'.",
            )
            return

        response.finish_reason = normalized

        if not known:
            response.add_runtime_message(
                MessageSeverity.WARNING,
                MessageOrigin.RETURN,
                f"Unrecognized finish reason '{normalized}'. Keeping original value.",
            )
        elif normalized != original:
            response.add_runtime_message(
                MessageSeverity.INFO,
                MessageOrigin.RETURN,
                f"Normalized finish reason '{original}' -> '{normalized}'.",
            )
