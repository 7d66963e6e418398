"""Rewrite the body's tool filter into its canonical form."""

import logging

from ...domain.value_objects import BodyBuilder, normalize_tool_filter
from ..context import PolicyContext

logger = logging.getLogger(__name__)


class ToolFilterNormalizationRequestPolicy:
    """
    Canonicalizes ``body.tool_filter`` so providers see one stable form.

    Example:
        "b,a"      -> "a,b"
        "* -B -a"  -> "* -a -b"
        ""         -> "*"
    """

    def apply(self, context: PolicyContext) -> None:
        request = context.request
        if request is None:
            return

        body = request.body
        raw = body.tool_filter or ""
        normalized = normalize_tool_filter(raw)
        if normalized == raw:
            return

        if raw.strip():
            note = f"Tool filter normalized from '{raw}' to '{normalized}'."
        else:
            note = f"Tool filter was empty; interpreted as '{normalized}'."

        logger.debug(note)
        request.body = (
            BodyBuilder.from_body(body)
            .with_tool_filter(normalized)
            .add_error(note)
            .build()
        )
