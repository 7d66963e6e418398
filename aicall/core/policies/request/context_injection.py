"""Inject ambient context as the first interaction of the body."""

import logging

from ...application.ports import ContextProviderRegistry
from ...domain.value_objects import EXCLUDE_ALL, BodyBuilder, Interaction
from ..context import PolicyContext

logger = logging.getLogger(__name__)

CONTEXT_HEADER = "Conversation context:\n\n"


def render_context(items: dict[str, str]) -> str:
    """
    Render context entries as the text of a CONTEXT interaction.

    Example:
        render_context({"time_now": "10:00"})
        # -> "Conversation context:\\n\\n- time_now: 10:00\\n"
    """
    lines = [f"- {key}: {value}\n" for key, value in items.items()]
    return CONTEXT_HEADER + "".join(lines)


class ContextInjectionRequestPolicy:
    """
    Queries the context providers selected by ``body.context_filter``.

    The resulting CONTEXT interaction always goes first and replaces any
    previous one, so repeated injection never piles up context.
    """

    def __init__(self, context_provider: ContextProviderRegistry) -> None:
        self._context = context_provider

    async def apply(self, context: PolicyContext) -> None:
        request = context.request
        if request is None:
            return

        body = request.body
        context_filter = (body.context_filter or "").strip()
        if not context_filter or context_filter == EXCLUDE_ALL:
            return

        data = await self._context.get_current_context(context_filter)
        items = {key: str(value) for key, value in (data or {}).items() if value}
        if not items:
            logger.debug(f"No context available for filter {context_filter!r}")
            return

        request.body = (
            BodyBuilder.from_body(body)
            .set_context(Interaction.context(render_context(items)))
            .build()
        )
        logger.debug(f"Injected {len(items)} context item(s)")
