"""ContextProviderRegistry port - ambient context for requests."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ContextProviderRegistry(Protocol):
    """
    Port that gathers background context for a conversation.

    Implementations:
        - ContextManager: Aggregates registered context providers

    Example:
        context = await registry.get_current_context("time,environment")
        # {"time_now": "2025-01-01 10:00:00", "environment_tenant": "prod"}
    """

    async def get_current_context(self, filter_spec: str) -> dict[str, str]:
        """
        Collect context entries selected by ``filter_spec``.

        Args:
            filter_spec: Which providers to include (same grammar as tool filters)

        Returns:
            Mapping of context keys to text values, in provider order
        """
        ...
