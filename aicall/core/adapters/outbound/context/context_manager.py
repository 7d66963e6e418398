"""Aggregates context providers behind the ContextProviderRegistry port."""

import asyncio
import logging
import threading

from ....domain.value_objects import ToolFilter
from .providers import ContextProvider

logger = logging.getLogger(__name__)


class ContextManager:
    """
    Registry of context providers that implements ContextProviderRegistry.

    Providers are selected with the same filter grammar as tools, matched
    against their ``provider_id``. Registering a provider with an id that is
    already taken replaces the old provider.

    Example:
        manager = ContextManager()
        manager.register(TimeContextProvider())
        manager.register(StaticContextProvider("environment", {"tenant": "prod"}))

        await manager.get_current_context("time")
        # {"time_current-datetime": "...", "time_current-timezone": "..."}
    """

    def __init__(self, providers: list[ContextProvider] | None = None) -> None:
        self._providers: list[ContextProvider] = []
        self._lock = threading.RLock()
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: ContextProvider) -> None:
        if provider is None:
            return
        with self._lock:
            self._providers = [p for p in self._providers if p.provider_id != provider.provider_id]
            self._providers.append(provider)
        logger.debug(f"Registered context provider: {provider.provider_id}")

    def unregister(self, provider_id: str) -> None:
        if not provider_id:
            return
        with self._lock:
            self._providers = [p for p in self._providers if p.provider_id != provider_id]
        logger.debug(f"Unregistered context provider: {provider_id}")

    def get_providers(self) -> list[ContextProvider]:
        with self._lock:
            return list(self._providers)

    def get_provider(self, provider_id: str) -> ContextProvider | None:
        with self._lock:
            return next((p for p in self._providers if p.provider_id == provider_id), None)

    async def get_current_context(self, filter_spec: str | None = None) -> dict[str, str]:
        """
        Collect entries from every provider accepted by ``filter_spec``.

        Keys without an underscore get the provider id as prefix; later
        providers overwrite earlier ones on key collisions.
        """
        provider_filter = ToolFilter.parse(filter_spec)
        selected = [p for p in self.get_providers() if provider_filter.should_include(p.provider_id)]

        result: dict[str, str] = {}
        for provider in selected:
            values = provider.get_context()
            if asyncio.iscoroutine(values):
                values = await values
            for key, value in (values or {}).items():
                if "_" not in key:
                    key = f"{provider.provider_id}_{key}"
                result[key] = value

        logger.debug(f"Collected {len(result)} context key(s) from {len(selected)} provider(s)")
        return result
