"""In-memory implementation of ModelCapabilityRegistry."""

import threading

from ....application.ports import ModelCapabilities


def _key(provider: str, model: str) -> str:
    return f"{(provider or '').strip().lower()}:{(model or '').strip().lower()}"


class InMemoryModelRegistry:
    """
    In-memory implementation of ModelCapabilityRegistry.

    Models are keyed by lower-cased ``provider:model``, so lookups ignore
    case.

    Example:
        models = InMemoryModelRegistry()
        models.register(ModelCapabilities("openai", "gpt-4o", Capability.TOOL_CHAT | Capability.JSON_OUTPUT))
        models.get_capabilities("OpenAI", "GPT-4o").has_capability(Capability.FUNCTION_CALLING)  # True
    """

    def __init__(self, models: list[ModelCapabilities] | None = None) -> None:
        self._models: dict[str, ModelCapabilities] = {}
        self._lock = threading.RLock()
        for model in models or []:
            self.register(model)

    def register(self, capabilities: ModelCapabilities) -> None:
        with self._lock:
            self._models[_key(capabilities.provider, capabilities.model)] = capabilities

    def get_capabilities(self, provider: str, model: str) -> ModelCapabilities | None:
        with self._lock:
            return self._models.get(_key(provider, model))
