"""ModelCapabilityRegistry port - what a provider/model can do."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ...domain.value_objects import Capability, has_capabilities


@dataclass(frozen=True)
class ModelCapabilities:
    """
    Declared capabilities of one provider/model combination.

    Attributes:
        provider: Provider name
        model: Model name
        capabilities: Capability flags the model supports
        deprecated: Whether the model is discouraged for new calls
        replacement_model: Suggested model when deprecated
    """

    provider: str
    model: str
    capabilities: Capability = Capability.NONE
    deprecated: bool = False
    replacement_model: str | None = None

    def has_capability(self, required: Capability) -> bool:
        return has_capabilities(self.capabilities, required)


@runtime_checkable
class ModelCapabilityRegistry(Protocol):
    """
    Lookup port for model capabilities.

    Implementations:
        - InMemoryModelRegistry: Keyed by lower-cased "provider:model"
    """

    def get_capabilities(self, provider: str, model: str) -> ModelCapabilities | None:
        """
        Get the capabilities of a model.

        Args:
            provider: Provider name
            model: Model name

        Returns:
            The model's capabilities, or None if the model is not registered
        """
        ...
