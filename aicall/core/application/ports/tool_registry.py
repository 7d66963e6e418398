"""ToolRegistry port - where tool definitions are looked up."""

from typing import Any, Protocol, runtime_checkable

from ...domain.value_objects import Capability


@runtime_checkable
class ToolRegistry(Protocol):
    """
    Lookup port for registered tools.

    The policy pipeline only validates tool calls; it never executes tools.
    All it needs is to know whether a tool exists, what its parameters
    schema is, and which model capabilities it needs.

    Implementations:
        - InMemoryToolRegistry: Holds ToolDefinition objects in a dict

    Example:
        registry = InMemoryToolRegistry()
        registry.register(ToolDefinition(name="get_weather", parameters_schema={...}))

        registry.exists("get_weather")                      # True
        registry.get_capability_requirement("get_weather")  # Capability.NONE
    """

    def exists(self, name: str) -> bool:
        """
        Check if a tool is registered.

        Args:
            name: The tool name

        Returns:
            True if a tool with this name is registered
        """
        ...

    def get_schema(self, name: str) -> dict[str, Any] | None:
        """
        Get the JSON Schema of the tool's parameters.

        Args:
            name: The tool name

        Returns:
            The schema dict, or None when the tool has no schema
        """
        ...

    def get_capability_requirement(self, name: str) -> Capability:
        """
        Get the capabilities a model needs to use this tool.

        Args:
            name: The tool name

        Returns:
            Required capability flags (Capability.NONE when unconstrained)
        """
        ...
