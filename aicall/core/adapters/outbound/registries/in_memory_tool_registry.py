"""In-memory implementation of ToolRegistry."""

import logging
import threading
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ....domain.exceptions import ToolNotFound
from ....domain.value_objects import Capability

logger = logging.getLogger(__name__)


def normalize_parameters_schema(schema: Any) -> dict[str, Any] | None:
    """
    Normalize a parameters schema to a JSON Schema dict.

    Accepts:
    - None: the tool takes no validated parameters
    - Dict: returned as-is
    - Pydantic model class or instance: converted via model_json_schema()

    Example:
        class WeatherInput(BaseModel):
            city: str

        normalize_parameters_schema(WeatherInput)
        # {"properties": {"city": {...}}, "required": ["city"], "type": "object", ...}

    Raises:
        TypeError: If schema is not a supported type
    """
    if schema is None:
        return None

    if isinstance(schema, dict):
        return schema

    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return dict(schema.model_json_schema())

    if isinstance(schema, BaseModel):
        return dict(type(schema).model_json_schema())

    raise TypeError(
        f"parameters_schema must be a dict or Pydantic model, got {type(schema).__name__}"
    )


class ToolDefinition(BaseModel):
    """
    What the pipeline knows about a tool: its name, parameters and needs.

    Example:
        ToolDefinition(
            name="get_weather",
            description="Current weather for a city",
            parameters_schema={
                "type": "object",
                "properties": {"city": {"type": "string"}},
                "required": ["city"],
            },
            required_capabilities=Capability.FUNCTION_CALLING,
        )
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    description: str = ""
    parameters_schema: dict[str, Any] | None = None
    required_capabilities: Capability = Capability.NONE

    @field_validator("parameters_schema", mode="before")
    @classmethod
    def _normalize_schema(cls, value: Any) -> dict[str, Any] | None:
        return normalize_parameters_schema(value)

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Tool name cannot be empty")
        return value


class InMemoryToolRegistry:
    """
    In-memory implementation of ToolRegistry.

    Tool names are matched exactly. Registering a tool under an existing
    name replaces it.

    Thread-safe: Uses a lock for concurrent access.

    Example:
        registry = InMemoryToolRegistry([
            ToolDefinition(name="get_weather", parameters_schema=WeatherInput),
        ])
        registry.exists("get_weather")  # True
    """

    def __init__(self, tools: list[ToolDefinition] | None = None) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._lock = threading.RLock()
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: ToolDefinition) -> None:
        with self._lock:
            if tool.name in self._tools:
                logger.debug(f"Replacing registered tool: {tool.name}")
            self._tools[tool.name] = tool

    def unregister(self, name: str) -> bool:
        with self._lock:
            return self._tools.pop(name, None) is not None

    def get(self, name: str) -> ToolDefinition:
        """
        Get a tool definition.

        Raises:
            ToolNotFound: If no tool is registered under ``name``
        """
        with self._lock:
            tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFound(name)
        return tool

    def names(self) -> list[str]:
        with self._lock:
            return list(self._tools)

    # ToolRegistry port

    def exists(self, name: str) -> bool:
        if not name:
            return False
        with self._lock:
            return name in self._tools

    def get_schema(self, name: str) -> dict[str, Any] | None:
        with self._lock:
            tool = self._tools.get(name)
        return tool.parameters_schema if tool is not None else None

    def get_capability_requirement(self, name: str) -> Capability:
        with self._lock:
            tool = self._tools.get(name)
        return tool.required_capabilities if tool is not None else Capability.NONE

    def __len__(self) -> int:
        return len(self._tools)
