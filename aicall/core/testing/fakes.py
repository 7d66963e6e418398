"""Fake implementations of ports and policies for testing."""

from typing import Any

from ..domain.value_objects import Capability
from ..policies.context import PolicyContext


class FakeToolRegistry:
    """
    Fake implementation of ToolRegistry.

    Example:
        tools = (FakeToolRegistry()
            .with_tool("get_weather", schema={"type": "object"})
            .with_tool("render", capability=Capability.IMAGE_OUTPUT))

        tools.exists("get_weather")  # True
        tools.lookups                # ["get_weather"]
    """

    def __init__(self) -> None:
        self._schemas: dict[str, dict[str, Any] | None] = {}
        self._capabilities: dict[str, Capability] = {}
        self.lookups: list[str] = []

    def with_tool(
        self,
        name: str,
        schema: dict[str, Any] | None = None,
        capability: Capability = Capability.NONE,
    ) -> "FakeToolRegistry":
        self._schemas[name] = schema
        self._capabilities[name] = capability
        return self

    def exists(self, name: str) -> bool:
        self.lookups.append(name)
        return name in self._schemas

    def get_schema(self, name: str) -> dict[str, Any] | None:
        return self._schemas.get(name)

    def get_capability_requirement(self, name: str) -> Capability:
        return self._capabilities.get(name, Capability.NONE)


class FakeContextProvider:
    """
    Fake implementation of ContextProviderRegistry.

    Returns the same entries for every filter and records each query.

    Example:
        context = FakeContextProvider({"time_now": "10:00"})
        await context.get_current_context("time")
        assert context.queries == ["time"]
    """

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})
        self.queries: list[str] = []

    def will_return(self, values: dict[str, str]) -> "FakeContextProvider":
        self.values = dict(values)
        return self

    @property
    def query_count(self) -> int:
        return len(self.queries)

    async def get_current_context(self, filter_spec: str) -> dict[str, str]:
        self.queries.append(filter_spec)
        return dict(self.values)


class FailingPolicy:
    """
    A policy that always raises.

    Example:
        pipeline = PolicyPipeline(request_policies=[FailingPolicy("boom"), RecordingPolicy()])
    """

    def __init__(self, message: str = "policy failed", error_type: type[Exception] = RuntimeError) -> None:
        self.message = message
        self.error_type = error_type
        self.call_count = 0

    def apply(self, context: PolicyContext) -> None:
        self.call_count += 1
        raise self.error_type(self.message)


class RecordingPolicy:
    """
    A policy that records each call, optionally into a shared log.

    Pass the same ``log`` list to several policies to assert their order.
    """

    def __init__(self, name: str = "recording", log: list[str] | None = None, is_async: bool = False) -> None:
        self.name = name
        self.log = log if log is not None else []
        self.contexts: list[PolicyContext] = []
        self.is_async = is_async

    @property
    def call_count(self) -> int:
        return len(self.contexts)

    def apply(self, context: PolicyContext):
        if self.is_async:
            return self._record_async(context)
        self._record(context)
        return None

    async def _record_async(self, context: PolicyContext) -> None:
        self._record(context)

    def _record(self, context: PolicyContext) -> None:
        self.contexts.append(context)
        self.log.append(self.name)
