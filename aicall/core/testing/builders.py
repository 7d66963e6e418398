"""Test data builders for requests, responses and tool calls."""

from typing import Any

from ..domain.entities import AIRequest, AIReturn, ToolCallRequest
from ..domain.value_objects import BodyBuilder, Capability, Interaction


class RequestBuilder:
    """
    Builder for creating AIRequest entities in tests.

    Example:
        request = (RequestBuilder()
            .with_provider("openai", "gpt-4o")
            .with_tool_filter("*")
            .with_user("What's the weather?")
            .with_tool_call("get_weather", {"city": "NYC"}, call_id="c1")
            .build())
    """

    def __init__(self) -> None:
        self._provider = "test-provider"
        self._model = "test-model"
        self._endpoint = ""
        self._capability = Capability.TEXT2TEXT
        self._timeout: int | None = 60
        self._body = BodyBuilder.create()

    def with_provider(self, provider: str, model: str | None = None) -> "RequestBuilder":
        self._provider = provider
        if model is not None:
            self._model = model
        return self

    def with_model(self, model: str) -> "RequestBuilder":
        self._model = model
        return self

    def with_capability(self, capability: Capability) -> "RequestBuilder":
        self._capability = capability
        return self

    def with_timeout(self, seconds: int | None) -> "RequestBuilder":
        self._timeout = seconds
        return self

    def with_tool_filter(self, tool_filter: str) -> "RequestBuilder":
        self._body.with_tool_filter(tool_filter)
        return self

    def with_context_filter(self, context_filter: str) -> "RequestBuilder":
        self._body.with_context_filter(context_filter)
        return self

    def with_json_schema(self, schema: str) -> "RequestBuilder":
        """Ask for structured output: sets the schema and the JSON_OUTPUT capability."""
        self._body.with_json_output_schema(schema)
        self._capability = self._capability | Capability.JSON_OUTPUT
        return self

    def with_user(self, text: str) -> "RequestBuilder":
        self._body.add_user(text)
        return self

    def with_assistant(self, text: str) -> "RequestBuilder":
        self._body.add_assistant(text)
        return self

    def with_interaction(self, interaction: Interaction) -> "RequestBuilder":
        self._body.add(interaction)
        return self

    def with_tool_call(
        self, name: str | None, arguments: dict[str, Any] | None = None, call_id: str | None = None
    ) -> "RequestBuilder":
        self._body.add_tool_call(name, arguments, call_id)
        return self

    def build(self) -> AIRequest:
        return AIRequest(
            provider=self._provider,
            model=self._model,
            endpoint=self._endpoint,
            capability=self._capability,
            body=self._body.build(),
            timeout_seconds=self._timeout,
        )


class ResponseBuilder:
    """
    Builder for creating AIReturn entities in tests.

    Example:
        response = (ResponseBuilder()
            .for_request(request)
            .with_assistant('{"answer": 42}')
            .with_finish_reason("max_tokens")
            .build())
    """

    def __init__(self) -> None:
        self._body = BodyBuilder.create()
        self._request: AIRequest | None = None
        self._finish_reason: str | None = "stop"

    def for_request(self, request: AIRequest) -> "ResponseBuilder":
        self._request = request
        return self

    def with_assistant(self, text: str) -> "ResponseBuilder":
        self._body.add_assistant(text)
        return self

    def with_interaction(self, interaction: Interaction) -> "ResponseBuilder":
        self._body.add(interaction)
        return self

    def with_finish_reason(self, finish_reason: str | None) -> "ResponseBuilder":
        self._finish_reason = finish_reason
        return self

    def build(self) -> AIReturn:
        return AIReturn(
            body=self._body.build(),
            request=self._request,
            finish_reason=self._finish_reason,
        )


class ToolCallBuilder:
    """
    Builder for creating tool-call interactions and ToolCallRequests.

    Example:
        call = (ToolCallBuilder()
            .with_name("get_weather")
            .with_arguments({"city": "NYC"})
            .build())
    """

    def __init__(self) -> None:
        self._name: str | None = "test_tool"
        self._id: str | None = "call-1"
        self._arguments: dict[str, Any] | None = {}

    def with_name(self, name: str | None) -> "ToolCallBuilder":
        self._name = name
        return self

    def with_id(self, call_id: str | None) -> "ToolCallBuilder":
        self._id = call_id
        return self

    def with_arguments(self, arguments: dict[str, Any] | None) -> "ToolCallBuilder":
        self._arguments = arguments
        return self

    def without_arguments(self) -> "ToolCallBuilder":
        self._arguments = None
        return self

    def build(self) -> Interaction:
        return Interaction.tool_call(self._name, self._arguments, self._id)

    def build_request(
        self, provider: str = "", model: str = "", timeout_seconds: int | None = None
    ) -> ToolCallRequest:
        return ToolCallRequest.from_interaction(
            self.build(), provider=provider, model=model, timeout_seconds=timeout_seconds
        )
