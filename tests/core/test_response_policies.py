"""Tests for response policies (aicall.core.policies.response)."""

import json

import pytest

from aicall.core.domain.value_objects import AgentRole, Capability, MessageOrigin, MessageSeverity
from aicall.core.policies import PolicyContext
from aicall.core.policies.request import SchemaValidateRequestPolicy
from aicall.core.policies.response import (
    FinishReasonNormalizeResponsePolicy,
    StructuredOutputValidateResponsePolicy,
    normalize_finish_reason,
)
from aicall.core.testing import RequestBuilder, ResponseBuilder

# =============================================================================
# Finish Reason Tests
# =============================================================================


class TestNormalizeFinishReason:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("stop", "stop"),
            ("end", "stop"),
            ("Stop Sequence", "stop"),
            ("MAX_TOKENS", "length"),
            ("max-tokens", "length"),
            ("deadline_exceeded", "timeout"),
            ("canceled", "cancelled"),
            ("aborted", "cancelled"),
            ("function_call", "tool_calls"),
            ("safety", "content_filter"),
            ("failed", "error"),
        ],
    )
    def test_known_values(self, raw, expected):
        assert normalize_finish_reason(raw) == (expected, True)

    def test_unknown_value_is_kept(self):
        assert normalize_finish_reason(" end_turn ") == ("end_turn", False)

    def test_blank_value(self):
        assert normalize_finish_reason("  ") == (None, False)
        assert normalize_finish_reason(None) == (None, False)


class TestFinishReasonNormalizeResponsePolicy:
    def _apply(self, finish_reason):
        response = ResponseBuilder().with_finish_reason(finish_reason).build()
        FinishReasonNormalizeResponsePolicy().apply(PolicyContext(response=response))
        return response

    def test_missing_defaults_to_stop(self):
        response = self._apply(None)
        assert response.finish_reason == "stop"
        assert len(response.messages) == 1
        assert response.messages[0].severity == MessageSeverity.WARNING
        assert response.messages[0].origin == MessageOrigin.RETURN
        assert response.messages[0].message == "Finish reason missing; defaulted to 'stop'."

    def test_unknown_is_kept_with_warning(self):
        response = self._apply("end_turn")
        assert response.finish_reason == "end_turn"
        assert response.messages[0].message == "Unrecognized finish reason 'end_turn'. Keeping original value."

    def test_transformed_is_reported_as_info(self):
        response = self._apply("max_tokens")
        assert response.finish_reason == "length"
        assert response.messages[0].severity == MessageSeverity.INFO
        assert response.messages[0].message == "Normalized finish reason 'max_tokens' -> 'length'."

    def test_canonical_value_adds_nothing(self):
        response = self._apply("stop")
        assert response.finish_reason == "stop"
        assert response.messages == []


# =============================================================================
# Structured Output Tests
# =============================================================================


class TestStructuredOutputValidateResponsePolicy:
    OBJECT_SCHEMA = '{"type": "object", "properties": {"answer": {"type": "integer"}}, "required": ["answer"]}'
    ARRAY_SCHEMA = '{"type": "array", "items": {"type": "string"}}'

    def test_plain_request_is_skipped(self, schema_service):
        request = RequestBuilder().build()
        response = ResponseBuilder().for_request(request).with_assistant("hi").build()
        StructuredOutputValidateResponsePolicy(schema_service).apply(PolicyContext(request=request, response=response))
        assert response.messages == []

    def test_schema_without_json_capability_is_skipped(self, schema_service):
        request = RequestBuilder().with_json_schema(self.OBJECT_SCHEMA).with_capability(Capability.TEXT2TEXT).build()
        response = ResponseBuilder().for_request(request).with_assistant("not json").build()
        StructuredOutputValidateResponsePolicy(schema_service).apply(PolicyContext(request=request, response=response))
        assert response.messages == []
        assert response.body.interactions[-1].content == "not json"

    def test_matching_output_has_no_messages(self, schema_service):
        request = RequestBuilder().with_json_schema(self.OBJECT_SCHEMA).build()
        response = ResponseBuilder().for_request(request).with_assistant('{"answer": 42}').build()
        StructuredOutputValidateResponsePolicy(schema_service).apply(PolicyContext(request=request, response=response))
        assert response.messages == []

    def test_mismatch_is_an_error(self, schema_service):
        request = RequestBuilder().with_json_schema(self.OBJECT_SCHEMA).build()
        response = ResponseBuilder().for_request(request).with_assistant('{"other": 1}').build()
        context = PolicyContext(request=request, response=response)
        StructuredOutputValidateResponsePolicy(schema_service).apply(context)

        assert response.has_errors
        assert response.messages[0].message == (
            "Response JSON does not match schema: $: 'answer' is a required property"
        )
        assert context.diagnostics == response.messages

    def test_missing_content_is_an_error(self, schema_service):
        request = RequestBuilder().with_json_schema(self.OBJECT_SCHEMA).build()
        response = ResponseBuilder().for_request(request).build()
        StructuredOutputValidateResponsePolicy(schema_service).apply(PolicyContext(request=request, response=response))
        assert response.messages[0].message == (
            "Expected JSON structured output from assistant, but content is missing"
        )

    def test_wrapped_output_is_unwrapped(self, schema_service):
        request = RequestBuilder().with_provider("openai").with_json_schema(self.ARRAY_SCHEMA).build()
        SchemaValidateRequestPolicy(schema_service).apply(PolicyContext(request=request))

        response = (
            ResponseBuilder()
            .for_request(request)
            .with_assistant("thinking out loud")
            .with_assistant('{"items": ["a", "b"]}')
            .build()
        )
        StructuredOutputValidateResponsePolicy(schema_service).apply(PolicyContext(request=request, response=response))

        assert response.messages == []
        last = response.body.last_interaction(AgentRole.ASSISTANT)
        assert json.loads(last.content) == ["a", "b"]
        assert response.body.interactions[0].content == "thinking out loud"
        assert response.body.interactions_count == 2

    def test_uses_response_request_when_context_has_none(self, schema_service):
        request = RequestBuilder().with_json_schema(self.OBJECT_SCHEMA).build()
        response = ResponseBuilder().for_request(request).with_assistant("{}").build()
        StructuredOutputValidateResponsePolicy(schema_service).apply(PolicyContext(response=response))
        assert response.has_errors
