"""Tests for interactions, bodies and runtime messages (aicall.core.domain.value_objects)."""

import dataclasses

import pytest

from aicall.core.domain.exceptions import InvalidBodyError
from aicall.core.domain.value_objects import (
    AgentRole,
    Body,
    BodyBuilder,
    Capability,
    Interaction,
    InteractionKind,
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
    describe_capability,
    has_at_or_above,
    has_capabilities,
)

# =============================================================================
# Interaction Tests
# =============================================================================


class TestInteraction:
    def test_text_factories_set_kind_and_agent(self):
        assert Interaction.user("hi").agent == AgentRole.USER
        assert Interaction.assistant("hi").agent == AgentRole.ASSISTANT
        assert Interaction.user("hi").kind == InteractionKind.TEXT
        assert Interaction.system("rules").kind == InteractionKind.SYSTEM
        assert Interaction.context("facts").kind == InteractionKind.CONTEXT

    def test_error_is_diagnostic(self):
        error = Interaction.error("Timeout applied")
        assert error.kind == InteractionKind.ERROR
        assert error.is_diagnostic
        assert not Interaction.user("hi").is_diagnostic

    def test_tool_call_is_pending_until_resolved(self):
        call = Interaction.tool_call("get_weather", {"city": "NYC"}, call_id="c1")
        assert call.is_tool_call
        assert call.is_pending_tool_call

        done = call.resolved({"temp": 72})
        assert not done.is_pending_tool_call
        assert done.result == {"temp": 72}
        assert call.is_pending_tool_call

    def test_resolving_non_tool_call_raises(self):
        with pytest.raises(ValueError):
            Interaction.user("hi").resolved("x")

    def test_arguments_are_read_only(self):
        call = Interaction.tool_call("get_weather", {"city": "NYC"})
        with pytest.raises(TypeError):
            call.arguments["city"] = "LA"

    def test_arguments_are_copied_from_source(self):
        source = {"city": "NYC", "tags": ["a"]}
        call = Interaction.tool_call("get_weather", source)
        source["city"] = "LA"
        source["tags"].append("b")
        assert call.arguments["city"] == "NYC"
        assert call.arguments_dict() == {"city": "NYC", "tags": ["a"]}

    def test_arguments_dict_is_none_without_arguments(self):
        assert Interaction.tool_call("ping").arguments_dict() is None

    def test_interaction_is_frozen(self):
        interaction = Interaction.user("hi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            interaction.content = "changed"


# =============================================================================
# Body Tests
# =============================================================================


class TestBody:
    def test_empty_body_defaults(self):
        body = Body.empty()
        assert body.interactions == ()
        assert body.tool_filter == "-*"
        assert body.context_filter == "-*"
        assert body.json_output_schema is None
        assert not body.requires_json_output

    def test_interactions_are_stored_as_tuple(self):
        body = Body(interactions=[Interaction.user("hi")])
        assert isinstance(body.interactions, tuple)
        assert body.interactions_count == 1

    def test_more_than_one_context_is_rejected(self):
        with pytest.raises(InvalidBodyError) as exc_info:
            Body(interactions=(Interaction.context("a"), Interaction.context("b")))
        assert exc_info.value.context_count == 2

    def test_body_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Body.empty().tool_filter = "*"

    def test_requires_json_output_when_schema_set(self):
        body = BodyBuilder.create().with_json_output_schema('{"type":"object"}').build()
        assert body.requires_json_output

    def test_pending_tool_calls_skip_resolved(self):
        body = (
            BodyBuilder.create()
            .add_tool_call("a", {}, "1")
            .add(Interaction.tool_call("b", {}, "2").resolved("ok"))
            .add_user("hi")
            .build()
        )
        pending = body.pending_tool_calls()
        assert [c.tool_name for c in pending] == ["a"]
        assert body.pending_tool_calls_count() == 1

    def test_last_interaction_by_agent(self):
        body = BodyBuilder.create().add_user("first").add_assistant("reply").add_user("second").build()
        assert body.last_interaction().content == "second"
        assert body.last_interaction(AgentRole.ASSISTANT).content == "reply"
        assert body.last_interaction(AgentRole.SYSTEM) is None

    def test_with_appended_returns_new_body(self):
        body = Body.empty()
        appended = body.with_appended(Interaction.user("hi"))
        assert body.interactions_count == 0
        assert appended.interactions_count == 1


# =============================================================================
# BodyBuilder Tests
# =============================================================================


class TestBodyBuilder:
    def test_from_body_keeps_everything(self):
        original = (
            BodyBuilder.create()
            .with_tool_filter("a,b")
            .with_context_filter("time")
            .with_json_output_schema('{"type":"array"}')
            .add_user("hi")
            .build()
        )
        copy = BodyBuilder.from_body(original).build()
        assert copy == original
        assert copy is not original

    def test_with_none_keeps_previous_value(self):
        body = BodyBuilder.create().with_tool_filter("*").with_tool_filter(None).build()
        assert body.tool_filter == "*"

    def test_add_ignores_none(self):
        body = BodyBuilder.create().add(None).add_range([None, Interaction.user("hi")]).build()
        assert body.interactions_count == 1

    def test_set_context_goes_first_and_replaces_existing(self):
        body = (
            BodyBuilder.create()
            .add_user("hi")
            .add(Interaction.context("old"))
            .add_assistant("hello")
            .set_context(Interaction.context("new"))
            .build()
        )
        assert [i.content for i in body.interactions] == ["new", "hi", "hello"]
        assert body.context_interaction.content == "new"

    def test_set_context_rejects_other_kinds(self):
        with pytest.raises(ValueError):
            BodyBuilder.create().set_context(Interaction.user("hi"))

    def test_resolve_tool_call_by_id(self):
        body = (
            BodyBuilder.create()
            .add_tool_call("a", {}, "1")
            .add_tool_call("b", {}, "2")
            .resolve_tool_call("2", {"ok": True})
            .build()
        )
        assert body.interactions[0].is_pending_tool_call
        assert body.interactions[1].result == {"ok": True}

    def test_resolve_unknown_id_leaves_body_unchanged(self):
        builder = BodyBuilder.create().add_tool_call("a", {}, "1")
        body = builder.resolve_tool_call("missing", "x").build()
        assert body.pending_tool_calls_count() == 1

    def test_source_body_is_not_modified(self):
        original = BodyBuilder.create().add_user("hi").build()
        BodyBuilder.from_body(original).add_user("more").with_tool_filter("*").build()
        assert original.interactions_count == 1
        assert original.tool_filter == "-*"


# =============================================================================
# RuntimeMessage Tests
# =============================================================================


class TestRuntimeMessage:
    def test_severity_is_ordered(self):
        assert MessageSeverity.INFO < MessageSeverity.WARNING < MessageSeverity.ERROR

    def test_with_prefix_returns_copy(self):
        message = RuntimeMessage.error("bad arguments")
        prefixed = message.with_prefix("[tool:x]")
        assert prefixed.message == "[tool:x] bad arguments"
        assert prefixed.origin == MessageOrigin.VALIDATION
        assert message.message == "bad arguments"

    def test_has_at_or_above(self):
        messages = [RuntimeMessage.info("a"), RuntimeMessage.warning("b")]
        assert has_at_or_above(messages, MessageSeverity.WARNING)
        assert not has_at_or_above(messages, MessageSeverity.ERROR)
        assert not has_at_or_above([], MessageSeverity.INFO)

    def test_str_includes_severity_and_origin(self):
        assert str(RuntimeMessage.warning("careful", MessageOrigin.RETURN)) == "[WARNING/return] careful"

    def test_factories_use_validation_origin_and_unknown_code(self):
        message = RuntimeMessage.info("note")
        assert message.origin == MessageOrigin.VALIDATION
        assert message.code == MessageCode.UNKNOWN


# =============================================================================
# Capability Tests
# =============================================================================


class TestCapability:
    def test_composite_contains_flags(self):
        assert Capability.FUNCTION_CALLING in Capability.TOOL_CHAT
        assert Capability.JSON_OUTPUT not in Capability.TOOL_CHAT

    def test_has_capabilities(self):
        assert has_capabilities(Capability.TOOL_CHAT, Capability.FUNCTION_CALLING)
        assert not has_capabilities(Capability.TEXT2TEXT, Capability.FUNCTION_CALLING)
        assert has_capabilities(Capability.NONE, Capability.NONE)

    def test_describe_capability(self):
        assert describe_capability(Capability.NONE) == "NONE"
        assert describe_capability(Capability.TOOL_CHAT) == "TEXT_INPUT, TEXT_OUTPUT, FUNCTION_CALLING"
