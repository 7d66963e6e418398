"""Immutable request/response body and its builder."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..exceptions import InvalidBodyError
from .interaction import AgentRole, Interaction, InteractionKind
from .tool_filter import EXCLUDE_ALL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Body:
    """
    Immutable container of interactions plus tool/context/schema configuration.

    A Body never changes after construction. Every change is expressed as
    "build a new Body from the old one", usually through ``BodyBuilder``:

        new_body = (BodyBuilder.from_body(old_body)
            .with_tool_filter("*")
            .add_error("Tool filter normalized")
            .build())

    Invariant: a Body holds at most one CONTEXT interaction.

    Attributes:
        interactions: Ordered interactions
        tool_filter: Which tools are enabled (see ``ToolFilter``)
        context_filter: Which context providers contribute background info
        json_output_schema: Optional schema text constraining structured output
    """

    interactions: tuple[Interaction, ...] = ()
    tool_filter: str = EXCLUDE_ALL
    context_filter: str = EXCLUDE_ALL
    json_output_schema: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.interactions, tuple):
            object.__setattr__(self, "interactions", tuple(self.interactions))

        context_count = sum(1 for i in self.interactions if i.kind == InteractionKind.CONTEXT)
        if context_count > 1:
            raise InvalidBodyError(
                f"A body can hold at most one context interaction, got {context_count}",
                context_count=context_count,
            )

    @classmethod
    def empty(cls) -> "Body":
        return cls()

    @property
    def interactions_count(self) -> int:
        return len(self.interactions)

    @property
    def requires_json_output(self) -> bool:
        return bool(self.json_output_schema)

    @property
    def context_interaction(self) -> Interaction | None:
        """Get the single CONTEXT interaction, if any."""
        for interaction in self.interactions:
            if interaction.kind == InteractionKind.CONTEXT:
                return interaction
        return None

    def pending_tool_calls(self) -> list[Interaction]:
        """Get all tool calls that have not been resolved yet."""
        return [i for i in self.interactions if i.is_pending_tool_call]

    def pending_tool_calls_count(self) -> int:
        return len(self.pending_tool_calls())

    def last_interaction(self, agent: AgentRole | None = None) -> Interaction | None:
        """Get the last interaction, optionally from a specific agent."""
        for interaction in reversed(self.interactions):
            if agent is None or interaction.agent == agent:
                return interaction
        return None

    def with_appended(self, interaction: Interaction) -> "Body":
        """Return a new Body with ``interaction`` appended."""
        return BodyBuilder.from_body(self).add(interaction).build()


class BodyBuilder:
    """
    Fluent builder producing new ``Body`` values.

    ``with_*`` methods ignore ``None`` so callers can pass optional values
    straight through without clearing what the source body already had.

    Example:
        body = (BodyBuilder.create()
            .with_tool_filter("*")
            .add_system("You are a helpful assistant.")
            .add_user("What is the weather?")
            .build())
    """

    def __init__(self) -> None:
        self._interactions: list[Interaction] = []
        self._tool_filter: str = EXCLUDE_ALL
        self._context_filter: str = EXCLUDE_ALL
        self._json_output_schema: str | None = None

    @classmethod
    def create(cls) -> "BodyBuilder":
        return cls()

    @classmethod
    def from_body(cls, body: Body | None) -> "BodyBuilder":
        """Start a builder pre-loaded with everything from ``body``."""
        builder = cls()
        if body is not None:
            builder._interactions.extend(body.interactions)
            builder._tool_filter = body.tool_filter if body.tool_filter is not None else builder._tool_filter
            builder._context_filter = (
                body.context_filter if body.context_filter is not None else builder._context_filter
            )
            builder._json_output_schema = body.json_output_schema
        return builder

    # Configuration

    def with_tool_filter(self, tool_filter: str | None) -> "BodyBuilder":
        if tool_filter is not None:
            self._tool_filter = tool_filter
        return self

    def with_context_filter(self, context_filter: str | None) -> "BodyBuilder":
        if context_filter is not None:
            self._context_filter = context_filter
        return self

    def with_json_output_schema(self, schema: str | None) -> "BodyBuilder":
        if schema is not None:
            self._json_output_schema = schema
        return self

    # Interactions

    def add(self, interaction: Interaction | None) -> "BodyBuilder":
        if interaction is not None:
            self._interactions.append(interaction)
        return self

    def add_range(self, interactions: Iterable[Interaction | None] | None) -> "BodyBuilder":
        for interaction in interactions or ():
            self.add(interaction)
        return self

    def add_text(self, agent: AgentRole, content: str) -> "BodyBuilder":
        return self.add(Interaction.text(agent, content))

    def add_user(self, content: str) -> "BodyBuilder":
        return self.add(Interaction.user(content))

    def add_assistant(self, content: str) -> "BodyBuilder":
        return self.add(Interaction.assistant(content))

    def add_system(self, content: str) -> "BodyBuilder":
        return self.add(Interaction.system(content))

    def add_error(self, content: str) -> "BodyBuilder":
        return self.add(Interaction.error(content))

    def add_tool_call(
        self,
        name: str | None,
        arguments: Mapping[str, Any] | None = None,
        call_id: str | None = None,
    ) -> "BodyBuilder":
        return self.add(Interaction.tool_call(name, arguments, call_id))

    def set_context(self, interaction: Interaction) -> "BodyBuilder":
        """
        Put ``interaction`` first and drop every other CONTEXT interaction.

        The relative order of all remaining interactions is kept.
        """
        if interaction.kind != InteractionKind.CONTEXT:
            raise ValueError(f"Expected a context interaction, got {interaction.kind.value}")
        rest = [i for i in self._interactions if i.kind != InteractionKind.CONTEXT]
        self._interactions = [interaction, *rest]
        return self

    def resolve_tool_call(self, call_id: str, result: Any) -> "BodyBuilder":
        """Replace the pending tool call with ``call_id`` by its resolved copy."""
        for index, interaction in enumerate(self._interactions):
            if interaction.is_pending_tool_call and interaction.tool_call_id == call_id:
                self._interactions[index] = interaction.resolved(result)
                return self
        logger.warning(f"No pending tool call with id {call_id!r} to resolve")
        return self

    def build(self) -> Body:
        body = Body(
            interactions=tuple(self._interactions),
            tool_filter=self._tool_filter,
            context_filter=self._context_filter,
            json_output_schema=self._json_output_schema,
        )
        logger.debug(f"Built body: interactions={body.interactions_count}")
        return body
