"""pytest fixtures for policy pipeline tests."""

import pytest

from ..adapters.outbound import InMemoryModelRegistry, InMemoryToolRegistry, ToolDefinition
from ..application.ports import ModelCapabilities
from ..application.services import JsonSchemaService
from ..domain.value_objects import Capability
from ..policies import PolicyPipeline, create_default_pipeline
from .fakes import FakeContextProvider

WEATHER_SCHEMA = {
    "type": "object",
    "properties": {
        "city": {"type": "string"},
        "days": {"type": "integer", "minimum": 1},
    },
    "required": ["city"],
}

# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def tool_registry() -> InMemoryToolRegistry:
    """Provide a registry with a weather tool and an image tool."""
    return InMemoryToolRegistry(
        [
            ToolDefinition(name="get_weather", parameters_schema=WEATHER_SCHEMA),
            ToolDefinition(name="render_image", required_capabilities=Capability.IMAGE_OUTPUT),
        ]
    )


@pytest.fixture
def model_registry() -> InMemoryModelRegistry:
    """Provide a registry with one text model and one deprecated image model."""
    return InMemoryModelRegistry(
        [
            ModelCapabilities("openai", "gpt-4o", Capability.TOOL_CHAT | Capability.JSON_OUTPUT),
            ModelCapabilities(
                "openai",
                "dall-e-2",
                Capability.TEXT2IMAGE,
                deprecated=True,
                replacement_model="dall-e-3",
            ),
        ]
    )


@pytest.fixture
def fake_context() -> FakeContextProvider:
    """Provide a context provider with two entries."""
    return FakeContextProvider({"time_now": "2025-01-01 10:00:00", "environment_tenant": "prod"})


@pytest.fixture
def schema_service() -> JsonSchemaService:
    """Provide a fresh JSON schema service."""
    return JsonSchemaService()


# ============================================================================
# Pipeline Fixtures
# ============================================================================


@pytest.fixture
def pipeline(
    tool_registry: InMemoryToolRegistry,
    fake_context: FakeContextProvider,
    model_registry: InMemoryModelRegistry,
    schema_service: JsonSchemaService,
) -> PolicyPipeline:
    """Provide the default pipeline wired to in-memory collaborators."""
    return create_default_pipeline(
        tool_registry=tool_registry,
        context_provider=fake_context,
        model_registry=model_registry,
        schema_service=schema_service,
    )
