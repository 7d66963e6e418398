"""
AICall Core - Policy pipeline around LLM provider calls.

This module turns a raw request into a provider-ready one, and a raw
provider reply into a checked one, through ordered policies that never
abort the call.

Quick Start:
    from aicall.core import (
        BodyBuilder,
        AIRequest,
        InMemoryToolRegistry,
        PipelineConfig,
        ToolDefinition,
        configure_logging,
        create_default_pipeline,
    )

    config = PipelineConfig.from_env()
    configure_logging(config)

    tools = InMemoryToolRegistry([ToolDefinition(name="get_weather", parameters_schema=WeatherInput)])
    pipeline = create_default_pipeline(tool_registry=tools, config=config)

    request = AIRequest(
        provider="openai",
        model="gpt-4o",
        body=BodyBuilder.create().with_tool_filter("*").add_user("Weather in NYC?").build(),
    )
    await pipeline.apply_request_policies(request)

    if request.has_errors:
        ...  # decide whether to dispatch

For advanced usage, see the domain, application, validation and adapters
submodules.
"""

# Domain
from .domain import (
    AgentRole,
    AIRequest,
    AIReturn,
    Body,
    BodyBuilder,
    Capability,
    DomainException,
    Interaction,
    InteractionKind,
    InvalidBodyError,
    MessageCode,
    MessageOrigin,
    MessageSeverity,
    RuntimeMessage,
    SchemaParseError,
    ToolCallRequest,
    ToolFilter,
    ToolNotFound,
    normalize_tool_filter,
)

# Ports and services
from .application import (
    ContextProviderRegistry,
    ModelCapabilities,
    ModelCapabilityRegistry,
    ToolRegistry,
    JsonSchemaService,
    SchemaWrapperInfo,
)

# Policies
from .policies import (
    PolicyContext,
    PolicyPipeline,
    create_default_pipeline,
    normalize_timeout,
)

# In-memory adapters
from .adapters.outbound import (
    ContextManager,
    InMemoryModelRegistry,
    InMemoryToolRegistry,
    StaticContextProvider,
    TimeContextProvider,
    ToolDefinition,
)

# Infrastructure
from .infrastructure import PipelineConfig, configure_logging, get_logger, setup_logging

__all__ = [
    # Domain
    "AgentRole",
    "AIRequest",
    "AIReturn",
    "Body",
    "BodyBuilder",
    "Capability",
    "Interaction",
    "InteractionKind",
    "MessageCode",
    "MessageOrigin",
    "MessageSeverity",
    "RuntimeMessage",
    "ToolCallRequest",
    "ToolFilter",
    "normalize_tool_filter",
    # Exceptions
    "DomainException",
    "InvalidBodyError",
    "SchemaParseError",
    "ToolNotFound",
    # Ports and services
    "ContextProviderRegistry",
    "ModelCapabilities",
    "ModelCapabilityRegistry",
    "ToolRegistry",
    "JsonSchemaService",
    "SchemaWrapperInfo",
    # Policies
    "PolicyContext",
    "PolicyPipeline",
    "create_default_pipeline",
    "normalize_timeout",
    # Adapters
    "ContextManager",
    "InMemoryModelRegistry",
    "InMemoryToolRegistry",
    "StaticContextProvider",
    "TimeContextProvider",
    "ToolDefinition",
    # Infrastructure
    "PipelineConfig",
    "get_logger",
    "configure_logging",
    "setup_logging",
]
