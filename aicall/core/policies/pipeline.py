"""
Policy Pipeline - Ordered request and response policies around a provider call.

    caller -> [request policies] -> provider -> [response policies] -> caller

Each policy gets the same PolicyContext for one pass and replaces Body
values instead of editing them. A policy that raises never stops the pass:
the failure is logged and turned into a diagnostic, and the next policy
runs.

HOW TO USE:
===========

    pipeline = create_default_pipeline(
        tool_registry=tools,
        context_provider=context_manager,
        schema_service=JsonSchemaService(),
    )

    await pipeline.apply_request_policies(request)
    if request.has_errors:
        ...  # outer gate decides whether to dispatch

    response = await provider.send(request)
    await pipeline.apply_response_policies(response)

Policies are objects with an ``apply(context)`` method or plain callables
taking the context. Either may be async.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from ..application.ports import ContextProviderRegistry, ModelCapabilityRegistry, ToolRegistry
from ..application.services import JsonSchemaService
from ..domain.entities import AIRequest, AIReturn, ToolCallRequest
from ..domain.value_objects import BodyBuilder, Capability, MessageOrigin, MessageSeverity
from ..infrastructure.config import PipelineConfig
from ..infrastructure.logging import LoggerAdapter
from .context import PolicyContext
from .request import (
    ContextInjectionRequestPolicy,
    RequestTimeoutPolicy,
    SchemaAttachRequestPolicy,
    SchemaValidateRequestPolicy,
    ToolFilterNormalizationRequestPolicy,
    ToolValidationRequestPolicy,
)
from .response import FinishReasonNormalizeResponsePolicy, StructuredOutputValidateResponsePolicy

logger = logging.getLogger(__name__)

Policy = Any


def policy_name(policy: Policy) -> str:
    """Name used for a policy in logs and diagnostics."""
    if hasattr(policy, "apply"):
        return type(policy).__name__
    return getattr(policy, "__name__", type(policy).__name__)


async def _run_policy(policy: Policy, context: PolicyContext) -> None:
    step: Callable = policy.apply if hasattr(policy, "apply") else policy
    result = step(context)
    if asyncio.iscoroutine(result):
        await result


class PolicyPipeline:
    """
    Runs request policies before dispatch and response policies after.

    There is no global instance. Build one with ``create_default_pipeline``
    or compose your own and pass it to whoever makes provider calls.

    Example:
        pipeline = PolicyPipeline(
            request_policies=[RequestTimeoutPolicy(), ToolFilterNormalizationRequestPolicy()],
            response_policies=[FinishReasonNormalizeResponsePolicy()],
        )
        context = await pipeline.apply_request_policies(request)
    """

    def __init__(
        self,
        request_policies: list[Policy] | None = None,
        response_policies: list[Policy] | None = None,
    ) -> None:
        self.request_policies: list[Policy] = list(request_policies or [])
        self.response_policies: list[Policy] = list(response_policies or [])

        logger.debug(
            f"Created policy pipeline with {len(self.request_policies)} request "
            f"and {len(self.response_policies)} response policies"
        )

    async def apply_request_policies(self, request: AIRequest | None) -> PolicyContext | None:
        """
        Run every request policy in order.

        A failing policy leaves an ERROR-kind interaction on the request body
        and the remaining policies still run.

        Returns:
            The context shared by this pass, or None when ``request`` is None
        """
        if request is None:
            return None

        context = PolicyContext(request=request)
        call_logger = LoggerAdapter(logger, {"provider": context.provider, "model": context.model})

        for policy in self.request_policies:
            name = policy_name(policy)
            call_logger.debug(f"Running request policy: {name}")
            try:
                await _run_policy(policy, context)
            except Exception as e:
                call_logger.exception(f"Request policy {name} raised an unexpected error")
                request.body = (
                    BodyBuilder.from_body(request.body)
                    .add_error(f"Request policy {name} failed: {e}")
                    .build()
                )

        call_logger.debug("Completed request policies")
        return context

    async def apply_response_policies(self, response: AIReturn | None) -> PolicyContext | None:
        """
        Run every response policy in order.

        A failing policy adds a WARNING runtime message (origin RETURN) to
        the response and the remaining policies still run.
        """
        if response is None:
            return None

        context = PolicyContext(request=response.request, response=response)
        call_logger = LoggerAdapter(logger, {"provider": context.provider, "model": context.model})

        for policy in self.response_policies:
            name = policy_name(policy)
            call_logger.debug(f"Running response policy: {name}")
            try:
                await _run_policy(policy, context)
            except Exception as e:
                call_logger.exception(f"Response policy {name} raised an unexpected error")
                response.add_runtime_message(
                    MessageSeverity.WARNING,
                    MessageOrigin.RETURN,
                    f"Response policy {name} failed: {e}",
                )

        call_logger.debug("Completed response policies")
        return context

    async def apply_tool_call_policies(self, tool_call: ToolCallRequest | None) -> PolicyContext | None:
        """
        Normalize and validate a standalone tool call.

        Only the timeout and tool validation policies apply to tool calls.
        The pipeline's own instances are used when it has them; a timeout
        policy with default bounds is used otherwise. Without a tool
        validation policy the call is only timeout-normalized.

        The results (timeout, body, messages) are copied back onto
        ``tool_call``.
        """
        if tool_call is None:
            return None

        shim = AIRequest(
            provider=tool_call.provider,
            model=tool_call.model,
            capability=Capability.TOOL_CHAT,
            body=tool_call.body,
            timeout_seconds=tool_call.timeout_seconds,
            messages=list(tool_call.messages),
        )

        timeout_policy = self._find(RequestTimeoutPolicy) or RequestTimeoutPolicy()
        policies = [timeout_policy]
        validation_policy = self._find(ToolValidationRequestPolicy)
        if validation_policy is not None:
            policies.append(validation_policy)

        context = await PolicyPipeline(request_policies=policies).apply_request_policies(shim)

        tool_call.timeout_seconds = shim.timeout_seconds
        tool_call.body = shim.body
        tool_call.messages = shim.messages
        return context

    def _find(self, policy_type: type) -> Policy | None:
        for policy in self.request_policies:
            if isinstance(policy, policy_type):
                return policy
        return None


def create_default_pipeline(
    tool_registry: ToolRegistry | None = None,
    context_provider: ContextProviderRegistry | None = None,
    model_registry: ModelCapabilityRegistry | None = None,
    schema_service: JsonSchemaService | None = None,
    config: PipelineConfig | None = None,
) -> PolicyPipeline:
    """
    Build the pipeline with the standard policy order.

    Request side:
        timeout -> tool filter -> tool validation -> context injection
        -> schema attach -> schema validate

    Response side:
        finish reason -> structured output

    Policies whose collaborator is not given are left out: no tool
    validation without ``tool_registry`` and no context injection without
    ``context_provider``. A new JsonSchemaService is created when none is
    passed; pass your own to share it with other pipelines.
    """
    config = config or PipelineConfig()
    schema_service = schema_service or JsonSchemaService()

    request_policies: list[Policy] = [
        RequestTimeoutPolicy(
            default_seconds=config.default_timeout_seconds,
            min_seconds=config.min_timeout_seconds,
            max_seconds=config.max_timeout_seconds,
        ),
        ToolFilterNormalizationRequestPolicy(),
    ]
    if tool_registry is not None:
        request_policies.append(ToolValidationRequestPolicy(tool_registry, model_registry))
    if context_provider is not None:
        request_policies.append(ContextInjectionRequestPolicy(context_provider))
    request_policies += [
        SchemaAttachRequestPolicy(),
        SchemaValidateRequestPolicy(schema_service),
    ]

    response_policies: list[Policy] = [
        FinishReasonNormalizeResponsePolicy(),
        StructuredOutputValidateResponsePolicy(schema_service),
    ]

    return PolicyPipeline(request_policies=request_policies, response_policies=response_policies)
