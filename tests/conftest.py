"""Shared pytest configuration."""

import pytest

from aicall.core.application.services import JsonSchemaService
from aicall.core.testing.fixtures import (  # noqa: F401
    fake_context,
    model_registry,
    pipeline,
    schema_service,
    tool_registry,
)


@pytest.fixture(autouse=True)
def _reset_schema_wrapper_info():
    JsonSchemaService().set_current_wrapper_info(None)
    yield
    JsonSchemaService().set_current_wrapper_info(None)
