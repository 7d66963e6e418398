"""
Application services shared by several policies.
"""

from .json_schema_service import (
    DEFAULT_ADAPTER_NAME,
    DefaultJsonSchemaAdapter,
    JsonSchemaAdapter,
    JsonSchemaAdapterRegistry,
    JsonSchemaService,
    SchemaWrapperInfo,
    minify_json,
    schema_violations,
)

__all__ = [
    "DEFAULT_ADAPTER_NAME",
    "DefaultJsonSchemaAdapter",
    "JsonSchemaAdapter",
    "JsonSchemaAdapterRegistry",
    "JsonSchemaService",
    "SchemaWrapperInfo",
    "minify_json",
    "schema_violations",
]
