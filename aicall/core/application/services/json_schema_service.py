"""
JSON Schema handling for structured output and tool arguments.

Providers differ in what they accept as a structured-output schema. Most
need the top level to be an object, so array and scalar schemas are wrapped
in a one-property object before dispatch and unwrapped again when the
response comes back:

    schema:   {"type": "array", "items": {"type": "string"}}
    wrapped:  {"type": "object",
               "properties": {"items": {"type": "array", ...}},
               "required": ["items"],
               "additionalProperties": false}
    reply:    {"items": ["a", "b"]}   ->  unwrapped: ["a","b"]

The wrapping decision is made once per call (request side) and kept in a
context variable so the response side of the same task can read it back.
"""

import contextvars
import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from ...domain.exceptions import SchemaParseError

logger = logging.getLogger(__name__)

DEFAULT_ADAPTER_NAME = "__default__"

_SCALAR_TYPES = ("string", "number", "integer", "boolean")


@dataclass
class SchemaWrapperInfo:
    """
    How a schema was wrapped for a provider.

    Attributes:
        is_wrapped: Whether the schema was wrapped at all
        wrapper_type: "array", a scalar type name, or "unknown"
        property_name: Property holding the real payload ("items", "value", "data")
        provider_name: Provider the wrapping was computed for
    """

    is_wrapped: bool = False
    wrapper_type: str = ""
    property_name: str = ""
    provider_name: str = ""


_current_wrapper_info: contextvars.ContextVar[SchemaWrapperInfo | None] = contextvars.ContextVar(
    "aicall_schema_wrapper_info", default=None
)


class JsonSchemaAdapter(Protocol):
    """Provider-specific wrapping of structured-output schemas."""

    provider_name: str

    def wrap(self, schema: dict[str, Any]) -> tuple[dict[str, Any], SchemaWrapperInfo]: ...

    def unwrap(self, content: str, info: SchemaWrapperInfo) -> str: ...


class DefaultJsonSchemaAdapter:
    """Wraps anything that is not an object schema under a single property."""

    provider_name = DEFAULT_ADAPTER_NAME

    def wrap(self, schema: dict[str, Any]) -> tuple[dict[str, Any], SchemaWrapperInfo]:
        if schema is None:
            raise ValueError("schema is required")

        schema_type = str(schema.get("type", "")).lower() if "type" in schema else ""

        if schema_type == "object":
            return schema, SchemaWrapperInfo(is_wrapped=False)

        if schema_type == "array":
            property_name, wrapper_type = "items", "array"
        elif schema_type in _SCALAR_TYPES:
            property_name, wrapper_type = "value", schema_type
        else:
            property_name, wrapper_type = "data", "unknown"

        wrapped = {
            "type": "object",
            "properties": {property_name: schema},
            "required": [property_name],
            "additionalProperties": False,
        }
        return wrapped, SchemaWrapperInfo(
            is_wrapped=True,
            wrapper_type=wrapper_type,
            property_name=property_name,
        )

    def unwrap(self, content: str, info: SchemaWrapperInfo) -> str:
        # Default extraction happens in JsonSchemaService.unwrap
        return content


class JsonSchemaAdapterRegistry:
    """
    Case-insensitive lookup of schema adapters by provider name.

    Unknown or blank provider names resolve to the default adapter.
    """

    def __init__(self, default: JsonSchemaAdapter | None = None) -> None:
        self._adapters: dict[str, JsonSchemaAdapter] = {}
        self.default = default or DefaultJsonSchemaAdapter()

    def register(self, adapter: JsonSchemaAdapter) -> None:
        if adapter is None:
            raise ValueError("adapter is required")
        name = getattr(adapter, "provider_name", "")
        if not name or not name.strip():
            raise ValueError("Adapter provider_name cannot be empty")
        self._adapters[name.lower()] = adapter
        logger.debug(f"Registered JSON schema adapter for provider: {name}")

    def get(self, provider_name: str | None) -> JsonSchemaAdapter:
        if not provider_name or not provider_name.strip():
            return self.default
        return self._adapters.get(provider_name.lower(), self.default)


def minify_json(text: str | None) -> str | None:
    """
    Re-render JSON text without insignificant whitespace.

    Key order is preserved. Returns None when the text does not parse.

    Example:
        minify_json('{"type": "object", "properties": {}}')
        # -> '{"type":"object","properties":{}}'
    """
    if text is None or not text.strip():
        return None
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError):
        return None
    return json.dumps(parsed, separators=(",", ":"), ensure_ascii=False)


def schema_violations(schema: dict[str, Any], instance: Any) -> list[str]:
    """
    Validate ``instance`` against a Draft 7 ``schema``.

    Returns:
        One readable message per violation, ordered by location.
        Empty when the instance is valid.

    Raises:
        SchemaError: If ``schema`` itself is not a valid Draft 7 schema
    """
    Draft7Validator.check_schema(schema)
    validator = Draft7Validator(schema)
    violations = []
    for error in sorted(validator.iter_errors(instance), key=lambda e: list(map(str, e.path))):
        location = "$" + "".join(f"[{p}]" if isinstance(p, int) else f".{p}" for p in error.path)
        violations.append(f"{location}: {error.message}")
    return violations


class JsonSchemaService:
    """
    Parse, wrap, unwrap and validate JSON schemas.

    One service is shared by the request policies that compute the wrapping
    and the response policies that undo it.

    Example:
        service = JsonSchemaService()
        schema = service.parse_schema('{"type": "array", "items": {"type": "string"}}')
        wrapped, info = service.wrap_for_provider(schema, "openai")
        service.set_current_wrapper_info(info)

        # ... later, on the response side of the same task
        payload = service.unwrap('{"items": ["a"]}', service.get_current_wrapper_info())
        # -> '["a"]'
    """

    def __init__(self, adapters: JsonSchemaAdapterRegistry | None = None) -> None:
        self.adapters = adapters or JsonSchemaAdapterRegistry()

    def parse_schema(self, schema_text: str | None) -> dict[str, Any]:
        """
        Parse schema text into a dict.

        Raises:
            SchemaParseError: If the text is empty, not JSON, or not an object
        """
        if schema_text is None or not schema_text.strip():
            raise SchemaParseError("Schema is empty", schema_text=schema_text)
        try:
            schema = json.loads(schema_text)
        except ValueError as e:
            raise SchemaParseError(f"Invalid JSON schema: {e}", schema_text=schema_text) from e
        if not isinstance(schema, dict):
            raise SchemaParseError(
                f"Invalid JSON schema: expected an object, got {type(schema).__name__}",
                schema_text=schema_text,
            )
        return schema

    def try_parse_schema(self, schema_text: str | None) -> tuple[dict[str, Any] | None, str]:
        """Parse schema text, returning ``(schema, "")`` or ``(None, error)``."""
        try:
            return self.parse_schema(schema_text), ""
        except SchemaParseError as e:
            return None, e.message

    def wrap_for_provider(
        self, schema: dict[str, Any], provider: str | None
    ) -> tuple[dict[str, Any], SchemaWrapperInfo]:
        """Wrap ``schema`` the way ``provider`` expects structured output."""
        if schema is None:
            raise ValueError("schema is required")
        adapter = self.adapters.get(provider)
        wrapped, info = adapter.wrap(schema)
        if not info.provider_name:
            info.provider_name = provider or ""
        return wrapped, info

    def unwrap(self, content: str | None, info: SchemaWrapperInfo | None) -> str | None:
        """
        Extract the real payload from a wrapped structured-output reply.

        Returns the content unchanged when nothing was wrapped or when the
        content does not have the expected shape.
        """
        if info is None or not info.is_wrapped or content is None or not content.strip():
            return content

        adapter = self.adapters.get(info.provider_name)
        pre_processed = adapter.unwrap(content, info) or content
        try:
            parsed = json.loads(pre_processed)
        except ValueError:
            logger.debug("Wrapped content is not valid JSON; returning it unchanged")
            return content

        if not isinstance(parsed, dict) or info.property_name not in parsed:
            return pre_processed

        value = parsed[info.property_name]
        if isinstance(value, (dict, list)):
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        if isinstance(value, str):
            return value
        return json.dumps(value)

    def validate(self, schema_text: str, json_text: str) -> tuple[bool, str]:
        """
        Validate JSON text against schema text.

        Returns:
            ``(True, "")`` when valid, otherwise ``(False, error)``
        """
        try:
            schema = self.parse_schema(schema_text)
        except SchemaParseError as e:
            return False, e.message

        try:
            instance = json.loads(json_text)
        except (TypeError, ValueError) as e:
            return False, f"Invalid instance JSON: {e}"

        try:
            violations = schema_violations(schema, instance)
        except SchemaError as e:
            return False, f"Invalid JSON schema: {e.message}"

        if violations:
            return False, "; ".join(violations)
        return True, ""

    def set_current_wrapper_info(self, info: SchemaWrapperInfo | None) -> None:
        _current_wrapper_info.set(info)

    def get_current_wrapper_info(self) -> SchemaWrapperInfo | None:
        return _current_wrapper_info.get()
