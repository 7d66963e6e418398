"""Domain-specific exceptions."""


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidBodyError(DomainException):
    """Raised when a Body would violate one of its invariants."""

    def __init__(self, message: str, context_count: int | None = None):
        super().__init__(message, details={"context_count": context_count})
        self.context_count = context_count


class SchemaParseError(DomainException):
    """Raised when a JSON schema text cannot be parsed."""

    def __init__(self, message: str, schema_text: str | None = None):
        super().__init__(message, details={"schema_text": schema_text})
        self.schema_text = schema_text


class ToolNotFound(DomainException):
    """Raised when a tool cannot be found by name."""

    def __init__(self, tool_name: str):
        super().__init__(f"Tool not found: {tool_name}", details={"tool_name": tool_name})
        self.tool_name = tool_name
