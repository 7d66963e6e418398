"""Context providers: sources of background facts for a conversation."""

from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ContextProvider(Protocol):
    """
    A single source of context entries.

    ``get_context`` may be a regular method or a coroutine. Keys without an
    underscore are prefixed with ``<provider_id>_`` by the ContextManager.
    """

    provider_id: str

    def get_context(self) -> Mapping[str, str] | Awaitable[Mapping[str, str]]: ...


class StaticContextProvider:
    """
    Serves a fixed set of entries.

    Example:
        StaticContextProvider("environment", {"tenant": "prod", "region": "us-east-1"})
        # contributes environment_tenant and environment_region
    """

    def __init__(self, provider_id: str, values: Mapping[str, str] | None = None) -> None:
        if not provider_id or not provider_id.strip():
            raise ValueError("provider_id cannot be empty")
        self.provider_id = provider_id
        self._values = dict(values or {})

    def get_context(self) -> dict[str, str]:
        return dict(self._values)


class TimeContextProvider:
    """Current local date/time and timezone."""

    provider_id = "time"

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now().astimezone())

    def get_context(self) -> dict[str, str]:
        now = self._clock()
        return {
            "current-datetime": now.strftime("%Y-%m-%d %H:%M:%S"),
            "current-timezone": now.tzname() or "UTC",
        }
