"""Clamp the per-call timeout into the allowed range."""

import logging

from ...domain.value_objects import BodyBuilder
from ..context import PolicyContext

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 120
MIN_TIMEOUT_SECONDS = 1
MAX_TIMEOUT_SECONDS = 600


def normalize_timeout(
    value: int | None,
    default: int = DEFAULT_TIMEOUT_SECONDS,
    minimum: int = MIN_TIMEOUT_SECONDS,
    maximum: int = MAX_TIMEOUT_SECONDS,
) -> tuple[int, str | None]:
    """
    Clamp a timeout and describe what changed.

    ``None`` and 0 mean "unset" and get the default. Bounds are inclusive.

    Returns:
        ``(seconds, note)`` where ``note`` is None when the value was kept

    Example:
        normalize_timeout(0)     # -> (120, "Timeout applied: 120s (default)")
        normalize_timeout(-5)    # -> (1, "Timeout increased from -5s to 1s (minimum)")
        normalize_timeout(9999)  # -> (600, "Timeout reduced from 9999s to 600s (maximum)")
        normalize_timeout(45)    # -> (45, None)
    """
    if not value:
        return default, f"Timeout applied: {default}s (default)"
    if value < minimum:
        return minimum, f"Timeout increased from {value}s to {minimum}s (minimum)"
    if value > maximum:
        return maximum, f"Timeout reduced from {value}s to {maximum}s (maximum)"
    return value, None


class RequestTimeoutPolicy:
    """
    Ensures every request carries a usable timeout.

    Adjustments are reported as ERROR-kind interactions so the UI can show
    them; providers skip diagnostic interactions.
    """

    def __init__(
        self,
        default_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        min_seconds: int = MIN_TIMEOUT_SECONDS,
        max_seconds: int = MAX_TIMEOUT_SECONDS,
    ) -> None:
        if min_seconds > max_seconds:
            raise ValueError(f"min_seconds ({min_seconds}) exceeds max_seconds ({max_seconds})")
        self.default_seconds = default_seconds
        self.min_seconds = min_seconds
        self.max_seconds = max_seconds

    def apply(self, context: PolicyContext) -> None:
        request = context.request
        if request is None:
            return

        seconds, note = normalize_timeout(
            request.timeout_seconds, self.default_seconds, self.min_seconds, self.max_seconds
        )
        request.timeout_seconds = seconds

        if note:
            logger.debug(note)
            request.body = BodyBuilder.from_body(request.body).add_error(note).build()
