"""
Entities - Objects created per call and replaced field by field.

A request or response is replaced by assignment (``request.body = new_body``),
never edited inside its Body.
"""

from .request import AIRequest, ToolCallRequest
from .response import AIReturn

__all__ = [
    "AIRequest",
    "ToolCallRequest",
    "AIReturn",
]
