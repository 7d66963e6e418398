"""
Testing Infrastructure - Test Support Utilities.

This module provides utilities for testing the policy pipeline:
    - Fakes: Fake collaborators and policies
    - Builders: Test data builders for requests, responses and tool calls
    - Fixtures: pytest fixtures for common test setup
"""

from .builders import RequestBuilder, ResponseBuilder, ToolCallBuilder
from .fakes import FailingPolicy, FakeContextProvider, FakeToolRegistry, RecordingPolicy

__all__ = [
    # Fakes
    "FailingPolicy",
    "FakeContextProvider",
    "FakeToolRegistry",
    "RecordingPolicy",
    # Builders
    "RequestBuilder",
    "ResponseBuilder",
    "ToolCallBuilder",
]
