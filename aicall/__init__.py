"""
AICall - Request/response policy pipeline for LLM provider calls.
"""

__version__ = "0.1.0"
