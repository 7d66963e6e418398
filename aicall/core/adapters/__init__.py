"""
Adapters - Implementations of the application ports.
"""
