"""
Testing utilities module.

Provides helpers and utilities for testing applications using beanwire.
"""

from .utilities import TestResolver, create_mock_resolver

__all__ = [
    "TestResolver",
    "create_mock_resolver",
]
