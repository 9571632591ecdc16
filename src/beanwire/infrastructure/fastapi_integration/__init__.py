"""
FastAPI integration module.

Provides helpers and utilities for integrating beanwire with FastAPI.
"""

from .integration import (
    ResolverMiddleware,
    create_fastapi_dependency,
    create_request_dependency,
    inject_beans,
)

__all__ = [
    "create_fastapi_dependency",
    "create_request_dependency",
    "inject_beans",
    "ResolverMiddleware",
]
