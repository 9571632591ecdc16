"""
Application layer - Declaration and resolution.

This layer builds bean maps, applies scope naming and resolves beans into
instances. It depends only on the Domain layer.
"""

from .bean_map import BeanMap
from .class_locator import ClassLocator
from .map_loader import PythonMapLoader
from .naming import camelcase, snakecase
from .resolver import Resolver, SynchronizedResolver
from .scope import Scope

__all__ = [
    "BeanMap",
    "ClassLocator",
    "PythonMapLoader",
    "Resolver",
    "Scope",
    "SynchronizedResolver",
    "camelcase",
    "snakecase",
]
