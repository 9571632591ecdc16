"""
Domain layer - Core declarations and contracts.

This layer contains bean declarations, their invariants and the interfaces
the application layer implements. It has no dependencies on other layers.
"""

from .enums import Access, BeanOrigin, ParameterKind
from .exceptions import (
    DIException,
    DuplicateBeanNameError,
    InvalidBeanDeclarationError,
    InvalidScopeOptionError,
    MapLoadError,
    UnknownBeanError,
    UnresolvableClassIdentifierError,
    UnsupportedConstructorSignatureError,
)
from .interfaces import IBeanRegistrar, IBeanRegistry, IClassLocator, IMapLoader, IResolver
from .models import Attribute, Bean, ConstructorParameter, Lazy, lazy

__all__ = [
    # Enums
    "Access",
    "BeanOrigin",
    "ParameterKind",
    # Exceptions
    "DIException",
    "DuplicateBeanNameError",
    "InvalidBeanDeclarationError",
    "InvalidScopeOptionError",
    "MapLoadError",
    "UnknownBeanError",
    "UnresolvableClassIdentifierError",
    "UnsupportedConstructorSignatureError",
    # Interfaces
    "IBeanRegistrar",
    "IBeanRegistry",
    "IClassLocator",
    "IMapLoader",
    "IResolver",
    # Models
    "Attribute",
    "Bean",
    "ConstructorParameter",
    "Lazy",
    "lazy",
]
