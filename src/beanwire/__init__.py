"""
beanwire: Declarative bean maps with name-based constructor wiring.

Public API exports for the beanwire package.
"""

# Application exports
from beanwire.application.bean_map import BeanMap
from beanwire.application.class_locator import ClassLocator
from beanwire.application.map_loader import PythonMapLoader
from beanwire.application.resolver import Resolver, SynchronizedResolver
from beanwire.application.scope import Scope

# Domain exports
from beanwire.domain.enums import Access
from beanwire.domain.exceptions import (
    DIException,
    DuplicateBeanNameError,
    InvalidBeanDeclarationError,
    InvalidScopeOptionError,
    MapLoadError,
    UnknownBeanError,
    UnresolvableClassIdentifierError,
    UnsupportedConstructorSignatureError,
)
from beanwire.domain.models import Attribute, Bean, Lazy, lazy

__version__ = "0.1.0"

__all__ = [
    # Declarations
    "BeanMap",
    "Scope",
    "Bean",
    "Attribute",
    "Lazy",
    "lazy",
    # Resolution
    "Resolver",
    "SynchronizedResolver",
    "ClassLocator",
    "PythonMapLoader",
    # Enums
    "Access",
    # Exceptions
    "DIException",
    "DuplicateBeanNameError",
    "InvalidBeanDeclarationError",
    "InvalidScopeOptionError",
    "MapLoadError",
    "UnknownBeanError",
    "UnresolvableClassIdentifierError",
    "UnsupportedConstructorSignatureError",
]
