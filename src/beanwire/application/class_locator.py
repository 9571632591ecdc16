"""Application layer - Class identifier lookup and constructor introspection."""

import importlib
import inspect
import logging
from typing import Any, Dict, List, Optional, Sequence

from beanwire.domain import (
    ConstructorParameter,
    IClassLocator,
    ParameterKind,
    UnresolvableClassIdentifierError,
    UnsupportedConstructorSignatureError,
)

logger = logging.getLogger(__name__)


class ClassLocator(IClassLocator):
    """Maps dotted class identifiers to classes and reads their constructors.

    Lookup order:
    1. Classes registered explicitly (constructor mapping or ``register``).
    2. The identifier as an absolute dotted path, e.g. ``app.services.Signup``.
    3. The identifier under each configured root package, e.g.
       ``Services.Signup`` with ``roots=["app"]`` becomes ``app.Services.Signup``.

    Attributes:
        _classes: Explicitly registered classes keyed by identifier.
        _roots: Root packages tried after absolute lookup fails.
    """

    def __init__(self, classes: Optional[Dict[str, type]] = None, roots: Sequence[str] = ()) -> None:
        """Initialize the locator.

        Args:
            classes: Classes to register up front, keyed by identifier.
            roots: Package names prepended to identifiers that fail absolute lookup.
        """
        self._classes: Dict[str, type] = {}
        self._roots: List[str] = list(roots)
        for class_name, klass in (classes or {}).items():
            self.register(class_name, klass)

    def register(self, class_name: str, klass: type) -> None:
        """Register ``klass`` under ``class_name``, shadowing import lookup.

        Raises:
            UnresolvableClassIdentifierError: If ``klass`` is not a class.
        """
        if not inspect.isclass(klass):
            raise UnresolvableClassIdentifierError(class_name, f"{klass!r} is not a class")
        self._classes[class_name] = klass

    def locate(self, class_name: str) -> type:
        """Return the class named by ``class_name``.

        Raises:
            UnresolvableClassIdentifierError: If the identifier is empty or relative,
                if importing an existing module fails, or if no candidate path
                names a class.
        """
        if class_name in self._classes:
            return self._classes[class_name]

        if not all(class_name.split(".")):
            raise UnresolvableClassIdentifierError(class_name, "expected an absolute dotted path")

        candidates = [class_name] + [f"{root}.{class_name}" for root in self._roots]
        for candidate in candidates:
            found = self._import_path(class_name, candidate)
            if found is None:
                continue
            if not inspect.isclass(found):
                raise UnresolvableClassIdentifierError(class_name, f"{candidate} is not a class")
            logger.debug("Located class %s at %s", class_name, candidate)
            return found

        raise UnresolvableClassIdentifierError(class_name, "no importable module defines it")

    def describe_constructor(self, klass: type) -> List[ConstructorParameter]:
        """Return the formal parameters of ``klass``'s constructor, ``self`` excluded.

        Raises:
            UnsupportedConstructorSignatureError: If the signature cannot be inspected.
        """
        if klass.__init__ is object.__init__ and klass.__new__ is object.__new__:
            return []

        try:
            signature = inspect.signature(klass)
        except (TypeError, ValueError) as e:
            raise UnsupportedConstructorSignatureError(klass.__name__, reason=str(e)) from e

        return [
            ConstructorParameter(
                name=name,
                kind=ParameterKind.from_inspect(param.kind),
                has_default=param.default is not inspect.Parameter.empty,
            )
            for name, param in signature.parameters.items()
        ]

    @staticmethod
    def _import_path(class_name: str, path: str) -> Optional[Any]:
        """Import the longest module prefix of ``path`` and walk the remaining attributes."""
        parts = path.split(".")
        for split in range(len(parts), 0, -1):
            module_name = ".".join(parts[:split])
            try:
                target: Any = importlib.import_module(module_name)
            except ImportError as e:
                # Only a missing prefix of ``module_name`` means "try a shorter path".
                missing = e.name if isinstance(e, ModuleNotFoundError) else None
                if missing and (module_name == missing or module_name.startswith(f"{missing}.")):
                    continue
                raise UnresolvableClassIdentifierError(class_name, f"importing {module_name} failed: {e}") from e

            for attribute in parts[split:]:
                if not hasattr(target, attribute):
                    return None
                target = getattr(target, attribute)
            return target
        return None
