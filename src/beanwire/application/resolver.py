import logging
import threading
from typing import Any, Dict, Optional

from beanwire.application.class_locator import ClassLocator
from beanwire.domain import (
    Access,
    Bean,
    BeanOrigin,
    IBeanRegistry,
    IClassLocator,
    IResolver,
    UnsupportedConstructorSignatureError,
)

logger = logging.getLogger(__name__)


class Resolver(IResolver):
    """Turns bean names into fully wired instances.

    Class beans are built by reading their constructor parameters: each
    parameter name is the name of the bean injected for it, unless the bean
    declares an attribute overriding that parameter. Constructors must take
    keyword-only parameters; pass ``allow_positional_or_keyword=True`` to also
    accept regular ones. Singleton instances are cached until ``reset_cache``
    is called.

    Dependency cycles are not detected. A bean that depends on itself,
    directly or transitively, recurses until Python raises ``RecursionError``.

    The singleton cache is not synchronized. Use ``SynchronizedResolver`` when
    a resolver is shared between threads.

    Attributes:
        _bean_map: Registry the beans are read from.
        _class_locator: Maps class names to classes and reads constructors.
        _allow_positional_or_keyword: Also accept regular constructor parameters.
        _singletons: Cached singleton instances keyed by bean name.
    """

    def __init__(
        self,
        bean_map: IBeanRegistry,
        class_locator: Optional[IClassLocator] = None,
        allow_positional_or_keyword: bool = False,
    ) -> None:
        """Initialize the resolver over a finished bean map.

        Args:
            bean_map: Registry to resolve beans from. It is read, never modified.
            class_locator: Class lookup. Defaults to an import-based ``ClassLocator``.
            allow_positional_or_keyword: Also inject regular parameters by name.
                By default only keyword-only parameters are accepted.
        """
        self._bean_map = bean_map
        self._class_locator: IClassLocator = class_locator or ClassLocator()
        self._allow_positional_or_keyword = allow_positional_or_keyword
        self._singletons: Dict[str, Any] = {}

    @property
    def bean_map(self) -> IBeanRegistry:
        return self._bean_map

    @property
    def singletons(self) -> Dict[str, Any]:
        return self._singletons.copy()

    def resolve(self, name: str) -> Any:
        """Resolve the bean registered under ``name``.

        Args:
            name: Name of the bean.

        Returns:
            The cached singleton, or a freshly built instance.

        Raises:
            UnknownBeanError: If the bean or one of its dependencies is not declared.
            UnresolvableClassIdentifierError: If a class name cannot be located.
            UnsupportedConstructorSignatureError: If a constructor takes unnamed parameters.

        Example:
            >>> resolver = Resolver(bean_map)
            >>> signup = resolver.resolve("user_signup_service")
        """
        name = str(name)
        bean = self._bean_map.get(name)
        singleton = bean.access == Access.SINGLETON

        if singleton and name in self._singletons:
            logger.debug("Singleton cache hit for %s", name)
            return self._singletons[name]

        instance = self._resolve_bean(bean)
        if singleton:
            self._singletons[name] = instance
        return instance

    def reset_cache(self) -> None:
        self._singletons = {}

    def _resolve_bean(self, bean: Bean) -> Any:
        if bean.origin == BeanOrigin.VALUE:
            return self._resolve_value_bean(bean)
        return self._resolve_class_bean(bean)

    @staticmethod
    def _resolve_value_bean(bean: Bean) -> Any:
        return bean.value() if bean.is_lazy else bean.value

    def _resolve_class_bean(self, bean: Bean) -> Any:
        klass = self._class_locator.locate(bean.class_name)
        if not bean.instantiate:
            return klass

        parameters = self._class_locator.describe_constructor(klass)
        if not parameters:
            logger.debug("Instantiating %s for bean %s", bean.class_name, bean.name)
            return klass()

        for param in parameters:
            if not param.is_named(self._allow_positional_or_keyword):
                raise UnsupportedConstructorSignatureError(bean.class_name, param.name)

        kwargs = {param.name: self._resolve_parameter(bean, param.name) for param in parameters}

        logger.debug("Instantiating %s for bean %s with %s", bean.class_name, bean.name, ", ".join(kwargs))
        return klass(**kwargs)

    def _resolve_parameter(self, bean: Bean, parameter: str) -> Any:
        attribute = bean.attributes.get(parameter)
        if attribute is None:
            return self.resolve(parameter)
        if attribute.reference is not None:
            return self.resolve(attribute.reference)
        if attribute.has_value:
            return attribute.value
        return self.resolve(parameter)


class SynchronizedResolver(Resolver):
    """Resolver safe to share between threads.

    ``resolve`` and ``reset_cache`` run under one re-entrant lock, so two
    threads missing the cache for the same singleton cannot both build it.
    Recursive dependency resolution re-enters the lock from the same thread.

    Attributes:
        _lock: Re-entrant lock guarding the singleton cache.
    """

    def __init__(
        self,
        bean_map: IBeanRegistry,
        class_locator: Optional[IClassLocator] = None,
        allow_positional_or_keyword: bool = False,
    ) -> None:
        super().__init__(bean_map, class_locator, allow_positional_or_keyword)
        self._lock = threading.RLock()

    def resolve(self, name: str) -> Any:
        with self._lock:
            return super().resolve(name)

    def reset_cache(self) -> None:
        with self._lock:
            super().reset_cache()
