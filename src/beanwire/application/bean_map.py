import logging
from typing import Any, Callable, Dict, Iterator, Optional

from beanwire.application.map_loader import PythonMapLoader
from beanwire.application.scope import Scope
from beanwire.domain import (
    Access,
    Bean,
    DuplicateBeanNameError,
    IBeanRegistrar,
    IBeanRegistry,
    IMapLoader,
    UnknownBeanError,
)

logger = logging.getLogger(__name__)


class BeanMap(IBeanRegistrar, IBeanRegistry):
    """Registry of bean declarations keyed by unique name.

    A bean map is filled during a declaration phase, directly or through
    nested scopes, and then handed to a resolver as read-only input.

    Attributes:
        _beans: Dictionary mapping bean names to their declarations.
        _loader: Loader used by ``include_map`` to read other declaration sources.

    Example:
        >>> bean_map = BeanMap()
        >>> bean_map.bean("config", value={"dsn": "sqlite://"})
        >>> bean_map.bean("repository", klass="app.repositories.UserRepository")
        >>> with bean_map.scope(module="app.services", suffix="service") as services:
        ...     services.bean("signup", klass="Signup").attr("repo", ref="repository")
    """

    def __init__(
        self,
        configure: Optional[Callable[["BeanMap"], Any]] = None,
        loader: Optional[IMapLoader] = None,
    ) -> None:
        """Initialize an empty bean map.

        Args:
            configure: Optional callback receiving the new map to declare beans on.
            loader: Loader for ``include_map``. Defaults to ``PythonMapLoader``.
        """
        self._beans: Dict[str, Bean] = {}
        self._loader: IMapLoader = loader or PythonMapLoader()

        if configure is not None:
            configure(self)

    @classmethod
    def load(cls, location: str, loader: Optional[IMapLoader] = None) -> "BeanMap":
        """Load a bean map from a declaration source.

        Args:
            location: Path to a Python file or an importable module name.
            loader: Loader to use. Defaults to ``PythonMapLoader``.

        Raises:
            MapLoadError: If the source cannot produce a bean map.
        """
        return (loader or PythonMapLoader()).load(location)

    @property
    def beans(self) -> Dict[str, Bean]:
        return self._beans.copy()

    def __contains__(self, name: object) -> bool:
        return str(name) in self._beans

    def __len__(self) -> int:
        return len(self._beans)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._beans))

    def get(self, name: str) -> Bean:
        """Return a bean by name.

        Raises:
            UnknownBeanError: If no bean is registered under ``name``.
        """
        bean = self._beans.get(str(name))
        if bean is None:
            raise UnknownBeanError(str(name))
        return bean

    def bean(
        self,
        name: str,
        klass: Optional[str] = None,
        configure: Optional[Callable[[Bean], Any]] = None,
        access: Access = Access.SINGLETON,
        **others: Any,
    ) -> Bean:
        """Declare a bean.

        Args:
            name: Name of the bean.
            klass: Identifier of the class to construct.
            configure: Optional callback registering attributes on the new bean.
            access: Singleton (default) or transient.
            **others: Passed through to the bean (``value``, ``construct``).

        Returns:
            The registered bean.

        Raises:
            DuplicateBeanNameError: If a bean with the same name already exists.
            InvalidBeanDeclarationError: If both or neither of ``klass`` and ``value`` are given.

        Example:
            >>> bean_map.bean("mailer", klass="app.Mailer", access=Access.TRANSIENT)
            >>> bean_map.bean("retries", value=3)
            >>> bean_map.bean("now", value=lazy(datetime.now), access="transient")
        """
        name = str(name)
        self._raise_if_name_taken(name)

        bean = Bean.declare(name, configure, class_name=klass, access=access, **others)
        self._beans[name] = bean
        logger.debug("Registered bean %s (%s, %s)", name, bean.origin, bean.access)
        return bean

    def merge(self, other: IBeanRegistry) -> "BeanMap":
        """Merge every bean of ``other`` into this map.

        All incoming names are checked before any bean is copied, so a failed
        merge leaves this map untouched.

        Raises:
            DuplicateBeanNameError: If any incoming name is already registered.
        """
        incoming = other.beans
        for name in incoming:
            self._raise_if_name_taken(name)

        self._beans.update(incoming)
        logger.info("Merged %d beans into map", len(incoming))
        return self

    def include_map(self, location: str) -> "BeanMap":
        """Load the bean map declared at ``location`` and merge it into this one.

        Raises:
            MapLoadError: If the source cannot produce a bean map.
            DuplicateBeanNameError: If the loaded map redeclares an existing name.
        """
        logger.info("Including bean map from %s", location)
        return self.merge(self._loader.load(location))

    def scope(self, configure: Optional[Callable[[Scope], Any]] = None, **options: Any) -> Scope:
        """Create a naming scope in front of this map.

        Args:
            configure: Optional callback receiving the new scope.
            **options: ``module``, ``prefix``, ``suffix``, ``klass_suffix``,
                ``auto_klass``, ``auto_prefix`` and ``construct``.

        Raises:
            InvalidScopeOptionError: If an option is not recognized.

        Example:
            >>> bean_map.scope(prefix="foo").bean("bar", klass="Bar")  # registers foo_bar
        """
        return Scope(self, configure, **options)

    def _raise_if_name_taken(self, name: str) -> None:
        if name in self._beans:
            raise DuplicateBeanNameError(name)
