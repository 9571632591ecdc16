from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from beanwire.domain.models import Bean, ConstructorParameter

if TYPE_CHECKING:
    from beanwire.application.bean_map import BeanMap


class IBeanRegistrar(ABC):
    """Abstract interface for anything beans can be declared on (a map or a scope)."""

    @abstractmethod
    def bean(
        self,
        name: str,
        klass: Optional[str] = None,
        configure: Optional[Callable[[Bean], Any]] = None,
        **options: Any,
    ) -> Bean:
        """Declare a bean.

        Args:
            name: Name of the bean.
            klass: Identifier of the class to construct.
            configure: Optional callback registering attributes on the new bean.
            **options: Remaining bean options (``value``, ``access``, ``construct``).

        Returns:
            The registered bean.
        """

    @abstractmethod
    def scope(self, configure: Optional[Callable[["IBeanRegistrar"], Any]] = None, **options: Any) -> "IBeanRegistrar":
        """Create a naming scope in front of this registrar.

        Args:
            configure: Optional callback receiving the new scope.
            **options: Scope options.
        """


class IBeanRegistry(ABC):
    """Abstract interface for read access to declared beans."""

    @abstractmethod
    def get(self, name: str) -> Bean:
        """Return the bean registered under ``name``.

        Raises:
            UnknownBeanError: If no bean is registered under that name.
        """

    @property
    @abstractmethod
    def beans(self) -> Dict[str, Bean]:
        """Return a copy of the registered beans keyed by name."""


class IResolver(ABC):
    """Abstract interface for turning bean names into instances."""

    @abstractmethod
    def resolve(self, name: str) -> Any:
        """Resolve the bean registered under ``name``.

        Raises:
            UnknownBeanError: If the bean or one of its dependencies is not declared.
        """

    @abstractmethod
    def reset_cache(self) -> None:
        """Forget every cached singleton instance."""


class IClassLocator(ABC):
    """Abstract interface for mapping class identifiers to classes."""

    @abstractmethod
    def locate(self, class_name: str) -> type:
        """Return the class named by ``class_name``.

        Raises:
            UnresolvableClassIdentifierError: If the identifier names no known class.
        """

    @abstractmethod
    def describe_constructor(self, klass: type) -> List[ConstructorParameter]:
        """Return the formal parameters of ``klass``'s constructor.

        Raises:
            UnsupportedConstructorSignatureError: If the signature cannot be inspected.
        """


class IMapLoader(ABC):
    """Abstract interface for loading a bean map from a declaration source."""

    @abstractmethod
    def load(self, location: str) -> "BeanMap":
        """Build and return the bean map declared at ``location``.

        Raises:
            MapLoadError: If the source cannot produce a bean map.
        """
