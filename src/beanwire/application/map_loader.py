"""Application layer - Loading bean maps from declaration sources."""

import importlib
import importlib.util
import logging
import uuid
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

from beanwire.domain import IBeanRegistry, IMapLoader, MapLoadError

if TYPE_CHECKING:
    from beanwire.application.bean_map import BeanMap

logger = logging.getLogger(__name__)

DEFAULT_FACTORY_NAME = "build_map"


class PythonMapLoader(IMapLoader):
    """Loads bean maps from Python declaration modules.

    A declaration module exposes a factory function, ``build_map`` by default,
    that takes no arguments and returns a ``BeanMap``. The module gets no
    ambient names injected: it imports what it needs like any other module.

    Attributes:
        factory_name: Name of the factory function looked up in the module.

    Example:
        >>> # config/beans.py
        >>> def build_map():
        ...     bean_map = BeanMap()
        ...     bean_map.bean("mailer", klass="app.Mailer")
        ...     return bean_map
        >>>
        >>> PythonMapLoader().load("config/beans.py")
    """

    def __init__(self, factory_name: str = DEFAULT_FACTORY_NAME) -> None:
        self.factory_name = factory_name

    def load(self, location: str) -> "BeanMap":
        """Build the bean map declared at ``location``.

        Args:
            location: Path to a ``.py`` file, or an importable module name.

        Raises:
            MapLoadError: If the module cannot be loaded, lacks the factory, or
                the factory does not return a bean map.
        """
        module = self._load_module(str(location))

        factory = getattr(module, self.factory_name, None)
        if not callable(factory):
            raise MapLoadError(str(location), f"no callable `{self.factory_name}` found")

        bean_map = factory()
        if not isinstance(bean_map, IBeanRegistry):
            raise MapLoadError(
                str(location),
                f"`{self.factory_name}` returned {type(bean_map).__name__}, expected a bean map",
            )

        logger.info("Loaded %d beans from %s", len(bean_map.beans), location)
        return bean_map

    def _load_module(self, location: str) -> ModuleType:
        path = Path(location)
        if path.suffix == ".py":
            return self._load_file(path)

        try:
            return importlib.import_module(location)
        except ImportError as e:
            raise MapLoadError(location, f"cannot import module: {e}") from e

    @staticmethod
    def _load_file(path: Path) -> ModuleType:
        if not path.is_file():
            raise MapLoadError(str(path), "file does not exist")

        module_name = f"_beanwire_map_{path.stem}_{uuid.uuid4().hex}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise MapLoadError(str(path), "cannot create a module spec")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
