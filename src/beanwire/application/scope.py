import logging
from typing import Any, Callable, Dict, Optional

from beanwire.application.naming import camelcase, snakecase
from beanwire.domain import Bean, IBeanRegistrar, InvalidScopeOptionError

logger = logging.getLogger(__name__)

NAMESPACE_SEPARATOR = "."


class Scope(IBeanRegistrar):
    """Naming transform sitting in front of a bean map or another scope.

    A scope rewrites bean names, class names and default options before
    forwarding declarations to its parent. Nested scopes each apply their own
    transform, so the chain composes from the innermost scope outwards.

    Attributes:
        VALID_OPTIONS: Option keys accepted by the constructor.
        INHERITED_OPTIONS: Options a child scope copies from its parent.
        parent: The registrar declarations are forwarded to.
        module: Namespace prepended to class names.
        prefix: Prepended to bean names.
        suffix: Appended to bean names.
        klass_suffix: Appended to class names.
        auto_klass: Derive class names from bean names when none is given.
        auto_prefix: Derive the prefix from ``module`` when none is given.
        construct: Default ``construct`` flag of declared beans.

    Example:
        >>> with bean_map.scope(module="Services", klass_suffix="Service", suffix="service") as services:
        ...     with services.scope(module="User", prefix="user") as users:
        ...         users.bean("signup", klass="Signup")
        >>> bean_map.get("user_signup_service").class_name
        'Services.User.SignupService'
    """

    VALID_OPTIONS = frozenset({"module", "prefix", "suffix", "klass_suffix", "auto_klass", "auto_prefix", "construct"})
    INHERITED_OPTIONS = ("auto_klass", "auto_prefix", "construct")

    def __init__(
        self,
        parent: IBeanRegistrar,
        configure: Optional[Callable[["Scope"], Any]] = None,
        **options: Any,
    ) -> None:
        """Initialize the scope and optionally run ``configure`` against it.

        Args:
            parent: Registrar receiving rewritten declarations.
            configure: Optional callback receiving the new scope.
            **options: Scope options, see ``VALID_OPTIONS``.

        Raises:
            InvalidScopeOptionError: If an option key is not recognized.
        """
        self._validate_options(options)

        self.parent = parent
        self.module: Optional[str] = options.get("module")
        self.suffix: Optional[str] = options.get("suffix")
        self.klass_suffix: Optional[str] = options.get("klass_suffix")
        self.auto_klass: bool = bool(options.get("auto_klass", False))
        self.auto_prefix: bool = bool(options.get("auto_prefix", False))
        self.construct: bool = options.get("construct", True)
        self.prefix: Optional[str] = self._generate_prefix(options.get("prefix"))

        if configure is not None:
            configure(self)

    def __enter__(self) -> "Scope":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        return False

    def bean(
        self,
        name: str,
        klass: Optional[str] = None,
        configure: Optional[Callable[[Bean], Any]] = None,
        **options: Any,
    ) -> Bean:
        """Rewrite a declaration and forward it to the parent.

        Args:
            name: Unscoped bean name.
            klass: Unqualified class name.
            configure: Optional callback registering attributes on the new bean.
            **options: Bean options. Explicit options win over scope defaults.

        Returns:
            The bean registered at the end of the chain.
        """
        options = {**self._default_options(), **options}
        if "value" not in options:
            klass = self._generate_klass(str(name), klass)

        scoped_name = self._generate_name(str(name))
        logger.debug("Scope forwarding bean %s as %s (class %s)", name, scoped_name, klass)

        if klass is not None:
            options["klass"] = klass
        return self.parent.bean(scoped_name, configure=configure, **options)

    def scope(self, configure: Optional[Callable[["Scope"], Any]] = None, **options: Any) -> "Scope":
        """Create a child scope forwarding to this one.

        The child inherits ``auto_klass``, ``auto_prefix`` and ``construct``
        unless they are overridden.

        Raises:
            InvalidScopeOptionError: If an option key is not recognized.
        """
        inherited = {option: getattr(self, option) for option in self.INHERITED_OPTIONS}
        return Scope(self, configure, **{**inherited, **options})

    def _default_options(self) -> Dict[str, Any]:
        if self.construct is None:
            return {}
        return {"construct": self.construct}

    def _generate_name(self, name: str) -> str:
        return "_".join(str(part) for part in (self.prefix, name, self.suffix) if part)

    def _generate_klass(self, name: str, klass: Optional[str]) -> Optional[str]:
        if not klass and not self.auto_klass:
            return None

        klass = klass or camelcase(name)
        chunks = [self.module, f"{klass}{self.klass_suffix or ''}"]
        return NAMESPACE_SEPARATOR.join(str(chunk) for chunk in chunks if chunk)

    def _generate_prefix(self, prefix: Optional[str]) -> Optional[str]:
        if prefix:
            return prefix
        if not self.auto_prefix or not self.module:
            return None
        return snakecase(self.module)

    @classmethod
    def _validate_options(cls, options: Dict[str, Any]) -> None:
        for key in options:
            if key not in cls.VALID_OPTIONS:
                raise InvalidScopeOptionError(key)
