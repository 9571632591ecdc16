from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from beanwire.domain.enums import Access, BeanOrigin, ParameterKind
from beanwire.domain.exceptions import InvalidBeanDeclarationError


class Lazy(BaseModel):
    """Wraps a zero-argument callable whose result is computed at resolution time.

    Attributes:
        factory: Callable invoked each time the owning bean is resolved uncached.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    factory: Callable[[], Any] = Field(..., description="Zero-argument callable producing the value.")

    def __call__(self) -> Any:
        return self.factory()


def lazy(factory: Callable[[], Any]) -> Lazy:
    """Shorthand for ``Lazy(factory=factory)``.

    Example:
        >>> bean_map.bean("started_at", value=lazy(datetime.now))
    """
    return Lazy(factory=factory)


class Attribute(BaseModel):
    """Overrides how a single constructor parameter of a bean is satisfied.

    Attributes:
        name: The constructor parameter name.
        reference: Name of the bean to resolve for this parameter.
        value: Literal injected as-is. Only meaningful when explicitly set.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Constructor parameter this attribute overrides.")
    reference: Optional[str] = Field(default=None, description="Name of the bean injected for the parameter.")
    value: Any = Field(default=None, description="Literal injected for the parameter.")

    @property
    def has_value(self) -> bool:
        """Whether a literal value was explicitly given."""
        return "value" in self.model_fields_set


class Bean(BaseModel):
    """Immutable declaration of how to produce a named instance.

    A bean is either a class bean (``class_name`` set) or a value bean
    (``value`` explicitly passed, ``None`` included), never both.

    Attributes:
        name: Unique name within a bean map.
        class_name: Identifier of the class to construct.
        value: Literal value, or a ``Lazy`` computed on resolution.
        access: Singleton or transient.
        instantiate: When False, a class bean resolves to the class itself.
            Declared with the ``construct`` keyword.
        attributes: Per-parameter overrides keyed by parameter name.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Name of the bean.")
    class_name: Optional[str] = Field(default=None, description="Identifier of the class to construct.")
    value: Any = Field(default=None, description="Literal or lazy value of the bean.")
    access: Access = Field(default=Access.SINGLETON, description="Caching mode of resolved instances.")
    instantiate: bool = Field(default=True, alias="construct", description="Whether class beans are instantiated.")
    attributes: Dict[str, Attribute] = Field(default_factory=dict, description="Constructor parameter overrides.")

    @model_validator(mode="after")
    def check_origin(self) -> "Bean":
        has_value = "value" in self.model_fields_set
        if self.class_name is not None and has_value:
            raise InvalidBeanDeclarationError(self.name, "use either `class_name` or `value` but not both")
        if self.class_name is None and not has_value:
            raise InvalidBeanDeclarationError(self.name, "either `class_name` or `value` is required")
        return self

    @classmethod
    def declare(cls, name: str, configure: Optional[Callable[["Bean"], Any]] = None, **options: Any) -> "Bean":
        """Create a bean and let ``configure`` register its attributes.

        Args:
            name: Name of the bean.
            configure: Optional callback receiving the new bean.
            **options: Remaining bean fields (``class_name``, ``value``, ``access``, ``construct``).

        Returns:
            The configured bean.
        """
        bean = cls(name=name, **options)
        if configure is not None:
            configure(bean)
        return bean

    @property
    def origin(self) -> BeanOrigin:
        return BeanOrigin.CLASS if self.class_name is not None else BeanOrigin.VALUE

    @property
    def is_lazy(self) -> bool:
        return self.origin == BeanOrigin.VALUE and isinstance(self.value, Lazy)

    def attr(self, name: str, ref: Optional[str] = None, **literal: Any) -> "Bean":
        """Register an override for constructor parameter ``name``.

        Re-registering a parameter replaces the previous override.

        Args:
            name: Constructor parameter name.
            ref: Bean to resolve for the parameter.
            **literal: ``value=...`` to inject a literal instead of a reference.

        Returns:
            This bean, for chaining.

        Example:
            >>> bean_map.bean("signup", klass="app.Signup").attr("repo", ref="user_repo").attr("retries", value=3)
        """
        unknown = set(literal) - {"value"}
        if unknown:
            raise TypeError(f"attr() got unexpected keyword arguments: {', '.join(sorted(unknown))}")
        self.attributes[name] = Attribute(name=name, reference=ref, **literal)
        return self


class ConstructorParameter(BaseModel):
    """Describes one formal parameter of a class constructor.

    Attributes:
        name: Parameter name, also the default dependency bean name.
        kind: Parameter kind.
        has_default: Whether the parameter declares a default value.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ParameterKind
    has_default: bool = False

    def is_named(self, allow_positional_or_keyword: bool = False) -> bool:
        """Whether the parameter can be passed by name.

        Args:
            allow_positional_or_keyword: Also accept regular parameters, which
                could be passed positionally.
        """
        if self.kind == ParameterKind.KEYWORD_ONLY:
            return True
        return allow_positional_or_keyword and self.kind == ParameterKind.POSITIONAL_OR_KEYWORD
