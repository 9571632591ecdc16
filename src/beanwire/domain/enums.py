import inspect
from enum import Enum


class Access(str, Enum):
    """Defines how a resolved bean instance is shared.

    Attributes:
        SINGLETON: Instance is cached by the resolver and reused until the cache is reset.
        TRANSIENT: Instance is rebuilt on every resolution.
    """

    SINGLETON = "singleton"
    TRANSIENT = "transient"

    def __str__(self) -> str:
        return self.value


class BeanOrigin(str, Enum):
    """Where a bean gets its instance from."""

    CLASS = "class"
    VALUE = "value"

    def __str__(self) -> str:
        return self.value


class ParameterKind(str, Enum):
    """Kind of a constructor parameter, mirroring ``inspect.Parameter`` kinds."""

    POSITIONAL_ONLY = "positional_only"
    POSITIONAL_OR_KEYWORD = "positional_or_keyword"
    VAR_POSITIONAL = "var_positional"
    KEYWORD_ONLY = "keyword_only"
    VAR_KEYWORD = "var_keyword"

    @classmethod
    def from_inspect(cls, kind: inspect._ParameterKind) -> "ParameterKind":
        return cls(kind.name.lower())

    def __str__(self) -> str:
        return self.value
