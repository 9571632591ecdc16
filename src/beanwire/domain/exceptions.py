from typing import Optional


class DIException(Exception):
    """Base exception for bean declaration and resolution errors."""


class InvalidBeanDeclarationError(DIException):
    """Raised when a bean declares both a class name and a value, or neither.

    Attributes:
        bean_name: Name of the offending bean.
    """

    def __init__(self, bean_name: str, reason: str) -> None:
        self.bean_name = bean_name
        self.reason = reason
        super().__init__(f"Invalid declaration for bean '{bean_name}': {reason}")


class DuplicateBeanNameError(DIException):
    """Raised when registering or merging a bean name that is already taken.

    Attributes:
        bean_name: The duplicated name.
    """

    def __init__(self, bean_name: str) -> None:
        self.bean_name = bean_name
        super().__init__(f"A bean already exists with the following name: {bean_name}")


class UnknownBeanError(DIException):
    """Raised when fetching or resolving a name with no matching declaration.

    Attributes:
        bean_name: The name that was looked up.
    """

    def __init__(self, bean_name: str) -> None:
        self.bean_name = bean_name
        super().__init__(f"Unknown bean: {bean_name}")


class InvalidScopeOptionError(DIException):
    """Raised when a scope is created with an unrecognized option.

    Attributes:
        option: The unrecognized option key.
    """

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Unknown scope option: {option}")


class UnsupportedConstructorSignatureError(DIException):
    """Raised when a class bean's constructor cannot be called with named arguments only.

    This occurs when:
    - A parameter is positional-only.
    - A parameter is variadic (``*args`` or ``**kwargs``).
    - A parameter is positional-or-keyword and the resolver runs in keyword-only mode.
    - The constructor signature cannot be inspected.

    Attributes:
        class_name: Name of the class being constructed.
        parameter: Name of the offending parameter, if any.
    """

    def __init__(self, class_name: str, parameter: Optional[str] = None, reason: Optional[str] = None) -> None:
        self.class_name = class_name
        self.parameter = parameter
        self.reason = reason
        message = f"Unsupported constructor signature for {class_name}"
        if parameter:
            message += f": parameter '{parameter}' is not a named parameter"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class UnresolvableClassIdentifierError(DIException):
    """Raised when a class name cannot be mapped to a constructible class.

    Attributes:
        class_name: The class identifier that failed to resolve.
        reason: Optional reason for the failure.
    """

    def __init__(self, class_name: str, reason: Optional[str] = None) -> None:
        self.class_name = class_name
        self.reason = reason
        message = f"Cannot resolve class identifier: {class_name}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class MapLoadError(DIException):
    """Raised when a bean map cannot be loaded from a declaration source.

    Attributes:
        location: The path or module name that was loaded.
        reason: Why loading failed.
    """

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot load bean map from {location}: {reason}")
