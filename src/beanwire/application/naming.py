"""Application layer - Name conversions used by scopes."""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_DIGIT_BOUNDARY = re.compile(r"(?<=[0-9])(?=[A-Za-z])|(?<=[A-Za-z])(?=[0-9])")
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def camelcase(name: str) -> str:
    """Turn an underscored name into upper camel case.

    Example:
        >>> camelcase("user_signup")
        'UserSignup'
    """
    chunks = [chunk for chunk in str(name).split("_") if chunk]
    return "".join(chunk.lower().capitalize() for chunk in chunks)


def snakecase(name: str) -> str:
    """Turn a camel cased or dotted name into lower snake case.

    Words split at case changes and at digit/letter boundaries.

    Example:
        >>> snakecase("Services.UserAccount")
        'services_user_account'
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", str(name))
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    name = _DIGIT_BOUNDARY.sub("_", name)
    return _SEPARATORS.sub("_", name).strip("_").lower()
