from typing import Any, Optional, Sequence

from . import const
from .errors import InvalidKeyError


def isFlag(token: Any) -> bool:
    """Tests whether `token` looks like a flag, ie. starts with '-' or '--' followed by a letter."""
    return isinstance(token, str) and const.FLAG_PATTERN.match(token) is not None


def isValidKey(key: Any) -> bool:
    return isFlag(key) and "=" not in key


def validate(method: str, names: Sequence[str]) -> None:
    """
    Ensures every name in `names` is a well formed flag name.

    Args:
        method: The name of the calling extractor, used in the error message.
        names: The candidate flag names.

    Raises:
        InvalidKeyError: On the first malformed name.
    """
    if len(names) == 0:
        raise InvalidKeyError(method, "", names)

    for key in names:
        if not isValidKey(key):
            raise InvalidKeyError(method, key, names)


def checkRequirement(method: str, requirement: Optional[str]) -> None:
    if requirement not in (None, const.REQUIRED, const.OPTIONAL):
        raise ValueError(
            f"{method} expected requirement to be '{const.REQUIRED}' or '{const.OPTIONAL}', got: {requirement!r}"
        )
