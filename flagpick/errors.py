from typing import Optional, Sequence

from . import utils


def _withDescription(msg: str, description: Optional[str]) -> str:
    if description:
        return f"{msg} {description}"
    return msg


class ArgumentError(RuntimeError):
    """
    Base class for every error raised while extracting a command-line argument.

    Attributes:
        names: The candidate flag names the caller asked for.
        description: The caller supplied description, if any.
    """

    names: list[str]
    description: Optional[str]

    def __init__(
        self, msg: str, names: Sequence[str], description: Optional[str] = None
    ):
        super().__init__(msg)
        self.names = list(names)
        self.description = description


class InvalidKeyError(ArgumentError, ValueError):
    """Raised when a flag name is malformed. This is a programming error."""

    method: str
    key: str

    def __init__(self, method: str, key: str, names: Sequence[str]):
        super().__init__(
            f"{method} received an invalid key. Keys must start with '-' or '--', "
            f"followed by a letter of the alphabet, and can not include an equal "
            f'sign "=". Got: {key!r}',
            names,
        )
        self.method = method
        self.key = key


class MissingArgumentError(ArgumentError):
    def __init__(self, names: Sequence[str], description: Optional[str] = None):
        if len(names) == 1:
            msg = f'Expected command line argument "{names[0]}", but it wasn\'t set.'
        else:
            msg = (
                "Expected one of the following command line arguments, "
                f"but none were provided: {utils.quoteJoin(names)}."
            )
        super().__init__(_withDescription(msg, description), names, description)


class InvalidNumberError(ArgumentError):
    value: str

    def __init__(
        self, names: Sequence[str], value: str, description: Optional[str] = None
    ):
        if len(names) == 1:
            msg = f'Expected command line argument "{names[0]}" to be a valid number, but got: "{value}".'
        else:
            msg = (
                f"Expected command line argument matching one of {utils.quoteJoin(names)} "
                f'to be a valid number, but got: "{value}".'
            )
        super().__init__(_withDescription(msg, description), names, description)
        self.value = value


class InvalidEnumValueError(ArgumentError):
    value: str
    allowed: list[str]

    def __init__(
        self,
        names: Sequence[str],
        allowed: Sequence[str],
        value: str,
        description: Optional[str] = None,
    ):
        if len(names) == 1:
            subject = f'"{names[0]}"'
        else:
            subject = f"matching one of {utils.quoteJoin(names)}"
        msg = (
            f"Expected command line argument {subject} to be one of: "
            f'{utils.quoteJoin(allowed)}, but got: "{value}".'
        )
        super().__init__(_withDescription(msg, description), names, description)
        self.value = value
        self.allowed = list(allowed)
