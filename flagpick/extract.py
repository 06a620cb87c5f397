import math
import logging
from typing import Literal, Optional, Sequence
from . import argv, const, keys, utils
from .errors import InvalidEnumValueError, InvalidNumberError, MissingArgumentError
from .scan import Scan

_logger = logging.getLogger(__name__)

Names = str | list[str]
Requirement = Optional[Literal["required", "optional"]]


def _prepare(
    method: str,
    names: Names,
    requirement: Requirement,
    tokens: Optional[Sequence[str]],
) -> tuple[list[str], Sequence[str]]:
    """Validates the arguments shared by every extractor and resolves the default tokens."""
    nameList = utils.asList(names)
    keys.validate(method, nameList)
    keys.checkRequirement(method, requirement)
    if tokens is None:
        tokens = argv.defaultTokens()
    return nameList, tokens


def _valueOf(s: Scan, name: str) -> Optional[str]:
    """
    Returns the value attached to the matching token under the cursor, or None
    when a bare flag is followed by nothing or by another flag.
    """
    tok = s.curr()
    assert tok is not None

    if tok != name:
        return tok.split("=", 1)[1]

    nxt = s.peek()
    if nxt is not None and not keys.isFlag(nxt):
        return nxt

    return None


# --- String ----------------------------------------------------------------- #


def extractString(
    names: Names,
    requirement: Requirement = None,
    description: Optional[str] = None,
    tokens: Optional[Sequence[str]] = None,
) -> Optional[str]:
    """
    Returns the value of the first occurrence of one of `names` that carries a value.

    Values can be given as `--key=value`, `-k=value`, `--key value` or `-k value`.
    A bare flag followed by another flag carries no value and is skipped, the
    search resumes from the token that follows it.

    Args:
        names: A flag name or a list of flag names, tried in order.
        requirement: "required" to raise when no value is found.
        description: Appended to the error message.
        tokens: The tokens to scan, defaults to the process arguments.

    Raises:
        InvalidKeyError: If one of the names is malformed.
        MissingArgumentError: If required and no value was found.
    """
    nameList, tokens = _prepare("extractString()", names, requirement, tokens)

    for name in nameList:
        s = Scan(tokens)
        while s.seekKey(name):
            value = _valueOf(s, name)
            if value is not None:
                _logger.debug(f"Found '{name}' with value '{value}'")
                return value
            s.next()

    _logger.debug(f"No value found for {utils.quoteJoin(nameList)}")

    if requirement == const.REQUIRED:
        raise MissingArgumentError(nameList, description)

    return None


# --- Number ----------------------------------------------------------------- #


def _tryParseFloat(value: str) -> Optional[float]:
    """Tries to parse a float, returning None if unsuccessful."""
    try:
        num = float(value)
    except ValueError:
        return None

    if math.isnan(num):
        return None

    return num


def extractNumber(
    names: Names,
    requirement: Requirement = None,
    description: Optional[str] = None,
    tokens: Optional[Sequence[str]] = None,
) -> Optional[float]:
    """
    Like `extractString`, but parses the value as a float.

    An unparsable value raises `InvalidNumberError` when required and is
    treated as absent otherwise.
    """
    nameList, tokens = _prepare("extractNumber()", names, requirement, tokens)

    value = extractString(nameList, requirement, description, tokens)
    if value is None:
        return None

    num = _tryParseFloat(value)
    if num is None:
        _logger.debug(f"'{value}' is not a number")
        if requirement == const.REQUIRED:
            raise InvalidNumberError(nameList, value, description)
        return None

    return num


# --- Enum ------------------------------------------------------------------- #


def extractEnum(
    names: Names,
    allowed: Sequence[utils.T],
    requirement: Requirement = None,
    description: Optional[str] = None,
    tokens: Optional[Sequence[str]] = None,
) -> Optional[utils.T]:
    """
    Like `extractString`, but the value must be one of `allowed`.

    Raises:
        MissingArgumentError: If required and no value was found.
        InvalidEnumValueError: If required and the value isn't allowed.
    """
    nameList, tokens = _prepare("extractEnum()", names, requirement, tokens)

    value = extractString(nameList, const.OPTIONAL, description, tokens)

    if value is None:
        if requirement == const.REQUIRED:
            raise MissingArgumentError(nameList, description)
        return None

    for member in allowed:
        if member == value:
            return member

    _logger.debug(f"'{value}' is not one of {utils.quoteJoin(map(str, allowed))}")
    if requirement == const.REQUIRED:
        raise InvalidEnumValueError(
            nameList, [str(a) for a in allowed], value, description
        )

    return None


# --- Boolean ---------------------------------------------------------------- #


def extractBool(names: Names, tokens: Optional[Sequence[str]] = None) -> bool:
    """
    Returns True if one of the tokens is exactly one of `names`.

    No value is read, `--flag=true` does not count as `--flag`.
    """
    nameList, tokens = _prepare("extractBool()", names, None, tokens)
    return any(tok in nameList for tok in tokens)


# --- Array ------------------------------------------------------------------ #


def _expandValue(value: str) -> list[str]:
    """
    Splits a double-quoted, comma separated value into its parts,
    ie: '"a,b,c"' -> ["a", "b", "c"]
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1].split(",")
    return [value]


def extractArray(
    names: Names,
    requirement: Requirement = None,
    description: Optional[str] = None,
    tokens: Optional[Sequence[str]] = None,
) -> Optional[list[str]]:
    """
    Collects the values of every occurrence of every name in `names`.

    Each name is searched across all the tokens in turn, so values are ordered
    by name first, then by position. A value wrapped in double quotes is split
    on commas: `--key "a,b" --key=c` gives ["a", "b", "c"].

    Returns:
        A non empty list, or None if optional and nothing was found.

    Raises:
        InvalidKeyError: If one of the names is malformed.
        MissingArgumentError: If required and no value was found.
    """
    nameList, tokens = _prepare("extractArray()", names, requirement, tokens)

    values: list[str] = []
    for name in nameList:
        s = Scan(tokens)
        while s.seekKey(name):
            value = _valueOf(s, name)
            if value is not None:
                values.extend(_expandValue(value))
            s.next()

    _logger.debug(f"Collected {values} for {utils.quoteJoin(nameList)}")

    if len(values) == 0:
        if requirement == const.REQUIRED:
            raise MissingArgumentError(nameList, description)
        return None

    return values
