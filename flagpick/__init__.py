import logging
from typing import Callable, Optional, Sequence

from . import (
    argv,
    const,
    keys,
    vt100,
)
from .errors import (
    ArgumentError,
    InvalidEnumValueError,
    InvalidKeyError,
    InvalidNumberError,
    MissingArgumentError,
)
from .extract import (
    extractArray,
    extractBool,
    extractEnum,
    extractNumber,
    extractString,
)

_logger = logging.getLogger(__name__)

__version__ = const.VERSION_STR


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def run(fn: Callable[[], Optional[int]], tokens: Optional[Sequence[str]] = None) -> int:
    """
    Runs the `fn` entry point of a command line tool, reporting argument errors
    instead of letting them escape as tracebacks.

    `-v` or `--verbose` in the tokens turns on debug logging.

    Returns:
        The exit code: `fn`'s result if it returned an int, 0 otherwise, and 1
        if an `ArgumentError` was raised.
    """
    logger.setup(extractBool(["-v", "--verbose"], tokens))

    try:
        res = fn()
        return res if isinstance(res, int) else 0

    except ArgumentError as e:
        _logger.debug("Argument error", exc_info=True)
        vt100.error(str(e))
        return 1

    except KeyboardInterrupt:
        print()
        return 1
