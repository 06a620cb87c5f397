import os
import sys
import logging

from . import const

_logger = logging.getLogger(__name__)


def extraTokens() -> list[str]:
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    if not extra:
        return []
    return [tok for tok in extra.split(" ") if tok]


def defaultTokens() -> list[str]:
    """
    Returns the tokens scanned when the caller doesn't provide any: the process
    arguments, with the content of `FLAGPICK_EXTRA_ARGS` inserted after argv[0].
    """
    extra = extraTokens()
    if extra:
        _logger.debug(f"Using extra arguments from {const.EXTRA_ARGS_ENV}: {extra}")
    return sys.argv[:1] + extra + sys.argv[1:]
