import logging
import sys
from typing import Tuple

from .toolkit import get_toolkit

_DEBUG_HANDLER = logging.StreamHandler(sys.stderr)
_DEBUG_HANDLER.setFormatter(logging.Formatter("DBG: %(name)s: %(message)s"))


def set_debug(debug: bool) -> None:
    """
    Turn on or off printing the debug messages of the toolkit calls to
    the standard error.

    :param bool debug: enabling/disabling debug messages.
    :raises TypeError: If the parameter is not a bool type.
    """
    if not isinstance(debug, bool):
        raise TypeError("Parameter must be bool.")
    logger = logging.getLogger("ldapkit")
    if debug:
        logger.setLevel(logging.DEBUG)
        if _DEBUG_HANDLER not in logger.handlers:
            logger.addHandler(_DEBUG_HANDLER)
    else:
        logger.setLevel(logging.NOTSET)
        logger.removeHandler(_DEBUG_HANDLER)


def get_vendor_info() -> Tuple[str, str]:
    """
    Return the name of the active toolkit and the vendor of its SDK.

    :return: a tuple of `(toolkit name, vendor name)`.
    """
    toolkit = get_toolkit()
    return (toolkit.name, toolkit.vendor_name)


def has_ssl_support() -> bool:
    """ Return True if the active toolkit is used with SSL support. """
    return get_toolkit().ssl_support
