from ipaddress import IPv6Address
from typing import Any, Tuple

import re
import urllib.parse

from .ldapresult import ErrorRecord
from .toolkit import get_toolkit

_DEFAULT_PORTS = {"ldap": 389, "ldaps": 636}

_HOSTNAME_REGEX = re.compile(
    r"^(([a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9\-]"
    r"*[a-zA-Z0-9])\.)*([A-Za-z0-9]|"
    r"[A-Za-z0-9][A-Za-z0-9\-]*[A-Za-z0-9])$"
)


def is_valid_hostname(hostname: str) -> Tuple[bool, bool]:
    """Validate a hostname. Return a tuple of (valid, IPv6)."""
    try:
        # Try parsing IPv6 address.
        IPv6Address(hostname)
        return (True, True)
    except ValueError:
        # Try IPv4 and standard hostname.
        if _HOSTNAME_REGEX.match(hostname):
            return (True, False)
        return (False, False)


def parse_url(strurl: str) -> Tuple[str, int, bool]:
    """
    Parse the address part of an LDAP URL. The search parameters of the
    URL are ignored.

    :param str strurl: string representation of an LDAP URL. Must be \
    started with `ldap://` or `ldaps://`.
    :raises TypeError: if the url is not a string.
    :raises ValueError: if the string is not a valid LDAP URL.
    :return: a tuple of `(hostname, port, secure)`.
    """
    if not isinstance(strurl, str):
        raise TypeError("The url must be a string.")
    parsed_url = urllib.parse.urlparse(strurl)
    scheme = parsed_url.scheme.lower()
    if scheme not in _DEFAULT_PORTS:
        raise ValueError(f"'{strurl}' is not a valid LDAP URL")
    host = parsed_url.hostname or "localhost"
    valid, _ = is_valid_hostname(host)
    if not valid:
        raise ValueError(f"'{strurl}' has an invalid hostname")
    try:
        port = parsed_url.port or _DEFAULT_PORTS[scheme]
    except ValueError:
        raise ValueError(f"'{strurl}' has an invalid port") from None
    return (host, port, scheme == "ldaps")


def open_url(strurl: str) -> Tuple[Any, ErrorRecord]:
    """
    Create a connection handle from an LDAP URL with the active
    toolkit. An `ldaps://` URL requests a secure connection.

    :param str strurl: the LDAP URL.
    :return: a tuple of `(handle, record)`.
    """
    hostname, port, secure = parse_url(strurl)
    return get_toolkit().open_connection(hostname, port, secure)
