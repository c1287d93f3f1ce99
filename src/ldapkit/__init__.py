import logging

from .ldapresult import ErrorKind, ErrorRecord, Status
from .toolkit import CAType, Toolkit
from .toolkit import (
    describe_toolkit,
    get_toolkit,
    get_toolkit_class,
    install_ca,
    open_connection,
    register_toolkit,
    reset_toolkit,
    set_toolkit,
    teardown_ca,
)
from .toolkits import *
from .ldapurl import open_url, parse_url
from .errors import *
from .utils import *

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CAType",
    "ErrorKind",
    "ErrorRecord",
    "Status",
    "Toolkit",
    # Toolkits
    "GenericToolkit",
    "MicrosoftToolkit",
    "NetscapeToolkit",
    "NovellToolkit",
    "OpenLDAPToolkit",
    "SolarisToolkit",
    # Operations
    "describe_toolkit",
    "install_ca",
    "open_connection",
    "open_url",
    "parse_url",
    "teardown_ca",
    # Toolkit selection
    "get_toolkit",
    "get_toolkit_class",
    "register_toolkit",
    "reset_toolkit",
    "set_toolkit",
    # Errors
    "LDAPError",
    "ConfigurationError",
    "ConnectionError",
    "LocalError",
    "NoMemory",
    "NotSupported",
    "ParamError",
    # Util functions
    "get_vendor_info",
    "has_ssl_support",
    "set_debug",
]
