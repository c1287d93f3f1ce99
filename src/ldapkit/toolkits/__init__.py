from .generic import GenericToolkit
from .microsoft import MicrosoftToolkit
from .netscape import NetscapeToolkit
from .novell import NovellToolkit
from .openldap import OpenLDAPToolkit
from .solaris import SolarisToolkit

__all__ = [
    "GenericToolkit",
    "MicrosoftToolkit",
    "NetscapeToolkit",
    "NovellToolkit",
    "OpenLDAPToolkit",
    "SolarisToolkit",
]
