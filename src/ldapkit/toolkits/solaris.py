from typing import Any, Optional, Tuple

from ..ldapresult import ErrorRecord
from ..native import SolarisSDK
from ..toolkit import LDAP_SUCCESS, CAType, Toolkit, register_toolkit


@register_toolkit("solaris", "sun")
class SolarisToolkit(Toolkit):
    """
    Toolkit for the LDAP library of Sun Solaris. Neither certificate
    stores nor SSL connections are supported.
    """

    vendor_name = "Solaris"
    sdk_class = SolarisSDK

    def _install_ca(self, ca_source: Optional[str], ca_type: CAType) -> ErrorRecord:
        if ca_source is not None:
            return ErrorRecord.configuration(
                "LDAP: Attempt to set certificate store failed. Setting a "
                "certificate store on the Sun toolkit is not supported"
            )
        return self._native_record(LDAP_SUCCESS)

    def _open_secure(self, hostname: str, port: int) -> Tuple[Any, ErrorRecord]:
        return None, ErrorRecord.not_implemented(
            "LDAP: SSL not yet supported on this version of the Sun toolkit"
        )
