from typing import Any, Optional, Tuple

from ..ldapresult import ErrorRecord
from ..native import NativeSDK
from ..toolkit import LDAP_SUCCESS, CAType, Toolkit, register_toolkit


@register_toolkit("other", "generic")
class GenericToolkit(Toolkit):
    """
    Toolkit for an LDAP library that is not recognised. It's assumed that
    the library has no SSL capabilities.
    """

    vendor_name = "Unknown"
    sdk_class = NativeSDK

    def _install_ca(self, ca_source: Optional[str], ca_type: CAType) -> ErrorRecord:
        if ca_source is not None:
            return ErrorRecord.configuration(
                "LDAP: Attempt to set certificate store failed. Toolkit type "
                "not recognised as supporting SSL"
            )
        return self._native_record(LDAP_SUCCESS)

    def _open_secure(self, hostname: str, port: int) -> Tuple[Any, ErrorRecord]:
        return None, ErrorRecord.not_implemented(
            "LDAP: SSL not supported by an unrecognised toolkit"
        )
