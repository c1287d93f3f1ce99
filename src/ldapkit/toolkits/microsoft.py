from typing import Any, Optional, Tuple

from ..ldapresult import ErrorRecord
from ..native import MicrosoftSDK
from ..toolkit import LDAP_SUCCESS, CAType, Toolkit, register_toolkit


@register_toolkit("microsoft", "winldap")
class MicrosoftToolkit(Toolkit):
    """
    Toolkit for the WinLDAP library. The trusted certificates are read
    from the certificate store of the system, installing a certificate
    authority always succeeds without doing anything.
    """

    vendor_name = "Microsoft"
    sdk_class = MicrosoftSDK

    def _install_ca(self, ca_source: Optional[str], ca_type: CAType) -> ErrorRecord:
        return self._native_record(LDAP_SUCCESS)

    def _open_secure(self, hostname: str, port: int) -> Tuple[Any, ErrorRecord]:
        return self._ssl_init(
            "ldap_sslinit",
            hostname,
            port,
            "LDAP: SSL not yet supported on this version of the Microsoft toolkit",
        )
