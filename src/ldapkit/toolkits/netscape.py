from typing import Any, Optional, Tuple

from ..ldapresult import ErrorRecord
from ..native import NetscapeSDK
from ..toolkit import LDAP_SUCCESS, CAType, Toolkit, register_toolkit


@register_toolkit("netscape", "mozilla")
class NetscapeToolkit(Toolkit):
    """
    Toolkit for the Netscape/Mozilla LDAP C SDK. The SDK reads the
    trusted certificates from a cert7.db certificate database.
    """

    vendor_name = "Netscape"
    sdk_class = NetscapeSDK

    def _install_ca(self, ca_source: Optional[str], ca_type: CAType) -> ErrorRecord:
        if ca_source is None:
            return self._native_record(LDAP_SUCCESS)
        if not self.provides("ldapssl_client_init"):
            return ErrorRecord.configuration(
                "LDAP: ldapssl_client_init() function not supported by this "
                "Netscape SDK. Certificate authority file not set"
            )
        if ca_type != CAType.CERT7_DB:
            return ErrorRecord.configuration(
                "LDAP: Invalid certificate type: CERT7_DB type required"
            )
        code = self._native("ldapssl_client_init")(ca_source, None)
        return self._native_record(
            code, "LDAP: Could not open certificate database %s" % ca_source
        )

    def _open_secure(self, hostname: str, port: int) -> Tuple[Any, ErrorRecord]:
        return self._ssl_init(
            "ldapssl_init",
            hostname,
            port,
            "LDAP: SSL not yet supported on this version of the Netscape toolkit",
        )
