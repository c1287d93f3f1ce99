import logging
from typing import Any, Optional, Tuple

from ..ldapresult import ErrorRecord
from ..native import NovellSDK
from ..toolkit import LDAP_SUCCESS, CAType, Toolkit, register_toolkit

logger = logging.getLogger(__name__)

LDAPSSL_CERT_FILETYPE_B64 = 0x58
LDAPSSL_CERT_FILETYPE_DER = 0x59


@register_toolkit("novell")
class NovellToolkit(Toolkit):
    """
    Toolkit for the Novell LDAP Libraries for C. The library needs a
    global SSL initialisation before any trusted certificate is added,
    and accepts DER or BASE64 encoded certificate files.
    """

    vendor_name = "Novell"
    sdk_class = NovellSDK

    def _install_ca(self, ca_source: Optional[str], ca_type: CAType) -> ErrorRecord:
        if not all(
            map(
                self.provides,
                (
                    "ldapssl_client_init",
                    "ldapssl_add_trusted_cert",
                    "ldapssl_client_deinit",
                ),
            )
        ):
            return ErrorRecord.configuration(
                "LDAP: ldapssl_client_init(), ldapssl_add_trusted_cert() or "
                "ldapssl_client_deinit() functions not supported by this "
                "Novell SDK. Certificate authority file not set"
            )
        if ca_source is not None and ca_type not in (CAType.DER, CAType.BASE64):
            return ErrorRecord.configuration(
                "LDAP: Invalid certificate type: DER or BASE64 type required"
            )
        code = self._native("ldapssl_client_init")(None, None)
        if code != LDAP_SUCCESS:
            return self._native_record(code, "LDAP: Could not initialize SSL")
        if ca_source is None:
            return self._native_record(code)
        if ca_type == CAType.BASE64:
            filetype = getattr(
                self.sdk, "LDAPSSL_CERT_FILETYPE_B64", LDAPSSL_CERT_FILETYPE_B64
            )
        else:
            filetype = getattr(
                self.sdk, "LDAPSSL_CERT_FILETYPE_DER", LDAPSSL_CERT_FILETYPE_DER
            )
        code = self._native("ldapssl_add_trusted_cert")(ca_source, filetype)
        if code != LDAP_SUCCESS:
            logger.warning(
                "Adding trusted cert %s failed (%d), tearing down SSL.",
                ca_source,
                code,
            )
            self._native("ldapssl_client_deinit")()
            return self._native_record(
                code,
                "LDAP: Invalid certificate or path: Could not add trusted "
                "cert %s" % ca_source,
            )
        return self._native_record(code)

    def _open_secure(self, hostname: str, port: int) -> Tuple[Any, ErrorRecord]:
        return self._ssl_init(
            "ldapssl_init",
            hostname,
            port,
            "LDAP: SSL not yet supported on this version of the Novell toolkit",
        )
