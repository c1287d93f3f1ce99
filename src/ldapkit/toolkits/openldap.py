import logging
from typing import Any, Optional, Tuple

from ..ldapresult import ErrorRecord
from ..native import OpenLDAPSDK
from ..toolkit import LDAP_SUCCESS, CAType, Toolkit, register_toolkit

logger = logging.getLogger(__name__)


@register_toolkit("openldap")
class OpenLDAPToolkit(Toolkit):
    """
    Toolkit for the OpenLDAP libldap library. The CA certificate file is
    set as a global TLS option, secure connections are plain connections
    with the hard TLS option set on them.
    """

    vendor_name = "OpenLDAP"
    sdk_class = OpenLDAPSDK

    def _install_ca(self, ca_source: Optional[str], ca_type: CAType) -> ErrorRecord:
        if ca_source is None:
            return self._native_record(LDAP_SUCCESS)
        if not (
            self.provides("LDAP_OPT_X_TLS_CACERTFILE")
            and self.provides("ldap_set_option")
        ):
            return ErrorRecord.configuration(
                "LDAP: LDAP_OPT_X_TLS_CACERTFILE not defined by this OpenLDAP "
                "SDK. Certificate authority file not set"
            )
        if ca_type != CAType.BASE64:
            return ErrorRecord.configuration(
                "LDAP: Invalid certificate type: BASE64 type required"
            )
        code = self._native("ldap_set_option")(
            None, self.sdk.LDAP_OPT_X_TLS_CACERTFILE, ca_source
        )
        return self._native_record(
            code, "LDAP: Could not set certificate authority file %s" % ca_source
        )

    def _open_secure(self, hostname: str, port: int) -> Tuple[Any, ErrorRecord]:
        if not (
            self.provides("LDAP_OPT_X_TLS")
            and self.provides("ldap_init")
            and self.provides("ldap_set_option")
        ):
            return None, ErrorRecord.not_implemented(
                "LDAP: SSL not yet supported on this version of the OpenLDAP "
                "toolkit"
            )
        handle = self._native("ldap_init")(hostname, port)
        if handle is None:
            return None, ErrorRecord.success(LDAP_SUCCESS)
        mode = getattr(self.sdk, "LDAP_OPT_X_TLS_HARD", 1)
        code = self._native("ldap_set_option")(handle, self.sdk.LDAP_OPT_X_TLS, mode)
        if code != LDAP_SUCCESS:
            logger.warning(
                "Setting hard TLS on %s:%d failed (%d), unbinding.",
                hostname,
                port,
                code,
            )
            if self.provides("ldap_unbind_s"):
                self._native("ldap_unbind_s")(handle)
            return None, ErrorRecord.vendor(
                code,
                self._err2string(code),
                "LDAP: ldap_set_option - LDAP_OPT_X_TLS_HARD failed",
            )
        return handle, ErrorRecord.success(code)
