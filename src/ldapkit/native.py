"""
.. module:: native
   :platform: Unix, Windows
   :synopsis: ctypes bindings of the vendor LDAP SDK libraries.

"""
import ctypes
import logging
import sys
from ctypes import byref, c_char_p, c_int, c_uint, c_void_p
from ctypes.util import find_library
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

_PROTOTYPES: Dict[str, Tuple[Any, List[Any]]] = {
    "ldap_init": (c_void_p, [c_char_p, c_int]),
    "ldap_set_option": (c_int, [c_void_p, c_int, c_void_p]),
    "ldap_unbind_s": (c_int, [c_void_p]),
    "ldap_err2string": (c_char_p, [c_int]),
    "ldapssl_client_init": (c_int, [c_char_p, c_void_p]),
    "ldapssl_add_trusted_cert": (c_int, [c_void_p, c_int]),
    "ldapssl_client_deinit": (c_int, []),
    "ldapssl_init": (c_void_p, [c_char_p, c_int, c_int]),
    "ldap_sslinit": (c_void_p, [c_char_p, c_uint, c_int]),
}


def get_os_error() -> int:
    """ Return the OS error number saved by the last native call. """
    if sys.platform == "win32":
        return ctypes.get_last_error()
    return ctypes.get_errno()


def _to_native(arg: Any) -> Any:
    if isinstance(arg, str):
        return arg.encode("utf-8")
    return arg


def _set_option_args(args: Sequence[Any]) -> List[Any]:
    handle, option, value = args
    if isinstance(value, int) and not isinstance(value, bool):
        # Integer options are passed by reference.
        value = byref(c_int(value))
    return [handle, option, _to_native(value)]


class NativeSDK:
    """
    A vendor LDAP SDK loaded from a shared library with ctypes. The
    native functions of the library are available as attributes with
    the same name. Functions that the loaded library does not export are
    missing, accessing them raises AttributeError.

    :param str|None path: explicit path of the shared library. If it's \
    None, the library is searched by the names in :attr:`libraries`.
    :raises OSError: if the library cannot be loaded.
    """

    vendor_name = "Unknown"
    #: Library names for :func:`ctypes.util.find_library`.
    libraries: Tuple[str, ...] = ("ldap",)
    #: Exported symbols that signal SSL support.
    ssl_symbols: Tuple[str, ...] = ("ldap_start_tls_s", "ldapssl_init", "ldap_sslinit")
    stdcall = False

    def __init__(self, path: Optional[str] = None) -> None:
        """Init method."""
        self._lib = self._load(path)
        self._funcs: Dict[str, Callable[..., Any]] = {}
        for name, (restype, argtypes) in _PROTOTYPES.items():
            try:
                func = getattr(self._lib, name)
            except AttributeError:
                continue
            func.restype = restype
            func.argtypes = argtypes
            self._funcs[name] = func
        logger.debug(
            "Loaded %s LDAP SDK with: %s", self.vendor_name, ", ".join(self._funcs)
        )

    def _load(self, path: Optional[str]) -> Any:
        if path is not None:
            candidates = [path]
        else:
            candidates = [find_library(name) for name in self.libraries]
        loader = ctypes.WinDLL if self.stdcall else ctypes.CDLL  # type: ignore
        for candidate in filter(None, candidates):
            try:
                if self.stdcall:
                    return loader(candidate, use_last_error=True)
                return loader(candidate, use_errno=True)
            except OSError as exc:
                logger.debug("Failed to load %s: %s", candidate, exc)
        raise OSError(
            "Cannot load the {0} LDAP SDK (tried: {1}).".format(
                self.vendor_name, path or ", ".join(self.libraries)
            )
        )

    def __getattr__(self, name: str) -> Any:
        try:
            func = self.__dict__["_funcs"][name]
        except KeyError:
            raise AttributeError(
                "'{0}' is not exported by the {1} LDAP SDK.".format(
                    name, self.vendor_name
                )
            ) from None
        return partial(self._call, name, func)

    @staticmethod
    def _call(name: str, func: Callable[..., Any], *args: Any) -> Any:
        if name == "ldap_set_option":
            native_args = _set_option_args(args)
        else:
            native_args = [_to_native(arg) for arg in args]
        result = func(*native_args)
        if isinstance(result, bytes):
            return result.decode("utf-8", "replace")
        return result

    @property
    def exports(self) -> List[str]:
        """ Names of the native functions that the library exports. """
        return list(self._funcs)

    @property
    def ssl_support(self) -> bool:
        """ True if the library exports any SSL related function. """
        return any(hasattr(self._lib, name) for name in self.ssl_symbols)

    def get_os_error(self) -> int:
        """ Return the OS error number saved by the last native call. """
        return get_os_error()


class OpenLDAPSDK(NativeSDK):
    """ The OpenLDAP libldap library. """

    vendor_name = "OpenLDAP"
    libraries = ("ldap", "ldap-2.5", "ldap_r")
    ssl_symbols = ("ldap_start_tls_s",)
    LDAP_OPT_X_TLS = 0x6000
    LDAP_OPT_X_TLS_CACERTFILE = 0x6002
    LDAP_OPT_X_TLS_HARD = 1


class NetscapeSDK(NativeSDK):
    """ The Netscape/Mozilla LDAP C SDK. """

    vendor_name = "Netscape"
    libraries = ("ssldap60", "ldap60", "ssldap50", "ldapssl41")
    ssl_symbols = ("ldapssl_init", "ldapssl_client_init")


class NovellSDK(NativeSDK):
    """ The Novell LDAP Libraries for C. """

    vendor_name = "Novell"
    libraries = ("ldapssl", "ldapsdk")
    ssl_symbols = ("ldapssl_init", "ldapssl_client_init")
    LDAPSSL_CERT_FILETYPE_B64 = 0x58
    LDAPSSL_CERT_FILETYPE_DER = 0x59


class MicrosoftSDK(NativeSDK):
    """ The WinLDAP (wldap32) library of Windows. """

    vendor_name = "Microsoft"
    libraries = ("wldap32",)
    ssl_symbols = ("ldap_sslinit",)
    stdcall = sys.platform == "win32"


class SolarisSDK(NativeSDK):
    """ The LDAP library of Sun Solaris. """

    vendor_name = "Solaris"
    libraries = ("ldap",)
    ssl_symbols = ("ldapssl_init", "ldapssl_client_init")
