"""
.. module:: toolkit
   :platform: Unix, Windows
   :synopsis: Toolkit independent SSL and connection initialisation.

"""
import logging
import os
import sys
from abc import ABCMeta, abstractmethod
from enum import IntEnum
from typing import Any, Callable, Dict, Optional, Tuple, Type, Union

from .ldapresult import ErrorRecord, Status
from .native import NativeSDK, get_os_error

logger = logging.getLogger(__name__)

LDAP_SUCCESS = 0

_TOOLKITS: Dict[str, Type["Toolkit"]] = {}
_ACTIVE: Optional["Toolkit"] = None


class CAType(IntEnum):
    """ Enumeration for the format of a certificate authority file. """

    UNKNOWN = 0  #: Unspecified, or the certs are in a registry store.
    DER = 1  #: Binary DER encoded certificate.
    BASE64 = 2  #: PEM (base64) encoded certificate.
    CERT7_DB = 3  #: Netscape/Mozilla cert7.db certificate database.


class Toolkit(metaclass=ABCMeta):
    """
    Base class of the vendor toolkits. A toolkit wraps one vendor SDK
    object and translates the toolkit independent operations to the
    vendor's native calls.

    The SDK can be any object that has the vendor's native functions and
    constants as attributes. A missing attribute means that the SDK
    lacks the capability.

    :param sdk: the vendor SDK object. If it's None, the toolkit's native \
    shared library is loaded.
    :param bool|None ssl: set False to use the toolkit without SSL \
    support. If it's None, the SDK's `ssl_support` attribute decides.
    :param str|None library: path of the shared library to load, when \
    `sdk` is None.
    """

    name = "other"
    vendor_name = "Unknown"
    sdk_class: Type[NativeSDK] = NativeSDK

    def __init__(
        self,
        sdk: Any = None,
        ssl: Optional[bool] = None,
        library: Optional[str] = None,
    ) -> None:
        """Init method."""
        if ssl is not None and not isinstance(ssl, bool):
            raise TypeError("The ssl parameter must be bool or None.")
        if sdk is None:
            sdk = self.sdk_class(library)
        self.__sdk = sdk
        self.__ssl = bool(getattr(sdk, "ssl_support", True)) if ssl is None else ssl

    def __repr__(self) -> str:
        return "<{0}.{1} vendor={2!r} ssl={3}>".format(
            self.__module__, self.__class__.__name__, self.vendor_name, self.__ssl
        )

    @property
    def sdk(self) -> Any:
        """ The wrapped vendor SDK. """
        return self.__sdk

    @property
    def ssl_support(self) -> bool:
        """ True if the toolkit is used with SSL support. """
        return self.__ssl

    def provides(self, name: str) -> bool:
        """
        Check that the SDK has a native function or constant.

        :param str name: the name of the function or constant.
        :return: True if the SDK provides it.
        """
        return getattr(self.__sdk, name, None) is not None

    def _native(self, name: str) -> Callable[..., Any]:
        func = getattr(self.__sdk, name)
        logger.debug("%s: dispatching native %s()", self.name, name)
        return func

    def _err2string(self, code: int) -> Optional[str]:
        if not self.provides("ldap_err2string"):
            return None
        return self._native("ldap_err2string")(code)

    def _native_record(self, code: int, reason: Optional[str] = None) -> ErrorRecord:
        """
        Create the record of a native result code. The code is decoded
        even on success.
        """
        message = self._err2string(code)
        if code == LDAP_SUCCESS:
            return ErrorRecord.success(code, message)
        return ErrorRecord.vendor(code, message, reason)

    def _ssl_init(
        self, func_name: str, hostname: str, port: int, reason: str
    ) -> Tuple[Any, ErrorRecord]:
        """ Open a connection with a dedicated SSL init function. """
        if not self.provides(func_name):
            return None, ErrorRecord.not_implemented(reason)
        # Fail closed: the server cert must be trusted.
        handle = self._native(func_name)(hostname, port, 1)
        return handle, ErrorRecord.success(LDAP_SUCCESS)

    def install_ca(
        self,
        ca_source: Optional[str] = None,
        ca_type: Union[CAType, int] = CAType.UNKNOWN,
    ) -> ErrorRecord:
        """
        Initialise SSL on the toolkit and install a certificate authority
        into its trust store.

        Multiple CA certificates can be installed by calling the method
        more than once. The best practice is calling it once without
        `ca_source`, followed by one call for every certificate:

            toolkit.install_ca()
            toolkit.install_ca("/etc/ssl/ca1.pem", CAType.BASE64)
            toolkit.install_ca("/etc/ssl/ca2.pem", CAType.BASE64)

        Installing a single certificate with only one call is also
        supported.

        .. note::
           Several vendor SDKs keep their SSL context process wide. The
           calls of this method have to be serialised by the caller.

        :param str|None ca_source: path of the CA certificate or \
        certificate database. None means SSL initialisation only.
        :param CAType ca_type: the format of the `ca_source`.
        :raises TypeError: if `ca_source` is not a string or None.
        :raises ValueError: if `ca_type` is not a valid CAType.
        :return: the record of the operation.
        """
        if ca_source is not None and not isinstance(ca_source, str):
            raise TypeError("The ca_source parameter must be string or None.")
        ca_type = CAType(ca_type)
        if not self.__ssl:
            if ca_source:
                return ErrorRecord.configuration(
                    "LDAP: Attempt to set certificate store failed. "
                    "Not built with SSL support"
                )
            return self._native_record(LDAP_SUCCESS)
        record = self._install_ca(ca_source or None, ca_type)
        if record.ok:
            logger.debug(
                "%s: installed certificate authority %r (%s).",
                self.name,
                ca_source,
                ca_type.name,
            )
        else:
            logger.debug("%s: certificate authority not set: %r", self.name, record)
        return record

    @abstractmethod
    def _install_ca(self, ca_source: Optional[str], ca_type: CAType) -> ErrorRecord:
        raise NotImplementedError

    def teardown_ca(self) -> Status:
        """
        Tear down the SSL certificate setup previously set with
        :meth:`Toolkit.install_ca`. Call it before a graceful restart of
        a service.

        :return: always :attr:`Status.SUCCESS`.
        """
        if self.__ssl and self.provides("ldapssl_client_deinit"):
            self._native("ldapssl_client_deinit")()
        return Status.SUCCESS

    def open_connection(
        self, hostname: str, port: int, secure: bool = False
    ) -> Tuple[Any, ErrorRecord]:
        """
        Create a connection handle in a toolkit independent way, with or
        without SSL. The certificate setup has to be done before with
        :meth:`Toolkit.install_ca`.

        :param str hostname: the host to connect to.
        :param int port: the port number.
        :param bool secure: set True for an SSL/TLS connection.
        :raises TypeError: if any of the parameters has a wrong type.
        :raises ValueError: if the port is out of range.
        :return: a tuple of `(handle, record)`. The `handle` is None, \
        if the connection is not created.
        """
        if not isinstance(hostname, str):
            raise TypeError("The hostname parameter must be string.")
        if not isinstance(port, int) or isinstance(port, bool):
            raise TypeError("The port parameter must be int.")
        if port < 0 or port > 65535:
            raise ValueError("Port must be an int between 0 and 65535.")
        if not isinstance(secure, bool):
            raise TypeError("The secure parameter must be bool.")
        if not secure:
            if not self.provides("ldap_init"):
                return None, ErrorRecord.not_implemented(
                    "LDAP: ldap_init() is not provided by this SDK"
                )
            handle = self._native("ldap_init")(hostname, port)
            record = ErrorRecord.success(LDAP_SUCCESS)
        else:
            if not self.__ssl:
                return None, ErrorRecord.not_implemented(
                    "LDAP: SSL not supported, the toolkit is used without "
                    "SSL support"
                )
            handle, record = self._open_secure(hostname, port)
            if not record.ok:
                return None, record
        if handle is None:
            # The SDK signals the failure only with the OS error.
            os_error = getattr(self.__sdk, "get_os_error", get_os_error)()
            logger.debug(
                "%s: no handle for %s:%d, errno %d", self.name, hostname, port, os_error
            )
            return None, ErrorRecord.from_os_error(os_error)
        return handle, record

    @abstractmethod
    def _open_secure(self, hostname: str, port: int) -> Tuple[Any, ErrorRecord]:
        raise NotImplementedError

    def describe(self) -> ErrorRecord:
        """
        Describe the toolkit in the returned record's `reason`.

        :return: the record of the operation.
        """
        return ErrorRecord.success(
            reason="LDAP: Built with {0} LDAP SDK".format(self.vendor_name)
        )


def register_toolkit(
    name: str, *aliases: str
) -> Callable[[Type[Toolkit]], Type[Toolkit]]:
    """
    Class decorator for registering a toolkit under a name and its
    aliases.

    :param str name: the name of the toolkit.
    :param aliases: additional names of the toolkit.
    """

    def decorator(cls: Type[Toolkit]) -> Type[Toolkit]:
        if not issubclass(cls, Toolkit):
            raise TypeError("Class must be a subclass of Toolkit.")
        cls.name = name
        for key in (name,) + aliases:
            _TOOLKITS[key.lower()] = cls
        return cls

    return decorator


def get_toolkit_class(name: str) -> Type[Toolkit]:
    """
    Get a registered toolkit class by its name.

    :param str name: the name or alias of the toolkit.
    :raises TypeError: if the name is not a string.
    :raises ValueError: if no toolkit is registered with the name.
    """
    if not isinstance(name, str):
        raise TypeError("The toolkit name must be a string.")
    try:
        return _TOOLKITS[name.lower()]
    except KeyError:
        raise ValueError("'%s' is not a known LDAP toolkit." % name) from None


def set_toolkit(
    toolkit: Union[Toolkit, str],
    sdk: Any = None,
    ssl: Optional[bool] = None,
    library: Optional[str] = None,
) -> Toolkit:
    """
    Set the active toolkit for the module level functions.

    :param Toolkit|str toolkit: a toolkit object, or the name of a \
    registered toolkit.
    :param sdk: the vendor SDK object for a toolkit set by name.
    :param bool|None ssl: SSL support for a toolkit set by name.
    :param str|None library: shared library path for a toolkit set by name.
    :raises TypeError: if `toolkit` is neither a Toolkit nor a string.
    :raises ValueError: if the name is not a registered toolkit.
    :return: the active toolkit.
    """
    global _ACTIVE
    if isinstance(toolkit, str):
        toolkit = get_toolkit_class(toolkit)(sdk, ssl, library)
    elif not isinstance(toolkit, Toolkit):
        raise TypeError("Toolkit must be a Toolkit object or a toolkit name.")
    logger.debug("Active LDAP toolkit: %r", toolkit)
    _ACTIVE = toolkit
    return toolkit


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in ("", "0", "false", "no", "off")


def get_toolkit() -> Toolkit:
    """
    Get the active toolkit. If it's not set yet, it's chosen by the
    environment variables:

    * `LDAPKIT_TOOLKIT`: the name of the toolkit (default: `microsoft` \
      on Windows, `openldap` elsewhere),
    * `LDAPKIT_LIBRARY`: path to the vendor's shared library,
    * `LDAPKIT_SSL`: set `0` to use the toolkit without SSL support,
    * `LDAPKIT_DEBUG`: set `1` to turn on debug logging.

    :raises OSError: if the vendor's shared library cannot be loaded.
    :return: the active toolkit.
    """
    if _ACTIVE is not None:
        return _ACTIVE
    if _env_flag(os.environ.get("LDAPKIT_DEBUG", "")):
        from .utils import set_debug

        set_debug(True)
    default = "microsoft" if sys.platform == "win32" else "openldap"
    name = os.environ.get("LDAPKIT_TOOLKIT") or default
    ssl = os.environ.get("LDAPKIT_SSL")
    return set_toolkit(
        name,
        ssl=_env_flag(ssl) if ssl is not None else None,
        library=os.environ.get("LDAPKIT_LIBRARY") or None,
    )


def reset_toolkit() -> None:
    """ Forget the active toolkit. The next use resolves it again. """
    global _ACTIVE
    _ACTIVE = None


def install_ca(
    ca_source: Optional[str] = None, ca_type: Union[CAType, int] = CAType.UNKNOWN
) -> ErrorRecord:
    """
    Install a certificate authority with the active toolkit. See
    :meth:`Toolkit.install_ca`.
    """
    return get_toolkit().install_ca(ca_source, ca_type)


def teardown_ca() -> Status:
    """
    Tear down the SSL setup of the active toolkit. See
    :meth:`Toolkit.teardown_ca`.
    """
    return get_toolkit().teardown_ca()


def open_connection(
    hostname: str, port: int, secure: bool = False
) -> Tuple[Any, ErrorRecord]:
    """
    Create a connection handle with the active toolkit. See
    :meth:`Toolkit.open_connection`.
    """
    return get_toolkit().open_connection(hostname, port, secure)


def describe_toolkit() -> ErrorRecord:
    """ Describe the active toolkit. See :meth:`Toolkit.describe`. """
    return get_toolkit().describe()
