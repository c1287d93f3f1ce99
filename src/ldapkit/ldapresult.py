"""
.. module:: ldapresult
   :platform: Unix, Windows
   :synopsis: Per-call diagnostic records of the toolkit operations.

"""
import os
from enum import IntEnum
from typing import Optional

from .errors import (
    ConfigurationError,
    ConnectionError,
    NotSupported,
    _get_error,
)


class Status(IntEnum):
    """ Enumeration for the status of a toolkit operation. """

    SUCCESS = 0  #: The operation succeeded.
    GENERAL_FAILURE = 1  #: Configuration or vendor error.
    NOT_IMPLEMENTED = 2  #: The capability is missing from the toolkit.
    OS_ERROR = 3  #: The toolkit failed without a result code.


class ErrorKind(IntEnum):
    """ Enumeration for what produced the content of an ErrorRecord. """

    SUCCESS = 0  #: Native success, or no native call was necessary.
    CONFIGURATION = 1  #: Refused before calling the vendor.
    VENDOR = 2  #: A native call was made and it failed.
    NOT_IMPLEMENTED = 3  #: The toolkit lacks the capability.
    OS_ERROR = 4  #: The native call left an OS level error behind.


_STATUS_BY_KIND = {
    ErrorKind.SUCCESS: Status.SUCCESS,
    ErrorKind.CONFIGURATION: Status.GENERAL_FAILURE,
    ErrorKind.VENDOR: Status.GENERAL_FAILURE,
    ErrorKind.NOT_IMPLEMENTED: Status.NOT_IMPLEMENTED,
    ErrorKind.OS_ERROR: Status.OS_ERROR,
}


class ErrorRecord:
    """
    Diagnostic record of a single toolkit operation. Every public
    operation creates a new record and the record is not changed after
    the operation returned.

    Use the classmethods to create a record instead of calling the
    constructor directly.

    :param ErrorKind kind: the kind of the outcome.
    :param int|None code: the native result code, -1 if no native call \
    was made.
    :param str|None message: the vendor's decoding of `code`.
    :param str|None reason: the explanation set by ldapkit.
    :param int os_error: the OS error number of a failed connection attempt.
    """

    __slots__ = ("__kind", "__code", "__message", "__reason", "__os_error")

    def __init__(
        self,
        kind: ErrorKind,
        code: Optional[int] = None,
        message: Optional[str] = None,
        reason: Optional[str] = None,
        os_error: int = 0,
    ) -> None:
        """Init method."""
        self.__kind = ErrorKind(kind)
        self.__code = code
        self.__message = message
        self.__reason = reason
        self.__os_error = os_error

    @classmethod
    def success(
        cls,
        code: Optional[int] = None,
        message: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> "ErrorRecord":
        """ Create a record of a successful operation. """
        return cls(ErrorKind.SUCCESS, code, message, reason)

    @classmethod
    def configuration(cls, reason: str) -> "ErrorRecord":
        """ Create a record of a request refused before any native call. """
        return cls(ErrorKind.CONFIGURATION, -1, None, reason)

    @classmethod
    def vendor(
        cls, code: int, message: Optional[str], reason: Optional[str] = None
    ) -> "ErrorRecord":
        """ Create a record of a failed native call. """
        return cls(ErrorKind.VENDOR, code, message, reason)

    @classmethod
    def not_implemented(cls, reason: Optional[str] = None) -> "ErrorRecord":
        """ Create a record of a capability missing from the toolkit. """
        return cls(ErrorKind.NOT_IMPLEMENTED, reason=reason)

    @classmethod
    def from_os_error(cls, os_error: int) -> "ErrorRecord":
        """ Create a record from the OS error left by a native call. """
        reason = os.strerror(os_error) if os_error else "Unknown OS error"
        return cls(ErrorKind.OS_ERROR, reason=reason, os_error=os_error)

    def __setattr__(self, attr: str, value: object) -> None:
        if hasattr(self, "_ErrorRecord__os_error"):
            raise AttributeError("ErrorRecord is read-only.")
        super().__setattr__(attr, value)

    def __delattr__(self, attr: str) -> None:
        """None of the attributes can be deleted."""
        raise AttributeError("%s cannot be deleted." % attr)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorRecord):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.code == other.code
            and self.message == other.message
            and self.reason == other.reason
            and self.os_error == other.os_error
        )

    def __repr__(self) -> str:
        return "<ErrorRecord kind={} code={!r} message={!r} reason={!r}>".format(
            self.kind.name, self.code, self.message, self.reason
        )

    def raise_for_status(self) -> "ErrorRecord":
        """
        Raise the exception that matches the record, if the operation
        failed.

        :return: the record itself on success.
        :raises ConfigurationError: if no native call was made.
        :raises NotSupported: if the capability is missing.
        :raises ConnectionError: if the toolkit failed with an OS error.
        :raises LDAPError: if a native call failed.
        """
        text = self.reason or self.message or ""
        if self.kind == ErrorKind.CONFIGURATION:
            raise ConfigurationError(text)
        elif self.kind == ErrorKind.NOT_IMPLEMENTED:
            raise NotSupported(text or "Not implemented by the toolkit.")
        elif self.kind == ErrorKind.OS_ERROR:
            raise ConnectionError(text, self.os_error)
        elif self.kind == ErrorKind.VENDOR:
            raise _get_error(self.code)(text)
        return self

    @property
    def kind(self) -> ErrorKind:
        """ The kind of the outcome. """
        return self.__kind

    @property
    def status(self) -> Status:
        """ The status that matches the kind of the outcome. """
        return _STATUS_BY_KIND[self.__kind]

    @property
    def ok(self) -> bool:
        """ True if the operation succeeded. """
        return self.__kind == ErrorKind.SUCCESS

    @property
    def code(self) -> Optional[int]:
        """ The native result code, -1 if no native call was made. """
        return self.__code

    @property
    def message(self) -> Optional[str]:
        """ The vendor's decoding of the result code. """
        return self.__message

    @property
    def reason(self) -> Optional[str]:
        """ Human readable explanation of the outcome. """
        return self.__reason

    @property
    def os_error(self) -> int:
        """ The OS error number of a failed connection attempt. """
        return self.__os_error
