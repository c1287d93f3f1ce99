from typing import Optional, Type


class LDAPError(Exception):
    """General LDAP toolkit error."""

    code = 0

    @classmethod
    def create(cls, code: int) -> Type["LDAPError"]:
        """ Create a new LDAPError type with `code` error code. """
        return type(cls.__name__, (cls,), {"code": code})

    @property
    def hexcode(self) -> int:
        """ Error code in 16 bit length hexadecimal format. """
        return (self.code + (1 << 16)) % (1 << 16)

    def __str__(self) -> str:
        return "{} (0x{:04X} [{:d}])".format(
            self.args[0] if self.args else "", self.hexcode, self.code
        )


class ConfigurationError(LDAPError):
    """
    Raised, when the requested certificate type, capability or toolkit
    combination is not supported, and no native call was made.
    """

    code = -1


class NotSupported(LDAPError):
    """Raised, when the capability is not available in the loaded toolkit."""

    code = -12


class ConnectionError(LDAPError):
    """Raised, when the toolkit is not able to create the connection."""

    code = -1

    def __init__(self, msg: Optional[str] = None, os_error: int = 0) -> None:
        super().__init__(msg)
        self.os_error = os_error


class LocalError(LDAPError):
    """Raised, when the toolkit fails locally, without contacting a server."""

    code = -2


class ParamError(LDAPError):
    """Raised, when a native function is called with invalid parameters."""

    code = -9


class NoMemory(LDAPError):
    """Raised, when the toolkit cannot allocate memory."""

    code = -10


def _get_error(code: int) -> Type[LDAPError]:
    """ Return an error by code number. """
    if code == -1 or code == 0x51 or code == -11 or code == 0x5B:
        # Netscape and WinLDAP return 0x51 for Server Down.
        # OpenLDAP returns -11 for Connection error.
        return ConnectionError.create(code)
    elif code == -2 or code == 0x52:
        return LocalError.create(code)
    elif code == -9 or code == 0x59:
        return ParamError.create(code)
    elif code == -10 or code == 0x5A:
        return NoMemory.create(code)
    elif code == -12 or code == 0x5C:
        return NotSupported.create(code)
    else:
        return LDAPError.create(code)
