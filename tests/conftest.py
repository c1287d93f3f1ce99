from functools import partial

import pytest

import ldapkit

NATIVE_FUNCTIONS = (
    "ldap_init",
    "ldap_set_option",
    "ldap_unbind_s",
    "ldap_err2string",
    "ldapssl_client_init",
    "ldapssl_add_trusted_cert",
    "ldapssl_client_deinit",
    "ldapssl_init",
    "ldap_sslinit",
)

CONSTANTS = {
    "LDAP_OPT_X_TLS": 0x6000,
    "LDAP_OPT_X_TLS_CACERTFILE": 0x6002,
    "LDAP_OPT_X_TLS_HARD": 1,
    "LDAPSSL_CERT_FILETYPE_B64": 0x58,
    "LDAPSSL_CERT_FILETYPE_DER": 0x59,
}

TLS_FUNCTIONS = (
    "ldapssl_client_init",
    "ldapssl_add_trusted_cert",
    "ldapssl_client_deinit",
    "ldapssl_init",
    "ldap_sslinit",
)


class FakeHandle:
    """Connection handle of the fake SDK."""

    def __init__(self, host, port, secure=False):
        self.host = host
        self.port = port
        self.secure = secure
        self.unbound = False


def err2string(code):
    return "Success" if code == 0 else "Error %d" % code


class FakeSDK:
    """
    Vendor SDK that records every native call. The functions and
    constants in `exclude` are not exported.
    """

    def __init__(self, exclude=(), ssl_support=True, **results):
        self.calls = []
        self.ssl_support = ssl_support
        self.os_error = 0
        self.results = {
            "ldap_init": lambda host, port: FakeHandle(host, port),
            "ldap_set_option": 0,
            "ldap_unbind_s": self._unbind,
            "ldap_err2string": err2string,
            "ldapssl_client_init": 0,
            "ldapssl_add_trusted_cert": 0,
            "ldapssl_client_deinit": 0,
            "ldapssl_init": lambda host, port, sec: FakeHandle(host, port, True),
            "ldap_sslinit": lambda host, port, sec: FakeHandle(host, port, True),
        }
        self.results.update(results)
        for name in NATIVE_FUNCTIONS:
            if name not in exclude:
                setattr(self, name, partial(self._record, name))
        for name, value in CONSTANTS.items():
            if name not in exclude:
                setattr(self, name, value)

    @staticmethod
    def _unbind(handle):
        handle.unbound = True
        return 0

    def _record(self, name, *args):
        self.calls.append((name, args))
        result = self.results[name]
        return result(*args) if callable(result) else result

    def count(self, name):
        """Return how many times the native function is called."""
        return len([call for call in self.calls if call[0] == name])

    def called(self, name):
        """Return the arguments of every call of the native function."""
        return [args for func, args in self.calls if func == name]

    def get_os_error(self):
        return self.os_error


@pytest.fixture
def sdk():
    """Get a fake SDK that exports everything."""
    return FakeSDK()


@pytest.fixture(autouse=True)
def no_active_toolkit(monkeypatch):
    """Start and finish every test without an active toolkit."""
    for var in ("LDAPKIT_TOOLKIT", "LDAPKIT_LIBRARY", "LDAPKIT_SSL", "LDAPKIT_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    ldapkit.reset_toolkit()
    yield
    ldapkit.reset_toolkit()
    ldapkit.set_debug(False)
