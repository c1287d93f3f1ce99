import pytest
from conftest import FakeSDK, TLS_FUNCTIONS

from ldapkit import CAType, ErrorKind, OpenLDAPToolkit, Status


def test_install_ca(sdk):
    """ Test setting the CA cert file as a global option. """
    rec = OpenLDAPToolkit(sdk).install_ca("/etc/ssl/ca.pem", CAType.BASE64)
    assert rec.ok
    assert rec.code == 0
    assert rec.message == "Success"
    assert sdk.called("ldap_set_option") == [(None, 0x6002, "/etc/ssl/ca.pem")]


@pytest.mark.parametrize("ca_type", [CAType.DER, CAType.CERT7_DB, CAType.UNKNOWN])
def test_install_ca_invalid_type(sdk, ca_type):
    """ Test that only BASE64 files are accepted. """
    rec = OpenLDAPToolkit(sdk).install_ca("/ca.der", ca_type)
    assert rec.kind == ErrorKind.CONFIGURATION
    assert rec.code == -1
    assert rec.message is None
    assert rec.reason == "LDAP: Invalid certificate type: BASE64 type required"
    assert sdk.calls == []


def test_install_ca_not_supported():
    """ Test an SDK without the CA cert file option. """
    sdk = FakeSDK(exclude=("LDAP_OPT_X_TLS_CACERTFILE",))
    rec = OpenLDAPToolkit(sdk).install_ca("/ca.pem", CAType.BASE64)
    assert rec.status == Status.GENERAL_FAILURE
    assert rec.code == -1
    assert "LDAP_OPT_X_TLS_CACERTFILE" in rec.reason
    assert sdk.calls == []


def test_install_ca_failed():
    """ Test a failing ldap_set_option. """
    sdk = FakeSDK(ldap_set_option=-1)
    rec = OpenLDAPToolkit(sdk).install_ca("/ca.pem", CAType.BASE64)
    assert rec.kind == ErrorKind.VENDOR
    assert rec.code == -1
    assert rec.message == "Error -1"


def test_install_multiple(sdk):
    """ Test setup call followed by two certificates. """
    toolkit = OpenLDAPToolkit(sdk)
    first = toolkit.install_ca(None, CAType.UNKNOWN)
    second = toolkit.install_ca("/ca1.pem", CAType.BASE64)
    third = toolkit.install_ca("/ca2.pem", CAType.BASE64)
    for rec in (first, second, third):
        assert rec.ok
        assert rec.status == Status.SUCCESS
        assert rec.code == 0
    assert first is not second and second is not third
    assert sdk.count("ldap_set_option") == 2


def test_open_plain(sdk):
    """ Test that plain connections don't set TLS options. """
    handle, rec = OpenLDAPToolkit(sdk).open_connection("localhost", 389)
    assert rec.ok
    assert sdk.count("ldap_set_option") == 0
    assert all(func not in TLS_FUNCTIONS for func, _ in sdk.calls)


def test_open_secure(sdk):
    """ Test opening a connection with the hard TLS option. """
    handle, rec = OpenLDAPToolkit(sdk).open_connection("localhost", 636, True)
    assert rec.ok
    assert rec.code == 0
    assert handle.host == "localhost"
    assert handle.unbound is False
    assert sdk.called("ldap_set_option") == [(handle, 0x6000, 1)]


def test_open_secure_option_failed():
    """ Test that the connection is released if TLS cannot be set. """
    sdk = FakeSDK(ldap_set_option=-12)
    handle, rec = OpenLDAPToolkit(sdk).open_connection("localhost", 636, True)
    assert handle is None
    assert rec.kind == ErrorKind.VENDOR
    assert rec.status == Status.GENERAL_FAILURE
    assert rec.code == -12
    assert rec.message == "Error -12"
    assert rec.reason == "LDAP: ldap_set_option - LDAP_OPT_X_TLS_HARD failed"
    unbound = sdk.called("ldap_unbind_s")
    assert len(unbound) == 1
    assert unbound[0][0].unbound is True


def test_open_secure_not_supported():
    """ Test an SDK without the LDAP_OPT_X_TLS option. """
    sdk = FakeSDK(exclude=("LDAP_OPT_X_TLS",))
    handle, rec = OpenLDAPToolkit(sdk).open_connection("localhost", 636, True)
    assert handle is None
    assert rec.status == Status.NOT_IMPLEMENTED
    assert "OpenLDAP" in rec.reason
    assert sdk.calls == []


def test_open_secure_init_failed():
    """ Test the OS error fallback when ldap_init returns NULL. """
    sdk = FakeSDK(ldap_init=None)
    sdk.os_error = 22
    handle, rec = OpenLDAPToolkit(sdk).open_connection("localhost", 636, True)
    assert handle is None
    assert rec.status == Status.OS_ERROR
    assert rec.os_error == 22
    assert sdk.count("ldap_set_option") == 0
