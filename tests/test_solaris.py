import pytest

from ldapkit import CAType, ErrorKind, GenericToolkit, SolarisToolkit, Status


@pytest.mark.parametrize("cls", [SolarisToolkit, GenericToolkit])
def test_install_ca(sdk, cls):
    """ Test that certificate stores cannot be set. """
    toolkit = cls(sdk)
    rec = toolkit.install_ca("/ca.pem", CAType.BASE64)
    assert rec.kind == ErrorKind.CONFIGURATION
    assert rec.status == Status.GENERAL_FAILURE
    assert rec.code == -1
    assert rec.reason.startswith("LDAP: Attempt to set certificate store failed.")
    assert sdk.calls == []
    rec = toolkit.install_ca()
    assert rec.ok
    assert rec.code == 0


@pytest.mark.parametrize("cls", [SolarisToolkit, GenericToolkit])
def test_open_secure(sdk, cls):
    """ Test that SSL connections are not implemented. """
    handle, rec = cls(sdk).open_connection("localhost", 636, True)
    assert handle is None
    assert rec.status == Status.NOT_IMPLEMENTED
    assert rec.code is None
    assert rec.reason
    assert sdk.calls == []
