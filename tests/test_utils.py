import logging

import pytest
from conftest import FakeSDK

import ldapkit
from ldapkit.utils import get_vendor_info, has_ssl_support, set_debug


def test_set_debug():
    """ Test setting debug mode. """
    logger = logging.getLogger("ldapkit")
    with pytest.raises(TypeError):
        set_debug("true")
    set_debug(True)
    assert logger.level == logging.DEBUG
    assert any(isinstance(hdl, logging.StreamHandler) for hdl in logger.handlers)
    set_debug(True)
    handlers = len(logger.handlers)
    set_debug(False)
    assert logger.level == logging.NOTSET
    assert len(logger.handlers) == handlers - 1


def test_debug_messages(caplog):
    """ Test logging the native calls. """
    caplog.set_level(logging.DEBUG, logger="ldapkit")
    sdk = FakeSDK()
    ldapkit.set_toolkit("openldap", sdk)
    ldapkit.open_connection("localhost", 389)
    assert "dispatching native ldap_init()" in caplog.text


def test_rollback_warning(caplog):
    """ Test that rollbacks are logged as warnings. """
    sdk = FakeSDK(ldapssl_add_trusted_cert=0x59)
    ldapkit.NovellToolkit(sdk).install_ca("/ca.pem", ldapkit.CAType.BASE64)
    assert any(
        rec.levelno == logging.WARNING and "/ca.pem" in rec.getMessage()
        for rec in caplog.records
    )


def test_vendor_info():
    """ Test vendor information. """
    ldapkit.set_toolkit("novell", FakeSDK())
    assert get_vendor_info() == ("novell", "Novell")
    ldapkit.set_toolkit("winldap", FakeSDK())
    assert get_vendor_info() == ("microsoft", "Microsoft")


def test_has_ssl_support():
    """ Test SSL support of the active toolkit. """
    ldapkit.set_toolkit("openldap", FakeSDK())
    assert has_ssl_support() is True
    ldapkit.set_toolkit("openldap", FakeSDK(ssl_support=False))
    assert has_ssl_support() is False
