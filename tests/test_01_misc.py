from schannel.misc import *
from schannel.const import *
from schannel.exceptions import DecodeError
import logging
import pytest


def test_enum():
    # arrange
    val: str = 'TLS 1.2'
    # act
    # noinspection PyArgumentList
    name: str = Protocol(val)
    logging.info(name)
    logging.info(Protocol)
    # assert
    assert name == 'TLS12'
    assert Protocol.TLS12 == val
    assert val in Protocol
    assert 'TLS 9.9' not in Protocol
    # noinspection PyArgumentList
    assert Protocol('TLS 9.9') is None


def test_enum_iter():
    # act
    roles = list(Role)
    # assert
    assert roles == ['Client', 'Server']
    assert len(Flag) == 2
    assert dict(Flag.items()) == {'Enabled': 'Enabled', 'DisabledByDefault': 'DisabledByDefault'}


@pytest.mark.parametrize("val, expected", [
    (None, None),
    (5, 5),
    ('5', 5),
    ('0x1', 1),
    (' 0xFFFFFFFF ', 0xFFFFFFFF),
])
def test_tryint(val, expected):
    assert tryint(val) == expected


@pytest.mark.parametrize("val, expected", [
    (0, 0),
    (1, 1),
    ('0x0', 0),
    (0xFFFFFFFF, MAX32 - 1),
])
def test_todword(val, expected):
    assert todword(val) == expected


@pytest.mark.parametrize("val", [-1, MAX32, 'yes', '', 1.0, True, None, b'\x01'])
def test_todword_bad(val):
    # act
    with pytest.raises(DecodeError) as e:
        todword(val)
    # assert
    logging.info(e.value)


def test_tristate():
    assert tristate(None) == 'unset'
    assert tristate(True) == 'true'
    assert tristate(False) == 'false'


def test_key_constant():
    assert SCHANNEL_PROTOCOLS_KEY.startswith('HKLM\\SYSTEM\\')
    assert SCHANNEL_PROTOCOLS_KEY.endswith('\\SCHANNEL\\Protocols')


@pytest.mark.parametrize("val, expected", [
    ('TLS 1.2', 'TLS 1.2'),
    ('tls 1.2', 'TLS 1.2'),
    ('MULTI-PROTOCOL UNIFIED HELLO', 'Multi-Protocol Unified Hello'),
    ('TLS 9.9', None),
    (None, None),
])
def test_enum_lookup(val, expected):
    # act
    retval = Protocol.lookup(val)
    logging.info(retval)
    # assert
    assert retval == expected
    assert Role.lookup('client') == Role.Client
    assert Flag.lookup('disabledbydefault') == Flag.DisabledByDefault
