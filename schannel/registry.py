r"""
Codec between ProtocolState and the SCHANNEL registry layout:

    <SCHANNEL_PROTOCOLS_KEY>\<protocol>\Client     Enabled, DisabledByDefault (DWORD)
    <SCHANNEL_PROTOCOLS_KEY>\<protocol>\Server     Enabled, DisabledByDefault (DWORD)

Values are plain mappings {role: {flag: dword}}, nothing here touches a real registry.
"""
from typing import Dict, Mapping, Any, Optional
from logging import Logger, getLogger
from .const import Role, Flag, SCHANNEL_PROTOCOLS_KEY, DWORD_TRUE, DWORD_FALSE
from .exceptions import DecodeError
from .misc import todword
from .protocol_state import ProtocolState

__all__ = ['RegValues', 'encode', 'decode', 'key_path']

RegValues = Dict[str, Dict[str, int]]

_logger: Logger = getLogger(__name__)


def key_path(protocol: str, role: str) -> str:
    return '\\'.join((SCHANNEL_PROTOCOLS_KEY, protocol, role))


def encode(state: ProtocolState) -> RegValues:
    """
    Dump state to registry values. Unset flags are omitted, as well as roles without any flag set.
    :param state:
        ProtocolState object
    :return:
        {role: {flag: 0 or 1}}
    """
    values: RegValues = {}
    for role in Role:
        for flag in Flag:
            value: Optional[bool] = state.get(role, flag)
            if value is not None:
                values.setdefault(role, {})[flag] = DWORD_TRUE if value else DWORD_FALSE
    return values


def decode(values: Mapping[str, Mapping[str, Any]], logger: Optional[Logger] = None) -> ProtocolState:
    """
    Construct a ProtocolState from registry values.
    Missing values stay unset. Any non-zero DWORD is True (0xFFFFFFFF is met on older setups).
    Subkey and value names are matched ignoring case, as the registry does.
    :param values:
        {role: {flag: dword}}, dwords may be int or str ('0x1')
    :param logger:
        Logger for skipped keys and values
    :return:
        ProtocolState object
    """
    logger = logger or _logger
    state: ProtocolState = ProtocolState()
    for subkey, flags in values.items():
        role: Optional[str] = Role.lookup(subkey)
        if role is None:
            logger.debug("Skip unknown subkey '%s'" % subkey)
            continue
        if not isinstance(flags, Mapping):
            raise DecodeError("Bad subkey '%s'" % subkey)
        for name, dword in flags.items():
            flag: Optional[str] = Flag.lookup(name)
            if flag is None:
                logger.debug("Skip unknown value '%s' at %s" % (name, subkey))
                continue
            state.set(role, flag, todword(dword) != DWORD_FALSE)
    return state
