from typing import Dict, List, Iterator, Tuple, Mapping, Any, Optional
from logging import Logger, getLogger
from .const import Protocol, Role, Flag
from .exceptions import UnknownProtocol
from .protocol_state import ProtocolState
from .registry import RegValues, encode, decode

__all__ = ['ProtocolsConfig']


class ProtocolsConfig:
    """
    Holds one ProtocolState per protocol name.
    Protocol names ignore case like registry subkeys do: 'tls 1.2' is stored as 'TLS 1.2'.
    Flags which are both enabled and disabled by default are only reported: at set(), at load and at dump.
    Direct assignments to a held state (config['TLS 1.2'].client_enabled = True) are checked at toregistry().

    Possible worklow:
    1) Load registry values                                                 fromregistry()
    2) Change some flags                                                    set()
    3) Dump registry values back                                            toregistry()
    """

    @classmethod
    def fromregistry(cls, values: Mapping[str, Mapping[str, Mapping[str, Any]]], logger: Optional[Logger] = None):
        """
        Construct a ProtocolsConfig from registry values.
        Subkeys which differ only in case are merged, the later one wins per flag
        :param values:
            {protocol: {role: {flag: dword}}}
        :param logger:
            Logger object
        :return:
            ProtocolsConfig object
        """
        obj: ProtocolsConfig = cls(logger)
        for protocol, roles in values.items():
            state: ProtocolState = decode(roles, obj._logger)
            name: str = obj._name(protocol)
            if name in obj._states:
                obj._logger.warning("Duplicate protocol subkey '%s'. Merge into '%s'" % (protocol, name))
                obj._merge(name, state)
            else:
                obj._add(name, state)
        return obj

    def __init__(self, logger: Optional[Logger] = None):
        self._logger: Logger = logger or getLogger(__name__)
        self._states: Dict[str, ProtocolState] = {}

    def _name(self, protocol: str) -> str:
        """
        Canonical name: a known protocol as declared, an unknown one as it was first seen
        """
        known: Optional[str] = Protocol.lookup(protocol)
        if known is not None:
            return known
        folded: str = protocol.casefold()
        for name in self._states:
            if name.casefold() == folded:
                return name
        return protocol

    def _add(self, protocol: str, state: ProtocolState) -> ProtocolState:
        if protocol not in Protocol:
            self._logger.warning("Unknown protocol '%s'" % protocol)
        self._logger.debug("Add protocol %s: %s" % (protocol, state))
        self._states[protocol] = state
        self._check(protocol, state)
        return state

    def _merge(self, protocol: str, state: ProtocolState):
        held: ProtocolState = self._states[protocol]
        for role in Role:
            for flag in Flag:
                value: Optional[bool] = state.get(role, flag)
                if value is not None:
                    held.set(role, flag, value)
        self._check(protocol, held)

    def _check(self, protocol: str, state: ProtocolState):
        for role in Role:
            if state.get(role, Flag.Enabled) and state.get(role, Flag.DisabledByDefault):
                self._logger.warning("%s %s is both enabled and disabled by default" % (protocol, role))

    def __getitem__(self, protocol: str) -> ProtocolState:
        name: str = self._name(protocol)
        state: Optional[ProtocolState] = self._states.get(name)
        if state is None:
            state = self._add(name, ProtocolState())
        return state

    def __contains__(self, protocol: str) -> bool:
        return self._name(protocol) in self._states

    def __len__(self):
        return len(self._states)

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def items(self) -> Iterator[Tuple[str, ProtocolState]]:
        return iter(self._states.items())

    def set(self, protocol: str, role: str, flag: str, value: Optional[bool]):
        """
        Set a single flag, creating the protocol state if needed
        :param protocol:
            Protocol name ('TLS 1.2')
        :param role:
            Role.Client or Role.Server
        :param flag:
            Flag.Enabled or Flag.DisabledByDefault
        :param value:
            True, False or None to unset
        :return:
        """
        name: str = self._name(protocol)
        state: ProtocolState = self[name]
        state.set(role, flag, value)
        self._logger.debug("Set %s %s %s to %s" % (name, role, flag, value))
        self._check(name, state)

    def remove(self, protocol: str):
        name: str = self._name(protocol)
        if name not in self._states:
            raise UnknownProtocol("Protocol '%s' is not configured" % protocol)
        self._logger.debug("Del protocol %s" % name)
        del self._states[name]

    def states(self, role: str, flag: str, value: Optional[bool]) -> List[str]:
        """
        Protocol names which have the flag equal to value (None matches unset)
        """
        return [protocol for protocol, state in self._states.items() if state.get(role, flag) is value]

    def toregistry(self) -> Dict[str, RegValues]:
        """
        Dump registry values. Fully unset protocols are omitted
        :return:
            {protocol: {role: {flag: dword}}}
        """
        values: Dict[str, RegValues] = {}
        for protocol, state in self._states.items():
            if not state.is_unset():
                self._check(protocol, state)
                values[protocol] = encode(state)
        return values

    def __str__(self):
        return "%s: [%s]" % (self.__class__.__name__, ', '.join(self._states))
