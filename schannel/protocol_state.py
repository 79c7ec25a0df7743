"""
Enabled/disabled state of a single SCHANNEL protocol.

I avoided usage of the 'dataclasses' module to ensure of Python 3.6 compatibility
"""
from typing import Optional, Dict, Tuple
from .const import Role, Flag
from .exceptions import UnknownField
from .misc import tristate

__all__ = ['ProtocolState']

_FIELDS: Dict[Tuple[str, str], str] = {
    (Role.Client, Flag.Enabled): 'client_enabled',
    (Role.Client, Flag.DisabledByDefault): 'client_disabled_by_default',
    (Role.Server, Flag.Enabled): 'server_enabled',
    (Role.Server, Flag.DisabledByDefault): 'server_disabled_by_default',
}


class ProtocolState:
    """
    Four independent tri-state flags. None means "not set", which is not the same as False.
    Nothing ties *_enabled to *_disabled_by_default: both may be True at once.

    Attrubutes:
        `client_enabled`                Protocol is enabled for the client role
        `client_disabled_by_default`    Protocol is disabled by default for the client role
        `server_enabled`                Protocol is enabled for the server role
        `server_disabled_by_default`    Protocol is disabled by default for the server role
    """

    def __init__(self, client_enabled: Optional[bool] = None, client_disabled_by_default: Optional[bool] = None,
                 server_enabled: Optional[bool] = None, server_disabled_by_default: Optional[bool] = None):
        self.client_enabled: Optional[bool] = client_enabled
        self.client_disabled_by_default: Optional[bool] = client_disabled_by_default
        self.server_enabled: Optional[bool] = server_enabled
        self.server_disabled_by_default: Optional[bool] = server_disabled_by_default

    @staticmethod
    def _field(role: str, flag: str) -> str:
        try:
            return _FIELDS[role, flag]
        except KeyError:
            raise UnknownField("No field for role '%s' and flag '%s'" % (role, flag)) from None

    def get(self, role: str, flag: str) -> Optional[bool]:
        """
        Read a flag by its registry names
        :param role:
            Role.Client or Role.Server
        :param flag:
            Flag.Enabled or Flag.DisabledByDefault
        :return:
            True, False or None (unset)
        """
        return getattr(self, self._field(role, flag))

    def set(self, role: str, flag: str, value: Optional[bool]):
        setattr(self, self._field(role, flag), value)

    def clear(self, role: Optional[str] = None):
        """
        Reset flags to unset
        :param role:
            Reset only this role. All four flags if None
        :return:
        """
        if role is not None and role not in Role:
            raise UnknownField("Unknown role '%s'" % role)
        for (_role, flag), field in _FIELDS.items():
            if role is None or _role == role:
                setattr(self, field, None)

    def is_unset(self) -> bool:
        return all(value is None for value in self._values())

    def copy(self):
        return self.__class__(*self._values())

    def _values(self) -> Tuple[Optional[bool], ...]:
        return (self.client_enabled, self.client_disabled_by_default,
                self.server_enabled, self.server_disabled_by_default)

    def __eq__(self, other):
        return self.__class__ is other.__class__ and self._values() == other._values()

    def __ne__(self, other):
        return not self == other

    __hash__ = None     # Mutable

    def __str__(self):
        return "<Client: enabled %s, disabled by default %s; Server: enabled %s, disabled by default %s>" % \
               tuple(tristate(value) for value in self._values())

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, ', '.join(
            "%s=%r" % (field, getattr(self, field)) for field in _FIELDS.values()))
