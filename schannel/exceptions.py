class DecodeError(Exception):  # pragma: no cover
    """
    Raises if a registry value can't be decoded as a DWORD
    """


class UnknownField(Exception):  # pragma: no cover
    """
    Raises if a role/flag pair doesn't name a ProtocolState field
    """


class UnknownProtocol(Exception):  # pragma: no cover
    """
    Raises at removal of a protocol which is not in the config
    """
