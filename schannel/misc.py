"""
These are just some wrappers and common functions
"""
from typing import Any, Optional, Union
from .const import MAX32
from .exceptions import DecodeError

__all__ = ['clname', 'tryint', 'todword', 'tristate']


def clname(obj: object) -> str:     # pragma: no cover
    return obj.__name__ if obj.__class__ is type else obj.__class__.__name__


def tryint(val: Union[str, int, None]) -> Optional[int]:
    """
    Ensure of int value
    :param val:
        str or int ('0x1', '1' and 1 are the same)
    :return:
        int value or None
    """
    if val is None:
        return None
    if type(val) is int:
        return val
    return int(val.strip(), 0)  # str


def todword(val: Any) -> int:
    """
    Convert a registry value to DWORD
    :param val:
        int or str value
    :return:
        int value in range [0, 2**32)
    """
    if type(val) not in (int, str):     # bool is not a DWORD
        raise DecodeError("Bad DWORD type: %s" % clname(val))
    try:
        dword: int = tryint(val)
    except ValueError:
        raise DecodeError("Bad DWORD value: '%s'" % val)
    if not 0 <= dword < MAX32:
        raise DecodeError("DWORD out of range: %s" % dword)
    return dword


def tristate(val: Optional[bool]) -> str:
    """
    Human readable tri-state boolean
    :param val:
        True, False or None
    :return:
        'true', 'false' or 'unset'
    """
    if val is None:
        return 'unset'
    return 'true' if val else 'false'
