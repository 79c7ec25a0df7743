from typing import Union, Dict, Any, Optional, Iterator, Tuple
from itertools import chain

__all__ = ['T_Enum']

MetaVals = Union[int, str, None]


class EnumMeta(type):

    def __contains__(cls, item: MetaVals) -> bool:
        return item in cls.__reverse_map

    def __init__(cls, clname: str, *args):
        cls.__reverse_map: Dict[Any, str] = {value: key for key, value in
             chain(*(parent.__dict__.items() for parent in reversed(cls.__mro__)))
             if isinstance(value, (str, int)) and not key.startswith('_')}
        super().__init__(clname, *args)

    def __call__(cls, value: MetaVals) -> Optional[str]:
        return cls.__reverse_map.get(value)

    def __iter__(cls) -> Iterator[MetaVals]:
        return iter(cls.__reverse_map)

    def __len__(cls) -> int:
        return len(cls.__reverse_map)

    def __str__(cls):
        return "Enum %s: [%s]" % (cls.__name__, ', '.join(("0x%02X" % value) if isinstance(value, int)
                                                          else "'%s'" % value
                                                          for value in cls.__reverse_map.keys()))

    def lookup(cls, value: MetaVals) -> MetaVals:
        """
        Case-insensitive search of a str member
        :param value:
            Value in any case ('tls 1.2')
        :return:
            Member value as declared ('TLS 1.2') or None
        """
        if value in cls.__reverse_map:
            return value
        if isinstance(value, str):
            folded: str = value.casefold()
            for member in cls.__reverse_map:
                if isinstance(member, str) and member.casefold() == folded:
                    return member
        return None

    def items(cls) -> Iterator[Tuple[str, Any]]:
        return ((value, key) for key, value in cls.__reverse_map.items())


class T_Enum(metaclass=EnumMeta):
    """
    C-like enums through the metaclass EnumMeta.
    Members are plain class attributes, so they compare and hash like their values:

        Role.Client == 'Client'
        Role('Client') -> 'Client' (member name or None)
        'Server' in Role -> True
    """

    def __init__(self, value: MetaVals):
        """
        Stub for IDEs which expect __init__ here regardless of the __call__ in metaclass.
        It is never called.
        """
