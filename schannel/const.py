from .enum import T_Enum as _Enum

MAX32: int = 2 ** 32

DWORD_FALSE: int = 0
DWORD_TRUE: int = 1

SCHANNEL_PROTOCOLS_KEY: str = r'HKLM\SYSTEM\CurrentControlSet\Control\SecurityProviders\SCHANNEL\Protocols'


class Role(_Enum):
    Client: str = 'Client'
    Server: str = 'Server'


class Flag(_Enum):
    Enabled: str = 'Enabled'
    DisabledByDefault: str = 'DisabledByDefault'


class Protocol(_Enum):
    MultiProtocolUnifiedHello: str = 'Multi-Protocol Unified Hello'
    PCT10: str = 'PCT 1.0'
    SSL20: str = 'SSL 2.0'
    SSL30: str = 'SSL 3.0'
    TLS10: str = 'TLS 1.0'
    TLS11: str = 'TLS 1.1'
    TLS12: str = 'TLS 1.2'
    TLS13: str = 'TLS 1.3'
    DTLS10: str = 'DTLS 1.0'
    DTLS12: str = 'DTLS 1.2'
