"""
The protocol formats and chain-wide constants
"""
from typing import Final

__all__ = ["DATA", "TX", "BLOCK", "SCRIPT", "NET", "COIN", "MAX_HEIGHT"]

# Satoshi-style base unit
COIN: Final[int] = 100_000_000

# Largest block height representable as a signed 32-bit int
MAX_HEIGHT: Final[int] = 0x7fffffff


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE = 0xffffffffffffffff
    BITS: Final[int] = 4
    TARGET: Final[int] = 32
    HASH: Final[int] = 32


class TX:
    """
    Transaction byte sizes
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 4
    TIME: Final[int] = 4
    LOCKTIME: Final[int] = 4
    NULL_VOUT: Final[int] = 0xffffffff
    FINAL_SEQUENCE: Final[int] = 0xffffffff
    DEFAULT_VERSION: Final[int] = 1


class BLOCK:
    """
    Block header byte sizes
    """
    VERSION: Final[int] = 4
    PREV_BLOCK: Final[int] = 32
    MERKLE_ROOT: Final[int] = 32
    TIME: Final[int] = 4
    BITS: Final[int] = 4
    NONCE: Final[int] = 4
    HEADER: Final[int] = 80
    DEFAULT_VERSION: Final[int] = 1
    TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class SCRIPT:
    """
    Constants in use in the Script
    """
    MAX_SCRIPTNUM: Final[int] = 4
    MAX_DIRECT_PUSH: Final[int] = 0x4b
    OP_0: Final[int] = 0x00
    OP_PUSHDATA1: Final[int] = 0x4c
    OP_PUSHDATA2: Final[int] = 0x4d
    OP_PUSHDATA4: Final[int] = 0x4e
    OP_1NEGATE: Final[int] = 0x4f
    OP_1: Final[int] = 0x51
    OP_16: Final[int] = 0x60


class NET:
    """
    Peer address constants
    """
    TIME: Final[int] = 4
    SERVICES: Final[int] = 8
    IP: Final[int] = 16
    PORT: Final[int] = 2
    NODE_NETWORK: Final[int] = 1
    ONE_WEEK: Final[int] = 7 * 24 * 60 * 60
    TIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
