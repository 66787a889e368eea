"""
Network identifiers and base58 prefix categories
"""
from enum import Enum

__all__ = ["NetworkID", "Base58Type"]


class NetworkID(Enum):
    MAIN = "main"
    TESTNET = "test"


class Base58Type(Enum):
    """
    The base58 prefix categories. The first three carry a 1-byte prefix, the extended keys a 4-byte prefix.
    """
    PUBKEY_ADDRESS = "pubkey_address"
    SCRIPT_ADDRESS = "script_address"
    SECRET_KEY = "secret_key"
    EXT_PUBLIC_KEY = "ext_public_key"
    EXT_SECRET_KEY = "ext_secret_key"

    @property
    def prefix_length(self) -> int:
        return 4 if self in (Base58Type.EXT_PUBLIC_KEY, Base58Type.EXT_SECRET_KEY) else 1
