"""
Base58Check encoding of addresses and secret keys with a network's prefixes
"""
from mdoge.core import DataEncodingError
from mdoge.cryptography import hash160
from mdoge.data import decode_base58check, encode_base58check
from mdoge.params.network import Base58Type
from mdoge.params.profile import NetworkProfile

__all__ = ["encode_pubkey_address", "encode_script_address", "encode_secret_key", "decode_address"]

HASH160_BYTES = 20
SECRET_BYTES = 32
COMPRESSED_FLAG = b'\x01'


def encode_pubkey_address(pubkey: bytes, profile: NetworkProfile) -> str:
    """Address paying to HASH160(pubkey)"""
    return encode_base58check(profile.base58_prefix(Base58Type.PUBKEY_ADDRESS) + hash160(pubkey))


def encode_script_address(script: bytes, profile: NetworkProfile) -> str:
    """Address paying to HASH160(script)"""
    return encode_base58check(profile.base58_prefix(Base58Type.SCRIPT_ADDRESS) + hash160(script))


def encode_secret_key(secret: bytes, profile: NetworkProfile, compressed: bool = True) -> str:
    """Wallet import format of a 32-byte secret"""
    if len(secret) != SECRET_BYTES:
        raise DataEncodingError(f"Secret key must be {SECRET_BYTES} bytes")
    suffix = COMPRESSED_FLAG if compressed else b''
    return encode_base58check(profile.base58_prefix(Base58Type.SECRET_KEY) + secret + suffix)


def decode_address(address: str, profile: NetworkProfile) -> tuple[Base58Type, bytes]:
    """
    Return the address type and its 20-byte hash. Addresses carrying another network's prefix are rejected.
    """
    data = decode_base58check(address)
    if len(data) != 1 + HASH160_BYTES:
        raise DataEncodingError(f"Address payload has incorrect length: {len(data)}")

    prefix, payload = data[:1], data[1:]
    for kind in (Base58Type.PUBKEY_ADDRESS, Base58Type.SCRIPT_ADDRESS):
        if profile.base58_prefix(kind) == prefix:
            return kind, payload
    raise DataEncodingError(f"Address prefix {prefix.hex()} does not belong to the {profile.network_id.value} network")
