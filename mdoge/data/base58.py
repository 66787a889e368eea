"""
Base58 and Base58Check encoding for addresses and secret keys
"""
import re

from mdoge.core import DataEncodingError
from mdoge.cryptography import hash256

__all__ = ["BASE58_ALPHABET", "encode_base58", "decode_base58", "encode_base58check", "decode_base58check"]

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
CHECKSUM_BYTES = 4


def encode_base58(data: bytes) -> str:
    """
    Given a bytes object we return its base58 encoding. Each leading zero byte becomes a leading "1".
    """
    base = len(BASE58_ALPHABET)
    n = int.from_bytes(data, "big")
    encoded_string = ""

    while n > 0:
        n, temp_index = divmod(n, base)
        encoded_string = BASE58_ALPHABET[temp_index] + encoded_string

    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return ("1" * leading_zeros) + encoded_string


def decode_base58(encoded: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes
    """
    total = 0
    for char in encoded:
        char_i = BASE58_ALPHABET.find(char)
        if char_i < 0:
            raise DataEncodingError(f"Invalid base58 character: {char!r}")
        total = total * 58 + char_i

    body = total.to_bytes((total.bit_length() + 7) // 8, "big")

    # Each leading '1' represents a leading zero byte
    leading_zeros = len(re.match(r"^1*", encoded).group(0))
    return b'\x00' * leading_zeros + body


def encode_base58check(data: bytes) -> str:
    """
    Append the first 4 bytes of HASH256(data) as checksum and base58 encode the result
    """
    checksum = hash256(data)[:CHECKSUM_BYTES]
    return encode_base58(data + checksum)


def decode_base58check(encoded: str) -> bytes:
    """
    Decode a Base58Check string and return the data without its checksum.
    Raise DataEncodingError if the checksum fails
    """
    decoded = decode_base58(encoded)
    if len(decoded) < CHECKSUM_BYTES:
        raise DataEncodingError("Base58Check data too short to hold a checksum")

    data, checksum = decoded[:-CHECKSUM_BYTES], decoded[-CHECKSUM_BYTES:]
    if hash256(data)[:CHECKSUM_BYTES] != checksum:
        raise DataEncodingError("Decoded checksum does not equal given checksum")
    return data
