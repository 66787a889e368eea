"""
Tests for base58 encoding and network address encoding
"""
from secrets import token_bytes

import pytest

from mdoge.core import DataEncodingError
from mdoge.cryptography import hash160
from mdoge.data import decode_base58, decode_base58check, encode_base58, encode_base58check
from mdoge.params import Base58Type, decode_address, encode_pubkey_address, encode_script_address, encode_secret_key


def test_base58():
    """
    Known values from learnmeabitcoin.com
    """
    known_encoding = "1yDZG7PMpPrmYHgLhPNg693Kt2e9nAVtb"
    known_data = bytes.fromhex("000aa1c677870a303b41ce27f924601ee944648d8e504eb098")

    assert encode_base58(known_data) == known_encoding, "Failed base58 encoding for known values"
    assert decode_base58(known_encoding) == known_data, "Failed base58 decoding for known values"


def test_base58check():
    data = b'\x00\x00' + token_bytes(20)
    encoded = encode_base58check(data)

    assert encoded.startswith("11")
    assert decode_base58check(encoded) == data


def test_base58check_bad_checksum():
    encoded = encode_base58check(token_bytes(21))
    last = "2" if encoded[-1] != "2" else "3"
    with pytest.raises(DataEncodingError):
        decode_base58check(encoded[:-1] + last)


def test_base58_invalid_character():
    with pytest.raises(DataEncodingError):
        decode_base58("0OIl")


def test_hash160_known():
    assert hash160(b'').hex() == "b472a266d0bd89c13706a4132ccfb16f7c3b9fcb"


def test_pubkey_address(main_profile, test_profile):
    pubkey = main_profile.alert_pubkey
    main_address = encode_pubkey_address(pubkey, main_profile)
    test_address = encode_pubkey_address(pubkey, test_profile)

    assert main_address != test_address
    assert decode_address(main_address, main_profile) == (Base58Type.PUBKEY_ADDRESS, hash160(pubkey))
    assert decode_address(test_address, test_profile) == (Base58Type.PUBKEY_ADDRESS, hash160(pubkey))
    assert decode_base58check(main_address)[:1] == bytes([51])


def test_script_address(main_profile):
    script = token_bytes(23)
    address = encode_script_address(script, main_profile)
    assert decode_address(address, main_profile) == (Base58Type.SCRIPT_ADDRESS, hash160(script))


def test_cross_network_address_rejected(main_profile, test_profile):
    address = encode_pubkey_address(token_bytes(33), main_profile)
    with pytest.raises(DataEncodingError):
        decode_address(address, test_profile)


def test_secret_key(main_profile, test_profile):
    secret = token_bytes(32)

    compressed = decode_base58check(encode_secret_key(secret, main_profile))
    uncompressed = decode_base58check(encode_secret_key(secret, test_profile, compressed=False))

    assert compressed == bytes([139]) + secret + b'\x01'
    assert uncompressed == bytes([219]) + secret

    with pytest.raises(DataEncodingError):
        encode_secret_key(token_bytes(31), main_profile)
