"""
Test for CompactSize encoding
"""
from random import randint

import pytest

from mdoge.core import ReadError, WriteError
from mdoge.data import read_compact_size, write_compact_size


def test_read_compactsize():
    """
    We create 4 distinct compact size numbers and verify we can read them
    """
    cs_1_int = randint(0, 0xfc)
    cs_2_int = randint(0xfd, 0xffff)
    cs_3_int = randint(0x10000, 0xffffffff)
    cs_4_int = randint(0x100000000, 0xffffffffffffffff)

    cs1 = cs_1_int.to_bytes(1, "little")
    cs2 = b'\xfd' + cs_2_int.to_bytes(2, "little")
    cs3 = b'\xfe' + cs_3_int.to_bytes(4, "little")
    cs4 = b'\xff' + cs_4_int.to_bytes(8, "little")

    assert read_compact_size(cs1) == cs_1_int, "CompactSize decoding fails for 1-byte integer"
    assert read_compact_size(cs2) == cs_2_int, "CompactSize decoding fails for 2-byte integer"
    assert read_compact_size(cs3) == cs_3_int, "CompactSize decoding fails for 4-byte integer"
    assert read_compact_size(cs4) == cs_4_int, "CompactSize decoding fails for 8-byte integer"


def test_write_compactsize():
    assert write_compact_size(0x14) == b'\x14'
    assert write_compact_size(0xfd) == b'\xfd\xfd\x00'
    assert write_compact_size(0x10000) == b'\xfe\x00\x00\x01\x00'
    assert write_compact_size(0x100000000) == b'\xff\x00\x00\x00\x00\x01\x00\x00\x00'


def test_compactsize_errors():
    with pytest.raises(WriteError):
        write_compact_size(-1)
    with pytest.raises(ReadError):
        read_compact_size(b'\xfd\x01')
