"""
Tests for the compact target encoding
"""
import pytest

from mdoge.core import TargetBitsError
from mdoge.data import bits_to_target, target_to_bits, pow_limit


@pytest.mark.parametrize("shift, bits", [
    (20, "1e0fffff"),
    (16, "1f00ffff"),
    (32, "1d00ffff"),
])
def test_pow_limit_bits(shift, bits):
    assert target_to_bits(pow_limit(shift)).hex() == bits


def test_known_bits():
    # Bitcoin block 277316
    bits = bytes.fromhex("1903a30c")
    target = bits_to_target(bits)
    assert target == 0x0000000000000003a30c00000000000000000000000000000000000000000000
    assert target_to_bits(target) == bits


def test_small_targets():
    assert target_to_bits(0) == bytes.fromhex("00000000")
    assert target_to_bits(0x12) == bytes.fromhex("01120000")
    assert target_to_bits(0x80) == bytes.fromhex("02008000")
    assert bits_to_target(bytes.fromhex("01120000")) == 0x12
    assert bits_to_target(bytes.fromhex("02008000")) == 0x80


def test_bits_truncate_limit():
    """
    Compact form keeps 3 significant bytes, so a pow limit decodes to its leading bytes only
    """
    limit = pow_limit(20)
    decoded = bits_to_target(target_to_bits(limit))
    assert decoded == 0x0fffff << (8 * 27)
    assert decoded <= limit


def test_invalid_input():
    with pytest.raises(TargetBitsError):
        bits_to_target(bytes.fromhex("1d00ff"))
    with pytest.raises(TargetBitsError):
        bits_to_target(bytes.fromhex("04923456"))  # sign bit set
    with pytest.raises(TargetBitsError):
        target_to_bits(1 << 256)
    with pytest.raises(TargetBitsError):
        pow_limit(257)
