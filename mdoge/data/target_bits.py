"""
Methods for converting between bits and target.
Bits is the 4-byte compact representation of the 32-byte target: one exponent byte followed by a 3-byte coefficient.
"""
from mdoge.core import DATA, TargetBitsError

__all__ = ["bits_to_target", "target_to_bits", "pow_limit", "MAX_TARGET"]

MAX_TARGET = (1 << (8 * DATA.TARGET)) - 1


def pow_limit(shift: int) -> int:
    """
    The easiest allowed target for a network, expressed as ~uint256(0) >> shift
    """
    if not 0 <= shift <= 8 * DATA.TARGET:
        raise TargetBitsError(f"Proof-of-work limit shift out of range: {shift}")
    return MAX_TARGET >> shift


def bits_to_target(target_bits: bytes) -> int:
    # --- Validation --- #
    if len(target_bits) != DATA.BITS:
        raise TargetBitsError("Given target bits not of correct length")

    exp = target_bits[0]
    coeff = int.from_bytes(target_bits[1:4], 'big')
    if coeff & 0x800000:
        raise TargetBitsError("Negative target encoded in bits")

    if exp <= 3:
        return coeff >> (8 * (3 - exp))
    return coeff << (8 * (exp - 3))


def target_to_bits(target: int) -> bytes:
    # --- Validation --- #
    if not 0 <= target <= MAX_TARGET:
        raise TargetBitsError("Given target out of range for 32 bytes")

    # Exponent is the byte length of the target
    size = (target.bit_length() + 7) // 8

    # Take the 3 most significant bytes as the coefficient
    if size <= 3:
        coeff = target << (8 * (3 - size))
    else:
        coeff = target >> (8 * (size - 3))

    # The coefficient's top bit is a sign bit, so shift a byte out and bump the exponent
    if coeff & 0x800000:
        coeff >>= 8
        size += 1

    return size.to_bytes(1, "big") + coeff.to_bytes(3, "big")
