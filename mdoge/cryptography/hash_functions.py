"""
Shortcuts for the hash functions used by the chain. Each function returns the bytes digest
"""
import hashlib

from ripemd.ripemd160 import ripemd160 as _ripemd160

__all__ = ["hash160", "hash256", "ripemd160", "scrypt_hash", "sha256"]

# Litecoin-style scrypt parameters for block ids
SCRYPT_N = 1024
SCRYPT_R = 1
SCRYPT_P = 1
SCRYPT_DKLEN = 32


# --- SHA --- #
def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


# --- RIPEMD --- #

def ripemd160(data: bytes) -> bytes:
    return _ripemd160(data)


# --- CHAIN HASH FUNCTIONS --- #

def hash256(data: bytes) -> bytes:
    """SHA256(SHA256(data))"""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    return ripemd160(sha256(data))


def scrypt_hash(data: bytes) -> bytes:
    """
    The proof-of-work hash of a block header: scrypt(N=1024, r=1, p=1) with the header as both password and salt
    """
    return hashlib.scrypt(data, salt=data, n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P, dklen=SCRYPT_DKLEN)
