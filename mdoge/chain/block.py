"""
The Block classes

Blocks and headers are read-only once built; the genesis block is shared by every holder of a network profile.
"""
from datetime import datetime, timezone
from typing import Iterable

from mdoge.chain.tx import Transaction
from mdoge.core import BLOCK, SERIALIZED, MerkleError, Serializable, get_stream, read_hash, read_stream, \
    read_little_int
from mdoge.cryptography import scrypt_hash
from mdoge.data import MerkleTree, bits_to_target, read_compact_size, write_compact_size

__all__ = ["BlockHeader", "Block"]

ZERO_HASH = b'\x00' * BLOCK.PREV_BLOCK


class BlockHeader(Serializable):
    """
    ---------------------------------------------------------------------
    |   Name        |   data_type   |   format              |   size    |
    ---------------------------------------------------------------------
    |   Version     |   int         |   little-endian       |   4       |
    |   prev_block  |   bytes       |   natural byte order  |   32      |
    |   merkle_root |   bytes       |   natural byte order  |   32      |
    |   time        |   int         |   little-endian       |   4       |
    |   bits        |   bytes       |   little-endian       |   4       |
    |   nonce       |   int         |   little-endian       |   4       |
    ---------------------------------------------------------------------
    """
    __slots__ = ('_version', '_prev_block', '_merkle_root', '_timestamp', '_bits', '_nonce')

    def __init__(self, version: int, prev_block: bytes, merkle_root: bytes, timestamp: int, bits: bytes,
                 nonce: int):
        self._version = version
        self._prev_block = bytes(prev_block)
        self._merkle_root = bytes(merkle_root)
        self._timestamp = timestamp
        self._bits = bytes(bits)
        self._nonce = nonce

    @property
    def version(self) -> int:
        return self._version

    @property
    def prev_block(self) -> bytes:
        return self._prev_block

    @property
    def merkle_root(self) -> bytes:
        return self._merkle_root

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def bits(self) -> bytes:
        return self._bits

    @property
    def nonce(self) -> int:
        return self._nonce

    @property
    def block_id(self) -> bytes:
        """The scrypt proof-of-work hash of the header, in natural byte order"""
        return scrypt_hash(self.to_bytes())

    @property
    def target(self) -> int:
        return bits_to_target(self._bits)

    def meets_target(self) -> bool:
        # Hashes are compared as little-endian 256-bit integers
        return int.from_bytes(self.block_id, "little") <= self.target

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, BLOCK.VERSION, "version")
        prev_block = read_hash(stream, "prev_block")
        merkle_root = read_hash(stream, "merkle_root")
        timestamp = read_little_int(stream, BLOCK.TIME, "time")
        bits = read_stream(stream, BLOCK.BITS, "bits")[::-1]  # Bits is little-endian bytes
        nonce = read_little_int(stream, BLOCK.NONCE, "nonce")

        return cls(version, prev_block, merkle_root, timestamp, bits, nonce)

    def to_bytes(self) -> bytes:
        parts = [
            self._version.to_bytes(BLOCK.VERSION, "little"),
            self._prev_block,
            self._merkle_root,
            self._timestamp.to_bytes(BLOCK.TIME, "little"),
            self._bits[::-1],  # Little endian serialized
            self._nonce.to_bytes(BLOCK.NONCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "block_id": self.block_id[::-1].hex(),
            "version": self._version,
            "previous_block": self._prev_block[::-1].hex(),  # Reverse order for display
            "merkle_root": self._merkle_root[::-1].hex(),  # Reverse order for display
            "timestamp": datetime.fromtimestamp(self._timestamp, tz=timezone.utc).strftime(BLOCK.TIMESTAMP_FORMAT),
            "bits": self._bits.hex(),
            "target": f"{self.target:064x}",
            "nonce": self._nonce
        }


class Block(Serializable):
    """
    ---------------------------------------------------------------------
    |   Name        |   data_type   |   format              |   size    |
    ---------------------------------------------------------------------
    |                       BlockHeader                                 |
    ---------------------------------------------------------------------
    |   tx_num      |   int         |   CompactSize         |   var     |
    |   txs         |   tuple       |   Transaction         |   var     |
    ---------------------------------------------------------------------
    The merkle root is not stored; it is computed from the transaction list. Deserialization rejects a header whose
    merkle root does not commit to the transactions that follow it.
    """
    __slots__ = ('_version', '_prev_block', '_timestamp', '_bits', '_nonce', '_txs')

    def __init__(self, prev_block: bytes, txs: Iterable[Transaction], timestamp: int, bits: bytes, nonce: int,
                 version: int = BLOCK.DEFAULT_VERSION):
        self._version = version
        self._prev_block = bytes(prev_block)
        self._txs = tuple(txs)
        self._timestamp = timestamp
        self._bits = bytes(bits)
        self._nonce = nonce

    @property
    def version(self) -> int:
        return self._version

    @property
    def prev_block(self) -> bytes:
        return self._prev_block

    @property
    def txs(self) -> tuple[Transaction, ...]:
        return self._txs

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def bits(self) -> bytes:
        return self._bits

    @property
    def nonce(self) -> int:
        return self._nonce

    @property
    def merkle_root(self) -> bytes:
        return MerkleTree([tx.txid for tx in self._txs]).merkle_root

    @property
    def header(self) -> BlockHeader:
        return BlockHeader(self._version, self._prev_block, self.merkle_root, self._timestamp, self._bits,
                           self._nonce)

    @property
    def block_id(self) -> bytes:
        return self.header.block_id

    @property
    def is_genesis(self) -> bool:
        return self._prev_block == ZERO_HASH

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        header = BlockHeader.from_bytes(stream)
        tx_num = read_compact_size(stream)
        txs = [Transaction.from_bytes(stream) for _ in range(tx_num)]

        block = cls(header.prev_block, txs, header.timestamp, header.bits, header.nonce, header.version)
        if block.merkle_root != header.merkle_root:
            raise MerkleError(
                f"Header merkle root {header.merkle_root[::-1].hex()} does not match transactions "
                f"{block.merkle_root[::-1].hex()}"
            )
        return block

    def to_bytes(self) -> bytes:
        parts = [
            self.header.to_bytes(),
            write_compact_size(len(self._txs)),
            b''.join(tx.to_bytes() for tx in self._txs)
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        block_dict = self.header.to_dict()
        block_dict.update({
            "tx_num": len(self._txs),
            "txs": [tx.to_dict() for tx in self._txs]
        })
        return block_dict
