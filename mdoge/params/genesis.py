"""
Construction and self-verification of a network's genesis block.

Genesis parameters are mined offline. This module only rebuilds the block bit-exactly and checks it against the
hash and merkle root the network announces.
"""
from dataclasses import dataclass

from mdoge.chain import Block, Transaction, TxInput, TxOutput
from mdoge.core import BLOCK, GenesisMismatchError
from mdoge.core.logging import get_logger
from mdoge.script import ScriptBuilder

logger = get_logger(__name__)

__all__ = ["GenesisParams", "create_genesis_tx", "create_genesis_block", "build_genesis"]


@dataclass(frozen=True)
class GenesisParams:
    """
    Inputs of the genesis block and the constants it must reproduce. Hashes are hex in display (big-endian) order.
    """
    payload: str
    extra_nonce: int
    timestamp: int
    bits: bytes
    nonce: int
    expected_hash: str
    expected_merkle_root: str
    version: int = BLOCK.DEFAULT_VERSION


def create_genesis_tx(payload: str, extra_nonce: int, timestamp: int) -> Transaction:
    """
    The coinbase of the genesis block: scriptsig is OP_0 <extra_nonce> <payload> and its single output is empty
    """
    scriptsig = ScriptBuilder().push_int(0).push_num(extra_nonce).push_data(payload.encode()).script
    return Transaction(
        inputs=[TxInput.coinbase(scriptsig)],
        outputs=[TxOutput.empty()],
        timestamp=timestamp
    )


def create_genesis_block(params: GenesisParams) -> Block:
    tx = create_genesis_tx(params.payload, params.extra_nonce, params.timestamp)
    return Block(
        prev_block=b'\x00' * BLOCK.PREV_BLOCK,
        txs=[tx],
        timestamp=params.timestamp,
        bits=params.bits,
        nonce=params.nonce,
        version=params.version
    )


def _normalize_hex(value: str) -> str:
    return value.lower().removeprefix("0x")


def build_genesis(params: GenesisParams) -> Block:
    """
    Build the genesis block and verify it against the expected hash, then against the expected merkle root.

    Raises:
        GenesisMismatchError: if either constant is not reproduced
    """
    block = create_genesis_block(params)

    computed_hash = block.block_id[::-1].hex()
    logger.debug(f"Genesis hash: {computed_hash}")
    expected_hash = _normalize_hex(params.expected_hash)
    if computed_hash != expected_hash:
        logger.error(f"Genesis hash mismatch. Expected {expected_hash}, computed {computed_hash}")
        raise GenesisMismatchError("hash", expected_hash, computed_hash)

    computed_root = block.merkle_root[::-1].hex()
    logger.debug(f"Genesis merkle root: {computed_root}")
    expected_root = _normalize_hex(params.expected_merkle_root)
    if computed_root != expected_root:
        logger.error(f"Genesis merkle root mismatch. Expected {expected_root}, computed {computed_root}")
        raise GenesisMismatchError("merkle root", expected_root, computed_root)

    return block
