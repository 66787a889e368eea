"""
Tests for the MerkleTree class
"""
from secrets import token_bytes

import pytest

from mdoge.core import MerkleError
from mdoge.cryptography import hash256
from mdoge.data import MerkleTree


def test_merkle_tree():
    """
    r1 + r2 = r_12, r3 + r3 = r_33,
    r_12 + r_33 = root
    """
    r1 = token_bytes(32)
    r2 = token_bytes(32)
    r3 = token_bytes(32)
    random_tree = MerkleTree([r1, r2, r3])

    r_12 = hash256(r1 + r2)
    r_33 = hash256(r3 + r3)
    root = hash256(r_12 + r_33)

    assert random_tree.merkle_root == root, "Merkle Root mismatch"
    assert random_tree.tree[1] == [r_12, r_33]
    assert random_tree.tree[2] == [r1, r2, r3, r3]


def test_single_id():
    txid = token_bytes(32)
    assert MerkleTree([txid]).merkle_root == txid
    assert MerkleTree([txid.hex()]).merkle_root == txid


def test_empty_list():
    with pytest.raises(MerkleError):
        MerkleTree([])
