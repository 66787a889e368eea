"""
The MerkleTree used to commit a block to its transactions
"""
import json
import math

from mdoge.core import MerkleError
from mdoge.core.logging import get_logger
from mdoge.cryptography import hash256

logger = get_logger(__name__)

__all__ = ["MerkleTree"]


class MerkleTree:
    """
    A class representing a Merkle tree built from a list of transaction ids.

    Attributes:
        height (int): The height of the Merkle tree.
        tree (dict[int, list[bytes]]): Dictionary representing the tree levels with hash values.
        merkle_root (bytes): The Merkle root in natural byte order.
    """

    def __init__(self, id_list: list[str | bytes]):
        if not id_list:
            logger.error("Attempted to initialize MerkleTree with an empty list.")
            raise MerkleError("ID list cannot be empty. A Merkle tree requires at least one transaction ID.")

        self.height = 0 if len(id_list) == 1 else math.ceil(math.log2(len(id_list)))
        self.tree = self._create_tree(id_list)
        self.merkle_root = self.tree[0][0]

    def _create_tree(self, id_list: list[str | bytes]) -> dict[int, list[bytes]]:
        clean_list = self._clean_list(id_list)

        # If there's only one transaction, the Merkle root is the transaction itself
        if len(clean_list) == 1:
            return {0: clean_list}

        tree = {}
        for level in range(self.height, 0, -1):
            if len(clean_list) % 2 != 0:
                clean_list.append(clean_list[-1])  # Duplicate last element if odd

            tree[level] = clean_list
            clean_list = [hash256(clean_list[i] + clean_list[i + 1]) for i in range(0, len(clean_list), 2)]

        tree[0] = clean_list
        return tree

    @staticmethod
    def _clean_list(id_list: list[str | bytes]) -> list[bytes]:
        """
        Converts transaction IDs to bytes format.
        """
        return [bytes.fromhex(_id) if isinstance(_id, str) else _id for _id in id_list]

    def __repr__(self):
        return json.dumps({level: [node.hex() for node in nodes] for level, nodes in self.tree.items()}, indent=2)
