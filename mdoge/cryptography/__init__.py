"""
Hash functions used for transaction ids, merkle trees, addresses and block ids
"""
# cryptography/__init__.py

from mdoge.cryptography.hash_functions import *
