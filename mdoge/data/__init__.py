"""
All methods for manipulating and representing data in mdoge
"""

# data/__init__.py
from mdoge.data.base58 import *
from mdoge.data.compact_size import *
from mdoge.data.ip_utils import *
from mdoge.data.merkle import *
from mdoge.data.network_address import *
from mdoge.data.target_bits import *
