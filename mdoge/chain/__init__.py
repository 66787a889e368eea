"""
The transaction and block types of the chain
"""
# chain/__init__.py
from mdoge.chain.block import *
from mdoge.chain.tx import *
