"""
Network parameter profiles, genesis construction and fixed seeds
"""
# params/__init__.py
from mdoge.params.addresses import *
from mdoge.params.genesis import *
from mdoge.params.network import *
from mdoge.params.profile import *
from mdoge.params.registry import *
from mdoge.params.seeds import *
