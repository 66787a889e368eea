"""
Script number encoding and scriptSig construction
"""
# script/__init__.py
from mdoge.script.builder import *
from mdoge.script.script_num import *
