"""
Contains the core elements that are used within mdoge

Core:
    -Provides the standard protocol for serializable elements
    -Provides the reference formats and network constants
    -Provides custom exceptions for the various mdoge elements
"""
# core/__init__.py
from mdoge.core.byte_stream import *
from mdoge.core.exceptions import *
from mdoge.core.formats import *
from mdoge.core.serializable import *
