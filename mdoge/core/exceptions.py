"""
The custom exceptions used throughout mdoge
"""
__all__ = ["ReadError", "StreamError", "WriteError", "TargetBitsError", "MerkleError", "ScriptError",
           "DataEncodingError", "ChainParamsError", "GenesisMismatchError", "UnknownNetworkError", "SeedTableError"]


class DataEncodingError(Exception):
    """
    For use in encoding/decoding algorithms
    """
    pass


class MerkleError(Exception):
    """
    For use in the MerkleTree class
    """
    pass


class TargetBitsError(Exception):
    """
    For use in target bit encoding and decoding
    """
    pass


class ScriptError(Exception):
    """
    For use in the ScriptNum and ScriptBuilder classes
    """
    pass


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class WriteError(StreamError):
    """
    For when writing data that would be otherwise out of bounds
    """
    pass


class ChainParamsError(Exception):
    """
    Parent class for network parameter errors
    """
    pass


class GenesisMismatchError(ChainParamsError):
    """
    Raised when the constructed genesis block does not reproduce its hard-coded hash or merkle root.
    A network without a verifiable genesis has no identity, so this is always fatal.
    """

    def __init__(self, field: str, expected: str, computed: str):
        self.field = field
        self.expected = expected
        self.computed = computed
        super().__init__(f"Genesis {field} mismatch. Expected: {expected}. Computed: {computed}")


class UnknownNetworkError(ChainParamsError):
    """
    Raised when selecting a network that has no compiled profile
    """
    pass


class SeedTableError(ChainParamsError):
    """
    For malformed entries in a compiled seed table
    """
    pass
