"""
Methods for deserializing byte streams
"""
from io import BytesIO
from typing import Union, Optional, Literal

from .exceptions import ReadError

__all__ = ["SERIALIZED", "get_stream", "read_stream", "read_hash", "read_little_int", "read_big_int"]

SERIALIZED = Union[bytes, BytesIO]
BYTEORDER = Literal['big', 'little']

HASH_BYTES = 32


def get_stream(byte_stream: SERIALIZED) -> BytesIO:
    """Convert bytes or BytesIO to BytesIO stream"""
    if isinstance(byte_stream, bytes):
        return BytesIO(byte_stream)
    if isinstance(byte_stream, BytesIO):
        return byte_stream
    raise TypeError(f"Expected bytes or BytesIO but received: {type(byte_stream)}")


def read_stream(stream: BytesIO, length: int, data_type: Optional[str] = None) -> bytes:
    """Read exact number of bytes from stream, raising ReadError when the stream runs short"""
    data = stream.read(length)
    if len(data) != length:
        suffix = f" Data type: {data_type}" if data_type else ""
        raise ReadError(f"Error reading stream. Expected {length} bytes, received {len(data)}.{suffix}")
    return data


def read_hash(stream: BytesIO, data_type: Optional[str] = None) -> bytes:
    """Read a 32-byte hash in natural byte order"""
    return read_stream(stream, HASH_BYTES, data_type)


def _read_int(stream: BytesIO, length: int, byteorder: BYTEORDER, data_type: Optional[str] = None) -> int:
    return int.from_bytes(read_stream(stream, length, data_type), byteorder)


def read_little_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    return _read_int(stream, length, "little", data_type)


def read_big_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read big-endian integer from stream. Only ports use network byte order"""
    return _read_int(stream, length, "big", data_type)
