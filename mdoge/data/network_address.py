"""
The NetAddr class for the peer address record handed to the networking layer
"""
from datetime import datetime, timezone
from io import BytesIO

from mdoge.core import NET, Serializable, get_stream, read_little_int, read_stream, read_big_int
from mdoge.data.ip_utils import IPLike, normalize, to_display

__all__ = ["NetAddr"]


class NetAddr(Serializable):
    """
    -----------------------------------------------------------------
    |   Name            | Data type | Formatted             | Size  |
    -----------------------------------------------------------------
    |   time            | int       | little-endian         | 4     |
    |   Services        | int       | little-endian         | 8     |
    |   ip address      | ipv6      | network byte order    | 16    |
    |   port            | int       | network byte order    | 2     |
    -----------------------------------------------------------------
    """
    __slots__ = ("_timestamp", "_services", "_ip_address", "_port")

    def __init__(self, timestamp: int, services: int, ip_addr: IPLike, port: int):
        if not 0 <= port <= 0xffff:
            raise ValueError(f"Port out of range: {port}")
        self._timestamp = timestamp
        self._services = services
        self._ip_address = normalize(ip_addr)
        self._port = port

    # Records are handed out by the network profile and never modified
    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def services(self) -> int:
        return self._services

    @property
    def ip_address(self):
        return self._ip_address

    @property
    def port(self) -> int:
        return self._port

    @classmethod
    def from_bytes(cls, byte_stream: bytes | BytesIO):
        stream = get_stream(byte_stream)

        timestamp = read_little_int(stream, NET.TIME, "time")
        services = read_little_int(stream, NET.SERVICES, "services")
        ip_bytes = read_stream(stream, NET.IP, "ip")
        port = read_big_int(stream, NET.PORT, "port")

        return cls(timestamp, services, ip_bytes, port)

    @property
    def display_ip(self) -> str:
        return to_display(self._ip_address)

    @property
    def display_time(self) -> str:
        return datetime.fromtimestamp(self._timestamp, tz=timezone.utc).strftime(NET.TIME_FORMAT)

    def to_bytes(self) -> bytes:
        parts = [
            self._timestamp.to_bytes(NET.TIME, "little"),
            self._services.to_bytes(NET.SERVICES, "little"),
            self._ip_address.packed,
            self._port.to_bytes(NET.PORT, "big")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "time": self.display_time,
            "services": self._services,
            "ip_address": self.display_ip,
            "port": self._port
        }
