"""
Canonical IP helpers for mdoge.
One internal type (IPv6) everywhere; map IPv4 -> v6-mapped at edges.
"""

from __future__ import annotations

import ipaddress as _ip

__all__ = ["normalize", "to_display", "pack16", "IPLike"]

IPLike = str | bytes | _ip.IPv4Address | _ip.IPv6Address


def normalize(ip: IPLike) -> _ip.IPv6Address:
    """
    Return an IPv6Address. IPv4 is mapped to ::ffff:W.X.Y.Z.
    Accepts str/bytes/IPv4Address/IPv6Address.
    """
    if isinstance(ip, _ip.IPv6Address):
        return ip
    if isinstance(ip, _ip.IPv4Address):
        return _ip.IPv6Address(b"\x00" * 10 + b"\xff\xff" + ip.packed)

    if isinstance(ip, (bytes, bytearray, memoryview)):
        b = bytes(ip)
        if len(b) == 16:
            return _ip.IPv6Address(b)
        if len(b) == 4:
            return normalize(_ip.IPv4Address(b))
        raise ValueError("IP bytes must be length 4 or 16")

    if isinstance(ip, str):
        return normalize(_ip.ip_address(ip.strip().strip("[]")))

    raise TypeError(f"Unsupported IP input type: {type(ip)}")


def to_display(ip: IPLike) -> str:
    """Human-friendly string: dotted-quad for mapped v4; compressed for native v6."""
    ip6 = normalize(ip)
    return str(ip6.ipv4_mapped) if ip6.ipv4_mapped else str(ip6)


def pack16(ip: IPLike) -> bytes:
    """16-byte network-order representation."""
    return normalize(ip).packed
