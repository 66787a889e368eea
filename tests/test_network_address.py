"""
Tests for the NetAddr record and IP helpers
"""
import pytest

from mdoge.data import NetAddr, normalize, pack16, to_display


def test_netaddr_ipv4():
    addr = NetAddr(1_700_000_000, 1, "104.238.152.99", 2589)
    raw = addr.to_bytes()

    assert len(raw) == 30
    assert raw[12:28] == bytes.fromhex("00000000000000000000ffff68ee9863")
    assert raw[28:] == (2589).to_bytes(2, "big")
    assert NetAddr.from_bytes(raw) == addr
    assert addr.display_ip == "104.238.152.99"
    assert addr.to_dict()["time"] == "2023-11-14 22:13:20"


def test_netaddr_ipv6():
    addr = NetAddr(0, 1, "2001:db8::1", 55007)
    assert NetAddr.from_bytes(addr.to_bytes()).display_ip == "2001:db8::1"


def test_netaddr_is_read_only():
    addr = NetAddr(0, 1, "127.0.0.1", 8333)
    with pytest.raises(AttributeError):
        addr.timestamp = 5


def test_netaddr_bad_port():
    with pytest.raises(ValueError):
        NetAddr(0, 1, "127.0.0.1", 0x10000)


def test_ip_helpers():
    assert to_display(pack16("10.0.0.1")) == "10.0.0.1"
    assert to_display(bytes([10, 0, 0, 1])) == "10.0.0.1"
    assert str(normalize("[::1]")) == "::1"
    with pytest.raises(ValueError):
        normalize(b'\x00' * 5)
