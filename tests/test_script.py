"""
Tests for ScriptNum and ScriptBuilder
"""
import pytest

from mdoge.core import ScriptError
from mdoge.script import ScriptBuilder, ScriptNum


@pytest.mark.parametrize("value, encoded", [
    (0, ""),
    (1, "01"),
    (42, "2a"),
    (-1, "81"),
    (127, "7f"),
    (128, "8000"),
    (-128, "8080"),
    (255, "ff00"),
    (256, "0001"),
])
def test_scriptnum_known(value, encoded):
    assert ScriptNum(value).to_bytes().hex() == encoded
    assert ScriptNum.from_bytes(bytes.fromhex(encoded)) == value


def test_scriptnum_too_large():
    with pytest.raises(ScriptError):
        ScriptNum(0x80000000).to_bytes()
    with pytest.raises(ScriptError):
        ScriptNum.from_bytes(bytes(5))


def test_push_int():
    script = ScriptBuilder().push_int(0).push_int(-1).push_int(1).push_int(16).push_int(17).script
    assert script.hex() == "004f51600111"


def test_push_num_is_data_push():
    assert ScriptBuilder().push_num(42).script.hex() == "012a"
    assert ScriptBuilder().push_num(5).script.hex() == "0105"
    assert ScriptBuilder().push_num(0).script.hex() == "00"


def test_push_data_opcodes():
    assert ScriptBuilder().push_data(bytes(75)).script[:1] == b'\x4b'
    assert ScriptBuilder().push_data(bytes(76)).script[:2] == b'\x4c\x4c'
    assert ScriptBuilder().push_data(bytes(256)).script[:3] == b'\x4d\x00\x01'
    assert ScriptBuilder().push_data(bytes(0x10000)).script[:5] == b'\x4e\x00\x00\x01\x00'
