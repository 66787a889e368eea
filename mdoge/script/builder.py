"""
The ScriptBuilder assembles raw script bytes from pushed numbers and data
"""
from mdoge.core import SCRIPT, ScriptError
from mdoge.script.script_num import ScriptNum

__all__ = ["ScriptBuilder"]


class ScriptBuilder:
    """
    Appends push operations and returns the serialized script with `script`.

    push_int uses the small-integer opcodes where one exists, push_num always emits a data push of the minimal
    number encoding, and push_data chooses the smallest push opcode for the given length.
    """

    def __init__(self):
        self._parts: list[bytes] = []

    def push_int(self, n: int) -> "ScriptBuilder":
        if n == 0:
            self._parts.append(bytes([SCRIPT.OP_0]))
        elif n == -1:
            self._parts.append(bytes([SCRIPT.OP_1NEGATE]))
        elif 1 <= n <= 16:
            self._parts.append(bytes([SCRIPT.OP_1 + n - 1]))
        else:
            self.push_num(n)
        return self

    def push_num(self, n: int) -> "ScriptBuilder":
        return self.push_data(ScriptNum(n).to_bytes())

    def push_data(self, data: bytes) -> "ScriptBuilder":
        length = len(data)
        if length <= SCRIPT.MAX_DIRECT_PUSH:
            prefix = length.to_bytes(1, "little")
        elif length <= 0xff:
            prefix = bytes([SCRIPT.OP_PUSHDATA1]) + length.to_bytes(1, "little")
        elif length <= 0xffff:
            prefix = bytes([SCRIPT.OP_PUSHDATA2]) + length.to_bytes(2, "little")
        elif length <= 0xffffffff:
            prefix = bytes([SCRIPT.OP_PUSHDATA4]) + length.to_bytes(4, "little")
        else:
            raise ScriptError("Data too large to push onto script")
        self._parts.append(prefix + data)
        return self

    @property
    def script(self) -> bytes:
        return b''.join(self._parts)
