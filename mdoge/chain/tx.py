"""
The classes for mdoge transactions

Transactions follow the proof-of-stake layout, which carries a timestamp directly after the version. Instances are
read-only: a genesis transaction is shared by every holder of a network profile.
"""
from typing import Iterable

from mdoge.core import Serializable, SERIALIZED, get_stream, read_hash, read_little_int, read_stream, TX
from mdoge.cryptography import hash256
from mdoge.data import read_compact_size, write_compact_size

__all__ = ["TxInput", "TxOutput", "Transaction", "NULL_TXID"]

NULL_TXID = b'\x00' * TX.TXID


class TxInput(Serializable):
    """
    TxInput
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   txid            |   32          |   natural byte order  |
    |   vout            |   4           |   little-endian       |
    |   scriptsig_size  |   var         |   CompactSize         |
    |   scriptsig       |   var         |   Script              |
    |   sequence        |   4           |   little-endian       |
    -------------------------------------------------------------
    """
    __slots__ = ("_txid", "_vout", "_scriptsig", "_sequence")

    def __init__(self, txid: bytes, vout: int, scriptsig: bytes, sequence: int = TX.FINAL_SEQUENCE):
        self._txid = bytes(txid)
        self._vout = vout
        self._scriptsig = bytes(scriptsig)
        self._sequence = sequence

    @classmethod
    def coinbase(cls, scriptsig: bytes):
        """An input spending the null outpoint"""
        return cls(NULL_TXID, TX.NULL_VOUT, scriptsig)

    @property
    def txid(self) -> bytes:
        return self._txid

    @property
    def vout(self) -> int:
        return self._vout

    @property
    def scriptsig(self) -> bytes:
        return self._scriptsig

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def is_null_outpoint(self) -> bool:
        return self._txid == NULL_TXID and self._vout == TX.NULL_VOUT

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        txid = read_hash(stream, "txid")
        vout = read_little_int(stream, TX.VOUT, "vout")
        scriptsig_size = read_compact_size(stream)
        scriptsig = read_stream(stream, scriptsig_size, "scriptsig")
        sequence = read_little_int(stream, TX.SEQUENCE, "sequence")

        return cls(txid, vout, scriptsig, sequence)

    def to_bytes(self) -> bytes:
        """
        txid || vout || scriptsig_size || scriptsig || sequence
        """
        parts = [
            self._txid,
            self._vout.to_bytes(TX.VOUT, "little"),
            write_compact_size(len(self._scriptsig)),
            self._scriptsig,
            self._sequence.to_bytes(TX.SEQUENCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self._txid[::-1].hex(),
            "vout": self._vout,
            "scriptsig_size": len(self._scriptsig),
            "scriptsig": self._scriptsig.hex(),
            "sequence": self._sequence
        }


class TxOutput(Serializable):
    """
    TxOutput
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   Amount              |   8           |   little-endian       |
    |   scriptpubkey_size   |   var         |   CompactSize         |
    |   scriptpubkey        |   var         |   Script              |
    -----------------------------------------------------------------
    """
    __slots__ = ("_amount", "_scriptpubkey")

    def __init__(self, amount: int, scriptpubkey: bytes):
        self._amount = amount
        self._scriptpubkey = bytes(scriptpubkey)

    @classmethod
    def empty(cls):
        """An output with no value and no script"""
        return cls(0, b'')

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def scriptpubkey(self) -> bytes:
        return self._scriptpubkey

    @property
    def is_empty(self) -> bool:
        return self._amount == 0 and not self._scriptpubkey

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        amount = read_little_int(stream, TX.AMOUNT, "amount")
        scriptpubkey_size = read_compact_size(stream)
        scriptpubkey = read_stream(stream, scriptpubkey_size, "scriptpubkey")

        return cls(amount, scriptpubkey)

    def to_bytes(self) -> bytes:
        """
        amount || scriptpubkey_size || scriptpubkey
        """
        parts = [
            self._amount.to_bytes(TX.AMOUNT, "little"),
            write_compact_size(len(self._scriptpubkey)),
            self._scriptpubkey
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "amount": self._amount,
            "scriptpubkey_size": len(self._scriptpubkey),
            "scriptpubkey": self._scriptpubkey.hex()
        }


class Transaction(Serializable):
    """
    Transaction
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Version         |   4           |   little-endian       |
    |   Time            |   4           |   little-endian       |
    |   input_count     |   var         |   CompactSize         |
    |   inputs          |   var         |   TxInput             |
    |   output_count    |   var         |   CompactSize         |
    |   outputs         |   var         |   TxOutput            |
    |   locktime        |   4           |   little-endian       |
    -------------------------------------------------------------
    """
    __slots__ = ("_version", "_timestamp", "_inputs", "_outputs", "_locktime")

    def __init__(self, inputs: Iterable[TxInput], outputs: Iterable[TxOutput], timestamp: int, locktime: int = 0,
                 version: int = TX.DEFAULT_VERSION):
        self._version = version
        self._timestamp = timestamp
        self._inputs = tuple(inputs)
        self._outputs = tuple(outputs)
        self._locktime = locktime

    @property
    def version(self) -> int:
        return self._version

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def inputs(self) -> tuple[TxInput, ...]:
        return self._inputs

    @property
    def outputs(self) -> tuple[TxOutput, ...]:
        return self._outputs

    @property
    def locktime(self) -> int:
        return self._locktime

    @property
    def txid(self) -> bytes:
        return hash256(self.to_bytes())

    @property
    def is_coinbase(self) -> bool:
        return len(self._inputs) == 1 and self._inputs[0].is_null_outpoint

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, TX.VERSION, "version")
        timestamp = read_little_int(stream, TX.TIME, "time")

        input_num = read_compact_size(stream)
        inputs = [TxInput.from_bytes(stream) for _ in range(input_num)]

        output_num = read_compact_size(stream)
        outputs = [TxOutput.from_bytes(stream) for _ in range(output_num)]

        locktime = read_little_int(stream, TX.LOCKTIME, "locktime")

        return cls(inputs, outputs, timestamp, locktime, version)

    def to_bytes(self) -> bytes:
        parts = [
            self._version.to_bytes(TX.VERSION, "little"),
            self._timestamp.to_bytes(TX.TIME, "little"),
            write_compact_size(len(self._inputs)),
            b''.join(i.to_bytes() for i in self._inputs),
            write_compact_size(len(self._outputs)),
            b''.join(o.to_bytes() for o in self._outputs),
            self._locktime.to_bytes(TX.LOCKTIME, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),
            "version": self._version,
            "time": self._timestamp,
            "inputs": [i.to_dict() for i in self._inputs],
            "outputs": [o.to_dict() for o in self._outputs],
            "locktime": self._locktime
        }
