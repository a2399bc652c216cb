"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from cryptonote import CryptonoteError, ValidationError
from cryptonote.util.encode import ByteArray, decodeBA, intFromBytes, intToBytes


class TestEncode:
    def test_ByteArray(self):
        makeA = lambda: ByteArray([0, 0, 255])
        makeB = lambda: ByteArray([0, 255, 0])
        zero = ByteArray([0, 0, 0])

        assert makeA() ^ makeB() == bytearray([0, 255, 255])
        assert makeA() ^ makeA() == zero
        with pytest.raises(CryptonoteError):
            makeA() ^ ByteArray([1])

        a = makeA()
        a.zero()
        assert a == zero
        assert a.iszero()
        assert not makeA().iszero()

        zero2 = ByteArray(zero)
        assert zero.b is not zero2.b
        assert zero == zero2

        zero2 = ByteArray(zero, copy=False)
        assert zero.b is zero2.b

        assert makeA() != makeB()
        assert makeA() != None  # noqa
        assert not (makeA() == None)  # noqa
        assert makeA() == "0000ff"
        assert makeA() == b"\x00\x00\xff"
        assert makeA() != "not hex"

        z = ByteArray(zero)
        z[2] = 255
        assert makeA() == z
        with pytest.raises(CryptonoteError):
            zero[3] = 0

        assert makeA()[2] == 255
        assert isinstance(makeA()[1:], ByteArray)
        assert makeA()[1:] == "00ff"
        assert makeA() + makeB() == "0000ff00ff00"
        assert makeA() + b"\x01" == "0000ff01"
        assert len(makeA() + makeB()) == 6

        assert {makeA(): 1}[ByteArray("0000ff")] == 1
        assert repr(makeA()) == "ByteArray(0000ff)"

    def test_construction(self):
        assert ByteArray().hex() == ""
        assert ByteArray(length=4) == bytes(4)
        assert ByteArray("ff", length=3) == "0000ff"
        assert ByteArray(0) == "00"
        assert ByteArray(256) == "0100"
        with pytest.raises(CryptonoteError):
            ByteArray("ffff", length=1)
        with pytest.raises(ValidationError):
            ByteArray("xyz")
        with pytest.raises(TypeError):
            ByteArray(1.5)

    def test_ints(self):
        b = ByteArray("0102")
        assert b.int() == 0x0102
        assert b.littleInt() == 0x0201
        assert ByteArray.fromLittleInt(0x0201, 2) == b
        assert ByteArray.fromLittleInt(1) == "01" + "00" * 31
        assert intToBytes(0x0102) == bytearray([1, 2])
        assert intToBytes(0x0102, 4, "little") == bytearray([2, 1, 0, 0])
        assert intFromBytes(b"\x01\x02", "little") == 0x0201

    def test_pop(self):
        b = ByteArray("0102030405")
        assert b.pop(2) == "0102"
        assert b == "030405"
        assert b.pop(0) == ""
        with pytest.raises(ValidationError):
            b.pop(4)
        assert b.pop(3) == "030405"
        assert len(b) == 0

    def test_copy(self):
        a = ByteArray("0102")
        c = a.copy()
        c[0] = 0xFF
        assert a == "0102"
        assert a.bytes() == b"\x01\x02"
        assert isinstance(a.bytes(), bytes)

    def test_decodeBA(self):
        ba = bytearray(b"\x01")
        assert decodeBA(ba) is ba
        assert decodeBA(ba, copy=True) is not ba
        assert decodeBA([1, 2]) == bytearray([1, 2])
        assert decodeBA(b"\x01") == bytearray([1])
