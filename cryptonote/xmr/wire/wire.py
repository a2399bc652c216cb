"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Constants and common routines of the Cryptonote binary serialization.
"""

from cryptonote import ValidationError


MaxUint32 = (1 << 32) - 1
MaxUint64 = (1 << 64) - 1

# A uint64 takes at most 10 groups of 7 bits.
MaxVarintSize = 10


def encodeVarint(i):
    """
    Encode an unsigned integer as a little-endian base-128 varint. Every byte
    but the last has its high bit set.

    Args:
        i (int): The integer.

    Returns:
        bytes: The encoded integer.
    """
    if i < 0:
        raise ValidationError(f"cannot encode negative varint {i}")
    b = bytearray()
    while i >= 0x80:
        b.append((i & 0x7F) | 0x80)
        i >>= 7
    b.append(i)
    return bytes(b)


def decodeVarint(b):
    """
    Decode a varint from the start of b.

    Args:
        b (bytes-like): The encoded integer, possibly followed by other data.

    Returns:
        int: The integer.
        int: The number of bytes consumed.
    """
    value = 0
    for i, v in enumerate(b):
        if i == MaxVarintSize:
            break
        value |= (v & 0x7F) << (7 * i)
        if not v & 0x80:
            if value > MaxUint64:
                raise ValidationError("varint overflows 64 bits")
            return value, i + 1
    if len(b) >= MaxVarintSize:
        raise ValidationError("varint overflows 64 bits")
    raise ValidationError("truncated varint")


def popVarint(b):
    """
    Remove the leading varint from b.

    Args:
        b (bytes-like): The data.

    Returns:
        bytes-like: The data following the varint.
    """
    _, n = decodeVarint(b)
    return b[n:]


def readVarint(b):
    """
    Decode the leading varint from the ByteArray b, consuming it.

    Args:
        b (ByteArray): The data.

    Returns:
        int: The integer.
    """
    value, n = decodeVarint(b.b)
    b.pop(n)
    return value
