"""
Copyright (c) 2020, Brian Stafford
Copyright (c) 2020, the Decred developers
See LICENSE for details

A class that wraps bytearray and provides some convenient operators for key
material.
"""

from cryptonote import CryptonoteError, ValidationError


def intToBytes(i, length=None, byteorder="big"):
    """
    Encodes a non-negative integer to bytes.

    Args:
        i (int): The integer.
        length (int): optional. The encoded length. By default, the shortest
            encoding is used.
        byteorder (str): "big" or "little".

    Returns:
        bytearray: The encoded integer.
    """
    if length is None:
        length = (i.bit_length() + 7) // 8
    return bytearray(i.to_bytes(length, byteorder=byteorder))


def intFromBytes(b, byteorder="big"):
    """
    Decodes a non-negative integer from bytes.

    Args:
        b (bytes-like): The encoded integer.
        byteorder (str): "big" or "little".

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, byteorder)


def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value to decode to
            a bytearray. Strings are interpreted as hexadecimal. Integers are
            minimally encoded to a big-endian unsigned integer.

    Returns:
        bytearray: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, bytes):
        return bytearray(b)
    if isinstance(b, int):
        return intToBytes(b) if b else bytearray([0])
    if isinstance(b, str):
        try:
            return bytearray.fromhex(b)
        except ValueError:
            raise ValidationError(f"decodeBA: invalid hex string {b!r}")
    if hasattr(b, "__iter__"):
        return bytearray(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray is a bytearray manager. It implements a subset of bytearray's
    operators and provides some convenience decodings on the fly, so keys can
    be passed around as hex strings, bytes or ByteArray interchangeably.
    Since bytearrays are mutable, ByteArray can also zero the internal value
    without relying on garbage collection. An integer argument results in the
    shortest big-endian encoding of the integer. To get a zero-valued or
    zero-padded ByteArray of length n, use the `length` keyword argument.
    """

    def __init__(self, b=b"", copy=True, length=None):
        """
        Set copy to False if you want to share the memory with another
        bytearray/ByteArray. If the type of b is not bytearray or ByteArray,
        copy has no effect.
        """
        b = decodeBA(b, copy=copy)
        if length is not None:
            if len(b) > length:
                raise CryptonoteError(
                    "ByteArray: %i bytes do not fit in %i" % (len(b), length)
                )
            b = bytearray(length - len(b)) + b
        self.b = b

    @staticmethod
    def fromLittleInt(i, length=32):
        """
        Encode the integer as a fixed-width little-endian ByteArray, the
        byte order of edwards25519 scalars.

        Args:
            i (int): The integer.
            length (int): The encoded length.

        Returns:
            ByteArray: The encoded integer.
        """
        return ByteArray(intToBytes(i, length, "little"), copy=False)

    def __eq__(self, a):
        try:
            return bytearray.__eq__(self.b, decodeBA(a))
        except (ValidationError, TypeError):
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __repr__(self):
        return "ByteArray(" + self.hex() + ")"

    def __len__(self):
        return len(self.b)

    def __xor__(self, a):
        a = decodeBA(a)
        if len(a) != len(self.b):
            raise CryptonoteError(
                "xor: length mismatch %i != %i" % (len(a), len(self.b))
            )
        return ByteArray(bytearray(x ^ y for x, y in zip(self.b, a)), copy=False)

    def __add__(self, a):
        """append the bytes and return a new ByteArray"""
        a = decodeBA(a)
        return ByteArray(self.b + a, copy=False)

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k.start : k.stop : k.step], copy=False)
        return self.b[k]

    def __setitem__(self, i, v):
        v = decodeBA(v, copy=False)
        if i + len(v) > len(self.b):
            raise CryptonoteError("source bytes too long")
        for j in range(len(v)):
            self.b[i + j] = v[j]

    def __hash__(self):
        """Enables ByteArray to be a dict key."""
        return hash(bytes(self.b))

    def hex(self):
        """
        A hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.b.hex()

    def zero(self):
        """
        Sets the bytes of the underlying bytearray to zero. The benefit of
        zeroing is that the info is destroyed immediately, rather than relying
        on the garbage collector.
        """
        for i in range(len(self.b)):
            self.b[i] = 0

    def iszero(self):
        """
        True if all bytes are zero.
        """
        return all((v == 0 for v in self.b))

    def int(self):
        """The bytes as a big-endian integer."""
        return intFromBytes(self.b)

    def littleInt(self):
        """The bytes as a little-endian integer."""
        return intFromBytes(self.b, "little")

    def bytes(self):
        """The bytes as Python `bytes`."""
        return bytes(self.b)

    def copy(self):
        """A copy of the ByteArray."""
        return ByteArray(self.b)

    def pop(self, n):
        """
        Remove n bytes from the beginning of the ByteArray, returning the bytes.
        Raises ValidationError if fewer than n bytes remain.
        """
        if n > len(self.b):
            raise ValidationError(
                "pop: %i bytes requested, %i available" % (n, len(self.b))
            )
        b = self[:n]
        self.b = self.b[n:]
        return b
