"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Arithmetic modulo the edwards25519 field prime and modulo the group order.
Field elements and scalars are plain Python integers; every operation that
returns one reduces it.
"""

from cryptonote import LengthError, ValidationError, checkLength


SCALAR_SIZE = 32

# P is the field prime, 2^255 - 19.
P = 2 ** 255 - 19

# L is the order of the prime-order subgroup generated by the base point.
L = 2 ** 252 + 27742317777372353535851937790883648493

# Cofactor of the curve. The full group has order 8 * L.
COFACTOR = 8


def inv(x):
    """
    The multiplicative inverse of x mod P, by Fermat's little theorem.
    """
    return pow(x, P - 2, P)


# D is the twisted Edwards curve constant, -121665 / 121666.
D = -121665 * inv(121666) % P

# SQRT_M1 is a square root of -1 mod P.
SQRT_M1 = pow(2, (P - 1) // 4, P)


def isNegative(x):
    """
    The "sign" of a field element, the low bit of its canonical encoding.
    """
    return (x % P) & 1


def sqrtRatio(u, v):
    """
    Compute a square root of u / v mod P.

    Args:
        u (int): numerator.
        v (int): denominator, non-zero.

    Returns:
        int or None: A root, or None if u / v is not a square.
    """
    xx = u * inv(v) % P
    # P = 5 mod 8, so a candidate root is xx^((P + 3) / 8). Either it or
    # SQRT_M1 times it is the root when one exists.
    x = pow(xx, (P + 3) // 8, P)
    if (x * x - xx) % P != 0:
        x = x * SQRT_M1 % P
    if (x * x - xx) % P != 0:
        return None
    return x


def decodeScalar(b):
    """
    Decode a 32-byte little-endian scalar without reducing it.

    Args:
        b (bytes-like): The encoded scalar.

    Returns:
        int: The scalar.
    """
    checkLength("scalar", b, SCALAR_SIZE)
    return int.from_bytes(bytes(b), "little")


def reduceScalar(k):
    """
    Reduce the scalar modulo the group order.
    """
    return k % L


def encodeScalar(k):
    """
    Encode the scalar as 32 little-endian bytes.

    Args:
        k (int): A non-negative scalar below 2^256.

    Returns:
        bytes: The encoded scalar.
    """
    if k < 0:
        raise ValidationError("cannot encode negative scalar")
    if k.bit_length() > SCALAR_SIZE * 8:
        raise LengthError("scalar does not fit in %i bytes" % SCALAR_SIZE)
    return k.to_bytes(SCALAR_SIZE, "little")


def scReduce32(b):
    """
    Reduce a 32-byte little-endian value mod L, returning the 32-byte
    encoding. This is sc_reduce32 of the Cryptonote reference code.
    """
    return encodeScalar(reduceScalar(decodeScalar(b)))


def scAdd(a, b):
    """
    (a + b) mod L on 32-byte encodings.
    """
    return encodeScalar((decodeScalar(a) + decodeScalar(b)) % L)


def isReduced(b):
    """
    Whether the 32-byte scalar encoding is already below L, as Cryptonote
    requires of secret keys.
    """
    return decodeScalar(b) < L
