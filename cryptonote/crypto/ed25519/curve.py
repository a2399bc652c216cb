"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Pure Python edwards25519 group implementation.

References:
  [RFC8032]: Edwards-Curve Digital Signature Algorithm (EdDSA)
    https://tools.ietf.org/html/rfc8032

  [HWCD08]: Twisted Edwards Curves Revisited (Hisil, Wong, Carter, Dawson)
    https://eprint.iacr.org/2008/522

All group operations are performed using extended coordinates.  For a given
(x, y) position on the curve, the extended coordinates are (X, Y, Z, T)
where x = X/Z, y = Y/Z and x * y = T/Z.
"""

from cryptonote import CurveError, checkLength

from .field import COFACTOR, D, P, inv, isNegative, sqrtRatio


POINT_SIZE = 32

D2 = 2 * D % P


class Point:
    """
    A point on edwards25519 in extended coordinates. Points are immutable;
    group operations return new points.
    """

    __slots__ = ("X", "Y", "Z", "T")

    def __init__(self, X, Y, Z, T):
        self.X = X
        self.Y = Y
        self.Z = Z
        self.T = T

    @staticmethod
    def fromAffine(x, y):
        return Point(x % P, y % P, 1, x * y % P)

    def affine(self):
        """
        The affine (x, y) coordinates.
        """
        zInv = inv(self.Z)
        return self.X * zInv % P, self.Y * zInv % P

    def add(self, other):
        """
        Unified addition, "add-2008-hwcd-3" of [HWCD08] for a = -1. Handles
        doubling and the identity as well.
        """
        a = (self.Y - self.X) * (other.Y - other.X) % P
        b = (self.Y + self.X) * (other.Y + other.X) % P
        c = self.T * D2 * other.T % P
        d = self.Z * 2 * other.Z % P
        e, f, g, h = b - a, d - c, d + c, b + a
        return Point(e * f % P, g * h % P, f * g % P, e * h % P)

    def double(self):
        """
        Doubling, "dbl-2008-hwcd" of [HWCD08] for a = -1.
        """
        a = self.X * self.X % P
        b = self.Y * self.Y % P
        c = 2 * self.Z * self.Z % P
        h = a + b
        e = h - (self.X + self.Y) ** 2
        g = a - b
        f = c + g
        return Point(e * f % P, g * h % P, f * g % P, e * h % P)

    def negate(self):
        return Point(-self.X % P, self.Y, self.Z, -self.T % P)

    def isIdentity(self):
        return self.X % P == 0 and (self.Y - self.Z) % P == 0

    def __add__(self, other):
        return self.add(other)

    def __eq__(self, other):
        """
        Projective comparison: x1/z1 == x2/z2 and y1/z1 == y2/z2.
        """
        if not isinstance(other, Point):
            return False
        return (self.X * other.Z - other.X * self.Z) % P == 0 and (
            self.Y * other.Z - other.Y * self.Z
        ) % P == 0

    def __repr__(self):
        return "Point(" + encodePoint(self).hex() + ")"


IDENTITY = Point(0, 1, 1, 0)


def isOnCurve(x, y):
    """
    Check -x^2 + y^2 = 1 + d x^2 y^2.
    """
    xx, yy = x * x, y * y
    return (yy - xx - 1 - D * xx * yy) % P == 0


def recoverX(y, sign):
    """
    Solve the curve equation for x given y and the sign bit of x.

    Args:
        y (int): The y coordinate, reduced mod P.
        sign (int): The low bit wanted for x.

    Returns:
        int: The x coordinate.
    """
    # x^2 = (y^2 - 1) / (d y^2 + 1)
    yy = y * y
    x = sqrtRatio(yy - 1, D * yy + 1)
    if x is None:
        raise CurveError("no square root, not a curve point")
    if x == 0 and sign:
        raise CurveError("invalid sign bit for x = 0")
    if isNegative(x) != sign:
        x = P - x
    return x


def encodePoint(pt):
    """
    Encode the point as 32 bytes: y little-endian with the low bit of x
    stored in the top bit.

    Args:
        pt (Point): The point.

    Returns:
        bytes: The compressed point.
    """
    x, y = pt.affine()
    return (y | (isNegative(x) << 255)).to_bytes(POINT_SIZE, "little")


def decodePoint(b):
    """
    Decode a compressed point.

    Args:
        b (bytes-like): The 32-byte encoding.

    Returns:
        Point: The decoded point.

    Raises:
        CurveError if the bytes are not the encoding of a curve point.
    """
    checkLength("point", b, POINT_SIZE)
    v = int.from_bytes(bytes(b), "little")
    sign = v >> 255
    y = (v & ((1 << 255) - 1)) % P
    x = recoverX(y, sign)
    if not isOnCurve(x, y):
        raise CurveError("decoded point is not on the curve")
    return Point.fromAffine(x, y)


def isValidPoint(b):
    """
    Whether the bytes decode to a curve point.
    """
    try:
        decodePoint(b)
    except CurveError:
        return False
    return True


class Curve:
    def __init__(self):
        # The base point of [RFC8032] section 5.1, y = 4/5 with positive x.
        gy = 4 * inv(5) % P
        gx = recoverX(gy, 0)
        self.G = Point.fromAffine(gx, gy)
        self.BitSize = 256
        # BasePoints[i] is 2^i * G. Unreduced 256-bit keys are multiplied
        # against the base point directly, so the table covers all 256 bits.
        self.BasePoints = [self.G]
        for _ in range(self.BitSize - 1):
            self.BasePoints.append(self.BasePoints[-1].double())

    def scalarBaseMult(self, k):
        """
        scalarBaseMult returns k*G for a non-negative integer k below 2^256.
        """
        if k < 0 or k.bit_length() > self.BitSize:
            raise ValueError("scalar out of range")
        q = IDENTITY
        i = 0
        while k:
            if k & 1:
                q = q.add(self.BasePoints[i])
            k >>= 1
            i += 1
        return q

    def scalarMult(self, pt, k):
        """
        scalarMult returns k*pt for any non-negative integer k, using
        left-to-right double-and-add. k is not reduced, so small multipliers
        such as the cofactor act on the full group.
        """
        if k < 0:
            raise ValueError("negative scalar")
        q = IDENTITY
        for i in range(k.bit_length() - 1, -1, -1):
            q = q.double()
            if (k >> i) & 1:
                q = q.add(pt)
        return q

    def mulCofactor(self, pt):
        """
        8*pt, clearing any small-order component.
        """
        return self.scalarMult(pt, COFACTOR)


curve = Curve()
