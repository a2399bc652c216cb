"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

import random

from nacl import bindings
import pytest

from cryptonote import CurveError, LengthError, ValidationError
from cryptonote.crypto.ed25519 import field
from cryptonote.crypto.ed25519.curve import (
    IDENTITY,
    Point,
    curve,
    decodePoint,
    encodePoint,
    isOnCurve,
    isValidPoint,
)


GENERATOR = "5866666666666666666666666666666666666666666666666666666666666666"
IDENTITY_ENC = "01" + "00" * 31


class TestField:
    def test_constants(self):
        assert field.D * 121666 % field.P == -121665 % field.P
        assert field.SQRT_M1 ** 2 % field.P == field.P - 1

    def test_inv(self):
        for _ in range(20):
            x = random.randint(1, field.P - 1)
            assert x * field.inv(x) % field.P == 1

    def test_sqrtRatio(self):
        for _ in range(20):
            x = random.randint(1, field.P - 1)
            v = random.randint(1, field.P - 1)
            u = x * x * v % field.P
            root = field.sqrtRatio(u, v)
            assert root in (x, field.P - x)
        # -1 is a square mod P, but 2 is not.
        assert field.sqrtRatio(field.P - 1, 1) is not None
        assert field.sqrtRatio(2, 1) is None

    def test_scalars(self):
        assert field.scReduce32(field.L.to_bytes(32, "little")) == bytes(32)
        assert field.scReduce32((field.L + 5).to_bytes(32, "little")) == (
            5
        ).to_bytes(32, "little")
        assert field.isReduced((field.L - 1).to_bytes(32, "little"))
        assert not field.isReduced(field.L.to_bytes(32, "little"))
        assert field.scAdd(
            (field.L - 1).to_bytes(32, "little"), (2).to_bytes(32, "little")
        ) == (1).to_bytes(32, "little")
        assert field.decodeScalar(b"\x01" + bytes(31)) == 1
        with pytest.raises(LengthError):
            field.decodeScalar(bytes(31))
        with pytest.raises(ValidationError):
            field.encodeScalar(-1)
        with pytest.raises(LengthError):
            field.encodeScalar(1 << 256)


class TestCurve:
    def test_generator(self):
        assert encodePoint(curve.G).hex() == GENERATOR
        assert isOnCurve(*curve.G.affine())
        assert curve.scalarMult(curve.G, field.L).isIdentity()
        assert not curve.scalarMult(curve.G, field.L - 1).isIdentity()
        assert len(curve.BasePoints) == curve.BitSize

    def test_identity(self):
        assert encodePoint(IDENTITY).hex() == IDENTITY_ENC
        assert curve.scalarBaseMult(0) == IDENTITY
        assert curve.G + IDENTITY == curve.G
        assert curve.G + curve.G.negate() == IDENTITY
        assert curve.G.add(curve.G) == curve.G.double()

    def test_projective_equality(self):
        x, y = curve.G.affine()
        z = 12345
        scaled = Point(x * z % field.P, y * z % field.P, z, x * y * z % field.P)
        assert scaled == curve.G
        assert encodePoint(scaled) == encodePoint(curve.G)
        assert curve.G != curve.G.double()
        assert curve.G != GENERATOR

    def test_scalarBaseMult(self, randScalar):
        for _ in range(5):
            k = randScalar()
            ours = encodePoint(curve.scalarBaseMult(int.from_bytes(k, "little")))
            assert ours == bindings.crypto_scalarmult_ed25519_base_noclamp(k)
        # Unreduced scalars multiply as integers.
        k = random.randint(1, field.L - 1)
        assert curve.scalarBaseMult(k + field.L) == curve.scalarBaseMult(k)
        with pytest.raises(ValueError):
            curve.scalarBaseMult(1 << 256)
        with pytest.raises(ValueError):
            curve.scalarBaseMult(-1)

    def test_scalarMult(self, randScalar):
        for _ in range(3):
            k, n = randScalar(), randScalar()
            pt = curve.scalarBaseMult(int.from_bytes(n, "little"))
            ours = encodePoint(curve.scalarMult(pt, int.from_bytes(k, "little")))
            assert ours == bindings.crypto_scalarmult_ed25519_noclamp(
                k, encodePoint(pt)
            )
        assert curve.scalarMult(curve.G, 0) == IDENTITY
        assert curve.scalarMult(curve.G, 1) == curve.G
        with pytest.raises(ValueError):
            curve.scalarMult(curve.G, -1)

    def test_add(self, randScalar):
        for _ in range(3):
            a = curve.scalarBaseMult(int.from_bytes(randScalar(), "little"))
            b = curve.scalarBaseMult(int.from_bytes(randScalar(), "little"))
            assert encodePoint(a + b) == bindings.crypto_core_ed25519_add(
                encodePoint(a), encodePoint(b)
            )

    def test_encode_decode(self, randScalar):
        for _ in range(5):
            pt = curve.scalarBaseMult(int.from_bytes(randScalar(), "little"))
            enc = encodePoint(pt)
            assert decodePoint(enc) == pt
            assert encodePoint(decodePoint(enc)) == enc
            assert isValidPoint(enc)

    def test_decode_errors(self):
        with pytest.raises(LengthError):
            decodePoint(bytes(31))
        # x = 0 with the sign bit set.
        with pytest.raises(CurveError):
            decodePoint(bytes.fromhex("01" + "00" * 30 + "80"))
        # About half of all y values have no x on the curve.
        encodings = [y.to_bytes(32, "little") for y in range(2, 40)]
        assert not all(isValidPoint(b) for b in encodings)
        assert any(isValidPoint(b) for b in encodings)
        for b in encodings:
            if not isValidPoint(b):
                with pytest.raises(CurveError):
                    decodePoint(b)

    def test_mulCofactor(self):
        # (0, -1) has order 2.
        lowOrder = decodePoint((field.P - 1).to_bytes(32, "little"))
        assert not lowOrder.isIdentity()
        assert curve.mulCofactor(lowOrder).isIdentity()
        assert curve.mulCofactor(curve.G) == curve.scalarBaseMult(8)
        # Adding a small-order component doesn't survive cofactor clearing.
        assert curve.mulCofactor(curve.G + lowOrder) == curve.mulCofactor(curve.G)
