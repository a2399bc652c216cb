"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

import hashlib

from Crypto.Hash import keccak as pycryptodomeKeccak
import pytest

from cryptonote import CryptonoteError
from cryptonote.crypto import keccak


# Lengths around the rates of every member, 72 to 168 bytes.
LENGTHS = list(range(0, 10)) + [71, 72, 73, 103, 104, 105, 135, 136, 137, 143,
                                144, 145, 167, 168, 169, 271, 272, 273, 300]


def message(n):
    return bytes((i * 7 + 3) & 0xFF for i in range(n))


def test_keccak256_vectors():
    # fmt: off
    vectors = (
        (b"", "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"),
        (b"abc", "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"),
        (bytes(32), "290decd9548b62a8d60345a988386fc84ba6bc95484008f6362f93160ef3e563"),
    )
    # fmt: on
    for data, digest in vectors:
        assert keccak.keccak256(data).hex() == digest


def test_keccak256_pycryptodome():
    for n in LENGTHS:
        msg = message(n)
        ref = pycryptodomeKeccak.new(digest_bits=256, data=msg).digest()
        assert keccak.keccak256(msg) == ref, f"length {n}"


def test_sha3_hashlib():
    pairs = (
        (keccak.sha3_224, hashlib.sha3_224),
        (keccak.sha3_256, hashlib.sha3_256),
        (keccak.sha3_384, hashlib.sha3_384),
        (keccak.sha3_512, hashlib.sha3_512),
    )
    for n in LENGTHS:
        msg = message(n)
        for ours, ref in pairs:
            assert ours(msg) == ref(msg).digest(), f"{ref.__name__} length {n}"


def test_shake_hashlib():
    for n in (0, 1, 136, 168, 300):
        msg = message(n)
        for outLen in (1, 32, 168, 169, 500):
            assert keccak.shake128(msg, outLen) == hashlib.shake_128(msg).digest(outLen)
            assert keccak.shake256(msg, outLen) == hashlib.shake_256(msg).digest(outLen)


def test_incremental_absorb():
    msg = message(500)
    whole = keccak.keccak256(msg)
    for step in (1, 7, 135, 136, 137):
        sponge = keccak.new(keccak.KECCAK_256)
        for i in range(0, len(msg), step):
            sponge.absorb(msg[i : i + step])
        assert sponge.digest() == whole


def test_xof_squeeze_pieces():
    msg = b"extendable output"
    whole = keccak.shake128(msg, 400)
    sponge = keccak.new(keccak.SHAKE128, msg)
    pieces = b"".join(sponge.squeeze(n) for n in (1, 100, 67, 168, 64))
    assert pieces == whole
    assert sponge.phase == keccak.Phase.OUTPUT


def test_phases():
    sponge = keccak.new(keccak.KECCAK_256, b"abc")
    assert sponge.phase == keccak.Phase.INPUT
    sponge.digest()
    assert sponge.phase == keccak.Phase.DONE
    with pytest.raises(CryptonoteError):
        sponge.squeeze()
    with pytest.raises(CryptonoteError):
        sponge.absorb(b"more")

    xof = keccak.new(keccak.SHAKE256)
    xof.squeeze(10)
    with pytest.raises(CryptonoteError):
        xof.absorb(b"more")


def test_bad_parameters():
    with pytest.raises(ValueError):
        keccak.Keccak(1000, 500, keccak.KECCAK_SUFFIX)
    with pytest.raises(ValueError):
        keccak.Keccak(1084, 516, keccak.KECCAK_SUFFIX)
    with pytest.raises(ValueError):
        keccak.new("md5")
    with pytest.raises(ValueError):
        keccak.new(keccak.SHA3_256).squeeze(16)
    with pytest.raises(ValueError):
        keccak.new(keccak.SHAKE128).squeeze()


def test_constants():
    rc = keccak.RoundConstants
    assert len(rc) == 24
    assert rc[0] == 0x0000000000000001
    assert rc[1] == 0x0000000000008082
    assert rc[23] == 0x8000000080008008

    steps = keccak.RhoPiSteps
    assert steps[0] == (10, 1)
    assert steps[-1] == (1, 44)
    assert sorted(idx for idx, _ in steps) == list(range(1, 25))

    assert keccak.rotl64(1, 64) == 1
    assert keccak.rotl64(1 << 63, 1) == 1
    assert keccak.rotl64(0x8000000000000001, 4) == 0x18
