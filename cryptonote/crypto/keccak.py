"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Pure Python Keccak sponge. Cryptonote hashes with the original Keccak
submission (domain suffix 0x01), which predates the FIPS 202 padding (0x06)
used by hashlib.sha3_256, so the standard library can't be used for the
protocol hash. The FIPS 202 members share the permutation and are provided
too.

References:
  [KECCAK]: The Keccak reference, version 3.0
    https://keccak.team/files/Keccak-reference-3.0.pdf

  [FIPS202]: SHA-3 Standard: Permutation-Based Hash and Extendable-Output
    Functions
"""

import enum

from cryptonote import CryptonoteError


STATE_SIZE = 200  # bytes, 1600 bits
LANE_SIZE = 8
ROUNDS = 24
MASK64 = (1 << 64) - 1

KECCAK_256 = "keccak256"
SHA3_224 = "sha3_224"
SHA3_256 = "sha3_256"
SHA3_384 = "sha3_384"
SHA3_512 = "sha3_512"
SHAKE128 = "shake128"
SHAKE256 = "shake256"

KECCAK_SUFFIX = 0x01
SHA3_SUFFIX = 0x06
SHAKE_SUFFIX = 0x1F

# kind -> (rate bits, capacity bits, suffix, output bytes). An output length
# of zero marks an extendable-output function.
# fmt: off
Params = {
    KECCAK_256: (1088, 512,  KECCAK_SUFFIX, 32),
    SHA3_224:   (1152, 448,  SHA3_SUFFIX,   28),
    SHA3_256:   (1088, 512,  SHA3_SUFFIX,   32),
    SHA3_384:   (832,  768,  SHA3_SUFFIX,   48),
    SHA3_512:   (576,  1024, SHA3_SUFFIX,   64),
    SHAKE128:   (1344, 256,  SHAKE_SUFFIX,  0),
    SHAKE256:   (1088, 512,  SHAKE_SUFFIX,  0),
}
# fmt: on


def rotl64(n, offset):
    """
    Rotate the 64-bit lane n left by offset bits.
    """
    offset %= 64
    if offset == 0:
        return n
    return ((n << offset) | (n >> (64 - offset))) & MASK64


def roundConstants():
    """
    Generate the iota round constants with the degree-8 LFSR of [KECCAK]
    section 1.2, feedback polynomial 0x71. Bit 2^j - 1 of a round's constant
    is set when the LFSR output is 1.
    """
    r = 1
    constants = []
    for _ in range(ROUNDS):
        rc = 0
        for j in range(7):
            r = ((r << 1) ^ ((r >> 7) * 0x71)) & 0xFF
            if r & 2:
                rc |= 1 << ((1 << j) - 1)
        constants.append(rc)
    return constants


def rhoPiSteps():
    """
    The combined rho and pi walk. Starting at lane (1, 0), each step moves
    (x, y) -> (y, 2x + 3y mod 5) and rotates the carried lane by the
    triangular number (t + 1)(t + 2) / 2.

    Returns:
        list(tuple(int, int)): (lane index, rotation) for each of 24 steps.
    """
    steps = []
    x, y = 1, 0
    for t in range(24):
        x, y = y, (2 * x + 3 * y) % 5
        steps.append((x + 5 * y, ((t + 1) * (t + 2) // 2) % 64))
    return steps


RoundConstants = roundConstants()
RhoPiSteps = rhoPiSteps()


def keccakF1600(state):
    """
    Apply the Keccak-f[1600] permutation to the state in place.

    Args:
        state (bytearray): The 200-byte state. Lane (x, y) is the
            little-endian 64-bit word at byte offset 8 * (x + 5y).
    """
    lanes = [
        int.from_bytes(state[i : i + LANE_SIZE], "little")
        for i in range(0, STATE_SIZE, LANE_SIZE)
    ]
    for rc in RoundConstants:
        # θ
        c = [
            lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
            for x in range(5)
        ]
        for x in range(5):
            d = c[(x + 4) % 5] ^ rotl64(c[(x + 1) % 5], 1)
            for y in range(0, 25, 5):
                lanes[x + y] ^= d

        # ρ and π
        current = lanes[1]
        for idx, rot in RhoPiSteps:
            current, lanes[idx] = lanes[idx], rotl64(current, rot)

        # χ
        for y in range(0, 25, 5):
            row = lanes[y : y + 5]
            for x in range(5):
                lanes[x + y] = row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5])

        # ι
        lanes[0] ^= rc

    for i, lane in enumerate(lanes):
        state[i * LANE_SIZE : (i + 1) * LANE_SIZE] = lane.to_bytes(LANE_SIZE, "little")


class Phase(enum.Enum):
    """
    The sponge life cycle. Input is accepted until the first squeeze, which
    pads and finalizes. A fixed-length hash is done after its single output.
    """

    INPUT = 1
    OUTPUT = 2
    DONE = 3


class Keccak:
    """
    A Keccak sponge with absorb/squeeze semantics.
    """

    def __init__(self, rate, capacity, suffix, outputLength=0):
        """
        Args:
            rate (int): The rate in bits.
            capacity (int): The capacity in bits. rate + capacity must be 1600.
            suffix (int): The domain separation suffix byte, including the
                first padding bit.
            outputLength (int): The fixed digest length in bytes, or 0 for an
                extendable-output function.
        """
        if rate + capacity != STATE_SIZE * 8:
            raise ValueError("invalid rate/capacity %i + %i" % (rate, capacity))
        if rate % 8 != 0:
            raise ValueError("invalid rate %i" % rate)
        self.rateBytes = rate // 8
        self.suffix = suffix
        self.outputLength = outputLength
        self.state = bytearray(STATE_SIZE)
        self.phase = Phase.INPUT
        self.inputBuffer = bytearray()
        self.outputBuffer = bytearray()
        self.needPermute = False

    def _xorIn(self, block):
        for i, v in enumerate(block):
            self.state[i] ^= v

    def absorb(self, data):
        """
        Add data to the hash input.

        Args:
            data (bytes-like): The data.

        Returns:
            Keccak: self, for chaining.
        """
        if self.phase != Phase.INPUT:
            raise CryptonoteError("no more input accepted")
        buf = self.inputBuffer
        buf += data
        rate = self.rateBytes
        offset = 0
        while len(buf) - offset >= rate:
            self._xorIn(buf[offset : offset + rate])
            keccakF1600(self.state)
            offset += rate
        if offset:
            del buf[:offset]
        return self

    def _finalize(self):
        self.phase = Phase.OUTPUT
        pending = len(self.inputBuffer)
        self._xorIn(self.inputBuffer)
        self.inputBuffer = bytearray()
        self.state[pending] ^= self.suffix
        if self.suffix & 0x80 and pending == self.rateBytes - 1:
            keccakF1600(self.state)
        self.state[self.rateBytes - 1] ^= 0x80
        keccakF1600(self.state)

    def _readBlock(self):
        if self.needPermute:
            keccakF1600(self.state)
        self.needPermute = True
        return self.state[: self.rateBytes]

    def squeeze(self, length=None):
        """
        Read output from the sponge. The first call finalizes the input.

        Args:
            length (int): The number of bytes to read. Must be the digest
                length, or None, for a fixed-length hash.

        Returns:
            bytes: The output.
        """
        if self.outputLength:
            if length is None:
                length = self.outputLength
            elif length != self.outputLength:
                raise ValueError(
                    "invalid length %i for a %i byte hash" % (length, self.outputLength)
                )
        elif length is None:
            raise ValueError("an output length is required")

        if self.phase == Phase.INPUT:
            self._finalize()
        if self.phase != Phase.OUTPUT:
            raise CryptonoteError("no more output allowed")

        while len(self.outputBuffer) < length:
            self.outputBuffer += self._readBlock()
        out = bytes(self.outputBuffer[:length])
        del self.outputBuffer[:length]
        if self.outputLength:
            self.phase = Phase.DONE
        return out

    def digest(self):
        """
        The digest of a fixed-length hash.
        """
        return self.squeeze()


def new(kind, data=b""):
    """
    Create a sponge for one of the supported hash kinds.

    Args:
        kind (str): KECCAK_256, SHA3_224, SHA3_256, SHA3_384, SHA3_512,
            SHAKE128 or SHAKE256.
        data (bytes-like): optional. Initial input.

    Returns:
        Keccak: The sponge.
    """
    if kind not in Params:
        raise ValueError(f"unknown hash type {kind}")
    return Keccak(*Params[kind]).absorb(data)


def keccak256(data):
    """
    Keccak-256, the Cryptonote fast hash.

    Args:
        data (bytes-like): The data to hash.

    Returns:
        bytes: The 32-byte digest.
    """
    return new(KECCAK_256, data).squeeze(32)


def sha3_224(data):
    return new(SHA3_224, data).squeeze()


def sha3_256(data):
    return new(SHA3_256, data).squeeze()


def sha3_384(data):
    return new(SHA3_384, data).squeeze()


def sha3_512(data):
    return new(SHA3_512, data).squeeze()


def shake128(data, length):
    return new(SHAKE128, data).squeeze(length)


def shake256(data, length):
    return new(SHAKE256, data).squeeze(length)
