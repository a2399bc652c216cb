"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-20, The Decred developers
See LICENSE for details
"""

import os

from cryptonote import LengthError
from cryptonote.util.encode import ByteArray


# Wallet seeds are a single 256-bit scalar.
KEY_SIZE = 32


def checkSeedLength(length):
    """
    Check that seed length is correct.

    Args:
        length int: the seed length to be checked.

    Raises:
        LengthError if length is not KEY_SIZE.
    """
    if length != KEY_SIZE:
        raise LengthError(f"Invalid seed length {length}, expected {KEY_SIZE}")


def generateSeed(length=KEY_SIZE):
    """
    Generate a cryptographically-strong random seed.

    Returns:
        bytes: a random bytes object of the given length.
    """
    checkSeedLength(length)
    return os.urandom(length)


def newKey():
    """
    Generate a wrapped random 32-byte wallet seed, suitable for
    crypto.genPrivateKeys.

    Returns:
        ByteArray: a random object of KEY_SIZE length.
    """
    return ByteArray(generateSeed(KEY_SIZE))
