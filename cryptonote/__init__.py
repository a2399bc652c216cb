"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""


class CryptonoteError(Exception):
    pass


class ValidationError(CryptonoteError):
    """
    The input bytes or text have the wrong shape: bad length, a character
    outside the alphabet, a non-canonical encoding.
    """

    pass


class LengthError(ValidationError):
    """
    A key, payment ID or seed is not the size the protocol requires.
    """

    pass


class ChecksumError(CryptonoteError):
    """
    The trailing checksum of a Base58Check string does not match its payload.
    """

    pass


class CurveError(CryptonoteError):
    """
    The bytes do not decode to a point on the edwards25519 curve.
    """

    pass


class ProtocolError(CryptonoteError):
    """
    A serialized protocol structure, such as tx_extra, has an unsupported or
    truncated record.
    """

    pass


def checkLength(name, b, length):
    """
    Check that b is exactly length bytes long.

    Args:
        name str: the name that will appear in the error message.
        b bytes-like: the value to check.
        length int: the required length.

    Raises:
        LengthError if the length of b is not length.
    """
    if len(b) != length:
        raise LengthError(f"{name}: expected {length} bytes, got {len(b)}")
