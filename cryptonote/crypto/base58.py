"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Cryptonote block Base58. Unlike the Bitcoin encoding, which converts the
whole payload as one big number, Cryptonote splits the payload into 8-byte
blocks and encodes each into a fixed number of characters, so the encoded
length depends only on the payload length.
"""

from base58 import BITCOIN_ALPHABET, b58decode_int, b58encode_int

from cryptonote import ChecksumError, ValidationError

from .keccak import keccak256


ALPHABET = BITCOIN_ALPHABET.decode()
FULL_BLOCK_SIZE = 8
FULL_ENCODED_BLOCK_SIZE = 11
CHECKSUM_SIZE = 4

# EncodedBlockSizes[n] is the number of characters an n-byte block encodes
# to, the smallest count c with 58^c >= 256^n.
EncodedBlockSizes = [0, 2, 3, 5, 6, 7, 9, 10, 11]

# DecodedBlockSizes maps a character count back to a block size.
DecodedBlockSizes = {c: n for n, c in enumerate(EncodedBlockSizes)}


def encodeBlock(block):
    """
    Encode a block of 1 to 8 bytes. The block is read as a big-endian
    integer and written as a fixed-width base-58 numeral, left-padded with
    the zero digit.

    Args:
        block (bytes-like): The block.

    Returns:
        str: The encoded block.
    """
    if not 0 < len(block) <= FULL_BLOCK_SIZE:
        raise ValidationError(f"invalid block length {len(block)}")
    size = EncodedBlockSizes[len(block)]
    num = int.from_bytes(bytes(block), "big")
    return b58encode_int(num, default_one=False).decode().rjust(size, ALPHABET[0])


def decodeBlock(s):
    """
    Decode an encoded block. The character count must be one that a block
    size encodes to, and the value must fit in that many bytes.

    Args:
        s (str): The encoded block.

    Returns:
        bytes: The decoded block.
    """
    size = DecodedBlockSizes.get(len(s))
    if not size:
        raise ValidationError(f"invalid encoded block length {len(s)}")
    if any(c not in ALPHABET for c in s):
        raise ValidationError(f"invalid base58 character in {s!r}")
    num = b58decode_int(s)
    if num >> (8 * size):
        raise ValidationError(f"block {s!r} overflows {size} bytes")
    return num.to_bytes(size, "big")


def encode(b):
    """
    Encode the bytes to Cryptonote Base58.

    Args:
        b (bytes-like): The data.

    Returns:
        str: The encoded data.
    """
    b = bytes(b)
    return "".join(
        encodeBlock(b[i : i + FULL_BLOCK_SIZE])
        for i in range(0, len(b), FULL_BLOCK_SIZE)
    )


def decode(s):
    """
    Decode Cryptonote Base58 text.

    Args:
        s (str): The encoded data.

    Returns:
        bytes: The decoded data.
    """
    return b"".join(
        decodeBlock(s[i : i + FULL_ENCODED_BLOCK_SIZE])
        for i in range(0, len(s), FULL_ENCODED_BLOCK_SIZE)
    )


def checksum(b):
    """
    The address checksum.

    Args:
        b (byte-like): Bytes to obtain a checksum for.

    Returns:
        bytes: The first 4 bytes of the Keccak-256 hash of b.
    """
    return keccak256(b)[:CHECKSUM_SIZE]


def encodeCheck(payload):
    """
    Append the checksum to the payload and encode.

    Args:
        payload (bytes-like): The data.

    Returns:
        str: The encoded data.
    """
    payload = bytes(payload)
    return encode(payload + checksum(payload))


def decodeCheck(s):
    """
    Decode the text and verify its checksum.

    Args:
        s (str): The encoded data.

    Returns:
        bytes: The payload, without the checksum.

    Raises:
        ChecksumError if the checksum doesn't match.
    """
    decoded = decode(s)
    if len(decoded) < CHECKSUM_SIZE:
        raise ValidationError("decoded data lacks a checksum")
    payload, included = decoded[:-CHECKSUM_SIZE], decoded[-CHECKSUM_SIZE:]
    if checksum(payload) != included:
        raise ChecksumError("checksum error")
    return payload


def verifyChecksum(s):
    """
    Whether s is well-formed Base58 with a valid checksum.
    """
    try:
        decodeCheck(s)
    except (ValidationError, ChecksumError):
        return False
    return True
