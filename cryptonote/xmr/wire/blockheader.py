"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Based on the Monero block_header serialization.
"""

from cryptonote.util.encode import ByteArray

from .wire import encodeVarint, readVarint


HASH_SIZE = 32
NONCE_SIZE = 4


class BlockHeader:
    """
    BlockHeader is the fixed prefix of a serialized Cryptonote block.
    """

    def __init__(
        self, majorVersion=None, minorVersion=None, timestamp=None, prevId=None, nonce=None
    ):
        # majorVersion is the hard fork version. varint.
        self.majorVersion = majorVersion

        # minorVersion signals the fork the miner votes for. varint.
        self.minorVersion = minorVersion

        # timestamp is the UNIX time the block was mined. varint.
        self.timestamp = timestamp

        # prevId is the hash of the previous block. [32]byte.
        self.prevId = prevId

        # nonce is the proof-of-work nonce. uint32, little-endian.
        self.nonce = nonce

    @staticmethod
    def deserialize(b):
        """
        Decode the header from the start of a serialized block.

        Args:
            b (ByteArray, bytes-like or hex str): The serialized block or
                block header.

        Returns:
            BlockHeader: The decoded header.
        """
        b = ByteArray(b)
        bh = BlockHeader()
        bh.majorVersion = readVarint(b)
        bh.minorVersion = readVarint(b)
        bh.timestamp = readVarint(b)
        bh.prevId = b.pop(HASH_SIZE)
        bh.nonce = b.pop(NONCE_SIZE).littleInt()
        return bh

    def serialize(self):
        """
        Encode the header.

        Returns:
            ByteArray: The serialized header.
        """
        b = ByteArray(encodeVarint(self.majorVersion))
        b += encodeVarint(self.minorVersion)
        b += encodeVarint(self.timestamp)
        b += ByteArray(self.prevId, length=HASH_SIZE)
        b += ByteArray.fromLittleInt(self.nonce, NONCE_SIZE)
        return b
