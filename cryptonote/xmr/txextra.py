"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Parsing of the tx_extra field. tx_extra is a sequence of records, each a tag
byte followed by a tag-specific payload. Only the records that carry keys and
payment IDs are interpreted. Others are skipped by their declared length.
"""

from cryptonote import ProtocolError, ValidationError
from cryptonote.crypto.crypto import KEY_SIZE, PAYMENT_ID_SIZE
from cryptonote.util import helpers
from cryptonote.util.encode import ByteArray

from .wire.wire import readVarint


log = helpers.getLogger("TXEXTRA")

TX_EXTRA_TAG_PADDING = 0x00
TX_EXTRA_TAG_PUBKEY = 0x01
TX_EXTRA_NONCE = 0x02
TX_EXTRA_MERGE_MINING_TAG = 0x03
TX_EXTRA_TAG_ADDITIONAL_PUBKEYS = 0x04
TX_EXTRA_MYSTERIOUS_MINERGATE_TAG = 0xDE

# Sub-records of the nonce.
TX_EXTRA_NONCE_PAYMENT_ID = 0x00
TX_EXTRA_NONCE_ENCRYPTED_PAYMENT_ID = 0x01

TX_EXTRA_PADDING_MAX_COUNT = 255
TX_EXTRA_NONCE_MAX_COUNT = 255
PAYMENT_ID_LONG_SIZE = 32


class TxExtra:
    """
    The interpreted records of a tx_extra field.
    """

    def __init__(self):
        # pubkey is the transaction public key R, the first tag 0x01 record.
        self.pubkey = None
        # extraPubkeys are any further tag 0x01 keys.
        self.extraPubkeys = []
        # nonce is the payload of the tag 0x02 record.
        self.nonce = None
        # additionalPubkeys are the per-output keys used when a transaction
        # pays to subaddresses.
        self.additionalPubkeys = []

    @property
    def paymentId(self):
        """
        The unencrypted 32-byte payment ID in the nonce, or None.
        """
        if (
            self.nonce
            and len(self.nonce) == PAYMENT_ID_LONG_SIZE + 1
            and self.nonce[0] == TX_EXTRA_NONCE_PAYMENT_ID
        ):
            return self.nonce[1:]
        return None

    @property
    def encryptedPaymentId(self):
        """
        The encrypted 8-byte payment ID in the nonce, or None. Decrypt it with
        crypto.stealthPaymentId.
        """
        if (
            self.nonce
            and len(self.nonce) == PAYMENT_ID_SIZE + 1
            and self.nonce[0] == TX_EXTRA_NONCE_ENCRYPTED_PAYMENT_ID
        ):
            return self.nonce[1:]
        return None


def readSized(b, what):
    size = readVarint(b)
    if size > len(b):
        raise ProtocolError(f"{what} of {size} bytes overruns tx_extra")
    return b.pop(size)


def parseRecord(b, extra):
    """
    Read one record from the front of b into extra.

    Args:
        b (ByteArray): The remaining tx_extra bytes.
        extra (TxExtra): The parsed records.
    """
    tag = b.pop(1)[0]
    if tag == TX_EXTRA_TAG_PADDING:
        # Padding runs to the end of tx_extra and is all zeros.
        if len(b) + 1 > TX_EXTRA_PADDING_MAX_COUNT:
            raise ProtocolError("tx_extra padding too long")
        if not b.iszero():
            raise ProtocolError("non-zero byte in tx_extra padding")
        b.pop(len(b))
    elif tag == TX_EXTRA_TAG_PUBKEY:
        if len(b) < KEY_SIZE:
            raise ProtocolError("truncated tx_extra public key")
        key = b.pop(KEY_SIZE)
        if extra.pubkey is None:
            extra.pubkey = key
        else:
            extra.extraPubkeys.append(key)
    elif tag == TX_EXTRA_NONCE:
        nonce = readSized(b, "nonce")
        if len(nonce) > TX_EXTRA_NONCE_MAX_COUNT:
            raise ProtocolError("tx_extra nonce too long")
        extra.nonce = nonce
    elif tag in (TX_EXTRA_MERGE_MINING_TAG, TX_EXTRA_MYSTERIOUS_MINERGATE_TAG):
        readSized(b, "tag 0x%02x record" % tag)
    elif tag == TX_EXTRA_TAG_ADDITIONAL_PUBKEYS:
        count = readVarint(b)
        if count * KEY_SIZE > len(b):
            raise ProtocolError("truncated tx_extra additional public keys")
        extra.additionalPubkeys = [b.pop(KEY_SIZE) for _ in range(count)]
    else:
        raise ProtocolError("unknown tx_extra tag 0x%02x" % tag)


def parseTxExtra(extra):
    """
    Parse every record of the tx_extra field.

    Args:
        extra (ByteArray, bytes-like or hex str): The tx_extra field.

    Returns:
        TxExtra: The parsed records.

    Raises:
        ProtocolError if a record has an unknown tag or is truncated.
    """
    b = ByteArray(extra)
    parsed = TxExtra()
    while len(b):
        try:
            parseRecord(b, parsed)
        except ValidationError as e:
            raise ProtocolError(f"malformed tx_extra: {e}")
    return parsed


def parseTxExtraPartial(extra):
    """
    Parse tx_extra records up to the first malformed or unknown one, the way
    wallets scan transactions. The error is logged and the records read
    before it are returned.

    Args:
        extra (ByteArray, bytes-like or hex str): The tx_extra field.

    Returns:
        TxExtra: The parsed records.
    """
    b = ByteArray(extra)
    parsed = TxExtra()
    while len(b):
        try:
            parseRecord(b, parsed)
        except (ProtocolError, ValidationError) as e:
            log.debug(f"tx_extra parsing stopped with {len(b)} bytes left: {e}")
            break
    return parsed


def txPubFromExtra(extra):
    """
    Get the transaction public key R from tx_extra.

    Args:
        extra (ByteArray, bytes-like or hex str): The tx_extra field.

    Returns:
        ByteArray or None: The public key, or None if there isn't one.
    """
    return parseTxExtraPartial(extra).pubkey
