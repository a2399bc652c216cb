"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Cryptonote key generation and derivation functions.

Keys and derivations are returned as 32-byte ByteArray. Any argument that
takes key material accepts a ByteArray, bytes, bytearray or hex string.

References:
  [CN]: CryptoNote v 2.0 (Nicolas van Saberhagen)
    https://cryptonote.org/whitepaper.pdf
"""

from nacl.bindings import sodium_memcmp

from cryptonote import CryptonoteError, checkLength
from cryptonote.util.encode import ByteArray
from cryptonote.xmr.wire.wire import encodeVarint

from .ed25519 import field
from .ed25519.curve import curve as Curve, decodePoint, encodePoint
from .keccak import keccak256


KEY_SIZE = 32
HASH_SIZE = 32
PAYMENT_ID_SIZE = 8

# Appended to a key derivation before hashing it into a payment ID mask.
ENCRYPTED_PAYMENT_ID_TAIL = 0x8D

# Domain separator for subaddress secret keys, "SubAddr" and a zero byte.
SUBADDRESS_PREFIX = b"SubAddr\x00"


def keyBytes(k, name="key", length=KEY_SIZE):
    """
    Decode key material to bytes, checking the length.

    Args:
        k (ByteArray, bytes-like or hex str): The key.
        name (str): The name used in an error message.
        length (int): The required length.

    Returns:
        bytes: The key bytes.
    """
    b = ByteArray(k).bytes()
    checkLength(name, b, length)
    return b


def hashToScalar(data):
    """
    Hs of [CN]: Keccak-256 of the data, reduced mod L.

    Args:
        data (bytes-like): The data to hash.

    Returns:
        ByteArray: The 32-byte scalar.
    """
    return ByteArray(field.scReduce32(keccak256(ByteArray(data).bytes())))


def scReduce(b):
    """
    Reduce the 32-byte little-endian value mod L.

    Returns:
        ByteArray: The reduced scalar.
    """
    return ByteArray(field.scReduce32(keyBytes(b, "scalar")))


def deriveViewKey(spendKey):
    """
    Derive the private view key deterministically from the private spend key.
    There is no way back from the view key to the spend key.

    Args:
        spendKey (ByteArray): The private spend key.

    Returns:
        ByteArray: The private view key.
    """
    return hashToScalar(keyBytes(spendKey, "spend key"))


class PrivateKeys:
    """
    A private spend key and the view key derived from it.
    """

    def __init__(self, spendKey, viewKey):
        self.spendKey = spendKey
        self.viewKey = viewKey

    def __iter__(self):
        return iter((self.spendKey, self.viewKey))

    def __eq__(self, other):
        return (
            isinstance(other, PrivateKeys)
            and self.spendKey == other.spendKey
            and self.viewKey == other.viewKey
        )


def genPrivateKeys(seed):
    """
    Generate the private key pair of a wallet from a 32-byte seed.

    Args:
        seed (ByteArray): The 32-byte seed. It need not be reduced.

    Returns:
        PrivateKeys: The private spend and view keys.
    """
    spendKey = scReduce(keyBytes(seed, "seed"))
    return PrivateKeys(spendKey, deriveViewKey(spendKey))


def publicFromPrivate(privKey):
    """
    The public key a*G of the private key a. The key bytes are not reduced
    before multiplication.

    Args:
        privKey (ByteArray): The private key.

    Returns:
        ByteArray: The public key.
    """
    k = field.decodeScalar(keyBytes(privKey, "private key"))
    return ByteArray(encodePoint(Curve.scalarBaseMult(k)))


class KeyPair:
    """
    A private key and its public key. KeyPair is immutable once created.
    """

    __slots__ = ("secret", "public")

    def __init__(self, secret, public):
        object.__setattr__(self, "secret", secret)
        object.__setattr__(self, "public", public)

    def __setattr__(self, k, v):
        raise CryptonoteError("KeyPair is immutable")

    @staticmethod
    def fromSecret(secret):
        """
        Create the KeyPair for the private key.

        Args:
            secret (ByteArray): The private key.

        Returns:
            KeyPair: The key pair.
        """
        secret = ByteArray(keyBytes(secret, "private key"))
        return KeyPair(secret, publicFromPrivate(secret))

    def __eq__(self, other):
        return (
            isinstance(other, KeyPair)
            and self.secret == other.secret
            and self.public == other.public
        )


def keyDerivation(pub, priv):
    """
    The shared secret 8*a*R of [CN] section 4.3, cofactor-cleared so the
    result is in the prime-order subgroup whatever point the counterparty
    supplied.

    Args:
        pub (ByteArray): The other party's public key, R or A.
        priv (ByteArray): The private key, a or r.

    Returns:
        ByteArray: The key derivation.
    """
    point = decodePoint(keyBytes(pub, "public key"))
    k = field.decodeScalar(keyBytes(priv, "private key"))
    return ByteArray(encodePoint(Curve.mulCofactor(Curve.scalarMult(point, k))))


def derivationToScalar(derivation, index):
    """
    Hs(D || varint(index)), the per-output scalar.

    Args:
        derivation (ByteArray): The key derivation.
        index (int): The output index.

    Returns:
        ByteArray: The scalar.
    """
    der = keyBytes(derivation, "derivation")
    return hashToScalar(der + encodeVarint(index))


def derivePublicKey(derivation, index, pub):
    """
    The one-time output key P = Hs(D || index)*G + B.

    Args:
        derivation (ByteArray): The key derivation.
        index (int): The output index.
        pub (ByteArray): The recipient's public spend key B.

    Returns:
        ByteArray: The one-time public key.
    """
    s = field.decodeScalar(derivationToScalar(derivation, index).bytes())
    base = decodePoint(keyBytes(pub, "public key"))
    return ByteArray(encodePoint(base.add(Curve.scalarBaseMult(s))))


def deriveSecretKey(derivation, index, priv):
    """
    The one-time output private key x = Hs(D || index) + b mod L, the
    counterpart of derivePublicKey.

    Args:
        derivation (ByteArray): The key derivation.
        index (int): The output index.
        priv (ByteArray): The recipient's private spend key b.

    Returns:
        ByteArray: The one-time private key.
    """
    s = derivationToScalar(derivation, index)
    return ByteArray(field.scAdd(s.bytes(), keyBytes(priv, "private key")))


def isOutputMine(txPub, privView, pubSpend, index, outKey):
    """
    Check whether the output key P at index was sent to the wallet with
    private view key a and public spend key B, by computing
    P' = Hs(8aR || index)*G + B and comparing P' to P.

    Args:
        txPub (ByteArray): The transaction public key R.
        privView (ByteArray): The private view key a.
        pubSpend (ByteArray): The public spend key B.
        index (int): The output index.
        outKey (ByteArray): The output key P.

    Returns:
        bool: True if the output belongs to the wallet.
    """
    return isOutputKey(keyDerivation(txPub, privView), index, pubSpend, outKey)


def isOutputKey(derivation, index, pubSpend, outKey):
    """
    Compare the output key P with Hs(D || index)*G + B in constant time. A
    transaction scan computes the derivation D once and checks each output
    with it.

    Args:
        derivation (ByteArray): The key derivation 8aR.
        index (int): The output index.
        pubSpend (ByteArray): The public spend key B.
        outKey (ByteArray): The 32-byte output key P.

    Returns:
        bool: True if P is the expected output key.
    """
    pPrime = derivePublicKey(derivation, index, pubSpend)
    return sodium_memcmp(pPrime.bytes(), keyBytes(outKey, "output key"))


def stealthPaymentId(paymentId, txPub, viewKey):
    """
    Encrypt or decrypt a short payment ID. The ID is xored with the first 8
    bytes of Keccak-256(8aR || 0x8d), so the same call goes both ways.

    Args:
        paymentId (ByteArray): The 8-byte payment ID.
        txPub (ByteArray): The transaction public key.
        viewKey (ByteArray): The private view key.

    Returns:
        ByteArray: The transformed payment ID.
    """
    pid = ByteArray(keyBytes(paymentId, "payment ID", PAYMENT_ID_SIZE))
    derivation = keyDerivation(txPub, viewKey)
    mask = keccak256(derivation.bytes() + bytes([ENCRYPTED_PAYMENT_ID_TAIL]))
    return pid ^ mask[:PAYMENT_ID_SIZE]


def subaddressSecretKey(major, minor, viewKey):
    """
    m = Hs("SubAddr\\0" || a || major || minor), with the indices as
    little-endian uint32.

    Args:
        major (int): The account index.
        minor (int): The address index within the account.
        viewKey (ByteArray): The private view key a.

    Returns:
        ByteArray: The subaddress secret scalar.
    """
    for name, idx in (("major", major), ("minor", minor)):
        if not 0 <= idx < 2 ** 32:
            raise CryptonoteError(f"{name} index {idx} out of uint32 range")
    data = (
        SUBADDRESS_PREFIX
        + keyBytes(viewKey, "view key")
        + major.to_bytes(4, "little")
        + minor.to_bytes(4, "little")
    )
    return hashToScalar(data)


def subaddressSpendPublicKey(spendPub, subSecret):
    """
    D = B + m*G.

    Args:
        spendPub (ByteArray): The public spend key B.
        subSecret (ByteArray): The subaddress secret m.

    Returns:
        ByteArray: The subaddress public spend key.
    """
    m = field.decodeScalar(keyBytes(subSecret, "subaddress secret"))
    base = decodePoint(keyBytes(spendPub, "public key"))
    return ByteArray(encodePoint(base.add(Curve.scalarBaseMult(m))))


def subaddressViewPublicKey(subSpendPub, viewKey):
    """
    C = a*D.

    Args:
        subSpendPub (ByteArray): The subaddress public spend key D.
        viewKey (ByteArray): The private view key a.

    Returns:
        ByteArray: The subaddress public view key.
    """
    point = decodePoint(keyBytes(subSpendPub, "public key"))
    a = field.decodeScalar(keyBytes(viewKey, "view key"))
    return ByteArray(encodePoint(Curve.scalarMult(point, a)))
