"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Monero addresses: standard, integrated and subaddress.
"""

from cryptonote import CryptonoteError, CurveError, ValidationError, checkLength
from cryptonote.crypto import base58, crypto
from cryptonote.crypto.crypto import KEY_SIZE, PAYMENT_ID_SIZE
from cryptonote.crypto.ed25519.curve import isValidPoint
from cryptonote.util.encode import ByteArray
from cryptonote.xmr import nets
from cryptonote.xmr.wire.wire import decodeVarint, encodeVarint


class Address:
    """
    A standard address, the public spend key B and public view key A of a
    wallet. Addresses are immutable values. Subclasses add their own fields
    to the payload.
    """

    kind = nets.STANDARD

    def __init__(self, netParams, spendKey, viewKey):
        """
        Args:
            netParams (module): The network parameters.
            spendKey (ByteArray): The public spend key.
            viewKey (ByteArray): The public view key.
        """
        self.netParams = netParams
        self.netName = netParams.Name
        self.spendKey = ByteArray(spendKey)
        self.viewKey = ByteArray(viewKey)
        checkLength("public spend key", self.spendKey, KEY_SIZE)
        checkLength("public view key", self.viewKey, KEY_SIZE)

    @property
    def netByte(self):
        return nets.netByte(self.netParams, self.kind)

    def payload(self):
        """
        The bytes that are checksummed and encoded.

        Returns:
            ByteArray: varint(netByte) || spendKey || viewKey.
        """
        return ByteArray(encodeVarint(self.netByte)) + self.spendKey + self.viewKey

    def string(self):
        """
        The base-58 encoding of the address.

        Returns:
            str: The encoded address.
        """
        return base58.encodeCheck(self.payload().bytes())

    def __str__(self):
        return self.string()

    def __repr__(self):
        return f"{type(self).__name__}({self.string()})"

    def __eq__(self, a):
        """Check that other address is equivalent to this address."""
        if isinstance(a, str):
            return a == self.string()
        if isinstance(a, Address):
            return type(a) is type(self) and a.payload() == self.payload()
        return False

    def __hash__(self):
        return hash(self.string())


class IntegratedAddress(Address):
    """
    A standard address with an 8-byte payment ID attached.
    """

    kind = nets.INTEGRATED

    def __init__(self, netParams, spendKey, viewKey, paymentId):
        """
        Args:
            netParams (module): The network parameters.
            spendKey (ByteArray): The public spend key.
            viewKey (ByteArray): The public view key.
            paymentId (ByteArray): The 8-byte payment ID.
        """
        super().__init__(netParams, spendKey, viewKey)
        self.paymentId = ByteArray(paymentId)
        checkLength("payment ID", self.paymentId, PAYMENT_ID_SIZE)

    def payload(self):
        return super().payload() + self.paymentId

    def standard(self):
        """
        The standard address without the payment ID.
        """
        return Address(self.netParams, self.spendKey, self.viewKey)


class SubAddress(Address):
    """
    A subaddress. The spend and view keys are derived from the wallet keys
    and the (major, minor) index, see generateSubaddress. The indices are not
    part of the encoding, so a decoded SubAddress has none.
    """

    kind = nets.SUBADDRESS

    def __init__(self, netParams, spendKey, viewKey, major=None, minor=None):
        super().__init__(netParams, spendKey, viewKey)
        self.major = major
        self.minor = minor


# Payload lengths, after the network byte.
KEYS_LEN = 2 * KEY_SIZE
PayloadLengths = {
    nets.STANDARD: KEYS_LEN,
    nets.INTEGRATED: KEYS_LEN + PAYMENT_ID_SIZE,
    nets.SUBADDRESS: KEYS_LEN,
}


def encodeAddress(spendKey, viewKey, netParams):
    """
    Encode the public keys as a standard address.

    Args:
        spendKey (ByteArray): The public spend key.
        viewKey (ByteArray): The public view key.
        netParams (module): The network parameters.

    Returns:
        str: The encoded address.
    """
    return Address(netParams, spendKey, viewKey).string()


def integratedAddrFromKeys(spendKey, viewKey, paymentId, netParams):
    """
    Encode the public keys and a payment ID as an integrated address.

    Args:
        spendKey (ByteArray): The public spend key.
        viewKey (ByteArray): The public view key.
        paymentId (ByteArray): The 8-byte payment ID.
        netParams (module): The network parameters.

    Returns:
        str: The encoded address.
    """
    return IntegratedAddress(netParams, spendKey, viewKey, paymentId).string()


def decodeAddress(addr, netParams=None):
    """
    Decode the base-58 encoded address. The checksum is verified and the
    network byte must belong to netParams, or to any known network if
    netParams is None.

    Args:
        addr (str): Base-58 encoded address.
        netParams (module): optional. The network parameters.

    Returns:
        Address: An Address, IntegratedAddress or SubAddress.
    """
    payload = base58.decodeCheck(addr)
    netByte, n = decodeVarint(payload)
    if netParams:
        kind = nets.addressKind(netParams, netByte)
        if not kind:
            raise ValidationError(
                f"network byte {netByte} is not a {netParams.Name} address"
            )
    else:
        try:
            netParams, kind = nets.fromNetByte(netByte)
        except CryptonoteError:
            raise ValidationError(f"unknown network byte {netByte}")
    body = payload[n:]
    expLen = PayloadLengths[kind]
    if len(body) != expLen:
        raise ValidationError(
            f"{kind} address expected {expLen} payload bytes, got {len(body)}"
        )
    spendKey = body[:KEY_SIZE]
    viewKey = body[KEY_SIZE:KEYS_LEN]
    for name, key in (("spend", spendKey), ("view", viewKey)):
        if not isValidPoint(key):
            raise CurveError(f"public {name} key is not a curve point")
    if kind == nets.INTEGRATED:
        return IntegratedAddress(netParams, spendKey, viewKey, body[KEYS_LEN:])
    if kind == nets.SUBADDRESS:
        return SubAddress(netParams, spendKey, viewKey)
    return Address(netParams, spendKey, viewKey)


def addressFromSeed(seed, netParams):
    """
    The standard address of the wallet with the 32-byte seed.

    Args:
        seed (ByteArray): The seed.
        netParams (module): The network parameters.

    Returns:
        Address: The address.
    """
    spendKey, viewKey = crypto.genPrivateKeys(seed)
    return Address(
        netParams,
        crypto.publicFromPrivate(spendKey),
        crypto.publicFromPrivate(viewKey),
    )


def generateSubaddress(major, minor, viewKey, spendPub, netParams):
    """
    Derive the subaddress at index (major, minor) for the wallet with private
    view key a and public spend key B. Index (0, 0) is the wallet's primary
    address, as in the Monero wallet, so a standard Address is returned for
    it.

    Args:
        major (int): The account index.
        minor (int): The address index within the account.
        viewKey (ByteArray): The private view key a.
        spendPub (ByteArray): The public spend key B.
        netParams (module): The network parameters.

    Returns:
        SubAddress or Address: The subaddress.
    """
    if major == 0 and minor == 0:
        return Address(netParams, spendPub, crypto.publicFromPrivate(viewKey))
    m = crypto.subaddressSecretKey(major, minor, viewKey)
    subSpend = crypto.subaddressSpendPublicKey(spendPub, m)
    subView = crypto.subaddressViewPublicKey(subSpend, viewKey)
    return SubAddress(netParams, subSpend, subView, major, minor)
