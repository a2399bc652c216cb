"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

The Cryptonote protocol facade used by wallet RPC services. A Cryptonote is
bound to a network's address bytes at construction and otherwise stateless.
"""

from cryptonote import CryptonoteError
from cryptonote.crypto import crypto, rando
from cryptonote.util import helpers
from cryptonote.xmr import addrlib, txextra


log = helpers.getLogger("XMR")


class Cryptonote:
    """
    Cryptonote key and address operations for one network.
    """

    def __init__(self, netParams):
        """
        Args:
            netParams (module): The network parameters, e.g. nets.mainnet.
        """
        self.netParams = netParams

    def validateAddress(self, addr):
        """
        Whether addr is a well-formed address for this network.

        Args:
            addr (str): The base-58 encoded address.

        Returns:
            bool: True if the address decodes.
        """
        try:
            addrlib.decodeAddress(addr, self.netParams)
        except CryptonoteError as e:
            log.debug(f"rejected address {addr!r}: {e}")
            return False
        return True

    def decodeAddress(self, addr):
        """
        Decode an address for this network.

        Args:
            addr (str): The base-58 encoded address.

        Returns:
            addrlib.Address: The decoded address. Its netByte, spendKey and
                viewKey attributes hold the decoded fields.
        """
        return addrlib.decodeAddress(addr, self.netParams)

    def encodeAddress(self, spendKey, viewKey):
        """
        Encode public keys as a standard address.
        """
        return addrlib.encodeAddress(spendKey, viewKey, self.netParams)

    def buildIntegratedAddress(self, spendKey, viewKey, paymentId):
        """
        Encode public keys and an 8-byte payment ID as an integrated address.

        Returns:
            str: The integrated address.
        """
        return addrlib.integratedAddrFromKeys(
            spendKey, viewKey, paymentId, self.netParams
        )

    def integratedAddressFor(self, addr, paymentId):
        """
        The integrated address for a standard address and payment ID, as a
        service does for its wallet address.

        Args:
            addr (str): The base-58 encoded standard address.
            paymentId (ByteArray): The 8-byte payment ID.

        Returns:
            str: The integrated address.
        """
        a = self.decodeAddress(addr)
        return self.buildIntegratedAddress(a.spendKey, a.viewKey, paymentId)

    def newSeed(self):
        """
        A random 32-byte wallet seed.
        """
        return rando.newKey()

    def deriveKeysFromSeed(self, seed):
        """
        The private spend and view keys of the seed.

        Returns:
            crypto.PrivateKeys: The keys.
        """
        return crypto.genPrivateKeys(seed)

    def addressFromSeed(self, seed):
        """
        The standard address of the seed.

        Returns:
            str: The address.
        """
        return addrlib.addressFromSeed(seed, self.netParams).string()

    def subaddress(self, major, minor, viewKey, spendPub):
        """
        The subaddress at (major, minor).

        Returns:
            str: The subaddress.
        """
        return addrlib.generateSubaddress(
            major, minor, viewKey, spendPub, self.netParams
        ).string()

    def isOutputMine(self, txPub, privView, pubSpend, index, outKey):
        """
        Whether the output key at index pays the wallet. See
        crypto.isOutputMine.
        """
        return crypto.isOutputMine(txPub, privView, pubSpend, index, outKey)

    def findOwnedOutputs(self, txPub, privView, pubSpend, outKeys):
        """
        Scan the output keys of a transaction. The key derivation is computed
        once for the transaction.

        Args:
            txPub (ByteArray): The transaction public key R.
            privView (ByteArray): The private view key a.
            pubSpend (ByteArray): The public spend key B.
            outKeys (list(ByteArray)): The output keys, in output order.

        Returns:
            list(int): The indices of the outputs that pay the wallet.
        """
        derivation = crypto.keyDerivation(txPub, privView)
        return [
            i
            for i, outKey in enumerate(outKeys)
            if crypto.isOutputKey(derivation, i, pubSpend, outKey)
        ]

    def stealthPaymentId(self, paymentId, txPub, viewKey):
        """
        Encrypt or decrypt an 8-byte payment ID. See crypto.stealthPaymentId.
        """
        return crypto.stealthPaymentId(paymentId, txPub, viewKey)

    def txPubFromExtra(self, extra):
        """
        The transaction public key in tx_extra, or None.
        """
        return txextra.txPubFromExtra(extra)
