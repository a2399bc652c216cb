"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

from cryptonote import CryptonoteError

from . import mainnet, stagenet, testnet


the_nets = {n.Name: n for n in (mainnet, testnet, stagenet)}

# Address kinds, keyed to the network byte attribute names.
STANDARD = "standard"
INTEGRATED = "integrated"
SUBADDRESS = "subaddress"

AddressKinds = {
    STANDARD: "AddressNetByte",
    INTEGRATED: "IntegratedNetByte",
    SUBADDRESS: "SubaddressNetByte",
}


def parse(name):
    """
    Get the network parameters based on the network name.
    """
    try:
        return the_nets[name]
    except KeyError:
        raise CryptonoteError(f"unrecognized network name {name}")


def netByte(netParams, kind):
    """
    The network byte of an address kind.

    Args:
        netParams (module): The network parameters.
        kind (str): STANDARD, INTEGRATED or SUBADDRESS.

    Returns:
        int: The network byte.
    """
    return getattr(netParams, AddressKinds[kind])


def addressKind(netParams, byte):
    """
    The kind of address the network byte denotes on the network, or None if
    the byte doesn't belong to the network.

    Args:
        netParams (module): The network parameters.
        byte (int): The network byte.

    Returns:
        str or None: STANDARD, INTEGRATED, SUBADDRESS or None.
    """
    for kind in AddressKinds:
        if netByte(netParams, kind) == byte:
            return kind
    return None


def fromNetByte(byte):
    """
    Find the network and address kind of a network byte.

    Args:
        byte (int): The network byte.

    Returns:
        module: The network parameters.
        str: The address kind.
    """
    for netParams in the_nets.values():
        kind = addressKind(netParams, byte)
        if kind:
            return netParams, kind
    raise CryptonoteError(f"unknown network byte {byte}")
