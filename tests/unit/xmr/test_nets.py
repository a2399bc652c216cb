"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import pytest

from cryptonote import CryptonoteError
from cryptonote.xmr import nets


def test_nets():
    assert nets.parse("mainnet") is nets.mainnet
    assert nets.parse("testnet") is nets.testnet
    assert nets.parse("stagenet") is nets.stagenet

    with pytest.raises(CryptonoteError):
        nets.parse("nonet")

    # Network modules carry only the name and address bytes.
    for netParams in (nets.mainnet, nets.testnet, nets.stagenet):
        params = {k for k in vars(netParams) if not k.startswith("_")}
        assert params == {
            "Name",
            "AddressNetByte",
            "IntegratedNetByte",
            "SubaddressNetByte",
        }


def test_netBytes():
    # fmt: off
    data = (
        (nets.mainnet,  18, 19, 42),
        (nets.testnet,  53, 54, 63),
        (nets.stagenet, 24, 25, 36),
    )
    # fmt: on
    for netParams, standard, integrated, sub in data:
        assert nets.netByte(netParams, nets.STANDARD) == standard
        assert nets.netByte(netParams, nets.INTEGRATED) == integrated
        assert nets.netByte(netParams, nets.SUBADDRESS) == sub
        assert nets.addressKind(netParams, standard) == nets.STANDARD
        assert nets.addressKind(netParams, integrated) == nets.INTEGRATED
        assert nets.addressKind(netParams, sub) == nets.SUBADDRESS
        assert nets.fromNetByte(sub) == (netParams, nets.SUBADDRESS)

    assert nets.addressKind(nets.mainnet, 53) is None
    with pytest.raises(CryptonoteError):
        nets.fromNetByte(99)
