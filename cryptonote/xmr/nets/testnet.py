"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

testnet holds testnet parameters. Any values should mirror exactly
https://github.com/monero-project/monero/blob/master/src/cryptonote_config.h
"""

Name = "testnet"

# Address encoding magics
AddressNetByte = 53  # starts with 9
IntegratedNetByte = 54  # starts with A
SubaddressNetByte = 63  # starts with B
