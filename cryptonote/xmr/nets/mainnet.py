"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

mainnet holds mainnet parameters. Any values should mirror exactly
https://github.com/monero-project/monero/blob/master/src/cryptonote_config.h
"""

Name = "mainnet"

# Address encoding magics. The network byte is serialized as a varint at the
# start of the address payload.
AddressNetByte = 18  # standard address, starts with 4
IntegratedNetByte = 19  # integrated address, starts with 4
SubaddressNetByte = 42  # subaddress, starts with 8
