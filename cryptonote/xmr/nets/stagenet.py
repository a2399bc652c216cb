"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

stagenet holds stagenet parameters. Any values should mirror exactly
https://github.com/monero-project/monero/blob/master/src/cryptonote_config.h
"""

Name = "stagenet"

# Address encoding magics
AddressNetByte = 24  # starts with 5
IntegratedNetByte = 25  # starts with 5
SubaddressNetByte = 36  # starts with 7
