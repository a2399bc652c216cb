"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import random

import pytest

from cryptonote.crypto.ed25519 import field
from cryptonote.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture
def randScalar():
    def _randScalar():
        """
        A reduced, non-zero 32-byte little-endian scalar.
        """
        return random.randint(1, field.L - 1).to_bytes(32, "little")

    return _randScalar


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()
