"""
Shared fixtures for the hexrev tests.
"""

import pytest


@pytest.fixture
def sample_bytes():
    """Bytes covering every value, spanning several groups and a remainder."""
    return bytes(range(256)) + b'tail'
