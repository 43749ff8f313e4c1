"""
Shared pytest fixtures and configuration for tinystore tests.
"""

import pytest

from tinystore import Store


@pytest.fixture
def store():
    """Provide a fresh integer Store for tests that need it."""
    return Store(0, key="counter")


@pytest.fixture
def received():
    """A list that subscribers can append to, via `received.append`."""
    return []
