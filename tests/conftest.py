"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from entrystore.cache.store import EntryStore


class FakeClock:
    """
    Controllable monotonic clock.

    Pass as ``time_fn`` to an EntryStore, then move time forward with
    advance().
    """

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


# ============================================================================
# Clock Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at t=1000."""
    return FakeClock()


# ============================================================================
# EntryStore Fixtures
# ============================================================================

@pytest.fixture
def store() -> EntryStore:
    """Create a fresh EntryStore instance with 100 keys capacity."""
    return EntryStore(max_size=100)


@pytest.fixture
def small_store(clock: FakeClock) -> EntryStore:
    """Create an EntryStore with small capacity for eviction testing (5 keys)."""
    return EntryStore(max_size=5, time_fn=clock)


@pytest.fixture
def clocked_store(clock: FakeClock) -> EntryStore:
    """Create an EntryStore driven by the fake clock."""
    return EntryStore(max_size=100, time_fn=clock)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
