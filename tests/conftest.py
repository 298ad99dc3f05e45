"""
Shared fixtures for the submission client tests.
"""

import pytest

from main import build_sample_document


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start=1_700_000_000_000):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, millis):
        self.now += millis


@pytest.fixture
def clock():
    """Fake epoch-millisecond clock."""
    return FakeClock()


@pytest.fixture
def document():
    """Sample document with every field populated."""
    return build_sample_document()
