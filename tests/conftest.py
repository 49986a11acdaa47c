"""Deterministic random sources for the dhgroup14 tests."""
import itertools

import pytest


class CountingRandom:
    """Random source that yields a fixed byte pattern and records each request."""

    def __init__(self, fill: int = 0):
        self.fill = fill
        self.requests = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        return bytes([self.fill]) * n


class SequenceRandom:
    """Random source that returns a different deterministic block each call."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def __call__(self, n: int) -> bytes:
        return next(self._counter).to_bytes(n, "big")


@pytest.fixture
def zero_random():
    return CountingRandom(0x00)


@pytest.fixture
def counting_random():
    return CountingRandom(0x5A)


@pytest.fixture
def sequence_random():
    return SequenceRandom()
