"""Shared fixtures: deterministic random sources."""

import itertools

import pytest


class CountingSource:
    """Random source yielding 1, 2, 3, ... (mod 256) and recording reads."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self.requests: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        return bytes(next(self._counter) % 256 for _ in range(n))


class FixedSource:
    """Random source returning the same byte for every request."""

    def __init__(self, value: int):
        self.value = value

    def __call__(self, n: int) -> bytes:
        return bytes([self.value]) * n


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture
def fixed_source():
    """Factory: fixed_source(0x2A) returns a source of 0x2A bytes."""
    return FixedSource


@pytest.fixture
def failing_source():
    def source(n: int) -> bytes:
        raise OSError("entropy pool exhausted")

    return source
