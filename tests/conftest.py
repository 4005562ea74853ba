"""Pytest fixtures for all tests."""

from datetime import datetime, timezone

import pytest

import flexid.core.generator as generator_module
import flexid.internal.logging as logging_module
from flexid.config import GeneratorConfig
from flexid.utils.timestamp import SECOND


class FakeClock:
    """Time source that returns a settable instant."""

    def __init__(self, start):
        self.now = start
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.now

    def advance(self, nanos):
        self.now += nanos


class SameByteSource:
    """Random source that always yields the same byte."""

    def __init__(self, value):
        self.value = value
        self.reads = 0

    def __call__(self, n):
        self.reads += 1
        return bytes([self.value]) * n


@pytest.fixture
def epoch():
    return datetime(2020, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def clock(epoch):
    """Clock starting at the fixture epoch, in integer nanoseconds."""
    return FakeClock(int(epoch.timestamp()) * SECOND)


@pytest.fixture
def same_byte():
    return SameByteSource(123)


@pytest.fixture
def fixed_config(epoch, clock, same_byte):
    """Base62, 1s ticks, deterministic time and randomness."""
    return GeneratorConfig(
        epoch=epoch,
        tick_size=SECOND,
        num_random_chars=5,
        time_source=clock,
        random_source=same_byte,
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop the default generator and process logger between tests."""
    yield
    generator_module._default_generator = None
    logging_module._logger = None
