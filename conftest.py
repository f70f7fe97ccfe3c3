"""Configures pytest further: speed markers and shared random sources."""
import random

import pytest


class ScriptedRandom:
    """Random generator handle replaying fixed `getrandbits` draws and a fixed witness offset."""

    def __init__(self, bits: list[int], offset: int = 0) -> None:
        self.bits = list(bits)
        self.offset = offset
        self.getrandbits_calls = 0

    def getrandbits(self, k: int) -> int:
        self.getrandbits_calls += 1
        return self.bits.pop(0) & ((1 << k) - 1)

    def randrange(self, stop: int) -> int:
        return min(self.offset, stop - 1)


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20250517)


@pytest.fixture
def scripted():
    return ScriptedRandom
