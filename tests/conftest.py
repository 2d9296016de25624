"""Shared random sources for deterministic tests."""

from __future__ import annotations

import random

import pytest

from passgen.config import PasswordCriteria


class SeededSource:
    """Reproducible, non-secure source for tests only."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


class ScriptedSource:
    """Returns queued values in order, then 0 once the queue is empty."""

    def __init__(self, values) -> None:
        self.values = list(values)
        self.calls: list[int] = []

    def randbelow(self, n: int) -> int:
        self.calls.append(n)
        value = self.values.pop(0) if self.values else 0
        assert 0 <= value < n, f"scripted value {value} out of range for n={n}"
        return value


@pytest.fixture
def seeded_source():
    return SeededSource(1234)


@pytest.fixture
def all_classes():
    return PasswordCriteria(length=16)


@pytest.fixture
def no_classes():
    return PasswordCriteria(
        length=16,
        include_uppercase=False,
        include_lowercase=False,
        include_numbers=False,
        include_symbols=False,
    )


@pytest.fixture
def scripted():
    """Factory: scripted(values) -> ScriptedSource."""
    return ScriptedSource


@pytest.fixture
def seeded():
    """Factory: seeded(seed) -> SeededSource."""
    return SeededSource
