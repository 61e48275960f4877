"""Global pytest fixtures for handykit."""

from __future__ import annotations

import os
import random

import pytest

RNG_SEED = 20240229


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source so random helpers give repeatable output."""
    return random.Random(RNG_SEED)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every ``HANDYKIT_*`` variable for the duration of a test."""
    for key in [k for k in os.environ if k.startswith("HANDYKIT_")]:
        monkeypatch.delenv(key)
    return monkeypatch
