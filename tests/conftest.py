# -*- coding: Utf-8 -*-

from __future__ import annotations

import os
import pathlib
import random
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pytest import MonkeyPatch


################################## Environment initialization ##################################
# Always hide support on pygame import
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

# Start from the default configuration
os.environ.pop("FLATMATH_EPSILON", None)
os.environ.pop("FLATMATH_DEGENERATE_WARNINGS", None)


################################## fixtures ##################################

RANDOM_SAMPLE_SIZE = 100


@pytest.fixture(scope="session")
def flatmath_rootdirs_list() -> list[pathlib.Path]:
    import importlib

    flatmath_spec = importlib.import_module("flatmath").__spec__
    assert flatmath_spec is not None
    assert flatmath_spec.submodule_search_locations is not None

    return [pathlib.Path(path) for path in flatmath_spec.submodule_search_locations]


@pytest.fixture
def rng(request: pytest.FixtureRequest) -> random.Random:
    # One reproducible sequence per test
    return random.Random(request.node.nodeid)


@pytest.fixture
def random_pairs(rng: random.Random) -> list[tuple[float, float]]:
    return [(rng.uniform(-1e3, 1e3), rng.uniform(-1e3, 1e3)) for _ in range(RANDOM_SAMPLE_SIZE)]


@pytest.fixture
def clean_environment(monkeypatch: MonkeyPatch) -> MonkeyPatch:
    monkeypatch.delenv("FLATMATH_EPSILON", raising=False)
    monkeypatch.delenv("FLATMATH_DEGENERATE_WARNINGS", raising=False)
    return monkeypatch
