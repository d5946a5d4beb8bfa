"""Pytest configuration and shared fixtures.

Makes the project root importable so ``import mapscript`` works when tests are
run without installing the package.
"""

import os
import sys

import numpy as np
import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from mapscript.core.script_engine import ScriptEngine  # noqa: E402
from mapscript.model.map import Map, TileLayer  # noqa: E402
from mapscript.registries.formats import FormatRegistry  # noqa: E402


@pytest.fixture
def engine() -> ScriptEngine:
    return ScriptEngine()


@pytest.fixture
def registry() -> FormatRegistry:
    return FormatRegistry()


@pytest.fixture
def sample_map() -> Map:
    cells = np.arange(12, dtype=np.uint32).reshape(3, 4)
    return Map(
        width=4,
        height=3,
        tile_width=16,
        tile_height=16,
        layers=[TileLayer(name="ground", cells=cells)],
        properties={"author": "test"},
    )
