"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from pseudohilbert.config import Settings


# Order 1 curve: bottom-left, top-left, top-right, bottom-right
ORDER1_POINTS = [(0.25, 0.75), (0.25, 0.25), (0.75, 0.25), (0.75, 0.75)]

# A few off-grid points that are not symmetric about the center
SCATTER_POINTS = [(0.1, 0.2), (0.9, 0.35), (0.5, 0.5), (0.0, 1.0), (0.33, 0.71)]


@pytest.fixture
def order1_points() -> np.ndarray:
    return np.array(ORDER1_POINTS, dtype=np.float64)


@pytest.fixture
def scatter() -> np.ndarray:
    return np.array(SCATTER_POINTS, dtype=np.float64)


@pytest.fixture
def batch_settings(tmp_path) -> Settings:
    return Settings(output_dir=tmp_path, min_order=1, max_order=3, memory_limit_bytes=None)
