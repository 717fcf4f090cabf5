"""
Conftest: shared grids for the pixel sorter tests.

1. Gray grids where every pixel's brightness equals its channel value
2. Seeded random RGBA frames
"""

import numpy as np
import pytest


def _make_gray_grid(values, dtype=np.uint8):
    """(H, W, 4) grid with R = G = B = value and opaque alpha."""
    values = np.asarray(values)
    if values.ndim == 1:
        values = values[np.newaxis, :]
    grid = np.empty(values.shape + (4,), dtype=dtype)
    grid[:, :, :3] = values[:, :, np.newaxis]
    grid[:, :, 3] = np.iinfo(dtype).max
    return grid


def _make_random_frame(h=24, w=32, channels=4, seed=42):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, (h, w, channels), dtype=np.uint8)


@pytest.fixture
def gray_grid():
    return _make_gray_grid


@pytest.fixture
def random_frame():
    return _make_random_frame


@pytest.fixture
def crafted_3x3(gray_grid):
    """Distinct brightness values, used to tell the two directions apart."""
    return gray_grid(np.array([[9, 1, 5], [2, 8, 3], [7, 4, 6]]) * 20)
