from __future__ import annotations

import pytest

from tile2048 import GridEngine


@pytest.fixture()
def engine() -> GridEngine:
    return GridEngine(seed=0)


@pytest.fixture()
def checkerboard() -> list[list[int]]:
    """A full board where no two neighbours are equal."""
    return [
        [2, 4, 2, 4],
        [4, 2, 4, 2],
        [2, 4, 2, 4],
        [4, 2, 4, 2],
    ]


@pytest.fixture()
def left_column() -> list[list[int]]:
    """Tiles stacked against the left wall; only a right move changes anything."""
    return [
        [2, 0, 0, 0],
        [4, 0, 0, 0],
        [2, 0, 0, 0],
        [4, 0, 0, 0],
    ]
