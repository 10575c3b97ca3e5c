import itertools
import pytest

# every 15th byte, endpoints included
GRID_STEPS = tuple(range(0, 256, 15))


@pytest.fixture
def byte_grid():
    return list(itertools.product(GRID_STEPS, repeat=3))


@pytest.fixture
def unit_grid():
    steps = [i / 10 for i in range(11)]
    return [(h, s, x) for h in range(0, 360, 30) for s in steps for x in steps]
