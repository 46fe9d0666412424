import os
import random
import sys
from typing import List

import pytest

_MY_DIR = os.path.realpath(os.path.dirname(__file__))
# Allow import of the test utilities packages
sys.path.insert(0, os.path.join(_MY_DIR, "helpers"))


@pytest.fixture(scope="session")
def variance_sample() -> List[float]:
    return [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


@pytest.fixture(scope="session")
def gaussian_sample() -> List[float]:
    rng = random.Random(1234)
    return [rng.gauss(100.0, 5.0) for _ in range(500)]


@pytest.fixture(scope="session")
def ill_conditioned_sample() -> List[float]:
    # every small term is below half an ulp of 1.0, so a naive running sum never moves
    return [1.0] + [1e-16] * 10000
