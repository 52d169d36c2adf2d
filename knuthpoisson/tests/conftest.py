"""Configuration file
"""

from itertools import repeat

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


@pytest.fixture(scope="session")
def data():
    val = {
        "lam": 0.2,
        "seed": 5979229,
        "mc_paths": 100_000,
    }
    return val


@pytest.fixture
def rng(data):
    return np.random.default_rng(data["seed"])


def constant_source(u: float):
    """uniform source always returning the same draw"""
    return repeat(u).__next__


def sequence_source(draws):
    """uniform source returning the given draws in order"""
    return iter(draws).__next__


class CountingSource:
    """uniform source wrapper counting the number of draws"""

    def __init__(self, source):
        self.source = source
        self.draws = 0

    def __call__(self):
        self.draws += 1
        return self.source()
