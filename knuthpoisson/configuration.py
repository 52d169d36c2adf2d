"""Configuration object for a run of the Poisson generator.

    :Example:
        - the number of random variables to generate
        - the intensity lambda
        - the seed for the random generator
        - the maximum number of uniform draws per Poisson random variable
"""

import logging
from typing import Optional

import numpy as np

from .distribution.univariate.poisson import Poisson
from .tools.parameter import positive, optional_strictly_positive


DEFAULT_NUMBERS = 100
DEFAULT_INTENSITY = 0.2
DEFAULT_SEED = 5979229


class Configuration:
    """Poisson generator run configuration"""

    lam = positive("lam")
    max_iterations = optional_strictly_positive("max_iterations")

    def __init__(self, num_numbers: int = DEFAULT_NUMBERS, lam: float = DEFAULT_INTENSITY,
                 seed: Optional[int] = DEFAULT_SEED, max_iterations: Optional[int] = None):
        """
        :param num_numbers: number of Poisson random variables to generate
        :param lam: intensity (mean and variance) of the Poisson distribution
        :param seed: seed for the random generator, the run is not reproducible if None
        :param max_iterations: maximum number of uniform draws per Poisson random variable (None for no limit)
        """
        if num_numbers < 0:
            logging.log(level=logging.WARNING, msg='negative number of random variables requested, '
                                                   'nothing will be generated')
        self.num_numbers = max(0, num_numbers)
        self.lam = lam
        self.seed = seed
        self.max_iterations = max_iterations

    def create_generator(self) -> np.random.Generator:
        """Random generator initialisation, nothing global is seeded"""
        return np.random.default_rng(self.seed)

    def create_poisson(self) -> Poisson:
        return Poisson(lam=self.lam, rng=self.create_generator(), max_iterations=self.max_iterations)
