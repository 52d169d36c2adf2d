"""Generator for standard uniform random variables

The generator is passed explicitly (or built from a seed) so that no global random state is involved.
Draws are random floats in the half-open interval [low, high)
see https://numpy.org/doc/stable/reference/random/generated/numpy.random.Generator.uniform.html
"""

from typing import Union

import numpy as np

from ..sampling import Sampling


class Uniform(Sampling):
    """Uniform random variate generator"""
    def __init__(self, rng: Union[np.random.Generator, int, None] = None, low: float = 0.0,
                 high: float = 1.0) -> None:
        """
        :param rng: numpy random generator, or a seed used to create one
        :param low: lower bound of the interval
        :param high: upper bound of the interval
        """
        super().__init__()
        if low >= high:
            raise ValueError('expected low < high')
        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)
        self.rng = rng
        self.low = low
        self.high = high

    def __call__(self) -> float:
        """one single draw, this is the uniform source used by the Poisson sampler"""
        self.sampling_cost += 1
        return float(self.rng.uniform(low=self.low, high=self.high))

    def sample(self, size: int = 1) -> np.array:
        self.sampling_cost += size
        return self.rng.uniform(low=self.low, high=self.high, size=size)
