"""
Simple acceptance-rejectance algorithm for generating Poisson random variable by Donald Knuth

see https://en.wikipedia.org/wiki/Poisson_distribution#Generating_Poisson-distributed_random_variables

For the small intensities of photon-starved communications the algorithm usually draws a single uniform random
variable, so it is about as efficient as more sophisticated algorithms (e.g. inversion by sequential search).
"""

import logging
import math
from collections.abc import Callable
from typing import Optional

import numpy as np

from ..uniform import Uniform
from ...sampling import Sampling


LARGE_INTENSITY = 30.0


class IterationLimitError(RuntimeError):
    """Raised when the number of uniform draws of a single Poisson sample exceeds the allowed bound"""
    def __init__(self, threshold: float, max_iterations: int):
        super().__init__('no Poisson sample after {} uniform draws for the threshold L={}'.format(max_iterations,
                                                                                                    threshold))
        self.threshold = threshold
        self.max_iterations = max_iterations


def threshold(lam: float) -> float:
    """
    :param lam: rate/intensity parameter
    :return: the threshold L = exp(-lam) used by Knuth's algorithm
    """
    if not math.isfinite(lam) or lam < 0:
        raise ValueError('expected a positive and finite intensity')
    if lam > LARGE_INTENSITY:
        logging.log(level=logging.WARNING, msg='Knuth algorithm is inefficient for large intensities, '
                                               'lambda=' + str(lam))
    res = math.exp(-lam)
    if res == 0.0:
        logging.warning('exp(-lambda) underflows to 0 for lambda=' + str(lam) + ', the samples are biased')
    return res


def knuth(L: float, uniform_source: Callable[[], float], max_iterations: Optional[int] = None) -> int:
    """Generate one Poisson random variable

    :param L: threshold exp(-lambda) in (0, 1], the relation to lambda is not checked
    :param uniform_source: callable returning a fresh uniform draw in [0, 1] at each call
    :param max_iterations: maximum number of uniform draws, unbounded if None
    :return: the Poisson random variable
    """
    if max_iterations is not None and max_iterations <= 0:
        raise ValueError('expected a strictly positive number of iterations')

    k = -1
    p = 1.0
    while True:
        k += 1
        if max_iterations is not None and k >= max_iterations:
            raise IterationLimitError(threshold=L, max_iterations=max_iterations)
        p *= uniform_source()
        if p <= L:
            return k


class Knuth(Sampling):
    """Knuth algorithm for generating Poisson random variable"""
    def __init__(self, lam: float, uniform: Optional[Uniform] = None, max_iterations: Optional[int] = None):
        """
        :param lam: rate/intensity parameter
        :param uniform: uniform random generator, a fresh unseeded one is created if None
        :param max_iterations: maximum number of uniform draws per Poisson sample (None for no limit)
        """
        super().__init__()
        self.lam = lam
        self.max_iterations = max_iterations
        self._L = threshold(lam)
        self._U = uniform if uniform is not None else Uniform()

    @property
    def L(self) -> float:
        return self._L

    def cost(self):
        return self._U.cost()

    def reset_sampling_cost(self):
        self._U.reset_sampling_cost()

    def sample_one(self) -> int:
        return knuth(self._L, self._U, max_iterations=self.max_iterations)

    def sample(self, size: int = 1) -> np.array:
        res = np.array([self.sample_one() for _ in range(size)], dtype=np.int64)
        return res
