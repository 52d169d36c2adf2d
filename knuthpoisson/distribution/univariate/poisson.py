"""Generator for a Poisson random variable

Knuth's algorithm is used, it is meant for the small intensities of photon arrivals
"""

from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from ..sampling import Sampling
from ..univariate.poisson_impl.knuth import Knuth
from ..univariate.uniform import Uniform
from ...tools.parameter import positive, optional_strictly_positive


class Poisson(Sampling):
    """Poisson random variate"""

    lam = positive("lam")
    max_iterations = optional_strictly_positive("max_iterations")

    def __init__(self, lam: Union[int, float], rng: Union[np.random.Generator, int, None] = None,
                 max_iterations: Optional[int] = None):
        """
        :param lam: rate/intensity parameter
        :param rng: numpy random generator or seed feeding the uniform random variables
        :param max_iterations: maximum number of uniform draws per sample (no limit by default)
        """
        super().__init__()
        self.lam = lam
        self.max_iterations = max_iterations
        self.generator = Knuth(lam, uniform=Uniform(rng), max_iterations=max_iterations)

    def sample(self, size: int = 1) -> NDArray[np.int64]:
        return self.generator.sample(size=size)

    def cost(self):
        return self.generator.cost()

    def reset_sampling_cost(self):
        self.generator.reset_sampling_cost()

    def sample_one(self) -> int:
        return self.generator.sample_one()
