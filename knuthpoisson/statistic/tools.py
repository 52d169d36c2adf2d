"""Useful tool for computing statistics of the simulated Poisson random variables

"""

import numpy as np
import scipy.stats


def mean(simulations: np.array) -> float:
    if simulations.shape[0] == 0:  # nothing to do here
        return float('nan')
    return float(np.mean(simulations))


def stddev(simulations: np.array) -> float:
    if simulations.shape[0] <= 1:  # not enough data for an unbiased stddev
        return 0.0
    return float(np.std(simulations, ddof=1))  # ddof=1 to have an unbiased estimator of the variance


def mc_stddev(simulations: np.array) -> float:
    if simulations.size == 0:
        return 0.0
    return stddev(simulations) / np.sqrt(simulations.size)


class Summary:
    """Aggregated statistics of a run: count, sum, mean, max and variance of the simulated values"""
    def __init__(self, count: int, total: int, mean: float, maximum: int, variance: float):
        self.count = count
        self.total = total
        self.mean = mean
        self.maximum = maximum
        self.variance = variance

    def __repr__(self) -> str:
        return 'Summary(count={}, total={}, mean={}, max={}, variance={})'.format(
            self.count, self.total, self.mean, self.maximum, self.variance)

    @classmethod
    def from_samples(cls, samples) -> 'Summary':
        """
        :param samples: simulated values
        :return: the summary, mean is nan and max is 0 when there is no sample
        """
        simulations = np.asarray(samples, dtype=np.int64).ravel()
        count = simulations.size
        total = int(simulations.sum())
        maximum = max(0, int(simulations.max())) if count else 0
        return cls(count=count, total=total, mean=mean(simulations), maximum=maximum,
                   variance=stddev(simulations)**2)


def chi_square_test(samples, lam: float, min_expected: float = 5.0) -> tuple[float, float]:
    """Pearson's chi-square goodness of fit test of the samples against the Poisson distribution

    The values 0, 1,..., k_max get their own bin and the upper tail (> k_max) is pooled into a last bin,
    k_max being the largest value such that the expected count of the tail is at least `min_expected`.

    :param samples: simulated Poisson random variables
    :param lam: intensity of the theoretical Poisson distribution
    :param min_expected: minimum expected count of the tail bin
    :return: the test statistic and its p-value
    """
    simulations = np.asarray(samples, dtype=np.int64).ravel()
    n = simulations.size
    distribution = scipy.stats.poisson(lam)
    if n * distribution.sf(0) < min_expected:
        raise ValueError('not enough samples to run the chi-square test')

    k_max = 0
    while n * distribution.sf(k_max + 1) >= min_expected:
        k_max += 1

    values = np.arange(k_max + 1)
    observed = np.append([np.count_nonzero(simulations == k) for k in values],
                         np.count_nonzero(simulations > k_max))
    expected = n * np.append(distribution.pmf(values), distribution.sf(k_max))
    expected *= n / expected.sum()  # chisquare requires the totals to match exactly

    res = scipy.stats.chisquare(f_obs=observed, f_exp=expected)
    return float(res.statistic), float(res.pvalue)
