"""Plot the empirical distribution of the simulated Poisson random variables against the theoretical one

"""

import matplotlib.pyplot as plt
import numpy as np
import scipy.stats


def plot_density(samples, lam: float, title: str = ''):
    """Plot the normalised histogram of the data with the Poisson probability mass function on top

    :param samples: simulated Poisson random variables
    :param lam: intensity of the theoretical Poisson distribution
    :param title: title of the figure
    :return: the matplotlib figure
    """
    simulations = np.asarray(samples, dtype=np.int64).ravel()
    k_max = int(simulations.max()) if simulations.size else 0
    values = np.arange(k_max + 2)

    fig, ax = plt.subplots(1, 1)
    frequencies = np.bincount(simulations, minlength=values.size) / max(simulations.size, 1)
    ax.bar(values, frequencies[:values.size], facecolor='green', alpha=0.40, label='simulations')
    ax.plot(values, scipy.stats.poisson.pmf(values, lam), 'ro', label='Poisson pmf')
    ax.set_xlabel('k')
    ax.set_ylabel('probability')
    ax.set_xticks(values)
    ax.legend()
    ax.set_title(title or r'$\lambda$ = {}'.format(lam))
    return fig
