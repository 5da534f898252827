'''
module sampling
statistical correction of rate-limited sampling
'''

import math
from typing import Sequence

import numpy as np


def calculateSamplingRatio(rate: int, count: int, metric_value: int) -> float:
    """
    Compute the unsampling ratio of one sample.

    Sampled events are modelled as a Poisson process with a mean spacing of
    `rate` metric units. An event of average size s is captured with
    probability 1 - exp(-s / rate); dividing by it de-biases the count and
    metric of call sites whose events are small compared to the rate.

    Args:
        rate: Sampling rate in metric units (0 or 1 disables correction)
        count: Number of captured events
        metric_value: Total metric of the captured events

    Returns:
        Multiplicative ratio, 1.0 when no correction applies or the
        average size is not positive
    """
    if rate <= 1 or count < 1:
        return 1.0

    size = float(metric_value) / float(count)
    if size <= 0.0:
        return 1.0
    return 1.0 / (1.0 - math.exp(-size / float(rate)))


def calculateSamplingRatios(rate: int, counts: Sequence[int],
                            metric_values: Sequence[int]) -> np.ndarray:
    """
    Vectorized calculateSamplingRatio over aligned count/metric columns.

    Entries with count < 1 or a non-positive metric get a ratio of 1.0, as
    does every entry when the rate is 0 or 1.
    """
    counts_arr = np.asarray(counts, dtype=np.float64)
    ratios = np.ones(counts_arr.shape[0], dtype=np.float64)
    if rate <= 1 or counts_arr.size == 0:
        return ratios

    metrics_arr = np.asarray(metric_values, dtype=np.float64)
    valid = (counts_arr >= 1) & (metrics_arr > 0)
    sizes = metrics_arr[valid] / counts_arr[valid]
    ratios[valid] = 1.0 / (1.0 - np.exp(-sizes / float(rate)))
    return ratios
