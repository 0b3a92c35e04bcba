"""Basic statistical helpers used to summarise simulation results."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = [
    "average",
    "variance",
    "standard_deviation",
    "sample_deviation",
    "add_standard_deviations",
    "update_mean",
    "update_variance",
    "get_two_sided_p_value",
    "normal_cdf",
    "find_cdf_quantile",
    "geometric_series",
]


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``."""
    return sum(values) / len(values)


def variance(values: Sequence[float], mean: float) -> float:
    """Population variance of ``values`` around ``mean``."""
    return sum((value - mean) ** 2 for value in values) / len(values)


def standard_deviation(values: Sequence[float], mean: float) -> float:
    """Population standard deviation of ``values`` around ``mean``."""
    return math.sqrt(variance(values, mean))


def sample_deviation(standard_dev: float, n_samples: int) -> float:
    """Standard deviation of the mean of ``n_samples`` samples."""
    return standard_dev / math.sqrt(n_samples)


def add_standard_deviations(std1: float, std2: float) -> float:
    """Combine two independent standard deviations."""
    return math.sqrt(std1 * std1 + std2 * std2)


def update_mean(mean: float, tot_samples: int, new_sample: float) -> float:
    """Mean after adding ``new_sample``; ``tot_samples`` counts the new sample."""
    return (mean * (tot_samples - 1) + new_sample) / tot_samples


def update_variance(variance: float, mean: float, tot_samples: int, new_sample: float) -> float:
    """Population variance after adding ``new_sample``; ``mean`` is the old mean."""
    new_mean = (mean * (tot_samples - 1) + new_sample) / tot_samples
    return ((tot_samples - 1) * variance + (new_sample - new_mean) * (new_sample - mean)) / tot_samples


def get_two_sided_p_value(p_value: float) -> float:
    """Upper quantile matching a two-sided confidence level."""
    return 1 - ((1 - p_value) / 2.0)


def normal_cdf(value: float) -> float:
    """Cumulative distribution function of the standard normal distribution."""
    return 0.5 * math.erfc(-value * math.sqrt(0.5))


def find_cdf_quantile(target_quantile: float, precision: float) -> float:
    """Smallest multiple of ``precision`` whose normal CDF reaches ``target_quantile``."""
    x = 0.0
    quantile = 0.5
    while quantile < target_quantile:
        x += precision
        quantile = normal_cdf(x)
    return x


def geometric_series(p: float) -> float:
    """Sum of the geometric series 1 + p + p**2 + ..."""
    return 1 / (1 - p)