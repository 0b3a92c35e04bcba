"""Running distributions of simulation results."""

from __future__ import annotations

import math
from dataclasses import dataclass

from furysim.stats import find_cdf_quantile, get_two_sided_p_value

__all__ = ["Distribution", "BinomialDistribution"]


def _quantile_factor(p_value: float) -> float:
    return find_cdf_quantile(get_two_sided_p_value(p_value), 0.01)


@dataclass
class Distribution:
    """Online mean and variance of a stream of samples (Welford's algorithm)."""

    samples: int = 0
    mean: float = 0.0
    m2: float = 0.0
    last_sample: float = 0.0

    def add_sample(self, sample: float) -> None:
        """Add one sample."""
        self.last_sample = sample
        self.samples += 1
        delta = sample - self.mean
        self.mean += delta / self.samples
        self.m2 += delta * (sample - self.mean)

    def add(self, other: Distribution) -> None:
        """Merge the samples summarised by ``other`` into this distribution."""
        n = self.samples + other.samples
        if n == 0:
            return
        mean = (self.mean * self.samples + other.mean * other.samples) / n
        delta = self.mean - other.mean
        m2 = self.m2 + other.m2 + self.samples * other.samples * delta * delta / n
        self.samples = n
        self.mean = mean
        self.m2 = m2

    def variance(self) -> float:
        """Population variance of the samples."""
        return self.m2 / self.samples

    def std(self) -> float:
        """Population standard deviation of the samples."""
        return math.sqrt(self.m2 / self.samples)

    def var_of_the_mean(self) -> float:
        """Variance of the sample mean."""
        return self.m2 / (float(self.samples) * self.samples)

    def std_of_the_mean(self) -> float:
        """Standard deviation of the sample mean."""
        return math.sqrt(self.m2) / self.samples

    def confidence_interval(self, p_value: float) -> tuple[float, float]:
        """Symmetric interval holding a fraction ``p_value`` of the samples."""
        val = _quantile_factor(p_value)
        std = self.std()
        return self.mean - val * std, self.mean + val * std

    def confidence_interval_of_the_mean(self, p_value: float) -> tuple[float, float]:
        """Symmetric confidence interval of the mean at level ``p_value``."""
        val = _quantile_factor(p_value)
        std = self.std_of_the_mean()
        return self.mean - val * std, self.mean + val * std

    def __str__(self) -> str:
        return (
            f"mean = {self.mean:g}, std_of_the_mean = {self.std_of_the_mean():g}, "
            f"samples = {self.samples}"
        )


class BinomialDistribution:
    """Normal approximation of a binomial distribution."""

    def __init__(self, trials: float, success_rate: float) -> None:
        self.mean = trials * success_rate
        self.variance = self.mean * (1 - success_rate)

    def std(self) -> float:
        """Standard deviation."""
        return math.sqrt(self.variance)

    def confidence_interval(self, p_value: float) -> tuple[float, float]:
        """Symmetric interval; accurate only for success rates near one half."""
        val = _quantile_factor(p_value)
        std = self.std()
        return self.mean - val * std, self.mean + val * std

    def confidence_interval_width(self, p_value: float) -> float:
        """Width of :meth:`confidence_interval`."""
        low, high = self.confidence_interval(p_value)
        return high - low