import math
from typing import Callable, Iterable, Tuple

import numpy as np


Band = Tuple[float, float, float]


class EmpiricalDistribution:
    """
    Empirical CDF of a fixed dataset with a DKW confidence band.

    Built once: the data is sorted and, for each distinct value ``v``, the
    number of observations ``<= v`` is stored. Queries are a binary search
    over the distinct values.

    Args:
        data: Observations. Must not be empty.
    """

    def __init__(self, data: Iterable[float]):
        arr = np.asarray(list(data), dtype=float)
        if arr.size == 0:
            raise ValueError("empirical distribution needs at least one observation")

        values, counts = np.unique(arr, return_counts=True)
        self._values = values
        self._cumulative = np.cumsum(counts)
        self._n = int(arr.size)

    @property
    def n(self) -> int:
        return self._n

    @property
    def values(self) -> np.ndarray:
        """Sorted distinct values."""
        return self._values.copy()

    def cdf(self, x: float) -> float:
        """Fraction of observations <= x."""
        if x < self._values[0]:
            return 0.0
        if x > self._values[-1]:
            return 1.0

        # largest distinct value <= x
        idx = int(np.searchsorted(self._values, x, side="right")) - 1
        return int(self._cumulative[idx]) / self._n

    def epsilon(self, alpha: float) -> float:
        """Half width of the band, sqrt(ln(2 / alpha) / (2n))."""
        if alpha <= 0 or alpha >= 2:
            raise ValueError(f"alpha must be in (0, 2), got {alpha}")
        return math.sqrt(math.log(2 / alpha) / self._n / 2)

    def cdf_with_band(self, x: float, alpha: float) -> Band:
        """
        Returns (p, lower, upper) for the point ``x``.

        ``p`` is ``cdf(x)``; lower and upper are ``p -/+ epsilon`` clipped to
        [0, 1]. With ``alpha = 0.05`` this is a 95% band.
        """
        e = self.epsilon(alpha)
        p = self.cdf(x)
        return p, max(p - e, 0.0), min(p + e, 1.0)

    def __call__(self, x: float, alpha: float) -> Band:
        return self.cdf_with_band(x, alpha)


def empirical_distribution_function(data: Iterable[float]) -> Callable[[float, float], Band]:
    """Callable ``F(x, alpha) -> (p, lower, upper)`` over ``data``."""
    return EmpiricalDistribution(data)
