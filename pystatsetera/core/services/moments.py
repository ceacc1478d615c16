"""Streaming moment statistics over sequences of arbitrary records.

Every function takes a ``to_float`` projection mapping an element to a real
number (``float`` by default), so the same code works on plain numbers and
on record types such as ``lambda s: s.price``.
"""
from functools import reduce
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from pystatsetera.adapters.numpy_random import default_random_source
from pystatsetera.core.domain.moments import PowerSums
from pystatsetera.core.ports.random_source import RandomSource

T = TypeVar("T")

ToFloat = Callable[[T], float]


def power_sums(seq: Iterable[T], to_float: ToFloat = float) -> PowerSums:
    sums = PowerSums()
    for item in seq:
        sums.add(to_float(item))
    return sums


def sum_of_squares(seq: Iterable[T], to_float: ToFloat = float) -> Tuple[float, float, int]:
    """Returns (sum of x^2, sum of x, n) in a single pass."""
    sums = power_sums(seq, to_float)
    return sums.s2, sums.s1, sums.n


def sum_of_cubes(seq: Iterable[T], to_float: ToFloat = float) -> Tuple[float, float, float, int]:
    """Returns (sum of x^3, sum of x^2, sum of x, n) in a single pass."""
    sums = power_sums(seq, to_float)
    return sums.s3, sums.s2, sums.s1, sums.n


def sum_of_error_squared(seq: Iterable[T], to_float: ToFloat = float) -> Tuple[float, int]:
    """Returns (sum of (x - mean)^2, n)."""
    sums = power_sums(seq, to_float)
    return sums.sum_of_error_squared(), sums.n


def population_variance(seq: Iterable[T], to_float: ToFloat = float) -> float:
    return power_sums(seq, to_float).population_variance()


def sample_variance(seq: Iterable[T], to_float: ToFloat = float) -> float:
    return power_sums(seq, to_float).sample_variance()


def population_std_dev(seq: Iterable[T], to_float: ToFloat = float) -> float:
    return power_sums(seq, to_float).population_std_dev()


def sample_std_dev(seq: Iterable[T], to_float: ToFloat = float) -> float:
    return power_sums(seq, to_float).sample_std_dev()


def sample_skew(seq: Iterable[T], to_float: ToFloat = float) -> float:
    """Bias corrected sample skew, n / ((n-1)(n-2)) * sum(((x - mean) / s)^3)."""
    return power_sums(seq, to_float).sample_skew()


def ewma(seq: Iterable[T], decay: float, to_float: ToFloat = float) -> float:
    """
    Exponentially weighted moving average of the whole sequence.

    ``decay`` is the weight of the running average and ``1 - decay`` the
    weight of the current value. The fold is seeded with the first element.
    ``decay`` is used as given; keeping it in [0, 1] is up to the caller.
    """
    values = map(to_float, seq)
    try:
        first = next(values)
    except StopIteration:
        raise ValueError("ewma of an empty sequence")

    return reduce(lambda acc, x: (1 - decay) * x + decay * acc, values, first)


def mean_incremental(seq: Iterable[T], to_float: ToFloat = float) -> Iterator[float]:
    """Yields the running mean after each element. Lazy, single pass."""
    total = 0.0
    count = 0
    for item in seq:
        total += to_float(item)
        count += 1
        yield total / count


def resample_with_replacement(rng: Optional[RandomSource] = None) -> Callable[[Sequence[T]], List[T]]:
    """Resampler drawing ``len(samples)`` items uniformly with replacement."""
    rng = rng or default_random_source()

    def resample(samples: Sequence[T]) -> List[T]:
        n = len(samples)
        return [samples[rng.next_int(0, n)] for _ in range(n)]

    return resample


def bootstrap(
    samples: Iterable[T],
    n: int,
    resample: Optional[Callable[[List[T]], Sequence[T]]],
    statistic: Callable[[List[T]], float],
    rng: Optional[RandomSource] = None,
) -> Tuple[float, float]:
    """
    Bootstrap estimate of a statistic and its standard error.

    Args:
        samples: Original sample, materialised once.
        n: Number of resampling rounds.
        resample: Draws a resample from the original sample. ``None``
            samples with replacement from ``rng``.
        statistic: Computes the statistic from one resample.
        rng: Random source for the default resampler.

    Returns:
        (mean of the statistic, population standard deviation of the statistic)
    """
    if n < 1:
        raise ValueError(f"number of bootstrap rounds must be >= 1, got {n}")

    original = list(samples)
    resample = resample or resample_with_replacement(rng)

    estimates = np.array([statistic(list(resample(original))) for _ in range(n)], dtype=float)
    return float(estimates.mean()), population_std_dev(estimates)
