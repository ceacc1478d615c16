from itertools import islice
from typing import Callable, Iterator, Optional

from pystatsetera.adapters.numpy_random import default_random_source
from pystatsetera.core.ports.random_source import RandomSource
from pystatsetera.utils.sequences import accumulate


def naive_integrate(
    n: int,
    a: float,
    b: float,
    f: Callable[[float], float],
    rng: Optional[RandomSource] = None,
) -> float:
    """
    Monte Carlo estimate of the integral of ``f`` over [a, b].

    Averages ``f`` at ``n`` uniform points scaled to [a, b]. Note that the
    result is the mean value of ``f``; multiply by ``b - a`` for intervals
    that are not of unit length.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    rng = rng or default_random_source()
    points = (u * (b - a) + a for u in islice(rng.next_double_sequence(), n))

    return sum(f(x) for x in points) / n


def random_walk(
    threshold: float = 0.5,
    a: int = 1,
    b: int = -1,
    rng: Optional[RandomSource] = None,
) -> Iterator[int]:
    """
    Infinite path of a random walk starting at 0.

    Each step adds ``a`` with probability ``threshold`` and ``b`` otherwise.
    The start point itself is not emitted. Consume with ``take``.
    """
    if threshold < 0 or threshold > 1:
        raise ValueError(f"threshold probability must be in [0, 1], got {threshold}")

    rng = rng or default_random_source()
    return accumulate(
        rng.next_double_sequence(),
        0,
        lambda acc, u: acc + a if u <= threshold else acc + b,
    )


def linear_congruent(seed: int, range_: int, multiplier: int, increment: int) -> Iterator[int]:
    """
    Linear congruential sequence x <- (multiplier * x + increment) mod range_.

    Toy generator, useful for reproducible examples only.
    """
    if range_ < 1:
        raise ValueError(f"range must be >= 1, got {range_}")
    if seed < 0 or seed >= range_:
        raise ValueError(f"seed must be between 0 and {range_ - 1} inclusive")
    if multiplier < 1 or multiplier >= range_:
        raise ValueError(f"multiplier must be between 1 and {range_ - 1} inclusive")
    if increment < 0 or increment >= range_:
        raise ValueError(f"increment must be between 0 and {range_ - 1} inclusive")

    return _congruent(seed, range_, multiplier, increment)


def _congruent(x: int, range_: int, multiplier: int, increment: int) -> Iterator[int]:
    while True:
        x = (multiplier * x + increment) % range_
        yield x
