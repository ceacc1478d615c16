import logging
from typing import Optional

import numpy as np

from pystatsetera.core.ports.random_source import RandomSource

logger = logging.getLogger(__name__)


class NumpyRandomSource(RandomSource):
    """RandomSource backed by a numpy ``Generator`` (PCG64)."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        logger.debug("random source created with seed %s", seed)

    def next_double(self) -> float:
        return float(self._rng.random())

    def next_int(self, low: int, high: int) -> int:
        if low >= high:
            raise ValueError(f"empty range [{low}, {high})")
        return int(self._rng.integers(low, high))


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """Random source used whenever a caller does not inject one."""
    return NumpyRandomSource(seed)
