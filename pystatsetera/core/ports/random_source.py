from abc import ABC, abstractmethod
from typing import Iterator


class RandomSource(ABC):
    """
    Abstract source of uniform random numbers.

    Implementations must be seedable so that every consumer (randomized
    selection, Monte Carlo routines, bootstrap resampling) can be replayed.
    """

    @abstractmethod
    def next_double(self) -> float:
        """Return a uniform double in [0, 1)."""
        pass

    @abstractmethod
    def next_int(self, low: int, high: int) -> int:
        """Return a uniform integer in [low, high)."""
        pass

    def next_double_sequence(self) -> Iterator[float]:
        """Infinite, forward only sequence of uniform doubles in [0, 1)."""
        while True:
            yield self.next_double()
