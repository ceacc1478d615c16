import math
from dataclasses import dataclass

from pystatsetera.core.domain.ring_buffer import RingBuffer


@dataclass
class PowerSums:
    """
    Count plus sums of the first three powers of the observations.

    Every derived statistic is a pure function of ``(n, s1, s2, s3)``.
    The textbook power sum formulas are used on purpose: they lose
    precision when the mean is large compared to the spread (catastrophic
    cancellation), which can even drive the variance slightly negative.
    Degenerate sample sizes are not guarded: a sample variance with
    ``n == 1`` or a skew with ``n < 3`` raises ``ZeroDivisionError`` and a
    negative variance makes ``math.sqrt`` raise ``ValueError``.
    """

    n: int = 0
    s1: float = 0.0
    s2: float = 0.0
    s3: float = 0.0

    def add(self, x: float) -> None:
        square = x * x
        self.n += 1
        self.s1 += x
        self.s2 += square
        self.s3 += square * x

    def discard(self, x: float) -> None:
        """Undo a previous ``add(x)``."""
        square = x * x
        self.n -= 1
        self.s1 -= x
        self.s2 -= square
        self.s3 -= square * x

    def mean(self) -> float:
        return self.s1 / self.n

    def sum_of_error_squared(self) -> float:
        """Sum of (x - mean)^2."""
        return self.s2 - self.s1 * self.s1 / self.n

    def population_variance(self) -> float:
        return self.sum_of_error_squared() / self.n

    def sample_variance(self) -> float:
        return self.sum_of_error_squared() / (self.n - 1)

    def population_std_dev(self) -> float:
        return math.sqrt(self.population_variance())

    def sample_std_dev(self) -> float:
        return math.sqrt(self.sample_variance())

    def sample_skew(self) -> float:
        n = self.n
        s1, s2, s3 = self.s1, self.s2, self.s3

        # sum of (x - mean)^3 expanded in power sums
        sum_deviation_cubed = s3 - 3 * s1 * s2 / n + 2 * s1 * s1 * s1 / n / n
        std = self.sample_std_dev()
        return sum_deviation_cubed / std**3 * n / (n - 1) / (n - 2)


class RollingMoments:
    """Power sums over the last ``window`` values.

    The window lives in a ring buffer; once it is full, the value about to
    be overwritten is subtracted from the sums before the new one is added.
    """

    def __init__(self, window: int):
        if window < 1:
            raise ValueError(f"window must be >= 1, got {window}")
        self.window = window
        self.buf: RingBuffer[float] = RingBuffer(window)
        self.sums = PowerSums()

    def add(self, value: float) -> None:
        if self.buf.is_full:
            self.sums.discard(self.buf.pop())

        self.buf.push(value)
        self.sums.add(value)

    def mean(self) -> float:
        return self.sums.mean()

    def population_variance(self) -> float:
        return self.sums.population_variance()

    def sample_variance(self) -> float:
        return self.sums.sample_variance()

    def sample_std_dev(self) -> float:
        return self.sums.sample_std_dev()

    def sample_skew(self) -> float:
        return self.sums.sample_skew()

    def __len__(self) -> int:
        return len(self.buf)
