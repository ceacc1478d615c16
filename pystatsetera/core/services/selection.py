import logging
from typing import Callable, MutableSequence, Optional, Tuple, TypeVar

from pystatsetera.adapters.numpy_random import default_random_source
from pystatsetera.core.ports.random_source import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

PivotChooser = Callable[[int, int], int]


def _check_bounds(a: MutableSequence, x: int, y: Optional[int]) -> Tuple[int, int]:
    if y is None:
        y = len(a) - 1
    if y >= len(a):
        raise ValueError(f"y must be smaller than the size of the array {len(a)}, got {y}")
    if x < 0:
        raise ValueError(f"x must not be negative, got {x}")
    if x > y:
        raise ValueError(f"x must not be larger than y, got x={x} y={y}")
    return x, y


def partition(a: MutableSequence[T], x: int = 0, y: Optional[int] = None) -> int:
    """
    Lomuto partition of the sub-array ``a[x..y]`` (both inclusive), in place.

    The pivot is the element at ``y``. Afterwards every element left of the
    pivot is <= pivot and every element right of it is > pivot. Elements
    outside ``[x, y]`` are never touched.

    Returns:
        The final index of the pivot.
    """
    x, y = _check_bounds(a, x, y)
    return _partition(a, x, y)


def _partition(a: MutableSequence[T], x: int, y: int) -> int:
    pivot = a[y]
    i = x - 1
    for j in range(x, y):
        if a[j] <= pivot:
            i += 1
            a[i], a[j] = a[j], a[i]

    a[i + 1], a[y] = a[y], a[i + 1]
    return i + 1


def select(
    select_pivot: PivotChooser,
    a: MutableSequence[T],
    k: int,
    x: int = 0,
    y: Optional[int] = None,
) -> T:
    """
    k-th smallest element (1-based) of ``a[x..y]``, quickselect style.

    ``select_pivot(x, y)`` picks the pivot index in ``[x, y]`` for each round.
    The sub-array is reordered in place. Expected O(n) with random pivots,
    O(n^2) in the worst case.
    """
    x, y = _check_bounds(a, x, y)
    if not 1 <= k <= y - x + 1:
        raise ValueError(f"k must be in [1, {y - x + 1}], got {k}")

    while x != y:
        chosen = select_pivot(x, y)
        a[chosen], a[y] = a[y], a[chosen]
        pivot_index = _partition(a, x, y)

        # rank of the pivot inside the current sub-array
        z = pivot_index - x + 1
        if k == z:
            return a[pivot_index]
        if k < z:
            y = pivot_index - 1
        else:
            k -= z
            x = pivot_index + 1

    return a[x]


def randomized_select(
    a: MutableSequence[T],
    k: int,
    x: int = 0,
    y: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> T:
    """``select`` with pivots drawn uniformly from ``rng``."""
    rng = rng or default_random_source()
    logger.debug("randomized select k=%d over [%d, %s]", k, x, y)
    # next_int excludes the upper bound
    return select(lambda s, e: rng.next_int(s, e + 1), a, k, x, y)
