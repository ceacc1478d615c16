from typing import Generic, Iterable, Iterator, NamedTuple, TypeVar

from pystatsetera.core.domain.ring_buffer import RingBuffer

T = TypeVar("T")


class LagPair(NamedTuple, Generic[T]):
    lagged: T
    current: T


def lag(seq: Iterable[T], lag: int) -> Iterator[LagPair[T]]:
    """
    Pair every element with the one ``lag`` steps before it.

    ``[1, 3, 4, 8, 10]`` with lag 2 gives ``(1, 4), (3, 8), (4, 10)``.
    The returned iterator is lazy and single pass; only ``lag`` items are
    held in memory at any time.

    Raises:
        ValueError: if ``lag`` is not strictly positive. Raised on call,
            before the input is touched.
    """
    if lag <= 0:
        raise ValueError(f"lag must be strictly positive, got {lag}")
    return _lag_pairs(seq, lag)


def _lag_pairs(seq: Iterable[T], lag: int) -> Iterator[LagPair[T]]:
    buffer: RingBuffer[T] = RingBuffer(lag)

    for current in seq:
        if buffer.is_full:
            lagged = buffer.pop()
            buffer.push(current)
            yield LagPair(lagged, current)
        else:
            buffer.push(current)
