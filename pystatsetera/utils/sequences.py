from itertools import islice
from typing import Callable, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
A = TypeVar("A")


def accumulate(seq: Iterable[T], initial: A, fn: Callable[[A, T], A]) -> Iterator[A]:
    """
    Running fold over ``seq``.

    Yields the state after every element; ``initial`` itself is not emitted.
    The result is lazy and single pass, so it works on infinite inputs.

    Example:
        list(accumulate([1, 2, 3], 0, lambda acc, x: acc + x))  # [1, 3, 6]
    """
    acc = initial
    for item in seq:
        acc = fn(acc, item)
        yield acc


def take(seq: Iterable[T], n: int) -> List[T]:
    """First ``n`` items of a (possibly infinite) sequence."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return list(islice(seq, n))


def then(f: Callable[[T], U], g: Callable[[U], V]) -> Callable[[T], V]:
    """Compose so that ``f`` runs first: ``then(f, g)(x) == g(f(x))``."""
    return lambda x: g(f(x))


def pipe(value, *fns: Callable):
    """Feed ``value`` through ``fns`` left to right."""
    for fn in fns:
        value = fn(value)
    return value


def unzip(rows: Iterable[Tuple]) -> Tuple[List, ...]:
    """Split a sequence of equally sized tuples into one list per position."""
    rows = list(rows)
    if not rows:
        return ()
    return tuple(list(column) for column in zip(*rows))
