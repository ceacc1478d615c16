import numpy as np
import pytest

from pystatsetera.adapters.numpy_random import NumpyRandomSource
from pystatsetera.core.services.selection import partition, randomized_select, select


DATA = [2, 8, 7, 1, 3, 5, 6, 4]


# ------------------------------------------------------------
# partition
# ------------------------------------------------------------

def test_partition_whole_array():
    a = list(DATA)
    p = partition(a)

    assert p == 3
    assert a == [2, 1, 3, 4, 7, 5, 6, 8]


def test_partition_properties_on_random_sub_arrays():
    rng = np.random.default_rng(0)

    for _ in range(200):
        size = int(rng.integers(1, 30))
        a = list(rng.integers(-10, 10, size=size))
        x = int(rng.integers(0, size))
        y = int(rng.integers(x, size))
        before = list(a)

        p = partition(a, x, y)

        assert x <= p <= y
        assert all(v <= a[p] for v in a[x:p])
        assert all(v > a[p] for v in a[p + 1:y + 1])
        assert sorted(a[x:y + 1]) == sorted(before[x:y + 1])
        assert a[:x] == before[:x]
        assert a[y + 1:] == before[y + 1:]


def test_partition_numpy_array_in_place():
    a = np.array([5.0, 1.0, 4.0, 2.0, 3.0])
    p = partition(a, 1, 3)

    assert p == 2
    np.testing.assert_array_equal(a, [5.0, 1.0, 2.0, 4.0, 3.0])


@pytest.mark.parametrize("x, y", [(0, 8), (-1, 3), (4, 2), (0, 100)])
def test_partition_invalid_bounds(x, y):
    a = list(DATA)
    with pytest.raises(ValueError):
        partition(a, x, y)
    assert a == DATA


def test_partition_empty_array():
    with pytest.raises(ValueError):
        partition([])


# ------------------------------------------------------------
# select
# ------------------------------------------------------------

def test_select_with_last_element_pivot():
    for k in range(1, len(DATA) + 1):
        assert select(lambda x, y: y, list(DATA), k) == sorted(DATA)[k - 1]


def test_select_with_first_element_pivot():
    for k in range(1, len(DATA) + 1):
        assert select(lambda x, y: x, list(DATA), k) == sorted(DATA)[k - 1]


def test_select_sub_array():
    a = [100, 9, 3, 7, 1, -100]
    # k-th smallest of [9, 3, 7, 1]
    assert select(lambda x, y: y, list(a), 1, 1, 4) == 1
    assert select(lambda x, y: y, list(a), 3, 1, 4) == 7

    b = list(a)
    select(lambda x, y: (x + y) // 2, b, 2, 1, 4)
    assert b[0] == 100 and b[5] == -100


@pytest.mark.parametrize("k", [0, 9, -1])
def test_select_invalid_k(k):
    a = list(DATA)
    with pytest.raises(ValueError):
        select(lambda x, y: y, a, k)
    assert a == DATA


def test_select_single_element():
    assert select(lambda x, y: x, [42], 1) == 42


# ------------------------------------------------------------
# randomized_select
# ------------------------------------------------------------

def test_randomized_select():
    assert randomized_select(list(DATA), 4) == 4
    assert randomized_select(list(DATA), 5) == 5


def test_randomized_select_every_rank_repeatedly():
    expected = sorted(DATA)
    for trial in range(25):
        rng = NumpyRandomSource(trial)
        for k in range(1, len(DATA) + 1):
            assert randomized_select(list(DATA), k, rng=rng) == expected[k - 1]


def test_randomized_select_duplicates_and_floats():
    data = list(np.random.default_rng(9).integers(0, 5, size=101).astype(float))
    expected = sorted(data)
    for k in (1, 17, 51, 101):
        assert randomized_select(list(data), k, rng=NumpyRandomSource(k)) == expected[k - 1]


def test_randomized_select_is_reproducible_with_seed():
    a = list(np.random.default_rng(2).permutation(50))
    b = list(a)

    assert randomized_select(a, 20, rng=NumpyRandomSource(3)) == 19
    assert randomized_select(b, 20, rng=NumpyRandomSource(3)) == 19
    assert a == b
