import itertools

import pytest

from pystatsetera.utils.sequences import accumulate, pipe, take, then, unzip


def test_accumulate():
    assert list(accumulate([1, 2, 3, 4, 5], 0, lambda acc, x: acc + x)) == [1, 3, 6, 10, 15]
    assert list(accumulate([], 0, lambda acc, x: acc + x)) == []


def test_accumulate_infinite():
    running = accumulate(itertools.count(1), 1, lambda acc, x: acc * x)
    assert take(running, 5) == [1, 2, 6, 24, 120]


def test_take():
    assert take(itertools.count(), 3) == [0, 1, 2]
    assert take([1, 2], 5) == [1, 2]
    assert take([1, 2], 0) == []
    with pytest.raises(ValueError):
        take([1], -1)


def test_then():
    times6 = then(lambda d: d * 2, lambda d: d * 3)
    assert times6(100.0) == 600.0

    describe = then(len, str)
    assert describe("abc") == "3"


def test_pipe():
    assert pipe(3, lambda x: x + 1, lambda x: x * 10) == 40
    assert pipe("x") == "x"


def test_unzip():
    lagged, current = unzip([(1, 4), (3, 8), (4, 10)])
    assert lagged == [1, 3, 4]
    assert current == [4, 8, 10]

    a, b, c = unzip([(1, "a", 1.0), (2, "b", 2.0)])
    assert c == [1.0, 2.0]
    assert unzip([]) == ()
