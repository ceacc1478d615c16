from typing import Generic, Iterator, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")

EMPTY = -1


class RingBuffer(Generic[T]):
    """Fixed capacity circular buffer.

    Once full, every push overwrites the oldest element, so the buffer always
    holds the ``capacity`` most recent items. Only the oldest element can be
    removed (``pop`` / ``remove``); this is not a general purpose deque.

    Args:
        capacity: Number of slots. Fixed for the lifetime of the buffer.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")

        self._capacity = capacity
        self._slots: List[Optional[T]] = [None] * capacity
        self._head = EMPTY
        self._tail = EMPTY
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def is_full(self) -> bool:
        return self._count == self._capacity

    def push(self, item: T) -> None:
        self._tail = self._advance(self._tail)
        self._slots[self._tail] = item

        if self._count < self._capacity:
            self._count += 1

        # first write, or the tail just overwrote the oldest slot
        if self._head == EMPTY or self._head == self._tail:
            self._head = self._advance(self._head)

    def pop(self) -> T:
        if self._count == 0:
            raise IndexError("pop from an empty RingBuffer")

        item = self._slots[self._head]
        self._slots[self._head] = None

        if self._head == self._tail:
            self._reset()
        else:
            self._head = self._advance(self._head)
            self._count -= 1

        return item  # type: ignore[return-value]

    def remove(self, item: T) -> bool:
        """Pop the oldest element if it equals ``item``.

        Interior elements cannot be removed.
        """
        if self._count == 0:
            return False

        if self._slots[self._head] == item:
            self.pop()
            return True
        return False

    def clear(self) -> None:
        self._slots = [None] * self._capacity
        self._reset()

    def copy_to(self, array: MutableSequence[T], start: int = 0) -> None:
        i = start
        for item in self:
            array[i] = item
            i += 1

    def __iter__(self) -> Iterator[T]:
        if self._count == 0:
            return

        i = self._head
        for _ in range(self._count):
            yield self._slots[i]  # type: ignore[misc]
            i = self._advance(i)

    def __contains__(self, item: object) -> bool:
        return any(element == item for element in self)

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return f"Count: {self._count} " + ",".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self._capacity}, items={list(self)!r})"

    def _advance(self, i: int) -> int:
        return (i + 1) % self._capacity

    def _reset(self) -> None:
        self._head = EMPTY
        self._tail = EMPTY
        self._count = 0
