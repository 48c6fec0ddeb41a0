# src/circbuf/core/buffer.py
from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from circbuf.core.errors import IndexOutOfRange, InvalidArgument
from circbuf.core.log import get as get_logger

T = TypeVar("T")

BOUNDS_CAPACITY = "capacity"
BOUNDS_SIZE = "size"
BOUNDS_POLICIES = (BOUNDS_CAPACITY, BOUNDS_SIZE)


class RingBuffer(Generic[T]):
    """
    Fixed-capacity FIFO that overwrites the oldest element once full.

    - put() never fails; after `capacity` writes the write index wraps and
      the sticky full flag is set until clear()
    - at()/put_at() index relative to the oldest element (negatives count
      back from the newest)
    - iteration yields oldest -> newest

    Not thread-safe: guard every call with one external lock if shared.
    """

    def __init__(self, capacity: int, *, bounds: str = BOUNDS_CAPACITY, name: str = "ring"):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgument(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 2:
            raise InvalidArgument(f"capacity must be at least 2, got {capacity}")
        if bounds not in BOUNDS_POLICIES:
            raise InvalidArgument(f"bounds must be one of {BOUNDS_POLICIES}, got {bounds!r}")

        self._capacity = capacity
        self._bounds = bounds
        self.name = name
        self._buf: List[Optional[T]] = [None] * capacity
        self._write_index = 0
        self._full = False
        self.l = get_logger(f"circbuf.{name}")
        self.l.debug("ring created capacity=%d bounds=%s", capacity, bounds)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def bounds(self) -> str:
        return self._bounds

    # -------------------- state --------------------
    def is_empty(self) -> bool:
        return not self._full and self._write_index == 0

    def is_full(self) -> bool:
        return self._full

    def size(self) -> int:
        """Live element count: capacity once wrapped, else the write index."""
        return self._capacity if self._full else self._write_index

    # -------------------- writes --------------------
    def put(self, value: T) -> RingBuffer[T]:
        self._buf[self._write_index] = value
        self._write_index += 1
        if self._write_index >= self._capacity:
            self._write_index = 0
            if not self._full:
                self.l.debug("ring wrapped capacity=%d", self._capacity)
            self._full = True
        return self

    def put_at(self, value: T, index: int) -> RingBuffer[T]:
        """Overwrite the element at `index` in place (write index untouched)."""
        self._buf[self._slot(index)] = value
        return self

    def clear(self) -> RingBuffer[T]:
        """Reset to empty. Old values stay in storage until overwritten."""
        self._write_index = 0
        self._full = False
        self.l.debug("ring cleared")
        return self

    # -------------------- reads --------------------
    def at(self, index: int) -> T:
        return self._buf[self._slot(index)]  # type: ignore[return-value]

    def _slot(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be an int, got {type(index).__name__}")

        limit = self._capacity if self._bounds == BOUNDS_CAPACITY else self.size()
        if abs(index) > limit:
            raise IndexOutOfRange(f"index {index} out of bounds (limit={limit})")

        if index < 0:
            index = self.size() + index
        # storage only has `capacity` slots, so `limit` itself is never addressable
        if index < 0 or index >= limit:
            raise IndexOutOfRange(f"index {index} out of bounds (limit={limit})")

        if not self._full:
            return index
        # once wrapped, the write index points at the oldest element
        return (index + self._write_index) % self._capacity

    def __iter__(self) -> Iterator[T]:
        # capture state now so the iterator reflects the buffer at creation
        return self._iter_from(self._write_index, self._full)

    def _iter_from(self, write_index: int, full: bool) -> Iterator[T]:
        if not full:
            for i in range(write_index):
                yield self._buf[i]  # type: ignore[misc]
            return

        index = write_index
        for _ in range(self._capacity):
            yield self._buf[index]  # type: ignore[misc]
            index = (index + 1) % self._capacity

    def for_each(self, callback: Callable[[T, int], None]) -> None:
        """Call callback(value, i) for each element, oldest first, i from 0."""
        for i, item in enumerate(self):
            callback(item, i)

    def to_list(self) -> List[T]:
        return list(self)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"RingBuffer(name={self.name!r}, size={self.size()}/{self._capacity})"
