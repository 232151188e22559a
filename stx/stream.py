"""Multi-producer, multi-consumer streams of values, with optional fixed memory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from stx.manager import Manager, ManagerHandle, noop_manager_handle
from stx.option import PanicError
from stx.spinlock import LockGuard, SpinLock

T = TypeVar("T")


class StreamError(Enum):
    """Why nothing could be popped from a stream."""

    PENDING = 0
    CLOSED = 1


class StreamPopError(Exception):
    """Raised when a stream has no value to give."""

    def __init__(self, error: StreamError) -> None:
        super().__init__(f"stream pop failed: {error.name.lower()}")
        self.error = error


class RingBufferError(Enum):
    """Why a value could not be placed in a ring buffer."""

    NONE = 0
    NO_MEMORY = 1


class RingBufferFullError(Exception):
    """Raised when a ring buffer has no free slot."""

    def __init__(self) -> None:
        super().__init__("ring buffer has no free slot")
        self.error = RingBufferError.NO_MEMORY


@dataclass(eq=False)
class StreamChunk(Generic[T]):
    """One value in a stream, linked to the value yielded after it."""

    manager: Manager
    data: T
    next: Optional["StreamChunk[T]"] = None


class StreamState(Generic[T]):
    """The shared linked list of chunks behind a stream and its generators.

    Chunks leave the stream in the order they entered it. Once closed, no
    more chunks are accepted, though those already inside can still be
    popped.
    """

    def __init__(self) -> None:
        self.lock = SpinLock()
        self.closed = False
        self.pop_it: Optional[StreamChunk[T]] = None
        self.yield_last: Optional[StreamChunk[T]] = None

    def generator_yield(self, chunk: StreamChunk[T], should_close: bool = False) -> None:
        """Append ``chunk``; if the stream is closed, release it instead."""
        with LockGuard(self.lock):
            was_added = not self.closed
            if was_added:
                if self.yield_last is None or self.pop_it is None:
                    self.yield_last = chunk
                else:
                    self.yield_last.next = chunk
                    self.yield_last = chunk
                if self.pop_it is None:
                    self.pop_it = self.yield_last
                self.closed = should_close

        if not was_added:
            chunk.manager.unref()

    def generator_close(self) -> None:
        """Stop the stream from accepting more chunks."""
        with LockGuard(self.lock):
            self.closed = True

    def is_closed(self) -> bool:
        """Return True if the stream accepts no more chunks."""
        with LockGuard(self.lock):
            return self.closed

    def pop(self) -> T:
        """Remove and return the oldest value.

        Raises StreamPopError with ``CLOSED`` if the stream is empty and
        closed, or ``PENDING`` if it is empty but more may come.
        """
        with LockGuard(self.lock):
            chunk = self.pop_it
            if chunk is not None:
                self.pop_it = chunk.next
            closed = self.closed

        if chunk is None:
            raise StreamPopError(StreamError.CLOSED if closed else StreamError.PENDING)

        item = chunk.data
        chunk.manager.unref()
        return item


class SmpRingBuffer(Generic[T]):
    """A fixed number of slots, filled and released in first-in first-out order."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.lock = SpinLock()
        self.capacity = capacity
        self._slots: List[Any] = [None] * capacity
        self.available_start = 0
        self.num_available = capacity
        self.next_destruct_index = 0

    def push(self, value: T) -> T:
        """Place ``value`` in the next free slot and return it.

        Raises RingBufferFullError if every slot is in use.
        """
        with LockGuard(self.lock):
            if self.num_available == 0:
                raise RingBufferFullError()
            selected = self.available_start
            self.available_start = (self.available_start + 1) % self.capacity
            self.num_available -= 1
        self._slots[selected] = value
        return value

    def pop(self) -> None:
        """Release the oldest occupied slot."""
        with LockGuard(self.lock):
            if self.num_available >= self.capacity:
                raise PanicError("pop on a ring buffer with no occupied slot")
            to_destroy = self.next_destruct_index
            self.next_destruct_index = (self.next_destruct_index + 1) % self.capacity

        self._slots[to_destroy] = None

        with LockGuard(self.lock):
            self.num_available += 1

    def __len__(self) -> int:
        """Number of occupied slots."""
        with LockGuard(self.lock):
            return self.capacity - self.num_available


class SmpRingBufferManagerHandle(ManagerHandle, Generic[T]):
    """Manages chunks stored in a ring buffer: releasing one frees its slot."""

    def __init__(self, capacity: int) -> None:
        self.buffer: SmpRingBuffer[T] = SmpRingBuffer(capacity)

    def ref(self) -> None:
        """Check that a chunk is live; slots need no extra reference."""
        if len(self.buffer) == 0:
            raise PanicError("ref on a ring buffer with no occupied slot")

    def unref(self) -> None:
        self.buffer.pop()


class Generator(Generic[T]):
    """The producing end of a stream."""

    def __init__(self, state: StreamState[T]) -> None:
        self.state = state

    def yield_value(self, value: T, should_close: bool = False) -> None:
        """Add ``value`` to the stream, closing it afterwards if asked."""
        chunk = StreamChunk(Manager(noop_manager_handle), value)
        self.state.generator_yield(chunk, should_close)

    def close(self) -> None:
        """Stop the stream from accepting more values."""
        self.state.generator_close()

    def fork(self) -> Generator[T]:
        """Return another generator feeding the same stream."""
        return Generator(self.state)

    def is_closed(self) -> bool:
        """Return True if the stream accepts no more values."""
        return self.state.is_closed()


class MemoryBackedGenerator(Generic[T]):
    """A generator whose chunks live in a fixed-capacity ring buffer."""

    def __init__(
        self,
        generator: Generator[T],
        ring_buffer_manager: SmpRingBufferManagerHandle[StreamChunk[T]],
    ) -> None:
        self.generator = generator
        self.ring_buffer_manager = ring_buffer_manager

    def yield_value(self, value: T, should_close: bool = False) -> None:
        """Add ``value`` to the stream.

        Raises RingBufferFullError if every slot holds a value not yet popped.
        """
        manager = Manager(self.ring_buffer_manager)
        chunk = self.ring_buffer_manager.buffer.push(StreamChunk(manager, value))
        self.generator.state.generator_yield(chunk, should_close)

    def is_closed(self) -> bool:
        """Return True if the stream accepts no more values."""
        return self.generator.is_closed()

    def close(self) -> None:
        """Stop the stream from accepting more values."""
        self.generator.close()

    def fork(self) -> Generator[T]:
        """Return a plain generator feeding the same stream."""
        return self.generator.fork()


class Stream(Generic[T]):
    """The consuming end of a stream."""

    def __init__(self, state: StreamState[T]) -> None:
        self.state = state

    def pop(self) -> T:
        """Remove and return the oldest value; see ``StreamState.pop``."""
        return self.state.pop()

    def fork(self) -> Stream[T]:
        """Return another consumer of the same stream."""
        return Stream(self.state)

    def is_closed(self) -> bool:
        """Return True if the stream accepts no more values."""
        return self.state.is_closed()

    def close(self) -> None:
        """Stop the stream from accepting more values."""
        self.state.generator_close()


def make_generator() -> Generator[Any]:
    """Return a generator over a new, empty stream."""
    return Generator(StreamState())


def make_stream(generator: Generator[T]) -> Stream[T]:
    """Return a consumer of the stream ``generator`` feeds."""
    return Stream(generator.state)


def make_memory_backed_generator(capacity: int) -> MemoryBackedGenerator[Any]:
    """Return a generator over a new stream whose chunks use ``capacity`` slots."""
    return MemoryBackedGenerator(
        Generator(StreamState()), SmpRingBufferManagerHandle(capacity)
    )