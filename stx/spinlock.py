"""A lock for rarely contended, very short critical sections."""

from __future__ import annotations

import threading
import time
from enum import IntEnum
from typing import Any, Generic, Protocol, TypeVar


class LockStatus(IntEnum):
    """Whether a lock is held."""

    UNLOCKED = 0
    LOCKED = 1


class SpinLock:
    """A lock that busy-waits until it can be taken.

    Suited to guarding operations that finish almost at once.
    """

    __slots__ = ("_guard", "_status")

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._status = LockStatus.UNLOCKED

    def _compare_exchange(self) -> LockStatus:
        with self._guard:
            previous = self._status
            if previous is LockStatus.UNLOCKED:
                self._status = LockStatus.LOCKED
            return previous

    def lock(self) -> None:
        """Spin until the lock is taken."""
        while self._compare_exchange() is not LockStatus.UNLOCKED:
            time.sleep(0)

    def try_lock(self) -> LockStatus:
        """Try once to take the lock; return the status found before trying.

        ``UNLOCKED`` means the lock was free and is now held by the caller;
        ``LOCKED`` means it was already held and nothing changed.
        """
        return self._compare_exchange()

    def unlock(self) -> None:
        """Release the lock."""
        with self._guard:
            self._status = LockStatus.UNLOCKED

    def __enter__(self) -> SpinLock:
        self.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unlock()


class _Lockable(Protocol):
    def lock(self) -> None: ...

    def unlock(self) -> None: ...


R = TypeVar("R", bound=_Lockable)


class LockGuard(Generic[R]):
    """Holds ``resource`` locked for the extent of a ``with`` block."""

    __slots__ = ("_resource", "operation_name")

    def __init__(self, resource: R, operation_name: str = "") -> None:
        self._resource = resource
        self.operation_name = operation_name

    def __enter__(self) -> R:
        self._resource.lock()
        return self._resource

    def __exit__(self, *args: Any) -> None:
        self._resource.unlock()