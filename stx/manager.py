"""Handles to polymorphic resource managers that track reference counts."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod


class ManagerHandle(ABC):
    """Interface to something that manages the lifetime of a resource.

    Whether the operations are thread-safe depends on the implementation.
    """

    @abstractmethod
    def ref(self) -> None:
        """Increase the strong reference count of the managed resource."""

    @abstractmethod
    def unref(self) -> None:
        """Decrease the reference count of the managed resource.

        Once the count reaches zero the resource, and the handle itself,
        need not remain valid.
        """


class _InertManagerHandle(ManagerHandle):
    """A handle whose requests never affect any resource.

    The requests it receives are only tallied, which helps when diagnosing
    code that keeps using a released or static resource.
    """

    def __init__(self) -> None:
        self._ref_requests = itertools.count()
        self._unref_requests = itertools.count()
        self.ref_requests = 0
        self.unref_requests = 0

    def ref(self) -> None:
        self.ref_requests = next(self._ref_requests) + 1

    def unref(self) -> None:
        self.unref_requests = next(self._unref_requests) + 1


class StaticStorageManagerHandle(_InertManagerHandle):
    """Manages a resource with static lifetime: nothing needs doing."""


class NoopManagerHandle(_InertManagerHandle):
    """A handle whose operations have no effect on the program's state."""


class ManagerStub(_InertManagerHandle):
    """Put in place of a handle once its resource has been released."""


static_storage_manager_handle = StaticStorageManagerHandle()
noop_manager_handle = NoopManagerHandle()
manager_stub_handle = ManagerStub()


class Manager:
    """Forwards reference counting to a ``ManagerHandle``.

    Copies share the same handle. ``take`` moves the handle into a new
    manager and leaves this one holding the stub, so it can no longer
    affect the resource.
    """

    __slots__ = ("handle",)

    def __init__(self, handle: ManagerHandle) -> None:
        self.handle = handle

    def ref(self) -> None:
        """Increase the reference count through the handle."""
        self.handle.ref()

    def unref(self) -> None:
        """Decrease the reference count through the handle."""
        self.handle.unref()

    def take(self) -> Manager:
        """Move the handle into a new manager, disarming this one."""
        moved = Manager(self.handle)
        self.handle = manager_stub_handle
        return moved

    def __copy__(self) -> Manager:
        return Manager(self.handle)

    def __repr__(self) -> str:
        return f"Manager({type(self.handle).__name__})"


static_storage_manager = Manager(static_storage_manager_handle)
noop_manager = Manager(noop_manager_handle)
manager_stub = Manager(manager_stub_handle)