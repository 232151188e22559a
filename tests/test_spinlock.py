import threading
import time

import pytest

from stx.spinlock import LockGuard, LockStatus, SpinLock


def test_lock_status_values():
    lock = SpinLock()
    first = lock.try_lock()
    second = lock.try_lock()
    assert first == LockStatus.UNLOCKED
    assert first == 0
    assert second == LockStatus.LOCKED
    assert second == 1


def test_try_lock_on_free_lock_takes_it():
    lock = SpinLock()
    assert lock.try_lock() is LockStatus.UNLOCKED
    assert lock.try_lock() is LockStatus.LOCKED


def test_unlock_frees_lock():
    lock = SpinLock()
    lock.lock()
    assert lock.try_lock() is LockStatus.LOCKED
    lock.unlock()
    assert lock.try_lock() is LockStatus.UNLOCKED


def test_unlock_on_free_lock_is_harmless():
    lock = SpinLock()
    lock.unlock()
    assert lock.try_lock() is LockStatus.UNLOCKED


def test_context_manager_holds_and_releases():
    lock = SpinLock()
    with lock as held:
        assert held is lock
        assert lock.try_lock() is LockStatus.LOCKED
    assert lock.try_lock() is LockStatus.UNLOCKED


def test_context_manager_releases_on_exception():
    lock = SpinLock()
    with pytest.raises(ValueError):
        with lock:
            raise ValueError("boom")
    assert lock.try_lock() is LockStatus.UNLOCKED


def test_lock_guard_holds_and_releases():
    lock = SpinLock()
    with LockGuard(lock, "update") as resource:
        assert resource is lock
        assert lock.try_lock() is LockStatus.LOCKED
    assert lock.try_lock() is LockStatus.UNLOCKED


def test_lock_guard_releases_on_exception():
    lock = SpinLock()
    with pytest.raises(RuntimeError):
        with LockGuard(lock):
            raise RuntimeError("fail")
    assert lock.try_lock() is LockStatus.UNLOCKED


def test_lock_blocks_until_released():
    lock = SpinLock()
    lock.lock()
    acquired = threading.Event()

    def worker():
        lock.lock()
        acquired.set()
        lock.unlock()

    thread = threading.Thread(target=worker)
    thread.start()
    time.sleep(0.05)
    assert not acquired.is_set()
    assert lock.try_lock() is LockStatus.LOCKED
    lock.unlock()
    thread.join(timeout=5)
    assert acquired.is_set()
    assert lock.try_lock() is LockStatus.UNLOCKED


def test_mutual_exclusion_under_contention():
    lock = SpinLock()
    counter = {"value": 0}
    threads_count = 4
    iterations = 500

    def worker():
        for _ in range(iterations):
            with LockGuard(lock):
                current = counter["value"]
                time.sleep(0)
                counter["value"] = current + 1

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    assert counter["value"] == threads_count * iterations
    assert lock.try_lock() is LockStatus.UNLOCKED