"""Timing policy used by worker threads while they wait for tasks."""

from __future__ import annotations

from datetime import timedelta

STALL_TIMEOUT = timedelta(milliseconds=16)
CANCELATION_POLL_MIN_PERIOD = timedelta(milliseconds=32)

_MAX_SHIFT = 31


def bounded_exponential_backoff(iteration: int, maximum: timedelta) -> timedelta:
    """Return the sleep for an idle poll: 1ms, 2ms, 4ms, ... capped at ``maximum``.

    The exponent is clamped to the range 0..31, and the result to the range
    from zero to ``maximum``.
    """
    shift = min(max(iteration, 0), _MAX_SHIFT)
    delay = timedelta(milliseconds=1 << shift)
    return min(max(delay, timedelta(0)), maximum)