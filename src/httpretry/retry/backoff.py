"""
Backoff calculation between failed attempts.

The default policy is quadratic: ``unit * attempt ** 2`` seconds plus a
uniform jitter drawn in whole milliseconds from ``[0, jitter_ms)``.
"""

import random
from typing import Callable, Protocol

WaitTimeFunc = Callable[[int], float]

DEFAULT_UNIT = 0.5
DEFAULT_JITTER_MS = 1000


class RandomSource(Protocol):
    """The part of ``random.Random`` the backoff policy relies on."""

    def randrange(self, stop: int) -> int: ...


# Seeded once per process.
_rng = random.Random()


def calculate_backoff(
    attempt: int,
    *,
    unit: float = DEFAULT_UNIT,
    jitter_ms: int = DEFAULT_JITTER_MS,
    rng: RandomSource | None = None,
) -> float:
    """
    Calculate the wait before the next attempt.

    Args:
        attempt: One-based index of the attempt that just failed
        unit: Seconds multiplied by the squared attempt index
        jitter_ms: Exclusive upper bound of the random jitter, in milliseconds
        rng: Random source for the jitter (default: module-wide source)

    Returns:
        Delay in seconds with jitter applied
    """
    delay = unit * attempt**2

    if jitter_ms > 0:
        delay += (rng or _rng).randrange(jitter_ms) / 1000

    return max(0.0, delay)


def make_wait_time(
    rng: RandomSource | None = None,
    *,
    unit: float = DEFAULT_UNIT,
    jitter_ms: int = DEFAULT_JITTER_MS,
) -> WaitTimeFunc:
    """Build a wait-time policy bound to the given random source."""
    source = rng or _rng

    def wait_time(attempt: int) -> float:
        return calculate_backoff(attempt, unit=unit, jitter_ms=jitter_ms, rng=source)

    return wait_time


def default_wait_time(attempt: int) -> float:
    """Default policy: 0.5s * attempt**2 plus up to 1s of jitter."""
    return calculate_backoff(attempt)


def no_wait(attempt: int) -> float:
    """Policy that never waits. Useful in tests."""
    return 0.0
