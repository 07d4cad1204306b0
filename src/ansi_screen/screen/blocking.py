"""Turn a non-blocking poll into a blocking wait."""

from __future__ import annotations

import math
import time
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

DEFAULT_INTERVAL = 0.05


def block_on(
    poll: Callable[[], Optional[T]],
    interval: float = DEFAULT_INTERVAL,
    timeout: Optional[float] = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> Optional[T]:
    """
    Call ``poll`` every ``interval`` seconds until it returns something.

    Returns the first non-None result, or None once ``timeout`` seconds
    have elapsed. ``timeout=None`` (or ``math.inf``) waits forever.
    The first poll happens immediately, before any sleep.
    """
    if interval <= 0:
        raise ValueError(f"Interval must be positive, got {interval}")
    if timeout is None:
        timeout = math.inf
    elif timeout < 0:
        raise ValueError(f"Timeout must not be negative, got {timeout}")

    start = clock()
    while True:
        result = poll()
        if result is not None:
            return result
        if clock() - start >= timeout:
            return None
        sleep(interval)
