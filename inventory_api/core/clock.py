import time
from typing import Callable

Clock = Callable[[], int]


def system_clock() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


__all__ = ["Clock", "system_clock"]
