"""
Wall-clock source for lock timestamps.

Lock timestamps are epoch milliseconds. The ledger takes any zero-argument
callable returning milliseconds, so tests can drive time by hand.
"""

import time
from typing import Callable

Clock = Callable[[], int]


def system_clock() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000
