"""
Time source for auction windows and bid timestamps.
"""

import time


def now_ms() -> int:
    """Current time as integer unix milliseconds."""
    return int(time.time() * 1000)
