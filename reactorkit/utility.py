"""Small numeric helpers: unsigned 32-bit decimal formatting and a timestamp counter."""

import operator
import time

U32_MAX = 0xFFFF_FFFF


def _check_u32(n):
    n = operator.index(n)
    if not 0 <= n <= U32_MAX:
        raise ValueError(f"{n} is not an unsigned 32-bit integer")
    return n


def u32_len(n):
    """Return the number of decimal digits needed to print ``n``."""
    return len(str(_check_u32(n)))


def u32_toa(n):
    """Return the decimal representation of the unsigned 32-bit integer ``n``."""
    return str(_check_u32(n))


def tsc():
    """Return a monotonically increasing high-resolution timestamp in nanoseconds."""
    return time.perf_counter_ns()