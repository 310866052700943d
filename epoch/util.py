"""Utility constants and helpers for epoch.

Time unit constants represent durations in seconds.
"""

from datetime import datetime, timedelta, timezone

DAY = 86400

# Signed 64-bit domain of a Seconds value
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MICROSECONDS_PER_SECOND = 1_000_000
ONE_MICROSECOND = timedelta(microseconds=1)


def in_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX
