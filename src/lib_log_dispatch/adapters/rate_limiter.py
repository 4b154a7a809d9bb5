"""Sliding-window rate limiting stage.

Drops records once a severity has produced ``max_records`` within ``interval``.
Buckets are keyed by severity and use the record timestamp, so the stage is
deterministic under a frozen clock.
"""

from __future__ import annotations

from collections import defaultdict, deque
from datetime import timedelta
from typing import Deque, Dict

from lib_log_dispatch.application.ports.stage import DROP, StageResult
from lib_log_dispatch.domain.levels import Severity
from lib_log_dispatch.domain.records import LogRecord


class SlidingWindowRateLimiter:
    """Limit records per severity within a sliding time window."""

    def __init__(self, *, max_records: int, interval: timedelta) -> None:
        if max_records <= 0:
            raise ValueError("max_records must be positive")
        if interval.total_seconds() <= 0:
            raise ValueError("interval must be positive")
        self._max_records = max_records
        self._interval = interval
        self._buckets: Dict[Severity, Deque[float]] = defaultdict(deque)

    def __call__(self, record: LogRecord) -> StageResult:
        """Return ``record`` while within quota, otherwise :data:`DROP`."""
        bucket = self._buckets[record.severity]
        now = record.timestamp.timestamp()
        cutoff = now - self._interval.total_seconds()
        while bucket and bucket[0] <= cutoff:
            bucket.popleft()
        if len(bucket) >= self._max_records:
            return DROP
        bucket.append(now)
        return record


__all__ = ["SlidingWindowRateLimiter"]
