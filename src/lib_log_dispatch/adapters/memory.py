"""Ring buffer backend retaining the most recent records in memory.

Purpose
-------
Provide in-process retention for recent records so operators and tests can
inspect what was delivered without relying on external sinks.

Contents
--------
* :class:`RingBufferBackend` with snapshot and JSON-lines export helpers.
"""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Deque, Iterator

from lib_log_dispatch.application.ports.backend import DeliveryBackendPort
from lib_log_dispatch.domain.records import LogRecord


class RingBufferBackend(DeliveryBackendPort):
    """Fixed-size buffer retaining the most recent delivered records."""

    def __init__(self, *, name: str = "memory", max_records: int = 1000) -> None:
        if max_records <= 0:
            raise ValueError("max_records must be positive")
        self.name = name
        self._max_records = max_records
        self._buffer: Deque[LogRecord] = deque(maxlen=max_records)

    @property
    def max_records(self) -> int:
        """Return the configured buffer size."""

        return self._max_records

    def send(self, record: LogRecord) -> None:
        """Append ``record``, evicting the oldest entry when full."""

        self._buffer.append(record)

    def snapshot(self) -> list[LogRecord]:
        """Return a copy of the current buffer state."""

        return list(self._buffer)

    def __iter__(self) -> Iterator[LogRecord]:
        return iter(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def clear(self) -> None:
        self._buffer.clear()

    def dump(self, path: Path) -> Path:
        """Write buffered records to ``path`` as newline-delimited JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            for record in self._buffer:
                fh.write(record.to_json())
                fh.write("\n")
        return path


__all__ = ["RingBufferBackend"]
