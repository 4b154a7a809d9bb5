"""Stage merging static fields into every record's context."""

from __future__ import annotations

from typing import Any

from lib_log_dispatch.domain.records import LogRecord


class ContextEnricher:
    """Add ``fields`` to each record; values already set by the caller win.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_dispatch.domain.levels import Severity
    >>> record = LogRecord('id', datetime(2025, 1, 1, tzinfo=timezone.utc), Severity.INFO, 'msg', context={'user': 'u1'})
    >>> enriched = ContextEnricher(service='checkout', user='default')(record)
    >>> dict(enriched.context)
    {'service': 'checkout', 'user': 'u1'}
    """

    def __init__(self, **fields: Any) -> None:
        self._fields = dict(fields)

    def __call__(self, record: LogRecord) -> LogRecord:
        return record.replace(context={**self._fields, **(record.context or {})})


__all__ = ["ContextEnricher"]
