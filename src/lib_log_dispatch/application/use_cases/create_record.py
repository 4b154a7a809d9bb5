"""Record factory stamping new records with time and identifier.

Purpose
-------
Keep record construction in one place so the dispatcher does not know how
timestamps or identifiers are produced, and tests can freeze both.

Contents
--------
* :class:`SystemClock` / :class:`UuidProvider` - default collaborators.
* :func:`create_record_factory` - returns the callable used by the dispatcher.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Mapping
from uuid import uuid4

from lib_log_dispatch.application.ports.time import ClockPort, IdProvider
from lib_log_dispatch.domain.levels import Severity
from lib_log_dispatch.domain.records import ErrorInfo, LogRecord

RecordFactory = Callable[..., LogRecord]


class SystemClock(ClockPort):
    """Concrete clock returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidProvider(IdProvider):
    """Generate random UUID4 identifiers encoded as lowercase hex."""

    def __call__(self) -> str:
        return uuid4().hex


def create_record_factory(
    *,
    clock: ClockPort | None = None,
    id_provider: IdProvider | None = None,
) -> RecordFactory:
    """Build the callable turning log call arguments into a :class:`LogRecord`.

    Parameters
    ----------
    clock:
        Source of the creation instant; defaults to :class:`SystemClock`.
    id_provider:
        Source of record identifiers; defaults to :class:`UuidProvider`.

    Examples
    --------
    >>> class FixedClock(ClockPort):
    ...     def now(self):
    ...         return datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> factory = create_record_factory(clock=FixedClock(), id_provider=lambda: 'rec-1')
    >>> record = factory(Severity.INFO, 'hello', context={'a': 1})
    >>> (record.record_id, record.severity.label, record.message, dict(record.context))
    ('rec-1', 'INFO', 'hello', {'a': 1})
    """

    active_clock: ClockPort = clock if clock is not None else SystemClock()
    next_id: IdProvider = id_provider if id_provider is not None else UuidProvider()

    def create_record(
        severity: Severity,
        message: str,
        error: BaseException | ErrorInfo | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> LogRecord:
        return LogRecord(
            record_id=next_id(),
            timestamp=active_clock.now(),
            severity=severity,
            message=message,
            error=_coerce_error(error),
            context=context,
        )

    return create_record


def _coerce_error(error: BaseException | ErrorInfo | None) -> ErrorInfo | None:
    if error is None or isinstance(error, ErrorInfo):
        return error
    return ErrorInfo.from_exception(error)


__all__ = ["RecordFactory", "SystemClock", "UuidProvider", "create_record_factory"]
