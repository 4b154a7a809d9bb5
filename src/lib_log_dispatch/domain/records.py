"""Immutable record describing one log occurrence.

Purpose
-------
Provide the value object that travels through the stage chain and reaches the
delivery backends. Records are never mutated; stages that change something
return a fresh copy.

Contents
--------
* :class:`ErrorInfo` - structured error payload (name, message, stack).
* :class:`LogRecord` - frozen dataclass with copy-on-write helpers.
* ``_ensure_aware`` - timestamp validation.
"""

from __future__ import annotations

import json
import traceback
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping

from .levels import Severity


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class ErrorInfo:
    """Structured error attached to ``error``/``fatal`` records.

    Attributes
    ----------
    name:
        Exception class name (``"ValueError"``).
    message:
        ``str(exc)`` of the original exception.
    stack:
        Formatted traceback text, ``None`` when the exception was never raised.
    exception:
        The original exception object, kept for identity checks only.
    """

    name: str
    message: str
    stack: str | None = None
    exception: BaseException | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorInfo":
        """Capture ``exc`` including its traceback when available.

        Examples
        --------
        >>> info = ErrorInfo.from_exception(ValueError("boom"))
        >>> (info.name, info.message, info.stack)
        ('ValueError', 'boom', None)
        """
        stack = None
        if exc.__traceback__ is not None:
            stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(name=type(exc).__name__, message=str(exc), stack=stack, exception=exc)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "message": self.message}
        if self.stack is not None:
            data["stack"] = self.stack
        return data


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable log record transported through the dispatch pipeline.

    Attributes
    ----------
    record_id:
        Identifier generated by the record factory.
    timestamp:
        Creation instant in timezone-aware UTC.
    severity:
        :class:`Severity` of the call that produced the record.
    message:
        Message passed by the caller.
    error:
        Optional :class:`ErrorInfo` for ``error``/``fatal`` calls.
    context:
        Optional read-only mapping of caller-supplied fields.
    """

    record_id: str
    timestamp: datetime
    severity: Severity
    message: str
    error: ErrorInfo | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        if not self.record_id:
            raise ValueError("record_id must not be empty")
        if self.context is not None:
            object.__setattr__(self, "context", MappingProxyType(dict(self.context)))

    def replace(self, **changes: Any) -> "LogRecord":
        """Return a copied record with ``changes`` applied."""

        return replace(self, **changes)

    def with_context(self, **fields: Any) -> "LogRecord":
        """Return a copy whose context is merged with ``fields``.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> record = LogRecord('id', datetime(2025, 1, 1, tzinfo=timezone.utc), Severity.INFO, 'msg')
        >>> dict(record.with_context(a=1).context)
        {'a': 1}
        >>> record.context is None
        True
        """
        merged = dict(self.context or {})
        merged.update(fields)
        return replace(self, context=merged)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the record with ISO8601 timestamps and severity labels."""

        data: dict[str, Any] = {
            "record_id": self.record_id,
            "timestamp": self.timestamp.isoformat(),
            "severity": self.severity.label,
            "message": self.message,
            "context": dict(self.context or {}),
        }
        if self.error is not None:
            data["error"] = self.error.to_dict()
        return data

    def to_json(self) -> str:
        """Serialise to JSON with sorted keys; unknown values fall back to ``str``."""

        return json.dumps(self.to_dict(), sort_keys=True, default=str)


__all__ = ["ErrorInfo", "LogRecord"]
