"""Regex-based context scrubbing stage.

Purpose
-------
Apply configurable regular expressions to the ``context`` of
:class:`LogRecord` objects so secrets are masked before any backend receives
the record.

Contents
--------
* :class:`RegexScrubber` - stage callable returning a redacted copy.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence, Set as AbstractSet
from typing import Any, Dict, Pattern

from lib_log_dispatch.domain.records import LogRecord


class RegexScrubber:
    """Redact sensitive context fields using regular expressions.

    Parameters
    ----------
    patterns:
        Mapping of field name → regex string; matching values are redacted.
    replacement:
        Token replacing matched values (defaults to ``"***"``).

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_dispatch.domain.levels import Severity
    >>> record = LogRecord('id', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), Severity.INFO, 'msg', context={'token': 'secret123'})
    >>> scrubber = RegexScrubber(patterns={'token': 'secret'})
    >>> scrubber(record).context['token']
    '***'
    """

    def __init__(self, *, patterns: Mapping[str, str], replacement: str = "***") -> None:
        self._patterns: Dict[str, Pattern[str]] = {key: re.compile(pattern) for key, pattern in patterns.items()}
        self._replacement = replacement

    def __call__(self, record: LogRecord) -> LogRecord:
        """Return ``record`` unchanged or a copy with matching fields redacted."""
        if not record.context:
            return record
        context = dict(record.context)
        for key, regex in self._patterns.items():
            if key not in context:
                continue
            context[key] = self._scrub_value(context[key], regex)
        return record.replace(context=context)

    def _scrub_value(self, value: Any, pattern: Pattern[str]) -> Any:
        """Recursively scrub ``value`` across mappings, sequences, sets, and bytes."""

        if isinstance(value, str):
            return self._replacement if pattern.search(value) else value
        if isinstance(value, bytes):
            text = value.decode("utf-8", errors="ignore")
            return self._replacement if pattern.search(text) else value
        if isinstance(value, Mapping):
            return {k: self._scrub_value(v, pattern) for k, v in value.items()}
        if isinstance(value, AbstractSet):
            return type(value)(self._scrub_value(item, pattern) for item in value)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            converted = [self._scrub_value(item, pattern) for item in value]
            if isinstance(value, tuple):
                return tuple(converted)
            return type(value)(converted)
        return value


__all__ = ["RegexScrubber"]
