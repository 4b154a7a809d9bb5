"""Utilities that normalise log records into template-friendly dictionaries.

Why
---
The console backend accepts ``str.format`` templates. Producing the payload in
one place keeps the placeholder set documented and stable.

Contents
--------
* :func:`build_format_payload` - generate placeholder values for a record.
* :data:`DEFAULT_TEMPLATE` - the line layout used when no template is given.
"""

from __future__ import annotations

from typing import Any

from lib_log_dispatch.domain.records import LogRecord

DEFAULT_TEMPLATE = "[{timestamp}] [{level}] {message}{error_part}{context_fields}"


def build_format_payload(record: LogRecord) -> dict[str, Any]:
    """Return the mapping of placeholders exposed to format templates.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_dispatch.domain.levels import Severity
    >>> record = LogRecord('id', datetime(2025, 1, 1, tzinfo=timezone.utc), Severity.WARN, 'disk low', context={'free': '5%'})
    >>> DEFAULT_TEMPLATE.format(**build_format_payload(record))
    '[2025-01-01T00:00:00+00:00] [WARN] disk low free=5%'
    """

    context_dict = dict(record.context or {})
    context_fields = ""
    if context_dict:
        context_fields = " " + " ".join(f"{key}={value}" for key, value in sorted(context_dict.items()))

    error_part = ""
    if record.error is not None:
        error_part = f" | {record.error.message}"

    return {
        "timestamp": record.timestamp.isoformat(),
        "YYYY": f"{record.timestamp.year:04d}",
        "MM": f"{record.timestamp.month:02d}",
        "DD": f"{record.timestamp.day:02d}",
        "hh": f"{record.timestamp.hour:02d}",
        "mm": f"{record.timestamp.minute:02d}",
        "ss": f"{record.timestamp.second:02d}",
        "level": record.severity.label,
        "level_name": record.severity.name,
        "level_icon": record.severity.icon,
        "record_id": record.record_id,
        "message": record.message,
        "context": context_dict,
        "context_fields": context_fields,
        "error_name": record.error.name if record.error is not None else "",
        "error_message": record.error.message if record.error is not None else "",
        "error_part": error_part,
    }


__all__ = ["DEFAULT_TEMPLATE", "build_format_payload"]
