"""Severity scale shared by every layer of the dispatch pipeline.

Purpose
-------
Offer a totally ordered set of severities so the dispatcher can gate records
with a single numeric comparison, plus presentation metadata for adapters.

Contents
--------
* :class:`Severity` integer enum with conversion helpers.
* :data:`LEVEL_LABELS` lookup table mapping severities to display labels.

System Role
-----------
Leaf of the domain layer; the dispatcher compares against it and console
backends use the label/icon helpers.
"""

from __future__ import annotations

import logging
from enum import IntEnum


class Severity(IntEnum):
    """Ordered severities; ``severity >= threshold`` is the only filter."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        """Return the human-readable label from :data:`LEVEL_LABELS`."""

        return LEVEL_LABELS[self]

    @property
    def severity(self) -> str:
        """Return the lowercase name for structured payloads."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon used by coloured consoles."""

        return _ICON_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this severity."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "Severity":
        """Return the :class:`Severity` whose value equals ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported severity numeric: {level}") from exc


LEVEL_LABELS: dict[Severity, str] = {
    Severity.DEBUG: "DEBUG",
    Severity.INFO: "INFO",
    Severity.WARN: "WARN",
    Severity.ERROR: "ERROR",
    Severity.FATAL: "FATAL",
}
"""Display labels keyed by severity."""

_ICON_TABLE = {
    Severity.DEBUG: "🐞",
    Severity.INFO: "ℹ",
    Severity.WARN: "⚠",
    Severity.ERROR: "✖",
    Severity.FATAL: "☠",
}

_PYTHON_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
}

_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}


def coerce_severity(value: "str | int | Severity") -> Severity:
    """Normalise a severity given as enum, name, or number.

    Examples
    --------
    >>> coerce_severity("warning") is Severity.WARN
    True
    >>> coerce_severity(3) is Severity.ERROR
    True
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, int):
        return Severity.from_numeric(value)
    text = value.strip()
    if text.isdigit():
        return Severity.from_numeric(int(text))
    return Severity.from_name(text)


__all__ = ["LEVEL_LABELS", "Severity", "coerce_severity"]
