"""Use cases composing the dispatch pipeline."""

from __future__ import annotations

from ._types import DiagnosticHook, DispatchConfig
from .create_record import RecordFactory, SystemClock, UuidProvider, create_record_factory
from .dispatch import Dispatcher

__all__ = [
    "DiagnosticHook",
    "DispatchConfig",
    "Dispatcher",
    "RecordFactory",
    "SystemClock",
    "UuidProvider",
    "create_record_factory",
]
