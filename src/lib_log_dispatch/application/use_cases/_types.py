"""Shared type definitions for the dispatch use cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from lib_log_dispatch.application.ports.backend import DeliveryBackendPort
from lib_log_dispatch.application.ports.stage import Stage
from lib_log_dispatch.domain.levels import Severity

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]


@dataclass(frozen=True)
class DispatchConfig:
    """Configuration handed to :class:`Dispatcher` at construction time.

    Attributes
    ----------
    minimum_severity:
        Calls below this severity are discarded before a record is built.
    backends:
        Initial delivery backends; names must be unique.
    stages:
        Initial stage chain, executed in order.
    diagnostic_hook:
        Optional callback receiving ``(name, payload)`` for pipeline milestones
        such as backend failures.
    """

    minimum_severity: Severity = Severity.DEBUG
    backends: Sequence[DeliveryBackendPort] = ()
    stages: Sequence[Stage] = ()
    diagnostic_hook: DiagnosticHook = None


__all__ = ["DiagnosticHook", "DispatchConfig"]
