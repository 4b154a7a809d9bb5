"""Protocols describing the collaborators the dispatcher depends on."""

from __future__ import annotations

from .backend import DeliveryBackendPort
from .stage import DROP, Drop, Stage, StageResult, is_drop
from .time import ClockPort, IdProvider

__all__ = [
    "ClockPort",
    "DROP",
    "DeliveryBackendPort",
    "Drop",
    "IdProvider",
    "Stage",
    "StageResult",
    "is_drop",
]
