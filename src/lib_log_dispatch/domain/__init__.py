"""Domain value objects and errors used by the dispatch pipeline."""

from __future__ import annotations

from .errors import (
    AlreadyInitializedError,
    BackendDeliveryError,
    ConfigurationError,
    DuplicateBackendError,
    LogDispatchError,
    NotInitializedError,
    StageContractError,
)
from .levels import LEVEL_LABELS, Severity, coerce_severity
from .records import ErrorInfo, LogRecord

__all__ = [
    "AlreadyInitializedError",
    "BackendDeliveryError",
    "ConfigurationError",
    "DuplicateBackendError",
    "ErrorInfo",
    "LEVEL_LABELS",
    "LogDispatchError",
    "LogRecord",
    "NotInitializedError",
    "Severity",
    "StageContractError",
    "coerce_severity",
]
