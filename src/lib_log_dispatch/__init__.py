"""Public package surface of the log dispatch pipeline.

Host applications import from here: the runtime façade (``init``,
``get_active``, ``reset``, ``shutdown``), the value objects, the stage and
backend contracts, and the bundled adapters.
"""

from __future__ import annotations

from .adapters import (
    CONSOLE_STYLE_THEMES,
    ContextEnricher,
    RegexScrubber,
    RichConsoleBackend,
    RingBufferBackend,
    SlidingWindowRateLimiter,
)
from .application.ports import DROP, DeliveryBackendPort, Drop, Stage, StageResult
from .application.use_cases import DispatchConfig, Dispatcher, create_record_factory
from .domain import (
    LEVEL_LABELS,
    AlreadyInitializedError,
    BackendDeliveryError,
    ConfigurationError,
    DuplicateBackendError,
    ErrorInfo,
    LogDispatchError,
    LogRecord,
    NotInitializedError,
    Severity,
    StageContractError,
)
from .lib_log_dispatch import i_should_fail, logdemo, summary_info
from .runtime import (
    LifecycleGuard,
    RuntimeSnapshot,
    get_active,
    init,
    inspect_runtime,
    is_initialised,
    reset,
    shutdown,
    shutdown_async,
)

__all__ = [
    "CONSOLE_STYLE_THEMES",
    "ContextEnricher",
    "DROP",
    "AlreadyInitializedError",
    "BackendDeliveryError",
    "ConfigurationError",
    "DeliveryBackendPort",
    "DispatchConfig",
    "Dispatcher",
    "Drop",
    "DuplicateBackendError",
    "ErrorInfo",
    "LEVEL_LABELS",
    "LifecycleGuard",
    "LogDispatchError",
    "LogRecord",
    "NotInitializedError",
    "RegexScrubber",
    "RichConsoleBackend",
    "RingBufferBackend",
    "RuntimeSnapshot",
    "Severity",
    "SlidingWindowRateLimiter",
    "Stage",
    "StageContractError",
    "StageResult",
    "create_record_factory",
    "get_active",
    "i_should_fail",
    "init",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "reset",
    "shutdown",
    "shutdown_async",
    "summary_info",
]
