"""Error taxonomy raised by the dispatch pipeline.

Configuration errors are programmer mistakes in setup or teardown sequencing
and are raised synchronously to the caller of the management operation.
Delivery errors never reach application code; the dispatcher reports them on
its side channel instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .records import LogRecord


class LogDispatchError(Exception):
    """Base class for every error defined by this package."""


class ConfigurationError(LogDispatchError, RuntimeError):
    """Setup or teardown was sequenced incorrectly."""


class AlreadyInitializedError(ConfigurationError):
    """Raised when initialising while a dispatcher is already active."""

    def __init__(self) -> None:
        super().__init__(
            "lib_log_dispatch is already initialised; call get_active() to reuse it or reset() first",
        )


class NotInitializedError(ConfigurationError):
    """Raised when the active dispatcher is requested before initialisation."""

    def __init__(self) -> None:
        super().__init__("lib_log_dispatch.init() must be called before using the logging API")


class DuplicateBackendError(ConfigurationError):
    """Raised when a backend name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Backend with name {name!r} is already registered")
        self.name = name


class StageContractError(LogDispatchError, TypeError):
    """A stage returned something other than a record or the drop signal."""


class BackendDeliveryError(LogDispatchError):
    """A backend failed to deliver ``record``; the cause is chained."""

    def __init__(self, message: str, *, backend_name: str, record: "LogRecord") -> None:
        super().__init__(message)
        self.backend_name = backend_name
        self.record = record


__all__ = [
    "AlreadyInitializedError",
    "BackendDeliveryError",
    "ConfigurationError",
    "DuplicateBackendError",
    "LogDispatchError",
    "NotInitializedError",
    "StageContractError",
]
