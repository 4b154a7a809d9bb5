"""Runtime façade owning the process-wide dispatcher.

Purpose
-------
Expose a stable entry point (``init``, ``get_active``, ``reset``,
``shutdown``) that host applications use instead of wiring the inner layers
themselves.

Contents
--------
* ``init`` - composition root installing the active :class:`Dispatcher`.
* ``get_active`` / ``is_initialised`` / ``inspect_runtime`` - accessors.
* ``reset`` - test-only teardown without flushing.
* ``shutdown`` / ``shutdown_async`` - flush deliveries, close backends, reset.

System Role
-----------
Outer shell of the package. The single active dispatcher lives in a
:class:`LifecycleGuard` owned by this module; code that needs isolated
instances creates its own guard or :class:`Dispatcher` directly.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Iterable

from lib_log_dispatch.application.ports.backend import DeliveryBackendPort
from lib_log_dispatch.application.ports.stage import Stage
from lib_log_dispatch.application.use_cases._types import DiagnosticHook, DispatchConfig
from lib_log_dispatch.application.use_cases.dispatch import Dispatcher
from lib_log_dispatch.domain.errors import AlreadyInitializedError
from lib_log_dispatch.domain.levels import Severity

from ._settings import apply_env_overrides, build_dispatch_config
from ._state import LifecycleGuard

_GUARD = LifecycleGuard()


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active dispatcher."""

    minimum_severity: Severity
    backend_names: tuple[str, ...]
    stage_count: int
    pending_deliveries: int


def init(
    config: DispatchConfig | None = None,
    *,
    minimum_severity: str | int | Severity = Severity.DEBUG,
    backends: Iterable[DeliveryBackendPort] = (),
    stages: Iterable[Stage] = (),
    diagnostic_hook: DiagnosticHook = None,
) -> Dispatcher:
    """Build the dispatcher and install it as the active instance.

    Pass either a ready :class:`DispatchConfig` or the keyword options; the
    keywords are ignored when ``config`` is given. ``LOG_MINIMUM_SEVERITY``
    overrides the minimum severity in both cases.

    Raises
    ------
    AlreadyInitializedError
        When a dispatcher is already active; the existing one is left untouched.
    DuplicateBackendError
        When two backends share a name.
    ValueError
        When the minimum severity cannot be resolved.
    """

    if _GUARD.is_initialised():
        raise AlreadyInitializedError()
    if config is None:
        resolved = build_dispatch_config(
            minimum_severity=minimum_severity,
            backends=backends,
            stages=stages,
            diagnostic_hook=diagnostic_hook,
        )
    else:
        resolved = apply_env_overrides(config)
    return _GUARD.initialize(resolved)


def get_active() -> Dispatcher:
    """Return the active dispatcher; raise :class:`NotInitializedError` otherwise."""

    return _GUARD.get_active()


def is_initialised() -> bool:
    """Return ``True`` when :func:`init` has installed a dispatcher."""

    return _GUARD.is_initialised()


def reset() -> None:
    """Clear the active dispatcher without flushing; intended for test harnesses."""

    _GUARD.reset()


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the active dispatcher."""

    dispatcher = _GUARD.get_active()
    return RuntimeSnapshot(
        minimum_severity=dispatcher.minimum_severity,
        backend_names=tuple(backend.name for backend in dispatcher.backends),
        stage_count=len(dispatcher.stages),
        pending_deliveries=dispatcher.pending,
    )


def shutdown() -> None:
    """Flush deliveries, close backends, and clear the active dispatcher.

    Raises :class:`RuntimeError` when invoked inside a running loop to steer
    callers to :func:`shutdown_async`, and :class:`NotInitializedError` when
    nothing is active.
    """

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError(
            "lib_log_dispatch.shutdown() cannot run inside an active event loop; "
            "await lib_log_dispatch.shutdown_async() instead",
        )
    asyncio.run(shutdown_async())


async def shutdown_async() -> None:
    """Await in-flight deliveries, close backends, then reset the guard."""

    dispatcher = _GUARD.get_active()
    try:
        await dispatcher.aclose()
    finally:
        _GUARD.reset()


__all__ = [
    "LifecycleGuard",
    "RuntimeSnapshot",
    "get_active",
    "init",
    "inspect_runtime",
    "is_initialised",
    "reset",
    "shutdown",
    "shutdown_async",
]
